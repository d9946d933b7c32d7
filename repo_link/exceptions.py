"""Custom error hierarchy for repo-link."""

from __future__ import annotations


class RepoLinkError(RuntimeError):
    """Base error for everything that aborts a link command."""


class NoActiveFileError(RepoLinkError):
    """Raised when there is no document to link to."""

    def __init__(self) -> None:
        super().__init__("No file is open. Open a file and try again.")


class NotAGitRepositoryError(RepoLinkError):
    """Raised when the document does not live inside a git repository."""

    def __init__(self, directory: str) -> None:
        super().__init__(f"Not a git repository: {directory}")
        self.directory = directory


class NoUpstreamError(RepoLinkError):
    """Raised when the current branch has no upstream tracking ref."""

    def __init__(self, directory: str) -> None:
        super().__init__(
            "The current branch has no upstream. Push it with `git push -u` and try again."
        )
        self.directory = directory


class UnsupportedHostError(RepoLinkError):
    """Raised when the remote is neither a GitHub nor an Azure DevOps URL."""

    def __init__(self, remote_url: str) -> None:
        super().__init__(f"Unsupported remote host: {remote_url or '(no remote url)'}")
        self.remote_url = remote_url


class ProcessExecutionError(RepoLinkError):
    """Raised when a command could not be started at all."""

    def __init__(self, command: list[str], returncode: int, stderr: str | None = None):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr or ""
        message = f"Command failed (exit {returncode}): {' '.join(command)}"
        if self.stderr.strip():
            message = f"{message}\n{self.stderr.strip()}"
        super().__init__(message)


class ClipboardError(RepoLinkError):
    """Raised when the link could not be placed on the clipboard."""


class ValidationError(RepoLinkError):
    """Raised when user input fails validation."""


__all__ = [
    "RepoLinkError",
    "NoActiveFileError",
    "NotAGitRepositoryError",
    "NoUpstreamError",
    "UnsupportedHostError",
    "ProcessExecutionError",
    "ClipboardError",
    "ValidationError",
]
