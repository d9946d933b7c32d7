"""Resolve the git metadata a link is built from."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath

from . import git
from .exceptions import NoUpstreamError, NotAGitRepositoryError, ProcessExecutionError
from .links import detect_provider
from .models import FileLocation, Provider, RepositoryContext
from .process import ProcessRunner

logger = logging.getLogger(__name__)


def inspect_repository(
    directory: Path,
    runner: ProcessRunner,
    *,
    git_executable: str = git.GIT,
) -> RepositoryContext:
    """Query git in ``directory`` and return the resolved context.

    Raises:
        ProcessExecutionError: If git could not be started.
        NotAGitRepositoryError: If ``directory`` is not inside a repository.
        NoUpstreamError: If the current branch does not track a remote branch.
    """

    probe = git.git_dir(runner, directory, git=git_executable)
    if not probe.started:
        raise ProcessExecutionError(probe.command, probe.returncode, probe.stderr)
    if not probe.output.strip():
        raise NotAGitRepositoryError(str(directory))

    upstream = git.upstream(runner, directory, git=git_executable)
    parts = git.split_upstream(upstream) if upstream else None
    if parts is None:
        raise NoUpstreamError(str(directory))
    remote, branch = parts

    url = git.remote_url(runner, directory, remote, git=git_executable)
    prefix = git.show_prefix(runner, directory, git=git_executable)
    provider = detect_provider(url)
    commit = ""
    if provider is Provider.GITHUB:
        commit = git.head_commit(runner, directory, git=git_executable)

    context = RepositoryContext(
        root_detected=True,
        remote_name=remote,
        branch_name=branch,
        remote_url=url,
        path_prefix=prefix,
        head_commit=commit,
        provider=provider,
    )
    logger.debug("Resolved %s", context)
    return context


def locate_file(context: RepositoryContext, file_path: Path | str) -> FileLocation:
    """Join git's prefix for the file's directory with the file name."""

    name = PurePath(file_path).name
    return FileLocation(repo_relative_path=f"{context.path_prefix}{name}")


__all__ = ["inspect_repository", "locate_file"]
