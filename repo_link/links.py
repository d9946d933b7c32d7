"""Build provider-specific web links to a line of a file."""

from __future__ import annotations

import re
from typing import Callable

from .exceptions import UnsupportedHostError
from .models import Provider, SelectionRange

# Checked in order; the first provider with a matching substring wins.
PROVIDER_HOSTS: tuple[tuple[Provider, tuple[str, ...]], ...] = (
    (Provider.AZURE_DEVOPS, ("visualstudio.com", "dev.azure.com")),
    (Provider.GITHUB, ("github.com",)),
)

# Azure DevOps addresses a branch as "GB<name>" in the version query parameter.
AZURE_BRANCH_MARKER = "GB"

_GIT_SUFFIX_RE = re.compile(r"\.git$", re.IGNORECASE)
_SCP_LIKE_RE = re.compile(r"^(?:[^@/:]+@)?(?P<host>[^/:]+):(?P<path>(?!//).+)$")
_SSH_URL_RE = re.compile(r"^ssh://(?:[^@/]+@)?(?P<host>[^/:]+)(?::\d+)?/(?P<path>.+)$", re.IGNORECASE)
_AZURE_SSH_HOSTS = ("ssh.dev.azure.com", "vs-ssh.visualstudio.com")


def detect_provider(remote_url: str) -> Provider:
    lowered = remote_url.lower()
    for provider, hosts in PROVIDER_HOSTS:
        if any(host in lowered for host in hosts):
            return provider
    return Provider.UNSUPPORTED


def normalize_remote_url(remote_url: str) -> str:
    """Turn an SSH remote into the https URL a browser can open.

    https remotes are returned unchanged.

    >>> normalize_remote_url("git@github.com:acme/widgets.git")
    'https://github.com/acme/widgets.git'
    >>> normalize_remote_url("git@ssh.dev.azure.com:v3/org/project/repo")
    'https://dev.azure.com/org/project/_git/repo'
    """

    url = remote_url.strip()
    match = _SSH_URL_RE.match(url)
    if not match and "://" not in url:
        match = _SCP_LIKE_RE.match(url)
    if not match:
        return url
    host = match.group("host").lower()
    path = match.group("path").strip("/")
    if host in _AZURE_SSH_HOSTS:
        return _azure_ssh_to_https(host, path)
    return f"https://{host}/{path}"


def _azure_ssh_to_https(host: str, path: str) -> str:
    parts = path.split("/")
    if parts and parts[0] == "v3":
        parts = parts[1:]
    if len(parts) != 3:
        return f"https://{host}/{path}"
    org, project, repo = parts
    if host == "vs-ssh.visualstudio.com":
        return f"https://{org}.visualstudio.com/{project}/_git/{repo}"
    return f"https://dev.azure.com/{org}/{project}/_git/{repo}"


def strip_git_suffix(remote_url: str) -> str:
    """Remove exactly one trailing ``.git``, ignoring case."""

    return _GIT_SUFFIX_RE.sub("", remote_url, count=1)


def azure_devops_link(
    remote_url: str,
    branch: str,
    commit: str,
    path: str,
    selection: SelectionRange,
    *,
    github_ranges: bool = False,
) -> str:
    version = f"{AZURE_BRANCH_MARKER}{branch}"
    return (
        f"{remote_url}?path=/{path}&version={version}"
        f"&line={selection.start_line}&lineEnd={selection.end_line}"
        f"&lineStartColumn={selection.start_column}&lineEndColumn={selection.end_column}"
    )


def github_link(
    remote_url: str,
    branch: str,
    commit: str,
    path: str,
    selection: SelectionRange,
    *,
    github_ranges: bool = False,
) -> str:
    repo = strip_git_suffix(remote_url)
    fragment = f"L{selection.start_line}"
    if github_ranges and selection.is_multiline:
        fragment = f"{fragment}-L{selection.end_line}"
    return f"{repo}/blob/{commit}/{path}#{fragment}"


LinkFormatter = Callable[..., str]

FORMATTERS: dict[Provider, LinkFormatter] = {
    Provider.AZURE_DEVOPS: azure_devops_link,
    Provider.GITHUB: github_link,
}


def build_link(
    provider: Provider,
    remote_url: str,
    branch: str,
    commit: str,
    path: str,
    selection: SelectionRange,
    *,
    github_ranges: bool = False,
) -> str:
    """Return the web link for ``path`` at ``selection`` on ``provider``.

    Raises:
        UnsupportedHostError: If ``provider`` is :attr:`Provider.UNSUPPORTED`.
    """

    formatter = FORMATTERS.get(provider)
    if formatter is None:
        raise UnsupportedHostError(remote_url)
    path = path.replace("\\", "/").lstrip("/")
    return formatter(
        normalize_remote_url(remote_url),
        branch,
        commit,
        path,
        selection,
        github_ranges=github_ranges,
    )


__all__ = [
    "PROVIDER_HOSTS",
    "AZURE_BRANCH_MARKER",
    "FORMATTERS",
    "detect_provider",
    "normalize_remote_url",
    "strip_git_suffix",
    "azure_devops_link",
    "github_link",
    "build_link",
]
