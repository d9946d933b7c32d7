"""Thin wrappers around the git queries a link needs."""

from __future__ import annotations

from pathlib import Path

from .process import ProcessResult, ProcessRunner

GIT = "git"


def run_git(runner: ProcessRunner, args: list[str], *, cwd: Path, git: str = GIT) -> ProcessResult:
    return runner.run(git, args, cwd)


def git_dir(runner: ProcessRunner, cwd: Path, *, git: str = GIT) -> ProcessResult:
    return run_git(runner, ["rev-parse", "--git-dir"], cwd=cwd, git=git)


def upstream(runner: ProcessRunner, cwd: Path, *, git: str = GIT) -> str:
    proc = run_git(
        runner,
        ["rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{upstream}"],
        cwd=cwd,
        git=git,
    )
    return proc.output.strip()


def remote_url(runner: ProcessRunner, cwd: Path, remote: str, *, git: str = GIT) -> str:
    proc = run_git(runner, ["config", "--get", f"remote.{remote}.url"], cwd=cwd, git=git)
    return proc.output.strip()


def show_prefix(runner: ProcessRunner, cwd: Path, *, git: str = GIT) -> str:
    proc = run_git(runner, ["rev-parse", "--show-prefix"], cwd=cwd, git=git)
    return proc.output


def head_commit(runner: ProcessRunner, cwd: Path, *, git: str = GIT) -> str:
    proc = run_git(runner, ["rev-parse", "HEAD"], cwd=cwd, git=git)
    return proc.output.strip()


def split_upstream(value: str) -> tuple[str, str] | None:
    """Split ``remote/branch`` on the first slash; branch names may contain more."""

    remote, sep, branch = value.partition("/")
    if not sep or not remote or not branch:
        return None
    return remote, branch


__all__ = [
    "GIT",
    "run_git",
    "git_dir",
    "upstream",
    "remote_url",
    "show_prefix",
    "head_commit",
    "split_upstream",
]
