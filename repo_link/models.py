"""Dataclasses shared across modules."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Provider(enum.Enum):
    """Remote hosts a link can be built for."""

    GITHUB = "github"
    AZURE_DEVOPS = "azure-devops"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class RepositoryContext:
    """Git metadata resolved for the directory of the active file."""

    root_detected: bool
    remote_name: str
    branch_name: str
    remote_url: str
    path_prefix: str
    head_commit: str
    provider: Provider

    @property
    def upstream(self) -> str:
        return f"{self.remote_name}/{self.branch_name}"


@dataclass(frozen=True)
class FileLocation:
    """A file path relative to the repository root, always using '/'."""

    repo_relative_path: str


@dataclass(frozen=True)
class TextPosition:
    """Zero-based line and column, as an editor reports its caret."""

    line: int
    column: int = 0


@dataclass(frozen=True)
class SelectionRange:
    """One-based line/column range ready to be placed in a link.

    An empty selection is reported as ``start_line`` to ``start_line + 1``
    with both columns at 1.
    """

    start_line: int
    end_line: int
    start_column: int = 1
    end_column: int = 1
    empty: bool = False

    @property
    def is_multiline(self) -> bool:
        return not self.empty and self.end_line > self.start_line
