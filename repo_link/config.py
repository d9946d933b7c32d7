"""Configuration management."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from .git import GIT

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Application configuration."""

    git_executable: str = GIT
    github_ranges: bool = False

    def override(self, *, github_ranges: bool | None = None) -> "Settings":
        if github_ranges is None:
            return self
        return replace(self, github_ranges=github_ranges)


def load_settings() -> Settings:
    """Read settings from the environment."""

    return Settings(
        git_executable=os.getenv("REPO_LINK_GIT") or Settings.git_executable,
        github_ranges=_env_flag("REPO_LINK_GITHUB_RANGES"),
    )


def _env_flag(var: str) -> bool:
    return os.getenv(var, "").strip().lower() in _TRUTHY


__all__ = ["Settings", "load_settings"]
