"""Orchestrate one "copy link to line" command."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import Settings
from .exceptions import NoActiveFileError, RepoLinkError
from .host import ActiveFileSource, ClipboardSink, NotificationSink
from .links import build_link
from .process import ProcessRunner, SubprocessRunner
from .repo import inspect_repository, locate_file
from .selection import resolve_selection

logger = logging.getLogger(__name__)

COPIED_MESSAGE = "Link copied to clipboard."


@dataclass
class LinkCommand:
    active_files: ActiveFileSource
    clipboard: ClipboardSink
    notifier: NotificationSink
    runner: ProcessRunner = field(default_factory=SubprocessRunner)
    settings: Settings = field(default_factory=Settings)
    success_message: str = COPIED_MESSAGE

    async def execute(self) -> str | None:
        """Build the link for the active document and copy it.

        Returns the link, or ``None`` when the command was aborted. Every
        abort is reported through the notifier and leaves the clipboard
        untouched.
        """

        try:
            link = await self.build()
            self.clipboard.copy(link)
        except RepoLinkError as exc:
            logger.debug("Link command aborted: %s", exc)
            await self.notifier.show_error(str(exc))
            return None
        await self.notifier.show_message(self.success_message)
        return link

    async def build(self) -> str:
        document = await self.active_files.get_active_document()
        if document is None:
            raise NoActiveFileError()
        context = inspect_repository(
            document.directory,
            self.runner,
            git_executable=self.settings.git_executable,
        )
        location = locate_file(context, document.path)
        selection = resolve_selection(
            document.text,
            document.caret,
            document.selection_start,
            document.selection_end,
        )
        return build_link(
            context.provider,
            context.remote_url,
            context.branch_name,
            context.head_commit,
            location.repo_relative_path,
            selection,
            github_ranges=self.settings.github_ranges,
        )


__all__ = ["COPIED_MESSAGE", "LinkCommand"]
