"""Host services the link command talks to, and their terminal implementations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import pyperclip
from rich.console import Console

from .exceptions import ClipboardError
from .models import TextPosition
from .selection import offset_of


@dataclass(frozen=True)
class ActiveDocument:
    """The focused file together with the editor's caret and selection."""

    path: Path
    text: str
    caret: TextPosition
    selection_start: int | None = None
    selection_end: int | None = None

    @property
    def directory(self) -> Path:
        return self.path.parent


class ActiveFileSource(Protocol):
    async def get_active_document(self) -> ActiveDocument | None:
        ...


class ClipboardSink(Protocol):
    def copy(self, text: str) -> None:
        ...


class NotificationSink(Protocol):
    async def show_message(self, message: str) -> None:
        ...

    async def show_error(self, message: str) -> None:
        ...


@dataclass
class FileDocumentSource:
    """Treats a file on disk as the active document."""

    path: Path | None
    caret: TextPosition = TextPosition(0, 0)
    selection: tuple[TextPosition, TextPosition] | None = None

    async def get_active_document(self) -> ActiveDocument | None:
        if self.path is None:
            return None
        path = self.path.expanduser().resolve()
        if not path.is_file():
            return None
        text = path.read_bytes().decode("utf-8", errors="replace")
        start = end = None
        if self.selection is not None:
            first, last = self.selection
            start = offset_of(text, first.line, first.column)
            end = offset_of(text, last.line, last.column)
        return ActiveDocument(
            path=path,
            text=text,
            caret=self.caret,
            selection_start=start,
            selection_end=end,
        )


class PyperclipClipboard:
    """Copies to the system clipboard."""

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"Could not copy to the clipboard: {exc}") from exc


class NullClipboard:
    """Leaves the clipboard alone; used with ``--no-copy``."""

    def copy(self, text: str) -> None:
        return None


class ConsoleNotifier:
    """Shows notifications on the terminal."""

    def __init__(self, console: Console | None = None, error_console: Console | None = None):
        self.console = console or Console(stderr=True)
        self.error_console = error_console or Console(stderr=True)

    async def show_message(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    async def show_error(self, message: str) -> None:
        self.error_console.print(f"[red]✗[/red] {message}", style="red")


__all__ = [
    "ActiveDocument",
    "ActiveFileSource",
    "ClipboardSink",
    "NotificationSink",
    "FileDocumentSource",
    "PyperclipClipboard",
    "NullClipboard",
    "ConsoleNotifier",
]
