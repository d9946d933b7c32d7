"""Typer-based CLI for repo-link."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer

from . import __version__
from .command import COPIED_MESSAGE, LinkCommand
from .config import load_settings
from .exceptions import ValidationError
from .host import ConsoleNotifier, FileDocumentSource, NullClipboard, PyperclipClipboard
from .models import TextPosition
from .process import SubprocessRunner

app = typer.Typer(
    help="Copy a GitHub or Azure DevOps link to a line of a file",
    add_completion=False,
)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def parse_position(value: str) -> TextPosition:
    """Parse a one-based ``LINE`` or ``LINE:COLUMN`` into a zero-based position."""

    line_text, _, column_text = value.partition(":")
    try:
        line = int(line_text)
        column = int(column_text) if column_text else 1
    except ValueError as exc:
        raise ValidationError(f"Expected LINE or LINE:COLUMN, got {value!r}.") from exc
    if line < 1 or column < 1:
        raise ValidationError(f"Line and column must be 1 or greater, got {value!r}.")
    return TextPosition(line - 1, column - 1)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"repo-link {__version__}")
        raise typer.Exit()


@app.command()
def main(
    file: Path = typer.Argument(..., help="File to link to.", exists=True, dir_okay=False),
    line: int = typer.Option(1, "--line", "-l", min=1, help="Caret line (1-based)."),
    column: int = typer.Option(1, "--column", "-c", min=1, help="Caret column (1-based)."),
    start: str | None = typer.Option(None, "--start", help="Selection start as LINE:COLUMN."),
    end: str | None = typer.Option(None, "--end", help="Selection end as LINE:COLUMN."),
    no_copy: bool = typer.Option(False, "--no-copy", help="Print the link without touching the clipboard."),
    github_ranges: bool | None = typer.Option(
        None,
        "--github-ranges/--no-github-ranges",
        help="Link multi-line selections on GitHub as #L<start>-L<end>.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the repo-link version and exit.",
    ),
) -> None:
    """Build a web link to FILE at the given line or selection and copy it.

    The link is printed to stdout; confirmation and errors go to stderr.
    """

    _ = version  # handled via callback
    configure_logging(verbose)

    if (start is None) != (end is None):
        raise typer.BadParameter("--start and --end must be given together.")
    try:
        selection = (parse_position(start), parse_position(end)) if start and end else None
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    command = LinkCommand(
        active_files=FileDocumentSource(
            path=file,
            caret=TextPosition(line - 1, column - 1),
            selection=selection,
        ),
        clipboard=NullClipboard() if no_copy else PyperclipClipboard(),
        notifier=ConsoleNotifier(),
        runner=SubprocessRunner(),
        settings=load_settings().override(github_ranges=github_ranges),
        success_message="Link ready." if no_copy else COPIED_MESSAGE,
    )
    link = asyncio.run(command.execute())
    if link is None:
        raise typer.Exit(1)
    typer.echo(link)


if __name__ == "__main__":
    app()
