"""Map editor caret and selection state to a one-based line/column range."""

from __future__ import annotations

from bisect import bisect_right

from .exceptions import ValidationError
from .models import SelectionRange, TextPosition


def line_starts(text: str) -> list[int]:
    """Offsets at which each line of ``text`` begins."""

    starts = [0]
    index = text.find("\n")
    while index != -1:
        starts.append(index + 1)
        index = text.find("\n", index + 1)
    return starts


def line_of(starts: list[int], offset: int) -> int:
    """Zero-based number of the line containing ``offset``."""

    return bisect_right(starts, offset) - 1


def offset_of(text: str, line: int, column: int) -> int:
    """Character offset of a zero-based line/column pair in ``text``.

    Columns past the end of a line are clamped to the line end.
    """

    starts = line_starts(text)
    if line < 0 or line >= len(starts):
        raise ValidationError(f"Line {line + 1} is outside the document ({len(starts)} lines).")
    if column < 0:
        raise ValidationError(f"Column {column + 1} must be positive.")
    line_end = starts[line + 1] - 1 if line + 1 < len(starts) else len(text)
    return min(starts[line] + column, line_end)


def resolve_selection(
    text: str,
    caret: TextPosition,
    selection_start: int | None = None,
    selection_end: int | None = None,
) -> SelectionRange:
    """Return the range a link should point at.

    Without a selection the range is the caret line followed by the next
    line, with columns 1 and 1. With a selection, lines and columns are
    one-based and columns count characters from the start of their own line.
    """

    if selection_start is None or selection_end is None or selection_start == selection_end:
        line = caret.line + 1
        return SelectionRange(start_line=line, end_line=line + 1, empty=True)

    start, end = sorted((selection_start, selection_end))
    start = max(0, min(start, len(text)))
    end = max(0, min(end, len(text)))
    starts = line_starts(text)
    start_line = line_of(starts, start)
    end_line = line_of(starts, end)
    return SelectionRange(
        start_line=start_line + 1,
        end_line=end_line + 1,
        start_column=start - starts[start_line] + 1,
        end_column=end - starts[end_line] + 1,
    )


__all__ = ["line_starts", "line_of", "offset_of", "resolve_selection"]
