"""Offset to line/column resolution."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Final

from htmlint.text.text import TextRange


@dataclass(frozen=True, slots=True, order=True)
class LineCol:
    """1-based line and column. Columns count characters from line start."""

    line: int
    column: int

    def __post_init__(self):
        if self.line < 1 or self.column < 1:
            raise ValueError("LineCol is 1-based; line and column must be >= 1")

    def shift_column(self, delta: int) -> "LineCol":
        return LineCol(self.line, self.column + delta)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


DOCUMENT_START: Final[LineCol] = LineCol(1, 1)


@dataclass(frozen=True, slots=True)
class Span:
    """Start/end pair of line/column positions."""

    start: LineCol
    end: LineCol

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError("Span invariant violated: end before start")

    @staticmethod
    def point(position: LineCol) -> "Span":
        return Span(position, position)


DOCUMENT_SPAN: Final[Span] = Span.point(DOCUMENT_START)


class LineIndex:
    """Line start table for one source text.

    Only `\\n` terminates a line; a `\\r` before it counts as a column.
    """

    __slots__ = ("_length", "_line_starts")

    def __init__(self, source: str) -> None:
        self._length = len(source)
        starts = [0]
        position = source.find("\n")
        while position >= 0:
            starts.append(position + 1)
            position = source.find("\n", position + 1)
        self._line_starts = tuple(starts)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_col(self, offset: int) -> LineCol:
        """Resolve a character offset; `len(source)` is a valid end offset."""
        if offset < 0 or offset > self._length:
            raise ValueError(f"Offset {offset} is outside the text (length {self._length})")
        line_index = bisect_right(self._line_starts, offset) - 1
        return LineCol(line_index + 1, offset - self._line_starts[line_index] + 1)

    def offset(self, position: LineCol) -> int:
        """Inverse of `line_col`."""
        if position.line > len(self._line_starts):
            raise ValueError(f"Line {position.line} is past the last line ({len(self._line_starts)})")
        line_start = self._line_starts[position.line - 1]
        if position.line < len(self._line_starts):
            # Column may land on the terminating newline, not past it.
            line_end = self._line_starts[position.line] - 1
        else:
            line_end = self._length
        offset = line_start + position.column - 1
        if offset > line_end:
            raise ValueError(f"Column {position.column} is past the end of line {position.line}")
        return offset

    def span(self, range: TextRange) -> Span:
        return Span(self.line_col(range.start), self.line_col(range.end))


def resolve_position(source: str, offset: int) -> LineCol:
    """One-off resolution; build a `LineIndex` when resolving many offsets."""
    return LineIndex(source).line_col(offset)
