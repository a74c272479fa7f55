"""Value types produced by the link parser.

All of them are created fresh on every scan and never shared across calls.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """0-based line/column position in a text."""

    line: int
    column: int

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


@dataclass(frozen=True, slots=True)
class Span:
    """Region between two positions; ``end`` sits just past the last character."""

    start: Position
    end: Position

    def contains(self, position: Position) -> bool:
        """End-inclusive containment, as editors treat a caret after the span."""
        after_start = (position.line, position.column) >= (self.start.line, self.start.column)
        before_end = (position.line, position.column) <= (self.end.line, self.end.column)
        return after_start and before_end

    def to_dict(self) -> dict[str, dict[str, int]]:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True, slots=True)
class LinkToken:
    """One ``[description](target)`` occurrence.

    ``start``/``end`` are character offsets into the scanned text.
    """

    description: str
    raw_target: str
    start: int
    end: int

    @property
    def range(self) -> tuple[int, int]:
        return self.start, self.end


@dataclass(frozen=True, slots=True)
class ParsedLink:
    """Target of a link: ``file_path`` is None for the current document."""

    file_path: str | None
    symbol_name: str


class LineIndex:
    """Offset -> (line, column) conversion for one text."""

    def __init__(self, text: str) -> None:
        self._starts = [0]
        for i, ch in enumerate(text):
            if ch == "\n":
                self._starts.append(i + 1)

    @property
    def line_count(self) -> int:
        return len(self._starts)

    def line_start(self, line: int) -> int:
        return self._starts[line]

    def position_at(self, offset: int) -> Position:
        line = bisect_right(self._starts, offset) - 1
        return Position(line, offset - self._starts[line])

    def span_of(self, token: LinkToken) -> Span:
        return Span(self.position_at(token.start), self.position_at(token.end))
