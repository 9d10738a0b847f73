"""
Source Position Tracking
========================

Positions use 1-based lines. The column is 0 at the start of every line
and is incremented for each consumed character, so the first character of
a line sits at column 1.

Every read steps the column forward and every pushback steps it back. When
the dispatch loop consumes a newline it moves to the next line and resets
the column to 0. Continuation scanners may read a newline as lookahead,
but they always push it back before the dispatch loop sees it, so the
line only ever changes in one place.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """
    Immutable line/column snapshot attached to tokens and errors.

    Attributes:
        line: Line number (1-indexed)
        column: Column of the last consumed character (0 before any)
    """
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'line:column'."""
        return f"{self.line}:{self.column}"


class PositionTracker:
    """Mutable cursor position owned by a single Scanner."""

    def __init__(self) -> None:
        self._line = 1
        self._column = 0

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    def advance(self) -> None:
        """Account for one consumed character."""
        self._column += 1

    def retreat(self) -> None:
        """Undo the column step of a pushed back character."""
        self._column -= 1

    def newline(self) -> None:
        """Move to the start of the next line."""
        self._line += 1
        self._column = 0

    def snapshot(self) -> Position:
        return Position(self._line, self._column)
