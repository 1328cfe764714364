"""Exception hierarchy for puzzle data errors."""

from __future__ import annotations

from typing import Optional


class PuzzleError(Exception):
    """Base exception for malformed or misused puzzle data."""


class ParseError(PuzzleError, ValueError):
    """Raised when a tiles or clues document cannot be parsed.

    Carries the 1-based line number and the offending line so that callers
    can report exactly where the document went wrong.
    """

    def __init__(self, reason: str, line_no: Optional[int] = None, line: Optional[str] = None):
        self.reason = reason
        self.line_no = line_no
        self.line = line
        if line_no is None:
            msg = reason
        else:
            msg = f"line {line_no}: {reason} ({line!r})"
        super().__init__(msg)


class CapacityError(PuzzleError, ValueError):
    """Raised when a tile set would hold more tiles than a tile id can address."""


class EdgeCodeError(PuzzleError, ValueError):
    """Raised when a numeric edge code has no edge value."""


class OutOfRangeError(PuzzleError, IndexError):
    """Raised on access outside the valid bounds of a board or tile set."""


class BoardIndexError(OutOfRangeError):
    """Raised when a board coordinate lies outside the board's shape."""


class TileIndexError(OutOfRangeError):
    """Raised when a tile number is outside 1..len of its tile set."""


class ForeignTileIdError(OutOfRangeError):
    """Raised when a tile id is used with a tile set other than the one that issued it."""


class RotationIndexError(OutOfRangeError, ValueError):
    """Raised when a numeric rotation index is not in 0..3."""
