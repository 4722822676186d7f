"""Error taxonomy for SGF parsing.

Every error is terminal for the parse call that raised it. All of them
derive from :class:`SgfError` (itself a :class:`ValueError`) so callers that
process batches can skip a bad record with a single ``except`` clause.
"""

from __future__ import annotations


class SgfError(ValueError):
    """Base class for all SGF parsing failures.

    Args:
        message: Human-readable description.
        offset: Character offset into the input where the problem was
            detected, when known.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)
        self.offset = offset


class LexError(SgfError):
    """Malformed token or unterminated property value."""


class SgfSyntaxError(SgfError):
    """Structurally invalid game-tree nesting."""

    def __init__(self, message: str, offset: int | None = None, expected: str = "") -> None:
        if expected:
            message = f"{message}; expected {expected}"
        super().__init__(message, offset)
        self.expected = expected


class CoordinateError(SgfError):
    """Coordinate value is malformed or outside the board."""


class InvalidSizeError(SgfError):
    """Declared board size is non-numeric or out of range."""


class AmbiguousMoveError(SgfError):
    """A single node declares both a black and a white move."""


class MultipleGamesError(SgfError):
    """Input contains more than one top-level game tree."""
