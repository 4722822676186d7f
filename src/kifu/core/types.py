"""Board point type alias and coordinate helpers.

Points are ``(x, y)`` tuples, zero-based, with ``x`` the column counted from
the left edge and ``y`` the row counted from the top edge, which is the
orientation SGF uses::

    (0, 0) = top-left, (size - 1, size - 1) = bottom-right
"""

from __future__ import annotations

from typing import TypeAlias

Point: TypeAlias = tuple[int, int]

DEFAULT_BOARD_SIZE = 19
MAX_BOARD_SIZE = 52  # a–z then A–Z
LEGACY_PASS_VALUE = "tt"
LEGACY_PASS_BOARD_SIZE = 19

_COORD_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


def letter_index(ch: str) -> int:
    """Zero-based index of an SGF coordinate letter, or -1 if not a letter."""
    if len(ch) != 1:
        return -1
    return _COORD_ALPHABET.find(ch)


def index_letter(idx: int) -> str:
    """SGF coordinate letter for a zero-based axis index."""
    if not (0 <= idx < MAX_BOARD_SIZE):
        raise ValueError(f"Axis index out of range: {idx}")
    return _COORD_ALPHABET[idx]


def is_valid_board_size(size: int) -> bool:
    """Check whether ``size`` is an addressable square board size."""
    return 1 <= size <= MAX_BOARD_SIZE


def is_on_board(point: Point, board_size: int) -> bool:
    x, y = point
    return 0 <= x < board_size and 0 <= y < board_size


def point_label(point: Point, board_size: int) -> str:
    """Human label, e.g. ``(3, 3)`` on 19x19 → ``'d16'``.

    The column letter counts from ``a`` with no gaps and the row number counts
    up from the bottom edge.
    """
    x, y = point
    return f"{index_letter(x)}{board_size - y}"
