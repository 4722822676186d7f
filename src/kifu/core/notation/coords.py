"""SGF point decoding and encoding."""

from __future__ import annotations

from kifu.core.errors import CoordinateError
from kifu.core.types import (
    LEGACY_PASS_BOARD_SIZE,
    LEGACY_PASS_VALUE,
    Point,
    index_letter,
    is_on_board,
    letter_index,
)


def is_pass_value(value: str, board_size: int) -> bool:
    """Empty values always pass; ``tt`` passes only on 19x19."""
    if value == "":
        return True
    return value == LEGACY_PASS_VALUE and board_size == LEGACY_PASS_BOARD_SIZE


def decode_point(value: str, board_size: int) -> Point | None:
    """Decode an SGF point value, e.g. ``'pd'`` → ``(15, 3)``.

    Returns ``None`` for a pass.

    Raises:
        CoordinateError: If the value is not two coordinate letters or falls
            outside ``[0, board_size)`` on either axis.
    """
    if is_pass_value(value, board_size):
        return None
    if len(value) != 2:
        raise CoordinateError(f"Invalid SGF coordinate: {value!r}")

    x = letter_index(value[0])
    y = letter_index(value[1])
    if x < 0 or y < 0:
        raise CoordinateError(f"Invalid SGF coordinate: {value!r}")
    point = (x, y)
    if not is_on_board(point, board_size):
        raise CoordinateError(
            f"SGF coordinate {value!r} is outside a {board_size}x{board_size} board"
        )
    return point


def encode_point(point: Point | None, board_size: int) -> str:
    """Inverse of :func:`decode_point`; a pass encodes as ``''``."""
    if point is None:
        return ""
    if not is_on_board(point, board_size):
        raise CoordinateError(
            f"Point {point} is outside a {board_size}x{board_size} board"
        )
    x, y = point
    return index_letter(x) + index_letter(y)
