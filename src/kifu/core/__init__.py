"""Core domain layer — pure SGF parsing with zero external dependencies.

Quick start::

    from kifu.core import parse_sgf

    record = parse_sgf("(;SZ[9]PB[Alice]PW[Bob];B[ee];W[cc])")
    for move in record.moves:
        print(move.number, move.color, move.point)
"""

from kifu.core.enums import Color, Prop, TokenKind
from kifu.core.errors import (
    AmbiguousMoveError,
    CoordinateError,
    InvalidSizeError,
    LexError,
    MultipleGamesError,
    SgfError,
    SgfSyntaxError,
)
from kifu.core.notation import (
    GameInfo,
    GameRecord,
    GameTree,
    Move,
    ParseOptions,
    decode_point,
    parse_sgf,
    parse_sgf_tree,
)
from kifu.core.types import (
    DEFAULT_BOARD_SIZE,
    MAX_BOARD_SIZE,
    Point,
    point_label,
)

__all__ = [
    # Enums
    "Color",
    "Prop",
    "TokenKind",
    # Types / helpers
    "DEFAULT_BOARD_SIZE",
    "MAX_BOARD_SIZE",
    "Point",
    "point_label",
    # Errors
    "SgfError",
    "LexError",
    "SgfSyntaxError",
    "CoordinateError",
    "InvalidSizeError",
    "AmbiguousMoveError",
    "MultipleGamesError",
    # Records
    "GameInfo",
    "GameRecord",
    "GameTree",
    "Move",
    # Parsing
    "ParseOptions",
    "decode_point",
    "parse_sgf",
    "parse_sgf_tree",
]
