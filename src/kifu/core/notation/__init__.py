"""Notation package: SGF lexing, tree building and record extraction."""

from kifu.core.notation.coords import decode_point, encode_point, is_pass_value
from kifu.core.notation.lexer import tokenize
from kifu.core.notation.models import (
    GameInfo,
    GameRecord,
    GameTree,
    Move,
    Token,
    TreeNode,
)
from kifu.core.notation.sgf import (
    ParseOptions,
    extract_game_info,
    extract_moves,
    parse_board_size,
    parse_sgf,
    parse_sgf_tree,
)
from kifu.core.notation.tree import build_game_tree

__all__ = [
    "GameInfo",
    "GameRecord",
    "GameTree",
    "Move",
    "ParseOptions",
    "Token",
    "TreeNode",
    "tokenize",
    "build_game_tree",
    "decode_point",
    "encode_point",
    "is_pass_value",
    "parse_board_size",
    "extract_game_info",
    "extract_moves",
    "parse_sgf_tree",
    "parse_sgf",
]
