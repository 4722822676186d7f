"""SGF parsing: game metadata and main-line move extraction."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from kifu.core.enums import Color, Prop
from kifu.core.errors import AmbiguousMoveError, InvalidSizeError
from kifu.core.notation.coords import decode_point
from kifu.core.notation.lexer import tokenize
from kifu.core.notation.models import GameInfo, GameRecord, GameTree, Move, TreeNode
from kifu.core.notation.tree import build_game_tree
from kifu.core.types import DEFAULT_BOARD_SIZE, MAX_BOARD_SIZE, is_valid_board_size

_LOGGER = logging.getLogger(__name__)
_SIZE_RE = re.compile(r"[0-9]+")

# Root properties copied verbatim into GameInfo text fields.
_INFO_FIELDS: dict[Prop, str] = {
    Prop.PLAYER_BLACK: "player_black",
    Prop.PLAYER_WHITE: "player_white",
    Prop.BLACK_RANK: "black_rank",
    Prop.WHITE_RANK: "white_rank",
    Prop.KOMI: "komi",
    Prop.RESULT: "result",
    Prop.DATE: "date",
    Prop.EVENT: "event",
    Prop.RULES: "rules",
    Prop.GAME_COMMENT: "game_comment",
    Prop.GAME_NAME: "game_name",
    Prop.PLACE: "place",
    Prop.HANDICAP: "handicap",
}


@dataclass(slots=True, frozen=True)
class ParseOptions:
    """Tunable parser behaviour for a single :func:`parse_sgf` call."""

    default_board_size: int = DEFAULT_BOARD_SIZE

    def __post_init__(self) -> None:
        if not is_valid_board_size(self.default_board_size):
            raise ValueError(
                f"default_board_size must be in 1..{MAX_BOARD_SIZE}, "
                f"got {self.default_board_size}"
            )


def parse_board_size(value: str) -> int:
    """Parse an ``SZ`` value; ``'19'`` and the square form ``'19:19'`` are accepted."""
    text = value.strip()
    if ":" in text:
        cols, _, rows = text.partition(":")
        if cols.strip() != rows.strip():
            raise InvalidSizeError(f"Rectangular boards are not supported: {value!r}")
        text = cols.strip()
    if _SIZE_RE.fullmatch(text) is None:
        raise InvalidSizeError(f"Invalid board size: {value!r}")
    size = int(text)
    if not is_valid_board_size(size):
        raise InvalidSizeError(
            f"Board size must be in 1..{MAX_BOARD_SIZE}, got {size}"
        )
    return size


def extract_game_info(
    root: TreeNode, default_board_size: int = DEFAULT_BOARD_SIZE
) -> GameInfo:
    """Build :class:`GameInfo` from the root node's properties.

    Unknown properties are ignored and missing ones fall back to defaults.
    """
    fields: dict[str, str] = {}
    for prop, attr in _INFO_FIELDS.items():
        value = root.first(prop)
        if value is not None:
            fields[attr] = value.strip()

    size_value = root.first(Prop.SIZE)
    board_size = (
        default_board_size if size_value is None else parse_board_size(size_value)
    )
    return GameInfo(board_size=board_size, **fields)


def _node_comment(node: TreeNode) -> str | None:
    values = node.get(Prop.COMMENT)
    if not values:
        return None
    return "\n".join(values)


def _node_move(node: TreeNode) -> tuple[Color, str] | None:
    black = node.get(Prop.BLACK_MOVE)
    white = node.get(Prop.WHITE_MOVE)
    if Prop.BLACK_MOVE in node and Prop.WHITE_MOVE in node:
        raise AmbiguousMoveError(
            f"Node declares both B{list(black)} and W{list(white)} moves"
        )
    if Prop.BLACK_MOVE in node:
        return Color.BLACK, black[0]
    if Prop.WHITE_MOVE in node:
        return Color.WHITE, white[0]
    return None


def extract_moves(tree: GameTree, board_size: int) -> tuple[Move, ...]:
    """Collect main-line moves numbered 1..N.

    The walk starts at the root and follows the first child at every branch;
    nodes without a ``B`` or ``W`` property do not consume a move number.
    """
    moves: list[Move] = []
    for node in tree.main_line():
        played = _node_move(node)
        if played is None:
            continue
        color, value = played
        moves.append(
            Move(
                number=len(moves) + 1,
                color=color,
                point=decode_point(value, board_size),
                comment=_node_comment(node),
            )
        )
    return tuple(moves)


def parse_sgf_tree(sgf_text: str) -> GameTree:
    """Tokenize and assemble a single SGF game tree."""
    return build_game_tree(tokenize(sgf_text))


def parse_sgf(sgf_text: str, options: ParseOptions | None = None) -> GameRecord:
    """Parse one SGF game into a :class:`GameRecord`.

    Raises:
        SgfError: Any subclass, on malformed input. No partial record is
            ever returned.
    """
    opts = options or ParseOptions()
    tree = parse_sgf_tree(sgf_text)
    info = extract_game_info(tree.root, opts.default_board_size)
    moves = extract_moves(tree, info.board_size)
    _LOGGER.debug(
        "Parsed SGF game: %d nodes, %d variations, %d moves on %dx%d",
        len(tree),
        tree.variation_count(),
        len(moves),
        info.board_size,
        info.board_size,
    )
    return GameRecord(info=info, moves=moves)
