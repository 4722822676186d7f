"""Shared notation-layer data models."""

from __future__ import annotations

import math
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from kifu.core.enums import Color, TokenKind
from kifu.core.types import DEFAULT_BOARD_SIZE, Point

_KOMI_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


@dataclass(slots=True, frozen=True)
class Token:
    """A single lexical token with the offset it started at."""

    kind: TokenKind
    offset: int
    text: str = ""


@dataclass(slots=True, frozen=True)
class TreeNode:
    """One node of the game-tree arena.

    ``parent`` and ``children`` are indices into :attr:`GameTree.nodes`.
    """

    index: int
    properties: Mapping[str, tuple[str, ...]]
    parent: int | None
    children: tuple[int, ...] = ()

    def get(self, ident: str) -> tuple[str, ...]:
        """All values of ``ident`` on this node (empty when absent)."""
        return self.properties.get(ident, ())

    def first(self, ident: str) -> str | None:
        values = self.properties.get(ident)
        if not values:
            return None
        return values[0]

    def __contains__(self, ident: object) -> bool:
        return ident in self.properties


@dataclass(slots=True, frozen=True)
class GameTree:
    """Immutable game tree stored as a flat arena of nodes.

    Index 0 is the root node. Variations are represented by nodes with more
    than one child; the first child in declaration order is the main line.
    """

    nodes: tuple[TreeNode, ...]

    @property
    def root(self) -> TreeNode:
        return self.nodes[0]

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> TreeNode:
        return self.nodes[index]

    def main_line(self) -> Iterator[TreeNode]:
        """Yield the root and then the first child at every step."""
        node = self.nodes[0]
        while True:
            yield node
            if not node.children:
                return
            node = self.nodes[node.children[0]]

    def variation_count(self) -> int:
        """Number of nodes that branch into two or more variations."""
        return sum(1 for node in self.nodes if len(node.children) > 1)


@dataclass(slots=True, frozen=True)
class GameInfo:
    """Game metadata read from the root node.

    Missing properties fall back to empty strings; ``board_size`` falls back
    to 19.
    """

    player_black: str = ""
    player_white: str = ""
    black_rank: str = ""
    white_rank: str = ""
    komi: str = ""
    result: str = ""
    date: str = ""
    event: str = ""
    rules: str = ""
    board_size: int = DEFAULT_BOARD_SIZE
    game_comment: str = ""
    game_name: str = ""
    place: str = ""
    handicap: str = ""

    @property
    def komi_value(self) -> float | None:
        """Komi as a number, or ``None`` if absent or unparsable."""
        if _KOMI_RE.fullmatch(self.komi) is None:
            return None
        value = float(self.komi)
        return value if math.isfinite(value) else None

    @property
    def black_display(self) -> str:
        return self.player_black or "Black"

    @property
    def white_display(self) -> str:
        return self.player_white or "White"


@dataclass(slots=True, frozen=True)
class Move:
    """A single main-line move. ``point`` is ``None`` for a pass."""

    number: int
    color: Color
    point: Point | None
    comment: str | None = None

    @property
    def is_pass(self) -> bool:
        return self.point is None


@dataclass(slots=True, frozen=True)
class GameRecord:
    """Parsed game: metadata plus the ordered main-line moves."""

    info: GameInfo
    moves: tuple[Move, ...] = field(default_factory=tuple)

    @property
    def board_size(self) -> int:
        return self.info.board_size
