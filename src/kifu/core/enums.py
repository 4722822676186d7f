"""Core enumerations for the go record domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum, auto


class Color(IntEnum):
    """Stone color."""

    BLACK = 0
    WHITE = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def move_property(self) -> str:
        """SGF property identifier that records a move of this color."""
        return "B" if self == Color.BLACK else "W"

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.name.lower()


class TokenKind(IntEnum):
    """Primitive SGF lexical tokens."""

    TREE_OPEN = auto()
    TREE_CLOSE = auto()
    NODE_START = auto()
    PROP_IDENT = auto()
    PROP_VALUE = auto()


class Prop(StrEnum):
    """SGF property identifiers understood by the extractors."""

    BLACK_MOVE = "B"
    WHITE_MOVE = "W"
    COMMENT = "C"
    PLAYER_BLACK = "PB"
    PLAYER_WHITE = "PW"
    BLACK_RANK = "BR"
    WHITE_RANK = "WR"
    KOMI = "KM"
    RESULT = "RE"
    DATE = "DT"
    EVENT = "EV"
    RULES = "RU"
    SIZE = "SZ"
    GAME_COMMENT = "GC"
    GAME_NAME = "GN"
    PLACE = "PC"
    HANDICAP = "HA"
