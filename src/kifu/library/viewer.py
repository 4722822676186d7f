"""Board-viewer payload built from a parsed record."""

from __future__ import annotations

from dataclasses import dataclass

from kifu.core.enums import Color
from kifu.core.notation import GameInfo, GameRecord, Move
from kifu.core.types import Point, point_label


@dataclass(slots=True, frozen=True)
class ViewerStep:
    """One move as presented by the board viewer."""

    point: Point | None
    color: Color
    title: str
    commentary: str


@dataclass(slots=True, frozen=True)
class ViewerGame:
    """Everything the board viewer needs to replay a game."""

    title: str
    description: str
    board_size: int
    steps: tuple[ViewerStep, ...]
    initial_commentary: str
    info: GameInfo


def game_title(info: GameInfo) -> str:
    return f"{info.black_display} vs {info.white_display}"


def game_description(info: GameInfo) -> str:
    prefix = f"{info.event} - " if info.event else ""
    return prefix + (info.date or "Game record")


def default_commentary(move: Move, board_size: int) -> str:
    """Fallback commentary for a move without a comment."""
    player = move.color.display_name
    if move.point is None:
        return f"{player} passes."
    return f"{player} plays at {point_label(move.point, board_size)}."


def build_viewer_step(move: Move, board_size: int) -> ViewerStep:
    return ViewerStep(
        point=move.point,
        color=move.color,
        title=f"{move.color.display_name} {move.number}",
        commentary=move.comment or default_commentary(move, board_size),
    )


def build_viewer_game(record: GameRecord) -> ViewerGame:
    """Turn a :class:`GameRecord` into the viewer's replay payload."""
    info = record.info
    intro = f"Game between {info.black_display} and {info.white_display}."
    if info.game_comment:
        intro = f"{intro} {info.game_comment}"
    return ViewerGame(
        title=game_title(info),
        description=game_description(info),
        board_size=record.board_size,
        steps=tuple(build_viewer_step(move, record.board_size) for move in record.moves),
        initial_commentary=intro,
        info=info,
    )
