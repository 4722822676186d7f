"""Caller-side helpers: batch file loading and the board-viewer payload."""

from kifu.library.loader import LoadedGame, load_sgf_file, load_sgf_files
from kifu.library.viewer import ViewerGame, ViewerStep, build_viewer_game

__all__ = [
    "LoadedGame",
    "ViewerGame",
    "ViewerStep",
    "build_viewer_game",
    "load_sgf_file",
    "load_sgf_files",
]
