"""Command-line entry point: summarise SGF files."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from kifu.library import build_viewer_game, load_sgf_files


def main(argv: list[str] | None = None) -> int:
    """Print one summary line per SGF file that parses."""
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if not args:
        print("usage: kifu FILE.sgf [FILE.sgf ...]", file=sys.stderr)
        return 2

    games = load_sgf_files(Path(arg) for arg in args)
    for game in games:
        viewer = build_viewer_game(game.record)
        print(
            f"{game.name}: {viewer.title} | {viewer.description} | "
            f"{viewer.board_size}x{viewer.board_size}, {len(viewer.steps)} moves"
        )
    return 0 if games else 1


if __name__ == "__main__":
    sys.exit(main())
