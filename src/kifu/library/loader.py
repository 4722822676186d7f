"""Load SGF records from disk, one file or a batch at a time."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from kifu.core.errors import SgfError
from kifu.core.notation import GameRecord, ParseOptions, parse_sgf

_LOGGER = logging.getLogger(__name__)
SGF_SUFFIX = ".sgf"


@dataclass(slots=True, frozen=True)
class LoadedGame:
    """An SGF file that was read and parsed successfully."""

    name: str
    content: str
    record: GameRecord


def is_sgf_path(path: Path) -> bool:
    return path.suffix.lower() == SGF_SUFFIX


def load_sgf_file(file_path: Path, options: ParseOptions | None = None) -> GameRecord:
    """Read a UTF-8 SGF file and parse it."""
    sgf_text = file_path.read_text(encoding="utf-8")
    return parse_sgf(sgf_text, options)


def load_sgf_files(
    paths: Iterable[Path], options: ParseOptions | None = None
) -> list[LoadedGame]:
    """Load every ``.sgf`` path, skipping files that cannot be read or parsed.

    Paths with other suffixes are ignored. Failures are logged and never stop
    the rest of the batch.
    """
    loaded: list[LoadedGame] = []
    for path in paths:
        if not is_sgf_path(path):
            _LOGGER.debug("Skipping non-SGF file: %s", path)
            continue
        try:
            content = path.read_text(encoding="utf-8")
            record = parse_sgf(content, options)
        except (OSError, UnicodeDecodeError, SgfError) as exc:
            _LOGGER.warning("Error parsing %s: %s", path.name, exc)
            continue
        loaded.append(LoadedGame(name=path.name, content=content, record=record))
    return loaded
