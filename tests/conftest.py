"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_GAME = """\
(;GM[1]FF[4]SZ[19]
PB[Honinbo Shusaku]BR[7d]PW[Gennan Inseki]WR[8d]
KM[0]RE[B+2]DT[1846-09-11]EV[Ear-reddening game]RU[Japanese]
GC[Famous \\] game]
;B[qd];W[dc]C[Opening];B[pq]
(;W[oc];B[cp]C[Main line])
(;W[po];B[pe]))
"""


@pytest.fixture
def sample_sgf() -> str:
    """A small real-world shaped record with one variation."""
    return SAMPLE_GAME


@pytest.fixture
def sgf_dir(tmp_path: Path) -> Path:
    """Directory with a valid record, a broken one and a non-SGF file."""
    (tmp_path / "good.sgf").write_text(SAMPLE_GAME, encoding="utf-8")
    (tmp_path / "broken.sgf").write_text("(;B[zz])", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("(;B[aa])", encoding="utf-8")
    return tmp_path
