from __future__ import annotations

from pathlib import Path

import pytest

from arcset.config import get_settings

FIXTURES = Path(__file__).parent / "fixtures"

# The multi-cycle example graph (0-based ids). The last five edges close the
# cycles; removing (13, 2), (7, 1) and (15, 10) is a minimum feedback arc set.
MULTI_CYCLE_EDGES = [
    (0, 1), (0, 7), (1, 2), (1, 3), (2, 4), (2, 5), (2, 6), (3, 7), (6, 8), (6, 9),
    (7, 9), (5, 10), (8, 10), (9, 10), (4, 11), (4, 12), (12, 11), (10, 13), (11, 13),
    (10, 14), (14, 15), (14, 16), (16, 15), (16, 17), (17, 18), (12, 18),
    (13, 2), (7, 1), (6, 7), (15, 10), (15, 13),
]  # fmt: skip


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ARCSET_RUNS_DIR", str(tmp_path / "runs"))
    for var in ("ARCSET_LOG_LEVEL", "ARCSET_DEFAULT_HEURISTIC", "ARCSET_STRICT_METIS"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES
