from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import get_settings


def runs_root(override: Optional[Path] = None) -> Path:
    """
    Root directory for solve runs. ARCSET_RUNS_DIR unless overridden.
    """
    return Path(override) if override is not None else get_settings().runs_dir


def run_dir(run_id: str, root: Optional[Path] = None) -> Path:
    return runs_root(root) / run_id
