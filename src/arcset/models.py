from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .utils import now_iso


class InstanceStats(BaseModel):
    """
    Basic structural statistics of a directed instance.

    density: edges / (n * (n - 1)); 0.0 for graphs with fewer than two vertices
    """
    vertices: int
    edges: int
    density: float
    max_in_degree: int
    max_out_degree: int
    self_loops: int
    cyclic: bool


class HeuristicInfo(BaseModel):
    name: str
    description: str
    deterministic: bool = True


class RunManifest(BaseModel):
    """
    Paths and outcome of a single `arcset solve` run.

    status: "success" | "failed"
    """
    run_id: str
    run_dir: str
    instance: str
    heuristic: str
    status: str = "success"
    fas_size: int = 0
    seconds: float = 0.0
    solution_txt: str
    metrics_csv: str
    analysis_log_json: str
    report_md: str
    figures_dir: Optional[str] = None
    dot_path: Optional[str] = None
    created_at: str = Field(default_factory=now_iso)
