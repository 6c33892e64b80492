from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterable, Optional, Sequence

import pandas as pd

from ..fas import get_heuristic, is_feedback_arc_set, list_heuristics
from ..formats import read_metis

logger = logging.getLogger(__name__)

BENCH_COLUMNS = ["instance", "vertices", "edges", "heuristic", "fas_size", "seconds", "valid"]


def run_benchmark(
    instances: Iterable[Path],
    heuristics: Optional[Sequence[str]] = None,
    *,
    strict: bool = False,
) -> pd.DataFrame:
    """Run every heuristic on every instance; one row per (instance, heuristic)."""
    names = list(heuristics) if heuristics else list_heuristics()
    algorithms = [get_heuristic(n) for n in names]

    rows: list[dict[str, object]] = []
    for path in instances:
        path = Path(path)
        graph = read_metis(path, strict=strict).to_graph()
        for algo in algorithms:
            t0 = time.perf_counter()
            fas = algo.compute(graph)
            seconds = time.perf_counter() - t0
            logger.info("%s / %s: %d edges in %.4fs", path.name, algo.name, len(fas), seconds)
            rows.append(
                {
                    "instance": str(path),
                    "vertices": graph.order(),
                    "edges": graph.edge_count(),
                    "heuristic": algo.name,
                    "fas_size": len(fas),
                    "seconds": seconds,
                    "valid": is_feedback_arc_set(graph, fas),
                }
            )

    return pd.DataFrame(rows, columns=BENCH_COLUMNS)


def summarize_benchmark(df: pd.DataFrame) -> pd.DataFrame:
    """Per-heuristic totals, sorted by total FAS size (smaller is better)."""
    if df.empty:
        return pd.DataFrame(columns=["heuristic", "instances", "fas_size", "seconds", "all_valid"])

    grouped = df.groupby("heuristic", as_index=False).agg(
        instances=("instance", "size"),
        fas_size=("fas_size", "sum"),
        seconds=("seconds", "mean"),
        all_valid=("valid", "all"),
    )
    return grouped.sort_values(["fas_size", "heuristic"]).reset_index(drop=True)
