"""Solve and benchmark orchestration on top of the graph and heuristic layers."""

from .bench import run_benchmark, summarize_benchmark
from .context import RunContext
from .run import run_solve
from .stats import compute_stats

__all__ = ["RunContext", "compute_stats", "run_benchmark", "run_solve", "summarize_benchmark"]
