from __future__ import annotations

import csv
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

from ..config import get_settings
from ..errors import SolutionVerificationError
from ..fas import get_heuristic, verify_solution
from ..formats import read_metis, to_dot
from ..graph.digraph import Edge
from ..models import InstanceStats, RunManifest
from ..paths import runs_root as default_runs_root
from ..utils import now_iso, sha256_file, write_json
from .context import RunContext
from .plots import plot_degree_distribution
from .stats import compute_stats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetricRow:
    """A single row of the three-column metrics.csv contract: section,key,value."""

    section: str
    key: str
    value: str

    def as_list(self) -> list[str]:
        return [self.section, self.key, self.value]


_METRICS_HEADER = ["section", "key", "value"]


def _write_metrics(path: Path, rows: Iterable[MetricRow]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        w.writerow(_METRICS_HEADER)
        for r in rows:
            w.writerow(r.as_list())


def _write_solution(path: Path, edges: Iterable[Edge]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{u} {v}\n" for u, v in sorted(edges)), encoding="utf-8")


def _render_report(
    *,
    ctx: RunContext,
    instance: Path,
    heuristic: str,
    stats: InstanceStats,
    fas_size: int,
    seconds: float,
    errors: list[str],
) -> str:
    lines: list[str] = []
    if errors:
        lines.append("# Run Failed")
        lines.append("")
        for e in errors:
            lines.append(f"- {e}")
        lines.append("")

    lines.append(f"# Feedback Arc Set Report: {instance.name}")
    lines.append("")
    lines.append(f"- Run id: `{ctx.run_id}`")
    lines.append(f"- Instance sha256: `{ctx.instance_hash}`")
    lines.append(f"- Heuristic: `{heuristic}`")
    lines.append("")
    lines.append("## Instance")
    lines.append("")
    lines.append("| stat | value |")
    lines.append("| --- | --- |")
    for k, v in stats.model_dump().items():
        lines.append(f"| {k} | {v} |")
    lines.append("")
    lines.append("## Result")
    lines.append("")
    lines.append(f"- Edges removed: {fas_size}")
    if stats.edges:
        lines.append(f"- Share of edges removed: {fas_size / stats.edges:.4f}")
    lines.append(f"- Runtime: {seconds:.6f} s")
    lines.append(f"- Verified acyclic: {'no' if errors else 'yes'}")
    return "\n".join(lines) + "\n"


def run_solve(
    *,
    instance_path: Path,
    heuristic: Optional[str] = None,
    runs_root: Optional[Path] = None,
    plots: bool = False,
    dot: bool = False,
    run_id: Optional[str] = None,
    strict: Optional[bool] = None,
) -> RunManifest:
    """Solve one instance and write the run artifacts.

    Always writes:
      solution.txt, metrics.csv, analysis_log.json, report.md

    A solution that leaves a cycle is recorded as a failed run rather than
    raised, so the artifacts are still inspectable.
    """
    settings = get_settings()
    heuristic_name = heuristic or settings.default_heuristic
    algorithm = get_heuristic(heuristic_name)
    strict_mode = settings.strict_metis if strict is None else strict

    instance_path = Path(instance_path)
    ctx = RunContext.create(
        runs_root=default_runs_root(runs_root),
        instance_hash=sha256_file(instance_path),
        run_id=run_id,
    )
    logger.info("run %s: solving %s with %s", ctx.run_id, instance_path, heuristic_name)

    stages: list[dict[str, Any]] = []
    errors: list[str] = []

    t0 = time.perf_counter()
    inst = read_metis(instance_path, strict=strict_mode)
    graph = inst.to_graph()
    ctx.run_dir.mkdir(parents=True, exist_ok=True)
    stages.append({"stage": "load", "seconds": round(time.perf_counter() - t0, 6)})

    stats = compute_stats(graph)
    stages.append({"stage": "stats", **stats.model_dump()})

    t0 = time.perf_counter()
    fas = algorithm.compute(graph)
    seconds = time.perf_counter() - t0
    stages.append({"stage": "solve", "heuristic": heuristic_name, "fas_size": len(fas), "seconds": round(seconds, 6)})

    try:
        verify_solution(graph, fas)
        valid = True
    except SolutionVerificationError as e:
        valid = False
        errors.append(str(e))
        logger.error("run %s: verification failed: %s", ctx.run_id, e)
    stages.append({"stage": "verify", "acyclic": valid})

    _write_solution(ctx.solution_path(), fas)

    rows = [MetricRow("instance", k, str(v)) for k, v in stats.model_dump().items()]
    rows.append(MetricRow("solution", "heuristic", heuristic_name))
    rows.append(MetricRow("solution", "fas_size", str(len(fas))))
    rows.append(MetricRow("solution", "seconds", f"{seconds:.6f}"))
    rows.append(MetricRow("solution", "valid", str(valid).lower()))
    _write_metrics(ctx.metrics_path(), rows)

    figures_dir: Optional[Path] = None
    if plots:
        try:
            p = plot_degree_distribution(graph, ctx.plots_dir(), title=f"Degree distribution: {instance_path.name}")
            figures_dir = ctx.plots_dir()
            stages.append({"stage": "plots", "plots": [p.name]})
        except Exception as e:
            # Plots never decide the outcome of a run.
            logger.warning("run %s: plotting failed: %s", ctx.run_id, e)
            stages.append({"stage": "plots", "error": f"{type(e).__name__}: {e}"})

    dot_path: Optional[Path] = None
    if dot:
        dot_path = ctx.dot_path()
        dot_path.write_text(to_dot(graph, highlight=fas), encoding="utf-8")

    status = "success" if not errors else "failed"
    write_json(
        ctx.analysis_log_path(),
        {
            "created_at": now_iso(),
            "run_id": ctx.run_id,
            "instance": {"path": str(instance_path), "sha256": ctx.instance_hash},
            "heuristic": heuristic_name,
            "stages": stages,
            "errors": [{"stage": "verify", "error": e} for e in errors],
            "status": status,
        },
    )

    ctx.report_path().write_text(
        _render_report(
            ctx=ctx,
            instance=instance_path,
            heuristic=heuristic_name,
            stats=stats,
            fas_size=len(fas),
            seconds=seconds,
            errors=errors,
        ),
        encoding="utf-8",
    )

    return RunManifest(
        run_id=ctx.run_id,
        run_dir=str(ctx.run_dir),
        instance=str(instance_path),
        heuristic=heuristic_name,
        status=status,
        fas_size=len(fas),
        seconds=seconds,
        solution_txt=str(ctx.solution_path()),
        metrics_csv=str(ctx.metrics_path()),
        analysis_log_json=str(ctx.analysis_log_path()),
        report_md=str(ctx.report_path()),
        figures_dir=str(figures_dir) if figures_dir else None,
        dot_path=str(dot_path) if dot_path else None,
    )
