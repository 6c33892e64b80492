from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Optional

import typer

from .config import configure_logging, get_settings
from .errors import ArcsetError, UnknownHeuristicError
from .fas import describe_heuristic, get_heuristic, list_heuristics
from .formats import read_metis, write_metis
from .graph import DiGraph
from .pipeline import compute_stats, run_benchmark, run_solve, summarize_benchmark

app = typer.Typer(add_completion=False, help="Feedback arc set heuristics for PACE/METIS digraphs")

# ---- Heuristic commands ----
heuristics_app = typer.Typer(help="Inspect available feedback arc set heuristics.")
app.add_typer(heuristics_app, name="heuristics")


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (default: ARCSET_LOG_LEVEL or WARNING)"
    ),
) -> None:
    try:
        configure_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")


@heuristics_app.command("list")
def heuristics_list() -> None:
    """List registered heuristics."""
    for name in list_heuristics():
        typer.echo(name)


@heuristics_app.command("describe")
def heuristics_describe(
    name: str = typer.Option(..., "--name", help="Heuristic name to describe"),
) -> None:
    """
    Show metadata for a heuristic as JSON with sorted keys.
    """
    try:
        meta = describe_heuristic(name)
    except UnknownHeuristicError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(meta, indent=2, sort_keys=True))


@app.command()
def info(
    instance: Path = typer.Argument(..., help="METIS instance file"),
    strict: bool = typer.Option(False, "--strict", help="Fail if the header edge count does not match"),
):
    """
    Print structural statistics of an instance.
    """
    try:
        graph = read_metis(instance, strict=strict or get_settings().strict_metis).to_graph()
        stats = compute_stats(graph)
        for k, v in stats.model_dump().items():
            typer.echo(f"{k}: {v}")
    except FileNotFoundError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=2)
    except (ArcsetError, UnicodeDecodeError, OSError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def solve(
    instance: Path = typer.Argument(..., help="METIS instance file"),
    heuristic: Optional[str] = typer.Option(None, "--heuristic", help="Heuristic name (default: settings)"),
    runs_dir: Optional[Path] = typer.Option(None, "--runs-dir", help="Where run directories are created"),
    plots: str = typer.Option("off", "--plots", help="on|off"),
    dot: bool = typer.Option(False, "--dot", help="Also write graph.dot with the removed edges highlighted"),
    run_id: Optional[str] = typer.Option(None, "--run-id", help="Explicit run id (default: random)"),
    strict: bool = typer.Option(False, "--strict", help="Fail if the header edge count does not match"),
):
    """
    Compute a feedback arc set and write run artifacts.

    Always writes:
      solution.txt, metrics.csv, analysis_log.json, report.md
    """
    try:
        manifest = run_solve(
            instance_path=instance,
            heuristic=heuristic,
            runs_root=runs_dir,
            plots=plots.strip().lower() == "on",
            dot=dot,
            run_id=run_id,
            strict=True if strict else None,
        )
    except FileNotFoundError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=2)
    except (ArcsetError, UnicodeDecodeError, OSError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Run {manifest.status}.")
    typer.echo(f"Run dir: {manifest.run_dir}")
    typer.echo(f"Removed edges: {manifest.fas_size}")
    typer.echo(f"Solution: {manifest.solution_txt}")
    typer.echo(f"Report: {manifest.report_md}")
    typer.echo(f"Metrics: {manifest.metrics_csv}")
    typer.echo(f"Log: {manifest.analysis_log_json}")
    if manifest.figures_dir:
        typer.echo(f"Figures: {manifest.figures_dir}")
    if manifest.dot_path:
        typer.echo(f"DOT: {manifest.dot_path}")

    if manifest.status != "success":
        raise typer.Exit(code=1)


@app.command()
def bench(
    instances: list[Path] = typer.Argument(..., help="METIS instance files"),
    heuristic: list[str] = typer.Option([], "--heuristic", help="Heuristic to include (repeatable; default: all)"),
    out: Optional[Path] = typer.Option(None, "--out", help="Write per-run rows to this CSV"),
    strict: bool = typer.Option(False, "--strict", help="Fail if a header edge count does not match"),
):
    """
    Run heuristics over several instances and print a per-heuristic summary.
    """
    try:
        for name in heuristic:
            get_heuristic(name)
        df = run_benchmark(instances, heuristic or None, strict=strict or get_settings().strict_metis)
    except FileNotFoundError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=2)
    except (ArcsetError, UnicodeDecodeError, OSError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)

    if out is not None:
        out.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(out, index=False)
        typer.echo(f"Results: {out}")

    typer.echo(summarize_benchmark(df).to_string(index=False))

    if not bool(df["valid"].all()):
        typer.echo("ERROR: at least one heuristic produced an invalid feedback arc set", err=True)
        raise typer.Exit(code=1)


@app.command()
def generate(
    vertices: int = typer.Option(..., "--vertices", min=0, help="Number of vertices"),
    probability: float = typer.Option(..., "--probability", min=0.0, max=1.0, help="Edge probability"),
    out: Path = typer.Option(..., "--out", help="Output METIS file"),
    seed: int = typer.Option(42, "--seed", help="Random seed"),
):
    """
    Write a random G(n, p) digraph instance in METIS format.
    """
    graph = DiGraph.random(vertices, probability, random.Random(seed))
    write_metis(graph, out, comment=f"random digraph n={vertices} p={probability} seed={seed}")
    typer.echo(f"Wrote {out} ({graph.order()} vertices, {graph.edge_count()} edges)")
