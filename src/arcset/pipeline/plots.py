from __future__ import annotations

from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np

from ..graph.digraph import DiGraph
from .stats import degree_arrays


def save_matplotlib(fig: Any, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)


def plot_degree_distribution(graph: DiGraph, plots_dir: Path, title: str = "") -> Path:
    indeg, outdeg = degree_arrays(graph)
    top = int(max(indeg.max(initial=0), outdeg.max(initial=0)))
    xs = np.arange(top + 1)

    fig = plt.figure()
    plt.bar(xs - 0.2, np.bincount(indeg, minlength=top + 1), width=0.4, label="in-degree")
    plt.bar(xs + 0.2, np.bincount(outdeg, minlength=top + 1), width=0.4, label="out-degree")
    plt.title(title or "Degree distribution")
    plt.xlabel("degree")
    plt.ylabel("vertices")
    plt.legend()

    out = plots_dir / "degree_distribution.png"
    save_matplotlib(fig, out)
    return out
