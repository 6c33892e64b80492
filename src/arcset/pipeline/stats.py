from __future__ import annotations

import numpy as np

from ..graph.digraph import DiGraph
from ..models import InstanceStats


def degree_arrays(graph: DiGraph) -> tuple[np.ndarray, np.ndarray]:
    """(in-degrees, out-degrees) in ascending vertex order."""
    vs = graph.vertices()
    indeg = np.fromiter((graph.in_degree(v) for v in vs), dtype=np.int64, count=len(vs))
    outdeg = np.fromiter((graph.degree(v) for v in vs), dtype=np.int64, count=len(vs))
    return indeg, outdeg


def compute_stats(graph: DiGraph) -> InstanceStats:
    n = graph.order()
    m = graph.edge_count()
    indeg, outdeg = degree_arrays(graph)
    density = float(m) / (n * (n - 1)) if n > 1 else 0.0
    return InstanceStats(
        vertices=n,
        edges=m,
        density=round(density, 6),
        max_in_degree=int(indeg.max()) if n else 0,
        max_out_degree=int(outdeg.max()) if n else 0,
        self_loops=sum(1 for v in graph.vertices() if graph.has_edge(v, v)),
        cyclic=graph.is_cyclic(),
    )
