from __future__ import annotations

from typing import Sequence

import networkx as nx

from ..errors import CyclicGraphError
from ..graph.digraph import DiGraph, Edge, VertexId


def topological_sort(graph: DiGraph) -> list[VertexId]:
    """Lexicographically smallest topological order (ties go to the smallest id)."""
    try:
        return list(nx.lexicographical_topological_sort(graph.to_networkx()))
    except nx.NetworkXUnfeasible:
        raise CyclicGraphError(f"Graph with {graph.order()} vertices has a cycle") from None


def sort_by_indegree_asc(graph: DiGraph) -> list[VertexId]:
    return sorted(graph.vertices(), key=lambda v: (graph.in_degree(v), v))


def leftward_edges(graph: DiGraph, ordering: Sequence[VertexId]) -> set[Edge]:
    """
    Edges (u, v) whose target is not placed after its source.

    Removing them leaves only forward edges, so the result is always a
    feedback arc set of the graph. Self-loops are leftward by definition.
    """
    pos = {v: i for i, v in enumerate(ordering)}
    if len(pos) != len(ordering) or set(pos) != set(graph.vertices()):
        raise ValueError("ordering must be a permutation of the graph's vertices")

    return {(u, v) for u, v in graph.all_edges() if pos[v] <= pos[u]}
