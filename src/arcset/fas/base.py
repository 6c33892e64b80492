from __future__ import annotations

from typing import Iterable

from ..algo.cycle import CycleDetection, is_cyclic
from ..algo.ordering import leftward_edges
from ..errors import SolutionVerificationError
from ..graph.digraph import DiGraph, Edge, VertexId


class FeedbackArcSetHeuristic:
    """Ordering-based heuristic: the FAS is every leftward edge of the ordering."""

    name: str = ""
    description: str = ""
    deterministic: bool = True

    def ordering(self, graph: DiGraph) -> list[VertexId]:  # pragma: no cover - interface
        raise NotImplementedError

    def compute(self, graph: DiGraph) -> set[Edge]:
        return leftward_edges(graph, self.ordering(graph))


def remove_edges(graph: DiGraph, edges: Iterable[Edge]) -> DiGraph:
    out = graph.copy()
    for e in edges:
        out.remove_edge(e)
    return out


def is_feedback_arc_set(graph: DiGraph, edges: Iterable[Edge]) -> bool:
    return not is_cyclic(remove_edges(graph, edges))


def verify_solution(graph: DiGraph, edges: Iterable[Edge]) -> None:
    """Raise SolutionVerificationError if removing edges leaves a cycle."""
    edges = list(edges)
    residual = remove_edges(graph, edges)
    cycle = CycleDetection(residual).find_cycle()
    if cycle is not None:
        raise SolutionVerificationError(
            f"{len(edges)} removed edges leave the cycle {' -> '.join(map(str, cycle + cycle[:1]))}"
        )
