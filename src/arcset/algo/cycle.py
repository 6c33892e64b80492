from __future__ import annotations

from typing import Optional

import networkx as nx

from ..graph.digraph import DiGraph, VertexId


class CycleDetection:
    def __init__(self, graph: DiGraph) -> None:
        self.graph = graph

    def is_cyclic(self) -> bool:
        return not nx.is_directed_acyclic_graph(self.graph.to_networkx())

    def find_cycle(self) -> Optional[list[VertexId]]:
        """Return the vertices of one directed cycle in edge order, or None."""
        try:
            edges = nx.find_cycle(self.graph.to_networkx(), orientation="original")
        except nx.NetworkXNoCycle:
            return None
        return [u for u, _v, *_ in edges]


def is_cyclic(graph: DiGraph) -> bool:
    return CycleDetection(graph).is_cyclic()
