from __future__ import annotations

import heapq

from ..graph.digraph import DiGraph, VertexId
from .base import FeedbackArcSetHeuristic


class GreedyHeuristic(FeedbackArcSetHeuristic):
    """
    Eades, Lin and Smyth (1993) greedy ordering.

    Sinks are peeled off to the right sequence, sources to the left one.
    When neither exists, the vertex maximizing out-degree minus in-degree
    goes left. Ties always resolve to the smallest vertex id, so the result
    is reproducible for a given graph.
    """

    name = "greedy"
    description = "Eades-Lin-Smyth greedy sink/source ordering."

    def ordering(self, graph: DiGraph) -> list[VertexId]:
        remaining = set(graph.vertices())
        out_deg = {v: graph.degree(v) for v in remaining}
        in_deg = {v: graph.in_degree(v) for v in remaining}

        # Self-loops never block a vertex from becoming a sink/source.
        for v in remaining:
            if graph.has_edge(v, v):
                out_deg[v] -= 1
                in_deg[v] -= 1

        sinks = [v for v in remaining if out_deg[v] == 0]
        sources = [v for v in remaining if in_deg[v] == 0]
        # Lazy-deletion max-heap on out-degree minus in-degree; stale entries
        # are skipped when popped.
        deltas = [(in_deg[v] - out_deg[v], v) for v in remaining]
        heapq.heapify(sinks)
        heapq.heapify(sources)
        heapq.heapify(deltas)

        left: list[VertexId] = []
        right: list[VertexId] = []

        def remove(v: VertexId) -> None:
            remaining.discard(v)
            for w in graph.neighborhood(v):
                if w in remaining:
                    in_deg[w] -= 1
                    heapq.heappush(deltas, (in_deg[w] - out_deg[w], w))
                    if in_deg[w] == 0:
                        heapq.heappush(sources, w)
            for w in graph.predecessors(v):
                if w in remaining:
                    out_deg[w] -= 1
                    heapq.heappush(deltas, (in_deg[w] - out_deg[w], w))
                    if out_deg[w] == 0:
                        heapq.heappush(sinks, w)

        while remaining:
            while sinks or sources:
                while sinks:
                    v = heapq.heappop(sinks)
                    if v in remaining and out_deg[v] == 0:
                        remove(v)
                        right.append(v)
                while sources:
                    v = heapq.heappop(sources)
                    if v in remaining and in_deg[v] == 0:
                        remove(v)
                        left.append(v)
            while remaining:
                key, u = heapq.heappop(deltas)
                if u in remaining and key == in_deg[u] - out_deg[u]:
                    remove(u)
                    left.append(u)
                    break

        right.reverse()
        return left + right
