from __future__ import annotations

import logging

from ..algo.ordering import sort_by_indegree_asc
from ..graph.digraph import DiGraph, VertexId
from .base import FeedbackArcSetHeuristic

logger = logging.getLogger(__name__)


class DivideAndConquerHeuristic(FeedbackArcSetHeuristic):
    """
    Divide-and-conquer ordering by Eades, Smyth and Lin (1989).

        order(G)
            if G has no arcs: S := any vertex sequence
            elif |V(G)| is odd:
                v := vertex of minimal indegree; S := v + order(G - v)
            else:
                sort V(G) by non-decreasing indegree v1..vn
                S := order(G[v1..vn/2]) + order(G[vn/2+1..vn])

    The feedback arc set is every leftward arc of S.

    The odd case tests the vertex count, as in the published procedure.
    Variants that branch on an odd edge count instead are not followed.
    """

    name = "divide_and_conquer"
    description = "Eades-Smyth-Lin divide-and-conquer ordering by indegree."

    def ordering(self, graph: DiGraph) -> list[VertexId]:
        out: list[VertexId] = []
        # Explicit work stack instead of recursion; entries are processed
        # left to right so the concatenation order is preserved.
        stack: list[DiGraph] = [graph.copy()]
        while stack:
            g = stack.pop()
            if g.edge_count() == 0:
                out.extend(g.vertices())
                continue

            if g.order() % 2 == 1:
                v = min(g.vertices(), key=lambda x: (g.in_degree(x), x))
                out.append(v)
                g.remove_vertex(v)
                stack.append(g)
                continue

            ranked = sort_by_indegree_asc(g)
            half = len(ranked) // 2
            logger.debug("splitting %d vertices into halves of %d", len(ranked), half)
            stack.append(DiGraph.from_graph(g, ranked[half:]))
            stack.append(DiGraph.from_graph(g, ranked[:half]))
        return out
