from __future__ import annotations

import random as _random
from enum import Enum
from typing import Iterable, Iterator, Optional

import networkx as nx

from ..errors import GraphError, UnknownVertexError

VertexId = int
Edge = tuple[int, int]


class Direction(str, Enum):
    INBOUND = "inbound"
    OUTBOUND = "outbound"


class DiGraph:
    """
    Directed graph stored as adjacency lists.

    Out-neighbours keep insertion order and never contain duplicates. A
    reverse index of in-neighbours is maintained alongside so in-degrees are
    O(1). vertices() is always reported in ascending id order.
    """

    def __init__(self) -> None:
        self._succ: dict[VertexId, list[VertexId]] = {}
        self._pred: dict[VertexId, list[VertexId]] = {}

    # ---- creation ----

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> "DiGraph":
        g = cls()
        for e in edges:
            g.add_edge(e)
        return g

    @classmethod
    def from_vertices_and_edges(cls, vertices: Iterable[VertexId], edges: Iterable[Edge]) -> "DiGraph":
        g = cls()
        for v in vertices:
            g.add_vertex(v)
        for e in edges:
            g.add_edge(e)
        return g

    @classmethod
    def from_graph(cls, graph: "DiGraph", vertices_to_keep: Iterable[VertexId]) -> "DiGraph":
        """Induced subgraph on vertices_to_keep (kept vertices are present even if isolated)."""
        keep = list(vertices_to_keep)
        keep_set = set(keep)
        edges = [
            (u, v)
            for u in graph.vertices()
            if u in keep_set
            for v in graph.neighborhood(u)
            if v in keep_set
        ]
        return cls.from_vertices_and_edges(keep, edges)

    @classmethod
    def random(cls, n: int, p: float, rng: Optional[_random.Random] = None) -> "DiGraph":
        """G(n, p) digraph on 0..n-1 without self-loops."""
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"Edge probability must be within [0, 1], got {p}")
        rng = rng or _random.Random()
        g = cls()
        for u in range(n):
            g.add_vertex(u)
        for u in range(n):
            for v in range(n):
                if u == v:
                    continue
                if p > rng.random():
                    g.add_edge((u, v))
        return g

    @classmethod
    def complete(cls, n: int) -> "DiGraph":
        """Acyclic tournament on 0..n-1: u -> v for every u < v."""
        g = cls()
        for u in range(n):
            g.add_vertex(u)
            for v in range(u + 1, n):
                g.add_edge((u, v))
        return g

    def to_networkx(self) -> nx.DiGraph:
        """networkx view with nodes added in ascending id order."""
        g = nx.DiGraph()
        g.add_nodes_from(self.vertices())
        g.add_edges_from(self.all_edges())
        return g

    def copy(self) -> "DiGraph":
        g = DiGraph()
        g._succ = {v: list(ns) for v, ns in self._succ.items()}
        g._pred = {v: list(ns) for v, ns in self._pred.items()}
        return g

    # ---- information ----

    def order(self) -> int:
        return len(self._succ)

    def __len__(self) -> int:
        return self.order()

    def __contains__(self, v: object) -> bool:
        return v in self._succ

    def __iter__(self) -> Iterator[VertexId]:
        return iter(self.vertices())

    def __repr__(self) -> str:
        return f"DiGraph(order={self.order()}, edges={self.edge_count()})"

    def degree(self, u: VertexId) -> int:
        """Out-degree of u."""
        if u not in self._succ:
            raise UnknownVertexError(u)
        return len(self._succ[u])

    def in_degree(self, u: VertexId) -> int:
        if u not in self._pred:
            raise UnknownVertexError(u)
        return len(self._pred[u])

    def edge_count(self) -> int:
        return sum(len(ns) for ns in self._succ.values())

    def vertices(self) -> list[VertexId]:
        return sorted(self._succ)

    def edges(self, v: VertexId, direction: Direction = Direction.OUTBOUND) -> list[Edge]:
        if v not in self._succ:
            raise UnknownVertexError(v)
        if direction == Direction.OUTBOUND:
            return [(v, w) for w in self._succ[v]]
        return [(w, v) for w in self._pred[v]]

    def all_edges(self) -> list[Edge]:
        return [(u, v) for u in self.vertices() for v in self._succ[u]]

    def neighborhood(self, v: VertexId) -> tuple[VertexId, ...]:
        return tuple(self._succ.get(v, ()))

    def predecessors(self, v: VertexId) -> tuple[VertexId, ...]:
        return tuple(self._pred.get(v, ()))

    def has_edge(self, u: VertexId, v: VertexId) -> bool:
        ns = self._succ.get(u)
        return ns is not None and v in ns

    def is_cyclic(self) -> bool:
        from ..algo.cycle import CycleDetection

        return CycleDetection(self).is_cyclic()

    def edges_from_to(self, from_partition: set[VertexId], to_partition: set[VertexId]) -> set[Edge]:
        """All edges that start in from_partition and end in to_partition."""
        return {
            (u, v)
            for u in from_partition
            for v in self._succ.get(u, ())
            if v in to_partition
        }

    def random_vertex(self, rng: Optional[_random.Random] = None) -> VertexId:
        if not self._succ:
            raise GraphError("Cannot pick a vertex from an empty graph")
        return (rng or _random).choice(self.vertices())

    # ---- mutation ----

    def add_vertex(self, v: VertexId) -> None:
        self._succ.setdefault(v, [])
        self._pred.setdefault(v, [])

    def add_edge(self, e: Edge) -> None:
        u, v = e
        self.add_vertex(u)
        self.add_vertex(v)
        if v not in self._succ[u]:
            self._succ[u].append(v)
            self._pred[v].append(u)

    def remove_vertex(self, v: VertexId) -> None:
        if v not in self._succ:
            return
        for w in self._succ[v]:
            if w != v:
                self._pred[w].remove(v)
        for w in self._pred[v]:
            if w != v:
                self._succ[w].remove(v)
        del self._succ[v]
        del self._pred[v]

    def remove_edge(self, e: Edge) -> None:
        u, v = e
        ns = self._succ.get(u)
        if ns is None or v not in ns:
            return
        ns.remove(v)
        self._pred[v].remove(u)
