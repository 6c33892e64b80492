from __future__ import annotations

import random

import pytest

from arcset.errors import GraphError, UnknownVertexError
from arcset.graph import DiGraph, Direction


def _wikipedia_scc() -> DiGraph:
    # Example graph from Wikipedia's strongly-connected-components article.
    return DiGraph.from_edges(
        [(1, 2), (2, 3), (2, 5), (2, 6), (3, 4), (3, 7), (4, 3), (4, 8),
         (5, 1), (5, 6), (6, 7), (7, 6), (8, 4), (8, 7)]
    )  # fmt: skip


def test_construct_graph() -> None:
    g = DiGraph()
    assert g.order() == 0
    with pytest.raises(UnknownVertexError):
        g.degree(0)
    # Also usable as a plain KeyError by callers.
    with pytest.raises(KeyError):
        g.in_degree(0)

    g.add_edge((2, 3))
    assert g.order() == 2
    assert len(g) == 2
    assert 3 in g


def test_add_edges_bidirectional_clique() -> None:
    g = DiGraph()
    for u in range(5):
        for v in range(u + 1, 5):
            g.add_edge((u, v))
            g.add_edge((v, u))

    for u in range(5):
        assert g.degree(u) == 4
        assert g.in_degree(u) == 4
        assert not g.has_edge(u, u)
    assert g.edge_count() == 20


def test_neighborhood_ignores_duplicates() -> None:
    g = DiGraph()
    for v in [3, 4, 1, 1, 4]:
        g.add_edge((2, v))

    assert sorted(g.neighborhood(2)) == [1, 3, 4]
    assert g.neighborhood(99) == ()


def test_from_graph_keeps_requested_vertices() -> None:
    sub = DiGraph.from_graph(_wikipedia_scc(), [1, 2, 5, 8])

    assert set(sub.vertices()) == {1, 2, 5, 8}
    assert set(sub.all_edges()) == {(1, 2), (2, 5), (5, 1)}
    assert sub.degree(8) == 0


def test_edges_by_direction() -> None:
    g = _wikipedia_scc()
    assert g.edges(2, Direction.OUTBOUND) == [(2, 3), (2, 5), (2, 6)]
    assert sorted(g.edges(6, Direction.INBOUND)) == [(2, 6), (5, 6), (7, 6)]
    with pytest.raises(UnknownVertexError):
        g.edges(42)


def test_vertices_and_all_edges_are_sorted_by_source() -> None:
    g = DiGraph.from_edges([(5, 1), (3, 2), (1, 5)])
    assert g.vertices() == [1, 2, 3, 5]
    assert g.all_edges() == [(1, 5), (3, 2), (5, 1)]


def test_remove_vertex_drops_incident_edges() -> None:
    g = _wikipedia_scc()
    before = g.edge_count()
    incident = g.degree(3) + g.in_degree(3)

    g.remove_vertex(3)

    assert 3 not in g
    assert g.edge_count() == before - incident
    assert not g.has_edge(2, 3)
    assert all(3 not in g.neighborhood(v) for v in g.vertices())
    g.remove_vertex(3)  # unknown vertex is a no-op


def test_remove_vertex_with_self_loop() -> None:
    g = DiGraph.from_edges([(1, 1), (1, 2), (2, 1)])
    g.remove_vertex(1)
    assert g.vertices() == [2]
    assert g.edge_count() == 0


def test_remove_edge() -> None:
    g = DiGraph.from_edges([(1, 2), (2, 3)])
    g.remove_edge((1, 2))
    g.remove_edge((3, 1))  # absent edge is a no-op
    assert g.all_edges() == [(2, 3)]
    assert g.in_degree(2) == 0
    assert g.order() == 3


def test_edges_from_to() -> None:
    g = _wikipedia_scc()
    edges = g.edges_from_to({1, 2, 5}, {3, 6, 7})
    assert edges == {(2, 3), (2, 6), (5, 6)}


def test_copy_is_independent() -> None:
    g = DiGraph.from_edges([(1, 2)])
    h = g.copy()
    h.add_edge((2, 1))
    assert not g.has_edge(2, 1)
    assert g.in_degree(1) == 0


def test_complete_is_acyclic_tournament() -> None:
    g = DiGraph.complete(6)
    assert g.order() == 6
    assert g.edge_count() == 15
    assert not g.is_cyclic()
    assert DiGraph.complete(1).vertices() == [0]


def test_random_graph_is_seeded_and_loop_free() -> None:
    a = DiGraph.random(20, 0.3, random.Random(7))
    b = DiGraph.random(20, 0.3, random.Random(7))

    assert a.all_edges() == b.all_edges()
    assert a.order() == 20
    assert all(u != v for u, v in a.all_edges())
    assert DiGraph.random(5, 1.0, random.Random(0)).edge_count() == 20
    assert DiGraph.random(5, 0.0, random.Random(0)).edge_count() == 0


@pytest.mark.parametrize("p", [-0.1, 1.5])
def test_random_graph_rejects_bad_probability(p: float) -> None:
    with pytest.raises(ValueError):
        DiGraph.random(3, p)


def test_random_vertex() -> None:
    g = _wikipedia_scc()
    assert g.random_vertex(random.Random(1)) in g
    with pytest.raises(GraphError):
        DiGraph().random_vertex()


def test_to_networkx_mirrors_vertices_and_edges() -> None:
    g = DiGraph.from_vertices_and_edges([9], [(3, 1), (1, 2), (2, 3), (2, 2)])
    nxg = g.to_networkx()
    assert list(nxg.nodes) == [1, 2, 3, 9]
    assert sorted(nxg.edges) == sorted(g.all_edges())
