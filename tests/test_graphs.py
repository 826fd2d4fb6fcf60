import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.disjoint_set import DisjointSet
from algokit.graphs import (
    CycleError,
    DisconnectedGraphError,
    dijkstra,
    floyd,
    prim,
    topsort,
)


@st.composite
def weighted_graphs(draw, max_nodes=6):
    n = draw(st.integers(1, max_nodes))
    node = st.integers(0, n - 1)
    edges = draw(st.lists(st.tuples(node, node, st.integers(0, 20)), max_size=20))
    return n, edges


@st.composite
def dags(draw):
    n = draw(st.integers(1, 8))
    pairs = draw(
        st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)), max_size=20)
    )
    rank = draw(st.permutations(range(n)))
    edges = [(a, b) if rank[a] < rank[b] else (b, a) for a, b in pairs if a != b]
    return n, edges


def test_dijkstra_prefers_longer_cheaper_path():
    assert dijkstra(3, [(0, 1, 1), (1, 2, 1), (0, 2, 5)], 0, 2) == 2


def test_dijkstra_source_equals_target():
    assert dijkstra(4, [(1, 2, 3)], 2, 2) == 0


def test_dijkstra_unreachable():
    with pytest.raises(DisconnectedGraphError):
        dijkstra(3, [(0, 1, 1)], 0, 2)


def test_dijkstra_is_directed():
    with pytest.raises(DisconnectedGraphError):
        dijkstra(2, [(1, 0, 1)], 0, 1)


def test_dijkstra_rejects_negative_weight():
    with pytest.raises(ValueError):
        dijkstra(2, [(0, 1, -1)], 0, 1)


def test_node_out_of_range():
    with pytest.raises(ValueError):
        floyd(2, [(0, 2, 1)])
    with pytest.raises(ValueError):
        topsort(2, [(0, 5)])


@given(weighted_graphs())
def test_dijkstra_agrees_with_floyd(graph):
    n, edges = graph
    matrix = floyd(n, edges)
    for source in range(n):
        for target in range(n):
            if matrix[source][target] == math.inf:
                with pytest.raises(DisconnectedGraphError):
                    dijkstra(n, edges, source, target)
            else:
                assert dijkstra(n, edges, source, target) == matrix[source][target]


@given(weighted_graphs())
def test_floyd_triangle_inequality(graph):
    n, edges = graph
    d = floyd(n, edges)
    for i in range(n):
        assert d[i][i] == 0
        for j in range(n):
            for k in range(n):
                assert d[i][j] <= d[i][k] + d[k][j]
    for u, v, w in edges:
        assert d[u][v] <= w


def test_floyd_handles_negative_edges():
    d = floyd(3, [(0, 1, 4), (1, 2, -2), (0, 2, 5)])
    assert d[0][2] == d[0][1] + d[1][2]
    assert d[2][0] == math.inf


def test_prim_triangle():
    assert prim(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)]) == 3


def test_prim_single_and_empty():
    assert prim(1, []) == 0
    assert prim(0, []) == 0


def test_prim_disconnected():
    with pytest.raises(DisconnectedGraphError):
        prim(3, [(0, 1, 1)])


def _kruskal(n, edges):
    sets = DisjointSet(n)
    total = 0
    for u, v, w in sorted(edges, key=lambda e: e[2]):
        if sets.find(u) != sets.find(v):
            sets.merge(u, v)
            total += w
    return total, sets.size(0) == n


@given(weighted_graphs(max_nodes=7))
def test_prim_matches_kruskal(graph):
    n, edges = graph
    expected, connected = _kruskal(n, edges)
    if connected:
        assert prim(n, edges) == expected
    else:
        with pytest.raises(DisconnectedGraphError):
            prim(n, edges)


@given(dags())
def test_topsort_respects_edges(graph):
    n, edges = graph
    order = topsort(n, edges)
    assert sorted(order) == list(range(n))
    position = {node: i for i, node in enumerate(order)}
    for u, v in edges:
        assert position[u] < position[v]


def test_topsort_no_edges_keeps_node_order():
    assert topsort(4, []) == [0, 1, 2, 3]


def test_topsort_cycle():
    with pytest.raises(CycleError) as info:
        topsort(4, [(0, 1), (1, 2), (2, 1), (2, 3)])
    assert info.value.partial == [0]