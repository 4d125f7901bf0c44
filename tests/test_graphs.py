import random

import pytest

from algokit.graphs import bfs_order, dfs_order, shortest_distance, shortest_distances


def _random_graph(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 12)
    edges = [
        (rng.randint(1, n), rng.randint(1, n), rng.randint(0, 20))
        for _ in range(rng.randint(0, 20))
    ]
    return n, edges


def test_triangle_prefers_two_hops():
    edges = [(1, 2, 5), (2, 3, 1), (1, 3, 10)]
    assert shortest_distance(3, edges) == 6


def test_source_is_zero_and_unreachable_is_none():
    distances = shortest_distances(4, [(1, 2, 7)])
    assert distances[1] == 0
    assert distances[2] == 7
    assert distances[3] is None
    assert shortest_distance(4, [(1, 2, 7)]) is None


def test_distance_is_symmetric():
    edges = [(1, 2, 4), (2, 3, 2), (3, 4, 9), (1, 4, 20)]
    assert shortest_distance(4, edges, 1, 4) == shortest_distance(4, edges, 4, 1)


@pytest.mark.parametrize("seed", range(30))
def test_distances_satisfy_edge_relaxation(seed):
    n, edges = _random_graph(seed)
    dist = shortest_distances(n, edges)
    for a, b, w in edges:
        assert (dist[a] is None) == (dist[b] is None)
        if dist[a] is not None:
            assert dist[b] <= dist[a] + w
            assert dist[a] <= dist[b] + w


@pytest.mark.parametrize("seed", range(30))
def test_every_distance_is_witnessed_by_an_edge(seed):
    n, edges = _random_graph(seed)
    dist = shortest_distances(n, edges)
    for node, d in dist.items():
        if node == 1 or d is None:
            continue
        witnesses = [
            (a, b, w)
            for a, b, w in edges
            if (b == node and dist[a] is not None and dist[a] + w == d)
            or (a == node and dist[b] is not None and dist[b] + w == d)
        ]
        assert witnesses


def test_rejects_bad_nodes_and_weights():
    with pytest.raises(ValueError):
        shortest_distances(3, [(1, 4, 1)])
    with pytest.raises(ValueError):
        shortest_distances(3, [(1, 2, -1)])
    with pytest.raises(ValueError):
        shortest_distances(3, [], source=0)
    with pytest.raises(ValueError):
        shortest_distance(3, [], target=5)


DIAMOND = {1: [2, 3], 2: [4], 3: [4], 4: []}


def test_bfs_diamond():
    assert bfs_order(DIAMOND, 1) == [1, 2, 3, 4]


def test_dfs_diamond():
    assert dfs_order(DIAMOND, 1) == [1, 2, 4, 3]


def test_traversals_visit_reachable_nodes_once():
    graph = {1: [2, 5], 2: [1, 3], 3: [2, 1], 5: [], 6: [1]}
    for order in (dfs_order(graph, 1), bfs_order(graph, 1)):
        assert order[0] == 1
        assert len(order) == len(set(order))
        assert set(order) == {1, 2, 3, 5}


def test_path_graph_orders_agree():
    chain = {n: [n + 1] for n in range(1, 10)}
    assert dfs_order(chain, 1) == bfs_order(chain, 1) == list(range(1, 11))


def test_isolated_start():
    assert dfs_order({}, 7) == [7]
    assert bfs_order({}, 7) == [7]