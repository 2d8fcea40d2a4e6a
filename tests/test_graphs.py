from collections import defaultdict

import pytest

from contestlib.graphs import (
    bfs_order,
    dfs_order,
    dijkstra,
    strongly_connected_components,
)

TREE = [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6)]


def _directed_reach(edges, start):
    adjacency = defaultdict(list)
    for a, b in edges:
        adjacency[a].append(b)
    seen = {start}
    stack = [start]
    while stack:
        v = stack.pop()
        for w in adjacency[v]:
            if w not in seen:
                seen.add(w)
                stack.append(w)
    return seen


def test_bfs_on_path_follows_path():
    assert bfs_order([(1, 2), (2, 3), (3, 4)], 1) == [1, 2, 3, 4]


def test_bfs_levels_before_deeper_levels():
    order = bfs_order(TREE, 1)
    assert order[0] == 1
    assert set(order[1:3]) == {2, 3}
    assert set(order[3:]) == {4, 5, 6}


def test_bfs_only_reachable_and_self_loop():
    order = bfs_order([(1, 1), (1, 2), (3, 4)], 1)
    assert sorted(order) == [1, 2]


def test_dfs_goes_deep_first():
    assert dfs_order(TREE, 1) == [1, 2, 4, 5, 3, 6]


def test_dfs_visits_each_reachable_vertex_once():
    edges = [(1, 2), (2, 3), (3, 1), (3, 4), (5, 6)]
    order = dfs_order(edges, 1)
    assert len(order) == len(set(order))
    assert set(order) == {1, 2, 3, 4}


def test_scc_cycle_and_singleton():
    components = strongly_connected_components(4, [(1, 2), (2, 3), (3, 1), (3, 4)])
    assert sorted(sorted(c) for c in components) == [[1, 2, 3], [4]]


def test_scc_partition_and_mutual_reachability():
    edges = [(1, 2), (2, 1), (2, 3), (3, 4), (4, 5), (5, 3), (6, 5), (7, 7)]
    n = 7
    components = strongly_connected_components(n, edges)
    flat = [v for c in components for v in c]
    assert sorted(flat) == list(range(1, n + 1))
    reach = {v: _directed_reach(edges, v) for v in range(1, n + 1)}
    for component in components:
        for a in component:
            for b in component:
                assert b in reach[a]
    for i, first in enumerate(components):
        for second in components[i + 1 :]:
            assert not (first[0] in reach[second[0]] and second[0] in reach[first[0]])


def test_scc_topological_order():
    components = strongly_connected_components(3, [(1, 2), (2, 3)])
    assert components == [[1], [2], [3]]


def test_scc_rejects_bad_vertex():
    with pytest.raises(ValueError):
        strongly_connected_components(2, [(1, 3)])


def test_dijkstra_prefers_shorter_path():
    distances = dijkstra(3, [(1, 2, 5), (2, 3, 7), (1, 3, 20)], 1)
    assert distances[1] == 0
    assert distances[2] == 5
    assert distances[3] == 12


def test_dijkstra_unreachable_is_none():
    distances = dijkstra(4, [(1, 2, 3)], 1)
    assert distances[3] is None and distances[4] is None


def test_dijkstra_respects_edge_relaxation():
    edges = [(1, 2, 4), (1, 3, 1), (3, 2, 2), (2, 4, 1), (3, 4, 6), (4, 5, 3), (5, 5, 2)]
    distances = dijkstra(5, edges, 1)
    for a, b, w in edges:
        assert distances[b] <= distances[a] + w
        assert distances[a] <= distances[b] + w
    assert distances[1] == 0


def test_dijkstra_rejects_negative_weight():
    with pytest.raises(ValueError):
        dijkstra(2, [(1, 2, -1)], 1)