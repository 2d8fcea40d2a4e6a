"""Graph traversals, strongly connected components and shortest paths."""

from __future__ import annotations

import heapq
from collections import defaultdict, deque
from collections.abc import Hashable, Iterable


def _undirected(edges: Iterable[tuple[Hashable, Hashable]]) -> dict:
    adjacency: dict = defaultdict(list)
    for a, b in edges:
        adjacency[a].append(b)
        if a != b:
            adjacency[b].append(a)
    return adjacency


def bfs_order(edges, start) -> list:
    """Return the vertices of an undirected graph in breadth-first order from ``start``."""
    adjacency = _undirected(edges)
    visited = {start}
    queue = deque([start])
    order = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour in adjacency[vertex]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def _preorder(adjacency, root, visited, out) -> None:
    visited.add(root)
    out.append(root)
    stack = [iter(adjacency[root])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                out.append(neighbour)
                stack.append(iter(adjacency[neighbour]))
                break
        else:
            stack.pop()


def _postorder(adjacency, root, visited, out) -> None:
    visited.add(root)
    stack = [(root, iter(adjacency[root]))]
    while stack:
        vertex, neighbours = stack[-1]
        for neighbour in neighbours:
            if neighbour not in visited:
                visited.add(neighbour)
                stack.append((neighbour, iter(adjacency[neighbour])))
                break
        else:
            stack.pop()
            out.append(vertex)


def dfs_order(edges, start) -> list:
    """Return the vertices of an undirected graph in depth-first preorder from ``start``."""
    order: list = []
    _preorder(_undirected(edges), start, set(), order)
    return order


def _check_vertex(vertex: int, n: int) -> None:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} outside 1..{n}")


def strongly_connected_components(n: int, edges) -> list[list[int]]:
    """Return the strongly connected components of a directed graph on ``1..n``.

    Components come in topological order of the condensation; each lists its
    vertices in the order a depth-first search of the reversed graph meets them.
    """
    forward: dict = defaultdict(list)
    backward: dict = defaultdict(list)
    for a, b in edges:
        _check_vertex(a, n)
        _check_vertex(b, n)
        forward[a].append(b)
        backward[b].append(a)

    finished: list[int] = []
    visited: set[int] = set()
    for vertex in range(1, n + 1):
        if vertex not in visited:
            _postorder(forward, vertex, visited, finished)

    components = []
    assigned: set[int] = set()
    for vertex in reversed(finished):
        if vertex not in assigned:
            component: list[int] = []
            _preorder(backward, vertex, assigned, component)
            components.append(component)
    return components


def dijkstra(n: int, edges, source: int) -> dict[int, int | None]:
    """Shortest distances from ``source`` in an undirected weighted graph on ``1..n``.

    ``edges`` holds ``(a, b, weight)`` triples. Unreachable vertices map to ``None``.
    """
    _check_vertex(source, n)
    adjacency: dict = defaultdict(list)
    for a, b, weight in edges:
        _check_vertex(a, n)
        _check_vertex(b, n)
        if weight < 0:
            raise ValueError(f"negative edge weight {weight}")
        adjacency[a].append((b, weight))
        if a != b:
            adjacency[b].append((a, weight))

    distance: dict[int, int] = {source: 0}
    heap = [(0, source)]
    while heap:
        d, vertex = heapq.heappop(heap)
        if d != distance[vertex]:
            continue
        for neighbour, weight in adjacency[vertex]:
            candidate = d + weight
            if neighbour not in distance or candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return {vertex: distance.get(vertex) for vertex in range(1, n + 1)}