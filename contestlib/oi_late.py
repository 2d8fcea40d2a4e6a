"""Solutions to problems from the late rounds of the Polish Olympiad archive."""

from __future__ import annotations

import heapq
from collections import defaultdict, deque
from collections.abc import Iterable, Sequence

from contestlib.graphs import strongly_connected_components

_UNREACHED = 4_200_000
_BOARD = 100


def _check_vertex(vertex: int, n: int) -> None:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} outside 1..{n}")


def star_route(
    n: int, start: int, costs: Sequence[tuple[int, int]]
) -> tuple[int, list[int]]:
    """Cheapest tour of ``n`` stars starting at ``start`` and the order of visits.

    ``costs[i]`` is ``(left, right)``: the price of the ``i + 1``-th jump when it
    goes to a star with a smaller or a larger number.
    """
    costs = list(costs)
    if n < 2:
        raise ValueError("at least two stars are needed")
    if len(costs) != n - 1:
        raise ValueError("there must be exactly n - 1 jump costs")
    _check_vertex(start, n)

    gaps = [abs(left - right) for left, right in costs]
    total = sum(min(left, right) for left, right in costs)
    runs: list[list[int]] = []
    for left, right in costs:
        direction = 0 if left < right else 1
        if runs and runs[-1][1] == direction:
            runs[-1][0] += 1
        else:
            runs.append([1, direction])

    first_count, first_direction = runs[0]
    if first_direction == 0 and first_count >= start:
        limit = start
    elif first_direction == 1 and first_count >= n + 1 - start:
        limit = n + 1 - start
    else:
        limit = 0
    if limit:
        turn = min(range(1, limit + 1), key=lambda i: gaps[i - 1])
        total += gaps[turn - 1]
        runs = [
            [turn - 1, first_direction],
            [1, 1 - first_direction],
            [first_count - turn, first_direction],
            *runs[1:],
        ]
        if runs[2][0] == 0 and len(runs) > 3:
            runs[1][0] += runs[3][0]
            runs[3][0] = 0

    order = [start]
    low, high = 1, n
    for count, direction in runs:
        if count == 0:
            continue
        if direction == 0:
            stop = low + count - 1
            if low <= start <= stop:
                stop += 1
            order.extend(j for j in range(stop, low - 1, -1) if j != start)
            low = stop + 1
        else:
            stop = high - count + 1
            if stop <= start <= high:
                stop -= 1
            order.extend(j for j in range(stop, high + 1) if j != start)
            high = stop - 1
    return total, order


def orient_estates(n: int, edges: Sequence[tuple[int, int]]) -> tuple[int, str]:
    """Orient every road so as to make many strongly connected estates.

    Returns the number of estates and, for each road ``(a, b)``, ``">"`` when
    it leads from ``a`` to ``b`` and ``"<"`` otherwise.
    """
    edges = list(edges)
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for index, (a, b) in enumerate(edges):
        _check_vertex(a, n)
        _check_vertex(b, n)
        adjacency[a].append((b, index))
        adjacency[b].append((a, index))

    forward: list[bool | None] = [None] * len(edges)
    visited = [False] * (n + 1)
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour, index in neighbours:
                if forward[index] is None:
                    forward[index] = vertex == edges[index][0]
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        stack.append((neighbour, iter(adjacency[neighbour])))
                        break
            else:
                stack.pop()

    directed = [
        (a, b) if forward[index] else (b, a) for index, (a, b) in enumerate(edges)
    ]
    estates = len(strongly_connected_components(n, directed))
    return estates, "".join(">" if way else "<" for way in forward)


class _Smallest:
    """The two smallest values seen and where the smallest came from."""

    def __init__(self) -> None:
        self.first = 2_000_000_000
        self.second = 2_000_000_000
        self.index = -1

    def offer(self, value: int, index: int) -> None:
        if value <= self.first:
            self.second = self.first
            self.first = value
            self.index = index
        elif value <= self.second:
            self.second = value


def bakery_cost(shops: Iterable[tuple[int, int, int]]) -> int:
    """Least number of items moved so that each shop keeps a single kind of product.

    Each shop is ``(doughnuts, cakes, rolls)``.
    """
    dmin, pmin, rmin = _Smallest(), _Smallest(), _Smallest()
    last_d = last_p = last_r = -2
    count_d = count_p = count_r = 0
    has_d = has_p = has_r = False
    total = 0
    for i, (d, p, r) in enumerate(shops):
        has_d |= d > 0
        has_p |= p > 0
        has_r |= r > 0
        if d >= p and d >= r:
            count_d += 1
            total += p + r
            last_d = i
            pmin.offer(d - p, i)
            rmin.offer(d - r, i)
        elif p >= d and p >= r:
            count_p += 1
            total += d + r
            last_p = i
            dmin.offer(p - d, i)
            rmin.offer(p - r, i)
        else:
            count_r += 1
            total += p + d
            last_r = i
            pmin.offer(r - p, i)
            dmin.offer(r - d, i)

    clash_dp = dmin.index == pmin.index and count_p == 0 and has_p and count_d == 0 and has_d
    clash_dr = dmin.index == rmin.index and count_d == 0 and has_d and count_r == 0 and has_r
    clash_pr = pmin.index == rmin.index and count_p == 0 and has_p and count_r == 0 and has_r

    if clash_dp or clash_dr or clash_pr:
        if clash_dr:
            total += min(dmin.first + rmin.second, dmin.second + rmin.first)
        elif clash_pr:
            total += min(pmin.first + rmin.second, pmin.second + rmin.first)
    elif last_d == pmin.index and has_d and has_p and count_d == 1 and count_p == 0:
        total += min(pmin.first + dmin.first, pmin.second)
    elif dmin.index == last_p and has_d and has_p and count_d == 0 and count_p == 1:
        total += min(dmin.first + pmin.first, dmin.second)
    elif last_d == rmin.index and has_d and has_r and count_d == 1 and count_r == 0:
        total += min(rmin.first + dmin.first, rmin.second)
    elif dmin.index == last_r and has_d and has_r and count_d == 0 and count_r == 1:
        total += min(rmin.first + dmin.first, dmin.second)
    elif last_p == rmin.index and has_p and has_r and count_p == 1 and count_r == 0:
        total += min(rmin.first + pmin.first, rmin.second)
    elif pmin.index == last_r and has_p and has_r and count_p == 0 and count_r == 1:
        total += min(rmin.first + pmin.first, pmin.second)
    else:
        if count_d == 0 and has_d:
            total += dmin.first
        if count_p == 0 and has_p:
            total += pmin.first
        if count_r == 0 and has_r:
            total += rmin.first
    return total


def platform_jumps(
    width: int, levels: Sequence[Iterable[int]], queries: Iterable[int]
) -> list[int]:
    """Fewest holes to jump over when walking off each queried platform.

    ``levels[i]`` lists the increasing hole positions of platform ``i + 1``,
    each within ``1 .. width``.
    """
    graph: dict[int, list[tuple[int, int]]] = defaultdict(list)
    first_node = [0]
    previous: deque[tuple[int, int]] = deque()
    node = 1

    def link_previous(limit: int | None) -> None:
        while previous and (limit is None or previous[0][0] < limit):
            _, below = previous.popleft()
            graph[node].append((below, 0))
            graph[below + 1].append((node, 1))

    for holes in levels:
        start = node
        first_node.append(start)
        current: deque[tuple[int, int]] = deque()
        for hole in holes:
            if not 1 <= hole <= width:
                raise ValueError(f"hole {hole} outside 1..{width}")
            current.append((hole, node))
            if node != start:
                graph[node].append((node - 1, 1))
            link_previous(hole)
            node += 1
        if node != start:
            graph[node].append((node - 1, 1))
        link_previous(None)
        graph[0].append((node, 0))
        node += 1
        previous = current

    distance = [_UNREACHED] * node
    distance[0] = 0
    heap = [(0, 0)]
    while heap:
        reached, vertex = heapq.heappop(heap)
        if reached > distance[vertex]:
            continue
        for target, cost in graph[vertex]:
            if distance[target] > reached + cost:
                distance[target] = reached + cost
                heapq.heappush(heap, (distance[target], target))

    answers = []
    for platform in queries:
        _check_vertex(platform, len(levels))
        answers.append(distance[first_node[platform]])
    return answers


def board_design(paths: int) -> list[str]:
    """A 100 x 100 board of ``.`` and ``#`` with exactly ``paths`` shortest paths."""
    if paths < 0:
        raise ValueError("paths must not be negative")
    size = _BOARD
    tab = [["#"] * (size + 1) for _ in range(size + 1)]
    for row in tab:
        row[1] = "."

    x = y = size
    while min(x, y) >= 1:
        for _ in range(4):
            tab[max(x, 0)][max(y, 0)] = "."
            x -= 1
        x += 4
        y -= 1
        for _ in range(4):
            tab[max(x, 0)][max(y, 0)] = "."
            x -= 1
        x += 1

    h = size
    while paths:
        digit = paths % 4
        if digit and h - 1 < 1:
            raise ValueError("too many paths for the board")
        if digit == 1:
            row = tab[h]
            for i in range(2, size + 1):
                if row[i] == ".":
                    break
                row[i] = "."
        elif digit == 2:
            row = tab[h - 1]
            for i in range(2, size + 1):
                if row[i] == ".":
                    break
                row[i] = "."
        elif digit == 3:
            row = tab[h - 1]
            for i in range(2, size + 1):
                if row[i] == ".":
                    tab[h][i - 1] = "."
                    break
                row[i] = "."
        paths //= 4
        h -= 3
    return ["".join(row[1:]) for row in tab[1:]]


def binary_table(operations: Iterable[tuple[int, int, int, int]]) -> list[int]:
    """After each rectangle flip ``(w, x, y, z)``, the fewest flips that clear the table."""
    ones: set[tuple[int, int]] = set()
    answers = []
    for w, x, y, z in operations:
        corners = []
        if w != 1 and x != 1:
            corners.append((w - 1, x - 1))
        if w != 1:
            corners.append((w - 1, z))
        if x != 1:
            corners.append((y, x - 1))
        corners.append((y, z))
        for cell in corners:
            ones ^= {cell}
        answers.append(len(ones))
    return answers


def dwarf_photo_order(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Place ``n`` dwarfs in a row so the listed pairs stand as required.

    Returns the position of each dwarf ``1..n`` or ``None`` when no order exists.
    """
    edges = list(edges)
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_vertex(a, n)
        _check_vertex(b, n)
        adjacency[a].append(b)
        adjacency[b].append(a)
    if not edges:
        return list(range(1, n + 1))

    required = [0] * (n + 1)
    if n >= 2:
        required[2] = len(adjacency[2])
    for vertex in range(3, n + 1):
        required[vertex] = len(adjacency[vertex]) // 2

    position = [0] * (n + 1)
    indegree = [0] * (n + 1)
    outdegree = [0] * (n + 1)
    visited = [False] * (n + 1)
    visited[1] = True
    queue = deque([1])
    placed = 0
    while queue:
        vertex = queue.popleft()
        placed += 1
        position[vertex] = placed
        for neighbour in adjacency[vertex]:
            if not visited[neighbour]:
                outdegree[vertex] += 1
                indegree[neighbour] += 1
            required[neighbour] -= 1
            if required[neighbour] == 0 and not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)

    for vertex in range(3, n + 1):
        if indegree[vertex] != outdegree[vertex]:
            return None
        if not visited[vertex]:
            if adjacency[vertex]:
                return None
            placed += 1
            position[vertex] = placed
    return position[1:]