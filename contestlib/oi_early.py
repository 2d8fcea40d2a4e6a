"""Solutions to problems from the early rounds of the Polish Olympiad archive."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence

from contestlib.segment_trees import PointMaxRangeMax, RangeAddPointSum, RangeMaxPointMax
from contestlib.text import prefix_function


class CycleError(ValueError):
    """Raised when task dependencies form a cycle."""


def _check_vertex(vertex: int, n: int) -> None:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} outside 1..{n}")


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_vertex(a, n)
        _check_vertex(b, n)
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def _bfs_tree(adjacency: list[list[int]], root: int) -> tuple[list[int], list[int]]:
    """Return the breadth-first order from ``root`` and the parent of every vertex."""
    parent = [0] * len(adjacency)
    parent[root] = root
    seen = {root}
    order = [root]
    queue = deque([root])
    while queue:
        vertex = queue.popleft()
        for neighbour in adjacency[vertex]:
            if neighbour not in seen:
                seen.add(neighbour)
                parent[neighbour] = vertex
                order.append(neighbour)
                queue.append(neighbour)
    return order, parent


def project_schedule(
    tasks: Sequence[tuple[int, Iterable[int]]], delays: Iterable[tuple[int, int]]
) -> tuple[int, list[bool]]:
    """Shortest completion time of a project and, for each ``(task, delay)``,
    whether delaying that task by that much postpones the whole project.

    ``tasks[i]`` is ``(duration, prerequisites)`` for task ``i + 1``.
    """
    tasks = list(tasks)
    n = len(tasks)
    duration = [0] * (n + 1)
    prerequisites: list[list[int]] = [[] for _ in range(n + 1)]
    dependents: list[list[int]] = [[] for _ in range(n + 1)]
    indegree = [0] * (n + 1)
    for task, (time, required) in enumerate(tasks, 1):
        duration[task] = time
        for before in required:
            _check_vertex(before, n)
            dependents[before].append(task)
            prerequisites[task].append(before)
            indegree[task] += 1

    queue = deque(task for task in range(1, n + 1) if indegree[task] == 0)
    order = []
    while queue:
        task = queue.popleft()
        order.append(task)
        for after in dependents[task]:
            indegree[after] -= 1
            if indegree[after] == 0:
                queue.append(after)
    if len(order) != n:
        raise CycleError("task dependencies contain a cycle")

    ready = [0] * (n + 1)
    finish = [0] * (n + 1)
    for task in order:
        ready[task] = max([0, *(finish[before] for before in prerequisites[task])])
        finish[task] = duration[task] + ready[task]
    total = max(finish[1:], default=0)

    through = [0] * (n + 1)
    for task in reversed(order):
        if not dependents[task]:
            through[task] = finish[task]
        else:
            through[task] = max(
                [0, *(through[u] - ready[u] + finish[task] for u in dependents[task])]
            )

    answers = []
    for task, delay in delays:
        _check_vertex(task, n)
        answers.append(through[task] + delay > total)
    return total, answers


def lecture_bookings(bookings: Iterable[tuple[int, int]]) -> int:
    """Largest total lecture time of pairwise non-overlapping ``(start, end)`` bookings."""
    ordered = sorted(bookings, key=lambda booking: booking[1])
    if not ordered:
        return 0
    last = max(end for _, end in ordered)
    tree = RangeMaxPointMax(last + 1)
    for start, end in ordered:
        value = tree.query(start) + end - start
        tree.update(value, end, last)
    return tree.query(last)


class _AddMaxTree:
    """Range addition with range maximum over positions ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        self._size = size
        self._max = [0] * (4 * size)
        self._add = [0] * (4 * size)

    def add(self, left: int, right: int, value: int) -> None:
        self._update(1, 0, self._size - 1, left, right, value)

    def maximum(self, left: int, right: int) -> int:
        return self._query(1, 0, self._size - 1, left, right)

    def _update(self, node, lo, hi, left, right, value) -> None:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._add[node] += value
            self._max[node] += value
            return
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right, value)
        self._update(2 * node + 1, mid + 1, hi, left, right, value)
        self._max[node] = self._add[node] + max(self._max[2 * node], self._max[2 * node + 1])

    def _query(self, node, lo, hi, left, right):
        if right < lo or hi < left:
            return None
        if left <= lo and hi <= right:
            return self._max[node]
        mid = (lo + hi) // 2
        parts = [
            part
            for part in (
                self._query(2 * node, lo, mid, left, right),
                self._query(2 * node + 1, mid + 1, hi, left, right),
            )
            if part is not None
        ]
        return self._add[node] + max(parts)


def railway_reservations(
    seats: int, requests: Iterable[tuple[int, int, int]]
) -> list[bool]:
    """Accept or refuse each ``(from, to, places)`` request on a train with ``seats`` seats."""
    requests = list(requests)
    if not requests:
        return []
    last = max(to for _, to, _ in requests)
    tree = _AddMaxTree(last + 1)
    answers = []
    for start, stop, places in requests:
        load = tree.maximum(start, stop - 1) if start < stop else 0
        if load + places <= seats:
            answers.append(True)
            if start < stop:
                tree.add(start, stop - 1, places)
        else:
            answers.append(False)
    return answers


def salesman_route(n: int, edges: Iterable[tuple[int, int]], cities: Iterable[int]) -> int:
    """Total length of a route through a tree starting at city 1 and visiting ``cities``."""
    adjacency = _adjacency(n, edges)
    _check_vertex(1, n)
    order, parent = _bfs_tree(adjacency, 1)
    depth = [0] * (n + 1)
    for vertex in order[1:]:
        depth[vertex] = depth[parent[vertex]] + 1

    levels = max(1, n.bit_length())
    up = [parent]
    for _ in range(1, levels):
        previous = up[-1]
        up.append([previous[previous[v]] for v in range(n + 1)])

    def lca(a: int, b: int) -> int:
        if depth[a] < depth[b]:
            a, b = b, a
        difference = depth[a] - depth[b]
        level = 0
        while difference:
            if difference & 1:
                a = up[level][a]
            difference >>= 1
            level += 1
        if a == b:
            return a
        for level in reversed(range(levels)):
            if up[level][a] != up[level][b]:
                a = up[level][a]
                b = up[level][b]
        return parent[a]

    total = 0
    current = 1
    for city in cities:
        _check_vertex(city, n)
        total += depth[city] + depth[current] - 2 * depth[lca(city, current)]
        current = city
    return total


def bus_passengers(stops: Iterable[tuple[int, int, int]]) -> int:
    """Most passengers a bus can collect moving only right and up.

    Each stop is ``(x, y, passengers)``.
    """
    ordered = sorted(stops, key=lambda stop: (stop[1], stop[0]))
    if not ordered:
        return 0
    rank = {x: i for i, x in enumerate(sorted({stop[0] for stop in ordered}), 1)}
    tree = PointMaxRangeMax(len(rank) + 1)
    for x, _, passengers in ordered:
        best = tree.query(1, rank[x])
        tree.update(rank[x], best + passengers)
    return tree.query(1, len(rank))


def template_length(text: str) -> int:
    """Length of the shortest template whose occurrences cover ``text``."""
    if not text:
        raise ValueError("text must not be empty")
    pi = prefix_function(text)
    candidates = []
    f = len(pi) - 1
    while f > 0:
        candidates.append(f)
        f = pi[f] - 1
    if text[0] == text[-1]:
        candidates.append(0)

    worth_checking = [
        longer for shorter, longer in zip(candidates[1:], candidates) if shorter * 2 < longer
    ]
    worth_checking.append(candidates[-1])

    def covers(length: int) -> bool:
        gap = 0
        for border in pi[length + 1:]:
            gap = 0 if border > length else gap + 1
            if gap > length:
                return False
        return True

    for length in reversed(worth_checking):
        if covers(length):
            return length + 1
    return len(text)


def megalopolis(
    n: int, roads: Iterable[tuple[int, int]], events: Iterable[tuple]
) -> list[int]:
    """Answer ``("W", town)`` events with the number of dirt roads from town 1.

    ``roads`` are ``(parent, child)`` pairs of a tree rooted at 1; an event
    ``("A", a, b)`` paves the road between ``a`` and ``b``.
    """
    children: list[list[int]] = [[] for _ in range(n + 1)]
    parent = [0] * (n + 1)
    for a, b in roads:
        _check_vertex(a, n)
        _check_vertex(b, n)
        children[a].append(b)
        parent[b] = a

    depth = [0] * (n + 1)
    entry = [0] * (n + 1)
    preorder = []
    stack = [1]
    while stack:
        vertex = stack.pop()
        entry[vertex] = len(preorder)
        preorder.append(vertex)
        for child in reversed(children[vertex]):
            depth[child] = depth[vertex] + 1
            stack.append(child)
    size = [1] * (n + 1)
    for vertex in reversed(preorder[1:]):
        size[parent[vertex]] += size[vertex]

    paved = RangeAddPointSum(max(len(preorder), 1))
    answers = []
    for event in events:
        kind = event[0]
        if kind == "W":
            town = event[1]
            _check_vertex(town, n)
            answers.append(depth[town] - paved.query(entry[town]))
        elif kind == "A":
            child = event[2]
            _check_vertex(child, n)
            paved.update(1, entry[child], entry[child] + size[child] - 1)
        else:
            raise ValueError(f"unknown event kind {kind!r}")
    return answers


def vouchers(marked: Iterable[int], customers: Iterable[int]) -> list[int]:
    """Numbers of the customers who receive a bag marked with a voucher.

    Each customer buys, for their chosen count ``a``, the ``a`` smallest unsold
    multiples of ``a``; customers are numbered by the bags they take.
    """
    marked_set = set(marked)
    limit = max(marked_set, default=0)
    state = [0] * (limit + 1)
    for bag in marked_set:
        state[bag] = 1
    next_start: dict[int, int] = defaultdict(int)
    served = 0
    winners = []
    for count in customers:
        taken = 1
        index = next_start[count] + count
        while taken <= count and index <= limit:
            if state[index] == 1:
                state[index] = -1
                winners.append(served + taken)
                taken += 1
            elif state[index] == 0:
                state[index] = -1
                taken += 1
            if taken <= count:
                index += count
        next_start[count] = index
        served += count
    return winners


def poster_count(buildings: Iterable[tuple[int, int]]) -> int:
    """Fewest posters covering a skyline of ``(width, height)`` buildings."""
    stack: list[int] = []
    posters = 0
    for _, height in buildings:
        while stack and height < stack[-1]:
            stack.pop()
        if not stack or height > stack[-1]:
            stack.append(height)
            posters += 1
    return posters


def guild_assignment(n: int, edges: Iterable[tuple[int, int]]) -> list[str] | None:
    """Assign each town ``"S"`` or ``"K"`` so that every town has a neighbour of
    the other guild; ``None`` when some town has no neighbour at all."""
    adjacency = _adjacency(n, edges)
    if any(not adjacency[v] for v in range(1, n + 1)):
        return None
    kind: list[str | None] = [None] * (n + 1)
    for root in range(1, n + 1):
        if kind[root] is not None:
            continue
        kind[root] = "S"
        stack = [(root, iter(adjacency[root]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if kind[neighbour] is None:
                    kind[neighbour] = "K" if kind[vertex] == "S" else "S"
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
    return kind[1:]


def longest_pilot_run(tolerance: int, speeds: Iterable[int]) -> int:
    """Longest run of speeds whose maximum and minimum differ by at most ``tolerance``."""
    highs: deque[tuple[int, int]] = deque()
    lows: deque[tuple[int, int]] = deque()
    best = 1
    start = 1
    for position, speed in enumerate(speeds, 1):
        while highs and highs[-1][0] <= speed:
            highs.pop()
        highs.append((speed, position))
        while lows and lows[-1][0] >= speed:
            lows.pop()
        lows.append((speed, position))
        while highs[0][0] - lows[0][0] > tolerance:
            if highs[0][1] == start:
                highs.popleft()
            if lows[0][1] == start:
                lows.popleft()
            start += 1
        best = max(best, position - start + 1)
    return best


def dynamite_time(
    charges: Sequence[bool], edges: Iterable[tuple[int, int]], fuses: int
) -> int:
    """Shortest time in which ``fuses`` lit chambers blow up every charged chamber.

    ``charges[i]`` tells whether chamber ``i + 1`` holds dynamite; the corridors
    ``edges`` form a tree.
    """
    n = len(charges)
    if n == 0:
        return 0
    charged = [False, *map(bool, charges)]
    adjacency = _adjacency(n, edges)
    order, parent = _bfs_tree(adjacency, 1)
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for vertex in order[1:]:
        children[parent[vertex]].append(vertex)
    infinity = 10**9

    def fires_needed(radius: int) -> int:
        far = [-1] * (n + 1)
        near = [infinity] * (n + 1)
        count = 0
        for vertex in reversed(order):
            uncovered = 0 if charged[vertex] else -1
            fire = infinity
            for child in children[vertex]:
                if far[child] != -1:
                    uncovered = max(uncovered, far[child] + 1)
                fire = min(fire, near[child] + 1)
            far[vertex] = uncovered
            near[vertex] = fire
            if uncovered == -1:
                continue
            if vertex == 1:
                if uncovered + fire > radius:
                    count += 1
            elif uncovered + fire <= radius:
                far[vertex] = -1
            elif uncovered == radius:
                near[vertex] = 0
                far[vertex] = -1
                count += 1
        return count

    low, high = 0, n
    while low <= high:
        radius = (low + high) // 2
        if fires_needed(radius) <= fuses:
            high = radius - 1
        else:
            low = radius + 1
    return high + 1


def lollipop_pieces(
    pattern: str, queries: Iterable[int]
) -> list[tuple[int, int] | None]:
    """For each price, a 1-based segment ``(left, right)`` of the lollipop worth it.

    ``T`` pieces cost 2 and all others 1; ``None`` marks an impossible price.
    """
    weights = [2 if piece == "T" else 1 for piece in pattern]
    n = len(weights)
    segments: dict[int, tuple[int, int]] = {}

    def fill(left: int, right: int, total: int) -> None:
        while True:
            segments[total] = (left, right)
            if left >= right:
                return
            if weights[left - 1] == 2:
                left += 1
            elif weights[right - 1] == 2:
                right -= 1
            else:
                left += 1
                right -= 1
            total -= 2

    total = sum(weights)
    if n:
        fill(1, n, total)
    ones = [i for i, weight in enumerate(weights, 1) if weight == 1]
    if ones:
        first, last = ones[0], ones[-1]
        if first - 1 < n - last:
            fill(first + 1, n, total - 2 * (first - 1) - 1)
        else:
            fill(1, last - 1, total - 2 * (n - last) - 1)
    return [segments.get(price) if price > 0 else None for price in queries]


def longest_temperature_run(ranges: Sequence[tuple[int, int]]) -> int:
    """Longest run of days whose ``(low, high)`` ranges allow a non-decreasing temperature."""
    lows = [low for low, _ in ranges]
    highs = [high for _, high in ranges]
    n = len(lows)
    if n == 0:
        raise ValueError("ranges must not be empty")

    window: deque[int] = deque()

    def push(day: int) -> None:
        while window and lows[window[-1]] <= lows[day]:
            window.pop()
        window.append(day)

    start = end = 0
    push(0)
    run = best = 1
    while end < n - 1:
        if lows[window[0]] <= highs[end + 1]:
            end += 1
            run += 1
            push(end)
        else:
            if run != 1:
                run -= 1
            if window and window[0] == start:
                window.popleft()
            start += 1
            if start > end:
                end += 1
                push(end)
        best = max(best, run)
    return best