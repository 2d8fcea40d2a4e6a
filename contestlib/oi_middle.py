"""Solutions to problems from the middle rounds of the Polish Olympiad archive."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from collections.abc import Iterable, Sequence
from math import isqrt

_INFINITY = 10_000_000
_CAP = 10**9 + 1


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


def _rooted(adjacency: list[list[int]], root: int, root_parent: int):
    """Return a preorder from ``root`` and the parent of every vertex."""
    parent = [0] * len(adjacency)
    parent[root] = root_parent
    order = [root]
    stack = [root]
    seen = {root, root_parent}
    while stack:
        vertex = stack.pop()
        for neighbour in adjacency[vertex]:
            if neighbour not in seen:
                seen.add(neighbour)
                parent[neighbour] = vertex
                order.append(neighbour)
                stack.append(neighbour)
    return order, parent


def bytecomputer_operations(values: Sequence[int]) -> int | None:
    """Fewest ``x[i+1] += x[i]`` operations making a sequence of -1/0/1 non-decreasing.

    Returns ``None`` when it cannot be done.
    """
    if not values:
        raise ValueError("values must not be empty")
    if any(v not in (-1, 0, 1) for v in values):
        raise ValueError("values must be -1, 0 or 1")
    negative = zero = positive = _INFINITY
    if values[0] == -1:
        negative = 0
    elif values[0] == 0:
        zero = 0
    else:
        positive = 0
    for value in values[1:]:
        if value == -1:
            negative, zero, positive = negative, _INFINITY, positive + 2
        elif value == 0:
            negative, zero, positive = negative + 1, min(negative, zero), positive + 1
        else:
            negative, zero, positive = (
                negative + 2,
                negative + 1,
                min(negative, zero, positive),
            )
    best = min(negative, zero, positive)
    return best if best < _INFINITY else None


def arch_crew_size(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Smallest crew that can always build arches ahead of the king touring a tree from 1."""
    adjacency = _adjacency(n, edges)
    order, parent = _rooted(adjacency, 1, 1)

    def needed(crew: int) -> int:
        extra = [0] * (n + 1)
        for vertex in reversed(order):
            total = sum(extra[c] + 1 for c in adjacency[vertex] if c != parent[vertex])
            extra[vertex] = max(0, total - crew)
        return extra[1]

    low, high = 0, n
    while low <= high:
        middle = (low + high) // 2
        if needed(middle) == 0:
            high = middle - 1
        else:
            low = middle + 1
    return high + 1


def anthill_eaten(
    n: int, groups: Iterable[int], k: int, edges: Sequence[tuple[int, int]]
) -> int:
    """Number of ants eaten by the anteater on the first corridor.

    Ant groups of the given sizes enter at every leaf chamber and split evenly
    at each junction; a group of exactly ``k`` ants reaching the first corridor
    is eaten.
    """
    if not edges:
        raise ValueError("the anthill needs at least one corridor")
    sizes = sorted(groups)
    adjacency = _adjacency(n, edges)
    degree = [len(neighbours) for neighbours in adjacency]
    first, second = edges[0]
    low = [0] * (n + 1)
    high = [0] * (n + 1)
    pass_low = [0] * (n + 1)
    pass_high = [0] * (n + 1)
    for end in (first, second):
        low[end] = degree[end] * k
        high[end] = degree[end] * (k + 1)
        pass_low[end] = (degree[end] - 1) * k
        pass_high[end] = (degree[end] - 1) * (k + 1)
    for root, other in ((first, second), (second, first)):
        order, parent = _rooted(adjacency, root, other)
        for vertex in order[1:]:
            p = parent[vertex]
            low[vertex] = min(pass_low[p] * degree[vertex], _CAP)
            high[vertex] = min(pass_high[p] * degree[vertex], _CAP)
            pass_low[vertex] = min(pass_low[p] * (degree[vertex] - 1), _CAP)
            pass_high[vertex] = min(pass_high[p] * (degree[vertex] - 1), _CAP)

    from bisect import bisect_left, bisect_right

    eaten = 0
    for vertex in range(1, n + 1):
        if degree[vertex] == 1:
            count = bisect_right(sizes, high[vertex] - 1) - bisect_left(sizes, low[vertex])
            eaten += count * k
    return eaten


def bird_tiredness(heights: Sequence[int], strengths: Iterable[int]) -> list[int]:
    """Least tiredness of a bird flying across the trees for each jump strength."""
    n = len(heights)
    tab = [0, *heights]
    answers = []
    for strength in strengths:
        if strength < 1:
            raise ValueError("strength must be positive")
        dp = [0] * (n + 1)
        if n == 0:
            answers.append(0)
            continue
        same: deque[int] = deque([1])
        worse: deque[int] = deque()

        def push(queue: deque[int], j: int) -> None:
            while queue and tab[j] >= tab[queue[-1]]:
                queue.pop()
            queue.append(j)

        for j in range(2, n + 1):
            if not same:
                same, worse = worse, deque()
            best = same[0]
            if tab[j] < tab[best]:
                dp[j] = dp[best]
                push(same, j)
            else:
                dp[j] = dp[best] + 1
                push(worse, j)
            if j >= strength + 1:
                for queue in (same, worse):
                    if queue and queue[0] == j - strength:
                        queue.popleft()
        answers.append(dp[n])
    return answers


def best_cinema_value(films: Sequence[int], values: Sequence[int]) -> int:
    """Best total value of a run of days where films seen twice count as zero.

    ``films`` lists the film shown each day (1-based into ``values``).
    """
    n, m = len(films), len(values)
    offset = 1
    while offset <= n:
        offset *= 2
    best = [0] * (2 * offset)
    total = [0] * (2 * offset)

    def update(value: int, position: int) -> None:
        node = position + offset
        best[node] = total[node] = value
        node //= 2
        while node:
            left, right = 2 * node, 2 * node + 1
            total[node] = total[left] + total[right]
            best[node] = max(best[left], total[left], total[left] + best[right], total[node])
            node //= 2

    positions: list[list[int]] = [[] for _ in range(m + 1)]
    for day, film in enumerate(films, 1):
        if not 1 <= film <= m:
            raise ValueError(f"film {film} outside 1..{m}")
        positions[film].append(day)
    for film in range(1, m + 1):
        occurrences = positions[film]
        if len(occurrences) > 0:
            update(values[film - 1], occurrences[0])
        if len(occurrences) > 1:
            update(-values[film - 1], occurrences[1])
    result = best[1]
    seen = [0] * (m + 1)
    for day, film in enumerate(films, 1):
        update(0, day)
        occurrences = positions[film]
        index = seen[film]
        if index + 1 < len(occurrences):
            update(values[film - 1], occurrences[index + 1])
        if index + 2 < len(occurrences):
            update(-values[film - 1], occurrences[index + 2])
        seen[film] += 1
        result = max(result, best[1])
    return result


def longest_wolf_pits(weights: Sequence[int], budget: int, plank: int) -> int:
    """Longest run of pits that can be filled for ``budget`` after covering ``plank`` of them free."""
    n = len(weights)
    if not 1 <= plank <= n:
        raise ValueError("plank length must be between 1 and the number of pits")
    prefix = [0]
    for weight in weights:
        prefix.append(prefix[-1] + weight)
    covered = [0] * (n + 2)
    for i in range(1, n - plank + 2):
        covered[i] = prefix[i + plank - 1] - prefix[i - 1]
    window: deque[tuple[int, int]] = deque([(covered[1], 1)])
    best = plank
    start = 1
    for i in range(plank + 1, n + 1):
        newest = i - plank + 1
        while window and window[-1][0] <= covered[newest]:
            window.pop()
        window.append((covered[newest], newest))
        while prefix[i] - prefix[start - 1] > (window[0][0] if window else 0) + budget:
            if window and window[0][1] == start:
                window.popleft()
            start += 1
        best = max(best, i - start + 1)
    return best


def parade_length(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Largest number of side streets along a single parade route in a tree."""
    adjacency = _adjacency(n, edges)
    order, parent = _rooted(adjacency, 1, 0)
    dp = [0] * (n + 1)
    result = 0
    for vertex in reversed(order):
        first = second = -1
        count = 0
        for child in adjacency[vertex]:
            if child == parent[vertex]:
                continue
            count += 1
            if dp[child] > first:
                first, second = dp[child], first
            elif dp[child] > second:
                second = dp[child]
        bonus = int(vertex != 1)
        if first != -1:
            result = max(result, first + count - 1 + bonus)
            if second == -1:
                dp[vertex] = max(1, first)
            else:
                result = max(result, first + second + count - 2 + bonus)
                dp[vertex] = max(first + count - 1, count)
    return result


def container_counts(n: int, requests: Iterable[tuple[int, int, int]]) -> list[int]:
    """Containers at each of ``n`` places after ``(start, count, step)`` requests."""
    threshold = isqrt(n)
    counts = [0] * (n + 1)
    by_step: dict[int, list[tuple[int, int]]] = {}
    for start, length, step in requests:
        if step < 1 or length < 1 or start < 1 or start + (length - 1) * step > n:
            raise ValueError(f"request {(start, length, step)} leaves 1..{n}")
        if step >= threshold:
            for place in range(start, start + length * step, step):
                counts[place] += 1
        else:
            by_step.setdefault(step, []).append((start, length))
    for step, items in by_step.items():
        change = [0] * (n + 1)
        for start, length in items:
            change[start] += 1
            if start + step * length <= n:
                change[start + step * length] -= 1
        for residue in range(1, step + 1):
            running = 0
            for place in range(residue, n + 1, step):
                running += change[place]
                counts[place] += running
    return counts[1:]


def strike_components(
    n: int, edges: Iterable[tuple[int, int]], events: Iterable[int]
) -> list[int]:
    """Number of connected parts after each event: ``c`` strikes town c, ``-c`` ends it."""
    adjacency = _adjacency(n, edges)
    order, parent = _rooted(adjacency, 1, 0)
    links = [0] * (n + 1)
    for vertex in order[1:]:
        links[parent[vertex]] += 1
    striking = [False] * (n + 1)
    total = 0
    answers = []
    for event in events:
        town = abs(event)
        _check_vertex(town, n)
        up = parent[town]
        if event > 0:
            striking[town] = True
            total += links[town]
            links[up] -= 1
            if striking[up]:
                total -= 1
        else:
            striking[town] = False
            total -= links[town]
            links[up] += 1
            if striking[up]:
                total += 1
        answers.append(total if striking[1] else total + 1)
    return answers


def lawyer_meeting(
    intervals: Sequence[tuple[int, int]], k: int
) -> tuple[int, list[int]]:
    """Longest meeting ``k`` lawyers can all attend and the 1-based lawyers chosen."""
    if k < 1:
        raise ValueError("k must be positive")
    if k == 1:
        length, chosen = 0, 0
        for index, (a, b) in enumerate(intervals, 1):
            if b - a > length:
                length, chosen = b - a, index
        return length, [chosen] if chosen else []
    heap: list[int] = []
    length, begin = 0, 0
    for a, b in sorted(intervals, key=lambda interval: interval[0]):
        while len(heap) > k - 1:
            heapq.heappop(heap)
        if len(heap) == k - 1 and heap[0] > a:
            candidate = min(b - a, heap[0] - a)
            if candidate > length:
                length, begin = candidate, a
        heapq.heappush(heap, b)
    chosen = [
        index
        for index, (a, b) in enumerate(intervals, 1)
        if a <= begin and b >= begin + length
    ][:k]
    return length, chosen


class TransmitterNetwork:
    """Transmitters on positions ``1..n`` whose signal fades linearly with distance."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("n must be positive")
        self.n = n
        self._sum = [0] * (4 * n)
        self._first = [0] * (4 * n)
        self._step = [0] * (4 * n)
        self._masts: dict[int, tuple[int, int, int, int]] = {}

    def _apply(self, node: int, lo: int, hi: int, first: int, step: int) -> None:
        width = hi - lo + 1
        self._sum[node] += (2 * first + (width - 1) * step) * width // 2
        self._first[node] += first
        self._step[node] += step

    def _push(self, node: int, lo: int, hi: int) -> None:
        first, step = self._first[node], self._step[node]
        if first or step:
            mid = (lo + hi) // 2
            self._apply(2 * node, lo, mid, first, step)
            self._apply(2 * node + 1, mid + 1, hi, first + (mid + 1 - lo) * step, step)
            self._first[node] = self._step[node] = 0

    def _add(self, node, lo, hi, left, right, first, step) -> None:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._apply(node, lo, hi, first + (lo - left) * step, step)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._add(2 * node, lo, mid, left, right, first, step)
        self._add(2 * node + 1, mid + 1, hi, left, right, first, step)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def _total(self, node, lo, hi, left, right) -> int:
        if right < lo or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._sum[node]
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        return self._total(2 * node, lo, mid, left, right) + self._total(
            2 * node + 1, mid + 1, hi, left, right
        )

    def _spread(self, x, s, a, left, right, sign) -> None:
        self._add(1, 1, self.n, left, x, sign * (s - (x - left) * a), sign * a)
        if x + 1 <= right:
            self._add(1, 1, self.n, x + 1, right, sign * (s - a), -sign * a)

    def place(self, position: int, strength: int, decay: int) -> None:
        """Put a transmitter of ``strength`` losing ``decay`` per step at ``position``."""
        _check_vertex(position, self.n)
        if decay < 1:
            raise ValueError("decay must be positive")
        reach = strength // decay
        left = max(1, position - reach)
        right = min(self.n, position + reach)
        self._spread(position, strength, decay, left, right, 1)
        self._masts[position] = (strength, decay, left, right)

    def remove(self, position: int) -> None:
        """Take away the transmitter at ``position``; nothing happens if there is none."""
        mast = self._masts.pop(position, None)
        if mast is not None:
            strength, decay, left, right = mast
            self._spread(position, strength, decay, left, right, -1)

    def average(self, left: int, right: int) -> int:
        """Average signal, rounded down, over positions ``left .. right``."""
        _check_vertex(left, self.n)
        _check_vertex(right, self.n)
        if left > right:
            raise ValueError(f"empty range [{left}, {right}]")
        return self._total(1, 1, self.n, left, right) // (right - left + 1)


def diversity(grid: Sequence[Sequence[int]], k: int) -> tuple[int, int]:
    """Largest and total number of distinct values over all ``k`` x ``k`` squares."""
    if k < 1:
        raise ValueError("k must be positive")
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    best = total = 0
    for top in range(rows - k + 1):
        band = grid[top:top + k]
        counter: Counter[int] = Counter()
        for row in band:
            counter.update(row[:k])
        for left in range(cols - k + 1):
            if left:
                for row in band:
                    old = row[left - 1]
                    counter[old] -= 1
                    if not counter[old]:
                        del counter[old]
                    counter[row[left + k - 1]] += 1
            distinct = len(counter)
            best = max(best, distinct)
            total += distinct
    return best, total