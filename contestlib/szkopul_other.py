"""Solutions to assorted training problems from the Polish archive."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from fractions import Fraction


def largest_triangle_set(lengths: Iterable[int]) -> int:
    """Largest number of sticks any three of which form a triangle."""
    ordered = sorted(lengths)
    best = 0
    for i in range(len(ordered) - 2):
        limit = ordered[i] + ordered[i + 1]
        last = bisect_left(ordered, limit, i) - 1
        best = max(best, last - i + 1)
    return best


def _lattice_points(radius: int) -> int:
    count = 0
    y = radius
    for x in range(radius + 1):
        while x * x + y * y > radius * radius:
            y -= 1
        count += y
    return 4 * count + 1


def smallest_radius(carrots: int) -> int:
    """Smallest radius whose disc holds at least ``carrots`` lattice points."""
    low, high = 1, 5_000_000
    while low < high:
        middle = (low + high) // 2
        if _lattice_points(middle) >= carrots:
            high = middle
        else:
            low = middle + 1
    return high


def count_rectangles(n: int) -> int:
    """Number of different rectangles that can be built from at most ``n`` squares."""
    total = 0
    side = 1
    while side * side <= n:
        total += n // side - side + 1
        side += 1
    return total


def tetris_height(blocks: Iterable[tuple[int, int]]) -> int:
    """Height of the pile after dropping blocks given as ``(length, position)``."""
    heights: list[int] = []
    for length, position in blocks:
        end = position + length
        if end > len(heights):
            heights.extend([0] * (end - len(heights)))
        level = max(heights[position:end]) + 1
        heights[position:end] = [level] * length
    return max(heights, default=0)


def count_directions(points: Iterable[tuple[float, float]]) -> int:
    """Number of distinct directions from the origin to the given points."""
    quadrants: list[set] = [set() for _ in range(5)]
    for x, y in points:
        if x > 0 and y > 0:
            quadrants[1].add(Fraction(x) / Fraction(y))
        elif x < 0 < y:
            quadrants[2].add(Fraction(x) / Fraction(y))
        elif x < 0 and y < 0:
            quadrants[3].add(Fraction(x) / Fraction(y))
        elif x > 0 > y:
            quadrants[4].add(Fraction(x) / Fraction(y))
        elif x > 0:
            quadrants[0].add(1)
        elif x < 0:
            quadrants[0].add(2)
        elif y > 0:
            quadrants[0].add(3)
        elif y < 0:
            quadrants[0].add(4)
    return sum(len(q) for q in quadrants)


def tower_positions(diameters: Sequence[int], discs: Iterable[int]) -> list[int]:
    """For each disc, the number of tube levels it falls through before stopping."""
    prefix = []
    widest = 0
    for value in diameters:
        widest = max(widest, value)
        prefix.append(widest)
    return [bisect_left(prefix, disc) for disc in discs]


def nearest_plot_distances(positions: Sequence[int], queries: Iterable[int]) -> list[int]:
    """Distance from each query to the nearest of the sorted ``positions``."""
    if not positions:
        raise ValueError("positions must not be empty")
    result = []
    for query in queries:
        index = min(bisect_left(positions, query), len(positions) - 1)
        best = abs(positions[index] - query)
        if index > 0:
            best = min(best, abs(positions[index - 1] - query))
        result.append(best)
    return result


def max_fishing_gap(positions: Sequence[int], anglers: int) -> int:
    """Largest minimal distance between ``anglers`` placed at sorted ``positions``."""
    gaps = [b - a for a, b in zip(positions, positions[1:])]

    def fits(distance: int) -> bool:
        left = anglers - 1
        remaining = distance
        for gap in gaps:
            remaining -= gap
            if remaining <= 0:
                left -= 1
                remaining = distance
                if left == 0:
                    return True
        return False

    low, high = 1, 1_000_000_001
    while low < high:
        middle = (low + high + 1) // 2
        if fits(middle):
            low = middle
        else:
            high = middle - 1
    return low


def missing_stamps(owned: Iterable[int], wanted: Iterable[int]) -> int:
    """Number of wanted stamps not present in the collection."""
    have = set(owned)
    return sum(1 for stamp in wanted if stamp not in have)