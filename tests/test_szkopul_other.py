import pytest

from contestlib import szkopul_other as so


def test_largest_triangle_set():
    assert so.largest_triangle_set([5] * 6) == 6
    sticks = [1, 2, 3, 4, 5, 8, 13]
    assert so.largest_triangle_set(sticks) == so.largest_triangle_set(sticks[::-1])
    assert so.largest_triangle_set([1, 2]) == 0


def test_smallest_radius_monotone():
    assert so.smallest_radius(1) == 1
    radii = [so.smallest_radius(m) for m in (5, 20, 50, 100)]
    assert radii == sorted(radii)


def test_count_rectangles():
    assert so.count_rectangles(1) == 1
    assert so.count_rectangles(4) == 5
    values = [so.count_rectangles(n) for n in range(1, 20)]
    assert values == sorted(values)


def test_tetris():
    stack = [(3, 2)] * 4
    assert so.tetris_height(stack) == len(stack)
    assert so.tetris_height([(2, 0), (2, 5)]) == 1
    assert so.tetris_height([]) == 0


def test_directions():
    assert so.count_directions([(1, 2), (2, 4), (3, 6)]) == 1
    assert so.count_directions([(0, 0)]) == 0
    pts = [(1, 1), (-1, -1), (1, 0), (-1, 0)]
    assert so.count_directions(pts) == len(pts)


def test_tower_positions():
    diameters = [5, 6, 4, 3, 6, 2, 3]
    discs = [1, 3, 5, 6, 7]
    result = so.tower_positions(diameters, discs)
    assert result == sorted(result)
    assert all(0 <= k <= len(diameters) for k in result)
    assert result[-1] == len(diameters)


def test_nearest_plot():
    positions = [1, 5, 9]
    assert so.nearest_plot_distances(positions, positions) == [0, 0, 0]
    with pytest.raises(ValueError):
        so.nearest_plot_distances([], [1])


def test_fishing_gap():
    positions = [1, 2, 4, 8, 9]
    gaps = [so.max_fishing_gap(positions, w) for w in (2, 3, 4)]
    assert gaps == sorted(gaps, reverse=True)
    assert so.max_fishing_gap(positions, 2) == positions[-1] - positions[0]


def test_missing_stamps():
    owned = [1, 4, 7]
    assert so.missing_stamps(owned, [4, 1]) == 0
    wanted = [2, 3, 5]
    assert so.missing_stamps(owned, wanted) == len(wanted)