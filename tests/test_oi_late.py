import pytest

from contestlib.oi_late import (
    bakery_cost,
    binary_table,
    board_design,
    dwarf_photo_order,
    orient_estates,
    platform_jumps,
    star_route,
)


def test_star_route_small_tour():
    total, order = star_route(3, 2, [(1, 5), (1, 5)])
    assert order == [2, 3, 1]
    assert total == 6


@pytest.mark.parametrize(
    "n, start, costs",
    [
        (2, 1, [(3, 5)]),
        (3, 2, [(1, 5), (1, 5)]),
        (4, 1, [(2, 1), (5, 3), (1, 4)]),
    ],
)
def test_star_route_visits_every_star_once(n, start, costs):
    total, order = star_route(n, start, costs)
    assert order[0] == start
    assert sorted(order) == list(range(1, n + 1))
    assert total >= sum(min(l, r) for l, r in costs)


def test_star_route_rejects_bad_input():
    with pytest.raises(ValueError):
        star_route(1, 1, [])
    with pytest.raises(ValueError):
        star_route(3, 1, [(1, 2)])
    with pytest.raises(ValueError):
        star_route(3, 4, [(1, 2), (1, 2)])


def test_orient_cycle_is_one_estate():
    assert orient_estates(3, [(1, 2), (2, 3), (3, 1)]) == (1, ">>>")


def test_orient_path_gives_separate_estates():
    estates, directions = orient_estates(3, [(1, 2), (2, 3)])
    assert estates == 3
    assert len(directions) == 2
    assert set(directions) <= {"<", ">"}


def test_orient_without_roads():
    assert orient_estates(4, []) == (4, "")


def test_bakery_already_specialised():
    assert bakery_cost([(5, 0, 0), (0, 5, 0), (0, 0, 5)]) == 0


def test_bakery_empty_shops():
    assert bakery_cost([(0, 0, 0), (0, 0, 0)]) == 0


def test_bakery_moves_goods():
    assert bakery_cost([(5, 0, 0), (4, 1, 0), (0, 0, 5)]) == 4


def test_platforms_without_holes_cost_nothing():
    assert platform_jumps(10, [[], [], []], [1, 2, 3]) == [0, 0, 0]


def test_platform_answers_bounded_by_holes():
    levels = [[2, 5], [3], [1, 4, 7]]
    answers = platform_jumps(10, levels, [1, 2, 3])
    for answer, holes in zip(answers, levels):
        assert 0 <= answer <= len(holes)


def test_platform_rejects_bad_query_and_hole():
    with pytest.raises(ValueError):
        platform_jumps(10, [[2]], [2])
    with pytest.raises(ValueError):
        platform_jumps(3, [[5]], [1])


def test_board_shape():
    board = board_design(0)
    assert len(board) == 100
    assert all(len(row) == 100 for row in board)
    assert all(set(row) <= {".", "#"} for row in board)
    assert all(row[0] == "." for row in board)


def test_board_depends_on_paths():
    assert board_design(1) != board_design(0)
    assert board_design(1)[-1] == "." * 100
    assert board_design(7) == board_design(7)


def test_board_rejects_negative():
    with pytest.raises(ValueError):
        board_design(-1)


def test_binary_table_single_cell_toggles():
    assert binary_table([(1, 1, 1, 1), (1, 1, 1, 1)]) == [1, 0]


def test_binary_table_inner_rectangle_touches_four_corners():
    assert binary_table([(2, 2, 3, 3)]) == [4]


def test_binary_table_repeating_everything_clears():
    operations = [(1, 1, 2, 3), (2, 2, 4, 4), (3, 1, 3, 5)]
    answers = binary_table(operations + operations)
    assert answers[-1] == 0
    assert len(answers) == 2 * len(operations)


def test_dwarfs_without_constraints():
    assert dwarf_photo_order(4, []) == [1, 2, 3, 4]


def test_dwarfs_path_keeps_neighbours_adjacent():
    edges = [(1, 3), (3, 4), (4, 2)]
    order = dwarf_photo_order(4, edges)
    assert sorted(order) == [1, 2, 3, 4]
    assert all(abs(order[a - 1] - order[b - 1]) == 1 for a, b in edges)


def test_dwarfs_isolated_dwarf_is_placed():
    order = dwarf_photo_order(3, [(1, 2)])
    assert sorted(order) == [1, 2, 3]
    assert order[0] == 1


def test_dwarfs_star_is_impossible():
    assert dwarf_photo_order(4, [(3, 1), (3, 2), (3, 4)]) is None