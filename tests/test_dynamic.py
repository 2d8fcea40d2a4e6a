import pytest

from contestlib.dynamic import knapsack_max_fill, max_subarray_sum, min_coins


def test_max_subarray_classic():
    assert max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_all_positive_is_total():
    values = [3, 1, 4, 1, 5, 9]
    assert max_subarray_sum(values) == sum(values)


def test_max_subarray_all_negative_is_largest():
    values = [-8, -3, -6, -2, -5]
    assert max_subarray_sum(values) == max(values)


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_knapsack_best_fill_below_capacity():
    assert knapsack_max_fill(10, [3, 5, 9]) == 9


def test_knapsack_exact_fit():
    assert knapsack_max_fill(12, [4, 7, 5, 11]) == 12


def test_knapsack_large_capacity_takes_everything():
    sizes = [2, 3, 7]
    assert knapsack_max_fill(100, sizes) == sum(sizes)


def test_knapsack_items_too_large():
    assert knapsack_max_fill(3, [5, 8]) == 0


def test_knapsack_never_exceeds_capacity():
    sizes = [6, 10, 13, 17]
    for capacity in range(0, 40):
        assert 0 <= knapsack_max_fill(capacity, sizes) <= capacity


def test_knapsack_negative_capacity_raises():
    with pytest.raises(ValueError):
        knapsack_max_fill(-1, [1])


def test_min_coins_greedy_fails():
    assert min_coins(6, [1, 3, 4]) == 2


def test_min_coins_zero_amount():
    assert min_coins(0, [2, 5]) == 0


def test_min_coins_only_ones():
    assert min_coins(17, [1]) == 17


def test_min_coins_impossible():
    assert min_coins(3, [2]) is None


def test_min_coins_single_coin_equal_amount():
    assert min_coins(25, [1, 5, 25]) == 1


def test_min_coins_negative_denomination_raises():
    with pytest.raises(ValueError):
        min_coins(5, [-1, 2])