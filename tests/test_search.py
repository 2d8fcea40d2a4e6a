import random

from contestlib.search import find_position


def test_finds_every_present_value():
    rng = random.Random(7)
    values = sorted(rng.randint(1, 1000) for _ in range(50))
    for value in values:
        index = find_position(values, value)
        assert values[index] == value


def test_returns_first_occurrence():
    values = [1, 2, 2, 2, 5]
    assert find_position(values, 2) == 1


def test_missing_value_returns_none():
    values = [1, 3, 5, 7]
    for target in (0, 2, 4, 6, 8):
        assert find_position(values, target) is None


def test_empty_sequence():
    assert find_position([], 5) is None


def test_first_and_last():
    values = [10, 20, 30]
    assert find_position(values, 10) == 0
    assert find_position(values, 30) == 2