import pytest

from contestlib.text import SubstringHasher, prefix_function


def test_prefix_function_known_example():
    assert prefix_function("aabaaab") == [0, 1, 0, 1, 2, 2, 3]


def test_prefix_function_empty():
    assert prefix_function("") == []


@pytest.mark.parametrize("text", ["abababca", "aaaa", "abcabcabc", "xyz", "ababbababbabababbabababbababbaba"])
def test_prefix_function_values_are_borders(text):
    pi = prefix_function(text)
    assert len(pi) == len(text)
    for i, border in enumerate(pi):
        assert 0 <= border <= i
        assert text[:border] == text[i - border + 1 : i + 1]


def test_prefix_function_on_integer_lists():
    values = [5, 1, 5, 1, 5]
    assert prefix_function(values) == prefix_function("abab" + "a")


def test_prefix_function_first_is_zero():
    assert prefix_function("zzzz")[0] == 0


def test_hash_of_empty_substring_is_zero():
    hasher = SubstringHasher("hello")
    assert hasher.hash(2, 0) == 0


def test_equal_substrings_have_equal_hashes():
    text = "abracadabra"
    hasher = SubstringHasher(text)
    for length in range(1, len(text) + 1):
        seen = {}
        for position in range(len(text) - length + 1):
            piece = text[position : position + length]
            value = hasher.hash(position, length)
            if piece in seen:
                assert seen[piece] == value
            seen[piece] = value


def test_hash_independent_of_surrounding_text():
    first = SubstringHasher("xxabcyy")
    second = SubstringHasher("abc")
    assert first.hash(2, 3) == second.hash(0, 3)


def test_different_substrings_differ():
    hasher = SubstringHasher("abcd")
    assert hasher.hash(0, 2) != hasher.hash(1, 2)
    assert hasher.hash(0, 1) != hasher.hash(0, 2)


def test_hash_single_character():
    hasher = SubstringHasher("a")
    assert hasher.hash(0, 1) == ord("a") * 31


def test_hash_out_of_range_raises():
    hasher = SubstringHasher("abc")
    with pytest.raises(IndexError):
        hasher.hash(2, 2)
    with pytest.raises(IndexError):
        hasher.hash(-1, 1)