import pytest

from algobox.searching import (
    binary_search,
    find_substring,
    max_element,
    sum_of_squares,
)

ARR = [0, 2, 4, 5, 7, 8, 10, 12, 14, 16]


@pytest.mark.parametrize(
    "element, expected",
    [(0, 0), (99, -1), (8, 5), (12, 7), (1, -1)],
)
def test_binary_search_cases(element, expected):
    assert binary_search(ARR, element) == expected


def test_binary_search_returns_first_of_duplicates():
    values = [1, 3, 3, 3, 9]
    assert binary_search(values, 3) == values.index(3)


def test_binary_search_empty():
    assert binary_search([], 4) == -1


def test_binary_search_floats():
    values = [1.0, 2.5, 4.0, 7.5]
    for i, v in enumerate(values):
        assert binary_search(values, v) == i


def test_empty_pattern_found_at_start():
    assert find_substring("a", "") == 0


@pytest.mark.parametrize(
    "text, pattern",
    [("hello", "ll"), ("aaaa", "aa"), ("abc", "abcd"), ("abc", "x"), ("abcabc", "cab")],
)
def test_find_substring_agrees_with_str_find(text, pattern):
    assert find_substring(text, pattern) == text.find(pattern)


def test_max_element():
    assert max_element([1, 2, 3, 6, 5]) == 6


def test_max_element_empty_raises():
    with pytest.raises(ValueError):
        max_element([])


def test_sum_of_squares_base():
    assert sum_of_squares(0) == 0


@pytest.mark.parametrize("x", [1, 2, 7, 30])
def test_sum_of_squares_step(x):
    assert sum_of_squares(x) - sum_of_squares(x - 1) == x * x