import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.search import (
    binary_search,
    find_peak_element,
    find_pivot,
    missing_number,
    peak_index_in_mountain_array,
    search_insert,
    search_range,
    search_rotated,
)

distinct_sorted = st.lists(
    st.integers(-1000, 1000), unique=True, min_size=1, max_size=40
).map(sorted)


def _rotate(values, k):
    k %= len(values)
    return values[k:] + values[:k]


@given(distinct_sorted, st.integers(0, 100))
def test_find_pivot_points_at_maximum(values, k):
    rotated = _rotate(values, k)
    assert rotated[find_pivot(rotated)] == max(rotated)


def test_find_pivot_on_unrotated_is_last_index():
    values = [1, 2, 3, 4, 5]
    assert find_pivot(values) == len(values) - 1


def test_find_pivot_empty():
    assert find_pivot([]) == -1


def test_find_pivot_single():
    assert find_pivot([42]) == 0


@given(distinct_sorted)
def test_binary_search_finds_every_element(values):
    for index, value in enumerate(values):
        assert binary_search(values, value) == index


@given(distinct_sorted, st.integers(-2000, 2000))
def test_binary_search_missing(values, target):
    if target in values:
        assert values[binary_search(values, target)] == target
    else:
        assert binary_search(values, target) == -1


def test_binary_search_respects_bounds():
    values = [1, 3, 5, 7, 9]
    assert binary_search(values, 9, 0, 2) == -1
    assert binary_search(values, 5, 2, 4) == 2


@given(distinct_sorted, st.integers(0, 100))
def test_search_rotated_finds_every_element(values, k):
    rotated = _rotate(values, k)
    for index, value in enumerate(rotated):
        assert search_rotated(rotated, value) == index


@given(distinct_sorted, st.integers(0, 100), st.integers(-2000, 2000))
def test_search_rotated_absent(values, k, target):
    rotated = _rotate(values, k)
    result = search_rotated(rotated, target)
    if target in rotated:
        assert rotated[result] == target
    else:
        assert result == -1


def test_search_rotated_empty():
    assert search_rotated([], 3) == -1


@given(st.lists(st.integers(-5, 5), max_size=30).map(sorted), st.integers(-6, 6))
def test_search_range_invariants(values, target):
    first, last = search_range(values, target)
    if target not in values:
        assert (first, last) == (-1, -1)
    else:
        assert all(v == target for v in values[first:last + 1])
        assert last - first + 1 == values.count(target)
        assert first == 0 or values[first - 1] < target
        assert last == len(values) - 1 or values[last + 1] > target


def test_search_range_example():
    assert search_range([5, 7, 7, 8, 8, 10], 8) == (3, 4)


@given(distinct_sorted, st.integers(-2000, 2000))
def test_search_insert_keeps_order(values, target):
    index = search_insert(values, target)
    assert all(v < target for v in values[:index])
    assert all(v >= target for v in values[index:])
    if target in values:
        assert values[index] == target


@given(st.lists(st.integers(-1000, 1000), unique=True, min_size=1, max_size=40))
def test_find_peak_element_is_peak(values):
    i = find_peak_element(values)
    assert i == 0 or values[i] > values[i - 1]
    assert i == len(values) - 1 or values[i] > values[i + 1]


def test_find_peak_element_empty_raises():
    with pytest.raises(ValueError):
        find_peak_element([])


@given(st.integers(0, 60), st.data())
def test_missing_number_recovers_dropped_value(n, data):
    dropped = data.draw(st.integers(0, n))
    nums = [v for v in range(n + 1) if v != dropped]
    random.Random(n).shuffle(nums)
    original = list(nums)
    assert missing_number(nums) == dropped
    assert nums == original


@given(
    st.lists(st.integers(-100, 100), unique=True, min_size=1, max_size=20).map(sorted),
    st.lists(st.integers(-300, -101), unique=True, max_size=20),
)
def test_peak_index_in_mountain(up, down):
    mountain = up + sorted(down, reverse=True)
    assert peak_index_in_mountain_array(mountain) == len(up) - 1


def test_peak_index_first_of_ties():
    assert peak_index_in_mountain_array([3, 1, 3]) == 0


def test_peak_index_empty():
    assert peak_index_in_mountain_array([]) == -1