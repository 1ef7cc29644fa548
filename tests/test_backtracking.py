import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpkit.backtracking import combinations, permutations, subsets


@pytest.mark.parametrize("r", [0, 1, 2, 3, 4])
def test_combinations_match_index_order(r):
    data = [5, 3, 8, 1]
    assert list(combinations(data, r)) == list(itertools.combinations(data, r))


def test_combinations_larger_than_data_is_empty():
    assert list(combinations([1, 2], 3)) == []


def test_combinations_negative_r_is_empty():
    assert list(combinations([1, 2, 3], -1)) == []


@given(st.lists(st.integers(), max_size=7), st.integers(min_value=0, max_value=8))
def test_combinations_are_ordered_picks(data, r):
    result = list(combinations(data, r))
    assert result == list(itertools.combinations(data, r))
    assert all(len(item) == r for item in result)


def test_permutations_swap_order():
    assert list(permutations("abc")) == ["abc", "acb", "bac", "bca", "cba", "cab"]


def test_permutations_of_single_character():
    assert list(permutations("x")) == ["x"]


def test_permutations_of_empty_string_is_empty():
    assert list(permutations("")) == []


@given(st.text(alphabet="abcd", min_size=1, max_size=5))
def test_permutations_cover_all_arrangements(text):
    result = list(permutations(text))
    expected = ["".join(p) for p in itertools.permutations(text)]
    assert sorted(result) == sorted(expected)
    assert result[0] == text


def test_subsets_include_first_order():
    assert list(subsets([1, 2])) == [(1, 2), (1,), (2,), ()]


@given(st.lists(st.integers(), max_size=8))
def test_subsets_count_and_bounds(data):
    result = list(subsets(data))
    assert len(result) == 2 ** len(data)
    assert result[0] == tuple(data)
    assert result[-1] == ()