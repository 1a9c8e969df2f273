import pytest
from hypothesis import given
from hypothesis import strategies as st

from algorium.searching import binary_search, kmp_search, linear_search, prefix_function


def test_linear_search_returns_first_occurrence():
    assert linear_search([5, 3, 3, 7], 3) == 1


def test_linear_search_missing_returns_none():
    assert linear_search([1, 2, 3], 9) is None


def test_linear_search_accepts_generator():
    assert linear_search((x * 2 for x in range(10)), 8) == 4


@given(st.lists(st.integers(-20, 20)), st.integers(-20, 20))
def test_linear_search_matches_list_index(values, item):
    expected = values.index(item) if item in values else None
    assert linear_search(values, item) == expected


def test_binary_search_rejects_unsorted():
    with pytest.raises(ValueError):
        binary_search([42, 32, 34, 3, 10], 10)


def test_binary_search_empty():
    assert binary_search([], 1) is None


@given(st.lists(st.integers(-50, 50)), st.integers(-50, 50))
def test_binary_search_finds_present_items(values, item):
    values.sort()
    result = binary_search(values, item)
    if item in values:
        assert values[result] == item
    else:
        assert result is None


def test_prefix_function_of_source_pattern():
    assert prefix_function("ABABCABAB") == [0, 0, 1, 2, 0, 1, 2, 3, 4]


def test_prefix_function_empty():
    assert prefix_function("") == []


def test_kmp_search_source_example():
    assert kmp_search("ABABCABAB", "ABABDABACDABABCABAB") == [10]


def test_kmp_search_overlapping_matches():
    assert kmp_search("aa", "aaaa") == [0, 1, 2]


def test_kmp_search_empty_pattern_raises():
    with pytest.raises(ValueError):
        kmp_search("", "abc")


@given(st.text(alphabet="ab", min_size=1, max_size=4), st.text(alphabet="ab", max_size=30))
def test_kmp_search_agrees_with_str_startswith(pattern, text):
    expected = [i for i in range(len(text)) if text.startswith(pattern, i)]
    assert kmp_search(pattern, text) == expected


@given(st.text(alphabet="abc", max_size=20))
def test_prefix_function_values_are_borders(pattern):
    for i, length in enumerate(prefix_function(pattern)):
        assert length <= i
        assert pattern[:length] == pattern[i + 1 - length : i + 1]