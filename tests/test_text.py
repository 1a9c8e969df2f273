from hypothesis import given
from hypothesis import strategies as st

from algorium.text import normalize_case, reverse_string, split_words

ascii_letters = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ", max_size=30
)


def test_split_words_ignores_extra_spaces():
    assert split_words("  hello   world ") == ["hello", "world"]


def test_split_empty_line():
    assert split_words("   ") == []


@given(st.lists(st.text(alphabet="abcxyz", min_size=1), max_size=10))
def test_split_join_round_trip(words):
    assert split_words(" ".join(words)) == words


def test_reverse_source_string():
    assert reverse_string("geeksforgeeks") == "skeegrofskeeg"


@given(st.text())
def test_reverse_twice_round_trips(text):
    assert reverse_string(reverse_string(text)) == text
    assert len(reverse_string(text)) == len(text)


def test_normalize_majority_upper():
    assert normalize_case("maTRIX") == "MATRIX"


def test_normalize_tie_is_lower():
    assert normalize_case("AbCd") == "abcd"


@given(ascii_letters)
def test_normalize_case_invariants(word):
    result = normalize_case(word)
    assert result.lower() == word.lower()
    assert result in (word.upper(), word.lower())
    upper = sum(ch.isupper() for ch in word)
    if upper * 2 > len(word):
        assert result == word.upper()
    else:
        assert result == word.lower()