"""Linear, binary and Knuth-Morris-Pratt searches."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["linear_search", "binary_search", "prefix_function", "kmp_search"]


def linear_search(values: Iterable[Any], item: Any) -> int | None:
    """Return the index of the first element equal to ``item``, or None."""
    for index, value in enumerate(values):
        if value == item:
            return index
    return None


def binary_search(values: Sequence[Any], item: Any) -> int | None:
    """Return an index of ``item`` in the ascending sequence ``values``, or None.

    Raises ValueError if ``values`` is not sorted in ascending order.
    """
    if any(a > b for a, b in zip(values, values[1:])):
        raise ValueError("values are not sorted in ascending order")
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == item:
            return mid
        if values[mid] < item:
            low = mid + 1
        else:
            high = mid - 1
    return None


def prefix_function(pattern: Sequence[Any]) -> list[int]:
    """Return the longest proper prefix-suffix length for each prefix of ``pattern``."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(pattern: Sequence[Any], text: Sequence[Any]) -> list[int]:
    """Return every index in ``text`` where ``pattern`` starts, overlaps included.

    Raises ValueError for an empty pattern.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    matches: list[int] = []
    i = j = 0
    while i < len(text):
        if pattern[j] == text[i]:
            i += 1
            j += 1
            if j == len(pattern):
                matches.append(i - j)
                j = lps[j - 1]
        elif j:
            j = lps[j - 1]
        else:
            i += 1
    return matches