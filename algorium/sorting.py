"""Classic comparison and distribution sorts.

Every function takes any iterable and returns a new sorted list; the input
is never modified.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "selection_sort",
    "insertion_sort",
    "heap_sort",
    "merge_sort",
    "quick_sort",
    "radix_sort",
    "cocktail_sort",
    "dutch_flag_sort",
]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each pass."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort using a binary max-heap built in place."""
    items = list(values)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, i)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each, and merging."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(
    items: list[Any], start: int, end: int, before: Callable[[Any, Any], bool]
) -> int:
    pivot = items[start]
    i, j = start, end + 1
    while True:
        i += 1
        while i <= end and before(items[i], pivot):
            i += 1
        j -= 1
        while before(pivot, items[j]):
            j -= 1
        if i >= j:
            break
        items[i], items[j] = items[j], items[i]
    items[start] = items[j]
    items[j] = pivot
    return j


def quick_sort(values: Iterable[Any], descending: bool = False) -> list[Any]:
    """Sort with first-element-pivot quicksort, ascending or descending."""
    items = list(values)

    def before(a: Any, b: Any) -> bool:
        return a > b if descending else a < b

    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            split = _partition(items, start, end, before)
            pending.append((start, split - 1))
            pending.append((split + 1, end))
    return items


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers digit by digit using ten buckets.

    Raises ValueError for negative values.
    """
    items = list(values)
    if any(x < 0 for x in items):
        raise ValueError("radix sort requires non-negative integers")
    if not items:
        return items
    largest = max(items)
    passes = len(str(largest)) if largest > 0 else 0
    for digit in range(passes):
        divisor = 10**digit
        buckets: list[list[int]] = [[] for _ in range(10)]
        for x in items:
            buckets[(x // divisor) % 10].append(x)
        items = [x for bucket in buckets for x in bucket]
    return items


def cocktail_sort(values: Iterable[Any]) -> list[Any]:
    """Bubble sort that alternates left-to-right and right-to-left passes."""
    items = list(values)
    forward = True
    swapped = True
    while swapped:
        swapped = False
        indices = range(len(items) - 1) if forward else range(len(items) - 2, -1, -1)
        for j in indices:
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        forward = not forward
    return items


def dutch_flag_sort(values: Iterable[int]) -> list[int]:
    """Sort a sequence of 0s, 1s and 2s in a single pass.

    Raises ValueError if any value is not 0, 1 or 2.
    """
    items = list(values)
    if any(x not in (0, 1, 2) for x in items):
        raise ValueError("values must be 0, 1 or 2")
    lo, mid, hi = 0, 0, len(items) - 1
    while mid <= hi:
        value = items[mid]
        if value == 0:
            items[lo], items[mid] = items[mid], items[lo]
            lo += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            items[mid], items[hi] = items[hi], items[mid]
            hi -= 1
    return items