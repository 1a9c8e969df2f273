"""Element-wise array operations, small matrix routines and array puzzles."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = [
    "add_arrays",
    "multiply_matrices",
    "transpose",
    "hourglass_sums",
    "max_hourglass_sum",
    "is_palindrome_sequence",
    "sum_and_product",
    "moves_to_equalize",
    "halves",
    "largest_even",
]


def _rectangular(matrix: Sequence[Sequence[Any]], name: str) -> list[list[Any]]:
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError(f"{name} rows must all have the same length")
    return rows


def add_arrays(first: Sequence[Any], second: Sequence[Any]) -> list[Any]:
    """Return the element-wise sum of two equally long sequences.

    Raises ValueError if the lengths differ.
    """
    if len(first) != len(second):
        raise ValueError("arrays must have the same length")
    return [a + b for a, b in zip(first, second)]


def multiply_matrices(
    a: Sequence[Sequence[Any]], b: Sequence[Sequence[Any]]
) -> list[list[Any]]:
    """Return the matrix product ``a @ b``.

    Raises ValueError if the column count of ``a`` differs from the row
    count of ``b`` or either matrix is ragged.
    """
    left = _rectangular(a, "first matrix")
    right = _rectangular(b, "second matrix")
    inner = len(left[0]) if left else 0
    if inner != len(right):
        raise ValueError(
            "column count of the first matrix must equal row count of the second"
        )
    columns = list(zip(*right))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in left
    ]


def transpose(matrix: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return the transpose of a rectangular matrix.

    Raises ValueError for a ragged matrix.
    """
    rows = _rectangular(matrix, "matrix")
    return [list(column) for column in zip(*rows)]


def hourglass_sums(grid: Sequence[Sequence[int]]) -> list[int]:
    """Return the sum of every 3x3 hourglass in ``grid``, row by row.

    An hourglass is a 3x3 block without the middle row's outer cells.
    Raises ValueError if the grid is ragged or smaller than 3x3.
    """
    rows = _rectangular(grid, "grid")
    if len(rows) < 3 or len(rows[0]) < 3:
        raise ValueError("grid must be at least 3x3")
    sums: list[int] = []
    for top, middle, bottom in zip(rows, rows[1:], rows[2:]):
        for k in range(len(top) - 2):
            sums.append(sum(top[k : k + 3]) + middle[k + 1] + sum(bottom[k : k + 3]))
    return sums


def max_hourglass_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the largest hourglass sum in ``grid``."""
    return max(hourglass_sums(grid))


def is_palindrome_sequence(sequence: Sequence[Any]) -> bool:
    """Return True if ``sequence`` reads the same forwards and backwards."""
    front, back = 0, len(sequence) - 1
    while front < back:
        if sequence[front] != sequence[back]:
            return False
        front += 1
        back -= 1
    return True


def sum_and_product(values: Iterable[int]) -> tuple[int, int]:
    """Return the sum and the product of ``values``."""
    items = list(values)
    return sum(items), math.prod(items)


def moves_to_equalize(values: Iterable[Any]) -> int:
    """Return how many elements differ from the most frequent value.

    That is the number of single-element changes needed to make every
    element equal.
    """
    counts = Counter(values)
    if not counts:
        return 0
    return sum(counts.values()) - max(counts.values())


def halves(values: Iterable[int]) -> list[int]:
    """Return each value halved, odd values rounded down."""
    return [value // 2 for value in values]


def largest_even(values: Iterable[int]) -> int:
    """Return the largest even value greater than the first value.

    The first value is the starting maximum whatever its parity, so it is
    returned when no larger even value follows. Raises ValueError when
    ``values`` is empty.
    """
    iterator = iter(values)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    for value in iterator:
        if value > best and value % 2 == 0:
            best = value
    return best