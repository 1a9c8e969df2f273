"""Dynamic-programming, backtracking and greedy problem solvers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

__all__ = [
    "max_gold",
    "longest_palindromic_subsequence",
    "solve_n_queens",
    "subset_sums",
    "palindrome_partitions",
    "permutations",
    "Job",
    "schedule_jobs",
    "Item",
    "fractional_knapsack",
    "subarray_with_sum",
]


def max_gold(grid: Sequence[Sequence[int]]) -> int:
    """Return the most gold collectable starting anywhere in the first column.

    Each step moves right, right-up or right-down. Raises ValueError for an
    empty or ragged grid.
    """
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    height = len(rows)

    best = [0] * height
    for col in reversed(range(width)):
        best = [
            row[col]
            + max(
                best[r],
                best[r - 1] if r > 0 else 0,
                best[r + 1] if r + 1 < height else 0,
            )
            for r, row in enumerate(rows)
        ]
    return max(best)


def longest_palindromic_subsequence(text: Sequence[object]) -> int:
    """Return the length of the longest palindromic subsequence of ``text``."""
    n = len(text)
    if n == 0:
        return 0
    # lengths[i] holds the answer for text[i..j] while j advances.
    lengths = [0] * n
    for j in range(n):
        lengths[j] = 1
        inner = 0  # answer for text[i+1..j-1] from the previous row
        for i in range(j - 1, -1, -1):
            current = lengths[i]
            if text[i] == text[j]:
                lengths[i] = inner + 2
            else:
                lengths[i] = max(lengths[i], lengths[i + 1])
            inner = current
    return lengths[0]


def solve_n_queens(n: int) -> list[list[int]] | None:
    """Place ``n`` queens column by column; return the board as 0/1 rows.

    Returns None if no placement exists. Raises ValueError for negative ``n``.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    rows_used: set[int] = set()
    rising: set[int] = set()
    falling: set[int] = set()
    placement: list[int] = []

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if row in rows_used or row - col in falling or row + col in rising:
                continue
            rows_used.add(row)
            falling.add(row - col)
            rising.add(row + col)
            placement.append(row)
            if place(col + 1):
                return True
            placement.pop()
            rows_used.discard(row)
            falling.discard(row - col)
            rising.discard(row + col)
        return False

    if not place(0):
        return None
    board = [[0] * n for _ in range(n)]
    for col, row in enumerate(placement):
        board[row][col] = 1
    return board


def subset_sums(weights: Iterable[int], target: int) -> list[tuple[int, ...]]:
    """Return every subset of ``weights`` (in input order) summing to ``target``.

    A subset that reaches ``target`` is not extended further.
    """
    items = list(weights)
    found: list[tuple[int, ...]] = []
    chosen: list[int] = []

    def explore(total: int, start: int) -> None:
        if total == target:
            found.append(tuple(chosen))
            return
        for index in range(start, len(items)):
            chosen.append(items[index])
            explore(total + items[index], index + 1)
            chosen.pop()

    explore(0, 0)
    return found


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def palindrome_partitions(text: str) -> list[list[str]]:
    """Return every way to split ``text`` into palindromic pieces."""
    partitions: list[list[str]] = []
    current: list[str] = []

    def split(start: int) -> None:
        if start >= len(text):
            partitions.append(list(current))
            return
        for end in range(start + 1, len(text) + 1):
            piece = text[start:end]
            if _is_palindrome(piece):
                current.append(piece)
                split(end)
                current.pop()

    split(0)
    return partitions


def _permute(rest: str, prefix: str) -> Iterator[str]:
    if not rest:
        yield prefix
        return
    for shift in range(len(rest)):
        rotated = rest[shift:] + rest[:shift]
        yield from _permute(rotated[1:], prefix + rotated[0])


def permutations(text: str) -> list[str]:
    """Return all orderings of ``text``'s characters, duplicates included."""
    return list(_permute(text, ""))


@dataclass(frozen=True)
class Job:
    """A unit-time job that earns ``profit`` if done by ``deadline``."""

    id: str
    deadline: int
    profit: int


def schedule_jobs(jobs: Iterable[Job]) -> list[str]:
    """Greedily pick jobs by profit; return their ids in time-slot order."""
    ordered = sorted(jobs, key=lambda job: job.profit, reverse=True)
    slots: list[Job | None] = [None] * len(ordered)
    for job in ordered:
        for slot in range(min(len(slots), job.deadline) - 1, -1, -1):
            if slots[slot] is None:
                slots[slot] = job
                break
    return [job.id for job in slots if job is not None]


@dataclass(frozen=True)
class Item:
    """An item that may be taken whole or in part."""

    weight: float
    cost: float

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("item weight must be positive")

    @property
    def cost_per_unit(self) -> float:
        return self.cost / self.weight


def fractional_knapsack(items: Iterable[Item], capacity: float) -> float:
    """Return the best total cost fitting in ``capacity``, splitting items if needed.

    Raises ValueError for a negative capacity.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    remaining = capacity
    profit = 0.0
    for item in sorted(items, key=lambda it: it.cost_per_unit, reverse=True):
        if item.weight > remaining:
            profit += item.cost_per_unit * remaining
            break
        profit += item.cost
        remaining -= item.weight
    return profit


def subarray_with_sum(
    values: Sequence[int], target: int
) -> tuple[int, int] | None:
    """Find a contiguous run of non-negative ``values`` summing to ``target``.

    Returns ``(start, stop)`` so that ``values[start:stop]`` is the run, or
    None if there is none.
    """
    if not values:
        return None
    start = 0
    total = values[0]
    for end, value in enumerate(values):
        if end:
            total += value
        while total > target and start < end:
            total -= values[start]
            start += 1
        if total == target:
            return start, end + 1
    return None