"""Small numeric helpers: primality, gradients, temperature tables, weekdays."""

from __future__ import annotations

import math

__all__ = ["is_prime", "gradient", "fahrenheit_table", "sum_below", "weekday_name"]

_WEEKDAYS = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n <= 1:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def gradient(first: tuple[float, float], second: tuple[float, float]) -> float:
    """Return the slope of the line through two ``(x, y)`` points.

    Raises ZeroDivisionError for a vertical line.
    """
    (x1, y1), (x2, y2) = first, second
    if x2 == x1:
        raise ZeroDivisionError("gradient of a vertical line is undefined")
    return (y2 - y1) / (x2 - x1)


def _celsius(fahrenheit: int) -> int:
    scaled = (fahrenheit - 32) * 5
    whole = abs(scaled) // 9
    return whole if scaled >= 0 else -whole


def fahrenheit_table(start: int, end: int, step: int) -> list[tuple[int, int]]:
    """Return ``(fahrenheit, celsius)`` pairs from ``start`` up to ``end``.

    Celsius values are truncated towards zero. Raises ValueError for a
    step that is not positive.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    return [(f, _celsius(f)) for f in range(start, end, step)]


def sum_below(n: int) -> int:
    """Return the sum of the integers from 0 up to but not including ``n``."""
    return sum(range(n))


def weekday_name(day: int) -> str:
    """Return the name of weekday ``day``, 1 being Sunday.

    Raises ValueError for a number outside 1..7.
    """
    if not 1 <= day <= 7:
        raise ValueError("Wrong number of day!")
    return _WEEKDAYS[day - 1]