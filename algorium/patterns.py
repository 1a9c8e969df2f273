"""Text patterns drawn with asterisks and digits."""

from __future__ import annotations

__all__ = ["hollow_diamond", "number_triangle", "digit_staircase"]


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError("size must not be negative")


def hollow_diamond(n: int) -> str:
    """Return a ``2n``-line rectangle of stars with a hollow diamond inside.

    Every line is ``2n - 1`` characters wide and ends with a newline.
    Raises ValueError for negative ``n``.
    """
    _check_size(n)
    lines: list[str] = []
    for i in range(n):
        side = "*" * (n - i)
        right = side[1:] if i == 0 else side
        lines.append(side + " " * max(0, 2 * i - 1) + right)
    for i in range(n):
        gap = max(0, n - i - 2)
        lines.append(
            "*" * (i + 1) + " " * (n - 1 - i) + " " * gap + "*" * (n - 1 - gap)
        )
    return "".join(line + "\n" for line in lines)


def number_triangle(n: int) -> str:
    """Return ``n`` lines, line ``k`` counting from 1 up to ``k``.

    Raises ValueError for negative ``n``.
    """
    _check_size(n)
    return "".join(
        "".join(str(j) for j in range(1, i + 1)) + "\n" for i in range(1, n + 1)
    )


def digit_staircase(n: int = 5) -> str:
    """Return each digit ``i`` below ``n`` repeated ``i`` times, on one line.

    Raises ValueError for negative ``n``.
    """
    _check_size(n)
    return "".join(str(i) * i for i in range(n))