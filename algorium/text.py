"""String helpers: word splitting, reversal and case normalisation."""

from __future__ import annotations

__all__ = ["split_words", "reverse_string", "normalize_case"]


def split_words(line: str) -> list[str]:
    """Return the whitespace-separated words of ``line``."""
    return line.split()


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def normalize_case(word: str) -> str:
    """Return ``word`` in upper case if most characters are upper case.

    Otherwise, ties included, the word is returned in lower case.
    """
    upper = sum(1 for ch in word if ch.isupper())
    return word.upper() if upper > len(word) - upper else word.lower()