"""Scrambled-string check."""

from __future__ import annotations

from functools import lru_cache


def is_scramble(first: str, second: str) -> bool:
    """True if ``second`` can be made from ``first`` by swapping split halves recursively."""
    if len(first) != len(second):
        return False

    @lru_cache(maxsize=None)
    def scrambled(a: str, b: str) -> bool:
        if a == b:
            return True
        size = len(a)
        if size <= 1 or sorted(a) != sorted(b):
            return False
        return any(
            (scrambled(a[:cut], b[size - cut:]) and scrambled(a[cut:], b[: size - cut]))
            or (scrambled(a[:cut], b[:cut]) and scrambled(a[cut:], b[cut:]))
            for cut in range(1, size)
        )

    return scrambled(first, second)