"""Fewest cuts splitting a string into palindromes."""

from __future__ import annotations

from collections.abc import Hashable, Sequence


def is_palindrome(text: Sequence[Hashable]) -> bool:
    """True if ``text`` reads the same in both directions."""
    return list(text) == list(reversed(text))


def min_palindrome_cuts(text: str) -> int:
    """Fewest cuts that leave every piece of ``text`` a palindrome."""
    length = len(text)
    if length == 0:
        return 0
    palindrome = [[False] * length for _ in range(length)]
    for end in range(length):
        for start in range(end, -1, -1):
            if text[start] == text[end] and (
                end - start < 2 or palindrome[start + 1][end - 1]
            ):
                palindrome[start][end] = True
    # pieces[k]: fewest palindromic pieces covering text[:k]
    pieces = [0] * (length + 1)
    for end in range(1, length + 1):
        pieces[end] = min(
            pieces[start] + 1
            for start in range(end)
            if palindrome[start][end - 1]
        )
    return pieces[length] - 1