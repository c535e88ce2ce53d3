"""Longest common subsequence and substring, and subsequence matching."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from functools import lru_cache


def lcs_table(first: Sequence[Hashable], second: Sequence[Hashable]) -> list[list[int]]:
    """Table whose cell ``[i][j]`` is the LCS length of ``first[:i]`` and ``second[:j]``."""
    table = [[0] * (len(second) + 1)]
    for item in first:
        above = table[-1]
        row = [0]
        for j, other in enumerate(second, 1):
            if item == other:
                row.append(above[j - 1] + 1)
            else:
                row.append(max(row[j - 1], above[j]))
        table.append(row)
    return table


def lcs_length(first: Sequence[Hashable], second: Sequence[Hashable]) -> int:
    """Length of the longest common subsequence of two sequences."""
    return lcs_table(first, second)[-1][-1]


def lcs_length_recursive(first: Sequence[Hashable], second: Sequence[Hashable]) -> int:
    """Same as :func:`lcs_length`, solved top-down with memoisation."""

    @lru_cache(maxsize=None)
    def solve(n: int, m: int) -> int:
        if n == 0 or m == 0:
            return 0
        if first[n - 1] == second[m - 1]:
            return 1 + solve(n - 1, m - 1)
        return max(solve(n - 1, m), solve(n, m - 1))

    return solve(len(first), len(second))


def longest_common_subsequence(first: str, second: str) -> str:
    """One longest common subsequence of two strings."""
    table = lcs_table(first, second)
    i, j = len(first), len(second)
    picked: list[str] = []
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            picked.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            j -= 1
        else:
            i -= 1
    return "".join(reversed(picked))


def longest_common_substring_length(
    first: Sequence[Hashable], second: Sequence[Hashable]
) -> int:
    """Length of the longest contiguous run shared by two sequences."""
    best = 0
    previous = [0] * (len(second) + 1)
    for item in first:
        current = [0]
        for j, other in enumerate(second, 1):
            run = previous[j - 1] + 1 if item == other else 0
            current.append(run)
            best = max(best, run)
        previous = current
    return best


def is_subsequence(needle: Sequence[Hashable], haystack: Sequence[Hashable]) -> bool:
    """True if ``needle`` appears in ``haystack`` in order, not necessarily contiguously."""
    remaining = iter(haystack)
    return all(item in remaining for item in needle)