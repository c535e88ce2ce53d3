"""Problems reduced to the longest common subsequence."""

from __future__ import annotations

from collections.abc import Hashable, Sequence

from .lcs import lcs_length, lcs_table


def shortest_common_supersequence_length(
    first: Sequence[Hashable], second: Sequence[Hashable]
) -> int:
    """Length of the shortest sequence having both inputs as subsequences."""
    return len(first) + len(second) - lcs_length(first, second)


def shortest_common_supersequence(first: str, second: str) -> str:
    """One shortest string having both ``first`` and ``second`` as subsequences."""
    table = lcs_table(first, second)
    i, j = len(first), len(second)
    picked: list[str] = []
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            picked.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            picked.append(second[j - 1])
            j -= 1
        else:
            picked.append(first[i - 1])
            i -= 1
    picked.extend(reversed(first[:i]))
    picked.extend(reversed(second[:j]))
    return "".join(reversed(picked))


def min_insertions_deletions(
    source: Sequence[Hashable], target: Sequence[Hashable]
) -> int:
    """Fewest single-item deletions plus insertions turning ``source`` into ``target``."""
    common = lcs_length(source, target)
    return (len(source) - common) + (len(target) - common)


def longest_palindromic_subsequence(text: str) -> int:
    """Length of the longest subsequence of ``text`` that reads the same reversed."""
    return lcs_length(text, text[::-1])


def min_deletions_to_palindrome(text: str) -> int:
    """Fewest characters to delete so that ``text`` becomes a palindrome."""
    return len(text) - longest_palindromic_subsequence(text)


def min_insertions_to_palindrome(text: str) -> int:
    """Fewest characters to insert so that ``text`` becomes a palindrome."""
    return len(text) - longest_palindromic_subsequence(text)


def longest_repeating_subsequence(text: Sequence[Hashable]) -> int:
    """Length of the longest subsequence occurring twice at distinct positions."""
    previous = [0] * (len(text) + 1)
    for i, item in enumerate(text, 1):
        current = [0]
        for j, other in enumerate(text, 1):
            if item == other and i != j:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(current[j - 1], previous[j]))
        previous = current
    return previous[-1]