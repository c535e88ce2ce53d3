"""Subset-sum family: reachability, partitions and counting."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 10**9 + 7


def _numbers(numbers: Iterable[int], total: int, what: str = "total") -> list[int]:
    numbers = list(numbers)
    if any(number < 0 for number in numbers):
        raise ValueError("numbers must not be negative")
    if total < 0:
        raise ValueError(f"{what} must not be negative")
    return numbers


def reachable_subset_sums(numbers: Iterable[int], limit: int) -> list[int]:
    """Sorted list of every subset sum from 0 to ``limit`` that can be formed."""
    numbers = _numbers(numbers, limit, "limit")
    reachable = [True] + [False] * limit
    for number in numbers:
        for target in range(limit, number - 1, -1):
            if reachable[target - number]:
                reachable[target] = True
    return [target for target, ok in enumerate(reachable) if ok]


def is_subset_sum(numbers: Iterable[int], total: int) -> bool:
    """True if some subset of ``numbers`` adds up to ``total``."""
    return reachable_subset_sums(numbers, total)[-1] == total


def can_partition(numbers: Iterable[int]) -> bool:
    """True if ``numbers`` splits into two parts with equal sums."""
    numbers = list(numbers)
    total = sum(numbers)
    if total % 2:
        return False
    return is_subset_sum(numbers, total // 2)


def count_subsets_with_sum(
    numbers: Iterable[int], total: int, modulus: int | None = None
) -> int:
    """Number of subsets (by position) summing to ``total``, optionally reduced."""
    numbers = _numbers(numbers, total)
    if modulus is not None and modulus <= 0:
        raise ValueError("modulus must be positive")
    counts = [1] + [0] * total
    for number in numbers:
        for target in range(total, number - 1, -1):
            counts[target] += counts[target - number]
            if modulus is not None:
                counts[target] %= modulus
    result = counts[total]
    return result % modulus if modulus is not None else result


def min_subset_sum_difference(numbers: Iterable[int]) -> int:
    """Smallest absolute difference between the sums of a two-way split."""
    numbers = list(numbers)
    total = sum(numbers)
    return min(abs(total - 2 * part) for part in reachable_subset_sums(numbers, total))


def count_partitions_with_difference(numbers: Iterable[int], difference: int) -> int:
    """Ways to split ``numbers`` so the sums differ by ``difference``, modulo ``MOD``."""
    if difference < 0:
        raise ValueError("difference must not be negative")
    numbers = list(numbers)
    total = sum(numbers)
    if (total + difference) % 2:
        return 0
    return count_subsets_with_sum(numbers, (total + difference) // 2, MOD)


def target_sum_ways(numbers: Iterable[int], target: int) -> int:
    """Ways to sign every number with + or - so that they add up to ``target``."""
    numbers = list(numbers)
    target = abs(target)
    total = sum(numbers)
    if total < target or (total + target) % 2:
        return 0
    return count_subsets_with_sum(numbers, (total + target) // 2)