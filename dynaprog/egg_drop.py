"""Egg dropping: fewest worst-case trials to find the critical floor."""

from __future__ import annotations

from functools import lru_cache


def _check(eggs: int, floors: int) -> None:
    if eggs < 0:
        raise ValueError("eggs must not be negative")
    if floors < 0:
        raise ValueError("floors must not be negative")


def egg_drop(eggs: int, floors: int) -> int:
    """Fewest drops that always find the critical floor with ``eggs`` eggs."""
    _check(eggs, floors)
    if eggs == 0:
        return 0
    if eggs == 1 or floors <= 1:
        return floors
    # Never more drops than floors, so more eggs than floors cannot help.
    eggs = min(eggs, floors)
    previous = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        current = [0, 1]
        for height in range(2, floors + 1):
            current.append(
                1
                + min(
                    max(previous[drop - 1], current[height - drop])
                    for drop in range(1, height + 1)
                )
            )
        previous = current
    return previous[floors]


def egg_drop_binary_search(eggs: int, floors: int) -> int:
    """Same as :func:`egg_drop`, choosing the drop floor by binary search."""
    _check(eggs, floors)

    @lru_cache(maxsize=None)
    def solve(eggs: int, floors: int) -> int:
        if eggs == 0:
            return 0
        if eggs == 1 or floors <= 1:
            return floors
        best = floors
        low, high = 1, floors
        while low <= high:
            mid = (low + high) // 2
            broken = solve(eggs - 1, mid - 1)
            intact = solve(eggs, floors - mid)
            best = min(best, 1 + max(broken, intact))
            if broken < intact:
                low = mid + 1
            else:
                high = mid - 1
        return best

    return solve(eggs, floors)