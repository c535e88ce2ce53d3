"""0/1 knapsack, unbounded knapsack and rod cutting."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache


def _items(
    weights: Iterable[int], values: Iterable[int], capacity: int
) -> tuple[list[int], list[int]]:
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    return weights, values


def knapsack(weights: Iterable[int], values: Iterable[int], capacity: int) -> int:
    """Best total value of items, each used at most once, fitting in ``capacity``."""
    weights, values = _items(weights, values, capacity)
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        # An empty bag (room 0) always holds nothing.
        for room in range(capacity, max(weight, 1) - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def knapsack_recursive(
    weights: Iterable[int], values: Iterable[int], capacity: int
) -> int:
    """Same as :func:`knapsack`, solved top-down with memoisation."""
    weights, values = _items(weights, values, capacity)

    @lru_cache(maxsize=None)
    def best(count: int, room: int) -> int:
        if count == 0 or room == 0:
            return 0
        weight, value = weights[count - 1], values[count - 1]
        skip = best(count - 1, room)
        if weight <= room:
            return max(value + best(count - 1, room - weight), skip)
        return skip

    return best(len(weights), capacity)


def unbounded_knapsack(
    weights: Iterable[int], values: Iterable[int], capacity: int
) -> int:
    """Best total value when every item may be taken any number of times."""
    weights, values = _items(weights, values, capacity)
    if any(weight == 0 for weight in weights):
        raise ValueError("weights must be positive when items can repeat")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(weight, capacity + 1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def rod_cutting(lengths: Iterable[int], prices: Iterable[int], rod_length: int) -> int:
    """Best price for a rod of ``rod_length`` cut into pieces of the given lengths."""
    return unbounded_knapsack(lengths, prices, rod_length)


def cut_rod(prices: Iterable[int]) -> int:
    """Best price for a rod whose piece of length ``i + 1`` sells for ``prices[i]``."""
    prices = list(prices)
    return rod_cutting(range(1, len(prices) + 1), prices, len(prices))