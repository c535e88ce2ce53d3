"""Coin change: counting combinations and the fewest coins."""

from __future__ import annotations

from collections.abc import Iterable


def _coins(coins: Iterable[int], amount: int) -> list[int]:
    coins = list(coins)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coins must be positive")
    if amount < 0:
        raise ValueError("amount must not be negative")
    return coins


def coin_change_ways(coins: Iterable[int], amount: int) -> int:
    """Number of combinations of coins (each usable repeatedly) making ``amount``."""
    coins = _coins(coins, amount)
    ways = [1] + [0] * amount
    for coin in coins:
        for target in range(coin, amount + 1):
            ways[target] += ways[target - coin]
    return ways[amount]


def min_coins(coins: Iterable[int], amount: int) -> int | None:
    """Fewest coins adding up to ``amount``, or ``None`` if it cannot be made."""
    coins = _coins(coins, amount)
    fewest: list[int | None] = [0] + [None] * amount
    for target in range(1, amount + 1):
        options = [
            fewest[target - coin]
            for coin in coins
            if coin <= target and fewest[target - coin] is not None
        ]
        fewest[target] = min(options) + 1 if options else None
    return fewest[amount]