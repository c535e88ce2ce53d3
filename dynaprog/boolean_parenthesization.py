"""Counting parenthesizations of a boolean expression."""

from __future__ import annotations

_SYMBOLS = frozenset("TF")
_OPERATORS = frozenset("|&^")


def _combine(operator: str, left: tuple[int, int], right: tuple[int, int]) -> tuple[int, int]:
    l_true, l_false = left
    r_true, r_false = right
    if operator == "|":
        true = l_true * r_true + l_true * r_false + l_false * r_true
        false = l_false * r_false
    elif operator == "&":
        true = l_true * r_true
        false = l_true * r_false + l_false * r_true + l_false * r_false
    else:
        true = l_true * r_false + l_false * r_true
        false = l_true * r_true + l_false * r_false
    return true, false


def count_ways(expression: str, want_true: bool = True, modulus: int | None = None) -> int:
    """Ways to parenthesize ``expression`` so it evaluates to ``want_true``.

    The expression alternates symbols ``T``/``F`` with operators ``|``, ``&``
    and ``^``. The count is reduced by ``modulus`` when one is given.
    """
    if modulus is not None and modulus <= 0:
        raise ValueError("modulus must be positive")
    if not expression:
        return 0
    if len(expression) % 2 == 0:
        raise ValueError("expression must alternate symbols and operators")
    symbols = expression[0::2]
    operators = expression[1::2]
    if not set(symbols) <= _SYMBOLS:
        raise ValueError("symbols must be T or F")
    if not set(operators) <= _OPERATORS:
        raise ValueError("operators must be |, & or ^")

    def reduce(count: int) -> int:
        return count % modulus if modulus is not None else count

    size = len(symbols)
    # ways[i][j]: (true count, false count) for symbols i..j
    ways: list[list[tuple[int, int]]] = [[(0, 0)] * size for _ in range(size)]
    for index, symbol in enumerate(symbols):
        ways[index][index] = (1, 0) if symbol == "T" else (0, 1)
    for span in range(1, size):
        for first in range(size - span):
            last = first + span
            true = false = 0
            for split in range(first, last):
                part_true, part_false = _combine(
                    operators[split], ways[first][split], ways[split + 1][last]
                )
                true += part_true
                false += part_false
            ways[first][last] = (reduce(true), reduce(false))
    true, false = ways[0][size - 1]
    return reduce(true if want_true else false)