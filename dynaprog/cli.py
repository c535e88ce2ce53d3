"""Command line front end reading problem input from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from .boolean_parenthesization import count_ways
from .egg_drop import egg_drop
from .knapsack import knapsack, rod_cutting
from .lcs import lcs_length, longest_common_subsequence
from .mcm import matrix_chain_cost
from .palindrome_partition import min_palindrome_cuts
from .scramble import is_scramble


class _Tokens:
    """Whitespace-separated words of the input, consumed in order."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("not enough input") from None

    def integer(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def count(self) -> int:
        value = self.integer()
        if value < 0:
            raise ValueError("item count must not be negative")
        return value

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]


def _knapsack(tokens: _Tokens) -> str:
    count = tokens.count()
    weights = tokens.integers(count)
    values = tokens.integers(count)
    return str(knapsack(weights, values, tokens.integer()))


def _rod_cutting(tokens: _Tokens) -> str:
    count = tokens.count()
    lengths = tokens.integers(count)
    prices = tokens.integers(count)
    return str(rod_cutting(lengths, prices, tokens.integer()))


def _lcs(tokens: _Tokens) -> str:
    return str(lcs_length(tokens.word(), tokens.word()))


def _print_lcs(tokens: _Tokens) -> str:
    return longest_common_subsequence(tokens.word(), tokens.word())


def _mcm(tokens: _Tokens) -> str:
    count = tokens.count()
    return str(matrix_chain_cost(tokens.integers(count)))


def _palindrome_partition(tokens: _Tokens) -> str:
    return str(min_palindrome_cuts(tokens.word()))


def _boolean(tokens: _Tokens) -> str:
    return str(count_ways(tokens.word(), True))


def _scramble(tokens: _Tokens) -> str:
    first = tokens.word()
    second = tokens.word()
    # Strings of different lengths can never be scrambles of each other.
    if len(first) != len(second):
        return "No"
    return "Yes" if is_scramble(first, second) else "No"


def _egg_drop(tokens: _Tokens) -> str:
    return str(egg_drop(tokens.integer(), tokens.integer()))


_COMMANDS: dict[str, tuple[str, Callable[[_Tokens], str]]] = {
    "knapsack": ("N, N weights, N values, capacity", _knapsack),
    "rod-cutting": ("N, N piece lengths, N prices, rod length", _rod_cutting),
    "lcs": ("two strings; prints the LCS length", _lcs),
    "print-lcs": ("two strings; prints one LCS", _print_lcs),
    "mcm": ("N, N matrix dimensions", _mcm),
    "palindrome-partition": ("a string; prints the fewest cuts", _palindrome_partition),
    "boolean-parenthesization": ("an expression such as T|F&T", _boolean),
    "scramble": ("two strings; prints Yes or No", _scramble),
    "egg-drop": ("eggs and floors", _egg_drop),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dynaprog",
        description="Solve a dynamic programming problem read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")
    for name, (summary, _) in _COMMANDS.items():
        commands.add_parser(name, help=f"input: {summary}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command on the words read from standard input."""
    parser = _parser()
    args = parser.parse_args(argv)
    _, handler = _COMMANDS[args.command]
    try:
        result = handler(_Tokens(sys.stdin.read()))
    except ValueError as error:
        parser.error(str(error))
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())