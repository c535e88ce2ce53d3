from math import comb

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dynaprog.boolean_parenthesization import count_ways


def _expressions(operators):
    return st.builds(
        lambda first, rest: first + "".join(op + sym for op, sym in rest),
        st.sampled_from("TF"),
        st.lists(st.tuples(st.sampled_from(operators), st.sampled_from("TF")), max_size=6),
    )


def test_known_example():
    assert count_ways("T|T&F^T") == 4


def test_single_symbol():
    assert (count_ways("T"), count_ways("T", False)) == (1, 0)


def test_empty_expression():
    assert count_ways("") == 0


@given(_expressions("|&^"))
def test_true_and_false_cover_every_bracketing(expression):
    operators = len(expression) // 2
    catalan = comb(2 * operators, operators) // (operators + 1)
    assert count_ways(expression, True) + count_ways(expression, False) == catalan


@given(_expressions("|&"))
def test_de_morgan_swaps_counts(expression):
    negated = expression.translate(str.maketrans("TF|&", "FT&|"))
    assert count_ways(expression, True) == count_ways(negated, False)
    assert count_ways(expression, False) == count_ways(negated, True)


@given(_expressions("|&^"), st.booleans())
def test_modulus_reduces_count(expression, want_true):
    assert count_ways(expression, want_true, 1003) == count_ways(expression, want_true) % 1003


@pytest.mark.parametrize("expression", ["T|", "X", "T+F", "|T|", "TF"])
def test_malformed_expression_rejected(expression):
    with pytest.raises(ValueError):
        count_ways(expression)


def test_non_positive_modulus_rejected():
    with pytest.raises(ValueError):
        count_ways("T|F", True, 0)