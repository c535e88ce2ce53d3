import pytest
from hypothesis import given
from hypothesis import strategies as st

from dynaprog.knapsack import (
    cut_rod,
    knapsack,
    knapsack_recursive,
    rod_cutting,
    unbounded_knapsack,
)

items = st.lists(st.tuples(st.integers(0, 10), st.integers(0, 20)), max_size=8)
positive_items = st.lists(
    st.tuples(st.integers(1, 10), st.integers(0, 20)), min_size=1, max_size=6
)
capacities = st.integers(0, 30)


def _split(pairs):
    return [weight for weight, _ in pairs], [value for _, value in pairs]


def test_knapsack_worked_example():
    assert knapsack([1, 3, 4, 5], [1, 4, 5, 7], 7) == 9
    assert knapsack_recursive([1, 3, 4, 5], [1, 4, 5, 7], 7) == 9


@given(items, capacities)
def test_recursive_matches_table(pairs, capacity):
    weights, values = _split(pairs)
    assert knapsack_recursive(weights, values, capacity) == knapsack(
        weights, values, capacity
    )


@given(items, capacities)
def test_knapsack_bounds(pairs, capacity):
    weights, values = _split(pairs)
    result = knapsack(weights, values, capacity)
    assert 0 <= result <= sum(values)


@given(items)
def test_zero_capacity_holds_nothing(pairs):
    weights, values = _split(pairs)
    assert knapsack(weights, values, 0) == 0
    assert knapsack_recursive(weights, values, 0) == 0


@given(positive_items)
def test_everything_fits(pairs):
    weights, values = _split(pairs)
    assert knapsack(weights, values, sum(weights)) == sum(values)


@given(items, capacities)
def test_knapsack_monotone_in_capacity(pairs, capacity):
    weights, values = _split(pairs)
    assert knapsack(weights, values, capacity) <= knapsack(weights, values, capacity + 1)


@given(positive_items, capacities)
def test_unbounded_at_least_bounded(pairs, capacity):
    weights, values = _split(pairs)
    assert unbounded_knapsack(weights, values, capacity) >= knapsack(
        weights, values, capacity
    )


@given(st.integers(1, 10), st.integers(0, 20), st.integers(0, 5))
def test_unbounded_single_item_repeats(weight, value, times):
    assert unbounded_knapsack([weight], [value], weight * times) == value * times


@given(positive_items, capacities)
def test_unbounded_monotone(pairs, capacity):
    weights, values = _split(pairs)
    assert unbounded_knapsack(weights, values, capacity) <= unbounded_knapsack(
        weights, values, capacity + 1
    )


@given(positive_items, capacities)
def test_rod_cutting_is_unbounded_knapsack(pairs, capacity):
    lengths, prices = _split(pairs)
    assert rod_cutting(lengths, prices, capacity) == unbounded_knapsack(
        lengths, prices, capacity
    )


def test_cut_rod_example():
    assert cut_rod([1, 5, 8, 9, 10, 17, 17, 20]) == 22


@given(st.lists(st.integers(0, 30), max_size=10))
def test_cut_rod_matches_rod_cutting(prices):
    n = len(prices)
    assert cut_rod(prices) == rod_cutting(range(1, n + 1), prices, n)


@given(st.lists(st.integers(0, 30), min_size=1, max_size=10))
def test_cut_rod_at_least_uncut_price(prices):
    assert cut_rod(prices) >= prices[-1]


def test_cut_rod_empty():
    assert cut_rod([]) == 0


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        knapsack([1, 2], [3], 5)
    with pytest.raises(ValueError):
        knapsack_recursive([1], [3, 4], 5)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        knapsack([1], [1], -1)
    with pytest.raises(ValueError):
        unbounded_knapsack([1], [1], -1)


def test_negative_weight_rejected():
    with pytest.raises(ValueError):
        knapsack([-1], [1], 3)


def test_zero_weight_rejected_when_unbounded():
    with pytest.raises(ValueError):
        unbounded_knapsack([0, 2], [5, 1], 4)
    with pytest.raises(ValueError):
        rod_cutting([0], [5], 4)