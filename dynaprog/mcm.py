"""Matrix chain multiplication and polygon triangulation."""

from __future__ import annotations

from collections.abc import Iterable


def matrix_chain_cost(dimensions: Iterable[int]) -> int:
    """Fewest scalar multiplications needed to multiply a chain of matrices.

    Matrix ``k`` of the chain has shape ``dimensions[k] x dimensions[k + 1]``.
    A chain of fewer than two matrices costs nothing.
    """
    dims = list(dimensions)
    if any(dim < 0 for dim in dims):
        raise ValueError("dimensions must not be negative")
    count = len(dims) - 1
    if count < 2:
        return 0
    cost = [[0] * count for _ in range(count)]
    for span in range(1, count):
        for first in range(count - span):
            last = first + span
            cost[first][last] = min(
                cost[first][split]
                + cost[split + 1][last]
                + dims[first] * dims[split + 1] * dims[last + 1]
                for split in range(first, last)
            )
    return cost[0][count - 1]


def min_score_triangulation(values: Iterable[int]) -> int:
    """Least total score of a triangulation of a convex polygon.

    Each triangle scores the product of the values at its three corners.
    """
    return matrix_chain_cost(values)