"""
CPU reference reduction strategy.

numpy reductions accumulated in at least float64, whatever the input
precision. numpy sums with pairwise summation, so the rounding error grows
with log(n) rather than n. This is the reference the other strategies are
compared against.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinfit.core.compute.precision import accumulator_dtype


def sum_kernel(a: NDArray[np.floating[Any]]) -> float:
    """Sum of a, accumulated in accumulator_dtype(a.dtype)."""
    return float(np.sum(a, dtype=accumulator_dtype(a.dtype)))


def dot_kernel(a: NDArray[np.floating[Any]], b: NDArray[np.floating[Any]]) -> float:
    """a . b with both operands widened to the accumulator dtype."""
    acc = accumulator_dtype(np.result_type(a, b))
    return float(np.dot(a.astype(acc, copy=False), b.astype(acc, copy=False)))


def rss_kernel(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    *,
    beta0: float,
    beta1: float,
) -> float:
    """sum((y - (beta0 + beta1 * x))**2), evaluated in the accumulator dtype."""
    acc = accumulator_dtype(np.result_type(x, y))
    residuals = y.astype(acc, copy=False) - (beta0 + beta1 * x.astype(acc, copy=False))
    return float(np.dot(residuals, residuals))


class SequentialReducer:
    """
    Single-threaded reducer backed by numpy.

    Implements the Reducer protocol. Deterministic: the same input always
    produces bit-identical output.
    """

    @property
    def name(self) -> str:
        return 'cpu'

    def total(self, a: NDArray[np.floating[Any]]) -> float:
        return sum_kernel(a)

    def dot(
        self,
        a: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
    ) -> float:
        return dot_kernel(a, b)

    def residual_sum_of_squares(
        self,
        x: NDArray[np.floating[Any]],
        y: NDArray[np.floating[Any]],
        beta0: float,
        beta1: float,
    ) -> float:
        return rss_kernel(x, y, beta0=beta0, beta1=beta1)

    def __repr__(self) -> str:
        return "SequentialReducer()"
