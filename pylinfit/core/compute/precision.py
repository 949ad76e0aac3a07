"""
Numerical precision utilities.

Machine epsilon per dtype, the accumulator dtype used by the CPU reducers
and the zero test used to reject a predictor with no spread.
"""

import math

import numpy as np
from numpy.typing import NDArray
from typing import Any


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """Machine epsilon for a floating dtype."""
    return float(np.finfo(dtype).eps)


def accumulator_dtype(dtype: np.dtype | type) -> np.dtype:
    """
    Dtype that sums over data of `dtype` are accumulated in.

    At least float64: float16 overflows at 65504 and float32 loses digits
    over long sums. Wider types (longdouble) are kept.
    """
    return np.promote_types(dtype, np.float64)


def is_negligible_sum_of_squares(
    ss: float,
    data: NDArray[np.floating[Any]],
) -> bool:
    """
    Whether a centered sum of squares is indistinguishable from zero.

    Centering data whose values are all equal leaves only the rounding
    error of the mean, at most about (log2(n) + 1) * eps * max|data| per
    element, with eps taken from the dtype the centered values are stored
    in. A sum of squares at or below n times the square of that carries no
    information about spread.

    Args:
        ss: Centered sum of squares of data
        data: The uncentered data it was computed from
    """
    if ss <= 0.0:
        return True
    n = data.shape[0]
    eps = machine_epsilon(data.dtype)
    scale = float(np.max(np.abs(data)))
    noise = (math.log2(n) + 1.0) * eps * scale
    return ss <= n * noise * noise
