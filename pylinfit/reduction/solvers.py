"""
Reduction primitives and strategy dispatch.

Public functions mean(), center() and dot_product() validate their input
and run on the selected reduction strategy. The underscore helpers skip
validation and are used by the fit engine on data it has already checked.
"""

from __future__ import annotations

from typing import Literal, Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinfit.core.exceptions import ValidationError
from pylinfit.core.protocols import Reducer
from pylinfit.core.validation import (
    check_array,
    check_1d,
    check_not_empty,
    check_consistent_length,
    check_min_samples,
)
from pylinfit.reduction.backends.cpu import SequentialReducer
from pylinfit.reduction.backends.parallel import ForkJoinReducer


BackendChoice = Literal['auto', 'cpu', 'parallel', 'gpu']

# Inputs at least this long are reduced with ForkJoinReducer under 'auto'.
PARALLEL_THRESHOLD = 1_000_000


def get_reducer(backend: BackendChoice | Reducer = 'auto', n: int = 0) -> Reducer:
    """
    Select the reduction strategy.

    Args:
        backend: Strategy name, or a Reducer instance which is returned as is.
            'auto' picks 'parallel' for n >= PARALLEL_THRESHOLD and 'cpu'
            otherwise. 'gpu' must be requested explicitly.
        n: Input length, used by 'auto'

    Raises:
        ValidationError: If the backend name is unknown
        RuntimeError: If 'gpu' requested but no GPU available
    """
    if not isinstance(backend, str):
        if isinstance(backend, Reducer):
            return backend
        raise ValidationError(f"backend: expected a name or a Reducer, got {backend!r}")

    if backend == 'auto':
        if n >= PARALLEL_THRESHOLD:
            return ForkJoinReducer()
        return SequentialReducer()

    if backend == 'cpu':
        return SequentialReducer()

    if backend == 'parallel':
        return ForkJoinReducer()

    if backend == 'gpu':
        from pylinfit.reduction.backends.gpu import GPUReducer
        return GPUReducer()

    raise ValidationError(f"Unknown backend: {backend!r}")


def _as_vector(data: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    arr = check_array(data, name)
    check_1d(arr, name)
    return arr


def _mean(a: NDArray[np.floating[Any]], reducer: Reducer) -> float:
    return reducer.total(a) / a.shape[0]


def _center(
    a: NDArray[np.floating[Any]],
    reducer: Reducer,
    a_mean: float | None = None,
) -> NDArray[np.floating[Any]]:
    if a_mean is None:
        a_mean = _mean(a, reducer)
    return a - a.dtype.type(a_mean)


def mean(data: ArrayLike, *, backend: BackendChoice | Reducer = 'auto') -> float:
    """
    Arithmetic mean of a non-empty 1D sequence.

    Args:
        data: 1D array-like of real numbers
        backend: Reduction strategy (see get_reducer)

    Returns:
        The mean as a Python float

    Raises:
        EmptyInputError: If data has zero length
        DimensionError: If data is not 1D
        ValidationError: If data is not real numeric
    """
    a = _as_vector(data, 'data')
    check_not_empty(a, 'data')
    return _mean(a, get_reducer(backend, a.shape[0]))


def center(data: ArrayLike, *, backend: BackendChoice | Reducer = 'auto') -> NDArray[np.floating[Any]]:
    """
    Subtract the mean from every element.

    Returns a new array with the dtype of the (floating) input; the input is
    not modified. The mean of the result is zero up to rounding.

    Raises:
        EmptyInputError: If data has zero length
        DimensionError: If data is not 1D
        ValidationError: If data is not real numeric
    """
    a = _as_vector(data, 'data')
    check_not_empty(a, 'data')
    return _center(a, get_reducer(backend, a.shape[0]))


def dot_product(
    a: ArrayLike,
    b: ArrayLike,
    *,
    backend: BackendChoice | Reducer = 'auto',
) -> float:
    """
    Sum of elementwise products of two equal-length 1D sequences.

    dot_product(v, v) is the sum of squares of v.

    Raises:
        SizeMismatchError: If len(a) != len(b)
        InsufficientDataError: If len(a) < 2
        DimensionError: If an input is not 1D
        ValidationError: If an input is not real numeric
    """
    a_arr = _as_vector(a, 'a')
    b_arr = _as_vector(b, 'b')
    check_consistent_length(a_arr, b_arr, names=('a', 'b'))
    check_min_samples(a_arr, 2, 'a')

    if a_arr.dtype != b_arr.dtype:
        common = np.result_type(a_arr, b_arr)
        a_arr = a_arr.astype(common)
        b_arr = b_arr.astype(common)

    return get_reducer(backend, a_arr.shape[0]).dot(a_arr, b_arr)
