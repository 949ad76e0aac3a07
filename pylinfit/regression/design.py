"""
Paired-sample design.

PairedDesign holds the validated predictor x and response y of a simple
linear regression. Everything the fit engine relies on (1D, finite, equal
length, at least 3 pairs, one common floating dtype) is checked here once,
so the engine can trust its input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinfit.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_consistent_length,
    check_min_samples,
)

MIN_SAMPLES = 3


@dataclass(frozen=True)
class PairedDesign:
    """
    Validated (x, y) sample pairs.

    Immutable after construction: x and y are read-only copies of the
    caller's data. They share one floating dtype:
    float32 input stays float32, mixed input is promoted, integer input
    becomes float64.

    Construction:
        PairedDesign.from_arrays(x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> PairedDesign:
        """
        Build PairedDesign from array-likes.

        Column vectors of shape (n, 1) are flattened.

        Raises:
            ValidationError: If an input is non-numeric or not finite
            DimensionError: If an input is not 1D
            SizeMismatchError: If len(x) != len(y)
            InsufficientDataError: If there are fewer than 3 pairs
        """
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        return cls._build(x_arr, y_arr)

    @classmethod
    def _build(cls, x: NDArray, y: NDArray) -> PairedDesign:
        """Internal builder with validation."""
        if x.ndim == 2 and x.shape[1] == 1:
            x = x.ravel()
        if y.ndim == 2 and y.shape[1] == 1:
            y = y.ravel()

        check_1d(x, 'x')
        check_1d(y, 'y')
        check_consistent_length(x, y, names=('x', 'y'))
        check_min_samples(x, MIN_SAMPLES, 'x')
        check_finite(x, 'x')
        check_finite(y, 'y')

        # Private read-only copies: the fit results stored alongside must
        # keep describing these exact values.
        dtype = np.result_type(x, y)
        x = np.array(x, dtype=dtype)
        y = np.array(y, dtype=dtype)
        x.flags.writeable = False
        y.flags.writeable = False

        return cls(_x=x, _y=y, _n=int(x.shape[0]))

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor values (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response values (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of sample pairs."""
        return self._n

    @property
    def dtype(self) -> np.dtype:
        """Common floating dtype of x and y."""
        return self._x.dtype

    def __repr__(self) -> str:
        return f"PairedDesign(n={self._n}, dtype={self.dtype})"
