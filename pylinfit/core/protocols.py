"""
Core protocols for PyLinFit.

These define structural interfaces for the two pluggable capabilities:
the reduction strategy used by the primitives and the fit engine, and the
Student's t quantile oracle used by the inference layer. We use Protocol
(structural typing) rather than ABC so that any object with the right
shape can be injected.
"""

from typing import Protocol, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class Reducer(Protocol):
    """
    Protocol for reduction strategies.

    A reducer turns read-only 1D arrays into scalars. Implementations may
    run sequentially or split the work across workers or devices, but they
    must never write to their inputs and must combine partial results with
    an associative step. Results may differ between strategies only by
    floating-point reassociation error.

    Inputs are validated before they reach a reducer: 1D, floating, finite,
    non-empty and (for binary reductions) of equal length.
    """

    @property
    def name(self) -> str:
        """
        Strategy identifier.

        Examples: 'cpu', 'parallel', 'gpu'
        """
        ...

    def total(self, a: NDArray[np.floating[Any]]) -> float:
        """Sum of all elements."""
        ...

    def dot(
        self,
        a: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
    ) -> float:
        """Sum of elementwise products."""
        ...

    def residual_sum_of_squares(
        self,
        x: NDArray[np.floating[Any]],
        y: NDArray[np.floating[Any]],
        beta0: float,
        beta1: float,
    ) -> float:
        """
        Fused reduction of sum((y - (beta0 + beta1 * x))**2).

        Evaluated over the original (uncentered) data.
        """
        ...


@runtime_checkable
class QuantileOracle(Protocol):
    """
    Protocol for the Student's t quantile function.

    Callable as quantile(probability, dof) -> float. Implementations raise
    on invalid arguments (probability outside (0, 1), dof <= 0); callers
    propagate those errors unchanged.
    """

    def __call__(self, probability: float, dof: float) -> float:
        ...
