"""
Solver dispatch for regression.

This module provides the fit() function (public API).
"""

from numpy.typing import ArrayLike

from pylinfit.core.protocols import Reducer
from pylinfit.reduction.solvers import BackendChoice, get_reducer
from pylinfit.regression.design import PairedDesign
from pylinfit.regression.engine import LeastSquaresEngine
from pylinfit.regression.solution import FitSolution


def fit(
    x: ArrayLike | PairedDesign,
    y: ArrayLike | None = None,
    *,
    backend: BackendChoice | Reducer = 'auto',
) -> FitSolution:
    """
    Fit y = beta0 + beta1 * x by ordinary least squares.

    All input validation, strategy selection and result wrapping happens
    here. Invalid input always raises; there is no zero-valued fallback.

    Args:
        x: Predictor values (n,), or a prebuilt PairedDesign
        y: Response values (n,). Required unless x is a PairedDesign.
        backend: Reduction strategy:
            - 'auto': 'parallel' for n >= PARALLEL_THRESHOLD, else 'cpu'
            - 'cpu': sequential numpy reductions
            - 'parallel': fork-join reductions on a thread pool
            - 'gpu': PyTorch on CUDA/MPS (float32)
            - or any Reducer instance

    Returns:
        FitSolution exposing the FitResult fields, R², the slope confidence
        interval and a summary

    Raises:
        ValidationError: If inputs are non-numeric or not finite
        DimensionError: If an input is not 1D
        SizeMismatchError: If len(x) != len(y)
        InsufficientDataError: If there are fewer than 3 pairs
        DegenerateInputError: If all x values are identical
        NumericalError: If a sum of squares overflows
        ValueError: If y is missing, or given together with a PairedDesign

    Example:
        >>> from pylinfit import fit
        >>> result = fit([1, 2, 3, 4, 5], [2, 4, 6, 8, 10])
        >>> result.beta1
        2.0
    """
    if isinstance(x, PairedDesign):
        if y is not None:
            raise ValueError("y must be omitted when x is a PairedDesign")
        design = x
    else:
        if y is None:
            raise ValueError("y required when x is not a PairedDesign")
        design = PairedDesign.from_arrays(x, y)

    engine = LeastSquaresEngine(get_reducer(backend, design.n))
    result = engine.solve(design)

    return FitSolution(_result=result, _design=design)
