"""
Simple linear regression.

Public API:
    fit(x, y, ...) -> FitSolution

The fit() function is the only entry point. It handles:
    - Input validation
    - Design construction
    - Reduction strategy selection
    - Result wrapping

Example:
    >>> from pylinfit.regression import fit
    >>> result = fit(x, y)
    >>> print(result.beta0, result.beta1)
    >>> print(result.summary())
"""

from pylinfit.regression.design import PairedDesign
from pylinfit.regression.engine import LeastSquaresEngine
from pylinfit.regression.solution import FitResult, FitSolution
from pylinfit.regression.solvers import fit

__all__ = [
    "fit",
    "PairedDesign",
    "LeastSquaresEngine",
    "FitResult",
    "FitSolution",
]
