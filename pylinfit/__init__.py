"""
PyLinFit: simple linear regression by ordinary least squares.

Fits y = beta0 + beta1 * x to paired samples and reports the coefficients
with goodness of fit and a confidence interval for the slope. Sums can run
sequentially, on a thread pool or on a GPU.

Submodules:
    reduction: mean, center, dot_product and reduction strategies
    regression: fit() and the FitResult / FitSolution types
    inference: slope confidence interval and coefficient of determination
"""

__version__ = "0.1.0"

from pylinfit import reduction
from pylinfit import regression
from pylinfit import inference
from pylinfit.regression import fit, FitResult, FitSolution
from pylinfit.inference import (
    confidence_interval_of_slope,
    coefficient_of_determination,
)

__all__ = [
    "__version__",
    "reduction",
    "regression",
    "inference",
    "fit",
    "FitResult",
    "FitSolution",
    "confidence_interval_of_slope",
    "coefficient_of_determination",
]
