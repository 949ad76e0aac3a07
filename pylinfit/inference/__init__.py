"""
Inference on a fitted line.

Public API:
    confidence_interval_of_slope(fit_result, alpha)  - (lower, upper)
    coefficient_of_determination(fit_result)         - R² = rho²
    slope_standard_error(fit_result)                 - SE of beta1
    StudentTQuantile                                 - default t quantile oracle
"""

from pylinfit.inference.quantile import StudentTQuantile
from pylinfit.inference.intervals import (
    confidence_interval_of_slope,
    coefficient_of_determination,
    slope_standard_error,
)

__all__ = [
    "confidence_interval_of_slope",
    "coefficient_of_determination",
    "slope_standard_error",
    "StudentTQuantile",
]
