"""
Goodness of fit and slope confidence interval.

Pure functions of a FitResult. They also accept a FitSolution, which is
unwrapped to its FitResult.
"""

from __future__ import annotations

import math

from pylinfit.core.exceptions import InsufficientDataError, ValidationError
from pylinfit.core.protocols import QuantileOracle
from pylinfit.core.validation import check_open_unit_interval
from pylinfit.inference.quantile import StudentTQuantile
from pylinfit.regression.solution import FitResult, FitSolution


def _as_fit_result(fit_result: FitResult | FitSolution) -> FitResult:
    if isinstance(fit_result, FitSolution):
        return fit_result.params
    if isinstance(fit_result, FitResult):
        return fit_result
    raise ValidationError(
        f"fit_result: expected FitResult or FitSolution, got {type(fit_result).__name__}"
    )


def _residual_dof(result: FitResult) -> int:
    dof = result.n - 2
    if dof <= 0:
        raise InsufficientDataError(
            f"fit_result: needs n > 2 for residual degrees of freedom, got n={result.n}",
            required=3,
            actual=result.n,
        )
    return dof


def slope_standard_error(fit_result: FitResult | FitSolution) -> float:
    """
    Standard error of the slope estimate.

    se = sqrt(scale * (1 - beta1**2 / scale) / (n - 2)) with
    scale = syy / sxx. The radicand is clamped at zero: on an exact line it
    can come out a few ULPs negative. A constant response (scale == 0) has
    zero standard error.

    Raises:
        InsufficientDataError: If n <= 2
    """
    result = _as_fit_result(fit_result)
    dof = _residual_dof(result)

    scale = result.syy / result.sxx
    if scale == 0.0:
        return 0.0

    variance = scale * (1.0 - result.beta1 * result.beta1 / scale) / dof
    return math.sqrt(max(variance, 0.0))


def confidence_interval_of_slope(
    fit_result: FitResult | FitSolution,
    alpha: float = 0.05,
    *,
    quantile: QuantileOracle | None = None,
) -> tuple[float, float]:
    """
    Two-sided (1 - alpha) confidence interval for the slope.

    Args:
        fit_result: Fit to derive the interval from
        alpha: Significance level in (0, 1); 0.05 gives a 95% interval
        quantile: Student's t quantile oracle, called as
            quantile(1 - alpha/2, n - 2). Defaults to StudentTQuantile.

    Returns:
        (lower, upper), always bracketing beta1

    Raises:
        InsufficientDataError: If n <= 2
        ValidationError: If alpha is not in (0, 1)

    Errors raised by the oracle propagate unchanged.
    """
    result = _as_fit_result(fit_result)
    dof = _residual_dof(result)
    alpha = check_open_unit_interval(alpha, 'alpha')

    if quantile is None:
        quantile = StudentTQuantile()

    se = slope_standard_error(result)
    t = quantile(1.0 - 0.5 * alpha, dof)
    k = t * se

    return (result.beta1 - k, result.beta1 + k)


def coefficient_of_determination(fit_result: FitResult | FitSolution) -> float:
    """R², the share of the variance of y explained by the line: rho**2."""
    result = _as_fit_result(fit_result)
    return result.rho * result.rho
