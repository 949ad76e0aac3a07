"""
Regression solution types.

Contains the parameter payload (FitResult) and the user-facing solution
wrapper (FitSolution).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import math
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinfit.core.result import Result
from pylinfit.core.validation import check_array, check_finite

if TYPE_CHECKING:
    from pylinfit.core.protocols import QuantileOracle
    from pylinfit.regression.design import PairedDesign


@dataclass(frozen=True)
class FitResult:
    """
    Parameter payload for a simple least squares fit.

    Coefficients of y = beta0 + beta1 * x together with the sums they were
    computed from. Created once by the fit engine and never mutated.

    Attributes:
        beta0: Intercept
        beta1: Slope
        rho: Pearson correlation coefficient, in [-1, 1]
        sxx: Sum of squared deviations of x from its mean (> 0)
        syy: Sum of squared deviations of y from its mean (>= 0)
        sxy: Sum of cross deviations
        sse: Sum of squared residuals (>= 0)
        n: Number of sample pairs (>= 3)
    """
    beta0: float
    beta1: float
    rho: float
    sxx: float
    syy: float
    sxy: float
    sse: float
    n: int


@dataclass
class FitSolution:
    """
    User-facing fit results.

    Wraps the engine's Result[FitResult] and the design it was fitted on.
    Every FitResult field is available as a property, so a FitSolution can
    be passed anywhere a FitResult is accepted.
    """
    _result: Result[FitResult]
    _design: 'PairedDesign'

    @property
    def params(self) -> FitResult:
        return self._result.params

    @property
    def beta0(self) -> float:
        return self._result.params.beta0

    @property
    def beta1(self) -> float:
        return self._result.params.beta1

    @property
    def rho(self) -> float:
        return self._result.params.rho

    @property
    def sxx(self) -> float:
        return self._result.params.sxx

    @property
    def syy(self) -> float:
        return self._result.params.syy

    @property
    def sxy(self) -> float:
        return self._result.params.sxy

    @property
    def sse(self) -> float:
        return self._result.params.sse

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def dof(self) -> int:
        """Residual degrees of freedom, n - 2."""
        return self.n - 2

    @property
    def r_squared(self) -> float:
        from pylinfit.inference import coefficient_of_determination
        return coefficient_of_determination(self.params)

    @property
    def residual_std_error(self) -> float:
        """sqrt(SSE / (n - 2))."""
        return math.sqrt(self.sse / self.dof)

    @property
    def slope_standard_error(self) -> float:
        from pylinfit.inference import slope_standard_error
        return slope_standard_error(self.params)

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self.predict(self._design.x)

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._design.y - self.fitted_values

    def predict(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Evaluate the fitted line at new predictor values.

        Returns an array in the dtype of the fitted data.

        Raises:
            ValidationError: If x is non-numeric or not finite
        """
        x_arr = check_array(x, 'x')
        check_finite(x_arr, 'x')
        x_arr = x_arr.astype(self._design.dtype, copy=False)
        return self.beta0 + self.beta1 * x_arr

    def confint_slope(
        self,
        alpha: float = 0.05,
        *,
        quantile: 'QuantileOracle | None' = None,
    ) -> tuple[float, float]:
        """Two-sided (1 - alpha) confidence interval of the slope."""
        from pylinfit.inference import confidence_interval_of_slope
        return confidence_interval_of_slope(self.params, alpha, quantile=quantile)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self, alpha: float = 0.05) -> str:
        """Generate a plain-text summary of the fit."""
        lower, upper = self.confint_slope(alpha)
        level = 100.0 * (1.0 - alpha)
        lines = [
            "Simple Linear Regression Results",
            "=" * 60,
            f"Observations: {self.n}",
            f"R-squared: {self.r_squared:.6f}",
            f"Correlation (rho): {self.rho:.6f}",
            f"Residual Std. Error: {self.residual_std_error:.6f} on {self.dof} DF",
            "",
            "Coefficients:",
            "-" * 60,
            f"  Intercept: {self.beta0:14.6f}",
            f"  Slope:     {self.beta1:14.6f}  (SE {self.slope_standard_error:.6f})",
            f"  {level:g}% CI for slope: [{lower:.6f}, {upper:.6f}]",
            "-" * 60,
            f"Backend: {self.backend_name}",
        ]
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"FitSolution(n={self.n}, beta0={self.beta0:.6g}, "
            f"beta1={self.beta1:.6g}, r_squared={self.r_squared:.4f})"
        )
