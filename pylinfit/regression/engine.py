"""
Least squares fit engine for y = beta0 + beta1 * x.

Works on mean-centered data: sums of squares of centered values do not
suffer the catastrophic cancellation of sum(x**2) - n * mean(x)**2 when
the data sit far from zero.
"""

from __future__ import annotations

import math
import warnings
from typing import Any

from pylinfit.core.compute.precision import is_negligible_sum_of_squares
from pylinfit.core.compute.timing import Timer
from pylinfit.core.exceptions import DegenerateInputError, NumericalError
from pylinfit.core.protocols import Reducer
from pylinfit.core.result import Result
from pylinfit.reduction.solvers import _mean, _center
from pylinfit.regression.design import PairedDesign
from pylinfit.regression.solution import FitResult


class LeastSquaresEngine:
    """
    Ordinary least squares for one predictor.

    All sums go through the injected Reducer, so the same algorithm runs
    sequentially, on a thread pool or on a GPU.

    Args:
        reducer: Reduction strategy used for every sum
    """

    def __init__(self, reducer: Reducer):
        self.reducer = reducer

    @property
    def name(self) -> str:
        return f'{self.reducer.name}_ols'

    def solve(self, design: PairedDesign) -> Result[FitResult]:
        """
        Fit the line.

        Algorithm:
            1. Center x and y around their means
            2. sxx = x0 . x0; reject if numerically zero
            3. syy = y0 . y0, sxy = x0 . y0
            4. beta1 = sxy / sxx, beta0 = mean(y) - beta1 * mean(x)
            5. rho = sxy / sqrt(sxx * syy)
            6. sse in one fused pass over the uncentered data

        Args:
            design: Validated paired design

        Returns:
            Result containing FitResult

        Raises:
            NumericalError: If a sum of squares overflows
            DegenerateInputError: If all x values are (numerically) equal
        """
        reducer = self.reducer
        timer = Timer(sync=getattr(reducer, 'synchronize', None))
        timer.start()

        x, y, n = design.x, design.y, design.n
        warnings_list: list[str] = []

        with timer.phase('center'):
            x_mean = _mean(x, reducer)
            y_mean = _mean(y, reducer)
            x0 = _center(x, reducer, x_mean)
            y0 = _center(y, reducer, y_mean)

        with timer.phase('sums_of_squares'):
            sxx = reducer.dot(x0, x0)
            syy = reducer.dot(y0, y0)
            sxy = reducer.dot(x0, y0)
            _check_finite_sums(design, sxx=sxx, syy=syy, sxy=sxy)
            if is_negligible_sum_of_squares(sxx, x):
                raise DegenerateInputError(
                    f"x: all {n} values are identical (centered sum of squares "
                    f"{sxx:.3g}); no slope can be defined",
                    name='x',
                    sum_of_squares=sxx,
                )

        with timer.phase('coefficients'):
            beta1 = sxy / sxx
            beta0 = y_mean - beta1 * x_mean

            if is_negligible_sum_of_squares(syy, y):
                rho = 0.0
                msg = (
                    "y has zero variance; correlation is undefined and "
                    "reported as 0"
                )
                warnings.warn(msg, RuntimeWarning, stacklevel=3)
                warnings_list.append(msg)
            else:
                rho = sxy / (math.sqrt(sxx) * math.sqrt(syy))

        with timer.phase('sse'):
            sse = reducer.residual_sum_of_squares(x, y, beta0, beta1)
            _check_finite_sums(design, sse=sse)

        timer.stop()

        params = FitResult(
            beta0=beta0,
            beta1=beta1,
            rho=rho,
            sxx=sxx,
            syy=syy,
            sxy=sxy,
            sse=sse,
            n=n,
        )

        info: dict[str, Any] = {
            'method': 'ols_centered',
            'n': n,
            'dtype': str(design.dtype),
            'reducer': reducer.name,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


def _check_finite_sums(design: PairedDesign, **sums: float) -> None:
    """Raise NumericalError if any of the named sums overflowed."""
    bad = {name: value for name, value in sums.items() if not math.isfinite(value)}
    if bad:
        listed = ", ".join(f"{name}={value}" for name, value in bad.items())
        raise NumericalError(
            f"sums of squares are not finite ({listed}) for {design.n} "
            f"{design.dtype} pairs; rescale x and y"
        )
