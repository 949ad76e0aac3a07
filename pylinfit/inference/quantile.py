"""
Student's t quantile oracle.

scipy.stats.t.ppf returns NaN for arguments outside its domain instead of
raising. The oracle checks the domain first so that a bad probability or
degrees of freedom fails loudly.
"""

import math

from scipy import stats as sp_stats

from pylinfit.core.exceptions import ValidationError
from pylinfit.core.validation import check_open_unit_interval


class StudentTQuantile:
    """
    Quantile function of Student's t distribution.

    Implements the QuantileOracle protocol.

    Example:
        >>> StudentTQuantile()(0.975, 8)
        2.306004135204166
    """

    def __call__(self, probability: float, dof: float) -> float:
        """
        Value below which `probability` of the t(dof) mass lies.

        Raises:
            ValidationError: If probability is not in (0, 1) or dof is not
                a positive finite number
        """
        p = check_open_unit_interval(probability, 'probability')
        try:
            df = float(dof)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"dof: expected a real number, got {dof!r}") from e
        if not (math.isfinite(df) and df > 0.0):
            raise ValidationError(f"dof: must be a positive finite number, got {df}")

        return float(sp_stats.t.ppf(p, df))

    def __repr__(self) -> str:
        return "StudentTQuantile()"
