"""
Core infrastructure for PyLinFit.

This module provides shared abstractions and utilities used by the
reduction, regression and inference subpackages.

Key components:
    protocols: Reducer, QuantileOracle protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Device detection, timing, precision and tolerance tiers
"""

from pylinfit.core.protocols import Reducer, QuantileOracle
from pylinfit.core.result import Result
from pylinfit.core.exceptions import (
    PyLinFitError,
    ValidationError,
    EmptyInputError,
    InsufficientDataError,
    DimensionError,
    SizeMismatchError,
    NumericalError,
    DegenerateInputError,
)

__all__ = [
    # Protocols
    "Reducer",
    "QuantileOracle",
    # Result
    "Result",
    # Exceptions
    "PyLinFitError",
    "ValidationError",
    "EmptyInputError",
    "InsufficientDataError",
    "DimensionError",
    "SizeMismatchError",
    "NumericalError",
    "DegenerateInputError",
]
