"""
Exception hierarchy for PyLinFit.

All exceptions inherit from PyLinFitError to allow catching any
library-specific error. Input problems are ValidationErrors, numerical
degeneracy is a NumericalError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never return a zero-valued result in place of raising
"""


class PyLinFitError(Exception):
    """Base exception for all PyLinFit errors."""
    pass


class ValidationError(PyLinFitError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class EmptyInputError(ValidationError):
    """
    A reduction received a zero-length sequence.

    Attributes:
        name: Parameter name of the empty input
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class InsufficientDataError(ValidationError):
    """
    Fewer data points than the operation requires.

    A fit needs at least 3 pairs, a dot product at least 2 elements and
    a slope confidence interval at least 1 residual degree of freedom.

    Attributes:
        required: Minimum count the operation needs
        actual: Count that was supplied
    """

    def __init__(
        self,
        message: str,
        required: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.required = required
        self.actual = actual


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions.
    """
    pass


class SizeMismatchError(DimensionError, InsufficientDataError):
    """
    Sequences that must have equal length do not.

    Also an InsufficientDataError: a y value without its x (or the reverse)
    leaves that observation unusable, so callers guarding against too
    little data catch this case too. required and actual are left None.

    Attributes:
        lengths: Mapping of parameter name to its length
    """

    def __init__(self, message: str, lengths: dict[str, int] | None = None):
        super().__init__(message)
        self.lengths = dict(lengths) if lengths is not None else {}


class NumericalError(PyLinFitError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateInputError(NumericalError):
    """
    Input has the right size but no slope can be defined.

    Raised when the predictor has (numerically) zero variance, i.e. all
    x values are identical.

    Attributes:
        name: Name of the degenerate variable
        sum_of_squares: Centered sum of squares that was found to be zero
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        sum_of_squares: float | None = None
    ):
        super().__init__(message)
        self.name = name
        self.sum_of_squares = sum_of_squares
