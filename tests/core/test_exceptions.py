"""
Tests for the PyLinFit exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyLinFitError)
    - Diagnostic attributes and their defaults
"""

import pytest

from pylinfit.core.exceptions import (
    DegenerateInputError,
    DimensionError,
    EmptyInputError,
    InsufficientDataError,
    NumericalError,
    PyLinFitError,
    SizeMismatchError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyLinFitError."""

    @pytest.mark.parametrize("exc", [
        ValidationError("bad input"),
        EmptyInputError("empty"),
        InsufficientDataError("too few"),
        DimensionError("wrong shape"),
        SizeMismatchError("lengths differ"),
        NumericalError("failed"),
        DegenerateInputError("no spread"),
    ])
    def test_all_are_pylinfit_errors(self, exc):
        with pytest.raises(PyLinFitError):
            raise exc

    def test_empty_input_is_validation_error(self):
        assert isinstance(EmptyInputError("empty"), ValidationError)

    def test_insufficient_data_is_validation_error(self):
        assert isinstance(InsufficientDataError("too few"), ValidationError)

    def test_size_mismatch_is_dimension_error(self):
        assert isinstance(SizeMismatchError("lengths differ"), DimensionError)

    def test_size_mismatch_is_insufficient_data(self):
        err = SizeMismatchError("lengths differ", lengths={"x": 4, "y": 3})
        assert isinstance(err, InsufficientDataError)
        assert isinstance(err, DimensionError)
        assert err.required is None
        assert err.actual is None
        assert err.lengths == {"x": 4, "y": 3}

    def test_degenerate_input_is_numerical_error(self):
        err = DegenerateInputError("no spread")
        assert isinstance(err, NumericalError)
        assert not isinstance(err, ValidationError)

    def test_insufficient_data_is_not_size_mismatch(self):
        assert not isinstance(InsufficientDataError("too few"), SizeMismatchError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:
    """Exceptions carry what went wrong."""

    def test_empty_input_name(self):
        err = EmptyInputError("data: must not be empty", name="data")
        assert err.name == "data"
        assert str(err) == "data: must not be empty"

    def test_insufficient_data_counts(self):
        err = InsufficientDataError("need 3", required=3, actual=2)
        assert err.required == 3
        assert err.actual == 2

    def test_size_mismatch_lengths(self):
        err = SizeMismatchError("x=4, y=3", lengths={"x": 4, "y": 3})
        assert err.lengths == {"x": 4, "y": 3}

    def test_degenerate_input_attributes(self):
        err = DegenerateInputError("flat", name="x", sum_of_squares=0.0)
        assert err.name == "x"
        assert err.sum_of_squares == 0.0

    def test_defaults_are_none_or_empty(self):
        assert EmptyInputError("e").name is None
        assert InsufficientDataError("i").required is None
        assert InsufficientDataError("i").actual is None
        assert SizeMismatchError("s").lengths == {}
        assert DegenerateInputError("d").sum_of_squares is None
