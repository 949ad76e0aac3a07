"""
Tests for input validation utilities.

Validates every function in core/validation.py.
"""

import numpy as np
import pytest

from pylinfit.core.exceptions import (
    DimensionError,
    EmptyInputError,
    InsufficientDataError,
    SizeMismatchError,
    ValidationError,
)
from pylinfit.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_not_empty,
    check_open_unit_interval,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to a floating ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_preserved(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "x")
        assert result.dtype == np.float32

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "x")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="real numeric"):
            check_array(np.array([1 + 2j, 3 + 0j]), "x")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="x"):
            check_array([1.0, "two", None], "x")


# ═══════════════════════════════════════════════════════════════════════
# Shape and content checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "x")

    def test_nan_and_inf_counted(self):
        with pytest.raises(ValidationError, match=r"1 NaN, 1 Inf"):
            check_finite(np.array([1.0, np.nan, np.inf]), "x")


class TestCheck1d:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((3, 2)), "x")


class TestCheckNotEmpty:

    def test_empty_rejected(self):
        with pytest.raises(EmptyInputError) as exc_info:
            check_not_empty(np.array([]), "data")
        assert exc_info.value.name == "data"

    def test_single_element_passes(self):
        check_not_empty(np.array([1.0]), "data")


class TestCheckConsistentLength:

    def test_equal_lengths_pass(self):
        check_consistent_length(np.zeros(3), np.zeros(3), names=("a", "b"))

    def test_mismatch_reports_lengths(self):
        with pytest.raises(SizeMismatchError, match="x=4, y=3") as exc_info:
            check_consistent_length(np.zeros(4), np.zeros(3), names=("x", "y"))
        assert exc_info.value.lengths == {"x": 4, "y": 3}

    def test_names_must_match_arrays(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.zeros(3), names=("a",))


class TestCheckMinSamples:

    def test_enough_passes(self):
        check_min_samples(np.zeros(3), 3, "x")

    def test_too_few_rejected(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            check_min_samples(np.zeros(2), 3, "x")
        assert exc_info.value.required == 3
        assert exc_info.value.actual == 2


class TestCheckOpenUnitInterval:

    @pytest.mark.parametrize("value", [1e-12, 0.05, 0.5, 0.999])
    def test_inside_passes(self, value):
        assert check_open_unit_interval(value, "alpha") == value

    @pytest.mark.parametrize("value", [0.0, 1.0, -0.1, 1.5, float("nan")])
    def test_outside_rejected(self, value):
        with pytest.raises(ValidationError, match="alpha"):
            check_open_unit_interval(value, "alpha")

    def test_non_number_rejected(self):
        with pytest.raises(ValidationError, match="real number"):
            check_open_unit_interval("0.05x", "alpha")
