"""
Tests for mean(), center() and dot_product().
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
from pylinfit.reduction import center, dot_product, mean


class TestMean:

    def test_simple(self):
        assert mean([1.0, 2.0, 3.0, 4.0]) == 2.5

    def test_single_element(self):
        assert mean([7.0]) == 7.0

    def test_integers_accepted(self):
        assert mean([1, 2, 3]) == 2.0

    def test_returns_python_float(self):
        assert isinstance(mean(np.array([1.0, 2.0], dtype=np.float32)), float)

    def test_matches_numpy(self, rng):
        data = rng.standard_normal(1000) * 1e3 + 5e4
        np.testing.assert_allclose(mean(data), np.mean(data), rtol=1e-14)

    def test_empty_rejected(self):
        with pytest.raises(EmptyInputError):
            mean([])

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            mean(np.ones((2, 2)))

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            mean(["a", "b"])


class TestCenter:

    def test_simple(self):
        np.testing.assert_array_equal(center([1.0, 2.0, 3.0]), [-1.0, 0.0, 1.0])

    def test_mean_of_centered_is_zero(self, rng):
        data = rng.standard_normal(500) * 10.0 + 1e6
        centered = center(data)
        scale = np.max(np.abs(data))
        assert abs(mean(centered)) < 1e-12 * scale

    def test_input_not_modified(self):
        data = np.array([1.0, 2.0, 6.0])
        original = data.copy()
        result = center(data)
        np.testing.assert_array_equal(data, original)
        assert result is not data

    def test_float32_preserved(self):
        data = np.array([1.0, 2.0, 3.0], dtype=np.float32)
        assert center(data).dtype == np.float32

    def test_integers_promoted(self):
        assert center([1, 2, 3]).dtype == np.float64

    def test_empty_rejected(self):
        with pytest.raises(EmptyInputError):
            center(np.array([]))


class TestDotProduct:

    def test_simple(self):
        assert dot_product([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == 32.0

    def test_sum_of_squares(self):
        assert dot_product([3.0, 4.0], [3.0, 4.0]) == 25.0

    def test_commutative(self, rng):
        a = rng.standard_normal(101)
        b = rng.standard_normal(101)
        assert dot_product(a, b) == dot_product(b, a)

    def test_mixed_precision_promoted(self):
        a = np.array([1.0, 2.0], dtype=np.float32)
        b = np.array([3.0, 4.0], dtype=np.float64)
        assert dot_product(a, b) == 11.0

    def test_size_mismatch(self):
        with pytest.raises(SizeMismatchError):
            dot_product([1.0, 2.0, 3.0], [1.0, 2.0])

    def test_size_mismatch_checked_before_length(self):
        with pytest.raises(SizeMismatchError):
            dot_product([1.0], [1.0, 2.0])

    def test_single_element_rejected(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            dot_product([1.0], [2.0])
        assert exc_info.value.required == 2

    def test_empty_rejected(self):
        with pytest.raises(InsufficientDataError):
            dot_product([], [])
