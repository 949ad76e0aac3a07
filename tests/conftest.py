"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exact_line():
    """y = 2x on x = 1..5, no noise."""
    x = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    return x, 2.0 * x


@pytest.fixture
def measured_line():
    """Ten noisy measurements of a roughly y = 1 + 2x relationship."""
    x = np.arange(1.0, 11.0)
    y = np.array([3.1, 5.0, 7.2, 9.1, 10.0, 13.2, 15.5, 16.5, 19.0, 21.3])
    return x, y


@pytest.fixture
def noisy_line(rng):
    """200 points of y = -3 + 0.5x with unit noise."""
    x = rng.uniform(0.0, 50.0, size=200)
    y = -3.0 + 0.5 * x + rng.standard_normal(200)
    return x, y
