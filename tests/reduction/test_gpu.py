"""
GPU reduction strategy tests.

Validates GPU results against the CPU reference.
Skipped if no GPU is available.
"""

from __future__ import annotations

import numpy as np
import pytest

try:
    import torch
    HAS_GPU = torch.cuda.is_available() or (
        hasattr(torch.backends, 'mps') and torch.backends.mps.is_available()
    )
except ImportError:
    HAS_GPU = False

pytestmark = pytest.mark.skipif(not HAS_GPU, reason="No GPU available")

from pylinfit import fit
from pylinfit.core.compute.tolerances import select_tolerance
from pylinfit.reduction import dot_product, mean


class TestGPUvsCPU:

    tol = select_tolerance("gpu_fp32")

    @pytest.fixture
    def data(self):
        rng = np.random.default_rng(42)
        return rng.standard_normal(5000), rng.standard_normal(5000)

    def test_mean(self, data):
        a, _ = data
        np.testing.assert_allclose(
            mean(a, backend='gpu'), mean(a, backend='cpu'),
            rtol=self.tol.rtol, atol=self.tol.atol,
        )

    def test_dot_product(self, data):
        a, b = data
        np.testing.assert_allclose(
            dot_product(a, b, backend='gpu'), dot_product(a, b, backend='cpu'),
            rtol=self.tol.rtol, atol=1e-2,
        )

    def test_fit(self):
        rng = np.random.default_rng(0)
        x = rng.uniform(0.0, 10.0, 2000)
        y = 1.0 + 3.0 * x + rng.standard_normal(2000)
        cpu = fit(x, y, backend='cpu')
        gpu = fit(x, y, backend='gpu')
        assert gpu.backend_name.startswith('gpu')
        np.testing.assert_allclose(gpu.beta1, cpu.beta1, rtol=self.tol.rtol)
        np.testing.assert_allclose(gpu.beta0, cpu.beta0, rtol=1e-3)
        np.testing.assert_allclose(gpu.rho, cpu.rho, rtol=self.tol.rtol)

    def test_half_precision_input(self):
        x = np.arange(300, dtype=np.float16)
        gpu = fit(x, 2 * x, backend='gpu')
        np.testing.assert_allclose(gpu.beta1, 2.0, rtol=self.tol.rtol)
