"""
GPU reduction strategy using PyTorch.

Performance path for very large inputs, validated against the CPU
reference. Supports CUDA (Linux/Windows) and MPS (macOS Apple Silicon).

FP32 by default. Results come back as Python floats.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinfit.core.compute.device import GPUDevice, require_gpu


class GPUReducer:
    """
    Reducer that runs on a CUDA or MPS device.

    Implements the Reducer protocol. Each call copies its inputs to the
    device, reduces there and copies back one scalar.

    Args:
        device: Target GPU. If None, require_gpu() picks one.
        use_fp64: Reduce in float64. Not supported on MPS.
    """

    def __init__(self, device: GPUDevice | None = None, use_fp64: bool = False):
        if device is None:
            device = require_gpu()
        import torch

        if use_fp64 and device.kind == 'mps':
            raise RuntimeError("MPS does not support float64; use use_fp64=False")

        self.gpu = device
        self.device = torch.device(device.torch_spec)
        self.dtype = torch.float64 if use_fp64 else torch.float32
        self._torch = torch

    @property
    def name(self) -> str:
        return 'gpu_fp64' if self.dtype == self._torch.float64 else 'gpu_fp32'

    def synchronize(self) -> None:
        """Block until kernels queued on the device have finished."""
        if self.gpu.kind == 'cuda':
            self._torch.cuda.synchronize(self.device)
        else:
            self._torch.mps.synchronize()

    def _to_device(self, a: NDArray[np.floating[Any]]):
        return self._torch.as_tensor(np.array(a), device=self.device, dtype=self.dtype)

    def total(self, a: NDArray[np.floating[Any]]) -> float:
        return float(self._torch.sum(self._to_device(a)).item())

    def dot(
        self,
        a: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
    ) -> float:
        return float(self._torch.dot(self._to_device(a), self._to_device(b)).item())

    def residual_sum_of_squares(
        self,
        x: NDArray[np.floating[Any]],
        y: NDArray[np.floating[Any]],
        beta0: float,
        beta1: float,
    ) -> float:
        residuals = self._to_device(y) - (beta0 + beta1 * self._to_device(x))
        return float(self._torch.dot(residuals, residuals).item())

    def __repr__(self) -> str:
        return f"GPUReducer(device={self.gpu.label!r}, dtype={self.dtype})"
