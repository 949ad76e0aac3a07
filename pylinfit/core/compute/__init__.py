"""
Shared compute infrastructure for PyLinFit.

GPU discovery, phase timing, precision helpers and tolerance tiers shared
by the reduction strategies and the fit engine.

Reduction strategies themselves live in pylinfit/reduction/backends/.
"""

from pylinfit.core.compute.device import GPUDevice, detect_gpu, require_gpu
from pylinfit.core.compute.timing import Timer

__all__ = [
    "GPUDevice",
    "detect_gpu",
    "require_gpu",
    "Timer",
]
