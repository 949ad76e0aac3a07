"""
Reduction strategies.

Available strategies:
    SequentialReducer: CPU reference implementation (numpy)
    ForkJoinReducer: chunked reduction on a thread pool
    GPUReducer: PyTorch on CUDA/MPS (import from .gpu; needs torch)
"""

from pylinfit.reduction.backends.cpu import SequentialReducer
from pylinfit.reduction.backends.parallel import ForkJoinReducer

__all__ = [
    "SequentialReducer",
    "ForkJoinReducer",
]
