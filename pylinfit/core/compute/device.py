"""
GPU discovery for the GPU reduction strategy.

torch is imported lazily so that CPU-only installs never need it.
"""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class GPUDevice:
    """
    A GPU that GPUReducer can run on.

    Attributes:
        kind: 'cuda' or 'mps'
        index: CUDA ordinal (0 for MPS)
        label: Name reported by the driver
    """
    kind: Literal['cuda', 'mps']
    index: int
    label: str

    @property
    def torch_spec(self) -> str:
        """Device string accepted by torch.device()."""
        return f'cuda:{self.index}' if self.kind == 'cuda' else 'mps'


def detect_gpu() -> GPUDevice | None:
    """The first usable GPU, CUDA before MPS, or None without torch or a GPU."""
    try:
        import torch
    except ImportError:
        return None

    if torch.cuda.is_available():
        idx = torch.cuda.current_device()
        return GPUDevice('cuda', idx, torch.cuda.get_device_properties(idx).name)

    if hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
        return GPUDevice('mps', 0, 'Apple Silicon GPU (MPS)')

    return None


def require_gpu() -> GPUDevice:
    """
    detect_gpu() for callers that cannot fall back to the CPU.

    Raises:
        RuntimeError: If no GPU is available
    """
    gpu = detect_gpu()
    if gpu is None:
        raise RuntimeError(
            "GPU requested but no GPU available. "
            "Install PyTorch with CUDA or MPS support, or use backend='cpu'."
        )
    return gpu
