"""
Tolerance tiers for numerical comparison.

Defines agreement expectations between reduction strategies:
- CPU FP64 (reference): sequential numpy reductions in double precision
- CPU FP32: sequential reductions in single precision
- Parallel FP64: fork-join reductions, differ from the reference only by
  reassociation of the partial sums
- GPU FP32: torch reductions in single precision

Used by the test suite when comparing strategies.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, sequential reference',
)

CPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='cpu_fp32',
    description='CPU single precision, sequential',
)

PARALLEL_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='parallel_fp64',
    description='Fork-join double precision, reassociated partial sums',
)

GPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='gpu_fp32',
    description='GPU single precision, statistically equivalent',
)


def select_tolerance(reducer_name: str, single_precision: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a reducer compared against the CPU reference."""
    if 'gpu' in reducer_name:
        return GPU_FP32
    if single_precision:
        return CPU_FP32
    if 'parallel' in reducer_name:
        return PARALLEL_FP64
    return CPU_FP64
