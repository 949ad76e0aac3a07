"""
Generic result container for PyLinFit computations.

The Result class is the envelope every engine returns. It carries the
parameter payload together with metadata, timing and non-fatal warnings,
so the payload itself stays a plain immutable record.

Design decisions:
    - Generic over parameter payload P
    - info dict for flexible metadata (method, dtype, reducer)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Parameter payload (e.g. FitResult)
        info: Structured metadata (method, sample size, reducer)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the engine that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=FitResult(beta0=0.0, beta1=2.0, ...),
        ...     info={'method': 'ols_centered', 'n': 5},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_ols'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
