"""
Fork-join reduction strategy.

Splits the input into contiguous chunks, reduces each chunk on a thread
pool and combines the partial sums. numpy releases the GIL inside its
reduction loops, so chunks are reduced concurrently.

Workers only read disjoint slices of read-only input and each returns a
fresh scalar, so no locking is needed. Partial sums are combined with
math.fsum, which is correctly rounded and therefore independent of the
order in which workers finish. The only difference from SequentialReducer
is reassociation of the sum at chunk boundaries.
"""

from __future__ import annotations

import math
import os
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, Callable
import numpy as np
from numpy.typing import NDArray

from pylinfit.core.exceptions import ValidationError
from pylinfit.reduction.backends.cpu import dot_kernel, rss_kernel, sum_kernel


DEFAULT_CHUNK_SIZE = 1 << 18


class ForkJoinReducer:
    """
    Data-parallel reducer over a thread pool.

    Implements the Reducer protocol.

    Args:
        n_workers: Number of worker threads. Defaults to os.cpu_count().
        chunk_size: Elements per chunk. Inputs no longer than one chunk are
            reduced inline without starting a pool.
    """

    def __init__(self, n_workers: int | None = None, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if n_workers is None:
            n_workers = os.cpu_count() or 1
        if n_workers < 1:
            raise ValidationError(f"n_workers: must be >= 1, got {n_workers}")
        if chunk_size < 1:
            raise ValidationError(f"chunk_size: must be >= 1, got {chunk_size}")
        self.n_workers = n_workers
        self.chunk_size = chunk_size

    @property
    def name(self) -> str:
        return 'parallel'

    def _slices(self, n: int) -> list[slice]:
        return [slice(start, min(start + self.chunk_size, n))
                for start in range(0, n, self.chunk_size)]

    def _fork_join(
        self,
        kernel: Callable[..., float],
        *arrays: NDArray[np.floating[Any]],
    ) -> float:
        slices = self._slices(arrays[0].shape[0])
        if len(slices) <= 1:
            return kernel(*arrays)

        def run(s: slice) -> float:
            return kernel(*(arr[s] for arr in arrays))

        with ThreadPoolExecutor(max_workers=min(self.n_workers, len(slices))) as pool:
            partials = list(pool.map(run, slices))
        return math.fsum(partials)

    def total(self, a: NDArray[np.floating[Any]]) -> float:
        return self._fork_join(sum_kernel, a)

    def dot(
        self,
        a: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
    ) -> float:
        return self._fork_join(dot_kernel, a, b)

    def residual_sum_of_squares(
        self,
        x: NDArray[np.floating[Any]],
        y: NDArray[np.floating[Any]],
        beta0: float,
        beta1: float,
    ) -> float:
        kernel = partial(rss_kernel, beta0=beta0, beta1=beta1)
        return self._fork_join(kernel, x, y)

    def __repr__(self) -> str:
        return f"ForkJoinReducer(n_workers={self.n_workers}, chunk_size={self.chunk_size})"
