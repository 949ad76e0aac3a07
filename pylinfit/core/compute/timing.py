"""
Phase timing for fits.

LeastSquaresEngine splits a fit into phases (center, sums_of_squares,
coefficients, sse) and records the wall time of each in Result.timing.
Reducers that queue work asynchronously expose a synchronize() method; the
engine hands it to the Timer so that queued kernels land in the phase that
issued them.
"""

import time
from contextlib import contextmanager
from typing import Callable, Iterator


class Timer:
    """
    Wall-clock timer for the phases of one fit.

    Usage:
        timer = Timer(sync=reducer_synchronize)
        timer.start()
        with timer.phase('center'):
            ...
        timer.stop()
        timer.result()  # {'total_seconds': ..., 'center': ...}

    Args:
        sync: Called before every clock reading. None for synchronous
            reducers.
    """

    def __init__(self, sync: Callable[[], None] | None = None):
        self._sync = sync
        self._phases: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def _now(self) -> float:
        if self._sync is not None:
            self._sync()
        return time.perf_counter()

    def start(self) -> None:
        self._started_at = self._now()

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = self._now() - self._started_at

    @contextmanager
    def phase(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to phase `name`."""
        began = self._now()
        try:
            yield
        finally:
            self._phases[name] = self._phases.get(name, 0.0) + (self._now() - began)

    def result(self) -> dict[str, float]:
        """
        Total and per-phase seconds.

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._phases}
