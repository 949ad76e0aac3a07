"""
Reduction primitives.

Numerically stable building blocks reused by the fit engine.

Public API:
    mean(data)          - Arithmetic mean
    center(data)        - Mean-centered copy
    dot_product(a, b)   - Sum of elementwise products
    get_reducer(name)   - Reduction strategy ('auto', 'cpu', 'parallel', 'gpu')

Every function takes backend= to choose the strategy. All strategies agree
up to floating-point reassociation error.
"""

from pylinfit.reduction.solvers import (
    PARALLEL_THRESHOLD,
    get_reducer,
    mean,
    center,
    dot_product,
)
from pylinfit.reduction.backends import SequentialReducer, ForkJoinReducer

__all__ = [
    "mean",
    "center",
    "dot_product",
    "get_reducer",
    "PARALLEL_THRESHOLD",
    "SequentialReducer",
    "ForkJoinReducer",
]
