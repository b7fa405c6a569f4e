"""
Core Type Definitions
=====================

Fundamental types and aliases used throughout pysatl-numerics.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from math import inf, isnan

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""

CoefficientFunc = Callable[[int, float], float]
"""Type alias for continued fraction coefficients ``(n, x) -> float``."""


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D interval with configurable closure.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint of the interval.
    right : float, default=inf
        Right endpoint of the interval.
    left_closed : bool, default=True
        Whether left endpoint is included (ignored if left = -inf).
    right_closed : bool, default=True
        Whether right endpoint is included (ignored if right = inf).
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        """Adjust closure for infinite endpoints."""
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    def contains(self, x: float) -> bool:
        """
        Check if a point is contained in the interval.

        Parameters
        ----------
        x : float
            Point to check.

        Returns
        -------
        bool
            True for points within the interval, False otherwise (NaN included).
        """
        if isnan(x):
            return False
        left_ok = x > self.left or (self.left_closed and x >= self.left)
        right_ok = x < self.right or (self.right_closed and x <= self.right)
        return left_ok and right_ok

    def __contains__(self, x: object) -> bool:
        """Check if a single point is in the interval."""
        return isinstance(x, int | float) and self.contains(float(x))


__all__ = [
    "ScalarFunc",
    "CoefficientFunc",
    "Interval1D",
]
