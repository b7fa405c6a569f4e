"""
Generic evaluation of continued fractions
``b0 + a1 / (b1 + a2 / (b2 + a3 / (b3 + ...)))``.

The coefficients are supplied as plain callables of the term index and the
evaluation point; the fraction is evaluated with the modified Lentz algorithm.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import isinf, isnan
from typing import TYPE_CHECKING

from pysatl_numerics.config import get_config
from pysatl_numerics.errors import ConvergenceError, MaxCountExceededError
from pysatl_numerics.utils.precision import equals

if TYPE_CHECKING:
    from pysatl_numerics.types import CoefficientFunc

SMALL = 1e-50
"""Replacement for zero denominators, also the epsilon of the zero checks."""


@dataclass(frozen=True, slots=True)
class ContinuedFraction:
    """
    Continued fraction defined by its coefficient functions.

    Parameters
    ----------
    a : Callable[[int, float], float]
        Partial numerators: ``a(n, x)`` is the n-th numerator at point x
        (``n >= 1``).
    b : Callable[[int, float], float]
        Partial denominators: ``b(n, x)`` is the n-th denominator at point x;
        ``b(0, x)`` is the leading term.
    """

    a: CoefficientFunc
    b: CoefficientFunc

    def evaluate(
        self,
        x: float,
        epsilon: float | None = None,
        max_iterations: int | None = None,
    ) -> float:
        """
        Evaluate the continued fraction at ``x``.

        Parameters
        ----------
        x : float
            Evaluation point.
        epsilon : float, optional
            Stop once ``|delta_n - 1| < epsilon``. Defaults to
            ``continued_fraction_epsilon`` of the configuration.
        max_iterations : int, optional
            Term budget. Defaults to ``continued_fraction_max_iterations``.

        Returns
        -------
        float
            Value of the continued fraction.

        Raises
        ------
        ConvergenceError
            If a partial value becomes infinite or NaN.
        MaxCountExceededError
            If the budget is exhausted before convergence.
        """
        config = get_config()
        if epsilon is None:
            epsilon = config.continued_fraction_epsilon
        if max_iterations is None:
            max_iterations = config.continued_fraction_max_iterations

        h_prev = self.b(0, x)
        if equals(h_prev, 0.0, SMALL):
            h_prev = SMALL

        n = 1
        d_prev = 0.0
        c_prev = h_prev
        h_n = h_prev

        while n < max_iterations:
            a = self.a(n, x)
            b = self.b(n, x)

            d_n = b + a * d_prev
            if equals(d_n, 0.0, SMALL):
                d_n = SMALL
            d_n = 1.0 / d_n

            c_n = b + a / c_prev
            if equals(c_n, 0.0, SMALL):
                c_n = SMALL

            delta_n = c_n * d_n
            h_n = h_prev * delta_n

            if isinf(h_n):
                raise ConvergenceError(
                    f"continued fraction convergents diverged to +/- infinity for value {x}", x
                )
            if isnan(h_n):
                raise ConvergenceError(
                    f"continued fraction diverged to NaN for value {x}", x
                )

            if abs(delta_n - 1.0) < epsilon:
                break

            d_prev = d_n
            c_prev = c_n
            h_prev = h_n
            n += 1

        if n >= max_iterations:
            raise MaxCountExceededError(
                max_iterations, f"continued fraction convergents failed to converge for value {x}"
            )

        return h_n


__all__ = [
    "ContinuedFraction",
]
