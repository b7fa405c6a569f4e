"""
Bracketed root finding for univariate real functions.

The solver verifies that the interval brackets a root and then runs Brent's
method (a hybrid of bisection, secant and inverse quadratic interpolation),
which is guaranteed to converge once a sign change is established.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

from scipy.optimize import brentq

from pysatl_numerics.config import get_config
from pysatl_numerics.errors import (
    MaxCountExceededError,
    NoBracketingError,
    NumberIsTooLargeError,
)

if TYPE_CHECKING:
    from pysatl_numerics.types import ScalarFunc

logger = logging.getLogger(__name__)


def is_bracketing(function: ScalarFunc, lower: float, upper: float) -> bool:
    """
    Check whether the function takes values of opposite signs at the endpoints.

    A zero value at an endpoint counts as bracketing.

    Parameters
    ----------
    function : Callable[[float], float]
        Function to check.
    lower, upper : float
        Interval endpoints.

    Returns
    -------
    bool
        ``False`` if either value is NaN.
    """
    f_lower = function(lower)
    f_upper = function(upper)
    return (f_lower >= 0.0 and f_upper <= 0.0) or (f_lower <= 0.0 and f_upper >= 0.0)


def verify_bracketing(function: ScalarFunc, lower: float, upper: float) -> None:
    """
    Check that the interval is valid and brackets a root.

    Raises
    ------
    NumberIsTooLargeError
        If ``lower >= upper``.
    NoBracketingError
        If the function values at the endpoints do not bracket a root.
    """
    if lower >= upper:
        raise NumberIsTooLargeError(lower, upper, bound_is_allowed=False)
    if not is_bracketing(function, lower, upper):
        raise NoBracketingError(lower, upper, function(lower), function(upper))


def solve(
    function: ScalarFunc,
    x0: float,
    x1: float,
    absolute_accuracy: float | None = None,
    max_iterations: int | None = None,
) -> float:
    """
    Find a zero of ``function`` in ``[x0, x1]``.

    Parameters
    ----------
    function : Callable[[float], float]
        Continuous function changing sign over the interval.
    x0 : float
        Lower bound of the interval.
    x1 : float
        Upper bound of the interval.
    absolute_accuracy : float, optional
        Absolute accuracy in ``x``. Defaults to ``solver_absolute_accuracy``
        of the configuration.
    max_iterations : int, optional
        Iteration budget. Defaults to ``solver_max_iterations``.

    Returns
    -------
    float
        A point where the function is zero within the requested accuracy.

    Raises
    ------
    NumberIsTooLargeError
        If ``x0 >= x1``.
    NoBracketingError
        If the function does not change sign over the interval.
    MaxCountExceededError
        If Brent's method does not converge within the budget.
    """
    config = get_config()
    if absolute_accuracy is None:
        absolute_accuracy = config.solver_absolute_accuracy
    if max_iterations is None:
        max_iterations = config.solver_max_iterations

    if x0 >= x1:
        raise NumberIsTooLargeError(x0, x1, bound_is_allowed=False)

    f0 = function(x0)
    if f0 == 0.0:
        return x0
    f1 = function(x1)
    if f1 == 0.0:
        return x1
    if not ((f0 > 0.0 and f1 < 0.0) or (f0 < 0.0 and f1 > 0.0)):
        raise NoBracketingError(x0, x1, f0, f1)

    logger.debug(
        "Solving on [%r, %r] with absolute accuracy %r and at most %d iterations",
        x0,
        x1,
        absolute_accuracy,
        max_iterations,
    )
    root, result = brentq(
        function,
        x0,
        x1,
        xtol=absolute_accuracy,
        maxiter=max_iterations,
        full_output=True,
        disp=False,
    )
    if not result.converged:
        raise MaxCountExceededError(
            max_iterations, f"root of function on [{x0}, {x1}]: {result.flag}"
        )

    logger.debug("Converged to %r after %d iterations", root, result.iterations)
    return float(root)


__all__ = [
    "is_bracketing",
    "verify_bracketing",
    "solve",
]
