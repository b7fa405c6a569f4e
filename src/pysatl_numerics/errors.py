"""
Numerical Errors
================

Exception taxonomy raised by the special functions, iterative evaluators,
solvers and distributions of the package.

Argument errors derive from :class:`ValueError`, failed iterative computations
derive from :class:`RuntimeError`, so callers that only know the builtin
hierarchy keep working. Every error keeps the offending values as attributes.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any


class NumericsError(Exception):
    """Base class of all errors raised by pysatl-numerics."""


class OutOfRangeError(NumericsError, ValueError):
    """
    Argument lies outside of the closed range ``[lower, upper]``.

    Parameters
    ----------
    value : float
        Requested value.
    lower : float
        Lower bound of the range.
    upper : float
        Upper bound of the range.
    """

    def __init__(self, value: float, lower: float, upper: float) -> None:
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(f"{value} out of [{lower}, {upper}] range")


class NumberIsTooSmallError(NumericsError, ValueError):
    """
    Argument is smaller than the minimum of an algorithm's domain.

    Parameters
    ----------
    value : float
        Value that is smaller than the minimum.
    minimum : float
        Minimum of the domain.
    bound_is_allowed : bool
        Whether ``minimum`` itself belongs to the domain.
    """

    def __init__(self, value: float, minimum: float, bound_is_allowed: bool) -> None:
        self.value = value
        self.minimum = minimum
        self.bound_is_allowed = bound_is_allowed
        if bound_is_allowed:
            message = f"{value} is smaller than the minimum ({minimum})"
        else:
            message = f"{value} is smaller than, or equal to, the minimum ({minimum})"
        super().__init__(message)


class NotStrictlyPositiveError(NumberIsTooSmallError):
    """Argument required to be strictly positive was not."""

    def __init__(self, value: float) -> None:
        super().__init__(value, 0, bound_is_allowed=False)


class NumberIsTooLargeError(NumericsError, ValueError):
    """
    Argument is larger than the maximum of an algorithm's domain.

    Parameters
    ----------
    value : float
        Value that is larger than the maximum.
    maximum : float
        Maximum of the domain.
    bound_is_allowed : bool
        Whether ``maximum`` itself belongs to the domain.
    """

    def __init__(self, value: float, maximum: float, bound_is_allowed: bool) -> None:
        self.value = value
        self.maximum = maximum
        self.bound_is_allowed = bound_is_allowed
        if bound_is_allowed:
            message = f"{value} is larger than the maximum ({maximum})"
        else:
            message = f"{value} is larger than, or equal to, the maximum ({maximum})"
        super().__init__(message)


class ConvergenceError(NumericsError, RuntimeError):
    """An iterative computation diverged to a non-finite value."""

    def __init__(self, message: str = "convergence failed", *context: Any) -> None:
        self.context = context
        super().__init__(message)


class NoBracketingError(ConvergenceError):
    """
    Function values at the interval endpoints do not bracket a root.

    Parameters
    ----------
    lower, upper : float
        Interval endpoints.
    f_lower, f_upper : float
        Function values at the endpoints.
    """

    def __init__(self, lower: float, upper: float, f_lower: float, f_upper: float) -> None:
        self.lower = lower
        self.upper = upper
        self.f_lower = f_lower
        self.f_upper = f_upper
        super().__init__(
            f"function values at endpoints do not have different signs, "
            f"endpoints: [{lower}, {upper}], values: [{f_lower}, {f_upper}]",
            lower,
            upper,
        )


class MaxCountExceededError(NumericsError, RuntimeError):
    """
    An iterative computation exceeded its iteration budget.

    Parameters
    ----------
    maximum : int
        The exceeded iteration budget.
    message : str, optional
        Context of the failed computation.
    """

    def __init__(self, maximum: int, message: str = "") -> None:
        self.maximum = maximum
        text = f"maximal count ({maximum}) exceeded"
        if message:
            text = f"{text}: {message}"
        super().__init__(text)


__all__ = [
    "NumericsError",
    "OutOfRangeError",
    "NumberIsTooSmallError",
    "NotStrictlyPositiveError",
    "NumberIsTooLargeError",
    "ConvergenceError",
    "NoBracketingError",
    "MaxCountExceededError",
]
