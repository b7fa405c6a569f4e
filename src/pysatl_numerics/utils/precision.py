"""
Floating point comparison utilities.

Two doubles are compared either by an absolute error bound or by the number of
representable doubles lying between them (ULP distance), following
Bruce Dawson, *Comparing Floating Point Numbers, 2012 Edition*.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import isnan

import numpy as np

POSITIVE_ZERO_BITS = 0
"""Bit pattern of ``+0.0`` read as a signed 64-bit integer."""

NEGATIVE_ZERO_BITS = -(2**63)
"""Bit pattern of ``-0.0`` read as a signed 64-bit integer."""


def double_to_raw_long_bits(x: float) -> int:
    """
    Reinterpret the IEEE 754 representation of ``x`` as a signed 64-bit integer.

    Parameters
    ----------
    x : float
        Value to reinterpret.

    Returns
    -------
    int
        The raw bit pattern, negative for values with the sign bit set.
    """
    return int(np.float64(x).view(np.int64))


def equals_ulps(x: float, y: float, max_ulps: int = 1) -> bool:
    """
    Check whether two doubles are at most ``max_ulps`` representable values apart.

    Two numbers are considered equal if there are ``max_ulps - 1`` (or fewer)
    doubles strictly between them, i.e. two adjacent doubles are equal for
    ``max_ulps = 1``.

    Parameters
    ----------
    x, y : float
        Values to compare.
    max_ulps : int, default 1
        ``max_ulps - 1`` is the number of doubles allowed between x and y.

    Returns
    -------
    bool
        ``False`` if either argument is NaN.
    """
    x_bits = double_to_raw_long_bits(x)
    y_bits = double_to_raw_long_bits(y)

    if (x_bits ^ y_bits) >= 0:
        # same sign
        is_equal = abs(x_bits - y_bits) <= max_ulps
    else:
        # opposite signs: distance of each value to its signed zero
        if x_bits < y_bits:
            delta_plus = y_bits - POSITIVE_ZERO_BITS
            delta_minus = x_bits - NEGATIVE_ZERO_BITS
        else:
            delta_plus = x_bits - POSITIVE_ZERO_BITS
            delta_minus = y_bits - NEGATIVE_ZERO_BITS

        is_equal = delta_plus <= max_ulps and delta_minus <= max_ulps - delta_plus

    return is_equal and not isnan(x) and not isnan(y)


def equals(x: float, y: float, epsilon: float) -> bool:
    """
    Check whether two doubles are adjacent or within ``epsilon`` of each other.

    Parameters
    ----------
    x, y : float
        Values to compare.
    epsilon : float
        Allowed absolute error (inclusive).

    Returns
    -------
    bool
        ``False`` if either argument is NaN.
    """
    return equals_ulps(x, y, 1) or abs(y - x) <= epsilon


def compare(x: float, y: float, epsilon: float) -> int:
    """
    Compare two doubles given an allowed absolute error.

    Returns
    -------
    int
        0 if ``equals(x, y, epsilon)``, -1 if not equal and ``x < y``, 1 otherwise
        (including when either argument is NaN).
    """
    if equals(x, y, epsilon):
        return 0
    return -1 if x < y else 1


def compare_ulps(x: float, y: float, max_ulps: int) -> int:
    """
    Compare two doubles given an allowed ULP distance.

    Returns
    -------
    int
        0 if ``equals_ulps(x, y, max_ulps)``, -1 if not equal and ``x < y``,
        1 otherwise (including when either argument is NaN).
    """
    if equals_ulps(x, y, max_ulps):
        return 0
    return -1 if x < y else 1


__all__ = [
    "double_to_raw_long_bits",
    "equals",
    "equals_ulps",
    "compare",
    "compare_ulps",
]
