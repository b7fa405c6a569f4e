"""
Minimal distributions implementing only the abstract members of
:class:`AbstractRealDistribution`, so the generic quantile search is used.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from scipy.special import expit

from pysatl_numerics.distributions import AbstractRealDistribution


class StandardLogistic(AbstractRealDistribution):
    """Finite mean and variance: the quantile bracket comes from Chebyshev's inequality."""

    @property
    def numerical_mean(self) -> float:
        return 0.0

    @property
    def numerical_variance(self) -> float:
        return math.pi**2 / 3.0

    @property
    def support_lower_bound(self) -> float:
        return -math.inf

    @property
    def support_upper_bound(self) -> float:
        return math.inf

    def density(self, x: float) -> float:
        s = float(expit(x))
        return s * (1.0 - s)

    def cumulative_probability(self, x: float) -> float:
        return float(expit(x))


class StandardCauchy(AbstractRealDistribution):
    """Undefined mean and variance: the quantile bracket is searched geometrically."""

    @property
    def numerical_mean(self) -> float:
        return math.nan

    @property
    def numerical_variance(self) -> float:
        return math.nan

    @property
    def support_lower_bound(self) -> float:
        return -math.inf

    @property
    def support_upper_bound(self) -> float:
        return math.inf

    def density(self, x: float) -> float:
        return 1.0 / (math.pi * (1.0 + x * x))

    def cumulative_probability(self, x: float) -> float:
        return 0.5 + math.atan(x) / math.pi


class StandardExponential(AbstractRealDistribution):
    @property
    def numerical_mean(self) -> float:
        return 1.0

    @property
    def numerical_variance(self) -> float:
        return 1.0

    @property
    def support_lower_bound(self) -> float:
        return 0.0

    @property
    def support_upper_bound(self) -> float:
        return math.inf

    def density(self, x: float) -> float:
        return math.exp(-x) if x >= 0.0 else 0.0

    def cumulative_probability(self, x: float) -> float:
        return -math.expm1(-x) if x > 0.0 else 0.0


class SplitUniform(AbstractRealDistribution):
    """Uniform on ``[0, 1] U [2, 3]``: the CDF is flat on ``[1, 2]``."""

    @property
    def numerical_mean(self) -> float:
        return 1.5

    @property
    def numerical_variance(self) -> float:
        return 13.0 / 12.0

    @property
    def support_lower_bound(self) -> float:
        return 0.0

    @property
    def support_upper_bound(self) -> float:
        return 3.0

    @property
    def is_support_connected(self) -> bool:
        return False

    def density(self, x: float) -> float:
        return 0.5 if 0.0 <= x <= 1.0 or 2.0 <= x <= 3.0 else 0.0

    def cumulative_probability(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        if x <= 1.0:
            return 0.5 * x
        if x <= 2.0:
            return 0.5
        if x <= 3.0:
            return 0.5 + 0.5 * (x - 2.0)
        return 1.0
