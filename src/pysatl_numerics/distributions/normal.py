"""
Normal distribution implementation.

Closed forms for the density, CDF, quantile function and interval
probabilities built on the error functions of :mod:`pysatl_numerics.special`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_numerics.distributions.distribution import AbstractRealDistribution
from pysatl_numerics.errors import (
    NotStrictlyPositiveError,
    NumberIsTooLargeError,
    OutOfRangeError,
)
from pysatl_numerics.special.error_functions import erf_interval, erf_inv, erfc

SQRT2 = math.sqrt(2.0)

DEFAULT_INVERSE_ABSOLUTE_ACCURACY = 1e-9
"""Default inverse cumulative probability accuracy."""


class NormalDistribution(AbstractRealDistribution):
    """
    Normal (Gaussian) distribution.

    The normal distribution is a continuous probability distribution characterized
    by its bell-shaped curve. It is symmetric about its mean and is defined by
    two parameters: mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    mean : float, default 0.0
        Mean of the distribution.
    standard_deviation : float, default 1.0
        Standard deviation of the distribution, must be positive.
    inverse_cumulative_accuracy : float, default 1e-9
        Accuracy used when the generic root-finding quantile is requested.

    Raises
    ------
    NotStrictlyPositiveError
        If ``standard_deviation <= 0``.
    """

    def __init__(
        self,
        mean: float = 0.0,
        standard_deviation: float = 1.0,
        inverse_cumulative_accuracy: float = DEFAULT_INVERSE_ABSOLUTE_ACCURACY,
    ) -> None:
        if not standard_deviation > 0.0:
            raise NotStrictlyPositiveError(standard_deviation)

        super().__init__(inverse_cumulative_accuracy)
        self._mean = mean
        self._standard_deviation = standard_deviation
        self._log_sd_plus_half_log_2pi = math.log(standard_deviation) + 0.5 * math.log(
            2.0 * math.pi
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mean={self._mean}, standard_deviation={self._standard_deviation})"

    @property
    def mean(self) -> float:
        """Mean μ of this distribution."""
        return self._mean

    @property
    def standard_deviation(self) -> float:
        """Standard deviation σ of this distribution."""
        return self._standard_deviation

    @property
    def numerical_mean(self) -> float:
        return self._mean

    @property
    def numerical_variance(self) -> float:
        return self._standard_deviation * self._standard_deviation

    @property
    def support_lower_bound(self) -> float:
        return -math.inf

    @property
    def support_upper_bound(self) -> float:
        return math.inf

    def log_density(self, x: float) -> float:
        z = (x - self._mean) / self._standard_deviation
        return -0.5 * z * z - self._log_sd_plus_half_log_2pi

    def density(self, x: float) -> float:
        return math.exp(self.log_density(x))

    def cumulative_probability(self, x: float) -> float:
        """
        Cumulative distribution function.

        Returns 0 or 1 directly when ``x`` is more than 40 standard deviations
        away from the mean.
        """
        dev = x - self._mean
        if abs(dev) > 40.0 * self._standard_deviation:
            return 0.0 if dev < 0.0 else 1.0
        return 0.5 * erfc(-dev / (self._standard_deviation * SQRT2))

    def inverse_cumulative_probability(self, p: float) -> float:
        """
        Quantile function ``μ + σ√2 erf⁻¹(2p - 1)``.

        Raises
        ------
        OutOfRangeError
            If ``p`` is not in ``[0, 1]``.
        """
        if not 0.0 <= p <= 1.0:
            raise OutOfRangeError(p, 0.0, 1.0)
        return self._mean + self._standard_deviation * SQRT2 * erf_inv(2.0 * p - 1.0)

    def probability(self, x0: float, x1: float) -> float:
        """
        Probability ``P(x0 < X <= x1)`` from the interval form of ``erf``.

        Raises
        ------
        NumberIsTooLargeError
            If ``x0 > x1``.
        """
        if x0 > x1:
            raise NumberIsTooLargeError(x0, x1, bound_is_allowed=True)

        denom = self._standard_deviation * SQRT2
        v0 = (x0 - self._mean) / denom
        v1 = (x1 - self._mean) / denom
        return 0.5 * erf_interval(v0, v1)


__all__ = [
    "NormalDistribution",
]
