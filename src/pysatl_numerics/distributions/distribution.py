"""
Real Distribution Interfaces
============================

This module defines the capability surface of continuous real distributions
and a base class providing the generic parts of it:

- :class:`RealDistribution` protocol – interface used by callers of the package.
- :class:`AbstractRealDistribution` – base class implementing interval
  probabilities, log-density and the quantile function by bracketing and
  root finding on the CDF.

Notes
-----
- Capabilities without a generic formula are abstract; a subclass missing one
  of them cannot be instantiated.
- Distributions are immutable once constructed, all operations are pure reads.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from pysatl_numerics.config import get_config
from pysatl_numerics.distributions.support import ContinuousSupport
from pysatl_numerics.errors import NumberIsTooLargeError, OutOfRangeError
from pysatl_numerics.solvers.univariate import solve

logger = logging.getLogger(__name__)


@runtime_checkable
class RealDistribution(Protocol):
    """Public interface of probability distributions on the reals."""

    @property
    def numerical_mean(self) -> float:
        """Mean of the distribution, NaN if undefined."""
        ...

    @property
    def numerical_variance(self) -> float:
        """Variance of the distribution, NaN if undefined, ``inf`` if infinite."""
        ...

    @property
    def support_lower_bound(self) -> float:
        """``inf{x | P(X <= x) > 0}``, equal to ``inverse_cumulative_probability(0)``."""
        ...

    @property
    def support_upper_bound(self) -> float:
        """``inf{x | P(X <= x) = 1}``, equal to ``inverse_cumulative_probability(1)``."""
        ...

    def density(self, x: float) -> float: ...

    def cumulative_probability(self, x: float) -> float: ...

    def inverse_cumulative_probability(self, p: float) -> float: ...

    def probability(self, x0: float, x1: float) -> float: ...

    def point_probability(self, x: float) -> float: ...


class AbstractRealDistribution(ABC):
    """
    Base class for probability distributions on the reals.

    Parameters
    ----------
    solver_absolute_accuracy : float, optional
        Absolute accuracy of the root finder used by
        :meth:`inverse_cumulative_probability`. Defaults to
        ``solver_absolute_accuracy`` of the configuration at construction time.
    """

    def __init__(self, solver_absolute_accuracy: float | None = None) -> None:
        if solver_absolute_accuracy is None:
            solver_absolute_accuracy = get_config().solver_absolute_accuracy
        self._solver_absolute_accuracy = solver_absolute_accuracy

    @property
    def solver_absolute_accuracy(self) -> float:
        """Absolute accuracy of the quantile root finder."""
        return self._solver_absolute_accuracy

    @property
    @abstractmethod
    def numerical_mean(self) -> float:
        """Mean of the distribution, NaN if undefined."""

    @property
    @abstractmethod
    def numerical_variance(self) -> float:
        """Variance of the distribution, NaN if undefined, ``inf`` if infinite."""

    @property
    @abstractmethod
    def support_lower_bound(self) -> float:
        """Lower bound of the support, possibly ``-inf``."""

    @property
    @abstractmethod
    def support_upper_bound(self) -> float:
        """Upper bound of the support, possibly ``inf``."""

    @property
    def is_support_connected(self) -> bool:
        """Whether the support is an interval (the CDF has no flat inner region)."""
        return True

    @property
    def support(self) -> ContinuousSupport:
        """Support as an interval."""
        return ContinuousSupport(self.support_lower_bound, self.support_upper_bound)

    @abstractmethod
    def density(self, x: float) -> float:
        """
        Probability density function evaluated at ``x``.

        Where the derivative of the CDF does not exist, an appropriate
        replacement (``inf``, NaN, or a one-sided limit) is returned.
        """

    @abstractmethod
    def cumulative_probability(self, x: float) -> float:
        """
        Cumulative distribution function ``P(X <= x)``.
        """

    def log_density(self, x: float) -> float:
        """
        Natural logarithm of the density at ``x``.

        Subclasses should override this when a direct formula is more
        accurate than the logarithm of :meth:`density`.

        Returns
        -------
        float
            ``log(density(x))``, ``-inf`` where the density is zero.
        """
        value = self.density(x)
        if value == 0.0:
            return -math.inf
        return math.log(value)

    def probability(self, x0: float, x1: float) -> float:
        """
        Probability ``P(x0 < X <= x1)``.

        Parameters
        ----------
        x0 : float
            Lower bound (exclusive).
        x1 : float
            Upper bound (inclusive).

        Returns
        -------
        float
            Probability that a random variable falls in ``(x0, x1]``.

        Raises
        ------
        NumberIsTooLargeError
            If ``x0 > x1``.
        """
        if x0 > x1:
            raise NumberIsTooLargeError(x0, x1, bound_is_allowed=True)
        return self.cumulative_probability(x1) - self.cumulative_probability(x0)

    def point_probability(self, x: float) -> float:
        """
        Probability mass ``P(X = x)``, zero for continuous distributions.
        """
        return 0.0

    def inverse_cumulative_probability(self, p: float) -> float:
        """
        Quantile function of the distribution.

        Returns ``inf{x | P(X <= x) >= p}`` for ``0 < p <= 1`` and
        ``inf{x | P(X <= x) > 0}`` for ``p = 0``.

        Parameters
        ----------
        p : float
            Cumulative probability in ``[0, 1]``.

        Returns
        -------
        float
            The smallest p-quantile (largest 0-quantile for ``p = 0``).

        Raises
        ------
        OutOfRangeError
            If ``p`` is not in ``[0, 1]``.
        NoBracketingError
            If the bracket built for the root finder does not contain ``p``.
        MaxCountExceededError
            If the root finder does not converge.

        Notes
        -----
        When mean ``mu`` and standard deviation ``sig`` are finite, the one-sided
        Chebyshev inequality ``P(X - mu >= k sig) <= 1 / (1 + k²)`` bounds the root:
        ``k = sqrt(p / (1 - p))`` gives ``F(mu + k sig) >= p`` (upper bound) and,
        applied to ``-X``, ``k = sqrt((1 - p) / p)`` gives ``F(mu - k sig) <= p``
        (lower bound). Otherwise the geometric progressions ``-1, -2, -4, ...``
        and ``1, 2, 4, ...`` are searched until the CDF crosses ``p``.
        """
        if not 0.0 <= p <= 1.0:
            raise OutOfRangeError(p, 0.0, 1.0)

        lower_bound = self.support_lower_bound
        if p == 0.0:
            return lower_bound

        upper_bound = self.support_upper_bound
        if p == 1.0:
            return upper_bound

        mu = self.numerical_mean
        variance = self.numerical_variance
        sig = math.sqrt(variance) if variance >= 0.0 else math.nan
        chebyshev_applies = math.isfinite(mu) and math.isfinite(sig)

        if lower_bound == -math.inf:
            if chebyshev_applies:
                lower_bound = mu - sig * math.sqrt((1.0 - p) / p)
            else:
                lower_bound = -1.0
                while self.cumulative_probability(lower_bound) >= p:
                    lower_bound *= 2.0

        if upper_bound == math.inf:
            if chebyshev_applies:
                upper_bound = mu + sig * math.sqrt(p / (1.0 - p))
            else:
                upper_bound = 1.0
                while self.cumulative_probability(upper_bound) < p:
                    upper_bound *= 2.0

        logger.debug(
            "Quantile %r bracketed in [%r, %r] (chebyshev=%s)",
            p,
            lower_bound,
            upper_bound,
            chebyshev_applies,
        )

        x = solve(
            lambda t: self.cumulative_probability(t) - p,
            lower_bound,
            upper_bound,
            absolute_accuracy=self.solver_absolute_accuracy,
        )

        if not self.is_support_connected:
            x = self._leftmost_on_plateau(x, lower_bound)
        return x

    def _leftmost_on_plateau(self, x: float, lower_bound: float) -> float:
        """
        Move a root found on a flat CDF region to the left end of that region.
        """
        dx = self.solver_absolute_accuracy
        if x - dx < self.support_lower_bound:
            return x

        px = self.cumulative_probability(x)
        if self.cumulative_probability(x - dx) != px:
            return x

        upper_bound = x
        while upper_bound - lower_bound > dx:
            midpoint = 0.5 * (lower_bound + upper_bound)
            if self.cumulative_probability(midpoint) < px:
                lower_bound = midpoint
            else:
                upper_bound = midpoint
        return upper_bound


__all__ = [
    "RealDistribution",
    "AbstractRealDistribution",
]
