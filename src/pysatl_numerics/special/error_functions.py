"""
Error function family: ``erf``, ``erfc``, their difference over an interval
and their inverses.

``erf`` and ``erfc`` are evaluated through the regularized incomplete Gamma
functions, ``erf(x) = P(1/2, x²)`` and ``erfc(x) = Q(1/2, x²)`` for ``x >= 0``.
The inverse uses the piecewise polynomial approximations of
Giles, *Approximating the erfinv function* (GPU Computing Gems, 2010).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from math import isinf, isnan, log, sqrt

from pysatl_numerics.config import get_config
from pysatl_numerics.special.gamma_functions import regularized_gamma_p, regularized_gamma_q

X_CRIT = 0.4769362762044697
"""Solves ``erf(x) = 0.5`` within 1 ulp: ``erf(X_CRIT) < 0.5 <= erf(nextafter(X_CRIT, inf))``."""

_SATURATION = 40.0

_ERF_INV_CENTRAL = (
    -3.6444120640178196996e-21,
    -1.685059138182016589e-19,
    1.2858480715256400167e-18,
    1.115787767802518096e-17,
    -1.333171662854620906e-16,
    2.0972767875968561637e-17,
    6.6376381343583238325e-15,
    -4.0545662729752068639e-14,
    -8.1519341976054721522e-14,
    2.6335093153082322977e-12,
    -1.2975133253453532498e-11,
    -5.4154120542946279317e-11,
    1.051212273321532285e-09,
    -4.1126339803469836976e-09,
    -2.9070369957882005086e-08,
    4.2347877827932403518e-07,
    -1.3654692000834678645e-06,
    -1.3882523362786468719e-05,
    0.0001867342080340571352,
    -0.00074070253416626697512,
    -0.0060336708714301490533,
    0.24015818242558961693,
    1.6536545626831027356,
)

_ERF_INV_INTERMEDIATE = (
    2.2137376921775787049e-09,
    9.0756561938885390979e-08,
    -2.7517406297064545428e-07,
    1.8239629214389227755e-08,
    1.5027403968909827627e-06,
    -4.013867526981545969e-06,
    2.9234449089955446044e-06,
    1.2475304481671778723e-05,
    -4.7318229009055733981e-05,
    6.8284851459573175448e-05,
    2.4031110387097893999e-05,
    -0.0003550375203628474796,
    0.00095328937973738049703,
    -0.0016882755560235047313,
    0.0024914420961078508066,
    -0.0037512085075692412107,
    0.005370914553590063617,
    1.0052589676941592334,
    3.0838856104922207635,
)

_ERF_INV_TAIL = (
    -2.7109920616438573243e-11,
    -2.5556418169965252055e-10,
    1.5076572693500548083e-09,
    -3.7894654401267369937e-09,
    7.6157012080783393804e-09,
    -1.4960026627149240478e-08,
    2.9147953450901080826e-08,
    -6.7711997758452339498e-08,
    2.2900482228026654717e-07,
    -9.9298272942317002539e-07,
    4.5260625972231537039e-06,
    -1.9681778105531670567e-05,
    7.5995277030017761139e-05,
    -0.00021503011930044477347,
    -0.00013871931833623122026,
    1.0103004648645343977,
    4.8499064014085844221,
)


def _polynomial(w: float, coefficients: tuple[float, ...]) -> float:
    # highest degree first
    p = coefficients[0]
    for c in coefficients[1:]:
        p = c + p * w
    return p


def erf(x: float) -> float:
    """
    Compute the error function ``erf(x) = 2/sqrt(π) ∫_0^x exp(-t²) dt``.

    Parameters
    ----------
    x : float
        Argument.

    Returns
    -------
    float
        ``erf(x)``, saturated to ``±1`` for ``|x| > 40``.

    Raises
    ------
    MaxCountExceededError
        If the underlying series does not converge.
    """
    if abs(x) > _SATURATION:
        return 1.0 if x > 0.0 else -1.0

    config = get_config()
    result = regularized_gamma_p(0.5, x * x, config.erf_epsilon, config.erf_max_iterations)
    return -result if x < 0.0 else result


def erfc(x: float) -> float:
    """
    Compute the complementary error function ``erfc(x) = 1 - erf(x)``.

    The value is computed directly, not as ``1 - erf(x)``, so it keeps full
    relative accuracy in the upper tail.

    Parameters
    ----------
    x : float
        Argument.

    Returns
    -------
    float
        ``erfc(x)``, saturated to 0 for ``x > 40`` and 2 for ``x < -40``.

    Raises
    ------
    MaxCountExceededError
        If the underlying evaluation does not converge.
    """
    if abs(x) > _SATURATION:
        return 0.0 if x > 0.0 else 2.0

    config = get_config()
    result = regularized_gamma_q(0.5, x * x, config.erf_epsilon, config.erf_max_iterations)
    return 2.0 - result if x < 0.0 else result


def erf_interval(x1: float, x2: float) -> float:
    """
    Compute ``erf(x2) - erf(x1)`` without cancellation in the tails.

    When both points lie on the same side beyond :data:`X_CRIT`, the
    difference of two ``erfc`` values is used instead.

    Parameters
    ----------
    x1 : float
        First value.
    x2 : float
        Second value.

    Returns
    -------
    float
        ``erf(x2) - erf(x1)``.
    """
    if x1 > x2:
        return -erf_interval(x2, x1)

    if x1 < -X_CRIT:
        if x2 < 0.0:
            return erfc(-x2) - erfc(-x1)
        return erf(x2) - erf(x1)

    if x2 > X_CRIT and x1 > 0.0:
        return erfc(x1) - erfc(x2)
    return erf(x2) - erf(x1)


def erf_inv(x: float) -> float:
    """
    Compute the inverse error function.

    Parameters
    ----------
    x : float
        Argument in ``[-1, 1]``.

    Returns
    -------
    float
        ``y`` such that ``erf(y) = x``; ``±inf`` at ``x = ±1`` and NaN outside
        of ``[-1, 1]``.
    """
    if isnan(x) or abs(x) > 1.0:
        return math.nan

    # (1 - x)(1 + x), not 1 - x², to keep accuracy near the boundaries
    product = (1.0 - x) * (1.0 + x)
    w = -log(product) if product > 0.0 else math.inf

    if w < 6.25:
        p = _polynomial(w - 3.125, _ERF_INV_CENTRAL)
    elif w < 16.0:
        p = _polynomial(sqrt(w) - 3.25, _ERF_INV_INTERMEDIATE)
    elif not isinf(w):
        p = _polynomial(sqrt(w) - 5.0, _ERF_INV_TAIL)
    else:
        # The tail polynomial evaluated at w = inf has a negative leading
        # coefficient and would give -inf for both x = 1 and x = -1.
        p = math.inf

    return p * x


def erfc_inv(x: float) -> float:
    """
    Compute the inverse complementary error function.

    Parameters
    ----------
    x : float
        Argument in ``[0, 2]``.

    Returns
    -------
    float
        ``y`` such that ``erfc(y) = x``.
    """
    return erf_inv(1.0 - x)


__all__ = [
    "X_CRIT",
    "erf",
    "erfc",
    "erf_interval",
    "erf_inv",
    "erfc_inv",
]
