"""
Special functions subpackage

Scalar special functions used by the distributions of pysatl-numerics:

- Gamma family (:mod:`.gamma_functions`);
- error functions and their inverses (:mod:`.error_functions`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .error_functions import X_CRIT, erf, erf_interval, erf_inv, erfc, erfc_inv
from .gamma_functions import (
    EULER_MASCHERONI,
    LANCZOS_G,
    digamma,
    gamma,
    inv_gamma1pm1,
    lanczos,
    log_gamma,
    log_gamma1p,
    regularized_gamma_p,
    regularized_gamma_q,
    trigamma,
)

__all__ = [
    # gamma family
    "EULER_MASCHERONI",
    "LANCZOS_G",
    "digamma",
    "gamma",
    "inv_gamma1pm1",
    "lanczos",
    "log_gamma",
    "log_gamma1p",
    "regularized_gamma_p",
    "regularized_gamma_q",
    "trigamma",
    # error functions
    "X_CRIT",
    "erf",
    "erf_interval",
    "erf_inv",
    "erfc",
    "erfc_inv",
]
