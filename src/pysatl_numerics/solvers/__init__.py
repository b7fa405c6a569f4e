"""
Solvers subpackage

Bracketed root finding used to invert cumulative distribution functions
(:mod:`.univariate`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .univariate import is_bracketing, solve, verify_bracketing

__all__ = [
    "is_bracketing",
    "solve",
    "verify_bracketing",
]
