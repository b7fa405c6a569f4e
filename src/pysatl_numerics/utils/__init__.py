"""
Utilities subpackage

Low-level numerical building blocks:

- ULP-aware floating point comparison (:mod:`.precision`);
- generic continued fraction evaluation (:mod:`.continued_fraction`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .continued_fraction import ContinuedFraction
from .precision import compare, compare_ulps, double_to_raw_long_bits, equals, equals_ulps

__all__ = [
    "ContinuedFraction",
    "compare",
    "compare_ulps",
    "double_to_raw_long_bits",
    "equals",
    "equals_ulps",
]
