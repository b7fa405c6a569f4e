"""
Distributions subpackage

Interfaces and implementations of continuous real distributions:

- distribution protocol and generic base class (:mod:`.distribution`);
- continuous supports (:mod:`.support`);
- the normal distribution (:mod:`.normal`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .distribution import AbstractRealDistribution, RealDistribution
from .normal import NormalDistribution
from .support import ContinuousSupport, Support

__all__ = [
    # distribution
    "RealDistribution",
    "AbstractRealDistribution",
    # families
    "NormalDistribution",
    # support
    "Support",
    "ContinuousSupport",
]
