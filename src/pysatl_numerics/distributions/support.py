from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Protocol, runtime_checkable

from pysatl_numerics.types import Interval1D


@runtime_checkable
class Support(Protocol):
    def contains(self, x: float) -> bool: ...


class ContinuousSupport(Interval1D, Support):
    @property
    def lower_bound(self) -> float:
        return self.left

    @property
    def upper_bound(self) -> float:
        return self.right


__all__ = [
    "Support",
    "ContinuousSupport",
]
