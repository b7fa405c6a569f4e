"""
Numerical Defaults Configuration
================================

Process-wide default tolerances and iteration budgets used when a caller does
not pass them explicitly.

Notes
-----
- Defaults are read at call time, so :func:`configure` affects subsequent calls.
- Explicit keyword arguments always take precedence over the configuration.
- The configuration is meant to be set during application startup; the
  numerical routines themselves never modify it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import sys
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from typing import Any

UNBOUNDED_ITERATIONS = sys.maxsize
"""Iteration budget treated as unbounded."""


@dataclass(frozen=True, slots=True)
class NumericsConfig:
    """
    Default tolerances and iteration budgets.

    Parameters
    ----------
    continued_fraction_epsilon : float, default 10e-9
        Stopping threshold for ``|delta_n - 1|`` in continued fractions.
    continued_fraction_max_iterations : int, default ``sys.maxsize``
        Term budget for continued fractions.
    gamma_epsilon : float, default 10e-15
        Relative term threshold of the incomplete Gamma series and fraction.
    gamma_max_iterations : int, default ``sys.maxsize``
        Term budget of the incomplete Gamma evaluation.
    erf_epsilon : float, default 1e-15
        Threshold used by the error functions.
    erf_max_iterations : int, default 10000
        Term budget used by the error functions.
    solver_absolute_accuracy : float, default 1e-6
        Absolute accuracy of the bracketed root finder.
    solver_max_iterations : int, default 1000
        Iteration budget of the bracketed root finder.
    """

    continued_fraction_epsilon: float = 10e-9
    continued_fraction_max_iterations: int = UNBOUNDED_ITERATIONS
    gamma_epsilon: float = 10e-15
    gamma_max_iterations: int = UNBOUNDED_ITERATIONS
    erf_epsilon: float = 1e-15
    erf_max_iterations: int = 10000
    solver_absolute_accuracy: float = 1e-6
    solver_max_iterations: int = 1000

    def __post_init__(self) -> None:
        """Validate that every tolerance and budget is positive."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not value > 0:
                raise ValueError(f"{f.name} must be positive, got {value}")


_overrides: dict[str, Any] = {}


@lru_cache(maxsize=1)
def get_config() -> NumericsConfig:
    """
    Get the active numerical defaults.

    Returns
    -------
    NumericsConfig
        Cached configuration built from the defaults and current overrides.
    """
    return NumericsConfig(**_overrides)


def configure(**changes: Any) -> NumericsConfig:
    """
    Override some of the numerical defaults.

    Parameters
    ----------
    **changes
        Field values of :class:`NumericsConfig` to replace.

    Returns
    -------
    NumericsConfig
        The new active configuration.

    Raises
    ------
    TypeError
        If a key is not a field of :class:`NumericsConfig`.
    ValueError
        If a value is not positive.
    """
    # validates before the overrides are committed
    replace(get_config(), **changes)
    _overrides.update(changes)
    get_config.cache_clear()
    return get_config()


def reset_config() -> None:
    """
    Restore the built-in numerical defaults.
    """
    _overrides.clear()
    get_config.cache_clear()


__all__ = [
    "UNBOUNDED_ITERATIONS",
    "NumericsConfig",
    "get_config",
    "configure",
    "reset_config",
]
