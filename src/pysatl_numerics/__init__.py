"""
PySATL Numerics
===============

Numerical evaluation engine for continuous probability distributions:
special functions (Gamma family, error functions), continued fractions,
ULP-aware floating point comparison, bracketed root finding and the
distributions built on them.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .config import *
from .config import __all__ as _config_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-numerics")
__all__ = [
    "__version__",
    *_config_all,
    *_distr_all,
    *_errors_all,
    *_types_all,
]

del _config_all
del _distr_all
del _errors_all
del _types_all
