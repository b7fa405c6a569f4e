"""
Tests for the error functions and their inverses.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy import special

from pysatl_numerics.config import configure
from pysatl_numerics.errors import MaxCountExceededError
from pysatl_numerics.special import X_CRIT, erf, erf_interval, erf_inv, erfc, erfc_inv

CALCULATION_PRECISION = 1e-12


class TestErf:
    @pytest.mark.parametrize("x", [-5.0, -1.0, -1e-3, 0.0, 1e-8, 0.3, X_CRIT, 1.0, 2.5, 6.0])
    def test_erf_matches_reference(self, x: float) -> None:
        assert erf(x) == pytest.approx(special.erf(x), rel=CALCULATION_PRECISION, abs=1e-300)

    @pytest.mark.parametrize("x", [-6.0, -1.0, 0.0, 0.3, 1.0, 2.5, 5.0, 10.0, 26.0])
    def test_erfc_matches_reference(self, x: float) -> None:
        assert erfc(x) == pytest.approx(special.erfc(x), rel=1e-10)

    def test_odd_symmetry(self) -> None:
        assert erf(-0.7) == -erf(0.7)

    def test_critical_point_is_half(self) -> None:
        assert erf(X_CRIT) == pytest.approx(0.5, rel=1e-14)

    @pytest.mark.parametrize(
        "x, erf_value, erfc_value",
        [(41.0, 1.0, 0.0), (-41.0, -1.0, 2.0), (math.inf, 1.0, 0.0), (-math.inf, -1.0, 2.0)],
        ids=["+41", "-41", "+inf", "-inf"],
    )
    def test_saturation(self, x: float, erf_value: float, erfc_value: float) -> None:
        assert erf(x) == erf_value
        assert erfc(x) == erfc_value

    def test_iteration_budget_from_config(self) -> None:
        configure(erf_max_iterations=2)

        with pytest.raises(MaxCountExceededError):
            erf(0.9)


class TestErfInterval:
    @pytest.mark.parametrize(
        "x1, x2",
        [(-0.2, 0.3), (-3.0, 2.0), (-1.0, -0.1), (0.1, 0.4)],
        ids=["around-zero", "wide", "left-central", "right-central"],
    )
    def test_central_intervals(self, x1: float, x2: float) -> None:
        assert erf_interval(x1, x2) == pytest.approx(
            special.erf(x2) - special.erf(x1), rel=CALCULATION_PRECISION
        )

    def test_upper_tail_keeps_relative_accuracy(self) -> None:
        expected = special.erfc(5.0) - special.erfc(6.0)
        assert erf_interval(5.0, 6.0) == pytest.approx(expected, rel=1e-10)

    def test_lower_tail_keeps_relative_accuracy(self) -> None:
        expected = special.erfc(5.0) - special.erfc(6.0)
        assert erf_interval(-6.0, -5.0) == pytest.approx(expected, rel=1e-10)

    def test_reversed_arguments(self) -> None:
        assert erf_interval(1.0, 0.0) == -erf_interval(0.0, 1.0)


class TestInverses:
    @pytest.mark.parametrize("x", [-0.999999, -0.5, 0.0, 0.3, 0.9, 0.999, 0.99999999])
    def test_erf_inv_matches_reference(self, x: float) -> None:
        assert erf_inv(x) == pytest.approx(special.erfinv(x), rel=1e-9)

    @pytest.mark.parametrize("x", [0.01, 0.5, 1.0, 1.7])
    def test_erfc_inv_matches_reference(self, x: float) -> None:
        assert erfc_inv(x) == pytest.approx(special.erfcinv(x), rel=1e-9)

    @pytest.mark.parametrize("x", [-0.95, -0.2, 0.45, 0.999])
    def test_erf_recovers_inverse_argument(self, x: float) -> None:
        assert erf(erf_inv(x)) == pytest.approx(x, rel=1e-12)

    def test_boundaries(self) -> None:
        assert erf_inv(1.0) == math.inf
        assert erf_inv(-1.0) == -math.inf
        assert erfc_inv(0.0) == math.inf
        assert erfc_inv(2.0) == -math.inf

    @pytest.mark.parametrize("x", [1.5, -1.0000001, math.nan], ids=["above", "below", "nan"])
    def test_outside_domain_is_nan(self, x: float) -> None:
        assert math.isnan(erf_inv(x))


class TestIdentities:
    SWEEP = [-45.0, -6.0, -2.0, -1.0, -0.3, 0.0, 0.2, X_CRIT, 1.0, 1.3, 3.0, 8.0, 45.0]

    @pytest.mark.parametrize("x", SWEEP)
    def test_erf_plus_erfc_is_one(self, x: float) -> None:
        assert erf(x) + erfc(x) == pytest.approx(1.0, abs=1e-14)

    @pytest.mark.parametrize("x", SWEEP)
    def test_erfc_reflection(self, x: float) -> None:
        assert erfc(-x) == pytest.approx(2.0 - erfc(x), abs=1e-15)

    @pytest.mark.parametrize("x", [-2.9, -1.5, -0.2, 0.0, 0.7, 2.0, 2.9])
    def test_erf_inv_recovers_argument(self, x: float) -> None:
        assert erf_inv(erf(x)) == pytest.approx(x, abs=1e-8)
