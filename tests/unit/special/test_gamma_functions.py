"""
Tests for the Gamma family of functions.

Reference values come from :mod:`scipy.special`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy import special

from pysatl_numerics.errors import (
    MaxCountExceededError,
    NumberIsTooLargeError,
    NumberIsTooSmallError,
)
from pysatl_numerics.special import (
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

CALCULATION_PRECISION = 1e-12


class TestLogGamma:
    @pytest.mark.parametrize(
        "x",
        [1e-8, 0.1, 0.5, 1.0, 1.5, 2.0, 2.5, 3.7, 7.9, 8.0, 8.5, 30.0, 1e5],
    )
    def test_matches_reference(self, x: float) -> None:
        assert log_gamma(x) == pytest.approx(
            special.gammaln(x), rel=CALCULATION_PRECISION, abs=1e-14
        )

    @pytest.mark.parametrize("x", [0.0, -1.0, -2.5, math.nan], ids=["zero", "-1", "-2.5", "nan"])
    def test_non_positive_is_nan(self, x: float) -> None:
        assert math.isnan(log_gamma(x))

    def test_positive_infinity(self) -> None:
        assert log_gamma(math.inf) == math.inf

    def test_integer_arguments_are_log_factorials(self) -> None:
        assert log_gamma(6.0) == pytest.approx(math.log(120.0), rel=CALCULATION_PRECISION)


class TestGamma:
    @pytest.mark.parametrize(
        "x",
        [0.5, 1.0, 1.5, 5.0, 5.3, 19.5, 20.5, 100.7, 170.5, -0.5, -2.5, -19.3, -25.5, 1e-10],
    )
    def test_matches_reference(self, x: float) -> None:
        assert gamma(x) == pytest.approx(special.gamma(x), rel=CALCULATION_PRECISION)

    def test_half(self) -> None:
        assert gamma(0.5) == pytest.approx(math.sqrt(math.pi), rel=1e-15)

    @pytest.mark.parametrize(
        "x",
        [0.0, -1.0, -7.0, -math.inf, math.nan],
        ids=["zero", "-1", "-7", "-inf", "nan"],
    )
    def test_poles_and_nan(self, x: float) -> None:
        assert math.isnan(gamma(x))

    def test_overflow(self) -> None:
        assert gamma(200.0) == math.inf
        assert gamma(math.inf) == math.inf

    def test_underflow_on_negative_axis(self) -> None:
        assert gamma(-200.5) == 0.0


class TestAuxiliaryFunctions:
    @pytest.mark.parametrize("x", [-0.5, -0.3, 0.0, 0.2, 0.5, 0.9, 1.2, 1.5])
    def test_inv_gamma1pm1(self, x: float) -> None:
        expected = 1.0 / special.gamma(1.0 + x) - 1.0
        assert inv_gamma1pm1(x) == pytest.approx(expected, rel=1e-10, abs=1e-15)

    @pytest.mark.parametrize("x", [-0.5, -0.1, 0.3, 1.0, 1.5])
    def test_log_gamma1p(self, x: float) -> None:
        assert log_gamma1p(x) == pytest.approx(special.gammaln(1.0 + x), rel=1e-10, abs=1e-15)

    @pytest.mark.parametrize("function", [inv_gamma1pm1, log_gamma1p])
    def test_argument_too_small(self, function) -> None:
        with pytest.raises(NumberIsTooSmallError) as exc_info:
            function(-0.6)
        assert exc_info.value.minimum == -0.5

    @pytest.mark.parametrize("function", [inv_gamma1pm1, log_gamma1p])
    def test_argument_too_large(self, function) -> None:
        with pytest.raises(NumberIsTooLargeError) as exc_info:
            function(1.6)
        assert exc_info.value.maximum == 1.5

    def test_lanczos_reproduces_gamma(self) -> None:
        x = 10.0
        tmp = x + LANCZOS_G + 0.5
        value = math.sqrt(2.0 * math.pi) * tmp ** (x + 0.5) * math.exp(-tmp) * lanczos(x) / x

        assert value == pytest.approx(math.factorial(9), rel=CALCULATION_PRECISION)


class TestRegularizedGamma:
    PAIRS = [
        (0.5, 0.1),
        (1.0, 1.0),
        (1.0, 3.0),
        (2.5, 10.0),
        (10.0, 5.0),
        (10.0, 15.0),
        (100.0, 90.0),
        (100.0, 120.0),
    ]

    @pytest.mark.parametrize("a, x", PAIRS)
    def test_p_matches_reference(self, a: float, x: float) -> None:
        assert regularized_gamma_p(a, x) == pytest.approx(special.gammainc(a, x), rel=1e-10)

    @pytest.mark.parametrize("a, x", PAIRS)
    def test_q_matches_reference(self, a: float, x: float) -> None:
        assert regularized_gamma_q(a, x) == pytest.approx(special.gammaincc(a, x), rel=1e-10)

    @pytest.mark.parametrize("a, x", PAIRS)
    def test_p_and_q_are_complementary(self, a: float, x: float) -> None:
        assert regularized_gamma_p(a, x) + regularized_gamma_q(a, x) == pytest.approx(
            1.0, abs=1e-14
        )

    def test_exponential_special_case(self) -> None:
        # P(1, x) = 1 - exp(-x)
        assert regularized_gamma_p(1.0, 2.0) == pytest.approx(-math.expm1(-2.0), rel=1e-14)

    def test_zero_argument(self) -> None:
        assert regularized_gamma_p(3.0, 0.0) == 0.0
        assert regularized_gamma_q(3.0, 0.0) == 1.0

    @pytest.mark.parametrize(
        "a, x",
        [(0.0, 1.0), (-1.0, 1.0), (1.0, -1.0), (math.nan, 1.0), (1.0, math.nan)],
        ids=["zero-a", "negative-a", "negative-x", "nan-a", "nan-x"],
    )
    def test_invalid_arguments_are_nan(self, a: float, x: float) -> None:
        assert math.isnan(regularized_gamma_p(a, x))
        assert math.isnan(regularized_gamma_q(a, x))

    def test_series_budget_exhausted(self) -> None:
        with pytest.raises(MaxCountExceededError):
            regularized_gamma_p(10.0, 5.0, epsilon=1e-15, max_iterations=2)

    def test_continued_fraction_budget_exhausted(self) -> None:
        with pytest.raises(MaxCountExceededError):
            regularized_gamma_q(2.5, 10.0, max_iterations=2)


class TestPolygamma:
    @pytest.mark.parametrize("x", [1e-6, 0.5, 1.0, 2.5, 10.0, 48.9, 49.0, 100.0, -0.5, -2.5])
    def test_digamma_matches_reference(self, x: float) -> None:
        assert digamma(x) == pytest.approx(special.digamma(x), rel=1e-8, abs=1e-8)

    @pytest.mark.parametrize("x", [1e-6, 0.5, 1.0, 2.5, 10.0, 49.0, 100.0, -0.5, -2.5])
    def test_trigamma_matches_reference(self, x: float) -> None:
        assert trigamma(x) == pytest.approx(special.polygamma(1, x), rel=1e-8, abs=1e-8)

    def test_digamma_at_one(self) -> None:
        assert digamma(1.0) == pytest.approx(-EULER_MASCHERONI, abs=1e-8)

    @pytest.mark.parametrize(
        "x, expected",
        [(math.inf, math.inf), (-math.inf, -math.inf)],
        ids=["+inf", "-inf"],
    )
    def test_infinities_pass_through(self, x: float, expected: float) -> None:
        assert digamma(x) == expected
        assert trigamma(x) == expected

    def test_nan_passes_through(self) -> None:
        assert math.isnan(digamma(math.nan))
        assert math.isnan(trigamma(math.nan))

    @pytest.mark.parametrize("x", [0.0, -1.0, -3.0])
    def test_poles(self, x: float) -> None:
        assert digamma(x) == -math.inf
        assert trigamma(x) == math.inf

    @pytest.mark.parametrize("x", [-1e16, -1e20, -2.0**53, -1e300])
    def test_large_negative_integers_are_poles(self, x: float) -> None:
        assert digamma(x) == -math.inf
        assert trigamma(x) == math.inf

    def test_large_negative_half_integer(self) -> None:
        x = -1e15 - 0.5

        assert digamma(x) == pytest.approx(math.log(1.0 - x), rel=1e-12)
        assert trigamma(x) == pytest.approx(math.pi**2, rel=1e-12)

    @pytest.mark.parametrize("x", [-1e-6, -0.3, -7.25, -123.75])
    def test_negative_arguments_match_reference(self, x: float) -> None:
        assert digamma(x) == pytest.approx(special.digamma(x), rel=1e-8, abs=1e-8)
        assert trigamma(x) == pytest.approx(special.polygamma(1, x), rel=1e-8, abs=1e-8)


class TestGammaConsistency:
    @pytest.mark.parametrize("x", [1.0, 2.0, 5.0, 10.0, 50.0])
    def test_log_gamma_is_log_of_gamma(self, x: float) -> None:
        assert log_gamma(x) == pytest.approx(math.log(gamma(x)), rel=1e-12, abs=1e-14)

    def test_gamma_of_integer_is_factorial(self) -> None:
        assert gamma(5.0) == pytest.approx(24.0, rel=1e-14)
