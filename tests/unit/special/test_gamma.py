from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy import special as sp

from statkit.errors import InvalidArgumentError
from statkit.special import (
    digamma,
    gamma,
    gamma_li,
    gamma_lr,
    gamma_ui,
    gamma_ur,
    inv_digamma,
    ln_gamma,
    trigamma,
)


class TestGamma:
    @pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 1.5, 2.0, 3.7, 10.0, 25.5, 100.0, 170.5])
    def test_gamma_matches_scipy(self, x: float) -> None:
        assert gamma(x) == pytest.approx(sp.gamma(x), rel=1e-12)

    @pytest.mark.parametrize("x", [-0.5, -1.5, -2.25, -7.9])
    def test_gamma_reflection(self, x: float) -> None:
        assert gamma(x) == pytest.approx(sp.gamma(x), rel=1e-11)

    def test_known_values(self) -> None:
        assert gamma(0.5) == pytest.approx(math.sqrt(math.pi), rel=1e-14)
        assert gamma(5.0) == pytest.approx(24.0, rel=1e-14)
        assert gamma(-0.5) == pytest.approx(-2.0 * math.sqrt(math.pi), rel=1e-13)

    @pytest.mark.parametrize("x", [0.3, 1.7, 4.2, 12.5])
    def test_recurrence(self, x: float) -> None:
        assert gamma(x + 1.0) == pytest.approx(x * gamma(x), rel=1e-12)

    def test_overflow_and_infinity(self) -> None:
        assert gamma(172.0) == math.inf
        assert gamma(math.inf) == math.inf
        assert math.isnan(gamma(math.nan))

    @pytest.mark.parametrize("x", [0.0, -1.0, -2.0, -30.0])
    def test_poles_raise(self, x: float) -> None:
        with pytest.raises(InvalidArgumentError):
            gamma(x)
        with pytest.raises(InvalidArgumentError):
            ln_gamma(x)

    @pytest.mark.parametrize("x", [1e-8, 0.2, 1.0, 2.0, 7.3, 171.0, 1e5, 1e12])
    def test_ln_gamma_matches_scipy(self, x: float) -> None:
        assert ln_gamma(x) == pytest.approx(sp.gammaln(x), rel=1e-12, abs=1e-14)

    def test_ln_gamma_of_negative_argument_is_log_abs(self) -> None:
        assert ln_gamma(-0.5) == pytest.approx(math.log(2.0 * math.sqrt(math.pi)), rel=1e-12)


class TestIncompleteGamma:
    CASES = [
        (0.5, 0.1),
        (0.5, 2.0),
        (1.0, 1.0),
        (2.5, 0.7),
        (3.0, 10.0),
        (10.0, 8.0),
        (50.0, 55.0),
        (150.0, 140.0),
        (0.01, 0.001),
    ]

    @pytest.mark.parametrize("a, x", CASES)
    def test_regularized_matches_scipy(self, a: float, x: float) -> None:
        assert gamma_lr(a, x) == pytest.approx(sp.gammainc(a, x), rel=1e-10, abs=1e-15)
        assert gamma_ur(a, x) == pytest.approx(sp.gammaincc(a, x), rel=1e-10, abs=1e-15)

    @pytest.mark.parametrize("a, x", CASES)
    def test_lower_plus_upper_is_one(self, a: float, x: float) -> None:
        assert gamma_lr(a, x) + gamma_ur(a, x) == pytest.approx(1.0, abs=1e-14)

    def test_exponential_case(self) -> None:
        # P(1, x) = 1 - exp(-x)
        assert gamma_lr(1.0, 2.0) == pytest.approx(1.0 - math.exp(-2.0), rel=1e-13)

    def test_limits(self) -> None:
        assert gamma_lr(2.0, 0.0) == 0.0
        assert gamma_ur(2.0, 0.0) == 1.0
        assert gamma_lr(2.0, math.inf) == 1.0
        assert gamma_ur(2.0, math.inf) == 0.0

    def test_unregularized(self) -> None:
        assert gamma_li(3.0, 2.0) == pytest.approx(sp.gammainc(3.0, 2.0) * 2.0, rel=1e-12)
        assert gamma_ui(3.0, 2.0) == pytest.approx(sp.gammaincc(3.0, 2.0) * 2.0, rel=1e-12)

    @pytest.mark.parametrize("a, x", [(0.0, 1.0), (-1.0, 1.0), (1.0, -0.5), (math.inf, 1.0)])
    def test_domain_errors(self, a: float, x: float) -> None:
        with pytest.raises(InvalidArgumentError):
            gamma_lr(a, x)
        with pytest.raises(InvalidArgumentError):
            gamma_ur(a, x)

    def test_nan_propagates(self) -> None:
        assert math.isnan(gamma_lr(math.nan, 1.0))
        assert math.isnan(gamma_ur(1.0, math.nan))


class TestDigamma:
    @pytest.mark.parametrize("x", [1e-7, 0.3, 1.0, 2.5, 11.9, 12.0, 40.0, -0.5, -3.3])
    def test_digamma_matches_scipy(self, x: float) -> None:
        assert digamma(x) == pytest.approx(sp.digamma(x), rel=1e-11, abs=1e-12)

    def test_digamma_of_one_is_minus_euler(self) -> None:
        assert digamma(1.0) == pytest.approx(-0.5772156649015329, rel=1e-13)

    @pytest.mark.parametrize("x", [0.4, 1.0, 3.0, 20.0, -1.5])
    def test_trigamma_matches_scipy(self, x: float) -> None:
        assert trigamma(x) == pytest.approx(sp.polygamma(1, x), rel=1e-10)

    @pytest.mark.parametrize("x", [0.0, -4.0])
    def test_poles_raise(self, x: float) -> None:
        with pytest.raises(InvalidArgumentError):
            digamma(x)
        with pytest.raises(InvalidArgumentError):
            trigamma(x)

    @pytest.mark.parametrize("x", [0.05, 0.5, 1.0, 3.0, 250.0])
    def test_inv_digamma_round_trip(self, x: float) -> None:
        assert inv_digamma(digamma(x)) == pytest.approx(x, rel=1e-10)

    def test_inv_digamma_limits(self) -> None:
        assert inv_digamma(-math.inf) == 0.0
        assert inv_digamma(math.inf) == math.inf
