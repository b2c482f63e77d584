from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy import special as sp

from statkit.errors import InvalidArgumentError
from statkit.special import erf, erf_inv, erfc, erfc_inv
from statkit.special.evaluate import polynomial


class TestPolynomial:
    def test_ascending_coefficients(self) -> None:
        assert polynomial(2.0, (1.0, 3.0, 0.5)) == 9.0
        assert polynomial(-1.5, (4.0,)) == 4.0
        assert isinstance(polynomial(0.5, (1.0, 1.0)), float)


class TestErf:
    @pytest.mark.parametrize("x", [-6.0, -2.0, -0.5, -1e-10, 0.0, 1e-10, 0.3, 0.9, 1.5, 3.0, 6.0])
    def test_erf_matches_scipy(self, x: float) -> None:
        assert erf(x) == pytest.approx(sp.erf(x), rel=1e-13, abs=1e-300)

    @pytest.mark.parametrize("x", [-3.0, -0.5, 0.0, 0.5, 1.0, 4.0, 10.0, 26.0])
    def test_erfc_matches_scipy(self, x: float) -> None:
        assert erfc(x) == pytest.approx(sp.erfc(x), rel=1e-12, abs=1e-300)

    def test_infinities_and_nan(self) -> None:
        assert erf(math.inf) == 1.0
        assert erf(-math.inf) == -1.0
        assert erfc(math.inf) == 0.0
        assert erfc(-math.inf) == 2.0
        assert math.isnan(erf(math.nan))

    @pytest.mark.parametrize("x", [0.1, 0.8, 2.2])
    def test_erf_plus_erfc_is_one(self, x: float) -> None:
        assert erf(x) + erfc(x) == pytest.approx(1.0, abs=1e-15)


class TestInverseErf:
    @pytest.mark.parametrize("p", [-0.999, -0.5, 1e-12, 0.2, 0.85, 0.9, 0.999999])
    def test_erf_inv_matches_scipy(self, p: float) -> None:
        assert erf_inv(p) == pytest.approx(sp.erfinv(p), rel=1e-12)

    @pytest.mark.parametrize("q", [1e-300, 1e-20, 0.01, 0.5, 1.0, 1.5, 1.999])
    def test_erfc_inv_matches_scipy(self, q: float) -> None:
        assert erfc_inv(q) == pytest.approx(sp.erfcinv(q), rel=1e-11, abs=1e-15)

    def test_endpoints(self) -> None:
        assert erf_inv(1.0) == math.inf
        assert erf_inv(-1.0) == -math.inf
        assert erfc_inv(0.0) == math.inf
        assert erfc_inv(2.0) == -math.inf

    @pytest.mark.parametrize("p", [-1.5, 1.0001])
    def test_erf_inv_domain(self, p: float) -> None:
        with pytest.raises(InvalidArgumentError):
            erf_inv(p)

    def test_erfc_inv_domain(self) -> None:
        with pytest.raises(InvalidArgumentError):
            erfc_inv(-0.1)
        with pytest.raises(InvalidArgumentError):
            erfc_inv(2.1)
