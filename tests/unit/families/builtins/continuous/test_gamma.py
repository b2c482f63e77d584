"""
Tests for Gamma Distribution Family

The gamma family has no closed-form quantile function, so these tests also
cover the quantile and median obtained from the CDF.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy.stats import gamma

from statkit.distributions.computation import FittedComputationMethod
from statkit.errors import InvalidParameterError
from statkit.families.configuration import configure_families_register
from statkit.types import CharacteristicName, FamilyName

from .base import BaseDistributionTest


class TestGammaFamily(BaseDistributionTest):
    def setup_method(self):
        registry = configure_families_register()
        self.gamma_family = registry.get(FamilyName.GAMMA)
        self.gamma_dist_example = self.gamma_family(shape=2.0, rate=1.0)

    def test_family_properties(self):
        assert self.gamma_family.parametrization_names == ["shapeRate", "shapeScale"]
        assert self.gamma_family.base_parametrization_name == "shapeRate"

    def test_moments(self):
        dist = self.gamma_dist_example

        assert dist.mean() == pytest.approx(2.0, abs=self.CALCULATION_PRECISION)
        assert dist.variance() == pytest.approx(2.0, abs=self.CALCULATION_PRECISION)
        assert dist.std_dev() == pytest.approx(math.sqrt(2.0), abs=self.CALCULATION_PRECISION)
        assert dist.skewness() == pytest.approx(math.sqrt(2.0), abs=self.CALCULATION_PRECISION)
        assert dist.kurtosis() == pytest.approx(3.0, abs=self.CALCULATION_PRECISION)
        assert dist.mode() == pytest.approx(1.0, abs=self.CALCULATION_PRECISION)
        assert dist.entropy() == pytest.approx(float(gamma(2.0).entropy()), rel=1e-12)

    def test_shape_scale_matches_shape_rate(self):
        by_scale = self.gamma_family(shape=2.0, scale=0.5, parametrization_name="shapeScale")
        by_rate = self.gamma_family(shape=2.0, rate=2.0)

        for x in (0.1, 0.7, 1.5, 4.0):
            assert by_scale.pdf(x) == pytest.approx(by_rate.pdf(x), rel=1e-14)
            assert by_scale.cdf(x) == pytest.approx(by_rate.cdf(x), rel=1e-14)
        assert by_scale.mean() == pytest.approx(1.0)

    @pytest.mark.parametrize("x", [0.01, 0.5, 1.0, 2.0, 5.0, 12.0])
    def test_density_and_distribution_against_scipy(self, x):
        dist = self.gamma_dist_example

        assert dist.pdf(x) == pytest.approx(float(gamma.pdf(x, 2.0)), rel=1e-12)
        assert dist.ln_pdf(x) == pytest.approx(float(gamma.logpdf(x, 2.0)), rel=1e-12)
        assert dist.cdf(x) == pytest.approx(float(gamma.cdf(x, 2.0)), rel=1e-10)
        assert dist.sf(x) == pytest.approx(float(gamma.sf(x, 2.0)), rel=1e-10)

    def test_quantile_is_fitted_from_cdf(self):
        dist = self.gamma_dist_example

        assert CharacteristicName.PPF not in dist.analytical_computations
        method = dist.query_method(CharacteristicName.PPF)
        assert isinstance(method, FittedComputationMethod)

        for q in (0.001, 0.1, 0.5, 0.9, 0.999):
            assert dist.inverse_cdf(q) == pytest.approx(float(gamma.ppf(q, 2.0)), rel=1e-9)
        assert dist.median() == pytest.approx(float(gamma.median(2.0)), rel=1e-9)

    @pytest.mark.parametrize("rate", [1e-6, 1e4, 1e8])
    def test_quantile_keeps_relative_accuracy_at_any_scale(self, rate):
        dist = self.gamma_family(shape=2.0, rate=rate)

        for q in (1e-6, 0.01, 0.5, 0.99):
            x = dist.inverse_cdf(q)
            assert dist.cdf(x) == pytest.approx(q, rel=1e-9)
            assert x == pytest.approx(float(gamma.ppf(q, 2.0, scale=1.0 / rate)), rel=1e-9)

    def test_quantile_extremes(self):
        dist = self.gamma_dist_example

        assert dist.inverse_cdf(0.0) == 0.0
        assert dist.inverse_cdf(1.0) == math.inf

    def test_small_shape_density_at_zero(self):
        dist = self.gamma_family(shape=0.5, rate=1.0)

        assert dist.pdf(0.0) == math.inf
        assert dist.mode() == 0.0
        assert dist.cdf(0.0) == 0.0

    def test_unit_shape_is_exponential(self):
        dist = self.gamma_family(shape=1.0, rate=3.0)

        assert dist.pdf(0.0) == pytest.approx(3.0)
        assert dist.cdf(0.4) == pytest.approx(-math.expm1(-1.2), rel=1e-12)

    @pytest.mark.parametrize(
        "params",
        [
            {"shape": 0.0, "rate": 1.0},
            {"shape": 1.0, "rate": -1.0},
            {"shape": math.inf, "rate": 1.0},
            {"shape": math.nan, "rate": 1.0},
        ],
    )
    def test_invalid_parameters(self, params):
        with pytest.raises(InvalidParameterError):
            self.gamma_family(**params)

    def test_sampling_moments(self, rng):
        sample = self.gamma_family(shape=2.5, rate=2.0).sample(20_000, rng)

        assert (sample.array > 0.0).all()
        assert float(sample.array.mean()) == pytest.approx(1.25, rel=0.05)
        assert float(sample.array.var()) == pytest.approx(0.625, rel=0.1)
