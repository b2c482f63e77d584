"""
Tests for Normal Distribution Family

This module tests the functionality of the normal distribution family,
including parameterizations, characteristics, and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import norm

from statkit.distributions.support import ContinuousSupport
from statkit.errors import DegenerateDistributionError, InvalidArgumentError, InvalidParameterError
from statkit.families.configuration import configure_families_register
from statkit.types import (
    CharacteristicName,
    ContinuousSupportShape1D,
    FamilyName,
    UnivariateContinuous,
)

from .base import BaseDistributionTest


class TestNormalFamily(BaseDistributionTest):
    """Test suite for Normal distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.normal_family = registry.get(FamilyName.NORMAL)
        self.normal_dist_example = self.normal_family(mu=2.0, sigma=1.5)

    def test_family_properties(self):
        """Test basic properties of normal family."""
        assert self.normal_family.name == FamilyName.NORMAL

        assert set(self.normal_family.parametrization_names) == {"meanStd", "meanPrec"}
        assert self.normal_family.base_parametrization_name == "meanStd"

    def test_mean_std_parametrization_creation(self):
        """Test creation of distribution with standard parametrization."""
        dist = self.normal_family(mu=2.0, sigma=1.5)

        assert dist.family_name == FamilyName.NORMAL
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters == {"mu": 2.0, "sigma": 1.5}
        assert dist.parametrization_name == "meanStd"

    def test_mean_prec_parametrization_creation(self):
        """Test creation of distribution with mean-precision parametrization."""
        dist = self.normal_family(mu=2.0, tau=0.25, parametrization_name="meanPrec")

        assert dist.parameters == {"mu": 2.0, "tau": 0.25}
        assert dist.parametrization_name == "meanPrec"
        assert dist.std_dev() == pytest.approx(2.0)

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(InvalidParameterError, match="0 <= sigma < inf"):
            self.normal_family(mu=0, sigma=-1.0)

        with pytest.raises(InvalidParameterError, match="0 < tau < inf"):
            self.normal_family(mu=0, tau=-1.0, parametrization_name="meanPrec")

        with pytest.raises(InvalidParameterError, match="mu is finite"):
            self.normal_family(mu=math.nan, sigma=1.0)

        with pytest.raises(InvalidParameterError):
            self.normal_family(mu=0.0, sigma=math.inf)

    def test_standard_normal_values(self):
        dist = self.normal_family(mu=0.0, sigma=1.0)

        assert dist.pdf(0.0) == pytest.approx(0.3989422804014327, rel=1e-14)
        assert dist.cdf(0.0) == 0.5
        assert dist.inverse_cdf(0.5) == pytest.approx(0.0, abs=1e-15)
        assert dist.ln_pdf(0.0) == pytest.approx(-0.9189385332046728, rel=1e-14)

    @pytest.mark.parametrize(
        "char_func_getter, expected",
        [
            (lambda distr: distr.query_method(CharacteristicName.MEAN)(None), 2.0),
            (lambda distr: distr.query_method(CharacteristicName.VAR)(None), 2.25),
            (lambda distr: distr.query_method(CharacteristicName.STD_DEV)(None), 1.5),
            (lambda distr: distr.query_method(CharacteristicName.SKEW)(None), 0.0),
            (lambda distr: distr.query_method(CharacteristicName.KURT)(None), 0.0),
            (lambda distr: distr.query_method(CharacteristicName.MODE)(None), 2.0),
            (lambda distr: distr.query_method(CharacteristicName.MEDIAN)(None), 2.0),
        ],
    )
    def test_moments(self, char_func_getter, expected):
        """Test moment calculations using parameterized tests."""
        actual = char_func_getter(self.normal_dist_example)
        assert abs(actual - expected) < self.CALCULATION_PRECISION

    def test_entropy(self):
        assert self.normal_dist_example.entropy() == pytest.approx(
            float(norm(2.0, 1.5).entropy()), rel=1e-12
        )

    @pytest.mark.parametrize(
        "parametrization_name, params, expected_mu, expected_sigma",
        [
            ("meanStd", {"mu": 2.0, "sigma": 1.5}, 2.0, 1.5),
            ("meanPrec", {"mu": 2.0, "tau": 0.25}, 2.0, math.sqrt(1 / 0.25)),
        ],
    )
    def test_parametrization_conversions(
        self, parametrization_name, params, expected_mu, expected_sigma
    ):
        """Test conversions between different parameterizations."""
        base_params = self.normal_family.to_base(
            self.normal_family.get_parametrization(parametrization_name)(**params)
        )

        assert abs(base_params.parameters["mu"] - expected_mu) < self.CALCULATION_PRECISION
        assert abs(base_params.parameters["sigma"] - expected_sigma) < self.CALCULATION_PRECISION

    def test_analytical_computations_availability(self):
        """Test that analytical computations are available for normal distribution."""
        comp = self.normal_family(mu=0.0, sigma=1.0).analytical_computations

        expected_chars = {
            CharacteristicName.PDF,
            CharacteristicName.LN_PDF,
            CharacteristicName.CDF,
            CharacteristicName.SF,
            CharacteristicName.PPF,
            CharacteristicName.MEAN,
            CharacteristicName.VAR,
            CharacteristicName.STD_DEV,
            CharacteristicName.SKEW,
            CharacteristicName.KURT,
            CharacteristicName.ENTROPY,
            CharacteristicName.MODE,
            CharacteristicName.MEDIAN,
        }
        assert set(comp.keys()) == expected_chars

    @pytest.mark.parametrize(
        "method_name, test_data, scipy_func",
        [
            ("pdf", [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], norm.pdf),
            ("ln_pdf", [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], norm.logpdf),
            ("cdf", [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], norm.cdf),
            ("sf", [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], norm.sf),
            ("inverse_cdf", [0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999], norm.ppf),
        ],
    )
    def test_characteristics_against_scipy(self, method_name, test_data, scipy_func):
        dist = self.normal_dist_example
        method = getattr(dist, method_name)

        result_array = self.evaluate(method, test_data)
        expected_array = scipy_func(np.array(test_data), loc=2.0, scale=1.5)

        self.assert_arrays_almost_equal(result_array, expected_array)

    def test_lower_tail_keeps_relative_precision(self):
        dist = self.normal_family(mu=0.0, sigma=1.0)

        assert dist.cdf(-30.0) == pytest.approx(float(norm.cdf(-30.0)), rel=1e-10)
        assert dist.sf(30.0) == pytest.approx(float(norm.sf(30.0)), rel=1e-10)

    def test_normal_support(self):
        """Test that normal distribution has correct support (entire real line)."""
        dist = self.normal_dist_example

        assert dist.support is not None
        assert isinstance(dist.support, ContinuousSupport)

        assert dist.support.left == float("-inf")
        assert dist.support.right == float("inf")
        assert not dist.support.left_closed
        assert not dist.support.right_closed

        assert dist.support.contains(0) is True
        assert dist.support.contains(float("inf")) is False
        assert dist.support.contains(float("-inf")) is False

        test_points = np.array([-500, 0, 5])
        results = dist.support.contains(test_points)
        assert np.all(results)

        assert dist.support.shape == ContinuousSupportShape1D.REAL_LINE
        assert dist.min() == -math.inf
        assert dist.max() == math.inf

    def test_sampling_moments(self, rng):
        sample = self.normal_dist_example.sample(20_000, rng)

        assert sample.shape == (20_000, 1)
        assert float(sample.array.mean()) == pytest.approx(2.0, abs=0.05)
        assert float(sample.array.std()) == pytest.approx(1.5, abs=0.05)
        assert isinstance(self.normal_dist_example.draw(rng), float)


class TestNormalFamilyEdgeCases(BaseDistributionTest):
    """Test edge cases and error conditions."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.normal_family = registry.get(FamilyName.NORMAL)

    def test_invalid_parameterization(self):
        """Test error for invalid parameterization name."""
        with pytest.raises(KeyError):
            self.normal_family.distribution(parametrization_name="invalid_name", mu=0, sigma=1)

    def test_missing_parameters(self):
        """Test error for missing required parameters."""
        with pytest.raises(TypeError):
            self.normal_family.distribution(mu=0)  # Missing sigma

    def test_invalid_probability_ppf(self):
        """Test PPF with invalid probability values."""
        dist = self.normal_family(mu=2.0, sigma=1.5)

        assert dist.inverse_cdf(0.0) == float("-inf")
        assert dist.inverse_cdf(1.0) == float("inf")

        with pytest.raises(InvalidArgumentError):
            dist.inverse_cdf(-0.1)
        with pytest.raises(InvalidArgumentError):
            dist.inverse_cdf(1.1)

    def test_degenerate_point_mass(self):
        dist = self.normal_family(mu=1.0, sigma=0.0)

        assert dist.cdf(0.999) == 0.0
        assert dist.cdf(1.0) == 1.0
        assert dist.cdf(5.0) == 1.0
        assert dist.pdf(1.0) == math.inf
        assert dist.pdf(2.0) == 0.0
        assert dist.inverse_cdf(0.3) == 1.0
        assert dist.mean() == 1.0
        assert dist.variance() == 0.0

    @pytest.mark.parametrize("quantity", ["skewness", "kurtosis", "entropy"])
    def test_degenerate_undefined_quantities(self, quantity):
        dist = self.normal_family(mu=1.0, sigma=0.0)

        with pytest.raises(DegenerateDistributionError):
            getattr(dist, quantity)()
