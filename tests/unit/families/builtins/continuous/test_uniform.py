"""
Tests for Uniform Distribution Family

This module tests the functionality of the continuous uniform distribution
family, including parameterizations, characteristics, and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import uniform

from statkit.distributions.support import ContinuousSupport
from statkit.errors import InvalidArgumentError, InvalidParameterError
from statkit.families.configuration import configure_families_register
from statkit.types import (
    CharacteristicName,
    ContinuousSupportShape1D,
    FamilyName,
    UnivariateContinuous,
)

from .base import BaseDistributionTest


class TestUniformFamily(BaseDistributionTest):
    """Test suite for Uniform distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.uniform_family = registry.get(FamilyName.CONTINUOUS_UNIFORM)
        self.uniform_dist_example = self.uniform_family(lower_bound=2.0, upper_bound=5.0)

    def test_family_properties(self):
        """Test basic properties of uniform family."""
        assert self.uniform_family.name == FamilyName.CONTINUOUS_UNIFORM

        assert set(self.uniform_family.parametrization_names) == {"standard", "meanWidth"}
        assert self.uniform_family.base_parametrization_name == "standard"

    def test_standard_parametrization_creation(self):
        """Test creation of distribution with standard parametrization."""
        dist = self.uniform_family(lower_bound=2.0, upper_bound=5.0)

        assert dist.family_name == FamilyName.CONTINUOUS_UNIFORM
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters == {"lower_bound": 2.0, "upper_bound": 5.0}
        assert dist.parametrization_name == "standard"

    def test_mean_width_parametrization_creation(self):
        """Test creation of distribution with mean-width parametrization."""
        dist = self.uniform_family(mean=3.5, width=3.0, parametrization_name="meanWidth")

        assert dist.parameters == {"mean": 3.5, "width": 3.0}
        assert dist.parametrization_name == "meanWidth"
        assert dist.min() == 2.0
        assert dist.max() == 5.0

    @pytest.mark.parametrize(
        "characteristic, expected",
        [
            (CharacteristicName.MEAN, 3.5),
            (CharacteristicName.VAR, 0.75),
            (CharacteristicName.STD_DEV, math.sqrt(0.75)),
            (CharacteristicName.SKEW, 0.0),
            (CharacteristicName.KURT, -1.2),
            (CharacteristicName.MEDIAN, 3.5),
            (CharacteristicName.ENTROPY, math.log(3.0)),
        ],
    )
    def test_moments(self, characteristic, expected):
        """Test moment calculations."""
        method = self.uniform_dist_example.query_method(characteristic)
        assert abs(method(None) - expected) < self.CALCULATION_PRECISION

    @pytest.mark.parametrize(
        "parametrization_name, params, expected_lower, expected_upper",
        [
            ("standard", {"lower_bound": 2.0, "upper_bound": 5.0}, 2.0, 5.0),
            ("meanWidth", {"mean": 3.5, "width": 3.0}, 2.0, 5.0),
        ],
    )
    def test_parametrization_conversions(
        self, parametrization_name, params, expected_lower, expected_upper
    ):
        """Test conversions between different parameterizations."""
        base_params = self.uniform_family.to_base(
            self.uniform_family.get_parametrization(parametrization_name)(**params)
        )

        assert (
            abs(base_params.parameters["lower_bound"] - expected_lower) < self.CALCULATION_PRECISION
        )
        assert (
            abs(base_params.parameters["upper_bound"] - expected_upper) < self.CALCULATION_PRECISION
        )

    @pytest.mark.parametrize(
        "method_name, test_data, scipy_func",
        [
            ("pdf", [1.0, 2.0, 2.5, 3.0, 4.0, 5.0, 6.0], uniform.pdf),
            ("cdf", [1.0, 2.0, 2.5, 3.0, 4.0, 5.0, 6.0], uniform.cdf),
            ("sf", [1.0, 2.0, 2.5, 3.0, 4.0, 5.0, 6.0], uniform.sf),
            ("inverse_cdf", [0.0, 0.25, 0.5, 0.75, 1.0], uniform.ppf),
        ],
    )
    def test_characteristics_against_scipy(self, method_name, test_data, scipy_func):
        method = getattr(self.uniform_dist_example, method_name)

        result_array = self.evaluate(method, test_data)
        expected_array = scipy_func(np.array(test_data), loc=2.0, scale=3.0)

        self.assert_arrays_almost_equal(result_array, expected_array)

    def test_ln_pdf_outside_support(self):
        dist = self.uniform_dist_example

        assert dist.ln_pdf(3.0) == pytest.approx(-math.log(3.0))
        assert dist.ln_pdf(6.0) == -math.inf

    def test_uniform_support(self):
        """Test that uniform distribution has correct support [lower_bound, upper_bound]."""
        dist = self.uniform_dist_example

        assert dist.support is not None
        assert isinstance(dist.support, ContinuousSupport)

        assert dist.support.left == 2.0
        assert dist.support.right == 5.0
        assert dist.support.left_closed
        assert dist.support.right_closed

        assert dist.support.contains(2.0) is True
        assert dist.support.contains(5.0) is True
        assert dist.support.contains(3.5) is True
        assert dist.support.contains(1.9) is False
        assert dist.support.contains(5.1) is False

        test_points = np.array([1.9, 2.0, 3.5, 5.0, 5.1])
        expected = np.array([False, True, True, True, False])
        results = dist.support.contains(test_points)
        np.testing.assert_array_equal(results, expected)

        assert dist.support.shape == ContinuousSupportShape1D.BOUNDED_INTERVAL

    def test_samples_stay_in_bounds(self, rng):
        sample = self.uniform_dist_example.sample(5000, rng)

        assert ((sample.array >= 2.0) & (sample.array < 5.0)).all()
        assert float(sample.array.mean()) == pytest.approx(3.5, abs=0.05)


class TestUniformFamilyEdgeCases(BaseDistributionTest):
    """Test edge cases and error conditions for uniform distribution."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.uniform_family = registry.get(FamilyName.CONTINUOUS_UNIFORM)

    def test_invalid_parameterization(self):
        """Test error for invalid parameterization name."""
        with pytest.raises(KeyError):
            self.uniform_family.distribution(
                parametrization_name="invalid_name", lower_bound=0.0, upper_bound=1.0
            )

    def test_missing_parameters(self):
        """Test error for missing required parameters."""
        with pytest.raises(TypeError):
            self.uniform_family.distribution(lower_bound=0.0)  # Missing upper_bound

        with pytest.raises(TypeError):
            self.uniform_family.distribution(upper_bound=1.0)  # Missing lower_bound

    def test_invalid_probability_ppf(self):
        """Test PPF with invalid probability values."""
        dist = self.uniform_family(lower_bound=0.0, upper_bound=1.0)

        assert dist.inverse_cdf(0.0) == 0.0
        assert dist.inverse_cdf(1.0) == 1.0

        with pytest.raises(InvalidArgumentError):
            dist.inverse_cdf(-0.1)
        with pytest.raises(InvalidArgumentError):
            dist.inverse_cdf(1.1)

    def test_single_value_uniform(self):
        """Test uniform distribution with single value (lower_bound == upper_bound)."""
        with pytest.raises(InvalidParameterError, match="lower_bound < upper_bound"):
            self.uniform_family(lower_bound=2.0, upper_bound=2.0)

    def test_infinite_bounds(self):
        with pytest.raises(InvalidParameterError, match="bounds are finite"):
            self.uniform_family(lower_bound=0.0, upper_bound=math.inf)

    def test_negative_width(self):
        """Test that negative width is rejected."""
        with pytest.raises(InvalidParameterError, match="0 < width < inf"):
            self.uniform_family(mean=0.0, width=-1.0, parametrization_name="meanWidth")
