"""
Tests for the multivariate distribution families
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import stats

from statkit.distributions.support import SimplexSupport
from statkit.errors import (
    CharacteristicNotAvailableError,
    InvalidArgumentError,
    InvalidParameterError,
    UndefinedQuantityError,
)
from statkit.families.configuration import configure_families_register
from statkit.types import FamilyName, MultivariateContinuous, MultivariateDiscrete

MEAN = [1.0, -2.0, 0.5]
COVARIANCE = [[2.0, 0.3, 0.1], [0.3, 1.0, -0.2], [0.1, -0.2, 0.5]]


class TestMultivariateNormal:
    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.MULTIVARIATE_NORMAL)
        self.dist = self.family(mean=MEAN, covariance=COVARIANCE)
        self.reference = stats.multivariate_normal(MEAN, COVARIANCE)

    def test_distribution_type(self):
        assert self.dist.distribution_type == MultivariateContinuous(3)
        assert self.dist.dimension == 3
        assert self.dist.parameters["mean"] == (1.0, -2.0, 0.5)

    @pytest.mark.parametrize(
        "point", [[1.0, -2.0, 0.5], [0.0, 0.0, 0.0], [3.0, -1.0, 2.0], [-4.0, 2.0, -1.0]]
    )
    def test_density_against_scipy(self, point):
        assert self.dist.pdf(point) == pytest.approx(float(self.reference.pdf(point)), rel=1e-12)
        assert self.dist.ln_pdf(point) == pytest.approx(
            float(self.reference.logpdf(point)), rel=1e-12
        )

    def test_moments(self):
        np.testing.assert_allclose(self.dist.mean(), MEAN)
        np.testing.assert_allclose(self.dist.covariance(), COVARIANCE)
        np.testing.assert_allclose(self.dist.mode(), MEAN)
        assert self.dist.entropy() == pytest.approx(float(self.reference.entropy()), rel=1e-12)

    def test_mean_precision_parametrization(self):
        precision = np.linalg.inv(np.array(COVARIANCE))
        dist = self.family(mean=MEAN, precision=precision, parametrization_name="meanPrecision")

        np.testing.assert_allclose(dist.covariance(), COVARIANCE, rtol=1e-12, atol=1e-14)
        assert dist.ln_pdf([0.0, 0.0, 0.0]) == pytest.approx(
            float(self.reference.logpdf([0.0, 0.0, 0.0])), rel=1e-12
        )

    def test_point_of_wrong_dimension(self):
        with pytest.raises(InvalidArgumentError):
            self.dist.pdf([1.0, 2.0])

    def test_non_finite_point_has_zero_density(self):
        assert self.dist.pdf([math.inf, 0.0, 0.0]) == 0.0

    @pytest.mark.parametrize(
        "mean, covariance, message",
        [
            ([0.0], [[1.0]], "dimension >= 2"),
            ([0.0, 0.0], [[1.0, 0.5], [0.4, 1.0]], "symmetric"),
            ([0.0, 0.0], [[1.0, 2.0], [2.0, 1.0]], "positive definite"),
        ],
    )
    def test_invalid_parameters(self, mean, covariance, message):
        with pytest.raises(InvalidParameterError, match=message):
            self.family(mean=mean, covariance=covariance)

    def test_malformed_parameters(self):
        with pytest.raises(InvalidParameterError):
            self.family(mean=[0.0, 0.0], covariance=[[1.0, 0.0, 0.0]])
        with pytest.raises(InvalidParameterError):
            self.family(mean=[0.0, math.nan], covariance=np.eye(2))

    def test_sample_moments(self, rng):
        sample = self.dist.sample(20_000, rng)

        assert sample.shape == (20_000, 3)
        np.testing.assert_allclose(sample.array.mean(axis=0), MEAN, atol=0.05)
        np.testing.assert_allclose(np.cov(sample.array, rowvar=False), COVARIANCE, atol=0.08)
        assert self.dist.draw(rng).shape == (3,)


class TestDirichlet:
    ALPHA = [2.0, 3.0, 4.5]

    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.DIRICHLET)
        self.dist = self.family(alpha=self.ALPHA)
        self.reference = stats.dirichlet(self.ALPHA)

    def test_distribution_type(self):
        assert self.dist.distribution_type == MultivariateContinuous(3)
        assert isinstance(self.dist.support, SimplexSupport)

    @pytest.mark.parametrize("point", [[0.2, 0.3, 0.5], [0.6, 0.1, 0.3], [1 / 3, 1 / 3, 1 / 3]])
    def test_density_against_scipy(self, point):
        assert self.dist.pdf(point) == pytest.approx(float(self.reference.pdf(point)), rel=1e-12)
        assert self.dist.ln_pdf(point) == pytest.approx(
            float(self.reference.logpdf(point)), rel=1e-12
        )

    @pytest.mark.parametrize("point", [[0.5, 0.5, 0.5], [0.0, 0.5, 0.5], [1.2, -0.1, -0.1]])
    def test_zero_density_off_simplex(self, point):
        assert self.dist.pdf(point) == 0.0
        assert self.dist.ln_pdf(point) == -math.inf

    def test_moments(self):
        np.testing.assert_allclose(self.dist.mean(), self.reference.mean(), rtol=1e-14)
        np.testing.assert_allclose(self.dist.covariance(), self.reference.cov(), rtol=1e-12)
        assert self.dist.entropy() == pytest.approx(float(self.reference.entropy()), rel=1e-12)

    def test_mode(self):
        alpha = np.array(self.ALPHA)
        np.testing.assert_allclose(self.dist.mode(), (alpha - 1.0) / (alpha.sum() - 3.0))

        with pytest.raises(UndefinedQuantityError):
            self.family(alpha=[0.5, 2.0]).mode()

    @pytest.mark.parametrize(
        "alpha, message", [([1.0], "at least two"), ([1.0, 0.0], "alpha > 0")]
    )
    def test_invalid_parameters(self, alpha, message):
        with pytest.raises(InvalidParameterError, match=message):
            self.family(alpha=alpha)

    def test_samples_lie_on_simplex(self, rng):
        sample = self.dist.sample(2000, rng)

        np.testing.assert_allclose(sample.array.sum(axis=1), 1.0, rtol=1e-12)
        assert (sample.array > 0.0).all()
        np.testing.assert_allclose(sample.array.mean(axis=0), self.reference.mean(), atol=0.02)


class TestMultinomial:
    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.MULTINOMIAL)
        self.dist = self.family(probabilities=[2.0, 3.0, 5.0], n=6)
        self.reference = stats.multinomial(6, [0.2, 0.3, 0.5])

    def test_distribution_type(self):
        assert self.dist.distribution_type == MultivariateDiscrete(3)

    @pytest.mark.parametrize("counts", [[2, 2, 2], [0, 0, 6], [6, 0, 0], [1, 3, 2]])
    def test_mass_against_scipy(self, counts):
        assert self.dist.pmf(counts) == pytest.approx(
            float(self.reference.pmf(counts)), rel=1e-12
        )
        assert self.dist.ln_pmf(counts) == pytest.approx(
            float(self.reference.logpmf(counts)), rel=1e-12
        )

    @pytest.mark.parametrize("counts", [[2, 2, 1], [1.5, 1.5, 3], [-1, 3, 4]])
    def test_zero_mass_off_support(self, counts):
        assert self.dist.pmf(counts) == 0.0

    def test_wrong_number_of_categories(self):
        with pytest.raises(InvalidArgumentError):
            self.dist.pmf([3, 3])

    def test_moments(self):
        np.testing.assert_allclose(self.dist.mean(), self.reference.mean(), rtol=1e-14)
        np.testing.assert_allclose(self.dist.covariance(), self.reference.cov(), rtol=1e-12)

    def test_no_entropy_or_mode(self):
        with pytest.raises(CharacteristicNotAvailableError):
            self.dist.entropy()
        with pytest.raises(CharacteristicNotAvailableError):
            self.dist.mode()

    @pytest.mark.parametrize(
        "params",
        [
            {"probabilities": [1.0], "n": 3},
            {"probabilities": [0.5, -0.5], "n": 3},
            {"probabilities": [0.0, 0.0], "n": 3},
            {"probabilities": [0.5, 0.5], "n": -1},
            {"probabilities": [0.5, 0.5], "n": 2.5},
        ],
    )
    def test_invalid_parameters(self, params):
        with pytest.raises(InvalidParameterError):
            self.family(**params)

    def test_samples_sum_to_trials(self, rng):
        sample = self.dist.sample(5000, rng)

        np.testing.assert_array_equal(sample.array.sum(axis=1), 6.0)
        np.testing.assert_allclose(sample.array.mean(axis=0), [1.2, 1.8, 3.0], atol=0.06)
