from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from statkit.distributions.distribution import (
    Bounded,
    Continuous,
    CumulativeDistribution,
    Discrete,
    Distribution,
    Moments,
    MultivariateMoments,
    Sampleable,
)
from statkit.families.configuration import configure_families_register
from statkit.families.distribution import (
    MultivariateContinuousDistribution,
    MultivariateDiscreteDistribution,
    ParametricFamilyDistribution,
    UnivariateContinuousDistribution,
    UnivariateDiscreteDistribution,
    distribution_class_for,
)
from statkit.types import (
    FamilyName,
    MultivariateContinuous,
    MultivariateDiscrete,
    UnivariateContinuous,
    UnivariateDiscrete,
)


class TestDistributionClassFor:
    @pytest.mark.parametrize(
        "distribution_type, expected",
        [
            (UnivariateContinuous, UnivariateContinuousDistribution),
            (UnivariateDiscrete, UnivariateDiscreteDistribution),
            (MultivariateContinuous(2), MultivariateContinuousDistribution),
            (MultivariateDiscrete(4), MultivariateDiscreteDistribution),
        ],
    )
    def test_class_by_type(self, distribution_type, expected):
        assert distribution_class_for(distribution_type) is expected

    def test_non_euclidean_type_falls_back_to_base_class(self):
        class _Abstract:
            pass

        chosen = distribution_class_for(_Abstract())  # type: ignore[arg-type]
        assert chosen is ParametricFamilyDistribution


class TestCapabilities:
    def setup_method(self):
        self.registry = configure_families_register()

    def test_univariate_continuous(self):
        dist = self.registry.get(FamilyName.NORMAL)(mu=0.0, sigma=1.0)

        for capability in (Distribution, Continuous, CumulativeDistribution, Bounded, Moments):
            assert isinstance(dist, capability)
        assert isinstance(dist, Sampleable)
        assert not isinstance(dist, Discrete)

    def test_univariate_discrete(self):
        dist = self.registry.get(FamilyName.POISSON)(lambda_=2.0)

        for capability in (Distribution, Discrete, CumulativeDistribution, Bounded, Moments):
            assert isinstance(dist, capability)
        assert not isinstance(dist, Continuous)

    def test_multivariate_continuous(self):
        dist = self.registry.get(FamilyName.DIRICHLET)(alpha=[1.0, 2.0, 3.0])

        assert isinstance(dist, Continuous)
        assert isinstance(dist, MultivariateMoments)
        assert isinstance(dist, Sampleable)
        assert not isinstance(dist, CumulativeDistribution)
        assert not isinstance(dist, Bounded)

    def test_multivariate_discrete(self):
        dist = self.registry.get(FamilyName.MULTINOMIAL)(probabilities=[0.5, 0.5], n=3)

        assert isinstance(dist, Discrete)
        assert isinstance(dist, MultivariateMoments)
        assert not isinstance(dist, CumulativeDistribution)
        assert not isinstance(dist, Moments)

    def test_family_is_resolved_through_register(self):
        family = self.registry.get(FamilyName.GAMMA)
        dist = family(shape=2.0, rate=1.0)

        assert dist.family is family
        assert dist.family_name == FamilyName.GAMMA

    def test_equal_parameters_give_equal_distributions(self):
        family = self.registry.get(FamilyName.BETA)

        assert family(alpha=2.0, beta=3.0) == family(alpha=2.0, beta=3.0)
        assert family(alpha=2.0, beta=3.0) != family(alpha=3.0, beta=2.0)

    def test_draw_types(self, rng):
        univariate = self.registry.get(FamilyName.EXPONENTIAL)(lambda_=1.0)
        multivariate = self.registry.get(FamilyName.DIRICHLET)(alpha=[1.0, 1.0])

        assert isinstance(univariate.draw(rng), float)
        draw = multivariate.draw(rng)
        assert isinstance(draw, np.ndarray)
        assert draw.shape == (2,)
