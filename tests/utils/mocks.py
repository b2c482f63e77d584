from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np

from statkit.distributions import (
    AnalyticalComputation,
    ArraySample,
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    Distribution,
    RandomSource,
    Sample,
    SamplingStrategy,
    Support,
)
from statkit.types import EuclideanDistributionType, GenericCharacteristicName, Kind

type Computations = Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]


class MockSamplingStrategy(SamplingStrategy):
    """Column of ``n`` raw uniforms, whatever the distribution."""

    def sample(self, n: int, distr: Distribution, rng: RandomSource, **options: Any) -> Sample:
        draws = np.fromiter((rng.random() for _ in range(n)), dtype=float, count=n)
        return ArraySample(draws.reshape(n, 1))


class StandaloneEuclideanUnivariateDistribution(Distribution):
    """
    Univariate distribution defined only by the analytical computations given.

    Everything else is resolved through the characteristic graph by the
    default computation strategy; sampling is inverse transform.
    """

    def __init__(
        self,
        kind: Kind,
        analytical_computations: Iterable[AnalyticalComputation[Any, Any]] | Computations = (),
        support: Support | None = None,
    ) -> None:
        if not isinstance(analytical_computations, Mapping):
            analytical_computations = {ac.target: ac for ac in analytical_computations}
        self._type = EuclideanDistributionType(kind, 1)
        self._analytical = dict(analytical_computations)
        self._support = support
        self._computation = DefaultComputationStrategy()
        self._sampling = DefaultSamplingUnivariateStrategy()

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return self._type

    @property
    def analytical_computations(self) -> Computations:
        return self._analytical

    @property
    def support(self) -> Support | None:
        return self._support

    @property
    def computation_strategy(self) -> ComputationStrategy:
        return self._computation

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self._sampling
