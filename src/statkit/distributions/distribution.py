"""
Distribution Interfaces
=======================

The :class:`Distribution` protocol used by strategies and fitters, and the
capability protocols a concrete distribution class advertises:

- :class:`Continuous`: ``pdf`` / ``ln_pdf``;
- :class:`Discrete`: ``pmf`` / ``ln_pmf``;
- :class:`CumulativeDistribution`: ``cdf``, ``sf`` and ``inverse_cdf``;
- :class:`Bounded`: ``min`` / ``max`` of the support;
- :class:`Moments`: ``mean``, ``variance``, ``std_dev``, ``skewness``,
  ``entropy``;
- :class:`MultivariateMoments`: ``mean`` vector, ``covariance`` matrix,
  ``entropy``;
- :class:`Sampleable`: ``sample`` / ``draw`` from an injected random source.

All capabilities are runtime checkable, so ``isinstance(d, Discrete)`` tells
which queries ``d`` answers.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from statkit.distributions.computation import AnalyticalComputation, Method
    from statkit.distributions.sampling import Sample
    from statkit.distributions.strategies import ComputationStrategy, SamplingStrategy
    from statkit.distributions.support import Support
    from statkit.distributions.variates import RandomSource
    from statkit.types import DistributionType, GenericCharacteristicName


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies and fitters."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> Method[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name, **options)(value)


@runtime_checkable
class Continuous(Protocol):
    def pdf(self, x: Any) -> float: ...
    def ln_pdf(self, x: Any) -> float: ...


@runtime_checkable
class Discrete(Protocol):
    def pmf(self, x: Any) -> float: ...
    def ln_pmf(self, x: Any) -> float: ...


@runtime_checkable
class CumulativeDistribution(Protocol):
    def cdf(self, x: float) -> float: ...
    def sf(self, x: float) -> float: ...
    def inverse_cdf(self, p: float) -> float: ...


@runtime_checkable
class Bounded(Protocol):
    def min(self) -> float: ...
    def max(self) -> float: ...


@runtime_checkable
class Moments(Protocol):
    def mean(self) -> float: ...
    def variance(self) -> float: ...
    def std_dev(self) -> float: ...
    def skewness(self) -> float: ...
    def entropy(self) -> float: ...


@runtime_checkable
class MultivariateMoments(Protocol):
    def mean(self) -> Any: ...
    def covariance(self) -> Any: ...
    def entropy(self) -> float: ...


@runtime_checkable
class Sampleable(Protocol):
    def sample(self, n: int, rng: RandomSource) -> Sample: ...
    def draw(self, rng: RandomSource) -> Any: ...


__all__ = [
    "Distribution",
    "Continuous",
    "Discrete",
    "CumulativeDistribution",
    "Bounded",
    "Moments",
    "MultivariateMoments",
    "Sampleable",
]
