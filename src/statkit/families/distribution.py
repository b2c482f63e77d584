"""
Concrete distribution instances with specific parameter values.

This module provides the distribution classes produced by parametric
families. A class is chosen by the distribution type of the family so that
each instance exposes exactly the capabilities of its kind: continuous
distributions have ``pdf``, discrete ones ``pmf``, multivariate ones no
``cdf``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

from statkit.distributions.distribution import Distribution
from statkit.distributions.fitters import check_probability
from statkit.distributions.support import ContinuousSupport, IntegerSupport
from statkit.families.registry import ParametricFamilyRegister
from statkit.types import CharacteristicName, EuclideanDistributionType, Kind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from statkit.distributions.computation import AnalyticalComputation, Method
    from statkit.distributions.sampling import Sample
    from statkit.distributions.strategies import ComputationStrategy, SamplingStrategy
    from statkit.distributions.support import Support
    from statkit.distributions.variates import RandomSource
    from statkit.families.parametric_family import ParametricFamily
    from statkit.families.parametrizations import Parametrization
    from statkit.types import DistributionType, GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Instances are created by :meth:`ParametricFamily.distribution` only, after
    the parameters passed validation, so an instance with invalid parameters
    never exists.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parametrization : Parametrization
        Parameter values as given by the caller.
    base_parameters : Parametrization
        The same values in the base parametrization of the family.
    _support : Support or None
        Support of this distribution.
    """

    family_name: str
    _distribution_type: DistributionType
    parametrization: Parametrization
    base_parameters: Parametrization
    _support: Support | None
    _analytical: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )
    _methods: dict[GenericCharacteristicName, Method[Any, Any]] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    @property
    def distribution_type(self) -> DistributionType:
        return self._distribution_type

    @property
    def support(self) -> Support | None:
        return self._support

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values of the parametrization used at construction."""
        return self.parametrization.parameters

    @property
    def parametrization_name(self) -> str:
        return self.parametrization.name

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Returns
        -------
        ParametricFamily
            The parametric family of this distribution.
        """
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Analytical characteristics bound to the parameters.

        Built on first access and cached per instance.
        """
        if not self._analytical:
            self._analytical.update(
                self.family.bind_analytical(self.parametrization)
            )
        return self._analytical

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy:
        return self.family.computation_strategy

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> Method[Any, Any]:
        """
        Resolve a characteristic through the computation strategy.

        Methods resolved without options are cached per instance, so a fitted
        conversion is built once per distribution.
        """
        if options:
            return self.computation_strategy.query_method(characteristic_name, self, **options)
        method = self._methods.get(characteristic_name)
        if method is None:
            method = self.computation_strategy.query_method(characteristic_name, self)
            self._methods[characteristic_name] = method
        return method

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name, **options)(value)

    def _scalar(self, characteristic_name: GenericCharacteristicName) -> float:
        return float(self.calculate_characteristic(characteristic_name, None))

    def sample(self, n: int, rng: RandomSource, **options: Any) -> Sample:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        n : int
            Number of draws.
        rng : RandomSource
            Source of uniform variates, e.g. ``numpy.random.default_rng(seed)``.
        **options : Any
            Additional options for sampling.

        Returns
        -------
        Sample
            Draws as rows of a ``(n, dimension)`` array.
        """
        return self.sampling_strategy.sample(n, self, rng, **options)

    def draw(self, rng: RandomSource) -> Any:
        """A single draw: a float for univariate, a vector for multivariate distributions."""
        row = self.sample(1, rng).array[0]
        if row.shape[0] == 1:
            return float(row[0])
        return row

    def mean(self) -> Any:
        return self.calculate_characteristic(CharacteristicName.MEAN, None)

    def entropy(self) -> float:
        """Differential (continuous) or Shannon (discrete) entropy in nats."""
        return self._scalar(CharacteristicName.ENTROPY)

    def mode(self) -> Any:
        return self.calculate_characteristic(CharacteristicName.MODE, None)


@dataclass(frozen=True, slots=True)
class _UnivariateDistribution(ParametricFamilyDistribution):
    """Queries shared by univariate distributions of both kinds."""

    def mean(self) -> float:
        return self._scalar(CharacteristicName.MEAN)

    def variance(self) -> float:
        return self._scalar(CharacteristicName.VAR)

    def std_dev(self) -> float:
        return self._scalar(CharacteristicName.STD_DEV)

    def skewness(self) -> float:
        return self._scalar(CharacteristicName.SKEW)

    def kurtosis(self) -> float:
        """Excess kurtosis."""
        return self._scalar(CharacteristicName.KURT)

    def median(self) -> float:
        return self._scalar(CharacteristicName.MEDIAN)

    def mode(self) -> float:
        return self._scalar(CharacteristicName.MODE)

    def cdf(self, x: float) -> float:
        return float(self.calculate_characteristic(CharacteristicName.CDF, x))

    def sf(self, x: float) -> float:
        """Survival function ``1 - cdf(x)``."""
        return float(self.calculate_characteristic(CharacteristicName.SF, x))

    def inverse_cdf(self, p: float) -> float:
        """
        Quantile function; NaN for a NaN ``p``.

        Raises
        ------
        InvalidArgumentError
            If ``p`` is not in ``[0, 1]``.
        """
        if math.isnan(p):
            return math.nan
        check_probability(p)
        return float(self.calculate_characteristic(CharacteristicName.PPF, p))

    ppf = inverse_cdf


@dataclass(frozen=True, slots=True)
class UnivariateContinuousDistribution(_UnivariateDistribution):
    def pdf(self, x: float) -> float:
        return float(self.calculate_characteristic(CharacteristicName.PDF, x))

    def ln_pdf(self, x: float) -> float:
        return float(self.calculate_characteristic(CharacteristicName.LN_PDF, x))

    def min(self) -> float:
        support = self.support
        return float(support.left) if isinstance(support, ContinuousSupport) else -math.inf

    def max(self) -> float:
        support = self.support
        return float(support.right) if isinstance(support, ContinuousSupport) else math.inf


@dataclass(frozen=True, slots=True)
class UnivariateDiscreteDistribution(_UnivariateDistribution):
    def pmf(self, x: float) -> float:
        return float(self.calculate_characteristic(CharacteristicName.PMF, x))

    def ln_pmf(self, x: float) -> float:
        return float(self.calculate_characteristic(CharacteristicName.LN_PMF, x))

    def min(self) -> float:
        support = self.support
        return float(support.first()) if isinstance(support, IntegerSupport) else -math.inf

    def max(self) -> float:
        support = self.support
        if not isinstance(support, IntegerSupport):
            return math.inf
        last = support.last()
        return math.inf if last is None else float(last)


@dataclass(frozen=True, slots=True)
class _MultivariateDistribution(ParametricFamilyDistribution):
    @property
    def dimension(self) -> int:
        return int(getattr(self.distribution_type, "dimension", 1))

    def mean(self) -> np.ndarray:
        return np.asarray(self.calculate_characteristic(CharacteristicName.MEAN, None), dtype=float)

    def covariance(self) -> np.ndarray:
        return np.asarray(self.calculate_characteristic(CharacteristicName.COV, None), dtype=float)

    def mode(self) -> np.ndarray:
        return np.asarray(self.calculate_characteristic(CharacteristicName.MODE, None), dtype=float)


@dataclass(frozen=True, slots=True)
class MultivariateContinuousDistribution(_MultivariateDistribution):
    def pdf(self, x: Any) -> float:
        return float(self.calculate_characteristic(CharacteristicName.PDF, x))

    def ln_pdf(self, x: Any) -> float:
        return float(self.calculate_characteristic(CharacteristicName.LN_PDF, x))


@dataclass(frozen=True, slots=True)
class MultivariateDiscreteDistribution(_MultivariateDistribution):
    def pmf(self, x: Any) -> float:
        return float(self.calculate_characteristic(CharacteristicName.PMF, x))

    def ln_pmf(self, x: Any) -> float:
        return float(self.calculate_characteristic(CharacteristicName.LN_PMF, x))


def distribution_class_for(
    distribution_type: DistributionType,
) -> type[ParametricFamilyDistribution]:
    """Pick the distribution class exposing the capabilities of ``distribution_type``."""
    if not isinstance(distribution_type, EuclideanDistributionType):
        return ParametricFamilyDistribution
    continuous = distribution_type.kind == Kind.CONTINUOUS
    if distribution_type.is_univariate:
        return UnivariateContinuousDistribution if continuous else UnivariateDiscreteDistribution
    return MultivariateContinuousDistribution if continuous else MultivariateDiscreteDistribution


__all__ = [
    "ParametricFamilyDistribution",
    "UnivariateContinuousDistribution",
    "UnivariateDiscreteDistribution",
    "MultivariateContinuousDistribution",
    "MultivariateDiscreteDistribution",
    "distribution_class_for",
]
