"""
Parametric Families
===================

A :class:`ParametricFamily` bundles everything the distributions of one law
share: the ordered parametrizations (the first is the base), the analytical
characteristics written against them, the support, the variate generator and
the computation strategy used for everything else.

Families are the only factories of distributions; a parameter set reaches a
distribution instance only after passing the constraints of its
parametrization.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from functools import partial, wraps
from typing import TYPE_CHECKING, cast, dataclass_transform

from statkit.distributions.computation import AnalyticalComputation
from statkit.distributions.strategies import (
    AlgorithmSamplingStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
)
from statkit.families.distribution import distribution_class_for
from statkit.types import CharacteristicName, DistributionType, EuclideanDistributionType

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any

    from statkit.distributions.distribution import Distribution
    from statkit.distributions.strategies import ComputationStrategy, SamplingStrategy
    from statkit.distributions.support import Support
    from statkit.distributions.variates import RandomSource
    from statkit.families.distribution import ParametricFamilyDistribution
    from statkit.families.parametrizations import Parametrization
    from statkit.types import GenericCharacteristicName, ParametrizationName

    type ParametrizedFunction = Callable[[Parametrization, Any], Any]
    type CharacteristicForms = dict[ParametrizationName, ParametrizedFunction]
    type SupportResolver = Callable[[Parametrization], Support | None]
    type Sampler = Callable[[Parametrization, RandomSource], Any]


# Point characteristics of univariate laws: a NaN argument gives a NaN value.
_POINTWISE = frozenset(
    {
        CharacteristicName.PDF,
        CharacteristicName.LN_PDF,
        CharacteristicName.PMF,
        CharacteristicName.LN_PMF,
        CharacteristicName.CDF,
        CharacteristicName.SF,
        CharacteristicName.PPF,
    }
)


def _no_support(_: Parametrization) -> None:
    return None


def _nan_propagating(form: ParametrizedFunction) -> ParametrizedFunction:
    @wraps(form)
    def _form(parameters: Parametrization, x: Any, *args: Any, **kwargs: Any) -> Any:
        if isinstance(x, float) and math.isnan(x):
            return math.nan
        return form(parameters, x, *args, **kwargs)

    return _form


def _sampling_from(sampler: Sampler) -> AlgorithmSamplingStrategy:
    """Adapt a ``sampler(base_parameters, rng)`` to the sampling strategy interface."""

    def _draw(distr: Distribution, rng: RandomSource) -> Any:
        family_distr = cast("ParametricFamilyDistribution", distr)
        return sampler(family_distr.base_parameters, rng)

    return AlgorithmSamplingStrategy(_draw)


class ParametricFamily:
    """
    A family of distributions with one or more parametrizations.

    Parameters
    ----------
    name : str
        Family name, normally a :class:`~statkit.types.FamilyName`.
    distr_type : DistributionType or Callable[[Parametrization], DistributionType]
        Fixed distribution type, or a function of the base parameters for
        families whose dimension depends on them.
    distr_parametrizations : list[str]
        Parametrization names; the first one is the base parametrization.
    distr_characteristics : dict
        ``{characteristic: fn}`` or ``{characteristic: {parametrization: fn}}``
        with ``fn(parameters, x)``. A bare function is written against the
        base parametrization.
    sampling_strategy : SamplingStrategy, optional
        Used when no ``sampler`` is given; inverse transform by default.
    computation_strategy : ComputationStrategy, optional
        Resolves characteristics missing from ``distr_characteristics``.
    support_by_parametrization : Callable, optional
        ``support(base_parameters)``.
    sampler : Callable[[Parametrization, RandomSource], Any], optional
        Dedicated variate generator over the base parameters.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType | Callable[[Parametrization], DistributionType],
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: Mapping[
            GenericCharacteristicName, CharacteristicForms | ParametrizedFunction
        ],
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy | None = None,
        support_by_parametrization: SupportResolver | None = None,
        sampler: Sampler | None = None,
    ):
        if not distr_parametrizations:
            raise ValueError(f"Family {name} declares no parametrizations.")

        self._name = name
        self._distr_type = distr_type
        self.parametrization_names: list[ParametrizationName] = list(distr_parametrizations)
        self.base_parametrization_name: ParametrizationName = distr_parametrizations[0]
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.computation_strategy: ComputationStrategy = (
            computation_strategy or DefaultComputationStrategy()
        )
        self.sampling_strategy: SamplingStrategy = (
            _sampling_from(sampler)
            if sampler is not None
            else sampling_strategy or DefaultSamplingUnivariateStrategy()
        )
        self._support_resolver: SupportResolver = support_by_parametrization or _no_support

        self.distr_characteristics: dict[GenericCharacteristicName, CharacteristicForms] = {
            characteristic: (
                dict(forms)
                if isinstance(forms, dict)
                else {self.base_parametrization_name: forms}
            )
            for characteristic, forms in distr_characteristics.items()
        }
        self._analytical_plan: dict[
            ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]
        ] = {pname: self._plan_for(pname) for pname in self.parametrization_names}

    def _plan_for(
        self, pname: ParametrizationName
    ) -> dict[GenericCharacteristicName, ParametrizationName]:
        """Provider of each characteristic for ``pname``: its own form first, then the base."""
        plan: dict[GenericCharacteristicName, ParametrizationName] = {}
        for characteristic, forms in self.distr_characteristics.items():
            for provider in (pname, self.base_parametrization_name):
                if provider in forms:
                    plan[characteristic] = provider
                    break
        return plan

    def __repr__(self) -> str:
        return f"ParametricFamily({self._name!r}, parametrizations={self.parametrization_names})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        The base parametrization class.

        Raises
        ------
        KeyError
            If the base parametrization is not registered yet.
        """
        return self.get_parametrization(self.base_parametrization_name)

    @property
    def _univariate(self) -> bool:
        distr_type = self._distr_type
        return isinstance(distr_type, EuclideanDistributionType) and distr_type.is_univariate

    @property
    def support_resolver(self) -> SupportResolver:
        return self._support_resolver

    def distribution_type_for(self, base_parameters: Parametrization) -> DistributionType:
        if isinstance(self._distr_type, DistributionType):
            return self._distr_type
        return self._distr_type(base_parameters)

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Attach a parametrization class declared by the family.

        Raises
        ------
        ValueError
            If the name is unknown to the family or already registered.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family {self.name}.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Parametrization class registered under ``name``.

        Raises
        ------
        KeyError
            If nothing is registered under ``name``.
        """
        if name not in self._parametrizations:
            raise KeyError(f"Family {self.name} has no parametrization '{name}'.")
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Express ``parameters`` in the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def bind_analytical(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Bind the analytical characteristics of the family to ``parameters``.

        Forms written against the base parametrization receive the converted
        parameters; the conversion happens at most once.
        """
        plan = self._analytical_plan.get(parameters.name, {})
        base_params = None
        bound: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {}
        for characteristic, provider in plan.items():
            if provider == parameters.name:
                provider_params = parameters
            else:
                if base_params is None:
                    base_params = self.to_base(parameters)
                provider_params = base_params
            form = self.distr_characteristics[characteristic][provider]
            if characteristic in _POINTWISE and self._univariate:
                form = _nan_propagating(form)
            bound[characteristic] = AnalyticalComputation(
                target=characteristic, func=partial(form, provider_params)
            )
        return bound

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a validated distribution of the family.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization the values are given in; the base one by default.
        **parameters_values
            Parameter values by field name.

        Raises
        ------
        KeyError
            If the parametrization name is not registered.
        TypeError
            If the values do not match the parametrization fields.
        InvalidParameterError
            If a constraint of the parametrization does not hold.
        """
        parametrization_class = self.get_parametrization(
            parametrization_name or self.base_parametrization_name
        )
        parameters = parametrization_class(**parameters_values)
        parameters.validate()

        base_parameters = self.to_base(parameters)
        distribution_type = self.distribution_type_for(base_parameters)
        return distribution_class_for(distribution_type)(
            family_name=self.name,
            _distribution_type=distribution_type,
            parametrization=parameters,
            base_parameters=base_parameters,
            _support=self._support_resolver(base_parameters),
        )

    __call__ = distribution

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """Class decorator registering a parametrization of this family."""
        from statkit.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)


__all__ = [
    "ParametricFamily",
]
