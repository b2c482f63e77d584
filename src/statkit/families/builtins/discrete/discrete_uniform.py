"""
Discrete uniform distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.distributions.support import IntegerSupport
from statkit.distributions.variates import uniform
from statkit.errors import DegenerateDistributionError
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.prec import is_integer
from statkit.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource


def configure_discrete_uniform_family() -> None:
    """
    Configure and register the DiscreteUniform distribution family.

    Equal mass ``1/n`` on each integer of ``[lower_bound, upper_bound]``,
    ``n = upper_bound - lower_bound + 1``.
    """

    if ParametricFamilyRegister.contains(FamilyName.DISCRETE_UNIFORM):
        return

    def _params(parameters: Parametrization) -> tuple[int, int]:
        parameters = cast(_Standard, parameters)
        return int(parameters.lower_bound), int(parameters.upper_bound)

    def _count(parameters: Parametrization) -> int:
        lo, hi = _params(parameters)
        return hi - lo + 1

    def pmf(parameters: Parametrization, x: float) -> float:
        lo, hi = _params(parameters)
        if not is_integer(x) or x < lo or x > hi:
            return 0.0
        return 1.0 / _count(parameters)

    def ln_pmf(parameters: Parametrization, x: float) -> float:
        lo, hi = _params(parameters)
        if not is_integer(x) or x < lo or x > hi:
            return -math.inf
        return -math.log(_count(parameters))

    def cdf(parameters: Parametrization, x: float) -> float:
        lo, hi = _params(parameters)
        if x < lo:
            return 0.0
        if x >= hi:
            return 1.0
        return (math.floor(x) - lo + 1.0) / _count(parameters)

    def sf(parameters: Parametrization, x: float) -> float:
        lo, hi = _params(parameters)
        if x < lo:
            return 1.0
        if x >= hi:
            return 0.0
        return (hi - math.floor(x)) / _count(parameters)

    def ppf(parameters: Parametrization, q: float) -> float:
        lo, hi = _params(parameters)
        k = lo - 1 + math.ceil(q * _count(parameters))
        return float(min(max(k, lo), hi))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        lo, hi = _params(parameters)
        return 0.5 * (lo + hi)

    def var_func(parameters: Parametrization, _: Any) -> float:
        n = _count(parameters)
        return (n * n - 1.0) / 12.0

    def skew_func(parameters: Parametrization, _: Any) -> float:
        if _count(parameters) == 1:
            raise DegenerateDistributionError("skewness of a single-point DiscreteUniform")
        return 0.0

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        n = _count(parameters)
        if n == 1:
            raise DegenerateDistributionError("kurtosis of a single-point DiscreteUniform")
        return -6.0 * (n * n + 1.0) / (5.0 * (n * n - 1.0))

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        return math.log(_count(parameters))

    def mode_func(parameters: Parametrization, _: Any) -> float:
        lo, hi = _params(parameters)
        return float(math.floor(0.5 * (lo + hi)))

    def median_func(parameters: Parametrization, _: Any) -> float:
        lo, hi = _params(parameters)
        return 0.5 * (lo + hi)

    def _support(parameters: Parametrization) -> IntegerSupport:
        return IntegerSupport(*_params(parameters))

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        lo, _ = _params(parameters)
        return float(lo + math.floor(uniform(rng) * _count(parameters)))

    DiscreteUniform = ParametricFamily(
        name=FamilyName.DISCRETE_UNIFORM,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.LN_PMF: ln_pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.ENTROPY: entropy_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.MEDIAN: median_func,
        },
        support_by_parametrization=_support,
        sampler=_sampler,
    )

    @parametrization(family=DiscreteUniform, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        lower_bound : int
            Smallest support point
        upper_bound : int
            Largest support point
        """

        lower_bound: int
        upper_bound: int

        @constraint(description="lower_bound and upper_bound are integers")
        def check_bounds_integer(self) -> bool:
            return is_integer(self.lower_bound) and is_integer(self.upper_bound)

        @constraint(description="lower_bound <= upper_bound")
        def check_lower_le_upper(self) -> bool:
            return self.lower_bound <= self.upper_bound

    ParametricFamilyRegister.register(DiscreteUniform)


__all__ = ["configure_discrete_uniform_family"]
