"""
Hypergeometric distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.distributions.support import IntegerSupport
from statkit.errors import DegenerateDistributionError, UndefinedQuantityError
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.prec import is_integer, safe_exp
from statkit.special import ln_binomial
from statkit.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any


def configure_hypergeometric_family() -> None:
    """
    Configure and register the Hypergeometric distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.HYPERGEOMETRIC):
        return

    HYPERGEOMETRIC_DOC = """
    Hypergeometric distribution: the number of successes in n draws without
    replacement from a population of N items of which K are successes.

    Probability mass function:
        P(X = k) = C(K, k) C(N - K, n - k) / C(N, n)

    for max(0, n + K - N) ≤ k ≤ min(K, n).
    """

    def _params(parameters: Parametrization) -> tuple[int, int, int]:
        parameters = cast(_Standard, parameters)
        return int(parameters.population), int(parameters.successes), int(parameters.draws)

    def _bounds(population: int, successes: int, draws: int) -> tuple[int, int]:
        return max(0, draws + successes - population), min(successes, draws)

    def _ln_pmf(population: int, successes: int, draws: int, k: int) -> float:
        return (
            ln_binomial(successes, k)
            + ln_binomial(population - successes, draws - k)
            - ln_binomial(population, draws)
        )

    def ln_pmf(parameters: Parametrization, x: float) -> float:
        N, K, n = _params(parameters)
        lo, hi = _bounds(N, K, n)
        if not is_integer(x) or x < lo or x > hi:
            return -math.inf
        return _ln_pmf(N, K, n, int(x))

    def pmf(parameters: Parametrization, x: float) -> float:
        return safe_exp(ln_pmf(parameters, x))

    def cdf(parameters: Parametrization, x: float) -> float:
        N, K, n = _params(parameters)
        lo, hi = _bounds(N, K, n)
        if x < lo:
            return 0.0
        if x >= hi:
            return 1.0
        total = math.fsum(safe_exp(_ln_pmf(N, K, n, k)) for k in range(lo, math.floor(x) + 1))
        return min(total, 1.0)

    def sf(parameters: Parametrization, x: float) -> float:
        N, K, n = _params(parameters)
        lo, hi = _bounds(N, K, n)
        if x < lo:
            return 1.0
        if x >= hi:
            return 0.0
        total = math.fsum(safe_exp(_ln_pmf(N, K, n, k)) for k in range(math.floor(x) + 1, hi + 1))
        return min(total, 1.0)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        N, K, n = _params(parameters)
        return n * K / N

    def _variance(N: int, K: int, n: int) -> float:
        if N <= 1:
            return 0.0
        return n * K * (N - K) * (N - n) / (N * N * (N - 1.0))

    def var_func(parameters: Parametrization, _: Any) -> float:
        return _variance(*_params(parameters))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        N, K, n = _params(parameters)
        if _variance(N, K, n) == 0.0:
            raise DegenerateDistributionError("skewness of a point-mass Hypergeometric")
        if N <= 2:
            raise UndefinedQuantityError("skewness of Hypergeometric requires population > 2")
        return (
            (N - 2.0 * K)
            * math.sqrt(N - 1.0)
            * (N - 2.0 * n)
            / (math.sqrt(n * K * (N - K) * (N - n)) * (N - 2.0))
        )

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        N, K, n = _params(parameters)
        if _variance(N, K, n) == 0.0:
            raise DegenerateDistributionError("kurtosis of a point-mass Hypergeometric")
        if N <= 3:
            raise UndefinedQuantityError("kurtosis of Hypergeometric requires population > 3")
        spread = n * K * (N - K) * (N - n)
        num = (N - 1.0) * N * N * (N * (N + 1.0) - 6.0 * K * (N - K) - 6.0 * n * (N - n))
        num += 6.0 * spread * (5.0 * N - 6.0)
        return num / (spread * (N - 2.0) * (N - 3.0))

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        N, K, n = _params(parameters)
        lo, hi = _bounds(N, K, n)
        total = 0.0
        for k in range(lo, hi + 1):
            ln_pk = _ln_pmf(N, K, n, k)
            total -= safe_exp(ln_pk) * ln_pk
        return total

    def mode_func(parameters: Parametrization, _: Any) -> float:
        N, K, n = _params(parameters)
        return float(math.floor((n + 1.0) * (K + 1.0) / (N + 2.0)))

    def _support(parameters: Parametrization) -> IntegerSupport:
        return IntegerSupport(*_bounds(*_params(parameters)))

    Hypergeometric = ParametricFamily(
        name=FamilyName.HYPERGEOMETRIC,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["populationSuccessesDraws"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.LN_PMF: ln_pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.ENTROPY: entropy_func,
            CharacteristicName.MODE: mode_func,
        },
        support_by_parametrization=_support,
    )
    Hypergeometric.__doc__ = HYPERGEOMETRIC_DOC

    @parametrization(family=Hypergeometric, name="populationSuccessesDraws")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        population : int
            Population size N
        successes : int
            Number of success items K in the population
        draws : int
            Number of draws n
        """

        population: int
        successes: int
        draws: int

        @constraint(description="population is a positive integer")
        def check_population_positive_integer(self) -> bool:
            return is_integer(self.population) and self.population >= 1

        @constraint(description="successes is an integer with 0 <= successes <= population")
        def check_successes_in_range(self) -> bool:
            return is_integer(self.successes) and 0 <= self.successes <= self.population

        @constraint(description="draws is an integer with 0 <= draws <= population")
        def check_draws_in_range(self) -> bool:
            return is_integer(self.draws) and 0 <= self.draws <= self.population

    ParametricFamilyRegister.register(Hypergeometric)


__all__ = ["configure_hypergeometric_family"]
