"""
Poisson distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.consts import LN_SQRT_2PIE
from statkit.distributions.support import IntegerSupport
from statkit.distributions.variates import poisson as poisson_variate
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.prec import is_integer, safe_exp
from statkit.special import gamma_lr, gamma_ur, ln_gamma
from statkit.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource

_ENTROPY_ASYMPTOTIC_RATE = 1e5


def _ln_pmf(lam: float, x: float) -> float:
    if not is_integer(x) or x < 0:
        return -math.inf
    return x * math.log(lam) - lam - ln_gamma(x + 1.0)


def _entropy(lam: float) -> float:
    if lam > _ENTROPY_ASYMPTOTIC_RATE:
        return (
            LN_SQRT_2PIE
            + 0.5 * math.log(lam)
            - 1.0 / (12.0 * lam)
            - 1.0 / (24.0 * lam * lam)
            - 19.0 / (360.0 * lam**3)
        )
    # mass outside mean ± 40σ is negligible in double precision
    spread = 40.0 * math.sqrt(lam) + 40.0
    lo = max(0, math.floor(lam - spread))
    hi = math.ceil(lam + spread)
    total = 0.0
    for k in range(lo, hi + 1):
        ln_pk = _ln_pmf(lam, float(k))
        total -= math.exp(ln_pk) * ln_pk
    return total


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution with rate λ.

    Probability mass function:
        P(X = k) = λ^k e^(-λ) / k!,  k = 0, 1, 2, ...

    Cumulative distribution function:
        P(X ≤ k) = Q(k + 1, λ)

    where Q is the regularized upper incomplete gamma function.
    """

    def _lam(parameters: Parametrization) -> float:
        return cast(_Rate, parameters).lambda_

    def pmf(parameters: Parametrization, x: float) -> float:
        return safe_exp(_ln_pmf(_lam(parameters), x))

    def ln_pmf(parameters: Parametrization, x: float) -> float:
        return _ln_pmf(_lam(parameters), x)

    def cdf(parameters: Parametrization, x: float) -> float:
        if x < 0:
            return 0.0
        if math.isinf(x):
            return 1.0
        return gamma_ur(math.floor(x) + 1.0, _lam(parameters))

    def sf(parameters: Parametrization, x: float) -> float:
        if x < 0:
            return 1.0
        if math.isinf(x):
            return 0.0
        return gamma_lr(math.floor(x) + 1.0, _lam(parameters))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return _lam(parameters)

    def var_func(parameters: Parametrization, _: Any) -> float:
        return _lam(parameters)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        return 1.0 / math.sqrt(_lam(parameters))

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        return 1.0 / _lam(parameters)

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        return _entropy(_lam(parameters))

    def mode_func(parameters: Parametrization, _: Any) -> float:
        return float(math.floor(_lam(parameters)))

    def median_func(parameters: Parametrization, _: Any) -> float:
        lam = _lam(parameters)
        return float(math.floor(lam + 1.0 / 3.0 - 0.02 / lam))

    def _support(_: Parametrization) -> IntegerSupport:
        return IntegerSupport(0)

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        return float(poisson_variate(_lam(parameters), rng))

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["rate"],
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
            CharacteristicName.MEDIAN: median_func,
        },
        support_by_parametrization=_support,
        sampler=_sampler,
    )
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="rate")
    class _Rate(Parametrization):
        """
        Parameters
        ----------
        lambda_ : float
            Rate λ (mean number of events)
        """

        lambda_: float

        @constraint(description="0 < lambda_ < inf")
        def check_lambda_positive(self) -> bool:
            return 0.0 < self.lambda_ < math.inf

    ParametricFamilyRegister.register(Poisson)


__all__ = ["configure_poisson_family"]
