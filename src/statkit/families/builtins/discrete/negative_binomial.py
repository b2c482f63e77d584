"""
Negative binomial distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.distributions.support import IntegerSupport
from statkit.distributions.variates import poisson, standard_gamma
from statkit.errors import DegenerateDistributionError
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.prec import is_integer, safe_exp, xlog1py
from statkit.special import beta_reg, ln_gamma
from statkit.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource


def configure_negative_binomial_family() -> None:
    """
    Configure and register the NegativeBinomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NEGATIVE_BINOMIAL):
        return

    NEGATIVE_BINOMIAL_DOC = """
    Negative binomial distribution: the number of failures before the r-th
    success in Bernoulli(p) trials. r may be any positive real.

    Probability mass function:
        P(X = k) = Γ(k + r) / (k! Γ(r)) p^r (1-p)^k,  k = 0, 1, 2, ...

    Cumulative distribution function:
        P(X ≤ k) = I_p(r, k + 1)
    """

    def _params(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_Standard, parameters)
        return parameters.r, parameters.p

    def ln_pmf(parameters: Parametrization, x: float) -> float:
        r, p = _params(parameters)
        if not is_integer(x) or x < 0:
            return -math.inf
        if p == 1.0:
            return 0.0 if x == 0 else -math.inf
        return (
            ln_gamma(x + r) - ln_gamma(r) - ln_gamma(x + 1.0)
            + r * math.log(p)
            + xlog1py(x, -p)
        )

    def pmf(parameters: Parametrization, x: float) -> float:
        return safe_exp(ln_pmf(parameters, x))

    def cdf(parameters: Parametrization, x: float) -> float:
        r, p = _params(parameters)
        if x < 0:
            return 0.0
        if p == 1.0 or math.isinf(x):
            return 1.0
        return beta_reg(r, math.floor(x) + 1.0, p)

    def sf(parameters: Parametrization, x: float) -> float:
        r, p = _params(parameters)
        if x < 0:
            return 1.0
        if p == 1.0 or math.isinf(x):
            return 0.0
        return beta_reg(math.floor(x) + 1.0, r, 1.0 - p)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        r, p = _params(parameters)
        return r * (1.0 - p) / p

    def var_func(parameters: Parametrization, _: Any) -> float:
        r, p = _params(parameters)
        return r * (1.0 - p) / (p * p)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        r, p = _params(parameters)
        if p == 1.0:
            raise DegenerateDistributionError("skewness of NegativeBinomial with p = 1")
        return (2.0 - p) / math.sqrt(r * (1.0 - p))

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        r, p = _params(parameters)
        if p == 1.0:
            raise DegenerateDistributionError("kurtosis of NegativeBinomial with p = 1")
        return 6.0 / r + p * p / (r * (1.0 - p))

    def mode_func(parameters: Parametrization, _: Any) -> float:
        r, p = _params(parameters)
        if r <= 1.0:
            return 0.0
        return float(math.floor((r - 1.0) * (1.0 - p) / p))

    def _support(_: Parametrization) -> IntegerSupport:
        return IntegerSupport(0)

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        # gamma-Poisson mixture
        r, p = _params(parameters)
        if p == 1.0:
            return 0.0
        lam = standard_gamma(r, rng) * (1.0 - p) / p
        if lam <= 0.0:
            return 0.0
        return float(poisson(lam, rng))

    NegativeBinomial = ParametricFamily(
        name=FamilyName.NEGATIVE_BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["successesProbability"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.LN_PMF: ln_pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.MODE: mode_func,
        },
        support_by_parametrization=_support,
        sampler=_sampler,
    )
    NegativeBinomial.__doc__ = NEGATIVE_BINOMIAL_DOC

    @parametrization(family=NegativeBinomial, name="successesProbability")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        r : float
            Number of successes (real-valued)
        p : float
            Success probability of a trial
        """

        r: float
        p: float

        @constraint(description="0 < r < inf")
        def check_r_positive(self) -> bool:
            return 0.0 < self.r < math.inf

        @constraint(description="0 < p <= 1")
        def check_p_probability(self) -> bool:
            return 0.0 < self.p <= 1.0

    ParametricFamilyRegister.register(NegativeBinomial)


__all__ = ["configure_negative_binomial_family"]
