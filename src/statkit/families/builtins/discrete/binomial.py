"""
Binomial and Bernoulli distribution family implementations.

Bernoulli is the single-trial binomial; both share the pmf, the incomplete
beta CDF and the moment formulas defined here.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.distributions.support import IntegerSupport
from statkit.distributions.variates import binomial as binomial_variate
from statkit.distributions.variates import uniform
from statkit.errors import DegenerateDistributionError
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.prec import is_integer, safe_exp, xlog1py, xlogy
from statkit.special import beta_reg, ln_binomial
from statkit.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource


def _ln_pmf(n: int, p: float, x: float) -> float:
    if not is_integer(x) or x < 0 or x > n:
        return -math.inf
    k = int(x)
    return ln_binomial(n, k) + xlogy(k, p) + xlog1py(n - k, -p)


def _cdf(n: int, p: float, x: float) -> float:
    if x < 0:
        return 0.0
    if x >= n:
        return 1.0
    k = math.floor(x)
    return beta_reg(n - k, k + 1, 1.0 - p)


def _sf(n: int, p: float, x: float) -> float:
    if x < 0:
        return 1.0
    if x >= n:
        return 0.0
    k = math.floor(x)
    return beta_reg(k + 1, n - k, p)


def _variance(n: int, p: float) -> float:
    return n * p * (1.0 - p)


def _non_degenerate_variance(n: int, p: float, quantity: str) -> float:
    var = _variance(n, p)
    if var == 0.0:
        raise DegenerateDistributionError(f"{quantity} of a point mass (n = {n}, p = {p})")
    return var


def _skewness(n: int, p: float) -> float:
    return (1.0 - 2.0 * p) / math.sqrt(_non_degenerate_variance(n, p, "skewness"))


def _kurtosis(n: int, p: float) -> float:
    var = _non_degenerate_variance(n, p, "kurtosis")
    return (1.0 - 6.0 * p * (1.0 - p)) / var


def _entropy(n: int, p: float) -> float:
    if p == 0.0 or p == 1.0:
        return 0.0
    total = 0.0
    for k in range(n + 1):
        ln_pk = _ln_pmf(n, p, float(k))
        total -= math.exp(ln_pk) * ln_pk
    return total


def _mode(n: int, p: float) -> float:
    return float(min(math.floor((n + 1) * p), n))


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    BINOMIAL_DOC = """
    Binomial distribution: the number of successes in n independent trials
    with success probability p.

    Probability mass function:
        P(X = k) = C(n, k) p^k (1-p)^(n-k),  k = 0..n

    The CDF is expressed through the regularized incomplete beta function:
        P(X ≤ k) = I_{1-p}(n - k, k + 1)

    p = 0 and p = 1 are allowed and give point masses at 0 and n.
    """

    def _params(parameters: Parametrization) -> tuple[int, float]:
        parameters = cast(_Standard, parameters)
        return int(parameters.n), parameters.p

    def pmf(parameters: Parametrization, x: float) -> float:
        return safe_exp(_ln_pmf(*_params(parameters), x))

    def ln_pmf(parameters: Parametrization, x: float) -> float:
        return _ln_pmf(*_params(parameters), x)

    def cdf(parameters: Parametrization, x: float) -> float:
        return _cdf(*_params(parameters), x)

    def sf(parameters: Parametrization, x: float) -> float:
        return _sf(*_params(parameters), x)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        n, p = _params(parameters)
        return n * p

    def var_func(parameters: Parametrization, _: Any) -> float:
        return _variance(*_params(parameters))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        return _skewness(*_params(parameters))

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        return _kurtosis(*_params(parameters))

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        return _entropy(*_params(parameters))

    def mode_func(parameters: Parametrization, _: Any) -> float:
        return _mode(*_params(parameters))

    def median_func(parameters: Parametrization, _: Any) -> float:
        n, p = _params(parameters)
        return float(math.floor(n * p))

    def _support(parameters: Parametrization) -> IntegerSupport:
        return IntegerSupport(0, _params(parameters)[0])

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        return float(binomial_variate(*_params(parameters), rng))

    Binomial = ParametricFamily(
        name=FamilyName.BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
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
    Binomial.__doc__ = BINOMIAL_DOC

    @parametrization(family=Binomial, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        n : int
            Number of trials
        p : float
            Success probability of a trial
        """

        n: int
        p: float

        @constraint(description="n is a non-negative integer")
        def check_n_non_negative_integer(self) -> bool:
            return is_integer(self.n) and self.n >= 0

        @constraint(description="0 <= p <= 1")
        def check_p_probability(self) -> bool:
            return 0.0 <= self.p <= 1.0

    ParametricFamilyRegister.register(Binomial)


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.

    A single trial with success probability p: ``P(X = 1) = p``,
    ``P(X = 0) = 1 - p``.
    """

    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return

    def _p(parameters: Parametrization) -> float:
        return cast(_Standard, parameters).p

    def pmf(parameters: Parametrization, x: float) -> float:
        return safe_exp(_ln_pmf(1, _p(parameters), x))

    def ln_pmf(parameters: Parametrization, x: float) -> float:
        return _ln_pmf(1, _p(parameters), x)

    def cdf(parameters: Parametrization, x: float) -> float:
        if x < 0:
            return 0.0
        return 1.0 - _p(parameters) if x < 1 else 1.0

    def sf(parameters: Parametrization, x: float) -> float:
        if x < 0:
            return 1.0
        return _p(parameters) if x < 1 else 0.0

    def ppf(parameters: Parametrization, q: float) -> float:
        return 0.0 if q <= 1.0 - _p(parameters) else 1.0

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return _p(parameters)

    def var_func(parameters: Parametrization, _: Any) -> float:
        return _variance(1, _p(parameters))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        return _skewness(1, _p(parameters))

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        return _kurtosis(1, _p(parameters))

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        p = _p(parameters)
        return -(xlogy(p, p) + xlog1py(1.0 - p, -p))

    def mode_func(parameters: Parametrization, _: Any) -> float:
        return 1.0 if _p(parameters) > 0.5 else 0.0

    def median_func(parameters: Parametrization, _: Any) -> float:
        return float(math.floor(_p(parameters)))

    def _support(_: Parametrization) -> IntegerSupport:
        return IntegerSupport(0, 1)

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        return 1.0 if uniform(rng) < _p(parameters) else 0.0

    Bernoulli = ParametricFamily(
        name=FamilyName.BERNOULLI,
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

    @parametrization(family=Bernoulli, name="standard")
    class _Standard(Parametrization):
        """
        Parameters
        ----------
        p : float
            Success probability
        """

        p: float

        @constraint(description="0 <= p <= 1")
        def check_p_probability(self) -> bool:
            return 0.0 <= self.p <= 1.0

    ParametricFamilyRegister.register(Bernoulli)


__all__ = ["configure_binomial_family", "configure_bernoulli_family"]
