"""
Geometric distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.distributions.support import IntegerSupport
from statkit.errors import DegenerateDistributionError
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.prec import is_integer, safe_exp, xlog1py, xlogy
from statkit.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any


def configure_geometric_family() -> None:
    """
    Configure and register the Geometric distribution family.

    Number of Bernoulli(p) trials up to and including the first success,
    supported on ``{1, 2, ...}``: ``P(X = k) = (1-p)^(k-1) p``.
    """

    if ParametricFamilyRegister.contains(FamilyName.GEOMETRIC):
        return

    def _p(parameters: Parametrization) -> float:
        return cast(_Probability, parameters).p

    def ln_pmf(parameters: Parametrization, x: float) -> float:
        p = _p(parameters)
        if not is_integer(x) or x < 1:
            return -math.inf
        return xlog1py(x - 1.0, -p) + math.log(p)

    def pmf(parameters: Parametrization, x: float) -> float:
        return safe_exp(ln_pmf(parameters, x))

    def cdf(parameters: Parametrization, x: float) -> float:
        p = _p(parameters)
        if x < 1:
            return 0.0
        if p == 1.0 or math.isinf(x):
            return 1.0
        return -math.expm1(math.floor(x) * math.log1p(-p))

    def sf(parameters: Parametrization, x: float) -> float:
        p = _p(parameters)
        if x < 1:
            return 1.0
        if p == 1.0 or math.isinf(x):
            return 0.0
        return safe_exp(math.floor(x) * math.log1p(-p))

    def ppf(parameters: Parametrization, q: float) -> float:
        p = _p(parameters)
        if p == 1.0 or q == 0.0:
            return 1.0
        if q == 1.0:
            return math.inf
        k = max(1.0, math.ceil(math.log1p(-q) / math.log1p(-p)))
        # rounding in the closed form can land one point off the smallest k with cdf(k) >= q
        while k > 1.0 and cdf(parameters, k - 1.0) >= q:
            k -= 1.0
        while cdf(parameters, k) < q:
            k += 1.0
        return k

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return 1.0 / _p(parameters)

    def var_func(parameters: Parametrization, _: Any) -> float:
        p = _p(parameters)
        return (1.0 - p) / (p * p)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        p = _p(parameters)
        if p == 1.0:
            raise DegenerateDistributionError("skewness of Geometric with p = 1")
        return (2.0 - p) / math.sqrt(1.0 - p)

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        p = _p(parameters)
        if p == 1.0:
            raise DegenerateDistributionError("kurtosis of Geometric with p = 1")
        return 6.0 + p * p / (1.0 - p)

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        p = _p(parameters)
        q = 1.0 - p
        return -(xlogy(q, q) + xlogy(p, p)) / p

    def mode_func(_1: Parametrization, _2: Any) -> float:
        return 1.0

    def median_func(parameters: Parametrization, _: Any) -> float:
        p = _p(parameters)
        if p == 1.0:
            return 1.0
        return float(math.ceil(-math.log(2.0) / math.log1p(-p)))

    def _support(_: Parametrization) -> IntegerSupport:
        return IntegerSupport(1)

    Geometric = ParametricFamily(
        name=FamilyName.GEOMETRIC,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["probability"],
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
    )

    @parametrization(family=Geometric, name="probability")
    class _Probability(Parametrization):
        """
        Parameters
        ----------
        p : float
            Success probability of a trial
        """

        p: float

        @constraint(description="0 < p <= 1")
        def check_p_probability(self) -> bool:
            return 0.0 < self.p <= 1.0

    ParametricFamilyRegister.register(Geometric)


__all__ = ["configure_geometric_family"]
