"""
Chi distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.consts import LN_2, SQRT_2
from statkit.distributions.support import ContinuousSupport
from statkit.distributions.variates import standard_gamma
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.prec import safe_exp
from statkit.special import digamma, gamma_lr, gamma_ur, ln_gamma
from statkit.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource


def configure_chi_family() -> None:
    """
    Configure and register the Chi distribution family.

    The distribution of the Euclidean norm of k independent standard normal
    variables. The CDF is ``P(k/2, x²/2)``.
    """

    if ParametricFamilyRegister.contains(FamilyName.CHI):
        return

    def _freedom(parameters: Parametrization) -> float:
        return cast(_Freedom, parameters).freedom

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        k = _freedom(parameters)
        if x < 0.0 or math.isinf(x):
            return -math.inf
        if x == 0.0:
            if k < 1.0:
                return math.inf
            if k == 1.0:
                return 0.5 * LN_2 - ln_gamma(0.5)
            return -math.inf
        return (1.0 - 0.5 * k) * LN_2 + (k - 1.0) * math.log(x) - 0.5 * x * x - ln_gamma(0.5 * k)

    def pdf(parameters: Parametrization, x: float) -> float:
        return safe_exp(ln_pdf(parameters, x))

    def cdf(parameters: Parametrization, x: float) -> float:
        return gamma_lr(0.5 * _freedom(parameters), 0.5 * x * x) if x > 0.0 else 0.0

    def sf(parameters: Parametrization, x: float) -> float:
        return gamma_ur(0.5 * _freedom(parameters), 0.5 * x * x) if x > 0.0 else 1.0

    def mean_func(parameters: Parametrization, _: Any) -> float:
        k = _freedom(parameters)
        return SQRT_2 * math.exp(ln_gamma(0.5 * (k + 1.0)) - ln_gamma(0.5 * k))

    def var_func(parameters: Parametrization, _: Any) -> float:
        mu = mean_func(parameters, None)
        return _freedom(parameters) - mu * mu

    def skew_func(parameters: Parametrization, _: Any) -> float:
        mu = mean_func(parameters, None)
        var = var_func(parameters, None)
        sigma = math.sqrt(var)
        return mu / (sigma * var) * (1.0 - 2.0 * var)

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        mu = mean_func(parameters, None)
        var = var_func(parameters, None)
        sigma = math.sqrt(var)
        return 2.0 / var * (1.0 - mu * sigma * skew_func(parameters, None) - var)

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        k = _freedom(parameters)
        return ln_gamma(0.5 * k) + 0.5 * (k - LN_2 - (k - 1.0) * digamma(0.5 * k))

    def mode_func(parameters: Parametrization, _: Any) -> float:
        k = _freedom(parameters)
        return math.sqrt(k - 1.0) if k >= 1.0 else 0.0

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        return math.sqrt(2.0 * standard_gamma(0.5 * _freedom(parameters), rng))

    Chi = ParametricFamily(
        name=FamilyName.CHI,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["freedom"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LN_PDF: ln_pdf,
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
        sampler=_sampler,
    )

    @parametrization(family=Chi, name="freedom")
    class _Freedom(Parametrization):
        """
        Parameters
        ----------
        freedom : float
            Degrees of freedom k
        """

        freedom: float

        @constraint(description="0 < freedom < inf")
        def check_freedom_positive(self) -> bool:
            return 0.0 < self.freedom < math.inf

    ParametricFamilyRegister.register(Chi)


__all__ = ["configure_chi_family"]
