"""
Chi-squared distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.distributions.support import ContinuousSupport
from statkit.distributions.variates import standard_gamma
from statkit.families.builtins.continuous.gamma import gamma_entropy, gamma_ln_pdf
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.prec import safe_exp
from statkit.special import gamma_lr, gamma_ur
from statkit.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource


def configure_chi_squared_family() -> None:
    """
    Configure and register the ChiSquared distribution family.

    The sum of squares of k independent standard normal variables, i.e. the
    gamma distribution with shape k/2 and rate 1/2; k need not be an integer.
    """

    if ParametricFamilyRegister.contains(FamilyName.CHI_SQUARED):
        return

    def _freedom(parameters: Parametrization) -> float:
        return cast(_Freedom, parameters).freedom

    def pdf(parameters: Parametrization, x: float) -> float:
        return safe_exp(gamma_ln_pdf(0.5 * _freedom(parameters), 0.5, x))

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        return gamma_ln_pdf(0.5 * _freedom(parameters), 0.5, x)

    def cdf(parameters: Parametrization, x: float) -> float:
        return gamma_lr(0.5 * _freedom(parameters), 0.5 * x) if x > 0.0 else 0.0

    def sf(parameters: Parametrization, x: float) -> float:
        return gamma_ur(0.5 * _freedom(parameters), 0.5 * x) if x > 0.0 else 1.0

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return _freedom(parameters)

    def var_func(parameters: Parametrization, _: Any) -> float:
        return 2.0 * _freedom(parameters)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        return math.sqrt(8.0 / _freedom(parameters))

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        return 12.0 / _freedom(parameters)

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        return gamma_entropy(0.5 * _freedom(parameters), 0.5)

    def mode_func(parameters: Parametrization, _: Any) -> float:
        return max(_freedom(parameters) - 2.0, 0.0)

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        return 2.0 * standard_gamma(0.5 * _freedom(parameters), rng)

    ChiSquared = ParametricFamily(
        name=FamilyName.CHI_SQUARED,
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

    @parametrization(family=ChiSquared, name="freedom")
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

    ParametricFamilyRegister.register(ChiSquared)


__all__ = ["configure_chi_squared_family"]
