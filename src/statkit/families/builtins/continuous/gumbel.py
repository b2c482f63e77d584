"""
Gumbel (extreme value type I) distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.consts import EULER_MASCHERONI, LN_2, ZETA_3
from statkit.distributions.support import ContinuousSupport
from statkit.distributions.variates import open_uniform
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.prec import safe_exp
from statkit.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource

_SKEWNESS = 12.0 * math.sqrt(6.0) * ZETA_3 / math.pi**3


def configure_gumbel_family() -> None:
    """
    Configure and register the Gumbel distribution family.

    Location μ and scale β; ``cdf(x) = exp(-exp(-(x - μ)/β))``.
    """

    if ParametricFamilyRegister.contains(FamilyName.GUMBEL):
        return

    def _params(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_LocationScale, parameters)
        return parameters.location, parameters.scale

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        loc, beta = _params(parameters)
        if math.isinf(x):
            return -math.inf
        z = (x - loc) / beta
        return -(z + safe_exp(-z)) - math.log(beta)

    def pdf(parameters: Parametrization, x: float) -> float:
        return safe_exp(ln_pdf(parameters, x))

    def cdf(parameters: Parametrization, x: float) -> float:
        loc, beta = _params(parameters)
        return safe_exp(-safe_exp(-(x - loc) / beta))

    def sf(parameters: Parametrization, x: float) -> float:
        loc, beta = _params(parameters)
        return -math.expm1(-safe_exp(-(x - loc) / beta))

    def ppf(parameters: Parametrization, p: float) -> float:
        loc, beta = _params(parameters)
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        return loc - beta * math.log(-math.log(p))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        loc, beta = _params(parameters)
        return loc + beta * EULER_MASCHERONI

    def var_func(parameters: Parametrization, _: Any) -> float:
        beta = _params(parameters)[1]
        return math.pi**2 * beta * beta / 6.0

    def skew_func(_1: Parametrization, _2: Any) -> float:
        return _SKEWNESS

    def kurt_func(_1: Parametrization, _2: Any) -> float:
        return 2.4

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        return math.log(_params(parameters)[1]) + EULER_MASCHERONI + 1.0

    def mode_func(parameters: Parametrization, _: Any) -> float:
        return _params(parameters)[0]

    def median_func(parameters: Parametrization, _: Any) -> float:
        loc, beta = _params(parameters)
        return loc - beta * math.log(LN_2)

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        loc, beta = _params(parameters)
        return loc - beta * math.log(-math.log(open_uniform(rng)))

    Gumbel = ParametricFamily(
        name=FamilyName.GUMBEL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locationScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LN_PDF: ln_pdf,
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

    @parametrization(family=Gumbel, name="locationScale")
    class _LocationScale(Parametrization):
        """
        Parameters
        ----------
        location : float
            Location μ (the mode)
        scale : float
            Scale β
        """

        location: float
        scale: float

        @constraint(description="location is finite")
        def check_location_finite(self) -> bool:
            return math.isfinite(self.location)

        @constraint(description="0 < scale < inf")
        def check_scale_positive(self) -> bool:
            return 0.0 < self.scale < math.inf

    ParametricFamilyRegister.register(Gumbel)


__all__ = ["configure_gumbel_family"]
