"""
Laplace distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.distributions.support import ContinuousSupport
from statkit.distributions.variates import open_uniform
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource


def configure_laplace_family() -> None:
    """
    Configure and register the Laplace (double exponential) distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return

    def _params(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_LocationScale, parameters)
        return parameters.location, parameters.scale

    def pdf(parameters: Parametrization, x: float) -> float:
        loc, b = _params(parameters)
        return math.exp(-abs(x - loc) / b) / (2.0 * b)

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        loc, b = _params(parameters)
        return -abs(x - loc) / b - math.log(2.0 * b)

    def cdf(parameters: Parametrization, x: float) -> float:
        loc, b = _params(parameters)
        if x < loc:
            return 0.5 * math.exp((x - loc) / b)
        return 1.0 - 0.5 * math.exp(-(x - loc) / b)

    def sf(parameters: Parametrization, x: float) -> float:
        loc, b = _params(parameters)
        if x > loc:
            return 0.5 * math.exp(-(x - loc) / b)
        return 1.0 - 0.5 * math.exp((x - loc) / b)

    def ppf(parameters: Parametrization, p: float) -> float:
        loc, b = _params(parameters)
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        if p <= 0.5:
            return loc + b * math.log(2.0 * p)
        return loc - b * math.log(2.0 - 2.0 * p)

    def location_func(parameters: Parametrization, _: Any) -> float:
        return _params(parameters)[0]

    def var_func(parameters: Parametrization, _: Any) -> float:
        return 2.0 * _params(parameters)[1] ** 2

    def skew_func(_1: Parametrization, _2: Any) -> float:
        return 0.0

    def kurt_func(_1: Parametrization, _2: Any) -> float:
        return 3.0

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        return 1.0 + math.log(2.0 * _params(parameters)[1])

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        loc, b = _params(parameters)
        u = open_uniform(rng) - 0.5
        return loc - b * math.copysign(1.0, u) * math.log1p(-2.0 * abs(u))

    Laplace = ParametricFamily(
        name=FamilyName.LAPLACE,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locationScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LN_PDF: ln_pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: location_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.ENTROPY: entropy_func,
            CharacteristicName.MODE: location_func,
            CharacteristicName.MEDIAN: location_func,
        },
        support_by_parametrization=_support,
        sampler=_sampler,
    )

    @parametrization(family=Laplace, name="locationScale")
    class _LocationScale(Parametrization):
        """
        Parameters
        ----------
        location : float
            Location μ
        scale : float
            Scale b
        """

        location: float
        scale: float

        @constraint(description="location is finite")
        def check_location_finite(self) -> bool:
            return math.isfinite(self.location)

        @constraint(description="0 < scale < inf")
        def check_scale_positive(self) -> bool:
            return 0.0 < self.scale < math.inf

    ParametricFamilyRegister.register(Laplace)


__all__ = ["configure_laplace_family"]
