"""
Cauchy distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.consts import LN_PI
from statkit.distributions.support import ContinuousSupport
from statkit.errors import UndefinedQuantityError
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


def configure_cauchy_family() -> None:
    """
    Configure and register the Cauchy distribution family.

    The Cauchy distribution has no moments: mean, variance, skewness and
    kurtosis raise :class:`~statkit.errors.UndefinedQuantityError`. Sampling
    uses inverse transform.
    """

    if ParametricFamilyRegister.contains(FamilyName.CAUCHY):
        return

    def _params(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_LocationScale, parameters)
        return parameters.location, parameters.scale

    def pdf(parameters: Parametrization, x: float) -> float:
        loc, scale = _params(parameters)
        z = (x - loc) / scale
        return 1.0 / (math.pi * scale * (1.0 + z * z))

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        loc, scale = _params(parameters)
        if math.isinf(x):
            return -math.inf
        z = (x - loc) / scale
        return -LN_PI - math.log(scale) - math.log1p(z * z)

    def cdf(parameters: Parametrization, x: float) -> float:
        loc, scale = _params(parameters)
        return 0.5 + math.atan((x - loc) / scale) / math.pi

    def sf(parameters: Parametrization, x: float) -> float:
        loc, scale = _params(parameters)
        return 0.5 - math.atan((x - loc) / scale) / math.pi

    def ppf(parameters: Parametrization, p: float) -> float:
        loc, scale = _params(parameters)
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        return loc + scale * math.tan(math.pi * (p - 0.5))

    def _undefined(name: str) -> Any:
        def _raise(_1: Parametrization, _2: Any) -> float:
            raise UndefinedQuantityError(f"{name} of the Cauchy distribution does not exist")

        return _raise

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        return math.log(4.0 * math.pi * _params(parameters)[1])

    def location_func(parameters: Parametrization, _: Any) -> float:
        return _params(parameters)[0]

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    Cauchy = ParametricFamily(
        name=FamilyName.CAUCHY,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locationScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LN_PDF: ln_pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: _undefined("mean"),
            CharacteristicName.VAR: _undefined("variance"),
            CharacteristicName.SKEW: _undefined("skewness"),
            CharacteristicName.KURT: _undefined("kurtosis"),
            CharacteristicName.ENTROPY: entropy_func,
            CharacteristicName.MODE: location_func,
            CharacteristicName.MEDIAN: location_func,
        },
        support_by_parametrization=_support,
    )

    @parametrization(family=Cauchy, name="locationScale")
    class _LocationScale(Parametrization):
        """
        Parameters
        ----------
        location : float
            Location x₀ (median and mode)
        scale : float
            Half width at half maximum γ
        """

        location: float
        scale: float

        @constraint(description="location is finite")
        def check_location_finite(self) -> bool:
            return math.isfinite(self.location)

        @constraint(description="0 < scale < inf")
        def check_scale_positive(self) -> bool:
            return 0.0 < self.scale < math.inf

    ParametricFamilyRegister.register(Cauchy)


__all__ = ["configure_cauchy_family"]
