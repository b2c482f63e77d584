"""
Triangular distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.consts import SQRT_2
from statkit.distributions.support import ContinuousSupport
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.prec import safe_log
from statkit.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any


def configure_triangular_family() -> None:
    """
    Configure and register the Triangular distribution family.

    Lower limit a, upper limit b and mode c with a ≤ c ≤ b; the density rises
    linearly on [a, c] and falls linearly on [c, b]. Sampling uses inverse
    transform.
    """

    if ParametricFamilyRegister.contains(FamilyName.TRIANGULAR):
        return

    def _params(parameters: Parametrization) -> tuple[float, float, float]:
        parameters = cast(_MinMaxMode, parameters)
        return parameters.minimum, parameters.maximum, parameters.mode

    def pdf(parameters: Parametrization, x: float) -> float:
        a, b, c = _params(parameters)
        if x < a or x > b:
            return 0.0
        if x == c:
            return 2.0 / (b - a)
        if x < c:
            return 2.0 * (x - a) / ((b - a) * (c - a))
        return 2.0 * (b - x) / ((b - a) * (b - c))

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        return safe_log(pdf(parameters, x))

    def cdf(parameters: Parametrization, x: float) -> float:
        a, b, c = _params(parameters)
        if x <= a:
            return 0.0
        if x >= b:
            return 1.0
        if x <= c:
            return (x - a) ** 2 / ((b - a) * (c - a))
        return 1.0 - (b - x) ** 2 / ((b - a) * (b - c))

    def sf(parameters: Parametrization, x: float) -> float:
        a, b, c = _params(parameters)
        if x <= a:
            return 1.0
        if x >= b:
            return 0.0
        if x <= c:
            return 1.0 - (x - a) ** 2 / ((b - a) * (c - a))
        return (b - x) ** 2 / ((b - a) * (b - c))

    def ppf(parameters: Parametrization, p: float) -> float:
        a, b, c = _params(parameters)
        if p < (c - a) / (b - a):
            return a + math.sqrt(p * (b - a) * (c - a))
        return b - math.sqrt((1.0 - p) * (b - a) * (b - c))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return sum(_params(parameters)) / 3.0

    def _spread(parameters: Parametrization) -> float:
        a, b, c = _params(parameters)
        return a * a + b * b + c * c - a * b - a * c - b * c

    def var_func(parameters: Parametrization, _: Any) -> float:
        return _spread(parameters) / 18.0

    def skew_func(parameters: Parametrization, _: Any) -> float:
        a, b, c = _params(parameters)
        num = SQRT_2 * (a + b - 2.0 * c) * (2.0 * a - b - c) * (a - 2.0 * b + c)
        return num / (5.0 * _spread(parameters) ** 1.5)

    def kurt_func(_1: Parametrization, _2: Any) -> float:
        return -0.6

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        a, b, _c = _params(parameters)
        return 0.5 + math.log(0.5 * (b - a))

    def mode_func(parameters: Parametrization, _: Any) -> float:
        return _params(parameters)[2]

    def median_func(parameters: Parametrization, _: Any) -> float:
        a, b, c = _params(parameters)
        if c >= 0.5 * (a + b):
            return a + math.sqrt(0.5 * (b - a) * (c - a))
        return b - math.sqrt(0.5 * (b - a) * (b - c))

    def _support(parameters: Parametrization) -> ContinuousSupport:
        a, b, _c = _params(parameters)
        return ContinuousSupport(left=a, right=b)

    Triangular = ParametricFamily(
        name=FamilyName.TRIANGULAR,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["minMaxMode"],
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
    )

    @parametrization(family=Triangular, name="minMaxMode")
    class _MinMaxMode(Parametrization):
        """
        Parameters
        ----------
        minimum : float
            Lower limit a
        maximum : float
            Upper limit b
        mode : float
            Peak c, between the limits
        """

        minimum: float
        maximum: float
        mode: float

        @constraint(description="limits are finite")
        def check_limits_finite(self) -> bool:
            return math.isfinite(self.minimum) and math.isfinite(self.maximum)

        @constraint(description="minimum < maximum")
        def check_minimum_less_than_maximum(self) -> bool:
            return self.minimum < self.maximum

        @constraint(description="minimum <= mode <= maximum")
        def check_mode_within_limits(self) -> bool:
            return self.minimum <= self.mode <= self.maximum

    ParametricFamilyRegister.register(Triangular)


__all__ = ["configure_triangular_family"]
