"""
Inverse-gamma distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.distributions.support import ContinuousSupport
from statkit.distributions.variates import standard_gamma
from statkit.errors import UndefinedQuantityError
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


def configure_inverse_gamma_family() -> None:
    """
    Configure and register the InverseGamma distribution family.

    The distribution of ``1/X`` for a gamma ``X`` with shape α and rate β; β
    is the scale of the inverse. ``cdf(x) = Q(α, β/x)``.
    """

    if ParametricFamilyRegister.contains(FamilyName.INVERSE_GAMMA):
        return

    def _params(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_ShapeScale, parameters)
        return parameters.shape, parameters.scale

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        a, b = _params(parameters)
        if x <= 0.0 or math.isinf(x):
            return -math.inf
        return a * math.log(b) - ln_gamma(a) - (a + 1.0) * math.log(x) - b / x

    def pdf(parameters: Parametrization, x: float) -> float:
        return safe_exp(ln_pdf(parameters, x))

    def cdf(parameters: Parametrization, x: float) -> float:
        a, b = _params(parameters)
        return gamma_ur(a, b / x) if x > 0.0 else 0.0

    def sf(parameters: Parametrization, x: float) -> float:
        a, b = _params(parameters)
        return gamma_lr(a, b / x) if x > 0.0 else 1.0

    def mean_func(parameters: Parametrization, _: Any) -> float:
        a, b = _params(parameters)
        if a <= 1.0:
            raise UndefinedQuantityError("mean of InverseGamma requires shape > 1")
        return b / (a - 1.0)

    def var_func(parameters: Parametrization, _: Any) -> float:
        a, b = _params(parameters)
        if a <= 2.0:
            raise UndefinedQuantityError("variance of InverseGamma requires shape > 2")
        return b * b / ((a - 1.0) ** 2 * (a - 2.0))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        a = _params(parameters)[0]
        if a <= 3.0:
            raise UndefinedQuantityError("skewness of InverseGamma requires shape > 3")
        return 4.0 * math.sqrt(a - 2.0) / (a - 3.0)

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        a = _params(parameters)[0]
        if a <= 4.0:
            raise UndefinedQuantityError("kurtosis of InverseGamma requires shape > 4")
        return (30.0 * a - 66.0) / ((a - 3.0) * (a - 4.0))

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        a, b = _params(parameters)
        return a + math.log(b) + ln_gamma(a) - (1.0 + a) * digamma(a)

    def mode_func(parameters: Parametrization, _: Any) -> float:
        a, b = _params(parameters)
        return b / (a + 1.0)

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        a, b = _params(parameters)
        return b / standard_gamma(a, rng)

    InverseGamma = ParametricFamily(
        name=FamilyName.INVERSE_GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeScale"],
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

    @parametrization(family=InverseGamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Parameters
        ----------
        shape : float
            Shape α
        scale : float
            Scale β
        """

        shape: float
        scale: float

        @constraint(description="0 < shape < inf")
        def check_shape_positive(self) -> bool:
            return 0.0 < self.shape < math.inf

        @constraint(description="0 < scale < inf")
        def check_scale_positive(self) -> bool:
            return 0.0 < self.scale < math.inf

    ParametricFamilyRegister.register(InverseGamma)


__all__ = ["configure_inverse_gamma_family"]
