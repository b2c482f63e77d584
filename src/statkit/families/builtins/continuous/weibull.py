"""
Weibull distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.consts import EULER_MASCHERONI, LN_2
from statkit.distributions.support import ContinuousSupport
from statkit.distributions.variates import standard_exponential
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.prec import safe_exp
from statkit.special import gamma
from statkit.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource


def configure_weibull_family() -> None:
    """
    Configure and register the Weibull distribution family.

    Shape k and scale λ; ``cdf(x) = 1 - exp(-(x/λ)^k)`` for x ≥ 0. Raw
    moments are ``λ^r Γ(1 + r/k)``.
    """

    if ParametricFamilyRegister.contains(FamilyName.WEIBULL):
        return

    def _params(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_ShapeScale, parameters)
        return parameters.shape, parameters.scale

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        k, lam = _params(parameters)
        if x < 0.0 or math.isinf(x):
            return -math.inf
        if x == 0.0:
            if k < 1.0:
                return math.inf
            if k == 1.0:
                return -math.log(lam)
            return -math.inf
        z = x / lam
        return math.log(k / lam) + (k - 1.0) * math.log(z) - z**k

    def pdf(parameters: Parametrization, x: float) -> float:
        return safe_exp(ln_pdf(parameters, x))

    def cdf(parameters: Parametrization, x: float) -> float:
        k, lam = _params(parameters)
        return -math.expm1(-((x / lam) ** k)) if x > 0.0 else 0.0

    def sf(parameters: Parametrization, x: float) -> float:
        k, lam = _params(parameters)
        return math.exp(-((x / lam) ** k)) if x > 0.0 else 1.0

    def ppf(parameters: Parametrization, p: float) -> float:
        k, lam = _params(parameters)
        if p == 1.0:
            return math.inf
        return lam * (-math.log1p(-p)) ** (1.0 / k)

    def _raw_moment(parameters: Parametrization, r: int) -> float:
        k, lam = _params(parameters)
        return lam**r * gamma(1.0 + r / k)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return _raw_moment(parameters, 1)

    def var_func(parameters: Parametrization, _: Any) -> float:
        mu = _raw_moment(parameters, 1)
        return _raw_moment(parameters, 2) - mu * mu

    def skew_func(parameters: Parametrization, _: Any) -> float:
        mu = _raw_moment(parameters, 1)
        var = var_func(parameters, None)
        sigma = math.sqrt(var)
        return (_raw_moment(parameters, 3) - 3.0 * mu * var - mu**3) / (sigma * var)

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        mu = _raw_moment(parameters, 1)
        var = var_func(parameters, None)
        sigma = math.sqrt(var)
        skew = skew_func(parameters, None)
        m4 = _raw_moment(parameters, 4)
        return (m4 - 4.0 * skew * sigma**3 * mu - 6.0 * mu**2 * var - mu**4) / (var * var) - 3.0

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        k, lam = _params(parameters)
        return EULER_MASCHERONI * (1.0 - 1.0 / k) + math.log(lam / k) + 1.0

    def mode_func(parameters: Parametrization, _: Any) -> float:
        k, lam = _params(parameters)
        if k <= 1.0:
            return 0.0
        return lam * ((k - 1.0) / k) ** (1.0 / k)

    def median_func(parameters: Parametrization, _: Any) -> float:
        k, lam = _params(parameters)
        return lam * LN_2 ** (1.0 / k)

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        k, lam = _params(parameters)
        return lam * standard_exponential(rng) ** (1.0 / k)

    Weibull = ParametricFamily(
        name=FamilyName.WEIBULL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeScale"],
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

    @parametrization(family=Weibull, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Parameters
        ----------
        shape : float
            Shape k
        scale : float
            Scale λ
        """

        shape: float
        scale: float

        @constraint(description="0 < shape < inf")
        def check_shape_positive(self) -> bool:
            return 0.0 < self.shape < math.inf

        @constraint(description="0 < scale < inf")
        def check_scale_positive(self) -> bool:
            return 0.0 < self.scale < math.inf

    ParametricFamilyRegister.register(Weibull)


__all__ = ["configure_weibull_family"]
