"""
Pareto (type I) distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.distributions.support import ContinuousSupport
from statkit.distributions.variates import standard_exponential
from statkit.errors import UndefinedQuantityError
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


def configure_pareto_family() -> None:
    """
    Configure and register the Pareto distribution family.

    Scale x_m (the minimum) and shape α; ``sf(x) = (x_m / x)^α`` for x ≥ x_m.
    The mean is infinite for α ≤ 1 and the variance for α ≤ 2.
    """

    if ParametricFamilyRegister.contains(FamilyName.PARETO):
        return

    def _params(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_ScaleShape, parameters)
        return parameters.scale, parameters.shape

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        xm, alpha = _params(parameters)
        if x < xm or math.isinf(x):
            return -math.inf
        return math.log(alpha) + alpha * math.log(xm) - (alpha + 1.0) * math.log(x)

    def pdf(parameters: Parametrization, x: float) -> float:
        return safe_exp(ln_pdf(parameters, x))

    def cdf(parameters: Parametrization, x: float) -> float:
        xm, alpha = _params(parameters)
        if x <= xm:
            return 0.0
        if math.isinf(x):
            return 1.0
        return -math.expm1(alpha * math.log(xm / x))

    def sf(parameters: Parametrization, x: float) -> float:
        xm, alpha = _params(parameters)
        if x <= xm:
            return 1.0
        return (xm / x) ** alpha

    def ppf(parameters: Parametrization, p: float) -> float:
        xm, alpha = _params(parameters)
        if p == 1.0:
            return math.inf
        return xm * safe_exp(-math.log1p(-p) / alpha)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        xm, alpha = _params(parameters)
        if alpha <= 1.0:
            return math.inf
        return alpha * xm / (alpha - 1.0)

    def var_func(parameters: Parametrization, _: Any) -> float:
        xm, alpha = _params(parameters)
        if alpha <= 2.0:
            return math.inf
        return xm * xm * alpha / ((alpha - 1.0) ** 2 * (alpha - 2.0))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        alpha = _params(parameters)[1]
        if alpha <= 3.0:
            raise UndefinedQuantityError("skewness of Pareto requires shape > 3")
        return 2.0 * (1.0 + alpha) / (alpha - 3.0) * math.sqrt((alpha - 2.0) / alpha)

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        a = _params(parameters)[1]
        if a <= 4.0:
            raise UndefinedQuantityError("kurtosis of Pareto requires shape > 4")
        return 6.0 * (a**3 + a**2 - 6.0 * a - 2.0) / (a * (a - 3.0) * (a - 4.0))

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        xm, alpha = _params(parameters)
        return math.log(xm / alpha) + 1.0 / alpha + 1.0

    def mode_func(parameters: Parametrization, _: Any) -> float:
        return _params(parameters)[0]

    def median_func(parameters: Parametrization, _: Any) -> float:
        xm, alpha = _params(parameters)
        return xm * 2.0 ** (1.0 / alpha)

    def _support(parameters: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=_params(parameters)[0])

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        xm, alpha = _params(parameters)
        return xm * safe_exp(standard_exponential(rng) / alpha)

    Pareto = ParametricFamily(
        name=FamilyName.PARETO,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["scaleShape"],
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

    @parametrization(family=Pareto, name="scaleShape")
    class _ScaleShape(Parametrization):
        """
        Parameters
        ----------
        scale : float
            Minimum value x_m
        shape : float
            Tail index α
        """

        scale: float
        shape: float

        @constraint(description="0 < scale < inf")
        def check_scale_positive(self) -> bool:
            return 0.0 < self.scale < math.inf

        @constraint(description="0 < shape < inf")
        def check_shape_positive(self) -> bool:
            return 0.0 < self.shape < math.inf

    ParametricFamilyRegister.register(Pareto)


__all__ = ["configure_pareto_family"]
