"""
Gamma distribution family implementation.

Contains the Gamma family with shape-rate and shape-scale parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

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


def gamma_ln_pdf(shape: float, rate: float, x: float) -> float:
    """
    Log-density of the gamma distribution with the given shape and rate.

    At ``x = 0`` the density is infinite for ``shape < 1``, equal to ``rate``
    for ``shape = 1`` and zero otherwise.
    """
    if x < 0.0 or math.isinf(x):
        return -math.inf
    if x == 0.0:
        if shape < 1.0:
            return math.inf
        if shape == 1.0:
            return math.log(rate)
        return -math.inf
    return shape * math.log(rate) + (shape - 1.0) * math.log(x) - rate * x - ln_gamma(shape)


def gamma_entropy(shape: float, rate: float) -> float:
    return shape - math.log(rate) + ln_gamma(shape) + (1.0 - shape) * digamma(shape)


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    Continuous distribution on [0, inf) with shape α and rate β (scale 1/β);
    the sum of α independent exponential variables with rate β for integer α.

    Probability density function:
        f(x) = β^α / Γ(α) * x^(α-1) * exp(-βx) for x ≥ 0

    The CDF is the regularized lower incomplete gamma function P(α, βx).
    """

    def _shape_rate(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_ShapeRate, parameters)
        return parameters.shape, parameters.rate

    def pdf(parameters: Parametrization, x: float) -> float:
        shape, rate = _shape_rate(parameters)
        return safe_exp(gamma_ln_pdf(shape, rate, x))

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        shape, rate = _shape_rate(parameters)
        return gamma_ln_pdf(shape, rate, x)

    def cdf(parameters: Parametrization, x: float) -> float:
        shape, rate = _shape_rate(parameters)
        return gamma_lr(shape, rate * x) if x > 0.0 else 0.0

    def sf(parameters: Parametrization, x: float) -> float:
        shape, rate = _shape_rate(parameters)
        return gamma_ur(shape, rate * x) if x > 0.0 else 1.0

    def mean_func(parameters: Parametrization, _: Any) -> float:
        shape, rate = _shape_rate(parameters)
        return shape / rate

    def var_func(parameters: Parametrization, _: Any) -> float:
        shape, rate = _shape_rate(parameters)
        return shape / (rate * rate)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        return 2.0 / math.sqrt(cast(_ShapeRate, parameters).shape)

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        return 6.0 / cast(_ShapeRate, parameters).shape

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        return gamma_entropy(*_shape_rate(parameters))

    def mode_func(parameters: Parametrization, _: Any) -> float:
        """``(α - 1) / β`` for α ≥ 1; the density peaks at 0 otherwise."""
        shape, rate = _shape_rate(parameters)
        return (shape - 1.0) / rate if shape >= 1.0 else 0.0

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        shape, rate = _shape_rate(parameters)
        return standard_gamma(shape, rng) / rate

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeRate", "shapeScale"],
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
    Gamma.__doc__ = GAMMA_DOC

    @parametrization(family=Gamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter (α)
        rate : float
            Rate parameter (β)
        """

        shape: float
        rate: float

        @constraint(description="0 < shape < inf")
        def check_shape_positive(self) -> bool:
            return 0.0 < self.shape < math.inf

        @constraint(description="0 < rate < inf")
        def check_rate_positive(self) -> bool:
            return 0.0 < self.rate < math.inf

    @parametrization(family=Gamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter (k)
        scale : float
            Scale parameter (θ = 1/β)
        """

        shape: float
        scale: float

        @constraint(description="0 < shape < inf")
        def check_shape_positive(self) -> bool:
            return 0.0 < self.shape < math.inf

        @constraint(description="0 < scale < inf")
        def check_scale_positive(self) -> bool:
            return 0.0 < self.scale < math.inf

        def transform_to_base_parametrization(self) -> Parametrization:
            return _ShapeRate(shape=self.shape, rate=1.0 / self.scale)

    ParametricFamilyRegister.register(Gamma)


__all__ = ["configure_gamma_family", "gamma_ln_pdf", "gamma_entropy"]
