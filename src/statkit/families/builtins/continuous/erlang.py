"""
Erlang distribution family implementation.
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
from statkit.prec import is_integer, safe_exp
from statkit.special import gamma_lr, gamma_ur
from statkit.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource


def configure_erlang_family() -> None:
    """
    Configure and register the Erlang distribution family.

    Erlang is the gamma distribution restricted to a positive integer shape:
    the waiting time until the k-th event of a Poisson process with rate λ.
    """

    if ParametricFamilyRegister.contains(FamilyName.ERLANG):
        return

    def _shape_rate(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_ShapeRate, parameters)
        return float(parameters.shape), parameters.rate

    def pdf(parameters: Parametrization, x: float) -> float:
        return safe_exp(gamma_ln_pdf(*_shape_rate(parameters), x))

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        return gamma_ln_pdf(*_shape_rate(parameters), x)

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
        return 2.0 / math.sqrt(_shape_rate(parameters)[0])

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        return 6.0 / _shape_rate(parameters)[0]

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        return gamma_entropy(*_shape_rate(parameters))

    def mode_func(parameters: Parametrization, _: Any) -> float:
        shape, rate = _shape_rate(parameters)
        return (shape - 1.0) / rate

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        shape, rate = _shape_rate(parameters)
        return standard_gamma(shape, rng) / rate

    Erlang = ParametricFamily(
        name=FamilyName.ERLANG,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeRate"],
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

    @parametrization(family=Erlang, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Parameters
        ----------
        shape : int
            Number of events k, a positive integer
        rate : float
            Event rate λ
        """

        shape: int
        rate: float

        @constraint(description="shape is a positive integer")
        def check_shape_positive_integer(self) -> bool:
            return is_integer(self.shape) and self.shape >= 1

        @constraint(description="0 < rate < inf")
        def check_rate_positive(self) -> bool:
            return 0.0 < self.rate < math.inf

    ParametricFamilyRegister.register(Erlang)


__all__ = ["configure_erlang_family"]
