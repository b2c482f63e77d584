"""
Log-normal distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.consts import LN_SQRT_2PI, SQRT_2, SQRT_2PI
from statkit.distributions.support import ContinuousSupport
from statkit.distributions.variates import standard_normal
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.prec import safe_exp
from statkit.special import erfc, erfc_inv
from statkit.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource


def configure_log_normal_family() -> None:
    """
    Configure and register the LogNormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOG_NORMAL):
        return

    LOG_NORMAL_DOC = """
    Log-normal distribution.

    The distribution of ``exp(Y)`` for a normal ``Y`` with mean μ and standard
    deviation σ. Both parameters live on the log scale.

    Probability density function:
        f(x) = 1/(xσ√(2π)) * exp(-(ln x - μ)²/(2σ²)) for x > 0
    """

    def pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_LocationScale, parameters)
        if x <= 0.0 or math.isinf(x):
            return 0.0
        z = (math.log(x) - parameters.mu) / parameters.sigma
        return math.exp(-0.5 * z * z) / (x * parameters.sigma * SQRT_2PI)

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_LocationScale, parameters)
        if x <= 0.0 or math.isinf(x):
            return -math.inf
        ln_x = math.log(x)
        z = (ln_x - parameters.mu) / parameters.sigma
        return -0.5 * z * z - ln_x - math.log(parameters.sigma) - LN_SQRT_2PI

    def cdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_LocationScale, parameters)
        if x <= 0.0:
            return 0.0
        return 0.5 * erfc(-(math.log(x) - parameters.mu) / (parameters.sigma * SQRT_2))

    def sf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_LocationScale, parameters)
        if x <= 0.0:
            return 1.0
        return 0.5 * erfc((math.log(x) - parameters.mu) / (parameters.sigma * SQRT_2))

    def ppf(parameters: Parametrization, p: float) -> float:
        parameters = cast(_LocationScale, parameters)
        if p == 0.0:
            return 0.0
        if p == 1.0:
            return math.inf
        return safe_exp(parameters.mu - parameters.sigma * SQRT_2 * erfc_inv(2.0 * p))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_LocationScale, parameters)
        return safe_exp(parameters.mu + 0.5 * parameters.sigma**2)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_LocationScale, parameters)
        s2 = parameters.sigma**2
        return math.expm1(s2) * safe_exp(2.0 * parameters.mu + s2)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        s2 = cast(_LocationScale, parameters).sigma ** 2
        return (math.exp(s2) + 2.0) * math.sqrt(math.expm1(s2))

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        """Excess kurtosis ``e^{4σ²} + 2e^{3σ²} + 3e^{2σ²} - 6``."""
        s2 = cast(_LocationScale, parameters).sigma ** 2
        return safe_exp(4.0 * s2) + 2.0 * safe_exp(3.0 * s2) + 3.0 * safe_exp(2.0 * s2) - 6.0

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_LocationScale, parameters)
        return parameters.mu + 0.5 + math.log(parameters.sigma) + LN_SQRT_2PI

    def mode_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_LocationScale, parameters)
        return safe_exp(parameters.mu - parameters.sigma**2)

    def median_func(parameters: Parametrization, _: Any) -> float:
        return safe_exp(cast(_LocationScale, parameters).mu)

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_LocationScale, parameters)
        return safe_exp(parameters.mu + parameters.sigma * standard_normal(rng))

    LogNormal = ParametricFamily(
        name=FamilyName.LOG_NORMAL,
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
    LogNormal.__doc__ = LOG_NORMAL_DOC

    @parametrization(family=LogNormal, name="locationScale")
    class _LocationScale(Parametrization):
        """
        Parameters
        ----------
        mu : float
            Mean of the logarithm
        sigma : float
            Standard deviation of the logarithm
        """

        mu: float
        sigma: float

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            return math.isfinite(self.mu)

        @constraint(description="0 < sigma < inf")
        def check_sigma_positive(self) -> bool:
            return 0.0 < self.sigma < math.inf

    ParametricFamilyRegister.register(LogNormal)


__all__ = ["configure_log_normal_family"]
