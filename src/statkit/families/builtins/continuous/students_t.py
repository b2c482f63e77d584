"""
Student's t distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.consts import LN_PI
from statkit.distributions.support import ContinuousSupport
from statkit.distributions.variates import standard_gamma, standard_normal
from statkit.errors import UndefinedQuantityError
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.special import beta_reg, digamma, inv_beta_reg, ln_beta, ln_gamma
from statkit.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource


def configure_students_t_family() -> None:
    """
    Configure and register the StudentsT distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.STUDENTS_T):
        return

    STUDENTS_T_DOC = """
    Student's t distribution with location μ, scale σ and ν degrees of freedom.

    Probability density function:
        f(x) = Γ((ν+1)/2) / (Γ(ν/2) √(νπ) σ) * (1 + z²/ν)^(-(ν+1)/2),  z = (x-μ)/σ

    Tail probabilities come from the regularized incomplete beta function:
        P(T ≤ -|t|) = I_{ν/(ν+t²)}(ν/2, 1/2) / 2

    Moments of order r exist only for ν > r: the mean needs ν > 1, the
    variance is infinite for 1 < ν ≤ 2.
    """

    def _params(parameters: Parametrization) -> tuple[float, float, float]:
        parameters = cast(_LocationScaleFreedom, parameters)
        return parameters.location, parameters.scale, parameters.freedom

    def _lower_tail(t: float, nu: float) -> float:
        """``P(T ≤ -|t|)`` for the standard t distribution."""
        if math.isinf(t):
            return 0.0
        return 0.5 * beta_reg(0.5 * nu, 0.5, nu / (nu + t * t))

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        loc, scale, nu = _params(parameters)
        if math.isinf(x):
            return -math.inf
        z = (x - loc) / scale
        return (
            ln_gamma(0.5 * (nu + 1.0))
            - ln_gamma(0.5 * nu)
            - 0.5 * (math.log(nu) + LN_PI)
            - math.log(scale)
            - 0.5 * (nu + 1.0) * math.log1p(z * z / nu)
        )

    def pdf(parameters: Parametrization, x: float) -> float:
        return math.exp(ln_pdf(parameters, x))

    def cdf(parameters: Parametrization, x: float) -> float:
        loc, scale, nu = _params(parameters)
        t = (x - loc) / scale
        tail = _lower_tail(t, nu)
        return tail if t <= 0.0 else 1.0 - tail

    def sf(parameters: Parametrization, x: float) -> float:
        loc, scale, nu = _params(parameters)
        t = (x - loc) / scale
        tail = _lower_tail(t, nu)
        return tail if t >= 0.0 else 1.0 - tail

    def ppf(parameters: Parametrization, p: float) -> float:
        loc, scale, nu = _params(parameters)
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        if p == 0.5:
            return loc
        y = inv_beta_reg(0.5 * nu, 0.5, 2.0 * min(p, 1.0 - p))
        t = math.sqrt(nu * (1.0 - y) / y) if y > 0.0 else math.inf
        return loc - scale * t if p < 0.5 else loc + scale * t

    def mean_func(parameters: Parametrization, _: Any) -> float:
        loc, _scale, nu = _params(parameters)
        if nu <= 1.0:
            raise UndefinedQuantityError("mean of StudentsT requires freedom > 1")
        return loc

    def var_func(parameters: Parametrization, _: Any) -> float:
        """``σ²ν/(ν-2)`` for ν > 2, inf for 1 < ν ≤ 2."""
        _loc, scale, nu = _params(parameters)
        if nu <= 1.0:
            raise UndefinedQuantityError("variance of StudentsT requires freedom > 1")
        if nu <= 2.0:
            return math.inf
        return scale * scale * nu / (nu - 2.0)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        if _params(parameters)[2] <= 3.0:
            raise UndefinedQuantityError("skewness of StudentsT requires freedom > 3")
        return 0.0

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        nu = _params(parameters)[2]
        if nu <= 2.0:
            raise UndefinedQuantityError("kurtosis of StudentsT requires freedom > 2")
        if nu <= 4.0:
            return math.inf
        return 6.0 / (nu - 4.0)

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        _loc, scale, nu = _params(parameters)
        return (
            0.5 * (nu + 1.0) * (digamma(0.5 * (nu + 1.0)) - digamma(0.5 * nu))
            + 0.5 * math.log(nu)
            + ln_beta(0.5 * nu, 0.5)
            + math.log(scale)
        )

    def location_func(parameters: Parametrization, _: Any) -> float:
        return _params(parameters)[0]

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        loc, scale, nu = _params(parameters)
        chi2 = 2.0 * standard_gamma(0.5 * nu, rng)
        return loc + scale * standard_normal(rng) / math.sqrt(chi2 / nu)

    StudentsT = ParametricFamily(
        name=FamilyName.STUDENTS_T,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locationScaleFreedom"],
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
            CharacteristicName.MODE: location_func,
            CharacteristicName.MEDIAN: location_func,
        },
        support_by_parametrization=_support,
        sampler=_sampler,
    )
    StudentsT.__doc__ = STUDENTS_T_DOC

    @parametrization(family=StudentsT, name="locationScaleFreedom")
    class _LocationScaleFreedom(Parametrization):
        """
        Parameters
        ----------
        location : float
            Location μ (the median)
        scale : float
            Scale σ
        freedom : float
            Degrees of freedom ν
        """

        location: float
        scale: float
        freedom: float

        @constraint(description="location is finite")
        def check_location_finite(self) -> bool:
            return math.isfinite(self.location)

        @constraint(description="0 < scale < inf")
        def check_scale_positive(self) -> bool:
            return 0.0 < self.scale < math.inf

        @constraint(description="0 < freedom < inf")
        def check_freedom_positive(self) -> bool:
            return 0.0 < self.freedom < math.inf

    ParametricFamilyRegister.register(StudentsT)


__all__ = ["configure_students_t_family"]
