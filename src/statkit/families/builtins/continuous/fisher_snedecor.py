"""
Fisher-Snedecor (F) distribution family implementation.
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
from statkit.special import beta_reg, digamma, inv_beta_reg, ln_beta
from statkit.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource


def configure_fisher_snedecor_family() -> None:
    """
    Configure and register the FisherSnedecor distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.FISHER_SNEDECOR):
        return

    FISHER_SNEDECOR_DOC = """
    Fisher-Snedecor (F) distribution with d₁ and d₂ degrees of freedom.

    The ratio (U₁/d₁) / (U₂/d₂) of independent chi-squared variables. With
    y = d₁x / (d₁x + d₂), the CDF is I_y(d₁/2, d₂/2).
    """

    def _params(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_Freedoms, parameters)
        return parameters.freedom_1, parameters.freedom_2

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        d1, d2 = _params(parameters)
        if x < 0.0 or math.isinf(x):
            return -math.inf
        if x == 0.0:
            if d1 < 2.0:
                return math.inf
            if d1 == 2.0:
                return 0.0
            return -math.inf
        return (
            0.5 * (d1 * math.log(d1 * x) + d2 * math.log(d2) - (d1 + d2) * math.log(d1 * x + d2))
            - math.log(x)
            - ln_beta(0.5 * d1, 0.5 * d2)
        )

    def pdf(parameters: Parametrization, x: float) -> float:
        return safe_exp(ln_pdf(parameters, x))

    def cdf(parameters: Parametrization, x: float) -> float:
        d1, d2 = _params(parameters)
        if x <= 0.0:
            return 0.0
        if math.isinf(x):
            return 1.0
        return beta_reg(0.5 * d1, 0.5 * d2, d1 * x / (d1 * x + d2))

    def sf(parameters: Parametrization, x: float) -> float:
        d1, d2 = _params(parameters)
        if x <= 0.0:
            return 1.0
        if math.isinf(x):
            return 0.0
        return beta_reg(0.5 * d2, 0.5 * d1, d2 / (d1 * x + d2))

    def ppf(parameters: Parametrization, p: float) -> float:
        d1, d2 = _params(parameters)
        if p == 1.0:
            return math.inf
        y = inv_beta_reg(0.5 * d1, 0.5 * d2, p)
        if y >= 1.0:
            return math.inf
        return d2 * y / (d1 * (1.0 - y))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        d2 = _params(parameters)[1]
        if d2 <= 2.0:
            raise UndefinedQuantityError("mean of FisherSnedecor requires freedom_2 > 2")
        return d2 / (d2 - 2.0)

    def var_func(parameters: Parametrization, _: Any) -> float:
        d1, d2 = _params(parameters)
        if d2 <= 4.0:
            raise UndefinedQuantityError("variance of FisherSnedecor requires freedom_2 > 4")
        return 2.0 * d2 * d2 * (d1 + d2 - 2.0) / (d1 * (d2 - 2.0) ** 2 * (d2 - 4.0))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        d1, d2 = _params(parameters)
        if d2 <= 6.0:
            raise UndefinedQuantityError("skewness of FisherSnedecor requires freedom_2 > 6")
        return (
            (2.0 * d1 + d2 - 2.0)
            * math.sqrt(8.0 * (d2 - 4.0))
            / ((d2 - 6.0) * math.sqrt(d1 * (d1 + d2 - 2.0)))
        )

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        d1, d2 = _params(parameters)
        if d2 <= 8.0:
            raise UndefinedQuantityError("kurtosis of FisherSnedecor requires freedom_2 > 8")
        num = d1 * (5.0 * d2 - 22.0) * (d1 + d2 - 2.0) + (d2 - 4.0) * (d2 - 2.0) ** 2
        return 12.0 * num / (d1 * (d2 - 6.0) * (d2 - 8.0) * (d1 + d2 - 2.0))

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        # entropy of the beta prime variable Y/(1-Y), Y ~ Beta(d1/2, d2/2), scaled by d2/d1
        d1, d2 = _params(parameters)
        a, b = 0.5 * d1, 0.5 * d2
        beta_prime = (
            ln_beta(a, b)
            - (a - 1.0) * digamma(a)
            - (b + 1.0) * digamma(b)
            + (a + b) * digamma(a + b)
        )
        return beta_prime + math.log(d2 / d1)

    def mode_func(parameters: Parametrization, _: Any) -> float:
        d1, d2 = _params(parameters)
        if d1 <= 2.0:
            return 0.0
        return (d1 - 2.0) / d1 * d2 / (d2 + 2.0)

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        d1, d2 = _params(parameters)
        num = standard_gamma(0.5 * d1, rng) / d1
        den = standard_gamma(0.5 * d2, rng) / d2
        return num / den

    FisherSnedecor = ParametricFamily(
        name=FamilyName.FISHER_SNEDECOR,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["freedoms"],
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
        },
        support_by_parametrization=_support,
        sampler=_sampler,
    )
    FisherSnedecor.__doc__ = FISHER_SNEDECOR_DOC

    @parametrization(family=FisherSnedecor, name="freedoms")
    class _Freedoms(Parametrization):
        """
        Parameters
        ----------
        freedom_1 : float
            Numerator degrees of freedom d₁
        freedom_2 : float
            Denominator degrees of freedom d₂
        """

        freedom_1: float
        freedom_2: float

        @constraint(description="0 < freedom_1 < inf")
        def check_freedom_1_positive(self) -> bool:
            return 0.0 < self.freedom_1 < math.inf

        @constraint(description="0 < freedom_2 < inf")
        def check_freedom_2_positive(self) -> bool:
            return 0.0 < self.freedom_2 < math.inf

    ParametricFamilyRegister.register(FisherSnedecor)


__all__ = ["configure_fisher_snedecor_family"]
