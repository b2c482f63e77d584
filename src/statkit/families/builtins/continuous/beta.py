"""
Beta distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.distributions.support import ContinuousSupport
from statkit.distributions.variates import standard_beta
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


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    BETA_DOC = """
    Beta distribution.

    Continuous distribution on [0, 1] with shape parameters α and β.

    Probability density function:
        f(x) = x^(α-1) * (1-x)^(β-1) / B(α, β)

    The CDF is the regularized incomplete beta function I_x(α, β) and the
    quantile function its inverse.
    """

    def _shapes(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_Shapes, parameters)
        return parameters.alpha, parameters.beta

    def _ln_edge(shape: float, other: float) -> float:
        # density at the end of [0, 1] where x^(shape-1) is evaluated at 0
        if shape < 1.0:
            return math.inf
        if shape == 1.0:
            return math.log(other)
        return -math.inf

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        a, b = _shapes(parameters)
        if not 0.0 <= x <= 1.0:
            return -math.inf
        if x == 0.0:
            return _ln_edge(a, b)
        if x == 1.0:
            return _ln_edge(b, a)
        return (a - 1.0) * math.log(x) + (b - 1.0) * math.log1p(-x) - ln_beta(a, b)

    def pdf(parameters: Parametrization, x: float) -> float:
        return safe_exp(ln_pdf(parameters, x))

    def cdf(parameters: Parametrization, x: float) -> float:
        a, b = _shapes(parameters)
        if x <= 0.0:
            return 0.0
        if x >= 1.0:
            return 1.0
        return beta_reg(a, b, x)

    def sf(parameters: Parametrization, x: float) -> float:
        a, b = _shapes(parameters)
        if x <= 0.0:
            return 1.0
        if x >= 1.0:
            return 0.0
        return beta_reg(b, a, 1.0 - x)

    def ppf(parameters: Parametrization, p: float) -> float:
        return inv_beta_reg(*_shapes(parameters), p)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        a, b = _shapes(parameters)
        return a / (a + b)

    def var_func(parameters: Parametrization, _: Any) -> float:
        a, b = _shapes(parameters)
        s = a + b
        return a * b / (s * s * (s + 1.0))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        a, b = _shapes(parameters)
        s = a + b
        return 2.0 * (b - a) * math.sqrt(s + 1.0) / ((s + 2.0) * math.sqrt(a * b))

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        a, b = _shapes(parameters)
        s = a + b
        num = 6.0 * ((a - b) ** 2 * (s + 1.0) - a * b * (s + 2.0))
        return num / (a * b * (s + 2.0) * (s + 3.0))

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        a, b = _shapes(parameters)
        return (
            ln_beta(a, b)
            - (a - 1.0) * digamma(a)
            - (b - 1.0) * digamma(b)
            + (a + b - 2.0) * digamma(a + b)
        )

    def mode_func(parameters: Parametrization, _: Any) -> float:
        """
        ``(α - 1) / (α + β - 2)``.

        Raises
        ------
        UndefinedQuantityError
            Unless both shapes exceed 1.
        """
        a, b = _shapes(parameters)
        if a <= 1.0 or b <= 1.0:
            raise UndefinedQuantityError("mode of Beta requires alpha > 1 and beta > 1")
        return (a - 1.0) / (a + b - 2.0)

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0, right=1.0)

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        return standard_beta(*_shapes(parameters), rng)

    Beta = ParametricFamily(
        name=FamilyName.BETA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapes"],
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
    Beta.__doc__ = BETA_DOC

    @parametrization(family=Beta, name="shapes")
    class _Shapes(Parametrization):
        """
        Parameters
        ----------
        alpha : float
            First shape parameter
        beta : float
            Second shape parameter
        """

        alpha: float
        beta: float

        @constraint(description="0 < alpha < inf")
        def check_alpha_positive(self) -> bool:
            return 0.0 < self.alpha < math.inf

        @constraint(description="0 < beta < inf")
        def check_beta_positive(self) -> bool:
            return 0.0 < self.beta < math.inf

    ParametricFamilyRegister.register(Beta)


__all__ = ["configure_beta_family"]
