"""
Exponential distribution family implementation.

Contains the Exponential family with rate and scale parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.consts import LN_2
from statkit.distributions.support import ContinuousSupport
from statkit.distributions.variates import standard_exponential
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution.

    The exponential distribution is a continuous probability distribution that
    describes the time between events in a Poisson process. It has a single
    parameter: rate (λ) or scale (β = 1/λ).

    Probability density function (rate parametrization):
        f(x) = λ * exp(-λ * x) for x ≥ 0

    The exponential distribution is memoryless and is widely used in reliability
    engineering, queuing theory, and survival analysis.
    """

    def _rate(parameters: Parametrization) -> float:
        return cast(_Rate, parameters).lambda_

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for exponential distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with field:
            - lambda_: float (rate parameter)
        x : float
            Point at which to evaluate the probability density function

        Returns
        -------
        float
            Probability density value at x (0 for x < 0)
        """
        lam = _rate(parameters)
        return lam * math.exp(-lam * x) if x >= 0.0 else 0.0

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        lam = _rate(parameters)
        return math.log(lam) - lam * x if x >= 0.0 else -math.inf

    def cdf(parameters: Parametrization, x: float) -> float:
        """Cumulative distribution function ``1 - exp(-λx)``."""
        lam = _rate(parameters)
        return -math.expm1(-lam * x) if x > 0.0 else 0.0

    def sf(parameters: Parametrization, x: float) -> float:
        lam = _rate(parameters)
        return math.exp(-lam * x) if x > 0.0 else 1.0

    def ppf(parameters: Parametrization, p: float) -> float:
        """
        Percent point function ``-ln(1 - p) / λ``.

        Returns 0 for p = 0 and inf for p = 1.
        """
        if p == 1.0:
            return math.inf
        return -math.log1p(-p) / _rate(parameters)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of exponential distribution."""
        return 1.0 / _rate(parameters)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of exponential distribution."""
        return 1.0 / _rate(parameters) ** 2

    def skew_func(_1: Parametrization, _2: Any) -> float:
        """Skewness of exponential distribution (always 2)."""
        return 2.0

    def kurt_func(_1: Parametrization, _2: Any) -> float:
        """Excess kurtosis of exponential distribution (always 6)."""
        return 6.0

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        return 1.0 - math.log(_rate(parameters))

    def mode_func(_1: Parametrization, _2: Any) -> float:
        return 0.0

    def median_func(parameters: Parametrization, _: Any) -> float:
        return LN_2 / _rate(parameters)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of exponential distribution"""
        return ContinuousSupport(left=0.0)

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        return standard_exponential(rng) / _rate(parameters)

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["rate", "scale"],
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
    Exponential.__doc__ = EXPONENTIAL_DOC

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of exponential distribution.

        Parameters
        ----------
        lambda_ : float
            Rate parameter (λ)
        """

        lambda_: float

        @constraint(description="0 < lambda_ < inf")
        def check_lambda_positive(self) -> bool:
            """Check that rate parameter is positive."""
            return 0.0 < self.lambda_ < math.inf

    @parametrization(family=Exponential, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of exponential distribution.

        Parameters
        ----------
        beta : float
            Scale parameter (β = 1/λ)
        """

        beta: float

        @constraint(description="0 < beta < inf")
        def check_beta_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return 0.0 < self.beta < math.inf

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Rate parametrization.

            Returns
            -------
            Parametrization
                Rate parametrization instance
            """
            return _Rate(lambda_=1.0 / self.beta)

    ParametricFamilyRegister.register(Exponential)


__all__ = ["configure_exponential_family"]
