"""
Normal distribution family implementation.

Contains the Normal family with multiple parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.consts import LN_SQRT_2PI, LN_SQRT_2PIE, SQRT_2, SQRT_2PI
from statkit.distributions.support import ContinuousSupport
from statkit.distributions.variates import standard_normal
from statkit.errors import DegenerateDistributionError
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.special import erfc, erfc_inv
from statkit.types import CharacteristicName, FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    The normal distribution is a continuous probability distribution characterized
    by its bell-shaped curve. It is symmetric about its mean and is defined by
    two parameters: mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    σ = 0 is allowed and gives the point mass at μ: the density is infinite at
    μ and zero elsewhere, the CDF is the unit step at μ.
    """

    def _degenerate(parameters: Parametrization, quantity: str) -> None:
        if cast(_MeanStd, parameters).sigma == 0.0:
            raise DegenerateDistributionError(f"{quantity} of a Normal with sigma = 0")

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - sigma: float (standard deviation)
        x : float
            Point at which to evaluate the probability density function

        Returns
        -------
        float
            Probability density value at x
        """
        parameters = cast(_MeanStd, parameters)
        mu, sigma = parameters.mu, parameters.sigma
        if sigma == 0.0:
            return math.inf if x == mu else 0.0

        z = (x - mu) / sigma
        return math.exp(-0.5 * z * z) / (sigma * SQRT_2PI)

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_MeanStd, parameters)
        mu, sigma = parameters.mu, parameters.sigma
        if sigma == 0.0:
            return math.inf if x == mu else -math.inf

        z = (x - mu) / sigma
        return -0.5 * z * z - math.log(sigma) - LN_SQRT_2PI

    def cdf(parameters: Parametrization, x: float) -> float:
        """
        Cumulative distribution function for normal distribution.

        Evaluated as ``erfc(-(x - μ) / (σ√2)) / 2``, which keeps full relative
        precision in the lower tail.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - sigma: float (standard deviation)
        x : float
            Point at which to evaluate the cumulative distribution function

        Returns
        -------
        float
            Probability P(X ≤ x)
        """
        parameters = cast(_MeanStd, parameters)
        mu, sigma = parameters.mu, parameters.sigma
        if sigma == 0.0:
            return 1.0 if x >= mu else 0.0
        return 0.5 * erfc(-(x - mu) / (sigma * SQRT_2))

    def sf(parameters: Parametrization, x: float) -> float:
        parameters = cast(_MeanStd, parameters)
        mu, sigma = parameters.mu, parameters.sigma
        if sigma == 0.0:
            return 0.0 if x >= mu else 1.0
        return 0.5 * erfc((x - mu) / (sigma * SQRT_2))

    def ppf(parameters: Parametrization, p: float) -> float:
        """
        Percent point function (inverse CDF) for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - sigma: float (standard deviation)
        p : float
            Probability from [0, 1]

        Returns
        -------
        float
            Quantile corresponding to probability p.
            If p is 0 or 1, then the result is -inf and inf correspondingly
        """
        parameters = cast(_MeanStd, parameters)
        mu, sigma = parameters.mu, parameters.sigma
        if sigma == 0.0:
            return mu
        if p == 0.0:
            return -math.inf
        if p == 1.0:
            return math.inf
        return mu - sigma * SQRT_2 * erfc_inv(2.0 * p)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of normal distribution."""
        return cast(_MeanStd, parameters).mu

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of normal distribution."""
        return cast(_MeanStd, parameters).sigma ** 2

    def std_func(parameters: Parametrization, _: Any) -> float:
        return cast(_MeanStd, parameters).sigma

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of normal distribution (always 0)."""
        _degenerate(parameters, "skewness")
        return 0.0

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        """Excess kurtosis of normal distribution (always 0)."""
        _degenerate(parameters, "kurtosis")
        return 0.0

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        _degenerate(parameters, "entropy")
        return math.log(cast(_MeanStd, parameters).sigma) + LN_SQRT_2PIE

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of normal distribution"""
        return ContinuousSupport()

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        parameters = cast(_MeanStd, parameters)
        return parameters.mu + parameters.sigma * standard_normal(rng)

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd", "meanPrec"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LN_PDF: ln_pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.STD_DEV: std_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.ENTROPY: entropy_func,
            CharacteristicName.MODE: mean_func,
            CharacteristicName.MEDIAN: mean_func,
        },
        support_by_parametrization=_support,
        sampler=_sampler,
    )
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        sigma : float
            Standard deviation of the distribution
        """

        mu: float
        sigma: float

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            return math.isfinite(self.mu)

        @constraint(description="0 <= sigma < inf")
        def check_sigma_non_negative(self) -> bool:
            """Check that standard deviation is non-negative and finite."""
            return 0.0 <= self.sigma < math.inf

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        tau : float
            Precision parameter (inverse variance)
        """

        mu: float
        tau: float

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            return math.isfinite(self.mu)

        @constraint(description="0 < tau < inf")
        def check_tau_positive(self) -> bool:
            """Check that precision parameter is positive."""
            return 0.0 < self.tau < math.inf

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            sigma = math.sqrt(1 / self.tau)
            return _MeanStd(mu=self.mu, sigma=sigma)

    ParametricFamilyRegister.register(Normal)


__all__ = ["configure_normal_family"]
