"""
Uniform distribution family implementation.

Contains the Uniform family with multiple parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from statkit.distributions.support import ContinuousSupport
from statkit.distributions.variates import uniform
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


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    UNIFORM_DOC = """
    Uniform (continuous) distribution.

    The uniform distribution is a continuous probability distribution where
    all intervals of the same length are equally probable. It is defined by
    two parameters: lower bound and upper bound.

    Probability density function:
        f(x) = 1/(upper_bound - lower_bound) for x in [lower_bound, upper_bound], 0 otherwise
    """

    def _bounds(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_Standard, parameters)
        return parameters.lower_bound, parameters.upper_bound

    def pdf(parameters: Parametrization, x: float) -> float:
        """
        Probability density function for uniform distribution.
            - For x < lower_bound: returns 0
            - For x > upper_bound: returns 0
            - Otherwise: returns (1 / (upper_bound - lower_bound))
        """
        lower, upper = _bounds(parameters)
        return 1.0 / (upper - lower) if lower <= x <= upper else 0.0

    def ln_pdf(parameters: Parametrization, x: float) -> float:
        lower, upper = _bounds(parameters)
        return -math.log(upper - lower) if lower <= x <= upper else -math.inf

    def cdf(parameters: Parametrization, x: float) -> float:
        lower, upper = _bounds(parameters)
        if x <= lower:
            return 0.0
        if x >= upper:
            return 1.0
        return (x - lower) / (upper - lower)

    def sf(parameters: Parametrization, x: float) -> float:
        lower, upper = _bounds(parameters)
        if x <= lower:
            return 1.0
        if x >= upper:
            return 0.0
        return (upper - x) / (upper - lower)

    def ppf(parameters: Parametrization, p: float) -> float:
        """
        Percent point function (inverse CDF) for uniform distribution.

        For uniform distribution on [lower_bound, upper_bound]:
        - For p = 0: returns lower_bound
        - For p = 1: returns upper_bound
        - For p in (0, 1): returns lower_bound + p × (upper_bound - lower_bound)
        """
        lower, upper = _bounds(parameters)
        if p == 1.0:
            return upper
        return lower + p * (upper - lower)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of uniform distribution."""
        lower, upper = _bounds(parameters)
        return 0.5 * (lower + upper)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of uniform distribution."""
        lower, upper = _bounds(parameters)
        return (upper - lower) ** 2 / 12.0

    def skew_func(_1: Parametrization, _2: Any) -> float:
        """Skewness of uniform distribution (always 0)."""
        return 0.0

    def kurt_func(_1: Parametrization, _2: Any) -> float:
        """Excess kurtosis of uniform distribution (always -6/5)."""
        return -1.2

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        lower, upper = _bounds(parameters)
        return math.log(upper - lower)

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of uniform distribution"""
        lower, upper = _bounds(parameters)
        return ContinuousSupport(
            left=lower,
            right=upper,
            left_closed=True,
            right_closed=True,
        )

    def _sampler(parameters: Parametrization, rng: RandomSource) -> float:
        lower, upper = _bounds(parameters)
        return lower + (upper - lower) * uniform(rng)

    Uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanWidth"],
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
            CharacteristicName.MODE: mean_func,
            CharacteristicName.MEDIAN: mean_func,
        },
        support_by_parametrization=_support,
        sampler=_sampler,
    )
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of uniform distribution.

        Parameters
        ----------
        lower_bound : float
            Lower bound of the distribution
        upper_bound : float
            Upper bound of the distribution
        """

        lower_bound: float
        upper_bound: float

        @constraint(description="bounds are finite")
        def check_bounds_finite(self) -> bool:
            return math.isfinite(self.lower_bound) and math.isfinite(self.upper_bound)

        @constraint(description="lower_bound < upper_bound")
        def check_lower_less_than_upper(self) -> bool:
            """Check that lower bound is less than upper bound."""
            return self.lower_bound < self.upper_bound

    @parametrization(family=Uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        """
        Mean-width parametrization of uniform distribution.

        Parameters
        ----------
        mean : float
            Mean (center) of the distribution
        width : float
            Width of the distribution (upper_bound - lower_bound)
        """

        mean: float
        width: float

        @constraint(description="mean is finite")
        def check_mean_finite(self) -> bool:
            return math.isfinite(self.mean)

        @constraint(description="0 < width < inf")
        def check_width_positive(self) -> bool:
            """Check that width is positive."""
            return 0.0 < self.width < math.inf

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            half_width = self.width / 2
            return _Standard(
                lower_bound=self.mean - half_width,
                upper_bound=self.mean + half_width,
            )

    ParametricFamilyRegister.register(Uniform)


__all__ = ["configure_uniform_family"]
