"""
Categorical distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from bisect import bisect_left
from dataclasses import field
from itertools import accumulate
from typing import TYPE_CHECKING, cast

from statkit.distributions.support import IntegerSupport
from statkit.errors import DegenerateDistributionError
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.prec import is_integer, xlogy
from statkit.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any


def configure_categorical_family() -> None:
    """
    Configure and register the Categorical distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CATEGORICAL):
        return

    CATEGORICAL_DOC = """
    Categorical distribution over the outcomes {0, 1, ..., K-1}.

    The parameter is a vector of non-negative weights; it is normalized to
    probabilities, so ``[1, 3]`` and ``[0.25, 0.75]`` describe the same
    distribution.
    """

    def _probs(parameters: Parametrization) -> tuple[float, ...]:
        return cast(_Weights, parameters).normalized

    def _cumulative(parameters: Parametrization) -> tuple[float, ...]:
        return cast(_Weights, parameters).cumulative

    def _moment(parameters: Parametrization, order: int, center: float = 0.0) -> float:
        return math.fsum(p * (k - center) ** order for k, p in enumerate(_probs(parameters)))

    def pmf(parameters: Parametrization, x: float) -> float:
        probs = _probs(parameters)
        if not is_integer(x) or x < 0 or x >= len(probs):
            return 0.0
        return probs[int(x)]

    def ln_pmf(parameters: Parametrization, x: float) -> float:
        p = pmf(parameters, x)
        return math.log(p) if p > 0.0 else -math.inf

    def cdf(parameters: Parametrization, x: float) -> float:
        cum = _cumulative(parameters)
        if x < 0:
            return 0.0
        if x >= len(cum) - 1:
            return 1.0
        return cum[math.floor(x)]

    def sf(parameters: Parametrization, x: float) -> float:
        probs = _probs(parameters)
        if x < 0:
            return 1.0
        if x >= len(probs) - 1:
            return 0.0
        return math.fsum(probs[math.floor(x) + 1 :])

    def ppf(parameters: Parametrization, q: float) -> float:
        cum = _cumulative(parameters)
        return float(min(bisect_left(cum, q), len(cum) - 1))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return _moment(parameters, 1)

    def var_func(parameters: Parametrization, _: Any) -> float:
        return _moment(parameters, 2, _moment(parameters, 1))

    def _standardized(parameters: Parametrization, order: int, quantity: str) -> float:
        mean = _moment(parameters, 1)
        var = _moment(parameters, 2, mean)
        if var == 0.0:
            raise DegenerateDistributionError(f"{quantity} of a single-outcome Categorical")
        return _moment(parameters, order, mean) / var ** (order / 2.0)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        return _standardized(parameters, 3, "skewness")

    def kurt_func(parameters: Parametrization, _: Any) -> float:
        return _standardized(parameters, 4, "kurtosis") - 3.0

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        return -math.fsum(xlogy(p, p) for p in _probs(parameters))

    def mode_func(parameters: Parametrization, _: Any) -> float:
        probs = _probs(parameters)
        return float(max(range(len(probs)), key=probs.__getitem__))

    def median_func(parameters: Parametrization, _: Any) -> float:
        return ppf(parameters, 0.5)

    def _support(parameters: Parametrization) -> IntegerSupport:
        return IntegerSupport(0, len(_probs(parameters)) - 1)

    Categorical = ParametricFamily(
        name=FamilyName.CATEGORICAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["weights"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.LN_PMF: ln_pmf,
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
    )
    Categorical.__doc__ = CATEGORICAL_DOC

    @parametrization(family=Categorical, name="weights")
    class _Weights(Parametrization):
        """
        Parameters
        ----------
        probabilities : sequence of float
            Non-negative outcome weights, normalized on construction
        """

        probabilities: tuple[float, ...]
        normalized: tuple[float, ...] = field(init=False, repr=False, compare=False)
        cumulative: tuple[float, ...] = field(init=False, repr=False, compare=False)

        def __post_init__(self) -> None:
            weights = tuple(float(w) for w in self.probabilities)
            object.__setattr__(self, "probabilities", weights)
            total = math.fsum(weights) if all(math.isfinite(w) for w in weights) else math.nan
            if not (total > 0.0 and math.isfinite(total)):
                # rejected by validate(); keep the derived fields well-formed
                object.__setattr__(self, "normalized", weights)
                object.__setattr__(self, "cumulative", weights)
                return
            normalized = tuple(w / total for w in weights)
            cumulative = list(accumulate(normalized))
            cumulative[-1] = 1.0
            object.__setattr__(self, "normalized", normalized)
            object.__setattr__(self, "cumulative", tuple(cumulative))

        @constraint(description="probabilities is non-empty")
        def check_non_empty(self) -> bool:
            return len(self.probabilities) > 0

        @constraint(description="probabilities are finite and non-negative")
        def check_non_negative(self) -> bool:
            return all(math.isfinite(w) and w >= 0.0 for w in self.probabilities)

        @constraint(description="probabilities have a positive sum")
        def check_positive_sum(self) -> bool:
            return sum(self.probabilities) > 0.0

    ParametricFamilyRegister.register(Categorical)


__all__ = ["configure_categorical_family"]
