"""
Multinomial distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import field
from typing import TYPE_CHECKING, cast

import numpy as np

from statkit.distributions.support import SimplexSupport
from statkit.distributions.variates import binomial
from statkit.errors import InvalidArgumentError
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.linalg import as_vector
from statkit.prec import is_integer, safe_exp, xlogy
from statkit.special import ln_factorial
from statkit.types import CharacteristicName, FamilyName, MultivariateDiscrete

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource
    from statkit.linalg import FloatMatrix, FloatVector
    from statkit.types import DistributionType


def configure_multinomial_family() -> None:
    """
    Configure and register the Multinomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.MULTINOMIAL):
        return

    MULTINOMIAL_DOC = """
    Multinomial distribution: category counts of n independent draws from a
    categorical distribution with K ≥ 2 outcome probabilities p.

    Probability mass function:
        P(X = x) = n! / (x₁! ... x_K!) Π pᵢ^xᵢ

    for count vectors x with Σ xᵢ = n. The probability weights are normalized.
    """

    def _params(parameters: Parametrization) -> tuple[FloatVector, int]:
        parameters = cast(_TrialsProbabilities, parameters)
        return parameters.probability_vector, int(parameters.n)

    def _distribution_type(parameters: Parametrization) -> DistributionType:
        return MultivariateDiscrete(_params(parameters)[0].size)

    def ln_pmf(parameters: Parametrization, x: Any) -> float:
        p, n = _params(parameters)
        counts = np.asarray(x, dtype=np.float64)
        if counts.shape != p.shape:
            raise InvalidArgumentError(
                f"point of shape {counts.shape} for a {p.size}-category distribution"
            )
        if not SimplexSupport(p.size, total=n, integer=True).contains(counts):
            return -math.inf
        result = ln_factorial(n)
        for xi, pi in zip(counts.tolist(), p.tolist(), strict=True):
            result += xlogy(xi, pi) - ln_factorial(int(xi))
        return result

    def pmf(parameters: Parametrization, x: Any) -> float:
        return safe_exp(ln_pmf(parameters, x))

    def mean_func(parameters: Parametrization, _: Any) -> FloatVector:
        p, n = _params(parameters)
        return n * p

    def cov_func(parameters: Parametrization, _: Any) -> FloatMatrix:
        p, n = _params(parameters)
        return n * (np.diag(p) - np.outer(p, p))

    def var_func(parameters: Parametrization, _: Any) -> FloatVector:
        p, n = _params(parameters)
        return n * p * (1.0 - p)

    def _support(parameters: Parametrization) -> SimplexSupport:
        p, n = _params(parameters)
        return SimplexSupport(p.size, total=n, integer=True)

    def _sampler(parameters: Parametrization, rng: RandomSource) -> FloatVector:
        # sequential conditional binomials
        p, n = _params(parameters)
        counts = np.zeros(p.size)
        remaining = n
        remaining_mass = 1.0
        for i in range(p.size - 1):
            if remaining == 0:
                break
            conditional = p[i] / remaining_mass if remaining_mass > 0.0 else 1.0
            counts[i] = binomial(remaining, min(conditional, 1.0), rng)
            remaining -= int(counts[i])
            remaining_mass -= p[i]
        counts[-1] += remaining
        return counts

    Multinomial = ParametricFamily(
        name=FamilyName.MULTINOMIAL,
        distr_type=_distribution_type,
        distr_parametrizations=["trialsProbabilities"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.LN_PMF: ln_pmf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.COV: cov_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
        sampler=_sampler,
    )
    Multinomial.__doc__ = MULTINOMIAL_DOC

    @parametrization(family=Multinomial, name="trialsProbabilities")
    class _TrialsProbabilities(Parametrization):
        """
        Parameters
        ----------
        probabilities : array_like
            Non-negative category weights, at least two
        n : int
            Number of trials
        """

        probabilities: Any
        n: int
        probability_vector: FloatVector = field(init=False, repr=False, compare=False)

        def __post_init__(self) -> None:
            weights = as_vector(self.probabilities, "probabilities")
            object.__setattr__(self, "probabilities", tuple(weights.tolist()))
            total = weights.sum()
            object.__setattr__(
                self, "probability_vector", weights / total if total > 0.0 else weights
            )

        @constraint(description="probabilities has at least two entries")
        def check_dimension(self) -> bool:
            return self.probability_vector.size >= 2

        @constraint(description="probabilities are non-negative with a positive sum")
        def check_probabilities(self) -> bool:
            weights = np.asarray(self.probabilities)
            return bool(np.all(weights >= 0.0) and weights.sum() > 0.0)

        @constraint(description="n is a non-negative integer")
        def check_n_non_negative_integer(self) -> bool:
            return is_integer(self.n) and self.n >= 0

    ParametricFamilyRegister.register(Multinomial)


__all__ = ["configure_multinomial_family"]
