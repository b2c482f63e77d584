"""
Dirichlet distribution family implementation.
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
from statkit.distributions.variates import standard_gamma
from statkit.errors import InvalidArgumentError, UndefinedQuantityError
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.linalg import as_vector
from statkit.prec import safe_exp
from statkit.special import digamma, ln_gamma
from statkit.types import CharacteristicName, FamilyName, MultivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource
    from statkit.linalg import FloatMatrix, FloatVector
    from statkit.types import DistributionType


def configure_dirichlet_family() -> None:
    """
    Configure and register the Dirichlet distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.DIRICHLET):
        return

    DIRICHLET_DOC = """
    Dirichlet distribution with concentrations α = (α₁, ..., α_K), K ≥ 2.

    Probability density function on the open probability simplex:
        f(x) = Π xᵢ^(αᵢ - 1) / B(α),  B(α) = Π Γ(αᵢ) / Γ(α₀),  α₀ = Σ αᵢ

    Points outside the simplex have zero density.
    """

    def _alpha(parameters: Parametrization) -> FloatVector:
        return cast(_Concentrations, parameters).alpha_vector

    def _ln_multivariate_beta(alpha: FloatVector) -> float:
        return math.fsum(ln_gamma(float(a)) for a in alpha) - ln_gamma(float(alpha.sum()))

    def _distribution_type(parameters: Parametrization) -> DistributionType:
        return MultivariateContinuous(_alpha(parameters).size)

    def ln_pdf(parameters: Parametrization, x: Any) -> float:
        alpha = _alpha(parameters)
        point = np.asarray(x, dtype=np.float64)
        if point.shape != alpha.shape:
            raise InvalidArgumentError(
                f"point of shape {point.shape} for a {alpha.size}-dimensional distribution"
            )
        if not SimplexSupport(alpha.size).contains(point):
            return -math.inf
        return float(np.sum((alpha - 1.0) * np.log(point))) - _ln_multivariate_beta(alpha)

    def pdf(parameters: Parametrization, x: Any) -> float:
        return safe_exp(ln_pdf(parameters, x))

    def mean_func(parameters: Parametrization, _: Any) -> FloatVector:
        alpha = _alpha(parameters)
        return alpha / alpha.sum()

    def cov_func(parameters: Parametrization, _: Any) -> FloatMatrix:
        alpha = _alpha(parameters)
        alpha0 = alpha.sum()
        mean = alpha / alpha0
        return (np.diag(mean) - np.outer(mean, mean)) / (alpha0 + 1.0)

    def var_func(parameters: Parametrization, _: Any) -> FloatVector:
        alpha = _alpha(parameters)
        alpha0 = alpha.sum()
        mean = alpha / alpha0
        return mean * (1.0 - mean) / (alpha0 + 1.0)

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        alpha = _alpha(parameters)
        alpha0 = float(alpha.sum())
        return (
            _ln_multivariate_beta(alpha)
            + (alpha0 - alpha.size) * digamma(alpha0)
            - math.fsum((float(a) - 1.0) * digamma(float(a)) for a in alpha)
        )

    def mode_func(parameters: Parametrization, _: Any) -> FloatVector:
        alpha = _alpha(parameters)
        if np.any(alpha <= 1.0):
            raise UndefinedQuantityError("mode of Dirichlet requires every concentration > 1")
        return (alpha - 1.0) / (alpha.sum() - alpha.size)

    def _support(parameters: Parametrization) -> SimplexSupport:
        return SimplexSupport(_alpha(parameters).size)

    def _sampler(parameters: Parametrization, rng: RandomSource) -> FloatVector:
        draws = np.array([standard_gamma(float(a), rng) for a in _alpha(parameters)])
        return draws / draws.sum()

    Dirichlet = ParametricFamily(
        name=FamilyName.DIRICHLET,
        distr_type=_distribution_type,
        distr_parametrizations=["concentrations"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LN_PDF: ln_pdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.COV: cov_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.ENTROPY: entropy_func,
            CharacteristicName.MODE: mode_func,
        },
        support_by_parametrization=_support,
        sampler=_sampler,
    )
    Dirichlet.__doc__ = DIRICHLET_DOC

    @parametrization(family=Dirichlet, name="concentrations")
    class _Concentrations(Parametrization):
        """
        Parameters
        ----------
        alpha : array_like
            Concentration parameters, at least two, all positive
        """

        alpha: Any
        alpha_vector: FloatVector = field(init=False, repr=False, compare=False)

        def __post_init__(self) -> None:
            alpha = as_vector(self.alpha, "alpha")
            object.__setattr__(self, "alpha", tuple(alpha.tolist()))
            object.__setattr__(self, "alpha_vector", alpha)

        @constraint(description="alpha has at least two entries")
        def check_dimension(self) -> bool:
            return self.alpha_vector.size >= 2

        @constraint(description="every alpha > 0")
        def check_alpha_positive(self) -> bool:
            return bool(np.all(self.alpha_vector > 0.0))

    ParametricFamilyRegister.register(Dirichlet)


__all__ = ["configure_dirichlet_family"]
