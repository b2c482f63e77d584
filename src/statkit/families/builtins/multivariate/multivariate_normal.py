"""
Multivariate normal distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import field
from typing import TYPE_CHECKING, cast

import numpy as np

from statkit.consts import LN_SQRT_2PI, LN_SQRT_2PIE
from statkit.distributions.variates import standard_normal
from statkit.errors import InvalidArgumentError
from statkit.families.parametric_family import ParametricFamily
from statkit.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from statkit.families.registry import ParametricFamilyRegister
from statkit.linalg import (
    as_square_matrix,
    as_vector,
    cholesky,
    inverse,
    is_symmetric,
    log_determinant_from_cholesky,
    solve_lower,
)
from statkit.prec import safe_exp
from statkit.types import CharacteristicName, FamilyName, MultivariateContinuous

if TYPE_CHECKING:
    from typing import Any

    from statkit.distributions.variates import RandomSource
    from statkit.linalg import FloatMatrix, FloatVector
    from statkit.types import DistributionType


def configure_multivariate_normal_family() -> None:
    """
    Configure and register the MultivariateNormal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.MULTIVARIATE_NORMAL):
        return

    MULTIVARIATE_NORMAL_DOC = """
    Multivariate normal distribution N(μ, Σ) in d ≥ 2 dimensions.

    Probability density function:
        f(x) = (2π)^(-d/2) det(Σ)^(-1/2) exp(-½ (x-μ)ᵀ Σ⁻¹ (x-μ))

    The covariance must be symmetric positive definite. Densities are
    evaluated through the Cholesky factor L of Σ (Σ = L Lᵀ): the quadratic
    form is |L⁻¹(x-μ)|² and ln det(Σ) = 2 Σ ln Lᵢᵢ.
    """

    def _params(parameters: Parametrization) -> tuple[FloatVector, FloatMatrix, Any]:
        parameters = cast(_MeanCovariance, parameters)
        return parameters.mean_vector, parameters.covariance_matrix, parameters.cholesky_factor

    def _distribution_type(parameters: Parametrization) -> DistributionType:
        return MultivariateContinuous(cast(_MeanCovariance, parameters).dimension)

    def ln_pdf(parameters: Parametrization, x: Any) -> float:
        mu, _, lower = _params(parameters)
        point = np.asarray(x, dtype=np.float64)
        if point.shape != mu.shape:
            raise InvalidArgumentError(
                f"point of shape {point.shape} for a {mu.size}-dimensional distribution"
            )
        if not np.all(np.isfinite(point)):
            return -math.inf
        z = solve_lower(lower, point - mu)
        return (
            -mu.size * LN_SQRT_2PI
            - 0.5 * log_determinant_from_cholesky(lower)
            - 0.5 * float(np.dot(z, z))
        )

    def pdf(parameters: Parametrization, x: Any) -> float:
        return safe_exp(ln_pdf(parameters, x))

    def mean_func(parameters: Parametrization, _: Any) -> FloatVector:
        return _params(parameters)[0].copy()

    def cov_func(parameters: Parametrization, _: Any) -> FloatMatrix:
        return _params(parameters)[1].copy()

    def var_func(parameters: Parametrization, _: Any) -> FloatVector:
        return np.diag(_params(parameters)[1]).copy()

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        mu, _, lower = _params(parameters)
        return mu.size * LN_SQRT_2PIE + 0.5 * log_determinant_from_cholesky(lower)

    def mode_func(parameters: Parametrization, _: Any) -> FloatVector:
        return _params(parameters)[0].copy()

    def _sampler(parameters: Parametrization, rng: RandomSource) -> FloatVector:
        mu, _, lower = _params(parameters)
        z = np.array([standard_normal(rng) for _ in range(mu.size)])
        return mu + lower @ z

    MultivariateNormal = ParametricFamily(
        name=FamilyName.MULTIVARIATE_NORMAL,
        distr_type=_distribution_type,
        distr_parametrizations=["meanCovariance", "meanPrecision"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LN_PDF: ln_pdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.COV: cov_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.ENTROPY: entropy_func,
            CharacteristicName.MODE: mode_func,
        },
        sampler=_sampler,
    )
    MultivariateNormal.__doc__ = MULTIVARIATE_NORMAL_DOC

    @parametrization(family=MultivariateNormal, name="meanCovariance")
    class _MeanCovariance(Parametrization):
        """
        Parameters
        ----------
        mean : array_like
            Mean vector μ of length d ≥ 2
        covariance : array_like
            Symmetric positive definite d×d covariance matrix Σ
        """

        mean: Any
        covariance: Any
        mean_vector: FloatVector = field(init=False, repr=False, compare=False)
        covariance_matrix: FloatMatrix = field(init=False, repr=False, compare=False)
        cholesky_factor: FloatMatrix | None = field(init=False, repr=False, compare=False)

        def __post_init__(self) -> None:
            mu = as_vector(self.mean, "mean")
            cov = as_square_matrix(self.covariance, mu.size, "covariance")
            object.__setattr__(self, "mean", tuple(mu.tolist()))
            object.__setattr__(self, "covariance", tuple(map(tuple, cov.tolist())))
            object.__setattr__(self, "mean_vector", mu)
            object.__setattr__(self, "covariance_matrix", cov)
            object.__setattr__(self, "cholesky_factor", cholesky(cov))

        @property
        def dimension(self) -> int:
            return int(self.mean_vector.size)

        @constraint(description="dimension >= 2")
        def check_dimension(self) -> bool:
            return self.dimension >= 2

        @constraint(description="covariance is symmetric")
        def check_covariance_symmetric(self) -> bool:
            return is_symmetric(self.covariance_matrix)

        @constraint(description="covariance is positive definite")
        def check_covariance_positive_definite(self) -> bool:
            return self.cholesky_factor is not None

    @parametrization(family=MultivariateNormal, name="meanPrecision")
    class _MeanPrecision(Parametrization):
        """
        Parameters
        ----------
        mean : array_like
            Mean vector μ of length d ≥ 2
        precision : array_like
            Symmetric positive definite d×d precision matrix Σ⁻¹
        """

        mean: Any
        precision: Any
        precision_matrix: FloatMatrix = field(init=False, repr=False, compare=False)

        def __post_init__(self) -> None:
            mu = as_vector(self.mean, "mean")
            precision = as_square_matrix(self.precision, mu.size, "precision")
            object.__setattr__(self, "mean", tuple(mu.tolist()))
            object.__setattr__(self, "precision", tuple(map(tuple, precision.tolist())))
            object.__setattr__(self, "precision_matrix", precision)

        @constraint(description="dimension >= 2")
        def check_dimension(self) -> bool:
            return self.precision_matrix.shape[0] >= 2

        @constraint(description="precision is symmetric")
        def check_precision_symmetric(self) -> bool:
            return is_symmetric(self.precision_matrix)

        @constraint(description="precision is positive definite")
        def check_precision_positive_definite(self) -> bool:
            return cholesky(self.precision_matrix) is not None

        def transform_to_base_parametrization(self) -> Parametrization:
            covariance = inverse(self.precision_matrix)
            # symmetrize away the rounding of the inversion
            covariance = 0.5 * (covariance + covariance.T)
            return _MeanCovariance(mean=self.mean, covariance=covariance)

    ParametricFamilyRegister.register(MultivariateNormal)


__all__ = ["configure_multivariate_normal_family"]
