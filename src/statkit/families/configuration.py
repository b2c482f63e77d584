"""
Distribution Families Configuration
====================================

This module registers the built-in parametric distribution families of statkit:

- continuous univariate: Normal, LogNormal, ContinuousUniform, Exponential,
  Gamma, Erlang, ChiSquared, Chi, Beta, StudentsT, Cauchy, Laplace, Weibull,
  Pareto, Triangular, InverseGamma, FisherSnedecor, Gumbel;
- discrete univariate: Bernoulli, Binomial, Poisson, Geometric,
  NegativeBinomial, Hypergeometric, DiscreteUniform, Categorical;
- multivariate: MultivariateNormal, Dirichlet, Multinomial.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Families with several parametrizations convert them to the base one.
- Analytical implementations are provided where available, with fallbacks to
  numerical methods.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from statkit.families.builtins import (
    configure_bernoulli_family,
    configure_beta_family,
    configure_binomial_family,
    configure_categorical_family,
    configure_cauchy_family,
    configure_chi_family,
    configure_chi_squared_family,
    configure_dirichlet_family,
    configure_discrete_uniform_family,
    configure_erlang_family,
    configure_exponential_family,
    configure_fisher_snedecor_family,
    configure_gamma_family,
    configure_geometric_family,
    configure_gumbel_family,
    configure_hypergeometric_family,
    configure_inverse_gamma_family,
    configure_laplace_family,
    configure_log_normal_family,
    configure_multinomial_family,
    configure_multivariate_normal_family,
    configure_negative_binomial_family,
    configure_normal_family,
    configure_pareto_family,
    configure_poisson_family,
    configure_students_t_family,
    configure_triangular_family,
    configure_uniform_family,
    configure_weibull_family,
)
from statkit.families.registry import ParametricFamilyRegister

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    This function initializes all parametric families with their respective
    parametrizations, characteristics and sampling algorithms. It is safe to
    call repeatedly: families already registered are skipped.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_log_normal_family()
    configure_uniform_family()
    configure_exponential_family()
    configure_gamma_family()
    configure_erlang_family()
    configure_chi_squared_family()
    configure_chi_family()
    configure_beta_family()
    configure_students_t_family()
    configure_cauchy_family()
    configure_laplace_family()
    configure_weibull_family()
    configure_pareto_family()
    configure_triangular_family()
    configure_inverse_gamma_family()
    configure_fisher_snedecor_family()
    configure_gumbel_family()
    configure_bernoulli_family()
    configure_binomial_family()
    configure_poisson_family()
    configure_geometric_family()
    configure_negative_binomial_family()
    configure_hypergeometric_family()
    configure_discrete_uniform_family()
    configure_categorical_family()
    configure_multivariate_normal_family()
    configure_dirichlet_family()
    configure_multinomial_family()
    logger.debug("Configured %d distribution families", len(ParametricFamilyRegister.names()))
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()


__all__ = [
    "configure_families_register",
    "reset_families_register",
]
