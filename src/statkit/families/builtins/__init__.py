"""
Built-in distribution families for statkit.

This package contains implementations of standard statistical distribution families
that are available by default in statkit.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from statkit.families.builtins.continuous import (
    configure_beta_family,
    configure_cauchy_family,
    configure_chi_family,
    configure_chi_squared_family,
    configure_erlang_family,
    configure_exponential_family,
    configure_fisher_snedecor_family,
    configure_gamma_family,
    configure_gumbel_family,
    configure_inverse_gamma_family,
    configure_laplace_family,
    configure_log_normal_family,
    configure_normal_family,
    configure_pareto_family,
    configure_students_t_family,
    configure_triangular_family,
    configure_uniform_family,
    configure_weibull_family,
)
from statkit.families.builtins.discrete import (
    configure_bernoulli_family,
    configure_binomial_family,
    configure_categorical_family,
    configure_discrete_uniform_family,
    configure_geometric_family,
    configure_hypergeometric_family,
    configure_negative_binomial_family,
    configure_poisson_family,
)
from statkit.families.builtins.multivariate import (
    configure_dirichlet_family,
    configure_multinomial_family,
    configure_multivariate_normal_family,
)

__all__ = [
    # continuous
    "configure_normal_family",
    "configure_log_normal_family",
    "configure_uniform_family",
    "configure_exponential_family",
    "configure_gamma_family",
    "configure_erlang_family",
    "configure_chi_squared_family",
    "configure_chi_family",
    "configure_beta_family",
    "configure_students_t_family",
    "configure_cauchy_family",
    "configure_laplace_family",
    "configure_weibull_family",
    "configure_pareto_family",
    "configure_triangular_family",
    "configure_inverse_gamma_family",
    "configure_fisher_snedecor_family",
    "configure_gumbel_family",
    # discrete
    "configure_bernoulli_family",
    "configure_binomial_family",
    "configure_poisson_family",
    "configure_geometric_family",
    "configure_negative_binomial_family",
    "configure_hypergeometric_family",
    "configure_discrete_uniform_family",
    "configure_categorical_family",
    # multivariate
    "configure_multivariate_normal_family",
    "configure_dirichlet_family",
    "configure_multinomial_family",
]
