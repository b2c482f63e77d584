"""
Built-in continuous distribution families.

This module contains implementations of univariate continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from statkit.families.builtins.continuous.beta import configure_beta_family
from statkit.families.builtins.continuous.cauchy import configure_cauchy_family
from statkit.families.builtins.continuous.chi import configure_chi_family
from statkit.families.builtins.continuous.chi_squared import configure_chi_squared_family
from statkit.families.builtins.continuous.erlang import configure_erlang_family
from statkit.families.builtins.continuous.exponential import configure_exponential_family
from statkit.families.builtins.continuous.fisher_snedecor import (
    configure_fisher_snedecor_family,
)
from statkit.families.builtins.continuous.gamma import configure_gamma_family
from statkit.families.builtins.continuous.gumbel import configure_gumbel_family
from statkit.families.builtins.continuous.inverse_gamma import configure_inverse_gamma_family
from statkit.families.builtins.continuous.laplace import configure_laplace_family
from statkit.families.builtins.continuous.log_normal import configure_log_normal_family
from statkit.families.builtins.continuous.normal import configure_normal_family
from statkit.families.builtins.continuous.pareto import configure_pareto_family
from statkit.families.builtins.continuous.students_t import configure_students_t_family
from statkit.families.builtins.continuous.triangular import configure_triangular_family
from statkit.families.builtins.continuous.uniform import configure_uniform_family
from statkit.families.builtins.continuous.weibull import configure_weibull_family

__all__ = [
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
]
