"""
Built-in multivariate distribution families.

This module contains implementations of multivariate parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from statkit.families.builtins.multivariate.dirichlet import configure_dirichlet_family
from statkit.families.builtins.multivariate.multinomial import configure_multinomial_family
from statkit.families.builtins.multivariate.multivariate_normal import (
    configure_multivariate_normal_family,
)

__all__ = [
    "configure_multivariate_normal_family",
    "configure_dirichlet_family",
    "configure_multinomial_family",
]
