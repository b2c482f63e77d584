"""
Built-in discrete distribution families.

This module contains implementations of univariate discrete parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from statkit.families.builtins.discrete.binomial import (
    configure_bernoulli_family,
    configure_binomial_family,
)
from statkit.families.builtins.discrete.categorical import configure_categorical_family
from statkit.families.builtins.discrete.discrete_uniform import (
    configure_discrete_uniform_family,
)
from statkit.families.builtins.discrete.geometric import configure_geometric_family
from statkit.families.builtins.discrete.hypergeometric import configure_hypergeometric_family
from statkit.families.builtins.discrete.negative_binomial import (
    configure_negative_binomial_family,
)
from statkit.families.builtins.discrete.poisson import configure_poisson_family

__all__ = [
    "configure_bernoulli_family",
    "configure_binomial_family",
    "configure_poisson_family",
    "configure_geometric_family",
    "configure_negative_binomial_family",
    "configure_hypergeometric_family",
    "configure_discrete_uniform_family",
    "configure_categorical_family",
]
