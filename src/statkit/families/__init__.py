"""
Parametric Families module for working with statistical distribution families.

This package provides the framework for defining, managing, and working with
parametric families of statistical distributions, and the built-in families
registered by :func:`configure_families_register`.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .configuration import configure_families_register, reset_families_register
from .distribution import (
    MultivariateContinuousDistribution,
    MultivariateDiscreteDistribution,
    ParametricFamilyDistribution,
    UnivariateContinuousDistribution,
    UnivariateDiscreteDistribution,
)
from .parametric_family import ParametricFamily
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import ParametricFamilyRegister

__all__ = [
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "ParametricFamily",
    "ParametricFamilyDistribution",
    "UnivariateContinuousDistribution",
    "UnivariateDiscreteDistribution",
    "MultivariateContinuousDistribution",
    "MultivariateDiscreteDistribution",
    "constraint",
    "parametrization",
    "configure_families_register",
    "reset_families_register",
]
