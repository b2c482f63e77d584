"""
Statistics subpackage

Descriptive statistics (:mod:`.descriptive`) and order statistics
(:mod:`.order`) over finite samples, independent of any distribution.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .descriptive import (
    abs_max,
    abs_min,
    covariance,
    geometric_mean,
    harmonic_mean,
    max,
    mean,
    min,
    population_covariance,
    population_std_dev,
    population_variance,
    quadratic_mean,
    std_dev,
    variance,
)
from .order import (
    RankTieBreaker,
    interquartile_range,
    lower_quartile,
    median,
    order_statistic,
    percentile,
    quantile,
    ranks,
    upper_quartile,
)

__all__ = [
    # descriptive
    "min",
    "max",
    "abs_min",
    "abs_max",
    "mean",
    "geometric_mean",
    "harmonic_mean",
    "quadratic_mean",
    "variance",
    "population_variance",
    "std_dev",
    "population_std_dev",
    "covariance",
    "population_covariance",
    # order
    "RankTieBreaker",
    "order_statistic",
    "quantile",
    "percentile",
    "median",
    "lower_quartile",
    "upper_quartile",
    "interquartile_range",
    "ranks",
]
