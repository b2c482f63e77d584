"""
Descriptive Statistics
======================

Summary statistics of a finite sample: extremes, means, dispersion and
covariance. Samples are any finite sequence of numbers (list, tuple, NumPy
array); they are never mutated. A NaN observation propagates to a NaN result.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

import numpy as np

from statkit.errors import InsufficientDataError, InvalidArgumentError

if TYPE_CHECKING:
    import numpy.typing as npt

    type SampleLike = npt.ArrayLike
    type FloatArray = npt.NDArray[np.float64]


def as_sample(data: SampleLike, statistic: str, required: int = 1) -> FloatArray:
    """
    Convert ``data`` to a 1D float array with at least ``required`` observations.

    Raises
    ------
    InvalidArgumentError
        If ``data`` is not one-dimensional.
    InsufficientDataError
        If ``data`` has fewer than ``required`` observations.
    """
    arr = np.asarray(data, dtype=np.float64)
    if arr.ndim != 1:
        raise InvalidArgumentError(f"{statistic} expects a one-dimensional sample")
    if arr.size < required:
        raise InsufficientDataError(statistic, required, int(arr.size))
    return arr


def min(data: SampleLike) -> float:  # noqa: A001
    """Smallest observation."""
    return float(np.min(as_sample(data, "min")))


def max(data: SampleLike) -> float:  # noqa: A001
    """Largest observation."""
    return float(np.max(as_sample(data, "max")))


def abs_min(data: SampleLike) -> float:
    """Smallest absolute value of the observations."""
    return float(np.min(np.abs(as_sample(data, "abs_min"))))


def abs_max(data: SampleLike) -> float:
    """Largest absolute value of the observations."""
    return float(np.max(np.abs(as_sample(data, "abs_max"))))


def mean(data: SampleLike) -> float:
    """
    Arithmetic mean.

    Raises
    ------
    InsufficientDataError
        For an empty sample.
    """
    return float(np.mean(as_sample(data, "mean")))


def geometric_mean(data: SampleLike) -> float:
    """
    Geometric mean ``exp(mean(ln x))``.

    Zero observations give 0; negative observations give NaN.
    """
    arr = as_sample(data, "geometric_mean")
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.exp(np.mean(np.log(arr))))


def harmonic_mean(data: SampleLike) -> float:
    """Harmonic mean ``n / sum(1/x)``; a zero observation gives 0."""
    arr = as_sample(data, "harmonic_mean")
    with np.errstate(divide="ignore"):
        return float(arr.size / np.sum(1.0 / arr))


def quadratic_mean(data: SampleLike) -> float:
    """Root mean square ``sqrt(mean(x²))``."""
    arr = as_sample(data, "quadratic_mean")
    return float(np.sqrt(np.mean(arr * arr)))


def variance(data: SampleLike) -> float:
    """
    Unbiased sample variance (denominator ``n - 1``).

    Raises
    ------
    InsufficientDataError
        For fewer than two observations.
    """
    return float(np.var(as_sample(data, "variance", 2), ddof=1))


def population_variance(data: SampleLike) -> float:
    """Population variance (denominator ``n``)."""
    return float(np.var(as_sample(data, "population_variance"), ddof=0))


def std_dev(data: SampleLike) -> float:
    """Square root of the sample variance."""
    return math.sqrt(variance(data))


def population_std_dev(data: SampleLike) -> float:
    """Square root of the population variance."""
    return math.sqrt(population_variance(data))


def _paired(x: SampleLike, y: SampleLike, statistic: str, required: int) -> FloatArray:
    xs = as_sample(x, statistic, required)
    ys = as_sample(y, statistic, required)
    if xs.size != ys.size:
        raise InvalidArgumentError(
            f"{statistic} expects samples of equal length, got {xs.size} and {ys.size}"
        )
    return np.vstack((xs, ys))


def covariance(x: SampleLike, y: SampleLike) -> float:
    """
    Unbiased sample covariance of paired observations.

    Raises
    ------
    InvalidArgumentError
        If the samples differ in length.
    InsufficientDataError
        For fewer than two pairs.
    """
    return float(np.cov(_paired(x, y, "covariance", 2), ddof=1)[0, 1])


def population_covariance(x: SampleLike, y: SampleLike) -> float:
    """Population covariance of paired observations (denominator ``n``)."""
    return float(np.cov(_paired(x, y, "population_covariance", 1), ddof=0)[0, 1])


__all__ = [
    "as_sample",
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
]
