"""
Order Statistics
================

Order statistics, empirical quantiles and ranks of a finite sample. Every
function sorts a copy of the sample.

Quantiles interpolate linearly between adjacent order statistics (NumPy's
``"linear"`` method): for a sorted sample ``x₁ ≤ ... ≤ xₙ`` and ``h = (n-1)τ``,
``quantile(τ) = x_{⌊h⌋+1} + (h - ⌊h⌋)(x_{⌊h⌋+2} - x_{⌊h⌋+1})``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np
from scipy.stats import rankdata

from statkit.errors import InvalidArgumentError
from statkit.prec import is_integer
from statkit.statistics.descriptive import as_sample

if TYPE_CHECKING:
    from statkit.statistics.descriptive import FloatArray, SampleLike


class RankTieBreaker(StrEnum):
    """
    How tied observations are ranked.

    Attributes
    ----------
    AVERAGE
        Ties share the mean of the ranks they span.
    MIN
        Ties share the smallest rank they span.
    MAX
        Ties share the largest rank they span.
    FIRST
        Ties are ranked in order of appearance.
    """

    AVERAGE = "average"
    MIN = "min"
    MAX = "max"
    FIRST = "ordinal"


def order_statistic(data: SampleLike, k: int) -> float:
    """
    The ``k``-th smallest observation, 1-based.

    Raises
    ------
    InvalidArgumentError
        If ``k`` is not an integer in ``[1, n]``.
    """
    arr = as_sample(data, "order_statistic")
    if not is_integer(k) or not 1 <= k <= arr.size:
        raise InvalidArgumentError(f"order_statistic rank k = {k} outside [1, {arr.size}]")
    return float(np.sort(arr)[int(k) - 1])


def _quantile(arr: FloatArray, tau: float) -> float:
    if not 0.0 <= tau <= 1.0:
        raise InvalidArgumentError(f"quantile level tau = {tau} outside [0, 1]")
    return float(np.quantile(arr, tau, method="linear"))


def quantile(data: SampleLike, tau: float) -> float:
    """
    Empirical quantile at level ``tau``.

    Parameters
    ----------
    data : array_like
        Non-empty sample.
    tau : float
        Level in ``[0, 1]``.

    Returns
    -------
    float
        Linear interpolation between adjacent order statistics; NaN if the
        sample contains NaN.

    Raises
    ------
    InvalidArgumentError
        If ``tau`` lies outside ``[0, 1]``.
    InsufficientDataError
        For an empty sample.
    """
    return _quantile(as_sample(data, "quantile"), tau)


def percentile(data: SampleLike, p: float) -> float:
    """Empirical percentile, ``p`` in ``[0, 100]``."""
    if not 0.0 <= p <= 100.0:
        raise InvalidArgumentError(f"percentile p = {p} outside [0, 100]")
    return _quantile(as_sample(data, "percentile"), p / 100.0)


def median(data: SampleLike) -> float:
    return _quantile(as_sample(data, "median"), 0.5)


def lower_quartile(data: SampleLike) -> float:
    return _quantile(as_sample(data, "lower_quartile"), 0.25)


def upper_quartile(data: SampleLike) -> float:
    return _quantile(as_sample(data, "upper_quartile"), 0.75)


def interquartile_range(data: SampleLike) -> float:
    """Difference between the upper and the lower quartile."""
    arr = as_sample(data, "interquartile_range")
    return _quantile(arr, 0.75) - _quantile(arr, 0.25)


def ranks(
    data: SampleLike, tie_breaker: RankTieBreaker = RankTieBreaker.AVERAGE
) -> FloatArray:
    """
    1-based ranks of the observations in their original order.

    Parameters
    ----------
    data : array_like
        Sample; an empty sample gives an empty array.
    tie_breaker : RankTieBreaker, default AVERAGE
        Ranking of tied observations.

    Returns
    -------
    numpy.ndarray
        Ranks as floats; all NaN if the sample contains NaN.
    """
    arr = as_sample(data, "ranks", 0)
    return np.asarray(rankdata(arr, method=RankTieBreaker(tie_breaker).value), dtype=np.float64)


__all__ = [
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
