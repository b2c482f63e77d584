"""
Precision and Numeric Guards
============================

Tolerances, floating point comparisons and logarithm/exponential helpers
that never overflow. The iteration caps and accuracies used by the special
functions and the numerical fitters are defined here so that they can be
tuned in one place.

Notes
-----
``math.exp`` raises :class:`OverflowError` instead of returning ``inf``;
everything that may exponentiate a large argument goes through
:func:`safe_exp`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from statkit.consts import F64_EPSILON, F64_MAX_LN

if TYPE_CHECKING:
    from collections.abc import Iterable

DEFAULT_F64_ACC = 1e-15
"""Default accuracy of series and continued fraction evaluations."""

F64_PREC = 2.220446049250313e-16
"""Relative precision of a double (2^-52)."""

DEFAULT_RTOL = 1e-10
"""Default relative tolerance of root finding and round-trip comparisons."""

DEFAULT_ATOL = 1e-12
"""Default absolute tolerance of root finding."""

DEFAULT_MAX_ITER = 1000
"""Default iteration cap for continued fractions, series and root finders."""

BIG = 4503599627370496.0
"""2^52, renormalization threshold of the incomplete gamma continued fraction."""

BIG_INV = 2.22044604925031308085e-16
"""1 / 2^52"""


def almost_eq(a: float, b: float, acc: float = DEFAULT_F64_ACC) -> bool:
    """
    Compare two floats within an absolute accuracy.

    Infinities compare equal to themselves; ``nan`` never compares equal.
    """
    if math.isinf(a) or math.isinf(b):
        return a == b
    return abs(a - b) < acc


def rel_eq(a: float, b: float, rtol: float = DEFAULT_RTOL, atol: float = 0.0) -> bool:
    """Compare two floats with a relative tolerance and an optional absolute floor."""
    if math.isinf(a) or math.isinf(b):
        return a == b
    return abs(a - b) <= max(rtol * max(abs(a), abs(b)), atol)


def is_integer(x: float) -> bool:
    """Return ``True`` if ``x`` is a finite float with no fractional part."""
    return math.isfinite(x) and x == math.floor(x)


def safe_exp(x: float) -> float:
    """
    Exponential that saturates instead of raising.

    Returns ``inf`` above the largest finite exponent and ``0.0`` for ``-inf``.
    """
    if math.isnan(x):
        return math.nan
    if x > F64_MAX_LN:
        return math.inf
    return math.exp(x)


def safe_log(x: float) -> float:
    """Natural logarithm with ``safe_log(0) = -inf``; negative input raises ``ValueError``."""
    if x == 0.0:
        return -math.inf
    if math.isinf(x) and x > 0:
        return math.inf
    return math.log(x)


def xlogy(x: float, y: float) -> float:
    """``x * log(y)`` with the convention ``0 * log(0) = 0``."""
    if x == 0.0 and not math.isnan(y):
        return 0.0
    return x * safe_log(y)


def xlog1py(x: float, y: float) -> float:
    """``x * log1p(y)`` with the convention ``0 * log1p(-1) = 0``."""
    if x == 0.0 and not math.isnan(y):
        return 0.0
    if y == -1.0:
        return -math.inf if x > 0 else math.inf
    return x * math.log1p(y)


def log1pexp(x: float) -> float:
    """``log(1 + exp(x))`` without overflow."""
    if x > 33.3:
        return x
    if x > -37.0:
        return math.log1p(math.exp(x))
    return math.exp(x)


def log_sum_exp(values: Iterable[float]) -> float:
    """Stable ``log(sum(exp(v)))``; ``-inf`` for an empty input."""
    vals = list(values)
    if not vals:
        return -math.inf
    m = max(vals)
    if math.isinf(m):
        return m
    return m + math.log(math.fsum(math.exp(v - m) for v in vals))


def clamp_probability(p: float) -> float:
    """Clip rounding noise so that a probability lies in ``[0, 1]``."""
    if p < 0.0:
        return 0.0
    if p > 1.0:
        return 1.0
    return p


__all__ = [
    "DEFAULT_F64_ACC",
    "F64_PREC",
    "F64_EPSILON",
    "DEFAULT_RTOL",
    "DEFAULT_ATOL",
    "DEFAULT_MAX_ITER",
    "BIG",
    "BIG_INV",
    "almost_eq",
    "rel_eq",
    "is_integer",
    "safe_exp",
    "safe_log",
    "xlogy",
    "xlog1py",
    "log1pexp",
    "log_sum_exp",
    "clamp_probability",
]
