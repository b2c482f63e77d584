"""
Factorials and Binomial Coefficients
====================================

Factorial, log-factorial, binomial and multinomial coefficients. Factorials
up to ``170!`` come from a precomputed table; larger arguments overflow a
double and the logarithmic forms fall back to :func:`~statkit.special.gamma.ln_gamma`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from statkit.errors import InvalidArgumentError
from statkit.prec import safe_exp
from statkit.special.gamma import ln_gamma

if TYPE_CHECKING:
    from collections.abc import Sequence

MAX_FACTORIAL = 170
"""Largest ``n`` with a finite ``n!`` in double precision."""


def _build_cache() -> tuple[float, ...]:
    cache = [1.0] * (MAX_FACTORIAL + 1)
    for i in range(1, MAX_FACTORIAL + 1):
        cache[i] = cache[i - 1] * i
    return tuple(cache)


_FCACHE = _build_cache()


def _round_count(ln_value: float) -> float:
    value = safe_exp(ln_value)
    if math.isinf(value):
        return value
    return float(math.floor(0.5 + value))


def _check_non_negative(n: int, name: str) -> None:
    if n < 0:
        raise InvalidArgumentError(f"{name} requires a non-negative integer, got {n}")


def factorial(n: int) -> float:
    """``n!`` as a float; ``inf`` for ``n > 170``."""
    _check_non_negative(n, "factorial")
    if n > MAX_FACTORIAL:
        return math.inf
    return _FCACHE[n]


def ln_factorial(n: int) -> float:
    """``ln(n!)``, finite for every non-negative ``n``."""
    _check_non_negative(n, "ln_factorial")
    if n <= MAX_FACTORIAL:
        return math.log(_FCACHE[n])
    return ln_gamma(n + 1.0)


def binomial(n: int, k: int) -> float:
    """Binomial coefficient ``n choose k``; ``0`` when ``k > n``."""
    _check_non_negative(n, "binomial")
    _check_non_negative(k, "binomial")
    if k > n:
        return 0.0
    return _round_count(ln_binomial(n, k))


def ln_binomial(n: int, k: int) -> float:
    """``ln(n choose k)``; ``-inf`` when ``k > n``."""
    _check_non_negative(n, "ln_binomial")
    _check_non_negative(k, "ln_binomial")
    if k > n:
        return -math.inf
    return ln_factorial(n) - ln_factorial(k) - ln_factorial(n - k)


def multinomial(n: int, ni: Sequence[int]) -> float:
    """
    Multinomial coefficient ``n! / (n1! n2! ...)``.

    Raises
    ------
    InvalidArgumentError
        If the counts ``ni`` do not sum to ``n``.
    """
    _check_non_negative(n, "multinomial")
    total = 0
    ln_value = ln_factorial(n)
    for count in ni:
        _check_non_negative(count, "multinomial")
        total += count
        ln_value -= ln_factorial(count)
    if total != n:
        raise InvalidArgumentError(f"multinomial: counts sum to {total}, expected {n}")
    return _round_count(ln_value)


__all__ = [
    "MAX_FACTORIAL",
    "factorial",
    "ln_factorial",
    "binomial",
    "ln_binomial",
    "multinomial",
]
