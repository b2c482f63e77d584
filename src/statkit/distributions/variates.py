"""
Random Variates
===============

The injected source of randomness and the standard variates every sampler
is built from. A random source is any object with a ``random()`` method
returning a uniform float in ``[0, 1)``: :class:`numpy.random.Generator` and
:class:`random.Random` both qualify. No global random state is used.

Algorithms
----------
- :func:`standard_normal`: Marsaglia's polar form of the Box-Muller transform.
- :func:`standard_exponential`: inversion.
- :func:`standard_gamma`: Marsaglia & Tsang (2000) squeeze method, with the
  ``U^(1/a)`` boost for shapes below one.
- :func:`poisson`: Knuth's multiplication method for small means, Hörmann's
  transformed rejection with squeeze (PTRS, 1993) otherwise.
- :func:`binomial`: direct Bernoulli counting for small ``n``, otherwise
  Knuth's recursive splitting on a beta order statistic.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Protocol, runtime_checkable

from statkit.special import ln_gamma

_POISSON_PTRS_THRESHOLD = 10.0
_BINOMIAL_DIRECT_THRESHOLD = 40


@runtime_checkable
class RandomSource(Protocol):
    """Source of i.i.d. uniform floats in ``[0, 1)``."""

    def random(self) -> float: ...


def uniform(rng: RandomSource) -> float:
    """Uniform variate in ``[0, 1)``."""
    return float(rng.random())


def open_uniform(rng: RandomSource) -> float:
    """Uniform variate in ``(0, 1)``."""
    while True:
        u = float(rng.random())
        if u > 0.0:
            return u


def standard_normal(rng: RandomSource) -> float:
    """Standard normal variate (polar Box-Muller)."""
    while True:
        u = 2.0 * float(rng.random()) - 1.0
        v = 2.0 * float(rng.random()) - 1.0
        s = u * u + v * v
        if 0.0 < s < 1.0:
            return u * math.sqrt(-2.0 * math.log(s) / s)


def standard_exponential(rng: RandomSource) -> float:
    """Exponential variate with unit rate."""
    return -math.log1p(-float(rng.random()))


def standard_gamma(shape: float, rng: RandomSource) -> float:
    """Gamma variate with the given shape and unit rate (Marsaglia-Tsang)."""
    if shape < 1.0:
        boost = math.exp(math.log(open_uniform(rng)) / shape)
        return standard_gamma(shape + 1.0, rng) * boost

    d = shape - 1.0 / 3.0
    c = 1.0 / math.sqrt(9.0 * d)
    while True:
        x = standard_normal(rng)
        v = 1.0 + c * x
        if v <= 0.0:
            continue
        v = v * v * v
        u = open_uniform(rng)
        x2 = x * x
        if u < 1.0 - 0.0331 * x2 * x2:
            return d * v
        if math.log(u) < 0.5 * x2 + d * (1.0 - v + math.log(v)):
            return d * v


def standard_beta(a: float, b: float, rng: RandomSource) -> float:
    """Beta variate as a ratio of gamma variates."""
    x = standard_gamma(a, rng)
    y = standard_gamma(b, rng)
    return x / (x + y)


def _poisson_knuth(lam: float, rng: RandomSource) -> int:
    limit = math.exp(-lam)
    k = 0
    prod = float(rng.random())
    while prod > limit:
        k += 1
        prod *= float(rng.random())
    return k


def _poisson_ptrs(lam: float, rng: RandomSource) -> int:
    slam = math.sqrt(lam)
    loglam = math.log(lam)
    b = 0.931 + 2.53 * slam
    a = -0.059 + 0.02483 * b
    inv_alpha = 1.1239 + 1.1328 / (b - 3.4)
    v_r = 0.9277 - 3.6224 / (b - 2.0)
    while True:
        u = float(rng.random()) - 0.5
        v = float(rng.random())
        us = 0.5 - abs(u)
        if us <= 0.0:
            continue
        k = math.floor((2.0 * a / us + b) * u + lam + 0.43)
        if us >= 0.07 and v <= v_r:
            return int(k)
        if k < 0 or (us < 0.013 and v > us):
            continue
        lhs = math.log(v) + math.log(inv_alpha) - math.log(a / (us * us) + b)
        if lhs <= -lam + k * loglam - ln_gamma(k + 1.0):
            return int(k)


def poisson(lam: float, rng: RandomSource) -> int:
    """Poisson variate with mean ``lam``."""
    if lam < _POISSON_PTRS_THRESHOLD:
        return _poisson_knuth(lam, rng)
    return _poisson_ptrs(lam, rng)


def binomial(n: int, p: float, rng: RandomSource) -> int:
    """Binomial variate: successes in ``n`` trials of probability ``p``."""
    if n == 0 or p <= 0.0:
        return 0
    if p >= 1.0:
        return n
    if n < _BINOMIAL_DIRECT_THRESHOLD:
        return sum(1 for _ in range(n) if float(rng.random()) < p)

    # the a-th smallest of n uniforms is Beta(a, n + 1 - a)
    a = 1 + n // 2
    b = n + 1 - a
    x = standard_beta(float(a), float(b), rng)
    if x >= p:
        return binomial(a - 1, p / x, rng)
    return a + binomial(b - 1, (p - x) / (1.0 - x), rng)


__all__ = [
    "RandomSource",
    "uniform",
    "open_uniform",
    "standard_normal",
    "standard_exponential",
    "standard_gamma",
    "standard_beta",
    "poisson",
    "binomial",
]
