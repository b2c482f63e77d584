"""
Beta Function Family
====================

Beta, log-beta and the (regularized) incomplete beta function together with
its inverse.

Algorithms
----------
The regularized incomplete beta ``I_x(a, b)`` is always evaluated in the half
``x < (a + 1) / (a + b + 2)``, where its expansions converge fastest; the other
half is reached through the symmetry ``I_x(a, b) = 1 - I_{1-x}(b, a)``. Inside
that half:

- if ``b * x <= 1`` and ``x <= 0.95`` the power series in ``x`` is used (its
  terms shrink at least geometrically by ``x``, and it terminates for integer
  ``b``);
- otherwise the continued fraction is evaluated with the modified Lentz method.

The prefactor ``x^a (1-x)^b / B(a, b)`` is computed in log-space via
:func:`ln_beta` to avoid intermediate overflow for large shape parameters.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from statkit.consts import F64_MIN_LN, F64_MIN_POSITIVE
from statkit.errors import ConvergenceError, InvalidArgumentError
from statkit.prec import DEFAULT_MAX_ITER, F64_PREC, clamp_probability, safe_exp
from statkit.special.gamma import ln_gamma

_FPMIN = F64_MIN_POSITIVE / F64_PREC


def _check_shapes(a: float, b: float, name: str) -> None:
    if not (a > 0.0) or math.isinf(a):
        raise InvalidArgumentError(f"{name}: a must be positive and finite, got {a}")
    if not (b > 0.0) or math.isinf(b):
        raise InvalidArgumentError(f"{name}: b must be positive and finite, got {b}")


def ln_beta(a: float, b: float) -> float:
    """
    Natural logarithm of the beta function ``B(a, b)``.

    Raises
    ------
    InvalidArgumentError
        If ``a <= 0`` or ``b <= 0``.
    """
    if math.isnan(a) or math.isnan(b):
        return math.nan
    _check_shapes(a, b, "ln_beta")
    return ln_gamma(a) + ln_gamma(b) - ln_gamma(a + b)


def beta(a: float, b: float) -> float:
    """Beta function ``B(a, b) = Gamma(a) Gamma(b) / Gamma(a + b)``."""
    return safe_exp(ln_beta(a, b))


def _beta_series(a: float, b: float, x: float) -> float:
    """Power series of ``I_x(a, b)``, valid for ``b * x <= 1`` and ``x <= 0.95``."""
    ai = 1.0 / a
    u = (1.0 - b) * x
    v = u / (a + 1.0)
    t1 = v
    t = u
    n = 2.0
    s = 0.0
    z = F64_PREC * ai
    for _ in range(DEFAULT_MAX_ITER):
        if abs(v) <= z:
            break
        u = (n - b) * x / n
        t *= u
        v = t / (a + n)
        s += v
        n += 1.0
    else:
        raise ConvergenceError("incomplete beta series", DEFAULT_MAX_ITER)
    s += t1 + ai
    # I_x(a, b) = x^a / B(a, b) * s, where s already carries the 1/a term
    return clamp_probability(safe_exp(a * math.log(x) - ln_beta(a, b) + math.log(s)))


def _beta_continued_fraction(a: float, b: float, x: float) -> float:
    """Modified Lentz evaluation of the incomplete beta continued fraction."""
    max_iter = DEFAULT_MAX_ITER + int(10.0 * math.sqrt(max(a, b)))
    qab = a + b
    qap = a + 1.0
    qam = a - 1.0
    c = 1.0
    d = 1.0 - qab * x / qap
    if abs(d) < _FPMIN:
        d = _FPMIN
    d = 1.0 / d
    h = d

    for m in range(1, max_iter + 1):
        m2 = 2.0 * m
        aa = m * (b - m) * x / ((qam + m2) * (a + m2))
        d = 1.0 + aa * d
        if abs(d) < _FPMIN:
            d = _FPMIN
        c = 1.0 + aa / c
        if abs(c) < _FPMIN:
            c = _FPMIN
        d = 1.0 / d
        h *= d * c

        aa = -(a + m) * (qab + m) * x / ((a + m2) * (qap + m2))
        d = 1.0 + aa * d
        if abs(d) < _FPMIN:
            d = _FPMIN
        c = 1.0 + aa / c
        if abs(c) < _FPMIN:
            c = _FPMIN
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) <= F64_PREC:
            ln_front = a * math.log(x) + b * math.log1p(-x) - ln_beta(a, b)
            return clamp_probability(safe_exp(ln_front) * h / a)
    raise ConvergenceError("incomplete beta continued fraction", max_iter)


def _beta_reg_lower_half(a: float, b: float, x: float) -> float:
    if b * x <= 1.0 and x <= 0.95:
        return _beta_series(a, b, x)
    return _beta_continued_fraction(a, b, x)


def beta_reg(a: float, b: float, x: float) -> float:
    """
    Regularized incomplete beta function ``I_x(a, b)``.

    Parameters
    ----------
    a, b : float
        Shape parameters, both positive and finite.
    x : float
        Upper limit in ``[0, 1]``.

    Returns
    -------
    float
        ``I_x(a, b)`` in ``[0, 1]``.

    Raises
    ------
    InvalidArgumentError
        If a shape is not positive or ``x`` lies outside ``[0, 1]``.
    ConvergenceError
        If the selected expansion does not converge.
    """
    if math.isnan(a) or math.isnan(b) or math.isnan(x):
        return math.nan
    _check_shapes(a, b, "beta_reg")
    if not 0.0 <= x <= 1.0:
        raise InvalidArgumentError(f"beta_reg: x must be in [0, 1], got {x}")
    if x == 0.0:
        return 0.0
    if x == 1.0:
        return 1.0

    if x >= (a + 1.0) / (a + b + 2.0):
        return 1.0 - _beta_reg_lower_half(b, a, 1.0 - x)
    return _beta_reg_lower_half(a, b, x)


def beta_inc(a: float, b: float, x: float) -> float:
    """Lower incomplete beta function ``B(x; a, b) = I_x(a, b) B(a, b)``."""
    return beta_reg(a, b, x) * beta(a, b)


def inv_beta_reg(a: float, b: float, p: float, max_iter: int = DEFAULT_MAX_ITER) -> float:
    """
    Inverse of the regularized incomplete beta function in ``x``.

    Finds ``x`` in ``[0, 1]`` with ``I_x(a, b) = p`` by Newton steps on the
    log-density, falling back to bisection of the current bracket whenever a
    Newton step leaves it.

    Raises
    ------
    InvalidArgumentError
        If a shape is not positive or ``p`` lies outside ``[0, 1]``.
    ConvergenceError
        If the bracket has not shrunk to tolerance within ``max_iter`` steps.
    """
    if math.isnan(a) or math.isnan(b) or math.isnan(p):
        return math.nan
    _check_shapes(a, b, "inv_beta_reg")
    if not 0.0 <= p <= 1.0:
        raise InvalidArgumentError(f"inv_beta_reg: p must be in [0, 1], got {p}")
    if p == 0.0:
        return 0.0
    if p == 1.0:
        return 1.0

    lo, hi = 0.0, 1.0
    lbeta = ln_beta(a, b)
    x = a / (a + b)
    # lower tail: I_x(a, b) ~ x^a / (a B(a, b))
    ln_tail = (math.log(p) + math.log(a) + lbeta) / a
    if ln_tail < F64_MIN_LN:
        return 0.0
    if ln_tail < math.log(x):
        x = math.exp(ln_tail)
    for _ in range(max_iter):
        f = beta_reg(a, b, x) - p
        if f == 0.0:
            return x
        if f < 0.0:
            lo = x
        else:
            hi = x
        ln_density = (a - 1.0) * math.log(x) + (b - 1.0) * math.log1p(-x) - lbeta
        density = safe_exp(ln_density)
        candidate = x - f / density if density > 0.0 and math.isfinite(density) else math.nan
        if not lo < candidate < hi:
            candidate = 0.5 * (lo + hi)
        tolerance = 4.0 * F64_PREC * max(candidate, 1e-300)
        if abs(candidate - x) <= tolerance or hi - lo <= F64_PREC * hi or hi < F64_MIN_POSITIVE:
            return candidate
        x = candidate
    raise ConvergenceError("inv_beta_reg", max_iter)


__all__ = [
    "ln_beta",
    "beta",
    "beta_reg",
    "beta_inc",
    "inv_beta_reg",
]
