"""
Error Function Family
=====================

``erf``, ``erfc`` and their inverses.

Algorithms
----------
- :func:`erf` / :func:`erfc` use W. J. Cody's rational Chebyshev
  approximations (Math. Comp. 23, 1969) with three coefficient sets:
  ``|x| <= 0.46875`` (erf directly), ``0.46875 < |x| <= 4`` and ``|x| > 4``
  (both computing ``erfc`` so the tail keeps full relative precision).
- :func:`erfc_inv` / :func:`erf_inv` start from Wichura's AS241 rational
  approximations of the normal quantile (central region and two tail regions)
  and polish the result with one Halley step against ``erf``/``erfc``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from statkit.consts import INV_SQRT_PI, SQRT_2, TWO_INV_SQRT_PI
from statkit.errors import InvalidArgumentError
from statkit.special.evaluate import polynomial

_ERF_THRESHOLD = 0.46875
_ERF_XSMALL = 1.11e-16
_ERFC_XBIG = 26.543

_ERF_A = (3.16112374387056560e00, 1.13864154151050156e02, 3.77485237685302021e02,
          3.20937758913846947e03, 1.85777706184603153e-1)
_ERF_B = (2.36012909523441209e01, 2.44024637934444173e02, 1.28261652607737228e03,
          2.84423683343917062e03)
_ERF_C = (5.64188496988670089e-1, 8.88314979438837594e00, 6.61191906371416295e01,
          2.98635138197400131e02, 8.81952221241769090e02, 1.71204761263407058e03,
          2.05107837782607147e03, 1.23033935479799725e03, 2.15311535474403846e-8)
_ERF_D = (1.57449261107098347e01, 1.17693950891312499e02, 5.37181101862009858e02,
          1.62138957456669019e03, 3.29079923573345963e03, 4.36261909014324716e03,
          3.43936767414372164e03, 1.23033935480374942e03)
_ERF_P = (3.05326634961232344e-1, 3.60344899949804439e-1, 1.25781726111229246e-1,
          1.60837851487422766e-2, 6.58749161529837803e-4, 1.63153871373020978e-2)
_ERF_Q = (2.56852019228982242e00, 1.87295284992346725e00, 5.27905102951428412e-1,
          6.05183413124413191e-2, 2.33520497626869185e-3)


def _erf_small(x: float) -> float:
    """erf(x) for ``|x| <= 0.46875``."""
    y = abs(x)
    ysq = y * y if y > _ERF_XSMALL else 0.0
    xnum = _ERF_A[4] * ysq
    xden = ysq
    for i in range(3):
        xnum = (xnum + _ERF_A[i]) * ysq
        xden = (xden + _ERF_B[i]) * ysq
    return x * (xnum + _ERF_A[3]) / (xden + _ERF_B[3])


def _exp_neg_square(y: float) -> float:
    """``exp(-y*y)`` split as ``exp(-ysq^2) exp(-(y-ysq)(y+ysq))`` to limit rounding."""
    ysq = math.trunc(y * 16.0) / 16.0
    delta = (y - ysq) * (y + ysq)
    return math.exp(-ysq * ysq) * math.exp(-delta)


def _erfc_positive(y: float) -> float:
    """erfc(y) for ``y > 0.46875``."""
    if y <= 4.0:
        xnum = _ERF_C[8] * y
        xden = y
        for i in range(7):
            xnum = (xnum + _ERF_C[i]) * y
            xden = (xden + _ERF_D[i]) * y
        result = (xnum + _ERF_C[7]) / (xden + _ERF_D[7])
        return _exp_neg_square(y) * result

    if y >= _ERFC_XBIG:
        return 0.0
    ysq = 1.0 / (y * y)
    xnum = _ERF_P[5] * ysq
    xden = ysq
    for i in range(4):
        xnum = (xnum + _ERF_P[i]) * ysq
        xden = (xden + _ERF_Q[i]) * ysq
    result = ysq * (xnum + _ERF_P[4]) / (xden + _ERF_Q[4])
    result = (INV_SQRT_PI - result) / y
    return _exp_neg_square(y) * result


def erf(x: float) -> float:
    """
    Error function ``erf(x) = 2/sqrt(pi) * integral_0^x exp(-t^2) dt``.

    ``erf(+-inf) = +-1``; ``nan`` propagates.
    """
    if math.isnan(x):
        return math.nan
    if math.isinf(x):
        return math.copysign(1.0, x)
    y = abs(x)
    if y <= _ERF_THRESHOLD:
        return _erf_small(x)
    result = (0.5 - _erfc_positive(y)) + 0.5
    return result if x > 0 else -result


def erfc(x: float) -> float:
    """
    Complementary error function ``erfc(x) = 1 - erf(x)``.

    Keeps full relative precision in the right tail, where ``1 - erf(x)``
    would cancel catastrophically.
    """
    if math.isnan(x):
        return math.nan
    if math.isinf(x):
        return 0.0 if x > 0 else 2.0
    y = abs(x)
    if y <= _ERF_THRESHOLD:
        return 1.0 - _erf_small(x)
    result = _erfc_positive(y)
    return result if x > 0 else 2.0 - result


# AS241 (Wichura 1988) coefficients of the normal quantile, ascending powers.
_Q_A = (3.3871328727963666080e0, 1.3314166789178437745e2, 1.9715909503065514427e3,
        1.3731693765509461125e4, 4.5921953931549871457e4, 6.7265770927008700853e4,
        3.3430575583588128105e4, 2.5090809287301226727e3)
_Q_B = (1.0, 4.2313330701600911252e1, 6.8718700749205790830e2, 5.3941960214247511077e3,
        2.1213794301586595867e4, 3.9307895800092710610e4, 2.8729085735721942674e4,
        5.2264952788528545610e3)
_Q_C = (1.42343711074968357734e0, 4.63033784615654529590e0, 5.76949722146069140550e0,
        3.64784832476320460504e0, 1.27045825245236838258e0, 2.41780725177450611770e-1,
        2.27238449892691845833e-2, 7.74545014278341407640e-4)
_Q_D = (1.0, 2.05319162663775882187e0, 1.67638483018380384940e0, 6.89767334985100004550e-1,
        1.48103976427480074590e-1, 1.51986665636164571966e-2, 5.47593808499534494600e-4,
        1.05075007164441684324e-9)
_Q_E = (6.65790464350110377720e0, 5.46378491116411436990e0, 1.78482653991729133580e0,
        2.96560571828504891230e-1, 2.65321895265761230930e-2, 1.24266094738807843860e-3,
        2.71155556874348757815e-5, 2.01033439929228813265e-7)
_Q_F = (1.0, 5.99832206555887937690e-1, 1.36929880922735805310e-1, 1.48753612908506148525e-2,
        7.86869131145613259100e-4, 1.84631831751005468180e-5, 1.42151175831644588870e-7,
        2.04426310338993978564e-15)


def _ndtri_central(q: float) -> float:
    """Standard normal quantile at ``0.5 + q`` for ``|q| <= 0.425``."""
    r = 0.180625 - q * q
    return q * polynomial(r, _Q_A) / polynomial(r, _Q_B)


def _ndtri_tail(p: float) -> float:
    """Standard normal quantile of a lower-tail probability ``p < 0.075`` (negative)."""
    r = math.sqrt(-math.log(p))
    if r <= 5.0:
        r -= 1.6
        value = polynomial(r, _Q_C) / polynomial(r, _Q_D)
    else:
        r -= 5.0
        value = polynomial(r, _Q_E) / polynomial(r, _Q_F)
    return -value


def _halley(x: float, residual: float, sign: float) -> float:
    """
    One Halley step for ``f(x) = erf(x) - p`` (``sign = 1``) or ``erfc(x) - q`` (``sign = -1``).

    Both satisfy ``f'' = -2 x f'``, which gives the update ``x - u / (1 + x u)``
    with ``u = f / f'``.
    """
    derivative = sign * TWO_INV_SQRT_PI * math.exp(-x * x)
    if derivative == 0.0:
        return x
    u = residual / derivative
    return x - u / (1.0 + x * u)


def erfc_inv(q: float) -> float:
    """
    Inverse of :func:`erfc` on ``[0, 2]``.

    ``erfc_inv(0) = inf`` and ``erfc_inv(2) = -inf``.

    Raises
    ------
    InvalidArgumentError
        If ``q`` lies outside ``[0, 2]``.
    """
    if math.isnan(q):
        return math.nan
    if not 0.0 <= q <= 2.0:
        raise InvalidArgumentError(f"erfc_inv: argument must be in [0, 2], got {q}")
    if q == 0.0:
        return math.inf
    if q == 2.0:
        return -math.inf
    if q > 1.0:
        return -erfc_inv(2.0 - q)

    # erfc(x) = q  <=>  x = -ndtri(q / 2) / sqrt(2)
    half = 0.5 * q
    if half >= 0.075:
        x = -_ndtri_central(half - 0.5) / SQRT_2
    else:
        x = -_ndtri_tail(half) / SQRT_2
    return _halley(x, erfc(x) - q, -1.0)


def erf_inv(p: float) -> float:
    """
    Inverse of :func:`erf` on ``[-1, 1]``.

    ``erf_inv(+-1) = +-inf``.

    Raises
    ------
    InvalidArgumentError
        If ``p`` lies outside ``[-1, 1]``.
    """
    if math.isnan(p):
        return math.nan
    if not -1.0 <= p <= 1.0:
        raise InvalidArgumentError(f"erf_inv: argument must be in [-1, 1], got {p}")
    if p == 1.0:
        return math.inf
    if p == -1.0:
        return -math.inf
    if p < 0.0:
        return -erf_inv(-p)

    if p <= 0.85:
        # erf(x) = p  <=>  x = ndtri(0.5 + p / 2) / sqrt(2); keeps relative accuracy for tiny p
        x = _ndtri_central(0.5 * p) / SQRT_2
        return _halley(x, erf(x) - p, 1.0)
    return erfc_inv(1.0 - p)


__all__ = [
    "erf",
    "erfc",
    "erf_inv",
    "erfc_inv",
]
