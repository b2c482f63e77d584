"""
Numerical Fitters
=================

Fitters build one characteristic of a distribution from another when no
closed form is available. Each ``fit_*`` function takes a distribution and
free-form tuning options and returns a
:class:`~statkit.distributions.computation.FittedComputationMethod`.

Univariate continuous (``1C``):

- ``pdf -> cdf``: adaptive quadrature (:func:`scipy.integrate.quad`) from the
  left end of the support;
- ``cdf -> pdf``: five-point central difference;
- ``cdf -> ppf``: bracket expansion clamped to the support, then bisection;
- ``ppf -> cdf``: Brent's method (:func:`scipy.optimize.brentq`) on the ppf.

Univariate discrete (``1D``):

- ``pmf -> cdf``: partial sums over the integer support;
- ``cdf -> pmf``: jumps between adjacent support points;
- ``cdf -> ppf``: smallest support point ``k`` with ``cdf(k) >= p``;
- ``ppf -> cdf``: bisection in the probability.

Any kind: ``pdf -> ln_pdf``, ``pmf -> ln_pmf``, ``cdf -> sf``,
``ppf -> median`` and ``var -> std_dev``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, cast

from mypy_extensions import KwArg
from scipy import (
    integrate as _sp_integrate,
    optimize as _sp_optimize,
)

from statkit.distributions.computation import FittedComputationMethod
from statkit.distributions.support import ContinuousSupport, IntegerSupport
from statkit.errors import (
    CharacteristicNotAvailableError,
    ConvergenceError,
    InvalidArgumentError,
)
from statkit.prec import DEFAULT_MAX_ITER, F64_PREC, clamp_probability, safe_log
from statkit.types import CharacteristicName

if TYPE_CHECKING:
    from statkit.distributions.distribution import Distribution
    from statkit.types import GenericCharacteristicName

type _Resolved = Callable[[Any, KwArg(Any)], float]

# Absolute bracket width below which a quantile at zero counts as found.
_BRACKET_FLOOR = 1e-200


def _resolve(distribution: Distribution, name: GenericCharacteristicName) -> _Resolved:
    """Resolve ``name`` through the distribution's strategy as a float-valued callable."""
    fn = distribution.query_method(name)

    def _wrap(x: Any, **kwargs: Any) -> float:
        return float(fn(x, **kwargs))

    return _wrap


def _fitted(
    target: GenericCharacteristicName,
    source: GenericCharacteristicName,
    func: Callable[..., float],
) -> FittedComputationMethod[Any, float]:
    return FittedComputationMethod[Any, float](
        target=target,
        sources=[source],
        func=cast(Callable[[Any, KwArg(Any)], float], func),
    )


def check_probability(p: float) -> None:
    """
    Reject probabilities outside ``[0, 1]``.

    Raises
    ------
    InvalidArgumentError
        If ``p`` is not in ``[0, 1]``.
    """
    if not 0.0 <= p <= 1.0:
        raise InvalidArgumentError(f"probability must be in [0, 1], got {p}")


def _continuous_bounds(distribution: Distribution) -> tuple[float, float]:
    support = distribution.support
    if isinstance(support, ContinuousSupport):
        return float(support.left), float(support.right)
    return -math.inf, math.inf


def _integer_support(distribution: Distribution, conversion: str) -> IntegerSupport:
    support = distribution.support
    if not isinstance(support, IntegerSupport):
        raise CharacteristicNotAvailableError(
            f"{conversion} requires an integer support, got {support!r}"
        )
    return support


def _num_derivative(f: Callable[[float], float], x: float, h: float = 1e-5) -> float:
    """Five-point central difference ``f'(x)``."""
    f1 = f(x + h)
    f_1 = f(x - h)
    f2 = f(x + 2.0 * h)
    f_2 = f(x - 2.0 * h)
    return (-f2 + 8.0 * f1 - 8.0 * f_1 + f_2) / (12.0 * h)


# --- Univariate continuous ----------------------------------------------------


def fit_pdf_to_cdf_1C(
    distribution: Distribution, /, **options: Any
) -> FittedComputationMethod[Any, float]:
    """
    Fit ``cdf`` by integrating ``pdf`` from the left end of the support.

    Options
    -------
    limit : int, default 200
        Subinterval limit of :func:`scipy.integrate.quad`.
    """
    pdf_func = _resolve(distribution, CharacteristicName.PDF)
    left, right = _continuous_bounds(distribution)
    limit = int(options.get("limit", 200))

    def _cdf(x: float, **kwargs: Any) -> float:
        if math.isnan(x):
            return math.nan
        if x <= left:
            return 0.0
        if x >= right:
            return 1.0
        val, _ = _sp_integrate.quad(lambda t: pdf_func(t, **kwargs), left, x, limit=limit)
        return clamp_probability(float(val))

    return _fitted(CharacteristicName.CDF, CharacteristicName.PDF, _cdf)


def fit_cdf_to_pdf_1C(
    distribution: Distribution, /, **options: Any
) -> FittedComputationMethod[Any, float]:
    """
    Fit ``pdf`` as the numerical derivative of ``cdf``, clipped at zero.

    Options
    -------
    h : float, default 1e-5
        Step of the difference stencil.
    """
    cdf_func = _resolve(distribution, CharacteristicName.CDF)
    left, right = _continuous_bounds(distribution)
    h = float(options.get("h", 1e-5))

    def _pdf(x: float, **kwargs: Any) -> float:
        if math.isnan(x):
            return math.nan
        if not left <= x <= right or math.isinf(x):
            return 0.0
        d = _num_derivative(lambda t: cdf_func(t, **kwargs), x, h=h)
        return max(d, 0.0)

    return _fitted(CharacteristicName.PDF, CharacteristicName.CDF, _pdf)


def _ppf_bisection_from_cdf(
    cdf: Callable[[float], float],
    left: float,
    right: float,
    *,
    init_step: float = 1.0,
    expand_factor: float = 2.0,
    max_expand: int = 128,
    x_tol: float = 4.0 * F64_PREC,
    x_floor: float = _BRACKET_FLOOR,
    max_iter: int = DEFAULT_MAX_ITER,
) -> Callable[[float], float]:
    """
    Build a scalar ``ppf`` from a monotone ``cdf`` on ``[left, right]``.

    Returns the leftmost ``x`` with ``cdf(x) >= q``. Bisection stops once the
    bracket is narrower than ``x_tol`` relative to its larger end, or than
    ``x_floor`` for quantiles at zero.
    ``q = 0`` and ``q = 1`` map to the support bounds.

    Raises
    ------
    ConvergenceError
        If no bracket is found within ``max_expand`` expansions or the
        bisection needs more than ``max_iter`` halvings.
    """

    def _bracket(q: float) -> tuple[float, float]:
        if math.isfinite(left):
            lo = left
        else:
            lo = (right if math.isfinite(right) else 0.0) - init_step
        hi = right if math.isfinite(right) else max(lo, 0.0) + init_step

        step = init_step
        expansions = 0
        while cdf(lo) >= q and lo > left:
            step *= expand_factor
            lo = max(lo - step, left)
            expansions += 1
            if expansions > max_expand:
                raise ConvergenceError("ppf bracket expansion", max_expand)

        step = init_step
        while cdf(hi) < q and hi < right:
            step *= expand_factor
            hi = min(hi + step, right)
            expansions += 1
            if expansions > max_expand:
                raise ConvergenceError("ppf bracket expansion", max_expand)
        return lo, hi

    def _ppf(q: float) -> float:
        if math.isnan(q):
            return math.nan
        check_probability(q)
        if q == 0.0:
            return left
        if q == 1.0:
            return right

        lo, hi = _bracket(q)
        for _ in range(max_iter):
            if hi - lo <= max(x_tol * max(abs(lo), abs(hi)), x_floor):
                return hi
            mid = 0.5 * (lo + hi)
            if not lo < mid < hi:
                return hi
            if cdf(mid) >= q:
                hi = mid
            else:
                lo = mid
        raise ConvergenceError("ppf bisection", max_iter)

    return _ppf


def fit_cdf_to_ppf_1C(
    distribution: Distribution, /, **options: Any
) -> FittedComputationMethod[Any, float]:
    """
    Fit ``ppf`` by inverting ``cdf`` with bracketed bisection.

    Options
    -------
    x_tol : float
        Relative stopping width of the bracket.
    max_iter : int
        Bisection iteration cap.
    init_step, expand_factor, max_expand
        Bracket search tuning.
    """
    cdf_func = _resolve(distribution, CharacteristicName.CDF)
    left, right = _continuous_bounds(distribution)
    tuning = {
        key: options[key]
        for key in ("init_step", "expand_factor", "max_expand", "x_tol", "max_iter")
        if key in options
    }
    ppf_func = _ppf_bisection_from_cdf(lambda x: cdf_func(x), left, right, **tuning)

    def _ppf(q: float, **_: Any) -> float:
        return ppf_func(q)

    return _fitted(CharacteristicName.PPF, CharacteristicName.CDF, _ppf)


def fit_ppf_to_cdf_1C(
    distribution: Distribution, /, **options: Any
) -> FittedComputationMethod[Any, float]:
    """
    Fit ``cdf`` by solving ``ppf(q) = x`` for ``q`` with Brent's method.

    Options
    -------
    q_tol : float, default 1e-14
        Absolute tolerance in ``q``.
    max_iter : int
        Iteration cap of the root finder.
    """
    ppf_func = _resolve(distribution, CharacteristicName.PPF)
    q_tol = float(options.get("q_tol", 1e-14))
    max_iter = int(options.get("max_iter", DEFAULT_MAX_ITER))
    lo, hi = 1e-15, 1.0 - 1e-15

    def _cdf(x: float, **kwargs: Any) -> float:
        if math.isnan(x):
            return math.nan
        if math.isinf(x):
            return 0.0 if x < 0 else 1.0

        def f(q: float) -> float:
            return ppf_func(q, **kwargs) - x

        if f(lo) > 0.0:
            return 0.0
        if f(hi) < 0.0:
            return 1.0
        try:
            q = _sp_optimize.brentq(f, lo, hi, xtol=q_tol, maxiter=max_iter)
        except RuntimeError as exc:
            raise ConvergenceError("ppf -> cdf root finding", max_iter) from exc
        return clamp_probability(float(q))

    return _fitted(CharacteristicName.CDF, CharacteristicName.PPF, _cdf)


# --- Univariate discrete ------------------------------------------------------


def fit_pmf_to_cdf_1D(
    distribution: Distribution, /, **_: Any
) -> FittedComputationMethod[Any, float]:
    """Fit ``cdf(x)`` as the sum of ``pmf(k)`` over support points ``k <= x``."""
    support = _integer_support(distribution, "pmf -> cdf")
    pmf_func = _resolve(distribution, CharacteristicName.PMF)

    def _cdf(x: float, **kwargs: Any) -> float:
        if math.isnan(x):
            return math.nan
        if x < support.min_k:
            return 0.0
        if math.isinf(x) or (support.max_k is not None and x >= support.max_k):
            return 1.0
        total = math.fsum(pmf_func(float(k), **kwargs) for k in support.iter_leq(x))
        return clamp_probability(total)

    return _fitted(CharacteristicName.CDF, CharacteristicName.PMF, _cdf)


def fit_cdf_to_pmf_1D(
    distribution: Distribution, /, **_: Any
) -> FittedComputationMethod[Any, float]:
    """
    Fit ``pmf`` as the jumps of ``cdf``.

    ``pmf(k) = cdf(k) - cdf(prev(k))`` where ``prev(k)`` is the predecessor of
    ``k`` on the support (``cdf(prev) := 0`` if there is none).
    """
    support = _integer_support(distribution, "cdf -> pmf")
    cdf_func = _resolve(distribution, CharacteristicName.CDF)

    def _pmf(x: float, **kwargs: Any) -> float:
        if math.isnan(x):
            return math.nan
        if not support.contains(x):
            return 0.0
        p = support.prev(x)
        left = 0.0 if p is None else cdf_func(float(p), **kwargs)
        return clamp_probability(cdf_func(x, **kwargs) - left)

    return _fitted(CharacteristicName.PMF, CharacteristicName.CDF, _pmf)


def fit_cdf_to_ppf_1D(
    distribution: Distribution, /, **options: Any
) -> FittedComputationMethod[Any, float]:
    """
    Fit the discrete quantile: the smallest support point ``k`` with ``cdf(k) >= q``.

    Unbounded supports are searched by doubling the upper end before the
    integer bisection.

    Options
    -------
    max_expand : int, default 128
        Cap on doublings of the search window.
    """
    support = _integer_support(distribution, "cdf -> ppf")
    cdf_func = _resolve(distribution, CharacteristicName.CDF)
    max_expand = int(options.get("max_expand", 128))

    def _ppf(q: float, **_: Any) -> float:
        if math.isnan(q):
            return math.nan
        check_probability(q)
        first = support.first()
        last = support.last()
        if q == 0.0:
            return float(first)
        if q == 1.0:
            return math.inf if last is None else float(last)

        # invariant: cdf(lo) < q <= cdf(hi), lo may sit one below the support
        lo = first - 1
        if last is None:
            step = 1
            hi = first
            for _ in range(max_expand):
                if cdf_func(float(hi)) >= q:
                    break
                lo = hi
                hi = first + step
                step *= 2
            else:
                raise ConvergenceError("discrete ppf search", max_expand)
        else:
            hi = last

        while hi - lo > 1:
            mid = (lo + hi) // 2
            if cdf_func(float(mid)) >= q:
                hi = mid
            else:
                lo = mid
        return float(hi)

    return _fitted(CharacteristicName.PPF, CharacteristicName.CDF, _ppf)


def fit_ppf_to_cdf_1D(
    distribution: Distribution, /, **options: Any
) -> FittedComputationMethod[Any, float]:
    """
    Fit the discrete ``cdf(x) = sup {q : ppf(q) <= x}`` by bisection in ``q``.

    Options
    -------
    q_tol : float, default 1e-12
        Width of the final probability bracket.
    max_iter : int, default 100
        Bisection iteration cap.
    """
    ppf_func = _resolve(distribution, CharacteristicName.PPF)
    q_tol = float(options.get("q_tol", 1e-12))
    max_iter = int(options.get("max_iter", 100))

    def _cdf(x: float, **kwargs: Any) -> float:
        if math.isnan(x):
            return math.nan
        if x < ppf_func(0.0, **kwargs):
            return 0.0
        lo, hi = 0.0, 1.0
        for _ in range(max_iter):
            if hi - lo <= q_tol:
                break
            mid = 0.5 * (lo + hi)
            if ppf_func(mid, **kwargs) <= x:
                lo = mid
            else:
                hi = mid
        return clamp_probability(lo if hi < 1.0 else hi)

    return _fitted(CharacteristicName.CDF, CharacteristicName.PPF, _cdf)


# --- Any kind -----------------------------------------------------------------


def _log_fitter(
    source: CharacteristicName, target: CharacteristicName
) -> Callable[..., FittedComputationMethod[Any, float]]:
    def _fit(distribution: Distribution, /, **_: Any) -> FittedComputationMethod[Any, float]:
        func = _resolve(distribution, source)

        def _ln(x: Any, **kwargs: Any) -> float:
            value = func(x, **kwargs)
            if math.isnan(value):
                return math.nan
            return safe_log(value)

        return _fitted(target, source, _ln)

    _fit.__name__ = f"fit_{source}_to_{target}"
    _fit.__doc__ = f"Fit ``{target}`` as the logarithm of ``{source}`` (``-inf`` at zero)."
    return _fit


fit_pdf_to_ln_pdf = _log_fitter(CharacteristicName.PDF, CharacteristicName.LN_PDF)
fit_pmf_to_ln_pmf = _log_fitter(CharacteristicName.PMF, CharacteristicName.LN_PMF)


def fit_cdf_to_sf(
    distribution: Distribution, /, **_: Any
) -> FittedComputationMethod[Any, float]:
    """Fit the survival function ``sf(x) = 1 - cdf(x)``."""
    cdf_func = _resolve(distribution, CharacteristicName.CDF)

    def _sf(x: float, **kwargs: Any) -> float:
        return clamp_probability(1.0 - cdf_func(x, **kwargs))

    return _fitted(CharacteristicName.SF, CharacteristicName.CDF, _sf)


def fit_ppf_to_median(
    distribution: Distribution, /, **_: Any
) -> FittedComputationMethod[Any, float]:
    """Fit the median as ``ppf(0.5)``."""
    ppf_func = _resolve(distribution, CharacteristicName.PPF)

    def _median(_: Any = None, **kwargs: Any) -> float:
        return ppf_func(0.5, **kwargs)

    return _fitted(CharacteristicName.MEDIAN, CharacteristicName.PPF, _median)


def fit_var_to_std_dev(
    distribution: Distribution, /, **_: Any
) -> FittedComputationMethod[Any, float]:
    """Fit the standard deviation as the square root of the variance."""
    var_func = _resolve(distribution, CharacteristicName.VAR)

    def _std_dev(_: Any = None, **kwargs: Any) -> float:
        return math.sqrt(var_func(None, **kwargs))

    return _fitted(CharacteristicName.STD_DEV, CharacteristicName.VAR, _std_dev)


__all__ = [
    "check_probability",
    "fit_pdf_to_cdf_1C",
    "fit_cdf_to_pdf_1C",
    "fit_cdf_to_ppf_1C",
    "fit_ppf_to_cdf_1C",
    "fit_pmf_to_cdf_1D",
    "fit_cdf_to_pmf_1D",
    "fit_cdf_to_ppf_1D",
    "fit_ppf_to_cdf_1D",
    "fit_pdf_to_ln_pdf",
    "fit_pmf_to_ln_pmf",
    "fit_cdf_to_sf",
    "fit_ppf_to_median",
    "fit_var_to_std_dev",
]
