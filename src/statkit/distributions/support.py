"""
Supports
========

Sets of values a distribution puts its mass on.

- :class:`ContinuousSupport`: an interval of the real line.
- :class:`IntegerSupport`: consecutive integers ``{min_k, ..., max_k}``, the
  right end possibly unbounded.
- :class:`SimplexSupport`: vectors with non-negative entries summing to a
  fixed total (probability vectors, count vectors).

Discrete supports provide the ordered traversal (``first``, ``next``,
``prev``, ``iter_leq``) the ``pmf <-> cdf <-> ppf`` fitters rely on.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from statkit.errors import InvalidParameterError
from statkit.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support):
    """Interval support of a univariate continuous distribution."""

    def clip(self, x: float) -> float:
        """Project ``x`` onto the closure of the interval."""
        return min(max(x, self.left), self.right)


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[int]: ...

    def iter_leq(self, x: Number) -> Iterator[int]: ...

    def prev(self, x: Number) -> int | None: ...

    def first(self) -> int: ...

    def last(self) -> int | None: ...


@dataclass(frozen=True, slots=True)
class IntegerSupport(DiscreteSupport):
    """
    Consecutive integers ``{min_k, min_k + 1, ..., max_k}``.

    Parameters
    ----------
    min_k : int
        Smallest support point.
    max_k : int or None, default None
        Largest support point, ``None`` for an unbounded right end.
    """

    min_k: int
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.max_k is not None and self.max_k < self.min_k:
            raise InvalidParameterError(f"min_k <= max_k, got {self.min_k} > {self.max_k}")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        mask = np.isfinite(xf) & (xf == np.floor(xf)) & (xf >= self.min_k)
        if self.max_k is not None:
            mask &= xf <= self.max_k

        if np.ndim(xf) == 0:
            return bool(mask)
        return cast(BoolArray, mask)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    @property
    def is_bounded(self) -> bool:
        return self.max_k is not None

    @property
    def size(self) -> float:
        """Number of support points, ``inf`` when unbounded."""
        if self.max_k is None:
            return math.inf
        return float(self.max_k - self.min_k + 1)

    def first(self) -> int:
        return self.min_k

    def last(self) -> int | None:
        return self.max_k

    def next(self, current: int) -> int | None:
        nxt = current + 1
        if self.max_k is not None and nxt > self.max_k:
            return None
        return nxt

    def prev(self, x: Number) -> int | None:
        """Greatest support point strictly less than ``x``."""
        target = math.ceil(float(x)) - 1
        if self.max_k is not None and target > self.max_k:
            target = self.max_k
        if target < self.min_k:
            return None
        return target

    def iter_points(self) -> Iterator[int]:
        current: int | None = self.min_k
        while current is not None:
            yield current
            current = self.next(current)

    def iter_leq(self, x: Number) -> Iterator[int]:
        last = math.floor(float(x))
        if self.max_k is not None:
            last = min(last, self.max_k)
        return iter(range(self.min_k, last + 1))

    __iter__ = iter_points


@dataclass(frozen=True, slots=True)
class SimplexSupport(Support):
    """
    Vectors of length ``dimension`` with non-negative entries summing to ``total``.

    With ``integer=True`` the entries must be whole numbers (count vectors);
    otherwise the entries must be strictly positive (open probability simplex).
    """

    dimension: int
    total: float = 1.0
    integer: bool = False
    atol: float = 1e-10

    def contains(self, x: Any) -> bool:  # type: ignore[override]
        arr = np.asarray(x, dtype=float)
        if arr.shape != (self.dimension,) or not np.all(np.isfinite(arr)):
            return False
        if self.integer:
            if np.any(arr < 0.0) or np.any(arr != np.floor(arr)):
                return False
            return bool(arr.sum() == self.total)
        if np.any(arr <= 0.0):
            return False
        return bool(abs(arr.sum() - self.total) <= self.atol)

    def __contains__(self, x: object) -> bool:
        return self.contains(x)


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerSupport",
    "SimplexSupport",
]
