"""
Computation Primitives
======================

Building blocks used to evaluate distribution characteristics:

- :class:`AnalyticalComputation`: a closed-form callable supplied by the
  distribution itself.
- :class:`FittedComputationMethod`: a numerical conversion (e.g. ``cdf`` from
  ``pdf``) bound to one distribution and ready to be called.
- :class:`ComputationMethod`: an edge of the characteristic graph: a factory
  that *fits* a conversion for a given distribution.

Notes
-----
- Univariate callables are scalar (``float -> float``); constants such as the
  mean are evaluated at ``None``.
- ``**options`` passed to a fitter are free-form numeric tuning knobs
  (``x_tol``, ``max_iter``, ...).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from mypy_extensions import KwArg

    from statkit.distributions.distribution import Distribution
    from statkit.types import GenericCharacteristicName


@runtime_checkable
class Computation[In, Out](Protocol):
    """Callable evaluating a single characteristic named by ``target``."""

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """
    Closed-form characteristic provided by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g. ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        The analytical callable.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class FittedComputationMethod[In, Out]:
    """
    Numerical conversion fitted to one distribution.

    Parameters
    ----------
    target : str
        Destination characteristic.
    sources : Sequence[str]
        Characteristics the conversion was built from.
    func : Callable[[In, KwArg(Any)], Out]
        The fitted callable.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class ComputationMethod[In, Out]:
    """
    Conversion edge of the characteristic graph.

    Parameters
    ----------
    target : str
        Destination characteristic.
    sources : Sequence[str]
        Source characteristics; graph edges are unary.
    fitter : Callable[[Distribution, KwArg(Any)], FittedComputationMethod]
        Builds the conversion for a concrete distribution.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    fitter: Callable[[Distribution, KwArg(Any)], FittedComputationMethod[In, Out]]

    def fit(self, distribution: Distribution, **options: Any) -> FittedComputationMethod[In, Out]:
        """Fit the conversion for ``distribution``."""
        return self.fitter(distribution, **options)


type Method[In, Out] = AnalyticalComputation[In, Out] | FittedComputationMethod[In, Out]


__all__ = [
    "Computation",
    "AnalyticalComputation",
    "FittedComputationMethod",
    "ComputationMethod",
    "Method",
]
