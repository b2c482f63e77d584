"""
Error Taxonomy
==============

Exceptions raised by statkit. Every fallible operation reports failure by
raising one of these; none of them is ever replaced by a sentinel value.

- :class:`InvalidParameterError`: distribution parameters outside the family's domain.
- :class:`InvalidArgumentError`: special-function or query argument outside its domain.
- :class:`UndefinedQuantityError`: a moment or statistic that has no value for
  valid parameters (e.g. the variance of a Cauchy distribution).
- :class:`DegenerateDistributionError`: a ``0/0`` quantity of a point mass.
- :class:`ConvergenceError`: an iterative approximation ran out of iterations.
- :class:`InsufficientDataError`: a sample is smaller than a statistic requires.
- :class:`CharacteristicNotAvailableError`: a characteristic is neither
  provided analytically nor reachable through a conversion.

Notes
-----
The classes also derive from the closest builtin exception so that generic
``except ValueError`` handlers keep working.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class StatkitError(Exception):
    """Base class of all statkit errors."""


class InvalidParameterError(StatkitError, ValueError):
    """
    Raised when distribution parameters violate a family constraint.

    Parameters
    ----------
    constraint : str
        Human-readable description of the violated constraint (e.g. ``"rate > 0"``).
    family : str, optional
        Name of the family the parameters belong to.
    """

    def __init__(self, constraint: str, family: str | None = None) -> None:
        self.constraint = constraint
        self.family = family
        where = f" for {family}" if family else ""
        super().__init__(f'Constraint "{constraint}" does not hold{where}')


class InvalidArgumentError(StatkitError, ValueError):
    """Raised when a function argument lies outside its mathematical domain."""


class UndefinedQuantityError(StatkitError, ArithmeticError):
    """Raised when a quantity is mathematically undefined for valid parameters."""


class DegenerateDistributionError(UndefinedQuantityError):
    """Raised for ``0/0`` quantities of a distribution concentrated at one point."""


class ConvergenceError(StatkitError, ArithmeticError):
    """
    Raised when an iterative routine exhausts its iteration budget.

    Parameters
    ----------
    routine : str
        Name of the routine that failed to converge.
    max_iter : int
        Iteration budget that was exhausted.
    """

    def __init__(self, routine: str, max_iter: int) -> None:
        self.routine = routine
        self.max_iter = max_iter
        super().__init__(f"{routine} did not converge within {max_iter} iterations")


class InsufficientDataError(StatkitError, ValueError):
    """Raised when a sample has fewer observations than a statistic needs."""

    def __init__(self, statistic: str, required: int, actual: int) -> None:
        self.statistic = statistic
        self.required = required
        self.actual = actual
        super().__init__(
            f"{statistic} requires at least {required} observation(s), got {actual}"
        )


class CharacteristicNotAvailableError(StatkitError, LookupError):
    """Raised when a characteristic cannot be resolved for a distribution."""


__all__ = [
    "StatkitError",
    "InvalidParameterError",
    "InvalidArgumentError",
    "UndefinedQuantityError",
    "DegenerateDistributionError",
    "ConvergenceError",
    "InsufficientDataError",
    "CharacteristicNotAvailableError",
]
