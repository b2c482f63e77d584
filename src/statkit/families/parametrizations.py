"""
Parametrizations of distribution families.

A parametrization is a named, immutable set of parameter values of a family
together with the constraints those values must satisfy. Alternative
parametrizations convert themselves to the family's base one.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

from statkit.errors import InvalidParameterError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from statkit.families.parametric_family import ParametricFamily
    from statkit.types import ParametrizationName


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable statement of the constraint (e.g. ``"sigma >= 0"``).
    check : Callable[[Any], bool]
        Predicate that returns True if the constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    Concrete parametrizations are frozen dataclasses created by the
    :func:`parametrization` decorator. Fields declared with ``init=False``
    hold values derived from the parameters and are not parameters themselves.
    """

    # These attributes are set by the @parametrization decorator
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameter values by name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)  # type: ignore[arg-type]
            if f.init
        }

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return self._constraints

    def validate(self) -> None:
        """
        Check every constraint of this parametrization.

        Raises
        ------
        InvalidParameterError
            Naming the first constraint that does not hold.
        """
        family = getattr(self.__class__, "__family__", None)
        for constraint in self._constraints:
            if not constraint.check(self):
                raise InvalidParameterError(
                    constraint.description, None if family is None else family.name
                )

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Convert this parametrization to the base parametrization.

        Base implementation returns self. Subclasses override it when they are
        not the family's base parametrization.
        """
        return self


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable statement of the constraint; it becomes the message of
        the :class:`~statkit.errors.InvalidParameterError` raised when the
        predicate returns False.

    Notes
    -----
    The decorated function must be a predicate returning bool. Comparisons
    with ``nan`` are false, so a constraint such as ``sigma >= 0`` also rejects
    a ``nan`` parameter.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return bool(func(*args, **kwargs))

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator to register a class as a parametrization of ``family``.

    The class is turned into a frozen slotted dataclass (unless it already is
    a dataclass) and its ``@constraint`` methods are collected in definition
    order.
    """

    def _collect_constraints(
        cls: type[Parametrization],
    ) -> list[ParametrizationConstraint]:
        constraints: list[ParametrizationConstraint] = []
        for attr_name, attr in cls.__dict__.items():
            if isinstance(attr, staticmethod | classmethod):
                if getattr(attr.__func__, "__is_constraint", False):
                    raise TypeError(f"@constraint '{attr_name}' must be an instance method")
                continue

            if not (callable(attr) and isfunction(attr)):
                continue
            if getattr(attr, "__is_constraint", False):
                desc = getattr(attr, "__constraint_description", attr.__name__)
                constraints.append(ParametrizationConstraint(description=desc, check=attr))
        return constraints

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator


__all__ = [
    "ParametrizationConstraint",
    "Parametrization",
    "constraint",
    "parametrization",
]
