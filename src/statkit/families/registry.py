"""
Register of parametric families.

One process-wide :class:`ParametricFamilyRegister` maps family names to
:class:`~statkit.families.parametric_family.ParametricFamily` objects.
Distributions keep only their family name and resolve the family here.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import difflib
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import ClassVar

    from statkit.families.parametric_family import ParametricFamily

logger = logging.getLogger(__name__)


class ParametricFamilyRegister:
    """
    Name-to-family mapping shared by the whole process.

    Instantiation always returns the same object; the classmethods operate on
    it, so ``ParametricFamilyRegister.get(name)`` and
    ``ParametricFamilyRegister().get(name)`` are equivalent.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._families = {}
            cls._instance = instance
        return cls._instance

    def __contains__(self, name: object) -> bool:
        return name in self._families

    def __iter__(self) -> Iterator[ParametricFamily]:
        return iter(self._families.values())

    def __len__(self) -> int:
        return len(self._families)

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Family registered under ``name``.

        Raises
        ------
        ValueError
            If no such family is registered; the message suggests close names.
        """
        families = cls()._families
        try:
            return families[name]
        except KeyError:
            hint = difflib.get_close_matches(str(name), list(families), n=3)
            suffix = f" (did you mean {', '.join(hint)}?)" if hint else ""
            raise ValueError(f"Family {name} is not registered{suffix}") from None

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()

    @classmethod
    def names(cls) -> list[str]:
        """Registered names in registration order."""
        return list(cls()._families)

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Add ``family`` under its name.

        Raises
        ------
        ValueError
            If the name is taken.
        """
        families = cls()._families
        if family.name in families:
            raise ValueError(f"Family {family.name} is already registered")
        families[family.name] = family
        logger.debug(
            "Registered family %s (%s)", family.name, ", ".join(family.parametrization_names)
        )

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None


__all__ = [
    "ParametricFamilyRegister",
]
