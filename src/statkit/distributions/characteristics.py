"""
Characteristics API
===================

:class:`GenericCharacteristic` names a characteristic once and evaluates it
on any distribution through that distribution's computation strategy.

Notes
-----
- The characteristic name controls *what* to compute (e.g. ``"cdf"``).
- ``**options`` control *how* to compute it when a numerical conversion is
  needed (e.g. ``x_tol`` for an inverted ``cdf``).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from statkit.types import CharacteristicName

if TYPE_CHECKING:
    from statkit.distributions.distribution import Distribution
    from statkit.types import GenericCharacteristicName


@dataclass(slots=True, frozen=True)
class GenericCharacteristic[In, Out]:
    """
    Callable characteristic descriptor.

    Parameters
    ----------
    name : str
        Characteristic identifier (e.g. ``"pdf"``, ``"cdf"`` or ``"ppf"``).

    Examples
    --------
    >>> CDF = GenericCharacteristic[float, float]("cdf")
    >>> # CDF(distribution, 0.0) evaluates the distribution's cdf at 0
    """

    name: GenericCharacteristicName

    def __call__(self, distribution: Distribution, data: In, **options: Any) -> Out:
        """
        Evaluate the characteristic of ``distribution`` at ``data``.

        Raises
        ------
        CharacteristicNotAvailableError
            If the distribution can neither compute nor derive it.
        """
        method = distribution.query_method(self.name, **options)
        result: Out = method(data)
        return result


PDF = GenericCharacteristic[float, float](CharacteristicName.PDF)
PMF = GenericCharacteristic[float, float](CharacteristicName.PMF)
CDF = GenericCharacteristic[float, float](CharacteristicName.CDF)
PPF = GenericCharacteristic[float, float](CharacteristicName.PPF)

__all__ = [
    "GenericCharacteristic",
    "PDF",
    "PMF",
    "CDF",
    "PPF",
]
