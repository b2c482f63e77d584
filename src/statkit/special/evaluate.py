"""Polynomial evaluation for the coefficient tables of the special functions."""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from numpy.polynomial import polynomial as _np_poly

if TYPE_CHECKING:
    from collections.abc import Sequence


def polynomial(z: float, coeff: Sequence[float]) -> float:
    """Evaluate ``coeff[0] + coeff[1] * z + ... + coeff[n] * z**n`` at a scalar ``z``."""
    return float(_np_poly.polyval(z, coeff))


__all__ = ["polynomial"]
