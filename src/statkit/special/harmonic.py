"""Harmonic and generalized harmonic numbers."""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from statkit.consts import EULER_MASCHERONI
from statkit.errors import InvalidArgumentError
from statkit.special.gamma import digamma


def harmonic(n: int) -> float:
    """
    ``n``-th harmonic number ``H_n = 1 + 1/2 + ... + 1/n``.

    Uses ``H_n = psi(n + 1) + gamma`` for ``n > 16``.
    """
    if n < 0:
        raise InvalidArgumentError(f"harmonic requires a non-negative integer, got {n}")
    if n <= 16:
        return math.fsum(1.0 / k for k in range(1, n + 1))
    return EULER_MASCHERONI + digamma(n + 1.0)


def gen_harmonic(n: int, m: float) -> float:
    """Generalized harmonic number ``H_{n,m} = sum_{k=1}^n k^-m``."""
    if n < 0:
        raise InvalidArgumentError(f"gen_harmonic requires a non-negative integer, got {n}")
    return math.fsum(k ** (-m) for k in range(1, n + 1))


__all__ = ["harmonic", "gen_harmonic"]
