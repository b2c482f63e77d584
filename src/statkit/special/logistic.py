"""Logistic function and its inverse, the logit."""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from statkit.errors import InvalidArgumentError


def logistic(x: float) -> float:
    """Logistic sigmoid ``1 / (1 + exp(-x))``, evaluated without overflow."""
    if x >= 0.0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def logit(p: float) -> float:
    """
    Logit ``ln(p / (1 - p))``, the inverse of :func:`logistic`.

    Raises
    ------
    InvalidArgumentError
        If ``p`` lies outside ``[0, 1]``.
    """
    if not 0.0 <= p <= 1.0:
        raise InvalidArgumentError(f"logit: p must be in [0, 1], got {p}")
    if p == 0.0:
        return -math.inf
    if p == 1.0:
        return math.inf
    return math.log(p) - math.log1p(-p)


__all__ = ["logistic", "logit"]
