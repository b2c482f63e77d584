"""
Linear Algebra Boundary
=======================

The few dense linear algebra operations the multivariate families need,
backed by :mod:`numpy.linalg` and :mod:`scipy.linalg`. Nothing else in the
package imports either directly.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

import numpy as np
from scipy.linalg import solve_triangular

from statkit.errors import InvalidParameterError

if TYPE_CHECKING:
    import numpy.typing as npt

    type FloatMatrix = npt.NDArray[np.floating[Any]]
    type FloatVector = npt.NDArray[np.floating[Any]]


def as_vector(values: Any, name: str = "vector") -> FloatVector:
    """Convert ``values`` to a 1D float array of finite numbers."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1 or arr.size == 0:
        raise InvalidParameterError(f"{name} is a non-empty 1D array")
    if not np.all(np.isfinite(arr)):
        raise InvalidParameterError(f"{name} has finite entries")
    return arr


def as_square_matrix(values: Any, size: int, name: str = "matrix") -> FloatMatrix:
    """Convert ``values`` to a ``size x size`` float array of finite numbers."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.shape != (size, size):
        raise InvalidParameterError(f"{name} has shape ({size}, {size})")
    if not np.all(np.isfinite(arr)):
        raise InvalidParameterError(f"{name} has finite entries")
    return arr


def is_symmetric(matrix: FloatMatrix, rtol: float = 1e-10, atol: float = 1e-12) -> bool:
    """Return ``True`` if ``matrix`` equals its transpose within tolerance."""
    return bool(np.allclose(matrix, matrix.T, rtol=rtol, atol=atol))


def cholesky(matrix: FloatMatrix) -> FloatMatrix | None:
    """
    Lower Cholesky factor ``L`` with ``L @ L.T == matrix``.

    Returns ``None`` when ``matrix`` is not positive definite.
    """
    try:
        return np.linalg.cholesky(matrix)
    except np.linalg.LinAlgError:
        return None


def log_determinant_from_cholesky(lower: FloatMatrix) -> float:
    """``ln det(A)`` given the Cholesky factor of ``A``."""
    return float(2.0 * np.sum(np.log(np.diag(lower))))


def solve_lower(lower: FloatMatrix, rhs: FloatVector) -> FloatVector:
    """Solve ``L y = rhs`` for a lower triangular ``L``."""
    return solve_triangular(lower, rhs, lower=True)


def inverse(matrix: FloatMatrix) -> FloatMatrix:
    """Matrix inverse."""
    return np.linalg.inv(matrix)


__all__ = [
    "as_vector",
    "as_square_matrix",
    "is_symmetric",
    "cholesky",
    "log_determinant_from_cholesky",
    "solve_lower",
    "inverse",
]
