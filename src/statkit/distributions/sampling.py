"""
Sample Containers
=================

Containers returned by sampling strategies.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

from statkit.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the draws.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Draws stored as a 2D float array of shape ``(n, d)``.

    Row ``i`` is the ``i``-th draw; univariate distributions have ``d = 1``.

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array of shape (n, d).

    Raises
    ------
    InvalidArgumentError
        If ``data`` is not two-dimensional.
    """

    dimension: int
    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise InvalidArgumentError("ArraySample expects a 2D array of shape (n, d)")
        self.data = data
        self.dimension = int(data.shape[1])

    @classmethod
    def from_draws(cls, draws: list[Any], dimension: int) -> ArraySample:
        """Stack scalar or vector draws into an ``(n, dimension)`` sample."""
        arr = np.asarray(draws, dtype=np.float64)
        return cls(arr.reshape(len(draws), dimension))

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
        yield from self.data

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)

    def column(self, index: int = 0) -> npt.NDArray[np.floating[Any]]:
        """Return the ``index``-th coordinate of every draw as a 1D array."""
        return self.data[:, index]


__all__ = [
    "Sample",
    "ArraySample",
]
