"""
Sampling Interfaces
===================

Sample containers returned by sampling strategies.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

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
        Array representation of the samples.
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
    Array-backed sample of shape ``(n_samples, n_dimensions)``.

    Parameters
    ----------
    data : array_like
        Floating-point samples. A 1D array is read as ``n`` univariate
        observations and stored as a column.

    Raises
    ------
    ValueError
        If data has more than two dimensions.
    """

    __slots__ = ("data",)

    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.ArrayLike) -> None:
        arr = np.asarray(data)
        if arr.dtype.kind != "f":
            arr = arr.astype(np.float64)
        if arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        if arr.ndim != 2:
            raise ValueError("ArraySample expects a 1D array or a 2D array of shape (n, d).")
        self.data = arr

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
        yield from self.data

    @property
    def dimension(self) -> int:
        """Dimensionality of the observations (d)."""
        return int(self.data.shape[1])

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        return self.data

    @property
    def dtype(self) -> np.dtype[Any]:
        """Floating dtype of the stored observations."""
        return self.data.dtype

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self.data.shape
        return int(n), int(d)


__all__ = [
    "Sample",
    "ArraySample",
]
