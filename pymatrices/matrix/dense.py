"""
Dense matrix storage backed by NumPy.

Basic1DMatrix keeps a flat row-major float64 buffer; Basic2DMatrix keeps a
2-D float64 ndarray. Both own a private copy of their data.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymatrices.core.exceptions import DimensionError
from pymatrices.matrix.base import AbstractMatrix

if TYPE_CHECKING:
    from pymatrices.core.protocols import Factory


class Basic1DMatrix(AbstractMatrix):
    """Dense matrix over a flat row-major buffer of length rows * columns."""

    def __init__(self, rows: int, columns: int, data: NDArray[np.floating[Any]]):
        data = np.array(data, dtype=np.float64).ravel()
        if data.shape[0] != rows * columns:
            raise DimensionError(
                f"data: expected {rows * columns} elements for a {rows}x{columns} matrix, "
                f"got {data.shape[0]}"
            )
        self._rows = rows
        self._columns = columns
        self._data = data

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def get(self, i: int, j: int) -> float:
        return float(self._data[i * self._columns + j])

    def to_array(self) -> NDArray[np.floating[Any]]:
        return self._data.reshape(self._rows, self._columns).copy()

    @property
    def factory(self) -> Factory:
        from pymatrices.matrix.factory import BASIC1D_FACTORY
        return BASIC1D_FACTORY


class Basic2DMatrix(AbstractMatrix):
    """Dense matrix over a 2-D ndarray."""

    def __init__(self, data: NDArray[np.floating[Any]]):
        data = np.array(data, dtype=np.float64)
        if data.ndim != 2:
            raise DimensionError(
                f"data: expected 2D array, got {data.ndim}D with shape {data.shape}"
            )
        self._data = data

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        return self._data.shape[1]

    def get(self, i: int, j: int) -> float:
        return float(self._data[i, j])

    def to_array(self) -> NDArray[np.floating[Any]]:
        return self._data.copy()

    @property
    def factory(self) -> Factory:
        from pymatrices.matrix.factory import BASIC2D_FACTORY
        return BASIC2D_FACTORY
