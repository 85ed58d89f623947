"""
Matrix sources: element providers a factory can copy from.

A source is anything with rows, columns and get(i, j). The ones here wrap
arrays or generate identity / random content. Random sources draw all
their values at construction, so repeated get() calls are stable.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrices.core.exceptions import DimensionError
from pymatrices.core.validation import check_2d, check_array, check_dimensions


class Array1DSource:
    """Flat row-major buffer interpreted as a rows x columns matrix."""

    def __init__(self, rows: int, columns: int, array: ArrayLike):
        check_dimensions(rows, columns, 'Array1DSource')
        data = check_array(array, 'array').ravel()
        if data.shape[0] < rows * columns:
            raise DimensionError(
                f"array: need at least {rows * columns} elements for {rows}x{columns}, "
                f"got {data.shape[0]}"
            )
        self._rows = rows
        self._columns = columns
        self._array = data

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def get(self, i: int, j: int) -> float:
        return float(self._array[i * self._columns + j])


class Array2DSource:
    """2-D array-like (nested lists, ndarray)."""

    def __init__(self, array: ArrayLike):
        data = check_array(array, 'array')
        check_2d(data, 'array')
        self._array = data

    @property
    def rows(self) -> int:
        return self._array.shape[0]

    @property
    def columns(self) -> int:
        return self._array.shape[1]

    def get(self, i: int, j: int) -> float:
        return float(self._array[i, j])


class IdentitySource:

    def __init__(self, size: int):
        check_dimensions(size, size, 'IdentitySource')
        self._size = size

    @property
    def rows(self) -> int:
        return self._size

    @property
    def columns(self) -> int:
        return self._size

    def get(self, i: int, j: int) -> float:
        return 1.0 if i == j else 0.0


class RandomSource:
    """Uniform [0, 1) values drawn from ``rng``."""

    def __init__(self, rows: int, columns: int, rng: np.random.Generator | None = None):
        check_dimensions(rows, columns, 'RandomSource')
        rng = rng if rng is not None else np.random.default_rng()
        self._values: NDArray[np.floating[Any]] = rng.random((rows, columns))

    @property
    def rows(self) -> int:
        return self._values.shape[0]

    @property
    def columns(self) -> int:
        return self._values.shape[1]

    def get(self, i: int, j: int) -> float:
        return float(self._values[i, j])


class RandomSymmetricSource:
    """Uniform [0, 1) values mirrored across the diagonal."""

    def __init__(self, size: int, rng: np.random.Generator | None = None):
        check_dimensions(size, size, 'RandomSymmetricSource')
        rng = rng if rng is not None else np.random.default_rng()
        upper = np.triu(rng.random((size, size)))
        self._values: NDArray[np.floating[Any]] = upper + np.triu(upper, k=1).T

    @property
    def rows(self) -> int:
        return self._values.shape[0]

    @property
    def columns(self) -> int:
        return self._values.shape[1]

    def get(self, i: int, j: int) -> float:
        return float(self._values[i, j])


def as_array1d_source(rows: int, columns: int, array: ArrayLike) -> Array1DSource:
    return Array1DSource(rows, columns, array)


def as_array2d_source(array: ArrayLike) -> Array2DSource:
    return Array2DSource(array)


def as_identity_source(size: int) -> IdentitySource:
    return IdentitySource(size)


def as_random_source(rows: int, columns: int, rng: np.random.Generator | None = None) -> RandomSource:
    return RandomSource(rows, columns, rng)


def as_random_symmetric_source(size: int, rng: np.random.Generator | None = None) -> RandomSymmetricSource:
    return RandomSymmetricSource(size, rng)
