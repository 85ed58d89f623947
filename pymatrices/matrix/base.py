"""
AbstractMatrix: the traversal driver shared by every storage kind.

Concrete matrices supply rows, columns, get() and their dense image; this
base class turns predicates, functions and accumulators into whole-matrix
operations. Cells are visited in row-major order. Element tests and exact
accumulators are order-independent, so the order only matters for speed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymatrices.core.compute.tolerances import EPS
from pymatrices.functor.accumulators import as_product_accumulator, as_sum_accumulator
from pymatrices.functor.predicates import is_advanced

if TYPE_CHECKING:
    from pymatrices.core.protocols import (
        AdvancedMatrixPredicate,
        Factory,
        MatrixAccumulator,
        MatrixFunction,
        MatrixPredicate,
    )


class AbstractMatrix(ABC):
    """
    Read-only matrix with predicate, transform and fold support.

    Subclasses must implement rows, columns, get(), to_array() and factory.
    """

    @property
    @abstractmethod
    def rows(self) -> int:
        ...

    @property
    @abstractmethod
    def columns(self) -> int:
        ...

    @abstractmethod
    def get(self, i: int, j: int) -> float:
        """Element at (i, j). Indices are not range-checked here."""
        ...

    @abstractmethod
    def to_array(self) -> NDArray[np.floating[Any]]:
        """Dense float64 copy, shape (rows, columns)."""
        ...

    @property
    @abstractmethod
    def factory(self) -> Factory:
        """Factory producing matrices of the same storage kind."""
        ...

    # === Traversal ===

    def _cells(self) -> Iterator[tuple[int, int, float]]:
        """Yield (i, j, value) for every cell in row-major order."""
        for i in range(self.rows):
            for j in range(self.columns):
                yield i, j, self.get(i, j)

    def satisfies(self, predicate: MatrixPredicate | AdvancedMatrixPredicate) -> bool:
        """
        Test this matrix against a predicate.

        Elementwise predicates are checked with the shape test first, then
        cell by cell, stopping at the first failure. Advanced predicates are
        handed the whole matrix.
        """
        if is_advanced(predicate):
            return bool(predicate.test(self))

        if not predicate.test_shape(self.rows, self.columns):
            return False
        return all(predicate.test(i, j, value) for i, j, value in self._cells())

    def transform(self, function: MatrixFunction, factory: Factory | None = None) -> AbstractMatrix:
        """
        New matrix with ``function.evaluate(i, j, a[i][j])`` in every cell.

        Args:
            function: Elementwise function
            factory: Storage for the result; defaults to this matrix's own

        Returns:
            Transformed matrix (this matrix is left unchanged)
        """
        factory = factory or self.factory
        out = np.empty((self.rows, self.columns), dtype=np.float64)
        for i, j, value in self._cells():
            out[i, j] = function.evaluate(i, j, value)
        return factory.create_matrix_from_array(out)

    def fold(self, accumulator: MatrixAccumulator) -> float:
        """Feed every cell to ``accumulator.update`` and return ``accumulate()``."""
        for i, j, value in self._cells():
            accumulator.update(i, j, value)
        return accumulator.accumulate()

    def sum(self) -> float:
        """Exact sum of all elements, rounded once."""
        return self.fold(as_sum_accumulator(0.0))

    def product(self) -> float:
        """Exact product of all elements, rounded once."""
        return self.fold(as_product_accumulator(1.0))

    # === Conveniences ===

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        if not (0 <= i < self.rows and 0 <= j < self.columns):
            raise IndexError(
                f"index ({i}, {j}) out of bounds for {self.rows}x{self.columns} matrix"
            )
        return self.get(i, j)

    def equals(self, other: Any, tolerance: float = EPS) -> bool:
        """Same shape and every pair of cells within ``tolerance``."""
        if not all(hasattr(other, attr) for attr in ('rows', 'columns', 'get')):
            return False
        if self.rows != other.rows or self.columns != other.columns:
            return False
        for i, j, value in self._cells():
            if not abs(value - other.get(i, j)) < tolerance:
                return False
        return True

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self.rows}, columns={self.columns})"


def to_dense(matrix: Any) -> NDArray[np.floating[Any]]:
    """
    Dense float64 image of any object with rows, columns and get().

    Uses the matrix's own ``to_array`` when it has one.
    """
    if hasattr(matrix, 'to_array'):
        return np.asarray(matrix.to_array(), dtype=np.float64)
    out = np.empty((matrix.rows, matrix.columns), dtype=np.float64)
    for i in range(matrix.rows):
        for j in range(matrix.columns):
            out[i, j] = matrix.get(i, j)
    return out


def result_factory(matrix: Any, factory: Factory | None) -> Factory:
    """Explicit factory, else the matrix's own, else the library default."""
    if factory is not None:
        return factory
    own = getattr(matrix, 'factory', None)
    if own is not None:
        return own
    from pymatrices.matrix.factory import DEFAULT_FACTORY
    return DEFAULT_FACTORY


def satisfies(matrix: Any, predicate: MatrixPredicate | AdvancedMatrixPredicate) -> bool:
    """
    Test any object with rows, columns and get() against a predicate.

    Delegates to ``matrix.satisfies`` when available.
    """
    if hasattr(matrix, 'satisfies'):
        return bool(matrix.satisfies(predicate))
    if is_advanced(predicate):
        return bool(predicate.test(matrix))
    if not predicate.test_shape(matrix.rows, matrix.columns):
        return False
    return all(
        predicate.test(i, j, matrix.get(i, j))
        for i in range(matrix.rows)
        for j in range(matrix.columns)
    )
