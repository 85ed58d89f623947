"""
Core protocols for PyMatrices.

These define the structural interfaces through which matrices, factories
and functors meet. We use Protocol (structural typing) rather than ABC
(nominal typing) so that any object with the right shape plugs in: a
custom predicate needs no base class, only the two test methods.

Design Principles:
    - Minimal contracts: a matrix is rows, columns and an element accessor
    - Functors see one cell at a time: (row, column, value)
    - Traversal lives with the matrix, never inside a functor
"""

from __future__ import annotations

from typing import Protocol, Any, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import ArrayLike, NDArray


@runtime_checkable
class Matrix(Protocol):
    """
    Minimal read-only matrix contract.

    Every predicate, function and accumulator in this library is evaluated
    against objects satisfying this protocol. Storage layout is invisible.
    """

    @property
    def rows(self) -> int:
        """Number of rows."""
        ...

    @property
    def columns(self) -> int:
        """Number of columns."""
        ...

    def get(self, i: int, j: int) -> float:
        """Element at row ``i``, column ``j``."""
        ...


@runtime_checkable
class MatrixSource(Protocol):
    """Something a factory can copy elements from."""

    @property
    def rows(self) -> int:
        ...

    @property
    def columns(self) -> int:
        ...

    def get(self, i: int, j: int) -> float:
        ...


@runtime_checkable
class MatrixPredicate(Protocol):
    """
    Elementwise predicate.

    A matrix satisfies the predicate iff ``test_shape(rows, columns)`` holds
    and ``test(i, j, value)`` holds for every cell. Element tests must not
    depend on visitation order.
    """

    def test_shape(self, rows: int, columns: int) -> bool:
        """Whether the property is applicable to this shape at all."""
        ...

    def test(self, i: int, j: int, value: float) -> bool:
        """Whether a single cell is consistent with the property."""
        ...


@runtime_checkable
class AdvancedMatrixPredicate(Protocol):
    """Predicate that needs cross-element context (e.g. a[i][j] vs a[j][i])."""

    def test(self, matrix: Matrix) -> bool:
        ...


@runtime_checkable
class MatrixFunction(Protocol):
    """Per-cell transform ``(i, j, value) -> new value``."""

    def evaluate(self, i: int, j: int, value: float) -> float:
        ...


@runtime_checkable
class MatrixAccumulator(Protocol):
    """
    Stateful fold of a matrix into a scalar.

    ``update`` mutates the accumulator, so one instance must not be shared
    across concurrent folds.
    """

    def update(self, i: int, j: int, value: float) -> None:
        ...

    def accumulate(self) -> float:
        ...


@runtime_checkable
class Factory(Protocol):
    """Builds matrices of one storage kind."""

    @property
    def name(self) -> str:
        """
        Factory identifier.

        Examples: 'basic1d', 'basic2d', 'crs', 'ccs'
        """
        ...

    def create_matrix(self, rows: int, columns: int) -> Any:
        ...

    def create_matrix_from_array(self, array: 'ArrayLike') -> Any:
        ...

    def create_matrix_from_source(self, source: MatrixSource) -> Any:
        ...


@runtime_checkable
class MatrixDecompositor(Protocol):
    """Splits a matrix into a tuple of factors addressed by index constants."""

    def decompose(self, matrix: Matrix, factory: Factory | None = None) -> tuple[Any, ...]:
        ...


@runtime_checkable
class MatrixInverter(Protocol):

    def inverse(self, matrix: Matrix, factory: Factory | None = None) -> Any:
        ...


@runtime_checkable
class LinearSystemSolver(Protocol):
    """Solves ``a @ x = b`` for a LinearSystem."""

    @property
    def name(self) -> str:
        ...

    def solve(self, system: Any) -> 'NDArray[np.floating[Any]]':
        ...
