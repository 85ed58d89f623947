"""
Structural and numeric matrix predicates.

Two kinds:

- Elementwise predicates pair a shape test with a per-cell test. A matrix
  satisfies one iff the shape test passes and every cell passes; the
  traversal driver may stop at the first failing cell.
- Advanced predicates receive the whole matrix because they compare cells
  with each other (symmetry, diagonal dominance).

All tolerance decisions use the process-wide EPS. A non-square matrix
handed to a square-only predicate is answered with False, never an error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pymatrices.core.compute.tolerances import EPS

if TYPE_CHECKING:
    from pymatrices.core.protocols import Matrix


class _SquarePredicate:
    """Shape test shared by every square-only elementwise predicate."""

    def test_shape(self, rows: int, columns: int) -> bool:
        return rows == columns

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class _AnyShapePredicate:

    def test_shape(self, rows: int, columns: int) -> bool:
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DiagonalMatrixPredicate(_SquarePredicate):
    """Off-diagonal cells are zero within EPS."""

    def test(self, i: int, j: int, value: float) -> bool:
        return abs(value) < EPS if i != j else True


class IdentityMatrixPredicate(_SquarePredicate):
    """Diagonal cells within EPS of 1, off-diagonal cells within EPS of 0."""

    def test(self, i: int, j: int, value: float) -> bool:
        if i == j:
            return abs(1.0 - value) < EPS
        return abs(value) < EPS


class ZeroMatrixPredicate(_AnyShapePredicate):

    def test(self, i: int, j: int, value: float) -> bool:
        return abs(value) < EPS


class TridiagonalMatrixPredicate(_SquarePredicate):
    """Cells more than one index away from the diagonal are zero within EPS."""

    def test(self, i: int, j: int, value: float) -> bool:
        return abs(value) < EPS if abs(i - j) > 1 else True


class PositiveMatrixPredicate(_AnyShapePredicate):
    """Every cell strictly greater than zero (no tolerance)."""

    def test(self, i: int, j: int, value: float) -> bool:
        return value > 0.0


class NegativeMatrixPredicate(_AnyShapePredicate):
    """Every cell strictly less than zero (no tolerance)."""

    def test(self, i: int, j: int, value: float) -> bool:
        return value < 0.0


class LowerBidiagonalMatrixPredicate(_SquarePredicate):
    """
    Cells on the diagonal and the first sub-diagonal are zero within EPS.

    Note this holds for matrices whose lower bidiagonal band is *empty*,
    which is the opposite of the textbook definition. The rule is kept
    literally because existing callers depend on it.
    """

    def test(self, i: int, j: int, value: float) -> bool:
        if i == j or i == j + 1:
            return abs(value) < EPS
        return True


class UpperBidiagonalMatrixPredicate(_SquarePredicate):
    """
    Cells on the diagonal and the first super-diagonal are zero within EPS.

    Same literal rule as LowerBidiagonalMatrixPredicate, mirrored.
    """

    def test(self, i: int, j: int, value: float) -> bool:
        if i == j or i == j - 1:
            return abs(value) < EPS
        return True


class LowerTriangularMatrixPredicate(_SquarePredicate):
    """
    Cells strictly below the diagonal are zero within EPS.

    As with the bidiagonal predicates, the tested band is the one a lower
    triangular matrix would normally populate. Kept literally.
    """

    def test(self, i: int, j: int, value: float) -> bool:
        return abs(value) < EPS if i > j else True


class UpperTriangularMatrixPredicate(_SquarePredicate):
    """Cells strictly above the diagonal are zero within EPS (mirror of the lower rule)."""

    def test(self, i: int, j: int, value: float) -> bool:
        return abs(value) < EPS if i < j else True


class SymmetricMatrixPredicate:
    """
    ``a[i][j]`` and ``a[j][i]`` agree to relative tolerance EPS.

    The relative difference ``|a - b| / max(|a|, |b|)`` is undefined when
    both entries are zero; such pairs are equal.
    """

    def test(self, matrix: Matrix) -> bool:
        n = matrix.rows
        if n != matrix.columns:
            return False

        for i in range(n):
            for j in range(i + 1, n):
                a = matrix.get(i, j)
                b = matrix.get(j, i)
                scale = max(abs(a), abs(b))
                if scale == 0.0:
                    continue
                if abs(a - b) / scale > EPS:
                    return False
        return True

    def __repr__(self) -> str:
        return "SymmetricMatrixPredicate()"


class DiagonallyDominantPredicate:
    """
    For every row, the off-diagonal absolute sum does not exceed
    ``|a[i][i]| - EPS``.
    """

    def test(self, matrix: Matrix) -> bool:
        n = matrix.rows
        if n != matrix.columns:
            return False

        for i in range(n):
            off_diagonal = 0.0
            for j in range(n):
                if i != j:
                    off_diagonal += abs(matrix.get(i, j))
            if off_diagonal > abs(matrix.get(i, i)) - EPS:
                return False
        return True

    def __repr__(self) -> str:
        return "DiagonallyDominantPredicate()"


DIAGONAL_MATRIX = DiagonalMatrixPredicate()
IDENTITY_MATRIX = IdentityMatrixPredicate()
ZERO_MATRIX = ZeroMatrixPredicate()
TRIDIAGONAL_MATRIX = TridiagonalMatrixPredicate()
POSITIVE_MATRIX = PositiveMatrixPredicate()
NEGATIVE_MATRIX = NegativeMatrixPredicate()
LOWER_BIDIAGONAL_MATRIX = LowerBidiagonalMatrixPredicate()
UPPER_BIDIAGONAL_MATRIX = UpperBidiagonalMatrixPredicate()
LOWER_TRIANGULAR_MATRIX = LowerTriangularMatrixPredicate()
UPPER_TRIANGULAR_MATRIX = UpperTriangularMatrixPredicate()

SYMMETRIC_MATRIX = SymmetricMatrixPredicate()
DIAGONALLY_DOMINANT_MATRIX = DiagonallyDominantPredicate()


def is_advanced(predicate: object) -> bool:
    """Whether ``predicate`` needs the whole matrix rather than single cells."""
    return not hasattr(predicate, 'test_shape')
