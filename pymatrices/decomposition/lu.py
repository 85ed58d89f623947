"""
LU-family decompositions.

LUDecompositor uses LAPACK (via SciPy) with partial pivoting and returns
(L, U, P) such that P @ A == L @ U. CroutDecompositor factors without
pivoting into a general lower L and a unit upper U, A == L @ U.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
import scipy.linalg as sla

from pymatrices.core.compute.tolerances import EPS
from pymatrices.core.exceptions import SingularMatrixError
from pymatrices.core.validation import check_square
from pymatrices.matrix.base import result_factory, to_dense

if TYPE_CHECKING:
    from pymatrices.core.protocols import Factory, Matrix


# Index of each factor in the tuple returned by LUDecompositor
LU_L = 0
LU_U = 1
LU_P = 2


class LUDecompositor:
    """P @ A = L @ U with unit lower L and row permutation P."""

    def decompose(self, matrix: Matrix, factory: Factory | None = None) -> tuple[Any, ...]:
        check_square(matrix.rows, matrix.columns, 'LU decomposition')
        factory = result_factory(matrix, factory)

        a = to_dense(matrix)
        if a.size == 0:
            empty = factory.create_matrix(0, 0)
            return (empty, empty, empty)

        # SciPy returns A = P' @ L @ U; the permutation applied to A is P'.T
        p, lower, upper = sla.lu(a)
        return (
            factory.create_matrix_from_array(lower),
            factory.create_matrix_from_array(upper),
            factory.create_matrix_from_array(p.T),
        )


class CroutDecompositor:
    """A = L @ U with unit upper U and no pivoting."""

    def decompose(self, matrix: Matrix, factory: Factory | None = None) -> tuple[Any, ...]:
        check_square(matrix.rows, matrix.columns, 'Crout decomposition')
        factory = result_factory(matrix, factory)

        lower, upper = crout(to_dense(matrix))
        return (
            factory.create_matrix_from_array(lower),
            factory.create_matrix_from_array(upper),
        )


def crout(a: NDArray[np.floating[Any]]) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Crout factorisation of a square array.

    Raises:
        SingularMatrixError: If a pivot of L is zero within EPS
    """
    n = a.shape[0]
    lower = np.zeros((n, n), dtype=np.float64)
    upper = np.eye(n, dtype=np.float64)

    for j in range(n):
        # Column j of L
        lower[j:, j] = a[j:, j] - lower[j:, :j] @ upper[:j, j]
        pivot = lower[j, j]
        if abs(pivot) < EPS:
            raise SingularMatrixError(
                f"Crout decomposition hit a zero pivot at column {j}",
                matrix_name='A',
                rank=j,
                expected_rank=n,
            )
        # Row j of U
        upper[j, j + 1:] = (a[j, j + 1:] - lower[j, :j] @ upper[:j, j + 1:]) / pivot

    return lower, upper
