"""
Cholesky decomposition.

A = L @ L.T for symmetric positive definite A. Symmetry is decided by the
library-wide SYMMETRIC_MATRIX predicate, so the same tolerance governs
classification and factorisation.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
import scipy.linalg as sla

from pymatrices.core.exceptions import NotPositiveDefiniteError, ValidationError
from pymatrices.core.validation import check_square
from pymatrices.functor.predicates import SYMMETRIC_MATRIX
from pymatrices.matrix.base import result_factory, to_dense

if TYPE_CHECKING:
    from pymatrices.core.protocols import Factory, Matrix


CHOLESKY_L = 0


class CholeskyDecompositor:
    """Returns (L,) with L lower triangular."""

    def decompose(self, matrix: Matrix, factory: Factory | None = None) -> tuple[Any, ...]:
        check_square(matrix.rows, matrix.columns, 'Cholesky decomposition')
        if not SYMMETRIC_MATRIX.test(matrix):
            raise ValidationError("Cholesky decomposition: matrix is not symmetric")
        factory = result_factory(matrix, factory)

        a = to_dense(matrix)
        if a.size == 0:
            return (factory.create_matrix(0, 0),)

        try:
            lower = sla.cholesky(a, lower=True)
        except np.linalg.LinAlgError as e:
            min_eig = float(np.min(np.linalg.eigvalsh(a)))
            raise NotPositiveDefiniteError(
                f"Cholesky decomposition failed: matrix is not positive definite "
                f"(min eigenvalue {min_eig:.6g})",
                matrix_name='A',
                min_eigenvalue=min_eig,
            ) from e

        return (factory.create_matrix_from_array(lower),)
