"""
Eigen decomposition.

Returns (V, D) with A @ V == V @ D. Symmetric input (by the library-wide
SYMMETRIC_MATRIX predicate) goes through the symmetric solver and D is
diagonal. Otherwise complex conjugate pairs a +/- bi are returned in real
block form: D carries [[a, b], [-b, a]] blocks and V the matching real and
imaginary parts of the eigenvectors.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
import scipy.linalg as sla

from pymatrices.core.validation import check_square
from pymatrices.functor.predicates import SYMMETRIC_MATRIX
from pymatrices.matrix.base import result_factory, to_dense

if TYPE_CHECKING:
    from pymatrices.core.protocols import Factory, Matrix


EIGEN_V = 0
EIGEN_D = 1


class EigenDecompositor:

    def decompose(self, matrix: Matrix, factory: Factory | None = None) -> tuple[Any, ...]:
        check_square(matrix.rows, matrix.columns, 'Eigen decomposition')
        factory = result_factory(matrix, factory)

        a = to_dense(matrix)
        if a.size == 0:
            empty = factory.create_matrix(0, 0)
            return (empty, empty)

        if SYMMETRIC_MATRIX.test(matrix):
            w, v = sla.eigh(a)
            return (
                factory.create_matrix_from_array(v),
                factory.create_matrix_from_array(np.diag(w)),
            )

        w, v = sla.eig(a)
        if np.all(w.imag == 0.0):
            return (
                factory.create_matrix_from_array(v.real),
                factory.create_matrix_from_array(np.diag(w.real)),
            )

        w_real, v_real = sla.cdf2rdf(w, v)
        return (
            factory.create_matrix_from_array(v_real),
            factory.create_matrix_from_array(w_real),
        )
