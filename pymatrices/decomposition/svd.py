"""
Singular value decomposition.

A = U @ S @ V.T with S diagonal (reduced form: S is k x k, k = min(n, p)).
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
import scipy.linalg as sla

from pymatrices.matrix.base import result_factory, to_dense

if TYPE_CHECKING:
    from pymatrices.core.protocols import Factory, Matrix


SVD_U = 0
SVD_S = 1
SVD_V = 2


class SingularValueDecompositor:
    """Returns (U, S, V), singular values on the diagonal of S in descending order."""

    def decompose(self, matrix: Matrix, factory: Factory | None = None) -> tuple[Any, ...]:
        factory = result_factory(matrix, factory)
        a = to_dense(matrix)
        k = min(a.shape)
        if k == 0:
            return (
                factory.create_matrix(a.shape[0], 0),
                factory.create_matrix(0, 0),
                factory.create_matrix(a.shape[1], 0),
            )

        u, s, vt = sla.svd(a, full_matrices=False)
        return (
            factory.create_matrix_from_array(u),
            factory.create_matrix_from_array(np.diag(s)),
            factory.create_matrix_from_array(vt.T),
        )
