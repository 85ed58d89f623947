"""
Matrix inversion by Gaussian elimination.

Solves A @ X = I with LAPACK's partially pivoted LU (scipy.linalg.solve).
An exactly singular matrix raises; a merely ill-conditioned one is
inverted with a RuntimeWarning.
"""

from __future__ import annotations

import warnings
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
import scipy.linalg as sla

from pymatrices.core.compute.tolerances import EPS
from pymatrices.core.exceptions import SingularMatrixError
from pymatrices.core.validation import check_finite, check_square
from pymatrices.matrix.base import result_factory, to_dense

if TYPE_CHECKING:
    from pymatrices.core.protocols import Factory, Matrix


def condition_number(a: NDArray[np.floating[Any]]) -> float:
    """
    Condition number from singular values.

    Returns inf if the matrix is singular.
    """
    s = np.linalg.svd(a, compute_uv=False)
    if s[-1] == 0:
        return np.inf
    return float(s[0] / s[-1])


def solve_dense(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    operation: str,
) -> NDArray[np.floating[Any]]:
    """
    Direct solve of a @ x = b with singularity and conditioning reporting.

    Raises:
        SingularMatrixError: If LAPACK reports an exactly singular matrix

    Warns:
        RuntimeWarning: If cond(a) exceeds 1 / EPS
    """
    try:
        with warnings.catch_warnings():
            # Ill-conditioning is reported below, once, against EPS
            warnings.simplefilter('ignore', sla.LinAlgWarning)
            x = sla.solve(a, b)
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(
            f"{operation}: matrix is singular",
            matrix_name='A',
            condition_number=condition_number(a),
            rank=int(np.linalg.matrix_rank(a)),
            expected_rank=a.shape[0],
        ) from e

    cond = condition_number(a)
    if cond > 1.0 / EPS:
        warnings.warn(
            f"{operation}: matrix is ill-conditioned (cond={cond:.3g}); "
            f"results may be inaccurate",
            RuntimeWarning,
            stacklevel=3,
        )
    return x


class GaussianInverter:
    """Inverse of a square non-singular matrix."""

    def inverse(self, matrix: Matrix, factory: Factory | None = None) -> Any:
        check_square(matrix.rows, matrix.columns, 'Gaussian inversion')
        factory = result_factory(matrix, factory)

        a = to_dense(matrix)
        check_finite(a, 'A')
        n = a.shape[0]
        if n == 0:
            return factory.create_matrix(0, 0)

        inverse = solve_dense(a, np.eye(n, dtype=np.float64), 'Gaussian inversion')
        return factory.create_matrix_from_array(inverse)
