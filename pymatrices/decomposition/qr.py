"""
QR decomposition.

A = Q @ R in reduced form: for an n x p matrix Q is n x k and R is k x p,
k = min(n, p). The raw kernel also reports the numerical rank, counting
diagonal entries of R that are not zero relative to the largest one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
import scipy.linalg as sla

from pymatrices.core.compute.tolerances import EPS
from pymatrices.matrix.base import result_factory, to_dense

if TYPE_CHECKING:
    from pymatrices.core.protocols import Factory, Matrix


QR_Q = 0
QR_R = 1


@dataclass(frozen=True)
class QRFactors:
    """
    Raw QR factors.

    Attributes:
        q: Factor with orthonormal columns (n x k)
        r: Upper triangular factor (k x p)
        rank: Number of |r[i, i]| above EPS * max|r[i, i]|
    """
    q: NDArray[np.floating[Any]]
    r: NDArray[np.floating[Any]]
    rank: int

    @property
    def full_rank(self) -> bool:
        return self.rank == min(self.q.shape[0], self.r.shape[1])


def qr_factor(a: NDArray[np.floating[Any]]) -> QRFactors:
    """
    Reduced QR of a 2-D float64 array (LAPACK via SciPy).

    Empty inputs give empty factors of the matching shapes and rank 0.
    """
    n, p = a.shape
    k = min(n, p)
    if k == 0:
        return QRFactors(q=np.zeros((n, 0)), r=np.zeros((0, p)), rank=0)

    q, r = sla.qr(a, mode='economic')
    diag_r = np.abs(np.diag(r))
    largest = float(diag_r.max())
    rank = int(np.sum(diag_r > EPS * largest)) if largest > 0.0 else 0
    return QRFactors(q=q, r=r, rank=rank)


class QRDecompositor:
    """A = Q @ R, returned as (Q, R)."""

    def decompose(self, matrix: Matrix, factory: Factory | None = None) -> tuple[Any, ...]:
        factory = result_factory(matrix, factory)
        factors = qr_factor(to_dense(matrix))
        return (
            factory.create_matrix_from_array(factors.q),
            factory.create_matrix_from_array(factors.r),
        )
