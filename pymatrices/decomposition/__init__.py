"""
Matrix decompositions.

Each decompositor returns a tuple of matrices; index constants name the
position of each factor (e.g. ``factors[LU_L]`` is the lower factor).

Decompositors:
    LUDecompositor           - (L, U, P), P @ A = L @ U
    CroutDecompositor        - (L, U), unit upper U
    QRDecompositor           - (Q, R)
    CholeskyDecompositor     - (L,)
    SingularValueDecompositor - (U, S, V)
    EigenDecompositor        - (V, D)
"""

from pymatrices.decomposition.lu import (
    LUDecompositor,
    CroutDecompositor,
    crout,
    LU_L,
    LU_U,
    LU_P,
)
from pymatrices.decomposition.qr import QRDecompositor, QRFactors, qr_factor, QR_Q, QR_R
from pymatrices.decomposition.cholesky import CholeskyDecompositor, CHOLESKY_L
from pymatrices.decomposition.svd import SingularValueDecompositor, SVD_U, SVD_S, SVD_V
from pymatrices.decomposition.eigen import EigenDecompositor, EIGEN_V, EIGEN_D

__all__ = [
    # Decompositors
    "LUDecompositor",
    "CroutDecompositor",
    "QRDecompositor",
    "CholeskyDecompositor",
    "SingularValueDecompositor",
    "EigenDecompositor",
    # Raw kernels
    "crout",
    "qr_factor",
    "QRFactors",
    # Index constants
    "LU_L",
    "LU_U",
    "LU_P",
    "QR_Q",
    "QR_R",
    "CHOLESKY_L",
    "SVD_U",
    "SVD_S",
    "SVD_V",
    "EIGEN_V",
    "EIGEN_D",
]
