"""
PyMatrices: matrix classification and exact reduction for Python.

Decides structural and numeric properties of matrices (diagonal,
symmetric, triangular, diagonally dominant, ...) under one process-wide
floating-point tolerance, applies elementwise transforms, and folds
matrices into scalars with exact decimal accumulation.

Submodules:
    core: protocols, exceptions, validation, tolerance model
    functor: predicates, functions, accumulators
    matrix: dense and sparse storage, sources, factories
    decomposition: LU, Crout, QR, Cholesky, SVD, eigen
    inversion: Gaussian inverter
    linear: linear systems and solvers
    catalog: default instances
"""

__version__ = "0.1.0"

from pymatrices.core.compute.tolerances import EPS, ROUND_FACTOR
from pymatrices.core.exceptions import (
    PyMatricesError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    ConvergenceError,
)
from pymatrices.catalog import Catalog, DEFAULT_CATALOG, build_catalog
from pymatrices import functor
from pymatrices import matrix

__all__ = [
    "__version__",
    "EPS",
    "ROUND_FACTOR",
    "PyMatricesError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "ConvergenceError",
    "Catalog",
    "DEFAULT_CATALOG",
    "build_catalog",
    "functor",
    "matrix",
]
