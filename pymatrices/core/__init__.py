"""
Core infrastructure for PyMatrices.

Shared abstractions used by every subpackage (matrix, functor,
decomposition, inversion, linear).

Key components:
    protocols: Matrix, Factory and functor protocols
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerance model (EPS, ROUND_FACTOR)
"""

from pymatrices.core.protocols import (
    Matrix,
    MatrixSource,
    MatrixPredicate,
    AdvancedMatrixPredicate,
    MatrixFunction,
    MatrixAccumulator,
    Factory,
    MatrixDecompositor,
    MatrixInverter,
    LinearSystemSolver,
)
from pymatrices.core.exceptions import (
    PyMatricesError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
    ConvergenceError,
)
from pymatrices.core.compute.tolerances import EPS, ROUND_FACTOR, TOLERANCE

__all__ = [
    # Protocols
    "Matrix",
    "MatrixSource",
    "MatrixPredicate",
    "AdvancedMatrixPredicate",
    "MatrixFunction",
    "MatrixAccumulator",
    "Factory",
    "MatrixDecompositor",
    "MatrixInverter",
    "LinearSystemSolver",
    # Exceptions
    "PyMatricesError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    "ConvergenceError",
    # Tolerance
    "EPS",
    "ROUND_FACTOR",
    "TOLERANCE",
]
