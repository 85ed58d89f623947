"""
Matrix functors: predicates, elementwise functions and accumulators.

Public API:
    Predicates  - DIAGONAL_MATRIX, IDENTITY_MATRIX, ZERO_MATRIX, ...,
                  SYMMETRIC_MATRIX, DIAGONALLY_DOMINANT_MATRIX
    Functions   - INC_FUNCTION, DEC_FUNCTION, INV_FUNCTION, as_*_function()
    Accumulators - as_sum_accumulator(), as_product_accumulator(),
                   as_sum_function_accumulator(), as_product_function_accumulator()
"""

from pymatrices.functor.predicates import (
    DiagonalMatrixPredicate,
    IdentityMatrixPredicate,
    ZeroMatrixPredicate,
    TridiagonalMatrixPredicate,
    PositiveMatrixPredicate,
    NegativeMatrixPredicate,
    LowerBidiagonalMatrixPredicate,
    UpperBidiagonalMatrixPredicate,
    LowerTriangularMatrixPredicate,
    UpperTriangularMatrixPredicate,
    SymmetricMatrixPredicate,
    DiagonallyDominantPredicate,
    DIAGONAL_MATRIX,
    IDENTITY_MATRIX,
    ZERO_MATRIX,
    TRIDIAGONAL_MATRIX,
    POSITIVE_MATRIX,
    NEGATIVE_MATRIX,
    LOWER_BIDIAGONAL_MATRIX,
    UPPER_BIDIAGONAL_MATRIX,
    LOWER_TRIANGULAR_MATRIX,
    UPPER_TRIANGULAR_MATRIX,
    SYMMETRIC_MATRIX,
    DIAGONALLY_DOMINANT_MATRIX,
    is_advanced,
)
from pymatrices.functor.functions import (
    IncMatrixFunction,
    DecMatrixFunction,
    InvMatrixFunction,
    PlusMatrixFunction,
    MinusMatrixFunction,
    MulMatrixFunction,
    DivMatrixFunction,
    ModMatrixFunction,
    INC_FUNCTION,
    DEC_FUNCTION,
    INV_FUNCTION,
    as_plus_function,
    as_minus_function,
    as_mul_function,
    as_div_function,
    as_mod_function,
)
from pymatrices.functor.accumulators import (
    SumMatrixAccumulator,
    ProductMatrixAccumulator,
    FunctionMatrixAccumulator,
    as_sum_accumulator,
    as_product_accumulator,
    as_sum_function_accumulator,
    as_product_function_accumulator,
)

__all__ = [
    # Predicate types
    "DiagonalMatrixPredicate",
    "IdentityMatrixPredicate",
    "ZeroMatrixPredicate",
    "TridiagonalMatrixPredicate",
    "PositiveMatrixPredicate",
    "NegativeMatrixPredicate",
    "LowerBidiagonalMatrixPredicate",
    "UpperBidiagonalMatrixPredicate",
    "LowerTriangularMatrixPredicate",
    "UpperTriangularMatrixPredicate",
    "SymmetricMatrixPredicate",
    "DiagonallyDominantPredicate",
    # Predicate instances
    "DIAGONAL_MATRIX",
    "IDENTITY_MATRIX",
    "ZERO_MATRIX",
    "TRIDIAGONAL_MATRIX",
    "POSITIVE_MATRIX",
    "NEGATIVE_MATRIX",
    "LOWER_BIDIAGONAL_MATRIX",
    "UPPER_BIDIAGONAL_MATRIX",
    "LOWER_TRIANGULAR_MATRIX",
    "UPPER_TRIANGULAR_MATRIX",
    "SYMMETRIC_MATRIX",
    "DIAGONALLY_DOMINANT_MATRIX",
    "is_advanced",
    # Functions
    "IncMatrixFunction",
    "DecMatrixFunction",
    "InvMatrixFunction",
    "PlusMatrixFunction",
    "MinusMatrixFunction",
    "MulMatrixFunction",
    "DivMatrixFunction",
    "ModMatrixFunction",
    "INC_FUNCTION",
    "DEC_FUNCTION",
    "INV_FUNCTION",
    "as_plus_function",
    "as_minus_function",
    "as_mul_function",
    "as_div_function",
    "as_mod_function",
    # Accumulators
    "SumMatrixAccumulator",
    "ProductMatrixAccumulator",
    "FunctionMatrixAccumulator",
    "as_sum_accumulator",
    "as_product_accumulator",
    "as_sum_function_accumulator",
    "as_product_function_accumulator",
]
