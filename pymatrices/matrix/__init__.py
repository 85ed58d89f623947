"""
Matrix storage, sources and factories.

Public API:
    Basic1DMatrix, Basic2DMatrix     - dense NumPy storage
    CRSMatrix, CCSMatrix             - sparse SciPy storage
    BASIC1D_FACTORY, BASIC2D_FACTORY, CRS_FACTORY, CCS_FACTORY
    as_*_source()                    - element providers for factories
    as_singleton_matrix(value)       - 1x1 matrix
"""

from pymatrices.matrix.base import AbstractMatrix, result_factory, satisfies, to_dense
from pymatrices.matrix.dense import Basic1DMatrix, Basic2DMatrix
from pymatrices.matrix.sparse import CRSMatrix, CCSMatrix
from pymatrices.matrix.sources import (
    Array1DSource,
    Array2DSource,
    IdentitySource,
    RandomSource,
    RandomSymmetricSource,
    as_array1d_source,
    as_array2d_source,
    as_identity_source,
    as_random_source,
    as_random_symmetric_source,
)
from pymatrices.matrix.factory import (
    BaseFactory,
    Basic1DFactory,
    Basic2DFactory,
    CRSFactory,
    CCSFactory,
    BASIC1D_FACTORY,
    BASIC2D_FACTORY,
    CRS_FACTORY,
    CCS_FACTORY,
    DEFAULT_DENSE_FACTORY,
    DEFAULT_SPARSE_FACTORY,
    DEFAULT_FACTORY,
    as_singleton_matrix,
)

__all__ = [
    # Storage
    "AbstractMatrix",
    "result_factory",
    "satisfies",
    "to_dense",
    "Basic1DMatrix",
    "Basic2DMatrix",
    "CRSMatrix",
    "CCSMatrix",
    # Sources
    "Array1DSource",
    "Array2DSource",
    "IdentitySource",
    "RandomSource",
    "RandomSymmetricSource",
    "as_array1d_source",
    "as_array2d_source",
    "as_identity_source",
    "as_random_source",
    "as_random_symmetric_source",
    # Factories
    "BaseFactory",
    "Basic1DFactory",
    "Basic2DFactory",
    "CRSFactory",
    "CCSFactory",
    "BASIC1D_FACTORY",
    "BASIC2D_FACTORY",
    "CRS_FACTORY",
    "CCS_FACTORY",
    "DEFAULT_DENSE_FACTORY",
    "DEFAULT_SPARSE_FACTORY",
    "DEFAULT_FACTORY",
    "as_singleton_matrix",
]
