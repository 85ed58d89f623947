"""
Matrix factories, one per storage kind.

Every factory builds zero, identity, constant, random and array- or
source-backed matrices. Dense factories produce Basic1DMatrix /
Basic2DMatrix; sparse factories produce CRSMatrix / CCSMatrix.

Usage:
    from pymatrices.matrix.factory import BASIC2D_FACTORY

    a = BASIC2D_FACTORY.create_matrix_from_array([[1.0, 2.0], [3.0, 4.0]])
    i = BASIC2D_FACTORY.create_identity_matrix(3)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray
import scipy.sparse as sp

from pymatrices.core.protocols import MatrixSource
from pymatrices.core.validation import check_2d, check_array, check_dimensions
from pymatrices.matrix.base import AbstractMatrix
from pymatrices.matrix.dense import Basic1DMatrix, Basic2DMatrix
from pymatrices.matrix.sources import IdentitySource, RandomSource, RandomSymmetricSource
from pymatrices.matrix.sparse import CCSMatrix, CRSMatrix


class BaseFactory(ABC):
    """
    Shared construction logic. Subclasses only decide how a validated dense
    float64 array becomes a matrix of their storage kind.
    """

    name: str = ''

    @abstractmethod
    def _from_dense(self, array: NDArray[np.floating[Any]]) -> AbstractMatrix:
        ...

    def create_matrix(self, rows: int, columns: int) -> AbstractMatrix:
        """Zero matrix of the given shape."""
        check_dimensions(rows, columns, 'create_matrix')
        return self._from_dense(np.zeros((rows, columns), dtype=np.float64))

    def create_matrix_from_array(self, array: ArrayLike) -> AbstractMatrix:
        """
        Matrix holding a copy of a 2-D array-like.

        Raises:
            ValidationError: If the input is not numeric
            DimensionError: If the input is not 2-D
        """
        data = check_array(array, 'array')
        check_2d(data, 'array')
        return self._from_dense(data)

    def create_matrix_from_source(self, source: MatrixSource) -> AbstractMatrix:
        """Matrix copied element by element from a source."""
        rows, columns = source.rows, source.columns
        check_dimensions(rows, columns, 'source')
        data = np.empty((rows, columns), dtype=np.float64)
        for i in range(rows):
            for j in range(columns):
                data[i, j] = source.get(i, j)
        return self._from_dense(data)

    def create_constant_matrix(self, rows: int, columns: int, value: float) -> AbstractMatrix:
        check_dimensions(rows, columns, 'create_constant_matrix')
        return self._from_dense(np.full((rows, columns), float(value), dtype=np.float64))

    def create_identity_matrix(self, size: int) -> AbstractMatrix:
        return self.create_matrix_from_source(IdentitySource(size))

    def create_random_matrix(
        self,
        rows: int,
        columns: int,
        rng: np.random.Generator | None = None,
    ) -> AbstractMatrix:
        """Uniform [0, 1) entries."""
        return self.create_matrix_from_source(RandomSource(rows, columns, rng))

    def create_random_symmetric_matrix(
        self,
        size: int,
        rng: np.random.Generator | None = None,
    ) -> AbstractMatrix:
        return self.create_matrix_from_source(RandomSymmetricSource(size, rng))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Basic1DFactory(BaseFactory):
    name = 'basic1d'

    def _from_dense(self, array: NDArray[np.floating[Any]]) -> Basic1DMatrix:
        rows, columns = array.shape
        return Basic1DMatrix(rows, columns, array)


class Basic2DFactory(BaseFactory):
    name = 'basic2d'

    def _from_dense(self, array: NDArray[np.floating[Any]]) -> Basic2DMatrix:
        return Basic2DMatrix(array)


class CRSFactory(BaseFactory):
    name = 'crs'

    def _from_dense(self, array: NDArray[np.floating[Any]]) -> CRSMatrix:
        return CRSMatrix(array)

    def create_matrix(self, rows: int, columns: int) -> CRSMatrix:
        check_dimensions(rows, columns, 'create_matrix')
        return CRSMatrix(sp.csr_array((rows, columns), dtype=np.float64))

    def create_identity_matrix(self, size: int) -> CRSMatrix:
        check_dimensions(size, size, 'create_identity_matrix')
        return CRSMatrix(sp.eye_array(size, format='csr', dtype=np.float64))


class CCSFactory(BaseFactory):
    name = 'ccs'

    def _from_dense(self, array: NDArray[np.floating[Any]]) -> CCSMatrix:
        return CCSMatrix(array)

    def create_matrix(self, rows: int, columns: int) -> CCSMatrix:
        check_dimensions(rows, columns, 'create_matrix')
        return CCSMatrix(sp.csc_array((rows, columns), dtype=np.float64))

    def create_identity_matrix(self, size: int) -> CCSMatrix:
        check_dimensions(size, size, 'create_identity_matrix')
        return CCSMatrix(sp.eye_array(size, format='csc', dtype=np.float64))


BASIC1D_FACTORY = Basic1DFactory()
BASIC2D_FACTORY = Basic2DFactory()
CRS_FACTORY = CRSFactory()
CCS_FACTORY = CCSFactory()

DEFAULT_DENSE_FACTORY = BASIC2D_FACTORY
DEFAULT_SPARSE_FACTORY = CRS_FACTORY
DEFAULT_FACTORY = BASIC2D_FACTORY


def as_singleton_matrix(value: float, factory: BaseFactory = DEFAULT_FACTORY) -> AbstractMatrix:
    """1x1 matrix holding ``value``."""
    return factory.create_matrix_from_array([[value]])
