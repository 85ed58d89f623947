"""
Sparse matrix storage backed by SciPy.

CRSMatrix wraps a compressed-row (CSR) array and CCSMatrix a
compressed-column (CSC) array. Traversal still visits every cell,
including structural zeros, so predicates and accumulators see the same
values as they would for dense storage.
"""

from __future__ import annotations

from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
import scipy.sparse as sp

from pymatrices.matrix.base import AbstractMatrix

if TYPE_CHECKING:
    from pymatrices.core.protocols import Factory


class _CompressedMatrix(AbstractMatrix):
    """Shared behaviour of CSR and CSC storage."""

    _format: str = ''

    def __init__(self, data: Any):
        self._data = sp.csr_array(data) if self._format == 'csr' else sp.csc_array(data)
        self._data = self._data.astype(np.float64)
        self._data.sum_duplicates()

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        return self._data.shape[1]

    @property
    def cardinality(self) -> int:
        """Number of explicitly stored entries."""
        return int(self._data.nnz)

    @property
    def storage(self) -> sp.sparray:
        """Underlying SciPy array (shared, do not mutate)."""
        return self._data

    def get(self, i: int, j: int) -> float:
        return float(self._data[i, j])

    def to_array(self) -> NDArray[np.floating[Any]]:
        return self._data.toarray()

    def _cells(self) -> Iterator[tuple[int, int, float]]:
        # One densification instead of a sparse lookup per cell
        dense = self._data.toarray()
        for i in range(dense.shape[0]):
            for j in range(dense.shape[1]):
                yield i, j, float(dense[i, j])

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(rows={self.rows}, columns={self.columns}, "
            f"cardinality={self.cardinality})"
        )


class CRSMatrix(_CompressedMatrix):
    """Compressed row storage."""

    _format = 'csr'

    @property
    def factory(self) -> Factory:
        from pymatrices.matrix.factory import CRS_FACTORY
        return CRS_FACTORY


class CCSMatrix(_CompressedMatrix):
    """Compressed column storage."""

    _format = 'csc'

    @property
    def factory(self) -> Factory:
        from pymatrices.matrix.factory import CCS_FACTORY
        return CCS_FACTORY
