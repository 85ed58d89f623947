"""
LinearSystem: the a @ x = b container handed to solvers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrices.core.compute.tolerances import EPS
from pymatrices.core.exceptions import DimensionError
from pymatrices.core.validation import check_1d, check_array, check_not_none
from pymatrices.matrix.base import to_dense

if TYPE_CHECKING:
    from pymatrices.core.protocols import LinearSystemSolver, Matrix


@dataclass(frozen=True)
class LinearSystem:
    """
    Coefficient matrix ``a`` (equations x unknowns) and right-hand side ``b``.

    Construct via as_linear_system(a, b), which validates shapes.
    """
    a: Matrix
    b: NDArray[np.floating[Any]] = field(repr=False)

    @property
    def equations(self) -> int:
        return self.a.rows

    @property
    def unknowns(self) -> int:
        return self.a.columns

    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Dense copy of ``a``."""
        return to_dense(self.a)

    def solve(self, solver: LinearSystemSolver) -> NDArray[np.floating[Any]]:
        return solver.solve(self)

    def residual(self, x: ArrayLike) -> NDArray[np.floating[Any]]:
        """b - a @ x"""
        return self.b - self.coefficients() @ np.asarray(x, dtype=np.float64)

    def is_solution(self, x: ArrayLike, tolerance: float = EPS) -> bool:
        """Whether every residual component is within ``tolerance`` scaled by |b|."""
        scale = max(1.0, float(np.max(np.abs(self.b), initial=0.0)))
        return bool(np.all(np.abs(self.residual(x)) <= tolerance * scale))


def as_linear_system(a: Matrix, b: ArrayLike) -> LinearSystem:
    """
    Build a LinearSystem after validating ``b`` against ``a``.

    Raises:
        ValidationError: If ``a`` is None or ``b`` is not numeric
        DimensionError: If ``b`` is not 1-D or its length differs from a.rows
    """
    check_not_none(a, 'a')
    rhs = check_array(b, 'b')
    check_1d(rhs, 'b')
    if rhs.shape[0] != a.rows:
        raise DimensionError(
            f"b: expected length {a.rows} to match the rows of a, got {rhs.shape[0]}"
        )
    return LinearSystem(a=a, b=rhs.copy())
