"""
Linear system solvers.

Direct:
    GaussianSolver    - LAPACK LU with partial pivoting
    SquareRootSolver  - Cholesky factorisation; needs a symmetric matrix
    SweepSolver       - Thomas (banded) algorithm; needs a tridiagonal matrix

Iterative:
    JacobiSolver, SeidelSolver - need a diagonally dominant matrix

Structural requirements are decided with the library-wide predicates, so a
matrix classified as tridiagonal or diagonally dominant is exactly one the
corresponding solver accepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
import scipy.linalg as sla

from pymatrices.core.compute.tolerances import EPS
from pymatrices.core.exceptions import (
    ConvergenceError,
    NotPositiveDefiniteError,
    SingularMatrixError,
    ValidationError,
)
from pymatrices.core.validation import check_finite, check_square
from pymatrices.functor.predicates import (
    DIAGONALLY_DOMINANT_MATRIX,
    SYMMETRIC_MATRIX,
    TRIDIAGONAL_MATRIX,
)
from pymatrices.inversion.gaussian import solve_dense
from pymatrices.matrix.base import satisfies

if TYPE_CHECKING:
    from pymatrices.linear.system import LinearSystem


@dataclass(frozen=True)
class IterationSettings:
    """
    Stopping rule for iterative solvers.

    Iteration stops once the max-norm of an update is at most
    ``tolerance * max(1, max|x|)``.
    """
    max_iterations: int = 1000
    tolerance: float = EPS

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            raise ValidationError(
                f"max_iterations must be >= 1, got {self.max_iterations}"
            )
        if not self.tolerance > 0:
            raise ValidationError(f"tolerance must be positive, got {self.tolerance}")


DEFAULT_ITERATION_SETTINGS = IterationSettings()


def _prepare(system: LinearSystem, name: str) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Square, finite coefficient matrix and right-hand side as arrays."""
    check_square(system.equations, system.unknowns, name)
    a = system.coefficients()
    check_finite(a, 'a')
    check_finite(system.b, 'b')
    return a, system.b


class GaussianSolver:
    name = 'gaussian'

    def solve(self, system: LinearSystem) -> NDArray[np.floating[Any]]:
        a, b = _prepare(system, 'Gaussian solver')
        if a.shape[0] == 0:
            return np.empty(0, dtype=np.float64)
        return solve_dense(a, b, 'Gaussian solver')


class SquareRootSolver:
    """Solves a symmetric positive definite system via a = L @ L.T."""

    name = 'square_root'

    def solve(self, system: LinearSystem) -> NDArray[np.floating[Any]]:
        a, b = _prepare(system, 'Square root solver')
        if not satisfies(system.a, SYMMETRIC_MATRIX):
            raise ValidationError("Square root solver: coefficient matrix is not symmetric")
        if a.shape[0] == 0:
            return np.empty(0, dtype=np.float64)

        try:
            factor = sla.cho_factor(a, lower=True)
        except np.linalg.LinAlgError as e:
            raise NotPositiveDefiniteError(
                "Square root solver: coefficient matrix is not positive definite",
                matrix_name='a',
                min_eigenvalue=float(np.min(np.linalg.eigvalsh(a))),
            ) from e
        return sla.cho_solve(factor, b)


class SweepSolver:
    """Tridiagonal solve (the sweep / Thomas algorithm) in O(n)."""

    name = 'sweep'

    def solve(self, system: LinearSystem) -> NDArray[np.floating[Any]]:
        a, b = _prepare(system, 'Sweep solver')
        if not satisfies(system.a, TRIDIAGONAL_MATRIX):
            raise ValidationError("Sweep solver: coefficient matrix is not tridiagonal")
        n = a.shape[0]
        if n == 0:
            return np.empty(0, dtype=np.float64)

        # Banded storage: row 0 super-diagonal, row 1 diagonal, row 2 sub-diagonal
        banded = np.zeros((3, n), dtype=np.float64)
        banded[0, 1:] = np.diag(a, k=1)
        banded[1, :] = np.diag(a)
        banded[2, :-1] = np.diag(a, k=-1)

        try:
            return sla.solve_banded((1, 1), banded, b)
        except np.linalg.LinAlgError as e:
            raise SingularMatrixError(
                "Sweep solver: coefficient matrix is singular",
                matrix_name='a',
                expected_rank=n,
            ) from e


class _IterativeSolver:
    """Shared loop for Jacobi and Seidel."""

    name = ''

    def __init__(self, settings: IterationSettings = DEFAULT_ITERATION_SETTINGS):
        self.settings = settings

    def _step(
        self,
        a: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
        x: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        raise NotImplementedError

    def solve(self, system: LinearSystem) -> NDArray[np.floating[Any]]:
        label = f"{self.name.capitalize()} solver"
        a, b = _prepare(system, label)
        if not satisfies(system.a, DIAGONALLY_DOMINANT_MATRIX):
            raise ValidationError(f"{label}: coefficient matrix is not diagonally dominant")
        n = a.shape[0]
        if n == 0:
            return np.empty(0, dtype=np.float64)

        x = np.zeros(n, dtype=np.float64)
        change = np.inf
        for iteration in range(1, self.settings.max_iterations + 1):
            x_new = self._step(a, b, x)
            change = float(np.max(np.abs(x_new - x)))
            x = x_new
            if change <= self.settings.tolerance * max(1.0, float(np.max(np.abs(x)))):
                return x

        raise ConvergenceError(
            f"{label} did not converge after {self.settings.max_iterations} iterations "
            f"(last update {change:.3g})",
            iterations=self.settings.max_iterations,
            final_change=change,
            reason='max_iterations',
            threshold=self.settings.tolerance,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(settings={self.settings!r})"


class JacobiSolver(_IterativeSolver):
    """x' = D^-1 (b - (a - D) x), all components updated from the previous x."""

    name = 'jacobi'

    def _step(self, a, b, x):
        diagonal = np.diag(a)
        return (b - a @ x + diagonal * x) / diagonal


class SeidelSolver(_IterativeSolver):
    """Gauss-Seidel: each component uses the components already updated."""

    name = 'seidel'

    def _step(self, a, b, x):
        x_new = x.copy()
        for i in range(a.shape[0]):
            off_diagonal = a[i, :i] @ x_new[:i] + a[i, i + 1:] @ x_new[i + 1:]
            x_new[i] = (b[i] - off_diagonal) / a[i, i]
        return x_new
