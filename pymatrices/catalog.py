"""
Catalog: the directory of default instances.

One frozen Catalog holds every predicate, function, factory, decompositor,
inverter and solver the library ships, plus the constructors for
scalar functions and accumulators. ``DEFAULT_CATALOG`` is the canonical
instance; code that wants different defaults builds its own with
``build_catalog(...)`` and passes it explicitly instead of relying on a
global lookup.

Usage:
    from pymatrices.catalog import DEFAULT_CATALOG, LU_L

    a = DEFAULT_CATALOG.default_factory.create_matrix_from_array([[4.0, 1.0], [1.0, 3.0]])
    a.satisfies(DEFAULT_CATALOG.symmetric_matrix)     # True
    factors = DEFAULT_CATALOG.lu_decompositor.decompose(a)
    lower = factors[LU_L]
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Callable

from pymatrices.core.exceptions import ValidationError
from pymatrices.core.protocols import (
    AdvancedMatrixPredicate,
    Factory,
    LinearSystemSolver,
    MatrixDecompositor,
    MatrixFunction,
    MatrixInverter,
    MatrixPredicate,
)
from pymatrices.decomposition import (
    CholeskyDecompositor,
    CroutDecompositor,
    EigenDecompositor,
    LUDecompositor,
    QRDecompositor,
    SingularValueDecompositor,
    LU_L,
    LU_U,
    LU_P,
    QR_Q,
    QR_R,
    CHOLESKY_L,
    SVD_U,
    SVD_S,
    SVD_V,
    EIGEN_V,
    EIGEN_D,
)
from pymatrices.functor import accumulators as acc
from pymatrices.functor import functions as fn
from pymatrices.functor import predicates as pred
from pymatrices.inversion import GaussianInverter
from pymatrices.linear import (
    DEFAULT_ITERATION_SETTINGS,
    GaussianSolver,
    IterationSettings,
    JacobiSolver,
    SeidelSolver,
    SquareRootSolver,
    SweepSolver,
)
from pymatrices.matrix import factory as fac


@dataclass(frozen=True)
class Catalog:
    """
    Immutable bundle of default library instances.

    Field names mirror the upper-case module constants (``diagonal_matrix``
    for DIAGONAL_MATRIX, ``basic2d_factory`` for BASIC2D_FACTORY, ...).
    """
    # Elementwise predicates
    diagonal_matrix: MatrixPredicate
    identity_matrix: MatrixPredicate
    zero_matrix: MatrixPredicate
    tridiagonal_matrix: MatrixPredicate
    positive_matrix: MatrixPredicate
    negative_matrix: MatrixPredicate
    lower_bidiagonal_matrix: MatrixPredicate
    upper_bidiagonal_matrix: MatrixPredicate
    lower_triangular_matrix: MatrixPredicate
    upper_triangular_matrix: MatrixPredicate

    # Whole-matrix predicates
    symmetric_matrix: AdvancedMatrixPredicate
    diagonally_dominant_matrix: AdvancedMatrixPredicate

    # Fixed functions
    inc_function: MatrixFunction
    dec_function: MatrixFunction
    inv_function: MatrixFunction

    # Factories
    basic1d_factory: Factory
    basic2d_factory: Factory
    crs_factory: Factory
    ccs_factory: Factory
    default_dense_factory: Factory
    default_sparse_factory: Factory
    default_factory: Factory

    # Decompositors
    cholesky_decompositor: MatrixDecompositor
    eigen_decompositor: MatrixDecompositor
    lu_decompositor: MatrixDecompositor
    qr_decompositor: MatrixDecompositor
    singular_value_decompositor: MatrixDecompositor
    crout_decompositor: MatrixDecompositor

    # Inversion
    gaussian_inverter: MatrixInverter
    default_inverter: MatrixInverter

    # Solvers
    gaussian_solver: LinearSystemSolver
    jacobi_solver: LinearSystemSolver
    seidel_solver: LinearSystemSolver
    square_root_solver: LinearSystemSolver
    sweep_solver: LinearSystemSolver
    default_solver: LinearSystemSolver

    # Constructors for parameterised functors
    as_plus_function: Callable[[float], MatrixFunction] = field(default=fn.as_plus_function)
    as_minus_function: Callable[[float], MatrixFunction] = field(default=fn.as_minus_function)
    as_mul_function: Callable[[float], MatrixFunction] = field(default=fn.as_mul_function)
    as_div_function: Callable[[float], MatrixFunction] = field(default=fn.as_div_function)
    as_mod_function: Callable[[float], MatrixFunction] = field(default=fn.as_mod_function)
    as_sum_accumulator: Callable[..., Any] = field(default=acc.as_sum_accumulator)
    as_product_accumulator: Callable[..., Any] = field(default=acc.as_product_accumulator)
    as_sum_function_accumulator: Callable[..., Any] = field(
        default=acc.as_sum_function_accumulator
    )
    as_product_function_accumulator: Callable[..., Any] = field(
        default=acc.as_product_function_accumulator
    )

    # === Grouped views ===

    @property
    def factories(self) -> tuple[Factory, ...]:
        return (self.basic1d_factory, self.basic2d_factory, self.crs_factory, self.ccs_factory)

    @property
    def default_factories(self) -> tuple[Factory, ...]:
        return (self.default_dense_factory, self.default_sparse_factory)

    @property
    def predicates(self) -> dict[str, MatrixPredicate | AdvancedMatrixPredicate]:
        return self._group('_matrix')

    @property
    def decompositors(self) -> dict[str, MatrixDecompositor]:
        return self._group('_decompositor')

    @property
    def solvers(self) -> dict[str, LinearSystemSolver]:
        return self._group('_solver', exclude=('default_solver',))

    def _group(self, suffix: str, exclude: tuple[str, ...] = ()) -> dict[str, Any]:
        return {
            f.name[:-len(suffix)]: getattr(self, f.name)
            for f in fields(self)
            if f.name.endswith(suffix) and f.name not in exclude
        }

    # === Name lookup ===

    def predicate(self, name: str) -> MatrixPredicate | AdvancedMatrixPredicate:
        """Predicate by short name, e.g. 'symmetric' or 'lower_triangular'."""
        return self._lookup(self.predicates, name, 'predicate')

    def decompositor(self, name: str) -> MatrixDecompositor:
        """Decompositor by short name, e.g. 'lu' or 'singular_value'."""
        return self._lookup(self.decompositors, name, 'decompositor')

    def solver(self, name: str) -> LinearSystemSolver:
        """Solver by short name, e.g. 'gaussian' or 'sweep'."""
        return self._lookup(self.solvers, name, 'solver')

    def factory(self, name: str) -> Factory:
        """Factory by its ``name`` attribute, e.g. 'basic2d' or 'crs'."""
        return self._lookup({f.name: f for f in self.factories}, name, 'factory')

    @staticmethod
    def _lookup(entries: dict[str, Any], name: str, kind: str) -> Any:
        try:
            return entries[name]
        except KeyError:
            raise ValidationError(
                f"Unknown {kind}: {name!r}. Available: {sorted(entries)}"
            ) from None


def build_catalog(
    *,
    default_dense_factory: Factory = fac.DEFAULT_DENSE_FACTORY,
    default_sparse_factory: Factory = fac.DEFAULT_SPARSE_FACTORY,
    default_factory: Factory = fac.DEFAULT_FACTORY,
    iteration_settings: IterationSettings = DEFAULT_ITERATION_SETTINGS,
    default_solver: str = 'gaussian',
) -> Catalog:
    """
    Construct a Catalog.

    Args:
        default_dense_factory: Factory used for dense results
        default_sparse_factory: Factory used for sparse results
        default_factory: Factory used when nothing else is specified
        iteration_settings: Stopping rule for the Jacobi and Seidel solvers
        default_solver: Short name of the solver bound to ``default_solver``

    Returns:
        A new immutable Catalog
    """
    solvers = {
        'gaussian': GaussianSolver(),
        'jacobi': JacobiSolver(iteration_settings),
        'seidel': SeidelSolver(iteration_settings),
        'square_root': SquareRootSolver(),
        'sweep': SweepSolver(),
    }
    if default_solver not in solvers:
        raise ValidationError(
            f"Unknown solver: {default_solver!r}. Available: {sorted(solvers)}"
        )
    inverter = GaussianInverter()

    return Catalog(
        diagonal_matrix=pred.DIAGONAL_MATRIX,
        identity_matrix=pred.IDENTITY_MATRIX,
        zero_matrix=pred.ZERO_MATRIX,
        tridiagonal_matrix=pred.TRIDIAGONAL_MATRIX,
        positive_matrix=pred.POSITIVE_MATRIX,
        negative_matrix=pred.NEGATIVE_MATRIX,
        lower_bidiagonal_matrix=pred.LOWER_BIDIAGONAL_MATRIX,
        upper_bidiagonal_matrix=pred.UPPER_BIDIAGONAL_MATRIX,
        lower_triangular_matrix=pred.LOWER_TRIANGULAR_MATRIX,
        upper_triangular_matrix=pred.UPPER_TRIANGULAR_MATRIX,
        symmetric_matrix=pred.SYMMETRIC_MATRIX,
        diagonally_dominant_matrix=pred.DIAGONALLY_DOMINANT_MATRIX,
        inc_function=fn.INC_FUNCTION,
        dec_function=fn.DEC_FUNCTION,
        inv_function=fn.INV_FUNCTION,
        basic1d_factory=fac.BASIC1D_FACTORY,
        basic2d_factory=fac.BASIC2D_FACTORY,
        crs_factory=fac.CRS_FACTORY,
        ccs_factory=fac.CCS_FACTORY,
        default_dense_factory=default_dense_factory,
        default_sparse_factory=default_sparse_factory,
        default_factory=default_factory,
        cholesky_decompositor=CholeskyDecompositor(),
        eigen_decompositor=EigenDecompositor(),
        lu_decompositor=LUDecompositor(),
        qr_decompositor=QRDecompositor(),
        singular_value_decompositor=SingularValueDecompositor(),
        crout_decompositor=CroutDecompositor(),
        gaussian_inverter=inverter,
        default_inverter=inverter,
        gaussian_solver=solvers['gaussian'],
        jacobi_solver=solvers['jacobi'],
        seidel_solver=solvers['seidel'],
        square_root_solver=solvers['square_root'],
        sweep_solver=solvers['sweep'],
        default_solver=solvers[default_solver],
    )


DEFAULT_CATALOG: Catalog = build_catalog()

__all__ = [
    "Catalog",
    "build_catalog",
    "DEFAULT_CATALOG",
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
