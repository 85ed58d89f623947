"""
Tests for the catalog of default instances.
"""

import dataclasses

import pytest

from pymatrices import DEFAULT_CATALOG, EPS, ROUND_FACTOR, ValidationError, build_catalog
from pymatrices.catalog import LU_L, LU_P, LU_U
from pymatrices.core.protocols import (
    AdvancedMatrixPredicate,
    Factory,
    LinearSystemSolver,
    MatrixDecompositor,
    MatrixFunction,
    MatrixPredicate,
)
from pymatrices.functor import predicates as pred
from pymatrices.linear import IterationSettings, as_linear_system
from pymatrices.matrix import BASIC1D_FACTORY, CCS_FACTORY, CRS_FACTORY


class TestContents:

    def test_predicates_are_shared_singletons(self):
        assert DEFAULT_CATALOG.symmetric_matrix is pred.SYMMETRIC_MATRIX
        assert DEFAULT_CATALOG.lower_triangular_matrix is pred.LOWER_TRIANGULAR_MATRIX

    def test_predicate_group(self):
        predicates = DEFAULT_CATALOG.predicates
        assert len(predicates) == 12
        for name, predicate in predicates.items():
            if name in ('symmetric', 'diagonally_dominant'):
                assert isinstance(predicate, AdvancedMatrixPredicate)
            else:
                assert isinstance(predicate, MatrixPredicate)

    def test_functions(self):
        for function in (
            DEFAULT_CATALOG.inc_function,
            DEFAULT_CATALOG.dec_function,
            DEFAULT_CATALOG.inv_function,
            DEFAULT_CATALOG.as_mod_function(2.0),
        ):
            assert isinstance(function, MatrixFunction)

    def test_factories(self):
        assert len(DEFAULT_CATALOG.factories) == 4
        assert all(isinstance(f, Factory) for f in DEFAULT_CATALOG.factories)
        assert DEFAULT_CATALOG.default_factories == (
            DEFAULT_CATALOG.default_dense_factory,
            DEFAULT_CATALOG.default_sparse_factory,
        )
        assert DEFAULT_CATALOG.default_factory.name == 'basic2d'
        assert DEFAULT_CATALOG.default_sparse_factory.name == 'crs'

    def test_decompositors(self):
        names = set(DEFAULT_CATALOG.decompositors)
        assert names == {'cholesky', 'eigen', 'lu', 'qr', 'singular_value', 'crout'}
        assert all(isinstance(d, MatrixDecompositor) for d in DEFAULT_CATALOG.decompositors.values())

    def test_solvers(self):
        solvers = DEFAULT_CATALOG.solvers
        assert set(solvers) == {'gaussian', 'jacobi', 'seidel', 'square_root', 'sweep'}
        for name, solver in solvers.items():
            assert isinstance(solver, LinearSystemSolver)
            assert solver.name == name
        assert DEFAULT_CATALOG.default_solver is DEFAULT_CATALOG.gaussian_solver

    def test_default_inverter(self):
        assert DEFAULT_CATALOG.default_inverter is DEFAULT_CATALOG.gaussian_inverter

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CATALOG.default_factory = CCS_FACTORY

    def test_tolerance_constants(self):
        assert EPS == 2.0 ** -53 * 100
        assert ROUND_FACTOR == 52


class TestLookup:

    def test_predicate_by_name(self):
        assert DEFAULT_CATALOG.predicate('diagonally_dominant') is pred.DIAGONALLY_DOMINANT_MATRIX

    def test_decompositor_by_name(self):
        assert DEFAULT_CATALOG.decompositor('lu') is DEFAULT_CATALOG.lu_decompositor

    def test_solver_by_name(self):
        assert DEFAULT_CATALOG.solver('sweep') is DEFAULT_CATALOG.sweep_solver

    def test_factory_by_name(self):
        assert DEFAULT_CATALOG.factory('ccs') is CCS_FACTORY

    @pytest.mark.parametrize("lookup", ['predicate', 'decompositor', 'solver', 'factory'])
    def test_unknown_name(self, lookup):
        with pytest.raises(ValidationError, match="Unknown"):
            getattr(DEFAULT_CATALOG, lookup)('nope')


class TestBuildCatalog:

    def test_custom_defaults(self):
        catalog = build_catalog(default_factory=BASIC1D_FACTORY, default_sparse_factory=CCS_FACTORY)
        assert catalog.default_factory is BASIC1D_FACTORY
        assert catalog.default_sparse_factory is CCS_FACTORY
        assert DEFAULT_CATALOG.default_factory is not BASIC1D_FACTORY

    def test_default_solver_choice(self):
        catalog = build_catalog(default_solver='seidel')
        assert catalog.default_solver is catalog.seidel_solver

    def test_unknown_default_solver(self):
        with pytest.raises(ValidationError, match="Unknown solver"):
            build_catalog(default_solver='cramer')

    def test_iteration_settings_reach_solvers(self):
        settings = IterationSettings(max_iterations=7)
        catalog = build_catalog(iteration_settings=settings)
        assert catalog.jacobi_solver.settings is settings
        assert catalog.seidel_solver.settings is settings


class TestEndToEnd:

    def test_classify_reduce_decompose(self):
        c = DEFAULT_CATALOG
        a = c.default_factory.create_matrix_from_array([[4.0, 1.0], [1.0, 3.0]])

        assert a.satisfies(c.symmetric_matrix)
        assert a.satisfies(c.diagonally_dominant_matrix)
        assert a.satisfies(c.tridiagonal_matrix)
        assert not a.satisfies(c.diagonal_matrix)

        assert a.fold(c.as_sum_accumulator(0.0)) == 9.0
        assert a.fold(c.as_product_accumulator(1.0)) == 12.0
        assert a.fold(c.as_sum_function_accumulator(0.0, c.inc_function)) == 13.0

        factors = c.lu_decompositor.decompose(a)
        assert factors[LU_P].to_array() @ a.to_array() == pytest.approx(
            factors[LU_L].to_array() @ factors[LU_U].to_array()
        )

        b = a.transform(c.as_mul_function(2.0), factory=CRS_FACTORY)
        assert b.factory is CRS_FACTORY
        assert b.sum() == 18.0

        x = c.default_solver.solve(as_linear_system(a, [5.0, 4.0]))
        assert x == pytest.approx([1.0, 1.0])
