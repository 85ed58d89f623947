"""
Tests for PyMatrices exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatricesError)
    - Diagnostic attributes on SingularMatrixError, NotPositiveDefiniteError,
      ConvergenceError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pymatrices.core.exceptions import (
    ConvergenceError,
    DimensionError,
    NotPositiveDefiniteError,
    NumericalError,
    PyMatricesError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatricesError."""

    def test_validation_error_is_pymatrices_error(self):
        with pytest.raises(PyMatricesError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("not square")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_not_positive_definite_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise NotPositiveDefiniteError("not PD")

    def test_convergence_error_is_pymatrices_error(self):
        with pytest.raises(PyMatricesError):
            raise ConvergenceError("did not converge", iterations=100)

    def test_convergence_error_is_not_numerical_error(self):
        err = ConvergenceError("did not converge", iterations=100)
        assert not isinstance(err, NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError(
            "A is singular",
            matrix_name="A",
            condition_number=1e18,
            rank=1,
            expected_rank=2,
        )
        assert str(err) == "A is singular"
        assert err.matrix_name == "A"
        assert err.condition_number == 1e18
        assert err.rank == 1
        assert err.expected_rank == 2

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.condition_number is None
        assert err.rank is None
        assert err.expected_rank is None


class TestNotPositiveDefiniteError:

    def test_attributes(self):
        err = NotPositiveDefiniteError(
            "Cholesky failed", matrix_name="A", min_eigenvalue=-0.5
        )
        assert err.matrix_name == "A"
        assert err.min_eigenvalue == -0.5

    def test_defaults_are_none(self):
        err = NotPositiveDefiniteError("not PD")
        assert err.matrix_name is None
        assert err.min_eigenvalue is None


class TestConvergenceError:

    def test_attributes(self):
        err = ConvergenceError(
            "Jacobi did not converge",
            iterations=50,
            final_change=1e-3,
            reason="max_iterations",
            threshold=1e-14,
        )
        assert err.iterations == 50
        assert err.final_change == 1e-3
        assert err.reason == "max_iterations"
        assert err.threshold == 1e-14

    def test_iterations_required(self):
        with pytest.raises(TypeError):
            ConvergenceError("missing iterations")
