"""
Tests for exact accumulators and the function-composed accumulator.

Validates:
    - Neutral seeding and empty traversals
    - Exactness (no intermediate rounding)
    - Order independence of the rounded result
    - Final rounding to ROUND_FACTOR places toward +infinity
    - Rejection of missing functions and non-finite values
"""

import itertools
import math
from decimal import Decimal

import numpy as np
import pytest

from pymatrices.core.exceptions import ValidationError
from pymatrices.functor.accumulators import (
    FunctionMatrixAccumulator,
    ProductMatrixAccumulator,
    SumMatrixAccumulator,
    as_product_accumulator,
    as_product_function_accumulator,
    as_sum_accumulator,
    as_sum_function_accumulator,
    round_exact,
)
from pymatrices.functor.functions import INC_FUNCTION, as_mul_function


# ═══════════════════════════════════════════════════════════════════════
# Sum and product
# ═══════════════════════════════════════════════════════════════════════


class TestSum:

    def test_sum(self, small_matrix):
        assert small_matrix.fold(as_sum_accumulator(0.0)) == 10.0

    def test_neutral_is_added(self, small_matrix):
        assert small_matrix.fold(as_sum_accumulator(5.0)) == 15.0

    def test_empty_returns_neutral(self):
        acc = as_sum_accumulator(3.0)
        assert acc.accumulate() == 3.0

    def test_empty_matrix(self, factory):
        assert factory.create_matrix(0, 0).sum() == 0.0

    def test_cancellation_is_exact(self):
        acc = as_sum_accumulator(0.0)
        for value in (1e20, 1.0, -1e20):
            acc.update(0, 0, value)
        assert acc.accumulate() == 1.0

    def test_sum_method(self, small_matrix):
        assert small_matrix.sum() == 10.0


class TestProduct:

    def test_product(self, small_matrix):
        assert small_matrix.fold(as_product_accumulator(1.0)) == 24.0

    def test_product_method(self, small_matrix):
        assert small_matrix.product() == 24.0

    def test_empty_returns_neutral(self):
        assert as_product_accumulator(1.0).accumulate() == 1.0

    def test_zero_absorbs(self, factory):
        m = factory.create_matrix_from_array([[3.0, 0.0], [1e300, 1e300]])
        assert m.product() == 0.0

    def test_intermediate_overflow_is_exact(self):
        acc = as_product_accumulator(1.0)
        for value in (1e200, 1e200, 1e-200, 1e-200):
            acc.update(0, 0, value)
        assert acc.accumulate() == pytest.approx(1.0, rel=1e-15)


class TestOrderIndependence:

    def test_sum_over_permutations(self):
        values = [0.1, 1e16, -1e16, 0.7, 3.3]
        results = set()
        for perm in itertools.permutations(values):
            acc = as_sum_accumulator(0.0)
            for value in perm:
                acc.update(0, 0, value)
            results.add(acc.accumulate())
        assert len(results) == 1

    def test_product_over_permutations(self):
        values = [0.1, 3.0, 7.0, 1e-3]
        results = set()
        for perm in itertools.permutations(values):
            acc = as_product_accumulator(1.0)
            for value in perm:
                acc.update(0, 0, value)
            results.add(acc.accumulate())
        assert len(results) == 1

    def test_storage_kinds_agree(self, rng):
        from pymatrices.matrix.factory import (
            BASIC1D_FACTORY,
            BASIC2D_FACTORY,
            CCS_FACTORY,
            CRS_FACTORY,
        )
        data = rng.standard_normal((4, 5))
        sums = {
            f.create_matrix_from_array(data).sum()
            for f in (BASIC1D_FACTORY, BASIC2D_FACTORY, CRS_FACTORY, CCS_FACTORY)
        }
        assert len(sums) == 1


class TestRounding:

    def test_round_up_toward_positive_infinity(self):
        tiny = Decimal(1).scaleb(-60)
        assert round_exact(Decimal(1) + tiny) == 1.0
        assert round_exact(Decimal(2) - tiny) == 2.0

    def test_exact_value_is_unrounded(self):
        acc = SumMatrixAccumulator(0.0)
        acc.update(0, 0, 0.1)
        assert acc.exact_value == Decimal(0.1)

    def test_result_close_to_float_sum(self, rng):
        values = rng.standard_normal(50)
        acc = as_sum_accumulator(0.0)
        for value in values:
            acc.update(0, 0, float(value))
        assert acc.accumulate() == pytest.approx(math.fsum(values), rel=1e-15, abs=1e-14)


# ═══════════════════════════════════════════════════════════════════════
# Function-composed accumulator
# ═══════════════════════════════════════════════════════════════════════


class TestFunctionAccumulator:

    def test_sum_of_incremented(self, small_matrix):
        assert small_matrix.fold(as_sum_function_accumulator(0.0, INC_FUNCTION)) == 14.0

    def test_product_of_scaled(self, small_matrix):
        acc = as_product_function_accumulator(1.0, as_mul_function(2.0))
        assert small_matrix.fold(acc) == 384.0

    def test_delegates_accumulate(self):
        inner = as_sum_accumulator(1.0)
        acc = FunctionMatrixAccumulator(inner, INC_FUNCTION)
        acc.update(0, 0, 1.0)
        assert acc.accumulate() == inner.accumulate() == 3.0

    def test_properties(self):
        inner = ProductMatrixAccumulator(1.0)
        acc = FunctionMatrixAccumulator(inner, INC_FUNCTION)
        assert acc.accumulator is inner
        assert acc.function is INC_FUNCTION

    def test_none_function_rejected(self):
        with pytest.raises(ValidationError, match="function"):
            as_sum_function_accumulator(0.0, None)

    def test_none_function_rejected_product(self):
        with pytest.raises(ValidationError, match="function"):
            as_product_function_accumulator(1.0, None)

    def test_none_accumulator_rejected(self):
        with pytest.raises(ValidationError, match="accumulator"):
            FunctionMatrixAccumulator(None, INC_FUNCTION)


# ═══════════════════════════════════════════════════════════════════════
# Non-finite input
# ═══════════════════════════════════════════════════════════════════════


class TestNonFinite:

    def test_nan_update_rejected(self):
        acc = as_sum_accumulator(0.0)
        with pytest.raises(ValidationError, match=r"a\[1\]\[2\]"):
            acc.update(1, 2, float("nan"))

    def test_inf_update_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            as_product_accumulator(1.0).update(0, 0, np.inf)

    def test_nan_neutral_rejected(self):
        with pytest.raises(ValidationError, match="neutral"):
            as_sum_accumulator(float("nan"))

    def test_matrix_with_inf_cannot_be_summed(self, factory):
        m = factory.create_matrix_from_array([[1.0, np.inf]])
        with pytest.raises(ValidationError):
            m.sum()
