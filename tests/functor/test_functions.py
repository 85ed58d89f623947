"""
Tests for elementwise matrix functions.
"""

import math

import numpy as np
import pytest

from pymatrices import EPS
from pymatrices.functor.functions import (
    DEC_FUNCTION,
    INC_FUNCTION,
    INV_FUNCTION,
    as_div_function,
    as_minus_function,
    as_mod_function,
    as_mul_function,
    as_plus_function,
)


class TestBuiltins:

    def test_inc(self):
        assert INC_FUNCTION.evaluate(0, 0, 1.5) == 2.5

    def test_dec(self):
        assert DEC_FUNCTION.evaluate(3, 1, 1.5) == 0.5

    def test_inv(self):
        assert INV_FUNCTION.evaluate(0, 0, 2.0) == -2.0
        assert INV_FUNCTION.evaluate(0, 0, -0.0) == 0.0

    def test_indices_ignored(self):
        assert INC_FUNCTION.evaluate(0, 0, 7.0) == INC_FUNCTION.evaluate(99, 42, 7.0)


class TestScalarFunctions:

    def test_plus(self):
        assert as_plus_function(2.5).evaluate(0, 0, 1.0) == 3.5

    def test_minus(self):
        assert as_minus_function(2.5).evaluate(0, 0, 1.0) == -1.5

    def test_mul(self):
        assert as_mul_function(-3.0).evaluate(0, 0, 2.0) == -6.0

    def test_div(self):
        assert as_div_function(4.0).evaluate(0, 0, 2.0) == 0.5

    def test_arg_exposed(self):
        assert as_plus_function(3).arg == 3.0

    def test_repr(self):
        assert repr(as_mul_function(2.0)) == "MulMatrixFunction(arg=2.0)"


class TestIEEEEdgeCases:
    """Division and modulus by zero follow IEEE-754 instead of raising."""

    def test_div_by_zero_positive(self):
        assert as_div_function(0.0).evaluate(0, 0, 1.0) == math.inf

    def test_div_by_zero_negative(self):
        assert as_div_function(0.0).evaluate(0, 0, -1.0) == -math.inf

    def test_zero_div_zero_is_nan(self):
        assert math.isnan(as_div_function(0.0).evaluate(0, 0, 0.0))

    def test_mod_by_zero_is_nan(self):
        assert math.isnan(as_mod_function(0.0).evaluate(0, 0, 5.0))

    def test_div_by_zero_no_warning(self):
        with np.errstate(all='raise'):
            assert as_div_function(0.0).evaluate(0, 0, 1.0) == math.inf


class TestModulus:
    """Truncated remainder: the result carries the sign of the dividend."""

    @pytest.mark.parametrize("value, arg, expected", [
        (7.0, 3.0, 1.0),
        (-7.0, 3.0, -1.0),
        (7.0, -3.0, 1.0),
        (-7.0, -3.0, -1.0),
        (5.5, 2.0, 1.5),
    ])
    def test_sign_of_dividend(self, value, arg, expected):
        assert as_mod_function(arg).evaluate(0, 0, value) == expected


class TestProperties:

    @pytest.mark.parametrize("value", [0.0, 1.0, -3.25, 1e-12, 0.1])
    def test_inc_dec_round_trip(self, value):
        result = INC_FUNCTION.evaluate(0, 0, DEC_FUNCTION.evaluate(0, 0, value))
        assert abs(result - value) < EPS

    def test_mul_by_one_is_identity(self, rng):
        mul = as_mul_function(1.0)
        for value in rng.standard_normal(20):
            assert mul.evaluate(0, 0, float(value)) == value
