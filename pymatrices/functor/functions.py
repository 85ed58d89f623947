"""
Elementwise matrix functions.

Each function maps ``(i, j, value)`` to a new value. The built-in ones
ignore the indices. Scalar-parameterised functions close over a fixed
argument supplied at construction.

Arithmetic follows IEEE-754 double precision: dividing by zero yields
an infinity or NaN instead of raising, and modulus is the truncated
floating remainder (``fmod``, result has the sign of the dividend).
"""

import numpy as np


class IncMatrixFunction:
    """value + 1"""

    def evaluate(self, i: int, j: int, value: float) -> float:
        return value + 1.0


class DecMatrixFunction:
    """value - 1"""

    def evaluate(self, i: int, j: int, value: float) -> float:
        return value - 1.0


class InvMatrixFunction:
    """-value"""

    def evaluate(self, i: int, j: int, value: float) -> float:
        return -value


class _ScalarMatrixFunction:
    """Function closed over a scalar argument."""

    def __init__(self, arg: float):
        self._arg = float(arg)

    @property
    def arg(self) -> float:
        return self._arg

    def __repr__(self) -> str:
        return f"{type(self).__name__}(arg={self._arg!r})"


class PlusMatrixFunction(_ScalarMatrixFunction):

    def evaluate(self, i: int, j: int, value: float) -> float:
        return value + self._arg


class MinusMatrixFunction(_ScalarMatrixFunction):

    def evaluate(self, i: int, j: int, value: float) -> float:
        return value - self._arg


class MulMatrixFunction(_ScalarMatrixFunction):

    def evaluate(self, i: int, j: int, value: float) -> float:
        return value * self._arg


class DivMatrixFunction(_ScalarMatrixFunction):

    def evaluate(self, i: int, j: int, value: float) -> float:
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.divide(np.float64(value), self._arg))


class ModMatrixFunction(_ScalarMatrixFunction):

    def evaluate(self, i: int, j: int, value: float) -> float:
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.fmod(np.float64(value), self._arg))


INC_FUNCTION = IncMatrixFunction()
DEC_FUNCTION = DecMatrixFunction()
INV_FUNCTION = InvMatrixFunction()


def as_plus_function(value: float) -> PlusMatrixFunction:
    """Function evaluating ``x + value``."""
    return PlusMatrixFunction(value)


def as_minus_function(value: float) -> MinusMatrixFunction:
    """Function evaluating ``x - value``."""
    return MinusMatrixFunction(value)


def as_mul_function(value: float) -> MulMatrixFunction:
    """Function evaluating ``x * value``."""
    return MulMatrixFunction(value)


def as_div_function(value: float) -> DivMatrixFunction:
    """Function evaluating ``x / value``; division by zero gives inf or nan."""
    return DivMatrixFunction(value)


def as_mod_function(value: float) -> ModMatrixFunction:
    """Function evaluating ``fmod(x, value)``; modulus by zero gives nan."""
    return ModMatrixFunction(value)
