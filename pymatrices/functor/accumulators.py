"""
Exact matrix accumulators.

An accumulator folds matrix elements into one scalar. Sum and product
keep their running state as a ``decimal.Decimal`` under an unbounded
precision context, so every update is exact: ``Decimal(float)`` captures
the binary value without rounding, and add/multiply never round when the
precision is MAX_PREC. Precision is lost exactly once, in ``accumulate()``,
which quantizes to ROUND_FACTOR decimal places rounding toward +infinity
and converts to float.

Because the exact sum and product are commutative and associative, the
rounded result does not depend on the order in which cells are visited.
"""

from __future__ import annotations

import math
from decimal import (
    Context,
    Decimal,
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_CEILING,
)
from typing import TYPE_CHECKING

from pymatrices.core.compute.tolerances import ROUND_FACTOR
from pymatrices.core.exceptions import ValidationError
from pymatrices.core.validation import check_not_none

if TYPE_CHECKING:
    from pymatrices.core.protocols import MatrixAccumulator, MatrixFunction


# Add and multiply are exact under this context; only quantize rounds.
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)

# Quantum for the final rounding step: 10 ** -ROUND_FACTOR
ROUND_QUANTUM = Decimal(1).scaleb(-ROUND_FACTOR)


def _exact(value: float, name: str) -> Decimal:
    """Exact decimal image of a finite float."""
    value = float(value)
    if not math.isfinite(value):
        raise ValidationError(f"{name}: cannot accumulate non-finite value {value}")
    return Decimal(value)


def round_exact(value: Decimal) -> float:
    """Round to ROUND_FACTOR decimal places toward +infinity, then to float."""
    return float(value.quantize(ROUND_QUANTUM, rounding=ROUND_CEILING, context=EXACT_CONTEXT))


class _DecimalAccumulator:
    """Shared state handling for exact accumulators."""

    def __init__(self, neutral: float):
        self._neutral = float(neutral)
        self._result = _exact(neutral, 'neutral')

    @property
    def neutral(self) -> float:
        """Seed value this accumulator started from."""
        return self._neutral

    @property
    def exact_value(self) -> Decimal:
        """Current unrounded state."""
        return self._result

    def accumulate(self) -> float:
        return round_exact(self._result)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(neutral={self._neutral!r})"


class SumMatrixAccumulator(_DecimalAccumulator):
    """Exact sum of all visited elements, seeded with ``neutral``."""

    def update(self, i: int, j: int, value: float) -> None:
        self._result = EXACT_CONTEXT.add(self._result, _exact(value, f"a[{i}][{j}]"))


class ProductMatrixAccumulator(_DecimalAccumulator):
    """Exact product of all visited elements, seeded with ``neutral``."""

    def update(self, i: int, j: int, value: float) -> None:
        self._result = EXACT_CONTEXT.multiply(self._result, _exact(value, f"a[{i}][{j}]"))


class FunctionMatrixAccumulator:
    """
    Applies a function to each element before handing it to another
    accumulator. ``accumulate()`` delegates unchanged.

    Raises:
        ValidationError: If either collaborator is None
    """

    def __init__(self, accumulator: MatrixAccumulator, function: MatrixFunction):
        check_not_none(accumulator, 'accumulator')
        check_not_none(function, 'function')
        self._accumulator = accumulator
        self._function = function

    @property
    def accumulator(self) -> MatrixAccumulator:
        return self._accumulator

    @property
    def function(self) -> MatrixFunction:
        return self._function

    def update(self, i: int, j: int, value: float) -> None:
        self._accumulator.update(i, j, self._function.evaluate(i, j, value))

    def accumulate(self) -> float:
        return self._accumulator.accumulate()

    def __repr__(self) -> str:
        return (
            f"FunctionMatrixAccumulator(accumulator={self._accumulator!r}, "
            f"function={self._function!r})"
        )


def as_sum_accumulator(neutral: float) -> SumMatrixAccumulator:
    """Accumulator computing the sum of all elements (conventionally neutral=0)."""
    return SumMatrixAccumulator(neutral)


def as_product_accumulator(neutral: float) -> ProductMatrixAccumulator:
    """Accumulator computing the product of all elements (conventionally neutral=1)."""
    return ProductMatrixAccumulator(neutral)


def as_sum_function_accumulator(
    neutral: float,
    function: MatrixFunction,
) -> FunctionMatrixAccumulator:
    """Sum of ``function(i, j, a[i][j])`` over all cells."""
    check_not_none(function, 'function')
    return FunctionMatrixAccumulator(SumMatrixAccumulator(neutral), function)


def as_product_function_accumulator(
    neutral: float,
    function: MatrixFunction,
) -> FunctionMatrixAccumulator:
    """Product of ``function(i, j, a[i][j])`` over all cells."""
    check_not_none(function, 'function')
    return FunctionMatrixAccumulator(ProductMatrixAccumulator(neutral), function)
