"""
Input validation utilities for PyMatrices.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrices.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype} is not supported")

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_finite_scalar(value: float, name: str) -> None:
    """
    Verify a single value is neither NaN nor Inf.

    Raises:
        ValidationError: If value is non-finite
    """
    if not math.isfinite(value):
        raise ValidationError(f"{name}: must be finite, got {value}")


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_dimensions(rows: int, columns: int, name: str) -> None:
    """
    Verify a requested matrix shape is made of non-negative integers.

    Raises:
        ValidationError: If either dimension is negative or not an integer
    """
    for label, value in (("rows", rows), ("columns", columns)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValidationError(
                f"{name}: {label} must be an integer, got {type(value).__name__}"
            )
        if value < 0:
            raise ValidationError(f"{name}: {label} must be non-negative, got {value}")


def check_square(rows: int, columns: int, name: str) -> None:
    """
    Verify a matrix shape is square.

    Raises:
        DimensionError: If rows != columns
    """
    if rows != columns:
        raise DimensionError(
            f"{name}: expected a square matrix, got {rows}x{columns}"
        )


def check_not_none(value: Any, name: str) -> None:
    """
    Verify a required collaborator was supplied.

    Raises:
        ValidationError: If value is None
    """
    if value is None:
        raise ValidationError(f"{name}: must not be None")
