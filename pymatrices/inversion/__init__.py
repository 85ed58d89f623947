"""
Matrix inversion.

Inverters:
    GaussianInverter - LAPACK LU with partial pivoting
"""

from pymatrices.inversion.gaussian import (
    GaussianInverter,
    condition_number,
    solve_dense,
)

__all__ = [
    "GaussianInverter",
    "condition_number",
    "solve_dense",
]
