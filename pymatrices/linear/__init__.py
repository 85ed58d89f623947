"""
Linear systems and their solvers.

Public API:
    as_linear_system(a, b) - validated LinearSystem
    GaussianSolver, JacobiSolver, SeidelSolver, SquareRootSolver, SweepSolver
    IterationSettings      - stopping rule for the iterative solvers
"""

from pymatrices.linear.system import LinearSystem, as_linear_system
from pymatrices.linear.solvers import (
    IterationSettings,
    DEFAULT_ITERATION_SETTINGS,
    GaussianSolver,
    JacobiSolver,
    SeidelSolver,
    SquareRootSolver,
    SweepSolver,
)

__all__ = [
    "LinearSystem",
    "as_linear_system",
    "IterationSettings",
    "DEFAULT_ITERATION_SETTINGS",
    "GaussianSolver",
    "JacobiSolver",
    "SeidelSolver",
    "SquareRootSolver",
    "SweepSolver",
]
