"""
Shared numeric infrastructure for PyMatrices.

Submodules:
    tolerances: the process-wide EPS / ROUND_FACTOR model
"""

from pymatrices.core.compute.tolerances import (
    EPS,
    EPS_SCALE,
    ROUND_FACTOR,
    TOLERANCE,
    ToleranceModel,
    discover_tolerance,
)

__all__ = [
    "EPS",
    "EPS_SCALE",
    "ROUND_FACTOR",
    "TOLERANCE",
    "ToleranceModel",
    "discover_tolerance",
]
