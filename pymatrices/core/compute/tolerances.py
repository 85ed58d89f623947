"""
Process-wide tolerance model.

Every structural predicate and every exact accumulator in PyMatrices reads
the two constants defined here:

- EPS: equality tolerance. The machine epsilon is discovered at runtime by
  halving a candidate from 1.0 while ``1 + candidate > 1`` still holds in
  double precision, then scaled by 100 to absorb accumulated rounding.
- ROUND_FACTOR: decimal scale used when an accumulator rounds its exact
  result, one less than the number of halving steps.

Both are computed once, at import, and never change. Reading them from
several threads needs no synchronisation.
"""

from dataclasses import dataclass
from functools import lru_cache


# Multiplier applied to the discovered machine epsilon
EPS_SCALE = 100.0


@dataclass(frozen=True)
class ToleranceModel:
    """Tolerance constants derived from the floating-point format in use."""
    machine_epsilon: float
    eps: float
    round_factor: int

    def is_zero(self, value: float) -> bool:
        """Strictly inside the EPS band around zero."""
        return abs(value) < self.eps

    def is_close(self, a: float, b: float) -> bool:
        """Absolute distance strictly below EPS."""
        return abs(a - b) < self.eps


@lru_cache(maxsize=None)
def discover_tolerance() -> ToleranceModel:
    """
    Discover the tolerance model for Python floats (IEEE-754 binary64).

    Returns:
        ToleranceModel with eps = 2**-53 * 100 and round_factor = 52 on
        every conforming platform.
    """
    candidate = 1.0
    steps = 0
    while 1.0 + candidate > 1.0:
        candidate /= 2.0
        steps += 1

    return ToleranceModel(
        machine_epsilon=candidate,
        eps=candidate * EPS_SCALE,
        round_factor=steps - 1,
    )


TOLERANCE: ToleranceModel = discover_tolerance()

EPS: float = TOLERANCE.eps

ROUND_FACTOR: int = TOLERANCE.round_factor
