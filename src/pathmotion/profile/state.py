"""One-dimensional motion under constant acceleration."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class LinearMotionState:
    """Distance, velocity and acceleration at one instant.

    Args:
        s: Distance along the path.
        v: Velocity.
        a: Acceleration, assumed constant going forward.
    """

    s: float
    v: float
    a: float = 0.0

    def after_time(self, t: float) -> LinearMotionState:
        """State after time ``t`` under constant acceleration.

        Args:
            t: Elapsed time.

        Returns:
            Advanced state.
        """
        return LinearMotionState(
            self.s + self.v * t + 0.5 * self.a * t * t,
            self.v + self.a * t,
            self.a,
        )

    def at_distance(self, s: float) -> LinearMotionState:
        """State on reaching distance ``s`` with non-negative velocity.

        Args:
            s: Target distance.

        Returns:
            State at ``s``; velocity is clamped to zero where the motion would
            stop before reaching ``s``.
        """
        radicand = self.v * self.v + 2.0 * self.a * (s - self.s)
        return LinearMotionState(s, math.sqrt(max(radicand, 0.0)), self.a)
