"""Flattened collections of motion constraints."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pathmotion.constraint.motion_constraints import (
    AccelConstraint,
    MaxTangentAccelConstraint,
    MaxVelocityConstraint,
    MotionConstraint,
    MultipleConstraint,
    VelocityConstraint,
)
from pathmotion.utils.constants import FALLBACK_MAX_ACCEL, FALLBACK_MAX_VELOCITY
from pathmotion.utils.exceptions import ConfigurationError

LOGGER = logging.getLogger(__name__)

FALLBACK_VELOCITY_CONSTRAINT = MaxVelocityConstraint(FALLBACK_MAX_VELOCITY)
FALLBACK_ACCEL_CONSTRAINT = MaxTangentAccelConstraint(FALLBACK_MAX_ACCEL)


def _flatten(
    constraints: Iterable[MotionConstraint],
    velocity: list[VelocityConstraint],
    accel: list[AccelConstraint],
) -> None:
    """Sort constraints into velocity and acceleration lists, recursively.

    Args:
        constraints: Constraints to sort.
        velocity: Receives velocity constraints.
        accel: Receives acceleration constraints.

    Raises:
        pathmotion.utils.exceptions.ConfigurationError: If a constraint is of
            none of the three known kinds.
    """
    for constraint in constraints:
        if isinstance(constraint, VelocityConstraint):
            velocity.append(constraint)
        elif isinstance(constraint, AccelConstraint):
            accel.append(constraint)
        elif isinstance(constraint, MultipleConstraint):
            _flatten(constraint.components, velocity, accel)
        else:
            msg = f"unknown constraint kind: {type(constraint).__name__}"
            raise ConfigurationError(msg)


class MotionConstraintSet:
    """Velocity and acceleration constraints applied together.

    Multiple constraints are decomposed into their components. When no
    velocity or no acceleration constraint is given, a generous fallback
    constraint is used for that kind so that both lists are never empty.
    """

    def __init__(self, *constraints: MotionConstraint) -> None:
        """Collect and flatten constraints.

        Args:
            *constraints: Constraints of any kind.

        Raises:
            pathmotion.utils.exceptions.ConfigurationError: If a constraint is
                of an unknown kind.
        """
        velocity: list[VelocityConstraint] = []
        accel: list[AccelConstraint] = []
        _flatten(constraints, velocity, accel)
        if not velocity:
            LOGGER.debug("No velocity constraints given, using fallback")
            velocity.append(FALLBACK_VELOCITY_CONSTRAINT)
        if not accel:
            LOGGER.debug("No acceleration constraints given, using fallback")
            accel.append(FALLBACK_ACCEL_CONSTRAINT)
        self._velocity_constraints = tuple(velocity)
        self._accel_constraints = tuple(accel)

    @property
    def velocity_constraints(self) -> tuple[VelocityConstraint, ...]:
        """Flat velocity constraints.

        Returns:
            Non-empty tuple of velocity constraints.
        """
        return self._velocity_constraints

    @property
    def accel_constraints(self) -> tuple[AccelConstraint, ...]:
        """Flat acceleration constraints.

        Returns:
            Non-empty tuple of acceleration constraints.
        """
        return self._accel_constraints

    def __repr__(self) -> str:
        """Describe the flattened constraints.

        Returns:
            Debug representation.
        """
        return (
            f"MotionConstraintSet(velocity={list(self._velocity_constraints)!r}, "
            f"accel={list(self._accel_constraints)!r})"
        )
