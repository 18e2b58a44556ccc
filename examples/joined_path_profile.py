"""Profile a path of two lines joined by a turn in place."""

from __future__ import annotations

import logging
import math

from pathmotion.constraint import (
    MaxAngularAccelConstraint,
    MaxAngularVelocityConstraint,
    MaxTangentAccelConstraint,
    MaxVelocityConstraint,
    MotionConstraintSet,
)
from pathmotion.math import Vector2d
from pathmotion.path import ConstantHeading, CurveHeadingPath, Line, MultiplePath, PointTurn
from pathmotion.profile import generate_profile
from pathmotion.utils import configure_logging


def main() -> None:
    """Generate the profile and log the stop points and timing."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("joined_path_profile_example")

    corner = Vector2d(1.0, 0.0)
    path = MultiplePath(
        [
            CurveHeadingPath(Line(Vector2d(0.0, 0.0), corner), ConstantHeading(0.0)),
            PointTurn(corner, 0.0, math.pi / 2),
            CurveHeadingPath(Line(corner, Vector2d(1.0, 1.0)), ConstantHeading(math.pi / 2)),
        ]
    )
    constraints = MotionConstraintSet(
        MaxVelocityConstraint(1.0),
        MaxTangentAccelConstraint(0.5),
        MaxAngularVelocityConstraint(1.0),
        MaxAngularAccelConstraint(2.0),
    )
    profile = generate_profile(path, constraints)

    logger.info("Stop points: %s", sorted(path.stop_points))
    logger.info("Distance: %.3f | duration: %.3f s", profile.distance, profile.duration)
    for stop in sorted(path.stop_points):
        logger.info("Velocity at %.3f: %.4f", stop, profile.at_distance(stop).v)


if __name__ == "__main__":
    main()
