"""Generate a trajectory along a quintic spline and sample it in time."""

from __future__ import annotations

import logging

import numpy as np

from pathmotion.constraint import (
    MaxAngularVelocityConstraint,
    MaxTotalAccelConstraint,
    MaxVelocityConstraint,
    MotionConstraintSet,
)
from pathmotion.math import QuinticSpline, Vector2d, VectorDerivatives
from pathmotion.path import (
    CurveHeadingPath,
    ReparamCurve,
    TangentHeading,
    reparameterize_by_integration,
)
from pathmotion.profile import build_profile_generation_config, generate_trajectory
from pathmotion.utils import configure_logging


def build_spline_path() -> CurveHeadingPath:
    """Build an S-shaped path whose heading follows the tangent.

    Returns:
        Path over a single quintic spline segment.
    """
    spline = QuinticSpline.from_derivatives(
        VectorDerivatives(Vector2d(0.0, 0.0), Vector2d(3.0, 0.0)),
        VectorDerivatives(Vector2d(2.0, 1.0), Vector2d(3.0, 0.0)),
    )
    curve = ReparamCurve(spline, reparameterize_by_integration(spline))
    return CurveHeadingPath(curve, TangentHeading())


def main() -> None:
    """Generate the trajectory and log samples at fixed time steps."""
    configure_logging(logging.INFO)
    logger = logging.getLogger("quintic_spline_profile_example")

    path = build_spline_path()
    constraints = MotionConstraintSet(
        MaxVelocityConstraint(1.5),
        MaxTotalAccelConstraint(2.0),
        MaxAngularVelocityConstraint(3.0),
    )
    config = build_profile_generation_config(max_segment_size=0.01)
    trajectory = generate_trajectory(path, constraints, config)

    logger.info("Path length: %.3f m", trajectory.distance)
    logger.info("Duration: %.3f s", trajectory.duration)
    times = np.linspace(0.0, trajectory.duration, 11)
    for state in trajectory.at_times(times):
        logger.info(
            "t=%.2f s | s=%.3f m | v=%.3f m/s | pose=(%.3f, %.3f, %.3f rad)",
            state.time,
            state.motion.s,
            state.motion.v,
            state.pose.vec.x,
            state.pose.vec.y,
            state.pose.heading,
        )


if __name__ == "__main__":
    main()
