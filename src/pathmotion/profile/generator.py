"""Forward/backward sweep generating velocity profiles along paths."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from pathmotion.constraint.constraint_set import MotionConstraintSet
from pathmotion.constraint.motion_constraints import AccelConstraint
from pathmotion.math.interval import Interval
from pathmotion.math.search import extending_down_double_search
from pathmotion.path.path import Path
from pathmotion.path.points import PathPoint
from pathmotion.profile.config import ProfileGenerationConfig
from pathmotion.profile.segments import SegmentsMotionProfile
from pathmotion.utils.constants import EPSILON, MAX_PROFILE_VELOCITY
from pathmotion.utils.exceptions import InfeasibleProfileError, PathDataError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointConstraint:
    """Constraints evaluated at one sample point.

    Args:
        point: Path point at the sample.
        max_velocity: Minimum of all velocity constraints at ``point``.
        accel_constraints: Acceleration constraints to evaluate at ``point``.
    """

    point: PathPoint
    max_velocity: float
    accel_constraints: tuple[AccelConstraint, ...]

    @classmethod
    def from_constraint_set(cls, point: PathPoint, constraints: MotionConstraintSet) -> PointConstraint:
        """Evaluate velocity constraints at a point.

        Args:
            point: Path point.
            constraints: Constraints to apply.

        Returns:
            Point constraint with the combined velocity cap.
        """
        max_velocity = min(c.max_velocity(point) for c in constraints.velocity_constraints)
        return cls(point, max_velocity, constraints.accel_constraints)

    def accel_range(self, velocity: float) -> Interval:
        """Intersect all acceleration intervals at a speed.

        Args:
            velocity: Current speed along the path.

        Returns:
            Allowed acceleration, possibly empty.
        """
        result = Interval.real()
        for constraint in self.accel_constraints:
            result = result.intersect(constraint.accel_range(self.point, velocity))
        return result


def _sample_points(path: Path, config: ProfileGenerationConfig) -> np.ndarray:
    """Choose sample distances along a path.

    Samples are evenly spaced, with at least ``min_segment_count`` segments,
    plus the path's interior stop points. Two stop points, or a stop point and
    an end of the path, never end up adjacent: a midpoint is inserted between
    them so the robot can move from one to the other.

    Args:
        path: Path to sample.
        config: Generation settings.

    Returns:
        Strictly increasing distances from ``0`` to ``path.length``.
    """
    length = path.length
    segment_count = max(math.ceil(length / config.max_segment_size), config.min_segment_count)
    samples = np.linspace(0.0, length, segment_count + 1)
    stops = np.array(sorted(s for s in path.stop_points if EPSILON < s < length - EPSILON), dtype=float)
    if stops.size:
        near_stop = np.min(np.abs(samples[:, None] - stops[None, :]), axis=1) <= EPSILON
        samples = np.union1d(samples[~near_stop], stops)

    # both ends may be pinned to zero velocity by the target velocities
    pinned = np.isin(samples, stops)
    pinned[[0, -1]] = True
    adjacent = pinned[:-1] & pinned[1:]
    if np.any(adjacent):
        midpoints = 0.5 * (samples[:-1][adjacent] + samples[1:][adjacent])
        LOGGER.debug("Inserted %d samples between adjacent stop points", midpoints.size)
        samples = np.union1d(samples, midpoints)
    return samples


def _max_accel(dx: float, velocity: float, point_constraint: PointConstraint, reverse: bool) -> float | None:
    """Largest usable acceleration across a segment starting at ``velocity``.

    Args:
        dx: Segment length.
        velocity: Speed at the segment start.
        point_constraint: Constraints at the segment start.
        reverse: Whether the sweep runs backward, using deceleration.

    Returns:
        Maximum acceleration in the sweep direction, or ``None`` if the
        interval is empty or would bring the speed below zero within ``dx``.
    """
    interval = point_constraint.accel_range(velocity)
    if interval.is_empty():
        return None
    accel = -interval.lower if reverse else interval.upper
    if accel > -velocity * velocity / (2.0 * dx):
        return accel
    return None


def _acceleration_pass(
    velocities: list[float],
    point_constraints: list[PointConstraint],
    points: list[float],
    tolerance: float,
    reverse: bool,
) -> None:
    """Limit velocities by reachable acceleration in one sweep direction.

    Modifies ``velocities`` in place. Where no acceleration is usable at a
    sample's velocity, that velocity is lowered by a downward search until
    one is.

    Args:
        velocities: Velocity caps per sample, in sweep order.
        point_constraints: Constraints per sample, in sweep order.
        points: Sample distances, in sweep order.
        tolerance: Accuracy of the velocity-lowering search.
        reverse: Whether this is the backward sweep.

    Raises:
        pathmotion.utils.exceptions.InfeasibleProfileError: If no usable
            acceleration exists even at zero velocity.
    """
    for i in range(len(points) - 1):
        v0 = velocities[i]
        point_constraint = point_constraints[i]
        dx = abs(points[i + 1] - points[i])
        accel = _max_accel(dx, v0, point_constraint, reverse)
        if accel is None:
            if v0 == 0.0:
                msg = f"No feasible acceleration at zero velocity at distance {points[i]}"
                raise InfeasibleProfileError(msg)
            v0 = extending_down_double_search(
                0.0,
                v0,
                tolerance,
                partition=lambda v: _max_accel(dx, v, point_constraint, reverse) is None,
            )
            accel = _max_accel(dx, v0, point_constraint, reverse)
            if accel is None:
                msg = f"No feasible acceleration at any velocity at distance {points[i]}"
                raise InfeasibleProfileError(msg)
            LOGGER.debug("Lowered velocity at %.6f from %.6f to %.6f", points[i], velocities[i], v0)
            velocities[i] = v0
        v1 = math.sqrt(max(v0 * v0 + 2.0 * accel * dx, 0.0))
        velocities[i + 1] = min(v1, velocities[i + 1])


def generate_profile(
    path: Path,
    constraints: MotionConstraintSet,
    config: ProfileGenerationConfig | None = None,
) -> SegmentsMotionProfile:
    """Generate a velocity profile along a path satisfying all constraints.

    Samples the path, caps each sample's velocity by the velocity constraints
    and the target start and end velocities, then sweeps forward limiting
    acceleration and backward limiting deceleration. The result satisfies the
    constraints at every sample but is not guaranteed time-optimal.

    Args:
        path: Path to traverse.
        constraints: Velocity and acceleration constraints.
        config: Generation settings; defaults to :class:`ProfileGenerationConfig`.

    Returns:
        Profile over distance ``[0, path.length]``.

    Raises:
        pathmotion.utils.exceptions.ConfigurationError: If ``config`` is invalid.
        pathmotion.utils.exceptions.PathDataError: If the path length is not
            positive and finite.
        pathmotion.utils.exceptions.InfeasibleProfileError: If the constraints
            cannot be satisfied.
    """
    config = config or ProfileGenerationConfig()
    config.validate()
    length = path.length
    if not (math.isfinite(length) and length > 0.0):
        msg = f"path length must be positive and finite, got {length}"
        raise PathDataError(msg)

    points = _sample_points(path, config)
    path_points = path.points(points)
    point_constraints = [PointConstraint.from_constraint_set(p, constraints) for p in path_points]
    max_velocities = np.array([pc.max_velocity for pc in point_constraints], dtype=float)
    if np.any(np.isnan(max_velocities)):
        index = int(np.argmax(np.isnan(max_velocities)))
        msg = f"maximum velocity is NaN at distance {points[index]}"
        raise InfeasibleProfileError(msg)
    if np.any(max_velocities < 0.0):
        msg = "velocity constraints must return maximum velocities >= 0"
        raise InfeasibleProfileError(msg)

    max_velocities[0] = min(max_velocities[0], config.target_start_velocity)
    max_velocities[-1] = min(max_velocities[-1], config.target_end_velocity)
    stops = [s for s in path.stop_points if 0.0 <= s <= length]
    if stops:
        stop_indices = np.abs(points[:, None] - np.array(stops)[None, :]).argmin(axis=0)
        max_velocities[stop_indices] = 0.0
    max_velocities = np.minimum(max_velocities, MAX_PROFILE_VELOCITY)

    tolerance = max(config.max_velocity_search_tolerance, EPSILON)
    velocities = max_velocities.tolist()
    point_list = points.tolist()
    _acceleration_pass(velocities, point_constraints, point_list, tolerance, reverse=False)
    velocities.reverse()
    _acceleration_pass(
        velocities,
        point_constraints[::-1],
        point_list[::-1],
        tolerance,
        reverse=True,
    )
    velocities.reverse()

    LOGGER.debug(
        "Generated profile over %d samples, length %.6f, peak velocity %.6f",
        len(point_list),
        length,
        max(velocities),
    )
    return SegmentsMotionProfile.from_point_velocity_pairs(zip(point_list, velocities))
