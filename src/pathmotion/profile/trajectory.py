"""Trajectories: a path traversed according to a motion profile."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pathmotion.constraint.constraint_set import MotionConstraintSet
from pathmotion.math.vector import Pose2d
from pathmotion.path.path import Path
from pathmotion.path.points import PathPoint
from pathmotion.profile.config import ProfileGenerationConfig
from pathmotion.profile.generator import generate_profile
from pathmotion.profile.segments import ProfileStepper, SegmentsMotionProfile
from pathmotion.profile.state import LinearMotionState
from pathmotion.utils.constants import EPSILON
from pathmotion.utils.exceptions import PathDataError
from pathmotion.utils.stepper import Stepper, step_to_all


@dataclass(frozen=True)
class TrajectoryState:
    """Robot pose and its time derivatives at one instant.

    Args:
        time: Time since the trajectory start.
        motion: Distance, velocity and acceleration along the path.
        point: Path point at the current distance.
        pose: Position and heading.
        velocity: Time derivative of the pose.
        acceleration: Second time derivative of the pose.
    """

    time: float
    motion: LinearMotionState
    point: PathPoint
    pose: Pose2d
    velocity: Pose2d
    acceleration: Pose2d


def _clamp_time(time: float, duration: float) -> float:
    """Clamp a query time to the trajectory.

    Args:
        time: Requested time.
        duration: Trajectory duration.

    Returns:
        ``time`` limited to ``[0, duration]``.
    """
    return min(max(time, 0.0), duration)


def _trajectory_state(time: float, motion: LinearMotionState, point: PathPoint) -> TrajectoryState:
    """Combine profile motion with path geometry by the chain rule.

    Args:
        time: Time of the state.
        motion: Profile state.
        point: Path point at ``motion.s``.

    Returns:
        Trajectory state.
    """
    v = motion.v
    return TrajectoryState(
        time=time,
        motion=motion,
        point=point,
        pose=point.pose,
        velocity=point.pose_deriv * v,
        acceleration=point.pose_second_deriv * (v * v) + point.pose_deriv * motion.a,
    )


@dataclass(frozen=True)
class Trajectory:
    """Path paired with a motion profile covering its full length.

    Args:
        path: Path to follow.
        profile: Motion profile along ``path``.

    Raises:
        pathmotion.utils.exceptions.PathDataError: If the profile distance
            differs from the path length.
    """

    path: Path
    profile: SegmentsMotionProfile

    def __post_init__(self) -> None:
        """Check that path and profile have the same length.

        Raises:
            pathmotion.utils.exceptions.PathDataError: If the lengths differ
                by more than ``EPSILON``.
        """
        if abs(self.path.length - self.profile.distance) > EPSILON:
            msg = (
                f"profile distance ({self.profile.distance}) must equal "
                f"path length ({self.path.length})"
            )
            raise PathDataError(msg)

    @property
    def duration(self) -> float:
        """Total duration.

        Returns:
            Profile duration.
        """
        return self.profile.duration

    @property
    def distance(self) -> float:
        """Total distance.

        Returns:
            Path length.
        """
        return self.path.length

    def at_time(self, time: float) -> TrajectoryState:
        """State at a time.

        Args:
            time: Time since the start; clamped to ``[0, duration]``.

        Returns:
            Trajectory state whose ``time`` is clamped like its motion.
        """
        motion = self.profile.at_time(time)
        point = self.path.point(motion.s)
        return _trajectory_state(_clamp_time(time, self.duration), motion, point)

    def stepper(self) -> TrajectoryStepper:
        """Create a stepper for sequential time queries.

        Returns:
            Stepper by time.
        """
        return TrajectoryStepper(self.profile.stepper(), self.path.stepper(), self.duration)

    def at_times(self, times: Iterable[float]) -> list[TrajectoryState]:
        """States at many sorted times.

        Args:
            times: Non-decreasing times.

        Returns:
            States equal to :meth:`at_time` of each element.
        """
        return step_to_all(self, times)


class TrajectoryStepper:
    """Stepper over a :class:`Trajectory` by time."""

    def __init__(
        self,
        profile_stepper: ProfileStepper,
        path_stepper: Stepper[PathPoint],
        duration: float,
    ) -> None:
        """Combine a profile stepper and a path stepper.

        Args:
            profile_stepper: Stepper over the profile by time.
            path_stepper: Stepper over the path by distance.
            duration: Trajectory duration, used to clamp reported times.
        """
        self._profile_stepper = profile_stepper
        self._path_stepper = path_stepper
        self._duration = duration

    def step_to(self, step: float) -> TrajectoryState:
        """State at time ``step``.

        Args:
            step: Time since the start.

        Returns:
            Same state as :meth:`Trajectory.at_time`.
        """
        motion = self._profile_stepper.step_to(step)
        point = self._path_stepper.step_to(motion.s)
        return _trajectory_state(_clamp_time(step, self._duration), motion, point)


def generate_trajectory(
    path: Path,
    constraints: MotionConstraintSet,
    config: ProfileGenerationConfig | None = None,
) -> Trajectory:
    """Generate a profile along a path and pair it with the path.

    Args:
        path: Path to follow.
        constraints: Velocity and acceleration constraints.
        config: Generation settings.

    Returns:
        Trajectory over the whole path.
    """
    return Trajectory(path, generate_profile(path, constraints, config))
