"""Piecewise constant-acceleration motion profiles."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from pathmotion.profile.state import LinearMotionState
from pathmotion.utils.exceptions import InfeasibleProfileError, PathDataError
from pathmotion.utils.stepper import step_to_all

MIN_PROFILE_POINTS = 2


@dataclass(frozen=True)
class SegmentsMotionProfile:
    """Motion profile made of constant-acceleration segments.

    Segment ``i`` starts at ``times[i]`` and ``distances[i]`` with velocity
    ``velocities[i]`` and holds acceleration ``accels[i]`` until the next
    segment starts. The last entry is the terminal state. All arrays are
    copied and made read-only on construction.

    Args:
        times: Strictly increasing segment start times, starting at ``0``.
        distances: Strictly increasing segment start distances.
        velocities: Segment start velocities.
        accels: Segment accelerations; the last one is ``0``.

    Raises:
        pathmotion.utils.exceptions.PathDataError: If array shapes differ or
            times or distances are not strictly increasing.
    """

    times: np.ndarray
    distances: np.ndarray
    velocities: np.ndarray
    accels: np.ndarray

    def __post_init__(self) -> None:
        """Freeze arrays and validate them."""
        for name in ("times", "distances", "velocities", "accels"):
            values = np.array(getattr(self, name), dtype=float)
            values.setflags(write=False)
            object.__setattr__(self, name, values)
        self.validate()

    def validate(self) -> None:
        """Validate segment arrays.

        Raises:
            pathmotion.utils.exceptions.PathDataError: If array shapes differ,
                there are fewer than two entries, or times or distances are
                not strictly increasing.
        """
        size = self.times.size
        arrays = (self.times, self.distances, self.velocities, self.accels)
        if any(arr.ndim != 1 or arr.size != size for arr in arrays):
            msg = "All profile arrays must be one-dimensional with equal length"
            raise PathDataError(msg)
        if size < MIN_PROFILE_POINTS:
            msg = f"A profile needs at least {MIN_PROFILE_POINTS} points, got {size}"
            raise PathDataError(msg)
        if not (np.all(np.diff(self.times) > 0.0) and np.all(np.diff(self.distances) > 0.0)):
            msg = "Profile times and distances must be strictly increasing"
            raise PathDataError(msg)

    @classmethod
    def from_point_velocity_pairs(cls, pairs: Iterable[tuple[float, float]]) -> SegmentsMotionProfile:
        """Build a profile from distance and velocity samples.

        Each pair of consecutive samples becomes a segment with acceleration
        ``(v1^2 - v0^2) / (2 dx)`` and duration ``dx / avg(v0, v1)``.

        Args:
            pairs: ``(distance, velocity)`` samples.

        Returns:
            Profile through all samples.

        Raises:
            pathmotion.utils.exceptions.PathDataError: If distances are
                non-finite or not strictly increasing, or fewer than two
                samples are given.
            pathmotion.utils.exceptions.InfeasibleProfileError: If a velocity
                is negative or non-finite, or two adjacent velocities are zero.
        """
        samples = np.array(list(pairs), dtype=float).reshape(-1, 2)
        x = samples[:, 0]
        v = samples[:, 1]
        if x.size < MIN_PROFILE_POINTS:
            msg = f"A profile needs at least {MIN_PROFILE_POINTS} points, got {x.size}"
            raise PathDataError(msg)
        if not np.all(np.isfinite(x)):
            msg = "Profile distances must be finite"
            raise PathDataError(msg)
        if not np.all(np.diff(x) > 0.0):
            msg = "Profile distances must be strictly increasing"
            raise PathDataError(msg)
        if not (np.all(np.isfinite(v)) and np.all(v >= 0.0)):
            msg = "Profile velocities must be finite and >= 0"
            raise InfeasibleProfileError(msg)

        dx = np.diff(x)
        v0 = v[:-1]
        v1 = v[1:]
        stopped = (v0 == 0.0) & (v1 == 0.0)
        if np.any(stopped):
            index = int(np.argmax(stopped))
            msg = (
                "Velocity can only be zero instantaneously, got two adjacent zero "
                f"velocities at distances {x[index]} and {x[index + 1]}"
            )
            raise InfeasibleProfileError(msg)

        accels = np.append((v1 * v1 - v0 * v0) / (2.0 * dx), 0.0)
        times = np.concatenate(([0.0], np.cumsum(dx / (0.5 * (v0 + v1)))))
        return cls(times=times, distances=x, velocities=v, accels=accels)

    @property
    def duration(self) -> float:
        """Total duration.

        Returns:
            Start time of the terminal state.
        """
        return float(self.times[-1])

    @property
    def distance(self) -> float:
        """Distance at the end of the profile.

        Returns:
            Distance of the terminal state.
        """
        return float(self.distances[-1])

    @property
    def segment_count(self) -> int:
        """Number of segments.

        Returns:
            Number of samples minus one.
        """
        return self.times.size - 1

    def state(self, index: int) -> LinearMotionState:
        """State at the start of a segment.

        Args:
            index: Segment index; the last index is the terminal state.

        Returns:
            Segment start state.
        """
        return LinearMotionState(
            float(self.distances[index]),
            float(self.velocities[index]),
            float(self.accels[index]),
        )

    def _evaluate(self, index: int, value: float, by_distance: bool) -> LinearMotionState:
        """Evaluate segment ``index`` at a time or distance inside it.

        Args:
            index: Segment containing ``value``.
            value: Time or distance.
            by_distance: Whether ``value`` is a distance.

        Returns:
            State at ``value``.
        """
        if by_distance:
            return self.state(index).at_distance(value)
        return self.state(index).after_time(value - float(self.times[index]))

    def _clamped(self, value: float, by_distance: bool) -> LinearMotionState | None:
        """Return the boundary state for out-of-range queries.

        Args:
            value: Time or distance.
            by_distance: Whether ``value`` is a distance.

        Returns:
            First or terminal state if ``value`` lies outside the profile,
            otherwise ``None``.
        """
        keys = self.distances if by_distance else self.times
        if value <= keys[0]:
            return self.state(0)
        if value >= keys[-1]:
            last = self.times.size - 1
            return LinearMotionState(float(self.distances[last]), float(self.velocities[last]), 0.0)
        return None

    def _query(self, value: float, by_distance: bool) -> LinearMotionState:
        """Binary-search a time or distance query.

        Args:
            value: Time or distance.
            by_distance: Whether ``value`` is a distance.

        Returns:
            State at ``value``.
        """
        clamped = self._clamped(value, by_distance)
        if clamped is not None:
            return clamped
        keys = self.distances if by_distance else self.times
        index = int(np.searchsorted(keys, value, side="right")) - 1
        return self._evaluate(index, value, by_distance)

    def at_time(self, time: float) -> LinearMotionState:
        """State at a time.

        Args:
            time: Time since the profile start; clamped to ``[0, duration]``.

        Returns:
            Motion state.
        """
        return self._query(time, by_distance=False)

    def at_distance(self, distance: float) -> LinearMotionState:
        """State at a distance.

        Args:
            distance: Distance along the path; clamped to the profile range.

        Returns:
            Motion state.
        """
        return self._query(distance, by_distance=True)

    def stepper(self) -> ProfileStepper:
        """Create a stepper for sequential time queries.

        Returns:
            Stepper by time.
        """
        return ProfileStepper(self, by_distance=False)

    def distance_stepper(self) -> ProfileStepper:
        """Create a stepper for sequential distance queries.

        Returns:
            Stepper by distance.
        """
        return ProfileStepper(self, by_distance=True)

    def at_times(self, times: Iterable[float]) -> list[LinearMotionState]:
        """States at many times, ideally sorted.

        Args:
            times: Query times.

        Returns:
            States equal to :meth:`at_time` of each element.
        """
        return step_to_all(self, times)

    def at_distances(self, distances: Iterable[float]) -> list[LinearMotionState]:
        """States at many distances, ideally sorted.

        Args:
            distances: Query distances.

        Returns:
            States equal to :meth:`at_distance` of each element.
        """
        stepper = self.distance_stepper()
        return [stepper.step_to(distance) for distance in distances]


class ProfileStepper:
    """Cursor over a :class:`SegmentsMotionProfile` by time or by distance.

    Not thread-safe; each consumer owns its stepper.
    """

    def __init__(self, profile: SegmentsMotionProfile, by_distance: bool = False) -> None:
        """Create a stepper with no segment resolved yet.

        Args:
            profile: Profile to query.
            by_distance: Step by distance instead of time.
        """
        self._profile = profile
        self._by_distance = by_distance
        self._keys = profile.distances if by_distance else profile.times
        self._index = -1

    @property
    def index(self) -> int:
        """Last resolved segment index.

        Returns:
            Segment index, or ``-1`` before the first interior query.
        """
        return self._index

    def step_to(self, step: float) -> LinearMotionState:
        """State at ``step``, moving the cursor only as far as needed.

        Args:
            step: Time or distance, as chosen at construction.

        Returns:
            Same state as the matching single query.
        """
        profile = self._profile
        clamped = profile._clamped(step, self._by_distance)
        if clamped is not None:
            return clamped
        keys = self._keys
        index = self._index
        if index == -1 or math.isnan(step):
            index = int(np.searchsorted(keys, step, side="right")) - 1
        else:
            last = keys.size - 1
            while index < last and step >= keys[index + 1]:
                index += 1
            while index > 0 and step < keys[index]:
                index -= 1
        self._index = index
        return profile._evaluate(index, step, self._by_distance)
