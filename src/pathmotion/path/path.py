"""Paths: curves with robot heading, point turns, and joined paths."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from pathmotion.math.vector import ZERO_VECTOR, Vector2d
from pathmotion.path.curve import ArcLengthGeometry, Curve
from pathmotion.path.heading import HeadingProvider
from pathmotion.path.points import CurvePoint, PathPoint
from pathmotion.utils.constants import EPSILON
from pathmotion.utils.exceptions import PathDataError
from pathmotion.utils.stepper import Stepper

LOGGER = logging.getLogger(__name__)

POINT_TURN_LENGTH = 1.0


class Path(ArcLengthGeometry[PathPoint]):
    """Curve geometry plus robot heading, parameterized by arc length."""

    @property
    def is_point_turn(self) -> bool:
        """Whether this path only rotates in place.

        Returns:
            ``False`` for paths that move the robot.
        """
        return False

    @property
    def stop_points(self) -> frozenset[float]:
        """Arc lengths where the robot must come to rest.

        Returns:
            Empty set for paths without forced stops.
        """
        return frozenset()

    def heading(self, s: float) -> float:
        """Heading at ``s``.

        Args:
            s: Arc length.

        Returns:
            Heading [rad].
        """
        return self.point(s).heading

    def heading_deriv(self, s: float) -> float:
        """Heading derivative at ``s``.

        Args:
            s: Arc length.

        Returns:
            Heading rate per unit arc length.
        """
        return self.point(s).heading_deriv

    def heading_second_deriv(self, s: float) -> float:
        """Heading second derivative at ``s``.

        Args:
            s: Arc length.

        Returns:
            Second heading derivative along arc length.
        """
        return self.point(s).heading_second_deriv


@dataclass(frozen=True)
class CurveHeadingPath(Path):
    """Path combining a curve with a heading provider.

    Args:
        curve: Underlying curve.
        heading_provider: Source of heading along ``curve``.
    """

    curve: Curve
    heading_provider: HeadingProvider

    @property
    def length(self) -> float:
        """Total arc length.

        Returns:
            Curve length.
        """
        return self.curve.length

    def point(self, s: float) -> PathPoint:
        """Evaluate the path point at ``s``.

        Args:
            s: Arc length, clamped to ``[0, length]``.

        Returns:
            Curve point with heading attached.
        """
        return self._attach_heading(self.curve.point(s), s)

    def stepper(self) -> CurveHeadingPathStepper:
        """Create a stepper reusing the curve's stepper.

        Returns:
            Stepper over path points.
        """
        return CurveHeadingPathStepper(self, self.curve.stepper())

    def _attach_heading(self, curve_point: CurvePoint, s: float) -> PathPoint:
        """Attach heading to a curve point.

        Args:
            curve_point: Curve point at ``s``.
            s: Arc length before clamping.

        Returns:
            Path point.
        """
        s = min(max(s, 0.0), self.curve.length)
        return curve_point.with_heading(self.heading_provider.heading(self.curve, curve_point, s))


class CurveHeadingPathStepper:
    """Stepper over a :class:`CurveHeadingPath`."""

    def __init__(self, path: CurveHeadingPath, curve_stepper: Stepper) -> None:
        """Bind the stepper to a path and its curve stepper.

        Args:
            path: Path to evaluate.
            curve_stepper: Stepper over the path's curve.
        """
        self._path = path
        self._curve_stepper = curve_stepper

    def step_to(self, step: float) -> PathPoint:
        """Evaluate the point at ``step``.

        Args:
            step: Arc length.

        Returns:
            Same point as :meth:`CurveHeadingPath.point`.
        """
        return self._path._attach_heading(self._curve_stepper.step_to(step), step)


@dataclass(frozen=True)
class PointTurn(Path):
    """Rotation in place from ``start_heading`` by ``turn_angle``.

    Has a nominal length of ``1.0`` so it fits the profile machinery; the
    position does not change and the curvature is zero.

    Args:
        location: Position of the robot during the turn.
        start_heading: Heading at the start [rad].
        turn_angle: Signed rotation [rad].
    """

    location: Vector2d
    start_heading: float
    turn_angle: float

    @property
    def length(self) -> float:
        """Nominal length.

        Returns:
            ``1.0``.
        """
        return POINT_TURN_LENGTH

    @property
    def is_point_turn(self) -> bool:
        """Whether this path only rotates in place.

        Returns:
            ``True``.
        """
        return True

    @property
    def stop_points(self) -> frozenset[float]:
        """Arc lengths where the robot must come to rest.

        Returns:
            Both ends of the turn.
        """
        return frozenset((0.0, POINT_TURN_LENGTH))

    def point(self, s: float) -> PathPoint:
        """Evaluate the turn at progress ``s``.

        Args:
            s: Progress in ``[0, 1]``, clamped.

        Returns:
            Stationary point with linearly changing heading.
        """
        s = min(max(s, 0.0), POINT_TURN_LENGTH)
        return PathPoint(
            position=self.location,
            position_deriv=ZERO_VECTOR,
            position_second_deriv=ZERO_VECTOR,
            tan_angle=self.start_heading,
            tan_angle_deriv=0.0,
            tan_angle_second_deriv=0.0,
            heading=self.start_heading + s * self.turn_angle,
            heading_deriv=self.turn_angle,
            heading_second_deriv=0.0,
        )


def _joint_turn(index: int, prev: PathPoint, cur: PathPoint) -> float:
    """Validate the joint between two paths and measure its heading jump.

    Args:
        index: Index of the later path in the joined sequence.
        prev: End point of the earlier path.
        cur: Start point of the later path.

    Returns:
        Signed rotation in ``[-pi, pi]`` from ``prev.heading`` to
        ``cur.heading``, or ``0.0`` when the headings agree.

    Raises:
        pathmotion.utils.exceptions.PathDataError: If the positions differ.
    """
    if not prev.position.eps_eq(cur.position):
        msg = (
            f"position discontinuity between path {index - 1} and path {index}: "
            f"{prev.position} != {cur.position}"
        )
        raise PathDataError(msg)
    turn = math.remainder(cur.heading - prev.heading, 2.0 * math.pi)
    return 0.0 if abs(turn) <= EPSILON else turn


def _is_stop_joint(prev: PathPoint, cur: PathPoint) -> bool:
    """Check whether the tangent or heading rate jumps at a joint.

    Args:
        prev: End point of the earlier path.
        cur: Start point of the later path.

    Returns:
        ``True`` when the robot must stop at the joint.
    """
    return not (
        prev.position_deriv.eps_eq(cur.position_deriv)
        and abs(prev.heading_deriv - cur.heading_deriv) <= EPSILON
    )


class MultiplePath(Path):
    """Several paths joined end to end.

    Nested joined paths are flattened. Adjacent paths must agree in position.
    Where their headings differ, a :class:`PointTurn` is inserted at the
    joint. A jump in tangent or heading rate turns the joint into a stop
    point where the generated profile reaches zero speed.
    """

    def __init__(self, paths: Sequence[Path]) -> None:
        """Join paths, validate their joints and insert missing turns.

        Args:
            paths: Paths in traversal order.

        Raises:
            pathmotion.utils.exceptions.PathDataError: If ``paths`` is empty
                or two adjacent paths differ in position.
        """
        flat: list[Path] = []
        for path in paths:
            if isinstance(path, MultiplePath):
                flat.extend(path.paths)
            else:
                flat.append(path)
        if not flat:
            msg = "MultiplePath requires at least one path"
            raise PathDataError(msg)

        joined: list[Path] = [flat[0]]
        for index in range(1, len(flat)):
            prev_end = joined[-1].point(joined[-1].length)
            turn = _joint_turn(index, prev_end, flat[index].point(0.0))
            if turn != 0.0:
                LOGGER.debug("Inserting point turn of %.6f rad before path %d", turn, index)
                joined.append(PointTurn(prev_end.position, prev_end.heading, turn))
            joined.append(flat[index])

        lengths = np.array([path.length for path in joined], dtype=float)
        start_lengths = np.concatenate(([0.0], np.cumsum(lengths)[:-1]))
        start_lengths.setflags(write=False)

        stop_points = {
            float(start) + s for path, start in zip(joined, start_lengths) for s in path.stop_points
        }
        for index in range(1, len(joined)):
            prev = joined[index - 1]
            if _is_stop_joint(prev.point(prev.length), joined[index].point(0.0)):
                stop_points.add(float(start_lengths[index]))

        self._paths = tuple(joined)
        self._start_lengths = start_lengths
        self._length = float(lengths.sum())
        self._stop_points = frozenset(stop_points)
        LOGGER.debug(
            "Joined %d paths, total length %.6f, %d stop points",
            len(joined),
            self._length,
            len(stop_points),
        )

    @property
    def paths(self) -> tuple[Path, ...]:
        """Joined paths in order.

        Returns:
            Flattened component paths.
        """
        return self._paths

    @property
    def start_lengths(self) -> np.ndarray:
        """Arc length at which each component path starts.

        Returns:
            Read-only array of start lengths.
        """
        return self._start_lengths

    @property
    def length(self) -> float:
        """Total arc length.

        Returns:
            Sum of component lengths.
        """
        return self._length

    @property
    def stop_points(self) -> frozenset[float]:
        """Arc lengths where the robot must come to rest.

        Returns:
            Component stop points and discontinuous joints.
        """
        return self._stop_points

    def segment_index(self, s: float) -> int:
        """Find the component path containing ``s``.

        Args:
            s: Arc length.

        Returns:
            Largest index whose start length is ``<= s``, clipped to the
            valid range.
        """
        index = int(np.searchsorted(self._start_lengths, s, side="right")) - 1
        return min(max(index, 0), len(self._paths) - 1)

    def point(self, s: float) -> PathPoint:
        """Evaluate the point at ``s``.

        Args:
            s: Arc length.

        Returns:
            Point of the component path containing ``s``.
        """
        index = self.segment_index(s)
        return self._paths[index].point(s - self._start_lengths[index])

    def stepper(self) -> MultiplePathStepper:
        """Create a stepper switching component steppers as needed.

        Returns:
            Stepper over joined path points.
        """
        return MultiplePathStepper(self)


class MultiplePathStepper:
    """Stepper over a :class:`MultiplePath`."""

    def __init__(self, path: MultiplePath) -> None:
        """Create a stepper with no component selected yet.

        Args:
            path: Joined path to step through.
        """
        self._path = path
        self._index = -1
        self._component_stepper: Stepper[PathPoint] | None = None

    def step_to(self, step: float) -> PathPoint:
        """Evaluate the point at ``step``.

        Args:
            step: Arc length.

        Returns:
            Same point as :meth:`MultiplePath.point`.
        """
        path = self._path
        starts = path.start_lengths
        last = len(path.paths) - 1
        previous = self._index
        if previous == -1:
            index = path.segment_index(step)
        else:
            index = previous
            while index < last and step >= starts[index + 1]:
                index += 1
            while index > 0 and step < starts[index]:
                index -= 1
        if index != previous or self._component_stepper is None:
            self._component_stepper = path.paths[index].stepper()
            self._index = index
        return self._component_stepper.step_to(step - starts[index])
