"""Arc-length parameterized curves."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from pathmotion.math.functions import VectorFunction
from pathmotion.math.vector import ZERO_VECTOR, Vector2d, zcross
from pathmotion.path.points import CurvePoint
from pathmotion.path.reparam import ReparamMapping, ReparamStepper
from pathmotion.utils.exceptions import PathDataError
from pathmotion.utils.stepper import step_to_all

P = TypeVar("P", bound=CurvePoint)


class ArcLengthGeometry(ABC, Generic[P]):
    """Point queries shared by curves and paths, parameterized by arc length."""

    @property
    @abstractmethod
    def length(self) -> float:
        """Total arc length.

        Returns:
            Length of the geometry.
        """

    @abstractmethod
    def point(self, s: float) -> P:
        """Evaluate the point at arc length ``s``.

        Args:
            s: Arc length in ``[0, length]``.

        Returns:
            Point with arc-length derivatives.
        """

    def points(self, all_s: Iterable[float]) -> list[P]:
        """Evaluate many points at non-decreasing arc lengths.

        Args:
            all_s: Sorted arc lengths.

        Returns:
            Points equal to :meth:`point` of each element.
        """
        return step_to_all(self, all_s)

    def stepper(self) -> GeometryStepper[P]:
        """Create a stepper over points.

        Returns:
            Stepper returning :meth:`point` values.
        """
        return GeometryStepper(self)

    def position(self, s: float) -> Vector2d:
        """Position at ``s``.

        Args:
            s: Arc length.

        Returns:
            Position.
        """
        return self.point(s).position

    def position_deriv(self, s: float) -> Vector2d:
        """Unit tangent at ``s``.

        Args:
            s: Arc length.

        Returns:
            Position derivative.
        """
        return self.point(s).position_deriv

    def position_second_deriv(self, s: float) -> Vector2d:
        """Curvature vector at ``s``.

        Args:
            s: Arc length.

        Returns:
            Position second derivative.
        """
        return self.point(s).position_second_deriv

    def tan_angle(self, s: float) -> float:
        """Tangent angle at ``s``.

        Args:
            s: Arc length.

        Returns:
            Tangent angle [rad].
        """
        return self.point(s).tan_angle

    def tan_angle_deriv(self, s: float) -> float:
        """Curvature at ``s``.

        Args:
            s: Arc length.

        Returns:
            Tangent angle derivative.
        """
        return self.point(s).tan_angle_deriv

    def tan_angle_second_deriv(self, s: float) -> float:
        """Curvature derivative at ``s``.

        Args:
            s: Arc length.

        Returns:
            Tangent angle second derivative.
        """
        return self.point(s).tan_angle_second_deriv


class GeometryStepper(Generic[P]):
    """Stepper that evaluates each point directly."""

    def __init__(self, geometry: ArcLengthGeometry[P]) -> None:
        """Bind the stepper to a geometry.

        Args:
            geometry: Curve or path to query.
        """
        self._geometry = geometry

    def step_to(self, step: float) -> P:
        """Evaluate the point at ``step``.

        Args:
            step: Arc length.

        Returns:
            Point at ``step``.
        """
        return self._geometry.point(step)


class Curve(ArcLengthGeometry[CurvePoint]):
    """Planar curve without heading information."""


@dataclass(frozen=True)
class ReparamCurve(Curve):
    """Curve backed by a parametric function and an arc-length mapping.

    Args:
        function: Parametric function ``r(t)`` on ``[0, 1]``.
        mapping: Arc-length to parameter mapping for ``function``.
    """

    function: VectorFunction
    mapping: ReparamMapping

    @property
    def length(self) -> float:
        """Total arc length.

        Returns:
            Length from the mapping.
        """
        return self.mapping.length

    def point(self, s: float) -> CurvePoint:
        """Evaluate the point at arc length ``s``.

        Args:
            s: Arc length, clamped to ``[0, length]``.

        Returns:
            Curve point.
        """
        return self._point_at_t(self.mapping.t_of_s(s))

    def stepper(self) -> ReparamCurveStepper:
        """Create a stepper sharing one mapping cursor.

        Returns:
            Stepper over curve points.
        """
        return ReparamCurveStepper(self, self.mapping.stepper())

    def _point_at_t(self, t: float) -> CurvePoint:
        """Convert function derivatives at ``t`` to arc-length derivatives.

        Args:
            t: Function parameter.

        Returns:
            Curve point; curvature terms are NaN where ``|r'(t)|`` is zero.
        """
        func = self.function
        velocity = func.deriv(t)
        speed = velocity.length
        tangent = velocity.normalized()
        if speed == 0.0:
            curvature = math.nan
            curvature_deriv = math.nan
        else:
            curvature = func.curvature(t)
            # dk/ds = (dk/dt) / |r'|
            curvature_deriv = func.curvature_deriv(t) / speed
        return CurvePoint(
            position=func.value(t),
            position_deriv=tangent,
            position_second_deriv=zcross(curvature, tangent),
            tan_angle=velocity.angle,
            tan_angle_deriv=curvature,
            tan_angle_second_deriv=curvature_deriv,
        )


class ReparamCurveStepper:
    """Stepper over a :class:`ReparamCurve`."""

    def __init__(self, curve: ReparamCurve, mapping_stepper: ReparamStepper) -> None:
        """Bind the stepper to a curve and its mapping cursor.

        Args:
            curve: Curve to evaluate.
            mapping_stepper: Cursor over the curve's mapping.
        """
        self._curve = curve
        self._mapping_stepper = mapping_stepper

    def step_to(self, step: float) -> CurvePoint:
        """Evaluate the point at ``step``.

        Args:
            step: Arc length.

        Returns:
            Same point as :meth:`ReparamCurve.point`.
        """
        return self._curve._point_at_t(self._mapping_stepper.step_to(step))


@dataclass(frozen=True)
class Line(Curve):
    """Straight segment between two distinct points.

    Args:
        start: Start point.
        end: End point.

    Raises:
        pathmotion.utils.exceptions.PathDataError: If ``start`` equals ``end``.
    """

    start: Vector2d
    end: Vector2d

    def __post_init__(self) -> None:
        """Reject zero-length lines.

        Raises:
            pathmotion.utils.exceptions.PathDataError: If the endpoints coincide.
        """
        if self.start.dist_to(self.end) == 0.0:
            msg = f"line endpoints must differ, got {self.start} twice"
            raise PathDataError(msg)

    @property
    def length(self) -> float:
        """Distance between the endpoints.

        Returns:
            Line length.
        """
        return self.start.dist_to(self.end)

    def point(self, s: float) -> CurvePoint:
        """Evaluate the point at arc length ``s``.

        Args:
            s: Arc length, clamped to ``[0, length]``.

        Returns:
            Curve point with zero curvature.
        """
        diff = self.end - self.start
        tangent = diff.normalized()
        s = min(max(s, 0.0), self.length)
        return CurvePoint(
            position=self.start + tangent * s,
            position_deriv=tangent,
            position_second_deriv=ZERO_VECTOR,
            tan_angle=diff.angle,
            tan_angle_deriv=0.0,
            tan_angle_second_deriv=0.0,
        )
