"""Point samples along curves and paths, with arc-length derivatives."""

from __future__ import annotations

from dataclasses import dataclass

from pathmotion.math.vector import Derivatives, Pose2d, Vector2d


@dataclass(frozen=True)
class CurvePoint:
    """Geometry of a curve at one arc length.

    All derivatives are taken with respect to arc length. ``position_deriv`` is
    the unit tangent, or the zero vector for a path that turns in place.

    Args:
        position: Point position.
        position_deriv: Unit tangent.
        position_second_deriv: Curvature vector, ``curvature`` zcross tangent.
        tan_angle: Tangent angle [rad].
        tan_angle_deriv: Curvature [1/length].
        tan_angle_second_deriv: Derivative of curvature along arc length.
    """

    position: Vector2d
    position_deriv: Vector2d
    position_second_deriv: Vector2d
    tan_angle: float
    tan_angle_deriv: float
    tan_angle_second_deriv: float

    @property
    def curvature(self) -> float:
        """Signed curvature, same as ``tan_angle_deriv``.

        Returns:
            Curvature [1/length].
        """
        return self.tan_angle_deriv

    @property
    def curvature_deriv(self) -> float:
        """Curvature derivative, same as ``tan_angle_second_deriv``.

        Returns:
            Curvature derivative along arc length.
        """
        return self.tan_angle_second_deriv

    def with_heading(self, heading: Derivatives) -> PathPoint:
        """Attach heading information to this point.

        Args:
            heading: Heading and its arc-length derivatives.

        Returns:
            Path point combining this geometry with ``heading``.
        """
        return PathPoint(
            position=self.position,
            position_deriv=self.position_deriv,
            position_second_deriv=self.position_second_deriv,
            tan_angle=self.tan_angle,
            tan_angle_deriv=self.tan_angle_deriv,
            tan_angle_second_deriv=self.tan_angle_second_deriv,
            heading=heading.value,
            heading_deriv=heading.deriv,
            heading_second_deriv=heading.second_deriv,
        )


@dataclass(frozen=True)
class PathPoint(CurvePoint):
    """Curve point plus robot heading.

    Heading is independent of the tangent angle unless a tangent-following
    heading provider produced it.

    Args:
        position: Point position.
        position_deriv: Unit tangent.
        position_second_deriv: Curvature vector.
        tan_angle: Tangent angle [rad].
        tan_angle_deriv: Curvature [1/length].
        tan_angle_second_deriv: Derivative of curvature along arc length.
        heading: Robot heading [rad].
        heading_deriv: Heading derivative along arc length [rad/length].
        heading_second_deriv: Second heading derivative along arc length.
    """

    heading: float = 0.0
    heading_deriv: float = 0.0
    heading_second_deriv: float = 0.0

    @property
    def pose(self) -> Pose2d:
        """Position and heading.

        Returns:
            Pose at this point.
        """
        return Pose2d(self.position, self.heading)

    @property
    def pose_deriv(self) -> Pose2d:
        """Arc-length derivative of the pose.

        Returns:
            Tangent and heading rate.
        """
        return Pose2d(self.position_deriv, self.heading_deriv)

    @property
    def pose_second_deriv(self) -> Pose2d:
        """Second arc-length derivative of the pose.

        Returns:
            Curvature vector and heading second derivative.
        """
        return Pose2d(self.position_second_deriv, self.heading_second_deriv)
