"""Planar vector, pose, and derivative value types."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pathmotion.utils.constants import EPSILON


@dataclass(frozen=True)
class Vector2d:
    """Immutable planar vector.

    Args:
        x: x-component.
        y: y-component.
    """

    x: float
    y: float

    def __add__(self, other: Vector2d) -> Vector2d:
        """Add two vectors.

        Args:
            other: Vector to add.

        Returns:
            Component-wise sum.
        """
        return Vector2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2d) -> Vector2d:
        """Subtract two vectors.

        Args:
            other: Vector to subtract.

        Returns:
            Component-wise difference.
        """
        return Vector2d(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Vector2d:
        """Scale this vector.

        Args:
            scale: Scalar factor.

        Returns:
            Scaled vector.
        """
        return Vector2d(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> Vector2d:
        """Divide this vector by a scalar.

        Args:
            scale: Scalar divisor.

        Returns:
            Scaled vector.
        """
        return Vector2d(self.x / scale, self.y / scale)

    def __neg__(self) -> Vector2d:
        """Negate this vector.

        Returns:
            Vector pointing the opposite way.
        """
        return Vector2d(-self.x, -self.y)

    @property
    def length_squared(self) -> float:
        """Squared Euclidean norm.

        Returns:
            ``x^2 + y^2``.
        """
        return self.x * self.x + self.y * self.y

    @property
    def length(self) -> float:
        """Euclidean norm.

        Returns:
            Vector length.
        """
        return math.hypot(self.x, self.y)

    @property
    def angle(self) -> float:
        """Polar angle of this vector.

        Returns:
            Angle from the x-axis in ``[-pi, pi]`` [rad].
        """
        return math.atan2(self.y, self.x)

    def dot(self, other: Vector2d) -> float:
        """Dot product.

        Args:
            other: Second operand.

        Returns:
            Scalar dot product.
        """
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2d) -> float:
        """Scalar (z-component) cross product.

        Args:
            other: Second operand.

        Returns:
            ``x * other.y - y * other.x``.
        """
        return self.x * other.y - self.y * other.x

    def normalized(self) -> Vector2d:
        """Unit vector in the same direction.

        The zero vector has no direction; its normalized form has NaN components.

        Returns:
            Vector of length 1, or NaN components for the zero vector.
        """
        length = self.length
        if length == 0.0:
            return Vector2d(math.nan, math.nan)
        return Vector2d(self.x / length, self.y / length)

    def dist_to(self, other: Vector2d) -> float:
        """Distance between two points.

        Args:
            other: Other point.

        Returns:
            Euclidean distance.
        """
        return math.hypot(self.x - other.x, self.y - other.y)

    def eps_eq(self, other: Vector2d, tolerance: float = EPSILON) -> bool:
        """Compare two vectors component-wise within a tolerance.

        Args:
            other: Vector to compare against.
            tolerance: Absolute tolerance per component.

        Returns:
            ``True`` when both components agree within ``tolerance``.
        """
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance

    @staticmethod
    def polar(radius: float, angle: float) -> Vector2d:
        """Create a vector from polar coordinates.

        Args:
            radius: Vector length.
            angle: Polar angle [rad].

        Returns:
            Cartesian vector.
        """
        return Vector2d(radius * math.cos(angle), radius * math.sin(angle))


ZERO_VECTOR = Vector2d(0.0, 0.0)


def zcross(scale: float, vector: Vector2d) -> Vector2d:
    """Cross a z-axis vector of magnitude ``scale`` with a planar vector.

    Equivalent to rotating ``vector`` 90 degrees counterclockwise and scaling by
    ``scale``.

    Args:
        scale: Magnitude of the z-axis vector.
        vector: Planar vector.

    Returns:
        ``(-scale * vector.y, scale * vector.x)``.
    """
    return Vector2d(-scale * vector.y, scale * vector.x)


@dataclass(frozen=True)
class Pose2d:
    """Planar pose (or pose derivative): position plus heading.

    Args:
        vec: Position component.
        heading: Heading component [rad].
    """

    vec: Vector2d
    heading: float

    def __add__(self, other: Pose2d) -> Pose2d:
        """Add two poses component-wise.

        Args:
            other: Pose to add.

        Returns:
            Component-wise sum.
        """
        return Pose2d(self.vec + other.vec, self.heading + other.heading)

    def __mul__(self, scale: float) -> Pose2d:
        """Scale both components.

        Args:
            scale: Scalar factor.

        Returns:
            Scaled pose.
        """
        return Pose2d(self.vec * scale, self.heading * scale)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Derivatives:
    """A scalar value together with its first and second derivatives.

    Args:
        value: Function value.
        deriv: First derivative.
        second_deriv: Second derivative.
    """

    value: float
    deriv: float = 0.0
    second_deriv: float = 0.0


@dataclass(frozen=True)
class VectorDerivatives:
    """A vector value together with its first and second derivatives.

    Args:
        value: Vector value.
        deriv: First derivative.
        second_deriv: Second derivative.
    """

    value: Vector2d
    deriv: Vector2d = ZERO_VECTOR
    second_deriv: Vector2d = ZERO_VECTOR

    @property
    def x(self) -> Derivatives:
        """Derivatives of the x-component.

        Returns:
            Scalar derivatives of ``x``.
        """
        return Derivatives(self.value.x, self.deriv.x, self.second_deriv.x)

    @property
    def y(self) -> Derivatives:
        """Derivatives of the y-component.

        Returns:
            Scalar derivatives of ``y``.
        """
        return Derivatives(self.value.y, self.deriv.y, self.second_deriv.y)
