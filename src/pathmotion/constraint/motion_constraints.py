"""Velocity and acceleration constraints evaluated at path points.

Every constraint is one of three kinds: a :class:`VelocityConstraint` caps the
speed at a point, an :class:`AccelConstraint` bounds the tangential
acceleration at a point given the current speed, and a
:class:`MultipleConstraint` bundles constraints of the other kinds.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from pathmotion.math.interval import Interval
from pathmotion.path.points import PathPoint
from pathmotion.utils.constants import EPSILON
from pathmotion.utils.exceptions import ConfigurationError


class MotionConstraint(ABC):
    """Base class of all motion constraints."""


class VelocityConstraint(MotionConstraint):
    """Constraint expressed as a maximum speed along the path."""

    @abstractmethod
    def max_velocity(self, point: PathPoint) -> float:
        """Maximum allowed speed at a point.

        Args:
            point: Path point.

        Returns:
            Non-negative speed cap; ``math.inf`` when not binding.
        """


class AccelConstraint(MotionConstraint):
    """Constraint expressed as an allowed tangential acceleration interval."""

    @abstractmethod
    def accel_range(self, point: PathPoint, velocity: float) -> Interval:
        """Allowed tangential acceleration at a point and speed.

        Args:
            point: Path point.
            velocity: Current speed along the path.

        Returns:
            Allowed acceleration interval; empty if no acceleration is allowed,
            :meth:`Interval.real` when not binding.
        """


class MultipleConstraint(MotionConstraint):
    """Constraint composed of several other constraints."""

    @property
    @abstractmethod
    def components(self) -> tuple[MotionConstraint, ...]:
        """Constraints bundled by this one.

        Returns:
            Component constraints, possibly themselves multiple.
        """


@dataclass(frozen=True)
class MaxBasedConstraint:
    """Mixin holding a single validated maximum.

    Args:
        max: Limit value; must be finite and at least ``EPSILON``.

    Raises:
        pathmotion.utils.exceptions.ConfigurationError: If ``max`` is not
            finite or is smaller than ``EPSILON``.
    """

    max: float

    def __post_init__(self) -> None:
        """Validate the maximum.

        Raises:
            pathmotion.utils.exceptions.ConfigurationError: If ``max`` is out
                of range.
        """
        if not (math.isfinite(self.max) and self.max >= EPSILON):
            msg = f"{type(self).__name__} max must be finite and >= {EPSILON}, got {self.max}"
            raise ConfigurationError(msg)


@dataclass(frozen=True)
class MaxVelocityConstraint(MaxBasedConstraint, VelocityConstraint):
    """Flat cap on speed along the path."""

    def max_velocity(self, point: PathPoint) -> float:
        """Maximum allowed speed at a point.

        Args:
            point: Path point.

        Returns:
            ``max``.
        """
        return self.max


@dataclass(frozen=True)
class MaxTangentAccelConstraint(MaxBasedConstraint, AccelConstraint):
    """Symmetric cap on acceleration tangent to the path."""

    def accel_range(self, point: PathPoint, velocity: float) -> Interval:
        """Allowed tangential acceleration at a point and speed.

        Args:
            point: Path point.
            velocity: Current speed along the path.

        Returns:
            ``[-max, max]``.
        """
        return Interval.symmetric(self.max)


@dataclass(frozen=True)
class MaxCentripetalAccelConstraint(MaxBasedConstraint, VelocityConstraint):
    """Cap on centripetal acceleration ``k v^2``, expressed as a speed cap."""

    def max_velocity(self, point: PathPoint) -> float:
        """Maximum allowed speed at a point.

        Args:
            point: Path point.

        Returns:
            ``sqrt(max / |k|)``, or ``math.inf`` on straight sections.
        """
        curvature = point.tan_angle_deriv
        if curvature == 0.0:
            return math.inf
        return math.sqrt(abs(self.max / curvature))


@dataclass(frozen=True)
class TotalTangentAccelConstraint(MaxBasedConstraint, AccelConstraint):
    """Tangential share of a total acceleration budget.

    The centripetal part ``k v^2`` is perpendicular to the tangential part,
    leaving ``sqrt(max^2 - (k v^2)^2)`` for the tangent, or zero when the
    centripetal part alone exceeds the budget.
    """

    def accel_range(self, point: PathPoint, velocity: float) -> Interval:
        """Allowed tangential acceleration at a point and speed.

        Args:
            point: Path point.
            velocity: Current speed along the path.

        Returns:
            Symmetric interval of the remaining acceleration budget.
        """
        centripetal = point.tan_angle_deriv * velocity * velocity
        radicand = self.max * self.max - centripetal * centripetal
        return Interval.symmetric(math.sqrt(max(radicand, 0.0)))


@dataclass(frozen=True)
class MaxTotalAccelConstraint(MaxBasedConstraint, MultipleConstraint):
    """Cap on the magnitude of the total (centripetal plus tangential) acceleration."""

    @property
    def components(self) -> tuple[MotionConstraint, ...]:
        """Constraints bundled by this one.

        Returns:
            Centripetal speed cap and the remaining tangential budget.
        """
        return (MaxCentripetalAccelConstraint(self.max), TotalTangentAccelConstraint(self.max))


def _rate_velocity_cap(max_rate: float, rate_per_length: float) -> float:
    """Speed cap from a limit on ``rate_per_length * v``.

    Args:
        max_rate: Limit on the time rate.
        rate_per_length: Derivative of the limited quantity along arc length.

    Returns:
        ``|max_rate / rate_per_length|``, or ``math.inf`` when it is zero.
    """
    if rate_per_length == 0.0:
        return math.inf
    return abs(max_rate / rate_per_length)


def _rate_accel_range(
    max_accel: float, rate_per_length: float, rate_second_deriv: float, velocity: float
) -> Interval:
    """Acceleration interval from a limit on an angular acceleration.

    With ``alpha = theta'' v^2 + theta' a`` and ``|alpha| <= max_accel``, the
    tangential acceleration ``a`` lies in an interval of radius
    ``max_accel / |theta'|`` around ``-theta'' v^2 / theta'``.

    Args:
        max_accel: Limit on the angular acceleration.
        rate_per_length: ``theta'``, angle derivative along arc length.
        rate_second_deriv: ``theta''``, second angle derivative.
        velocity: Current speed along the path.

    Returns:
        Allowed tangential acceleration, or :meth:`Interval.real` when
        ``theta'`` is zero.
    """
    if rate_per_length == 0.0:
        return Interval.real()
    return Interval.symmetric_regular(
        max_accel / rate_per_length,
        -rate_second_deriv * velocity * velocity / rate_per_length,
    )


@dataclass(frozen=True)
class MaxPathAngularVelocityConstraint(MaxBasedConstraint, VelocityConstraint):
    """Cap on the angular velocity of the path tangent."""

    def max_velocity(self, point: PathPoint) -> float:
        """Maximum allowed speed at a point.

        Args:
            point: Path point.

        Returns:
            ``|max / k|``, or ``math.inf`` on straight sections.
        """
        return _rate_velocity_cap(self.max, point.tan_angle_deriv)


@dataclass(frozen=True)
class MaxPathAngularAccelConstraint(MaxBasedConstraint, AccelConstraint):
    """Cap on the angular acceleration of the path tangent."""

    def accel_range(self, point: PathPoint, velocity: float) -> Interval:
        """Allowed tangential acceleration at a point and speed.

        Args:
            point: Path point.
            velocity: Current speed along the path.

        Returns:
            Interval keeping the tangent angular acceleration within ``max``.
        """
        return _rate_accel_range(self.max, point.tan_angle_deriv, point.tan_angle_second_deriv, velocity)


@dataclass(frozen=True)
class MaxAngularVelocityConstraint(MaxBasedConstraint, VelocityConstraint):
    """Cap on the angular velocity of the robot heading."""

    def max_velocity(self, point: PathPoint) -> float:
        """Maximum allowed speed at a point.

        Args:
            point: Path point.

        Returns:
            ``|max / heading_deriv|``, or ``math.inf`` at constant heading.
        """
        return _rate_velocity_cap(self.max, point.heading_deriv)


@dataclass(frozen=True)
class MaxAngularAccelConstraint(MaxBasedConstraint, AccelConstraint):
    """Cap on the angular acceleration of the robot heading."""

    def accel_range(self, point: PathPoint, velocity: float) -> Interval:
        """Allowed tangential acceleration at a point and speed.

        Args:
            point: Path point.
            velocity: Current speed along the path.

        Returns:
            Interval keeping the heading angular acceleration within ``max``.
        """
        return _rate_accel_range(self.max, point.heading_deriv, point.heading_second_deriv, velocity)
