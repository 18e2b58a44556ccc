"""Heading providers that attach robot heading to curve points."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from pathmotion.math.functions import MathFunction
from pathmotion.math.vector import Derivatives
from pathmotion.path.curve import Curve
from pathmotion.path.points import CurvePoint


class HeadingProvider(ABC):
    """Strategy returning heading and its arc-length derivatives along a curve."""

    @abstractmethod
    def heading(self, curve: Curve, point: CurvePoint, s: float) -> Derivatives:
        """Compute heading at one curve point.

        Args:
            curve: Curve the heading is attached to.
            point: Curve point at ``s``.
            s: Arc length.

        Returns:
            Heading [rad] with first and second derivatives along arc length.
        """


@dataclass(frozen=True)
class ConstantHeading(HeadingProvider):
    """Fixed heading over the whole curve.

    Args:
        angle: Heading [rad].
    """

    angle: float

    def heading(self, curve: Curve, point: CurvePoint, s: float) -> Derivatives:
        """Compute heading at one curve point.

        Args:
            curve: Curve the heading is attached to.
            point: Curve point at ``s``.
            s: Arc length.

        Returns:
            Constant heading with zero derivatives.
        """
        return Derivatives(self.angle)


@dataclass(frozen=True)
class LinearInterpolatedHeading(HeadingProvider):
    """Heading interpolated linearly in arc length between two angles.

    No angle wrapping is applied; ``to_angle - from_angle`` is the total turn.

    Args:
        from_angle: Heading at the start [rad].
        to_angle: Heading at the end [rad].
    """

    from_angle: float
    to_angle: float

    def heading(self, curve: Curve, point: CurvePoint, s: float) -> Derivatives:
        """Compute heading at one curve point.

        Args:
            curve: Curve the heading is attached to.
            point: Curve point at ``s``.
            s: Arc length.

        Returns:
            Interpolated heading with constant rate.
        """
        diff = self.to_angle - self.from_angle
        length = curve.length
        return Derivatives(self.from_angle + diff * (s / length), diff / length)


@dataclass(frozen=True)
class TangentHeading(HeadingProvider):
    """Heading that follows the curve tangent, plus a constant offset.

    Args:
        offset: Angle added to the tangent angle [rad].
    """

    offset: float = 0.0

    def heading(self, curve: Curve, point: CurvePoint, s: float) -> Derivatives:
        """Compute heading at one curve point.

        Args:
            curve: Curve the heading is attached to.
            point: Curve point at ``s``.
            s: Arc length.

        Returns:
            Tangent angle plus offset, with the tangent angle derivatives.
        """
        return Derivatives(
            point.tan_angle + self.offset,
            point.tan_angle_deriv,
            point.tan_angle_second_deriv,
        )


@dataclass(frozen=True)
class FunctionHeading(HeadingProvider):
    """Heading given as a function of normalized progress ``s / length``.

    Args:
        function: Heading as a function of progress in ``[0, 1]``.
    """

    function: MathFunction

    def heading(self, curve: Curve, point: CurvePoint, s: float) -> Derivatives:
        """Compute heading at one curve point.

        Args:
            curve: Curve the heading is attached to.
            point: Curve point at ``s``.
            s: Arc length.

        Returns:
            Function value with derivatives converted to arc length.
        """
        length = curve.length
        progress = s / length
        return Derivatives(
            self.function(progress),
            self.function.deriv(progress) / length,
            self.function.second_deriv(progress) / (length * length),
        )
