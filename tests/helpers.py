"""Shared test helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pathmotion.math.functions import QuinticSpline, VectorFunction
from pathmotion.math.vector import Vector2d, VectorDerivatives
from pathmotion.path import (
    CurveHeadingPath,
    HeadingProvider,
    Line,
    ReparamCurve,
    TangentHeading,
    reparameterize_by_integration,
)


@dataclass(frozen=True)
class ArcFunction(VectorFunction):
    """Circular arc ``r(t) = R (cos(sweep t), sin(sweep t))`` for ``t in [0, 1]``.

    Args:
        radius: Arc radius.
        sweep: Swept angle [rad]; negative sweeps turn clockwise.
    """

    radius: float
    sweep: float

    def value(self, t: float) -> Vector2d:
        """Evaluate ``r(t)``.

        Args:
            t: Free parameter.

        Returns:
            Position.
        """
        return Vector2d.polar(self.radius, self.sweep * t)

    def deriv(self, t: float) -> Vector2d:
        """Evaluate ``r'(t)``.

        Args:
            t: Free parameter.

        Returns:
            First derivative.
        """
        return Vector2d.polar(self.radius * self.sweep, self.sweep * t + math.pi / 2)

    def second_deriv(self, t: float) -> Vector2d:
        """Evaluate ``r''(t)``.

        Args:
            t: Free parameter.

        Returns:
            Second derivative.
        """
        return Vector2d.polar(self.radius * self.sweep**2, self.sweep * t + math.pi)

    def third_deriv(self, t: float) -> Vector2d:
        """Evaluate ``r'''(t)``.

        Args:
            t: Free parameter.

        Returns:
            Third derivative.
        """
        return Vector2d.polar(self.radius * self.sweep**3, self.sweep * t + 3 * math.pi / 2)


def sample_spline() -> QuinticSpline:
    """Create an S-shaped quintic spline with non-trivial curvature.

    Returns:
        Spline from the origin to ``(3, 1)``.
    """
    return QuinticSpline.from_derivatives(
        VectorDerivatives(Vector2d(0.0, 0.0), Vector2d(3.0, 0.0), Vector2d(0.0, 2.0)),
        VectorDerivatives(Vector2d(3.0, 1.0), Vector2d(2.0, 1.0), Vector2d(-1.0, 0.0)),
    )


def spline_curve() -> ReparamCurve:
    """Create an arc-length curve over :func:`sample_spline`.

    Returns:
        Reparameterized spline curve.
    """
    spline = sample_spline()
    return ReparamCurve(spline, reparameterize_by_integration(spline))


def spline_path(heading: HeadingProvider | None = None) -> CurveHeadingPath:
    """Create a path over :func:`spline_curve`.

    Args:
        heading: Heading provider, tangent heading by default.

    Returns:
        Spline path.
    """
    return CurveHeadingPath(spline_curve(), heading or TangentHeading())


def arc_path(radius: float = 1.0, sweep: float = math.pi) -> CurveHeadingPath:
    """Create a circular arc path with tangent heading.

    Args:
        radius: Arc radius.
        sweep: Swept angle [rad].

    Returns:
        Arc path.
    """
    arc = ArcFunction(radius, sweep)
    return CurveHeadingPath(ReparamCurve(arc, reparameterize_by_integration(arc)), TangentHeading())


def line_path(length: float = 2.0) -> CurveHeadingPath:
    """Create a straight path along the x-axis.

    Args:
        length: Path length.

    Returns:
        Line path with tangent heading.
    """
    return CurveHeadingPath(Line(Vector2d(0.0, 0.0), Vector2d(length, 0.0)), TangentHeading())
