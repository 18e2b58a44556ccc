"""Unit tests for heading providers."""

from __future__ import annotations

import math
import unittest

from pathmotion.math import QuinticPolynomial, Vector2d
from pathmotion.path import (
    ConstantHeading,
    CurveHeadingPath,
    FunctionHeading,
    Line,
    LinearInterpolatedHeading,
    TangentHeading,
)
from tests.helpers import spline_curve


class HeadingProviderTests(unittest.TestCase):
    """Heading values and arc-length derivatives per provider."""

    def setUp(self) -> None:
        """Create a line of length 4 along the y-axis."""
        self.line = Line(Vector2d(0.0, 0.0), Vector2d(0.0, 4.0))

    def test_constant_heading(self) -> None:
        """Hold one heading with zero derivatives."""
        point = CurveHeadingPath(self.line, ConstantHeading(1.2)).point(3.0)
        self.assertEqual((point.heading, point.heading_deriv, point.heading_second_deriv), (1.2, 0.0, 0.0))

    def test_linear_interpolated_heading(self) -> None:
        """Interpolate in arc length without wrapping."""
        path = CurveHeadingPath(self.line, LinearInterpolatedHeading(0.0, 3 * math.pi))
        self.assertAlmostEqual(path.heading(0.0), 0.0)
        self.assertAlmostEqual(path.heading(2.0), 1.5 * math.pi)
        self.assertAlmostEqual(path.heading(4.0), 3 * math.pi)
        self.assertAlmostEqual(path.heading_deriv(1.0), 0.75 * math.pi)
        self.assertEqual(path.heading_second_deriv(1.0), 0.0)

    def test_tangent_heading_follows_curve(self) -> None:
        """Copy tangent angle and curvature terms, plus the offset."""
        curve = spline_curve()
        path = CurveHeadingPath(curve, TangentHeading(math.pi))
        curve_point = curve.point(1.3)
        point = path.point(1.3)
        self.assertAlmostEqual(point.heading, curve_point.tan_angle + math.pi)
        self.assertEqual(point.heading_deriv, curve_point.tan_angle_deriv)
        self.assertEqual(point.heading_second_deriv, curve_point.tan_angle_second_deriv)

    def test_function_heading_applies_chain_rule(self) -> None:
        """Scale progress derivatives by ``1 / length`` and ``1 / length^2``."""
        heading = QuinticPolynomial(0.0, 0.0, 0.0, 2.0, 1.0, 0.5)
        path = CurveHeadingPath(self.line, FunctionHeading(heading))
        point = path.point(2.0)
        self.assertAlmostEqual(point.heading, heading(0.5))
        self.assertAlmostEqual(point.heading_deriv, heading.deriv(0.5) / 4.0)
        self.assertAlmostEqual(point.heading_second_deriv, heading.second_deriv(0.5) / 16.0)

    def test_heading_uses_clamped_arc_length(self) -> None:
        """Evaluate heading at the path end for queries beyond it."""
        path = CurveHeadingPath(self.line, LinearInterpolatedHeading(0.0, 1.0))
        self.assertAlmostEqual(path.heading(10.0), 1.0)
        self.assertAlmostEqual(path.heading(-3.0), 0.0)


if __name__ == "__main__":
    unittest.main()
