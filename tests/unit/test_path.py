"""Unit tests for point turns and joined paths."""

from __future__ import annotations

import math
import unittest

import numpy as np

from pathmotion.math import Vector2d
from pathmotion.path import (
    ConstantHeading,
    CurveHeadingPath,
    Line,
    MultiplePath,
    PointTurn,
    TangentHeading,
)
from pathmotion.utils.exceptions import PathDataError
from tests.helpers import line_path, spline_path


def _turn_and_return() -> MultiplePath:
    """Build a line, a quarter turn in place, and a second line.

    Returns:
        Joined path of length ``2 + 1 + 3``.
    """
    first = line_path(2.0)
    turn = PointTurn(Vector2d(2.0, 0.0), 0.0, math.pi / 2)
    second = CurveHeadingPath(Line(Vector2d(2.0, 0.0), Vector2d(2.0, 3.0)), TangentHeading())
    return MultiplePath([first, turn, second])


class PointTurnTests(unittest.TestCase):
    """Rotation-in-place checks."""

    def test_point_turn_geometry(self) -> None:
        """Stay in place while the heading changes linearly."""
        turn = PointTurn(Vector2d(1.0, 2.0), 0.5, -1.0)
        self.assertTrue(turn.is_point_turn)
        self.assertEqual(turn.length, 1.0)
        self.assertEqual(turn.stop_points, frozenset({0.0, 1.0}))
        point = turn.point(0.25)
        self.assertEqual(point.position, Vector2d(1.0, 2.0))
        self.assertEqual(point.position_deriv, Vector2d(0.0, 0.0))
        self.assertAlmostEqual(point.heading, 0.25)
        self.assertEqual(point.heading_deriv, -1.0)
        self.assertEqual(point.tan_angle, 0.5)
        self.assertEqual(point.tan_angle_deriv, 0.0)
        self.assertAlmostEqual(turn.heading(5.0), -0.5)

    def test_regular_paths_have_no_stop_points(self) -> None:
        """Report no stop points on curve paths."""
        path = spline_path()
        self.assertFalse(path.is_point_turn)
        self.assertEqual(path.stop_points, frozenset())


class MultiplePathTests(unittest.TestCase):
    """Joined path lookup and joint validation checks."""

    def test_lengths_and_segment_index(self) -> None:
        """Sum lengths and pick the component by start length."""
        path = _turn_and_return()
        self.assertAlmostEqual(path.length, 6.0)
        np.testing.assert_allclose(path.start_lengths, [0.0, 2.0, 3.0])
        self.assertEqual(path.segment_index(-1.0), 0)
        self.assertEqual(path.segment_index(1.99), 0)
        self.assertEqual(path.segment_index(2.0), 1)
        self.assertEqual(path.segment_index(3.5), 2)
        self.assertEqual(path.segment_index(10.0), 2)
        with self.assertRaises(ValueError):
            path.start_lengths[0] = 1.0

    def test_points_delegate_to_components(self) -> None:
        """Evaluate each component at the local arc length."""
        path = _turn_and_return()
        self.assertTrue(path.position(1.0).eps_eq(Vector2d(1.0, 0.0)))
        self.assertAlmostEqual(path.heading(2.5), math.pi / 4)
        self.assertTrue(path.position(2.5).eps_eq(Vector2d(2.0, 0.0)))
        self.assertTrue(path.position(4.0).eps_eq(Vector2d(2.0, 1.0)))
        self.assertTrue(path.position(100.0).eps_eq(Vector2d(2.0, 3.0)))

    def test_stop_points_include_turns_and_corners(self) -> None:
        """Stop at both ends of a point turn."""
        path = _turn_and_return()
        self.assertEqual(path.stop_points, frozenset({2.0, 3.0}))

    def test_corner_without_turn_is_stop_point(self) -> None:
        """Stop where the tangent jumps but heading is continuous."""
        first = CurveHeadingPath(Line(Vector2d(0.0, 0.0), Vector2d(1.0, 0.0)), ConstantHeading(0.0))
        second = CurveHeadingPath(Line(Vector2d(1.0, 0.0), Vector2d(1.0, 1.0)), ConstantHeading(0.0))
        self.assertEqual(MultiplePath([first, second]).stop_points, frozenset({1.0}))

    def test_smooth_joint_is_not_stop_point(self) -> None:
        """Pass through joints with matching tangent and heading rate."""
        first = line_path(1.0)
        second = CurveHeadingPath(Line(Vector2d(1.0, 0.0), Vector2d(3.0, 0.0)), TangentHeading())
        self.assertEqual(MultiplePath([first, second]).stop_points, frozenset())

    def test_heading_compared_modulo_full_turn(self) -> None:
        """Accept headings that differ by a whole turn."""
        first = CurveHeadingPath(Line(Vector2d(0.0, 0.0), Vector2d(1.0, 0.0)), ConstantHeading(0.0))
        second = CurveHeadingPath(
            Line(Vector2d(1.0, 0.0), Vector2d(2.0, 0.0)), ConstantHeading(2 * math.pi)
        )
        self.assertEqual(MultiplePath([first, second]).length, 2.0)
        self.assertEqual(len(MultiplePath([first, second]).paths), 2)

    def test_discontinuities_raise(self) -> None:
        """Reject gaps in position and empty joins."""
        first = line_path(1.0)
        gap = CurveHeadingPath(Line(Vector2d(1.5, 0.0), Vector2d(2.0, 0.0)), TangentHeading())
        with self.assertRaises(PathDataError):
            MultiplePath([first, gap])
        with self.assertRaises(PathDataError):
            MultiplePath([])

    def test_heading_jump_inserts_point_turn(self) -> None:
        """Rotate in place where adjacent headings differ."""
        first = line_path(1.0)
        twisted = CurveHeadingPath(Line(Vector2d(1.0, 0.0), Vector2d(2.0, 0.0)), ConstantHeading(1.0))
        path = MultiplePath([first, twisted])
        self.assertEqual(len(path.paths), 3)
        turn = path.paths[1]
        self.assertIsInstance(turn, PointTurn)
        self.assertTrue(turn.location.eps_eq(Vector2d(1.0, 0.0)))
        self.assertAlmostEqual(turn.start_heading, 0.0)
        self.assertAlmostEqual(turn.turn_angle, 1.0)
        self.assertAlmostEqual(path.length, 3.0)
        np.testing.assert_allclose(path.start_lengths, [0.0, 1.0, 2.0])
        self.assertEqual(path.stop_points, frozenset({1.0, 2.0}))
        self.assertAlmostEqual(path.heading(1.5), 0.5)
        self.assertAlmostEqual(path.point(2.5).position.x, 1.5)

    def test_heading_jump_takes_shorter_rotation(self) -> None:
        """Rotate the short way round when inserting a turn."""
        first = line_path(1.0)
        back = CurveHeadingPath(Line(Vector2d(1.0, 0.0), Vector2d(2.0, 0.0)), ConstantHeading(1.5 * math.pi))
        turn = MultiplePath([first, back]).paths[1]
        self.assertAlmostEqual(turn.turn_angle, -0.5 * math.pi)

    def test_nested_paths_are_flattened(self) -> None:
        """Splice nested joined paths into one flat sequence."""
        inner = _turn_and_return()
        tail = CurveHeadingPath(Line(Vector2d(2.0, 3.0), Vector2d(2.0, 5.0)), TangentHeading())
        outer = MultiplePath([inner, tail])
        self.assertEqual(len(outer.paths), 4)
        self.assertAlmostEqual(outer.length, 8.0)
        self.assertEqual(outer.stop_points, inner.stop_points)

    def test_bulk_and_stepper_match_single_queries(self) -> None:
        """Return identical points from bulk, stepper and single queries."""
        path = _turn_and_return()
        forward = list(np.linspace(-0.5, 6.5, 57))
        self.assertEqual(path.points(forward), [path.point(s) for s in forward])
        stepper = path.stepper()
        for s in [5.0, 0.5, 2.0, 2.7, 3.0, 1.0, 6.0]:
            self.assertEqual(stepper.step_to(s), path.point(s))


if __name__ == "__main__":
    unittest.main()
