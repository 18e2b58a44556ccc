"""Unit tests for piecewise constant-acceleration profiles."""

from __future__ import annotations

import math
import unittest

import numpy as np

from pathmotion.profile import LinearMotionState, SegmentsMotionProfile
from pathmotion.utils.exceptions import InfeasibleProfileError, PathDataError


def _trapezoid() -> SegmentsMotionProfile:
    """Accelerate to 2, cruise, and decelerate to rest over distance 4.

    Returns:
        Profile of duration 3.
    """
    return SegmentsMotionProfile.from_point_velocity_pairs([(0.0, 0.0), (1.0, 2.0), (3.0, 2.0), (4.0, 0.0)])


class LinearMotionStateTests(unittest.TestCase):
    """Constant-acceleration kinematics checks."""

    def test_after_time_and_at_distance(self) -> None:
        """Advance by time and by distance consistently."""
        state = LinearMotionState(1.0, 2.0, -1.0)
        later = state.after_time(1.0)
        self.assertEqual(later, LinearMotionState(2.5, 1.0, -1.0))
        self.assertAlmostEqual(state.at_distance(2.5).v, 1.0)

    def test_at_distance_clamps_velocity(self) -> None:
        """Return zero velocity past the stopping point."""
        self.assertEqual(LinearMotionState(0.0, 1.0, -1.0).at_distance(5.0).v, 0.0)


class SegmentsMotionProfileTests(unittest.TestCase):
    """Profile construction and query checks."""

    def test_from_pairs_builds_segments(self) -> None:
        """Derive accelerations and times from the velocity samples."""
        profile = _trapezoid()
        np.testing.assert_allclose(profile.times, [0.0, 1.0, 2.0, 3.0])
        np.testing.assert_allclose(profile.accels, [2.0, 0.0, -2.0, 0.0])
        self.assertEqual(profile.duration, 3.0)
        self.assertEqual(profile.distance, 4.0)
        self.assertEqual(profile.segment_count, 3)
        with self.assertRaises(ValueError):
            profile.velocities[0] = 1.0

    def test_time_queries(self) -> None:
        """Evaluate inside each segment."""
        profile = _trapezoid()
        expected = {
            0.5: (0.25, 1.0, 2.0),
            1.5: (2.0, 2.0, 0.0),
            2.5: (3.75, 1.0, -2.0),
        }
        for time, (s, v, a) in expected.items():
            state = profile.at_time(time)
            self.assertAlmostEqual(state.s, s)
            self.assertAlmostEqual(state.v, v)
            self.assertAlmostEqual(state.a, a)

    def test_distance_queries(self) -> None:
        """Evaluate velocity from distance inside each segment."""
        profile = _trapezoid()
        self.assertAlmostEqual(profile.at_distance(0.25).v, 1.0)
        self.assertAlmostEqual(profile.at_distance(2.0).v, 2.0)
        self.assertAlmostEqual(profile.at_distance(3.75).v, 1.0)

    def test_out_of_range_queries_clamp(self) -> None:
        """Return the first state before the start and rest after the end."""
        profile = _trapezoid()
        self.assertEqual(profile.at_time(-1.0), LinearMotionState(0.0, 0.0, 2.0))
        self.assertEqual(profile.at_time(10.0), LinearMotionState(4.0, 0.0, 0.0))
        self.assertEqual(profile.at_distance(5.0), LinearMotionState(4.0, 0.0, 0.0))

    def test_steppers_match_single_queries(self) -> None:
        """Agree exactly with binary-search queries in any order."""
        profile = _trapezoid()
        stepper = profile.stepper()
        self.assertEqual(stepper.index, -1)
        for time in [0.1, 0.9, 1.0, 2.2, 2.9, 0.4, -1.0, 1.7, 3.0, 2.0, 4.0]:
            self.assertEqual(stepper.step_to(time), profile.at_time(time))
        distance_stepper = profile.distance_stepper()
        for distance in [3.5, 0.5, 1.0, 2.5, 3.0, 0.0, 3.99]:
            self.assertEqual(distance_stepper.step_to(distance), profile.at_distance(distance))

    def test_bulk_queries_match_single_queries(self) -> None:
        """Return the same states as repeated single queries."""
        profile = _trapezoid()
        times = np.linspace(-0.5, 3.5, 41)
        self.assertEqual(profile.at_times(times), [profile.at_time(t) for t in times])
        distances = np.linspace(0.0, 4.0, 33)
        self.assertEqual(profile.at_distances(distances), [profile.at_distance(s) for s in distances])

    def test_invalid_samples_raise(self) -> None:
        """Reject malformed distances and infeasible velocities."""
        with self.assertRaises(PathDataError):
            SegmentsMotionProfile.from_point_velocity_pairs([(0.0, 1.0)])
        with self.assertRaises(PathDataError):
            SegmentsMotionProfile.from_point_velocity_pairs([(0.0, 1.0), (0.0, 1.0)])
        with self.assertRaises(PathDataError):
            SegmentsMotionProfile.from_point_velocity_pairs([(0.0, 1.0), (math.nan, 1.0)])
        with self.assertRaises(InfeasibleProfileError):
            SegmentsMotionProfile.from_point_velocity_pairs([(0.0, 1.0), (1.0, -1.0)])
        with self.assertRaises(InfeasibleProfileError):
            SegmentsMotionProfile.from_point_velocity_pairs([(0.0, 1.0), (1.0, math.inf)])
        with self.assertRaises(InfeasibleProfileError):
            SegmentsMotionProfile.from_point_velocity_pairs([(0.0, 1.0), (1.0, 0.0), (2.0, 0.0)])

    def test_direct_construction_validates(self) -> None:
        """Reject inconsistent arrays passed to the constructor."""
        with self.assertRaises(PathDataError):
            SegmentsMotionProfile([0.0, 0.0], [0.0, 1.0], [1.0, 1.0], [0.0, 0.0])
        with self.assertRaises(PathDataError):
            SegmentsMotionProfile([0.0, 1.0], [0.0, 1.0], [1.0], [0.0, 0.0])


if __name__ == "__main__":
    unittest.main()
