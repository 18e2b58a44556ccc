"""Unit tests for closed intervals."""

from __future__ import annotations

import math
import unittest

from pathmotion.math import Interval


class IntervalTests(unittest.TestCase):
    """Interval construction and set operation checks."""

    def test_of_rejects_inverted_and_nan_bounds(self) -> None:
        """Map inverted or NaN endpoints to the empty interval."""
        self.assertEqual(Interval.of(-1.0, 2.0), Interval(-1.0, 2.0))
        self.assertTrue(Interval.of(2.0, -1.0).is_empty())
        self.assertTrue(Interval.of(math.nan, 1.0).is_empty())

    def test_symmetric_variants(self) -> None:
        """Build symmetric intervals from radius and center."""
        self.assertEqual(Interval.symmetric(2.0, 1.0), Interval(-1.0, 3.0))
        self.assertTrue(Interval.symmetric(-1.0).is_empty())
        self.assertTrue(Interval.symmetric(math.nan).is_empty())
        self.assertEqual(Interval.symmetric(math.inf), Interval.real())
        self.assertEqual(Interval.symmetric_regular(-2.0, 1.0), Interval(-1.0, 3.0))

    def test_membership(self) -> None:
        """Include both closed endpoints."""
        interval = Interval(-1.0, 1.0)
        self.assertIn(-1.0, interval)
        self.assertIn(1.0, interval)
        self.assertNotIn(1.5, interval)
        self.assertNotIn(0.0, Interval.empty())
        self.assertIn(1e300, Interval.real())

    def test_intersect(self) -> None:
        """Intersect overlapping, disjoint and unbounded intervals."""
        a = Interval(-2.0, 1.0)
        self.assertEqual(a.intersect(Interval(0.0, 3.0)), Interval(0.0, 1.0))
        self.assertTrue(a.intersect(Interval(2.0, 3.0)).is_empty())
        self.assertEqual(a.intersect(Interval.real()), a)
        self.assertTrue(a.intersect(Interval.empty()).is_empty())


if __name__ == "__main__":
    unittest.main()
