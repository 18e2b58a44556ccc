"""Tests for package export resolution."""

from __future__ import annotations

import unittest

import pathmotion
import pathmotion.constraint as constraint_pkg
import pathmotion.path as path_pkg
import pathmotion.profile as profile_pkg


class PackageExportTests(unittest.TestCase):
    """Validate eager and lazy public exports."""

    def test_top_level_exports_resolve(self) -> None:
        """Expose the pipeline entry points at the package root."""
        for name in pathmotion.__all__:
            self.assertIsNotNone(getattr(pathmotion, name))

    def test_profile_lazy_exports_resolve(self) -> None:
        """Resolve generator and trajectory exports provided lazily."""
        self.assertIs(profile_pkg.generate_profile, pathmotion.generate_profile)
        self.assertIs(profile_pkg.Trajectory, pathmotion.Trajectory)
        self.assertIsNotNone(profile_pkg.PointConstraint)
        self.assertIsNotNone(profile_pkg.TrajectoryState)
        self.assertIsNotNone(profile_pkg.TrajectoryStepper)
        self.assertIsNotNone(profile_pkg.generate_trajectory)

    def test_subpackage_exports_resolve(self) -> None:
        """Resolve every name listed in subpackage ``__all__``."""
        for package in (constraint_pkg, path_pkg, profile_pkg):
            for name in package.__all__:
                with self.subTest(package=package.__name__, name=name):
                    self.assertIsNotNone(getattr(package, name))

    def test_lazy_export_raises_for_missing_symbol(self) -> None:
        """Raise ``AttributeError`` for unknown lazy export names."""
        with self.assertRaises(AttributeError):
            _ = profile_pkg.__getattr__("does_not_exist")


if __name__ == "__main__":
    unittest.main()
