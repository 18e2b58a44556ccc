"""Motion profiles, profile generation and trajectories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pathmotion.profile.config import ProfileGenerationConfig, build_profile_generation_config
from pathmotion.profile.segments import ProfileStepper, SegmentsMotionProfile
from pathmotion.profile.state import LinearMotionState

if TYPE_CHECKING:
    from pathmotion.profile.generator import PointConstraint, generate_profile
    from pathmotion.profile.trajectory import (
        Trajectory,
        TrajectoryState,
        TrajectoryStepper,
        generate_trajectory,
    )

__all__ = [
    "LinearMotionState",
    "PointConstraint",
    "ProfileGenerationConfig",
    "ProfileStepper",
    "SegmentsMotionProfile",
    "Trajectory",
    "TrajectoryState",
    "TrajectoryStepper",
    "build_profile_generation_config",
    "generate_profile",
    "generate_trajectory",
]


def __getattr__(name: str) -> Any:
    """Resolve generator and trajectory exports on first access.

    Args:
        name: Attribute name requested from the package namespace.

    Returns:
        Exported class or function matching ``name``.

    Raises:
        AttributeError: If ``name`` is not part of the public export surface.
    """
    if name == "PointConstraint":
        from pathmotion.profile.generator import PointConstraint

        return PointConstraint
    if name == "generate_profile":
        from pathmotion.profile.generator import generate_profile

        return generate_profile
    if name == "Trajectory":
        from pathmotion.profile.trajectory import Trajectory

        return Trajectory
    if name == "TrajectoryState":
        from pathmotion.profile.trajectory import TrajectoryState

        return TrajectoryState
    if name == "TrajectoryStepper":
        from pathmotion.profile.trajectory import TrajectoryStepper

        return TrajectoryStepper
    if name == "generate_trajectory":
        from pathmotion.profile.trajectory import generate_trajectory

        return generate_trajectory
    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
