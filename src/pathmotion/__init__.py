"""Arc-length motion profiling along planar paths."""

from pathmotion.constraint.constraint_set import MotionConstraintSet
from pathmotion.profile.config import ProfileGenerationConfig
from pathmotion.profile.generator import generate_profile
from pathmotion.profile.segments import SegmentsMotionProfile
from pathmotion.profile.trajectory import Trajectory, generate_trajectory

__all__ = [
    "MotionConstraintSet",
    "ProfileGenerationConfig",
    "SegmentsMotionProfile",
    "Trajectory",
    "generate_profile",
    "generate_trajectory",
]
