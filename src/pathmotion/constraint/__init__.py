"""Motion constraints and constraint sets."""

from pathmotion.constraint.constraint_set import MotionConstraintSet
from pathmotion.constraint.motion_constraints import (
    AccelConstraint,
    MaxAngularAccelConstraint,
    MaxAngularVelocityConstraint,
    MaxCentripetalAccelConstraint,
    MaxPathAngularAccelConstraint,
    MaxPathAngularVelocityConstraint,
    MaxTangentAccelConstraint,
    MaxTotalAccelConstraint,
    MaxVelocityConstraint,
    MotionConstraint,
    MultipleConstraint,
    TotalTangentAccelConstraint,
    VelocityConstraint,
)

__all__ = [
    "AccelConstraint",
    "MaxAngularAccelConstraint",
    "MaxAngularVelocityConstraint",
    "MaxCentripetalAccelConstraint",
    "MaxPathAngularAccelConstraint",
    "MaxPathAngularVelocityConstraint",
    "MaxTangentAccelConstraint",
    "MaxTotalAccelConstraint",
    "MaxVelocityConstraint",
    "MotionConstraint",
    "MotionConstraintSet",
    "MultipleConstraint",
    "TotalTangentAccelConstraint",
    "VelocityConstraint",
]
