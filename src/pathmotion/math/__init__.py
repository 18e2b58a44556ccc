"""Planar vectors, intervals, searches, and parametric functions."""

from pathmotion.math.functions import (
    ComponentVectorFunction,
    MathFunction,
    QuinticPolynomial,
    QuinticSpline,
    VectorFunction,
)
from pathmotion.math.interval import Interval
from pathmotion.math.search import (
    double_binary_search,
    extending_double_search,
    extending_down_double_search,
)
from pathmotion.math.vector import (
    ZERO_VECTOR,
    Derivatives,
    Pose2d,
    Vector2d,
    VectorDerivatives,
    zcross,
)

__all__ = [
    "ComponentVectorFunction",
    "Derivatives",
    "Interval",
    "MathFunction",
    "Pose2d",
    "QuinticPolynomial",
    "QuinticSpline",
    "Vector2d",
    "VectorDerivatives",
    "VectorFunction",
    "ZERO_VECTOR",
    "double_binary_search",
    "extending_double_search",
    "extending_down_double_search",
    "zcross",
]
