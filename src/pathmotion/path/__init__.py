"""Arc-length parameterized curves and paths with heading."""

from pathmotion.path.curve import ArcLengthGeometry, Curve, Line, ReparamCurve
from pathmotion.path.heading import (
    ConstantHeading,
    FunctionHeading,
    HeadingProvider,
    LinearInterpolatedHeading,
    TangentHeading,
)
from pathmotion.path.path import CurveHeadingPath, MultiplePath, Path, PointTurn
from pathmotion.path.points import CurvePoint, PathPoint
from pathmotion.path.reparam import (
    ReparamMapping,
    reparameterize_by_arc_subdivisions,
    reparameterize_by_integration,
)

__all__ = [
    "ArcLengthGeometry",
    "ConstantHeading",
    "Curve",
    "CurveHeadingPath",
    "CurvePoint",
    "FunctionHeading",
    "HeadingProvider",
    "Line",
    "LinearInterpolatedHeading",
    "MultiplePath",
    "Path",
    "PathPoint",
    "PointTurn",
    "ReparamCurve",
    "ReparamMapping",
    "TangentHeading",
    "reparameterize_by_arc_subdivisions",
    "reparameterize_by_integration",
]
