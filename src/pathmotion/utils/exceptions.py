"""Custom exceptions for path motion profiling."""


class PathMotionError(Exception):
    """Base exception for path and profile errors."""


class ConfigurationError(PathMotionError):
    """Raised when constraint, reparameterizer, or generator settings are invalid."""


class PathDataError(PathMotionError):
    """Raised when path, reparameterization, or profile sample data is malformed."""


class InfeasibleProfileError(PathMotionError):
    """Raised when no motion profile can satisfy the given constraints."""
