"""Numerical constants used across the library."""

EPSILON: float = 1e-6
FALLBACK_MAX_VELOCITY: float = 10_000.0
FALLBACK_MAX_ACCEL: float = 10_000.0
MAX_PROFILE_VELOCITY: float = 10_000.0
