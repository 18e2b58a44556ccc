"""Profile generation configuration."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pathmotion.utils.exceptions import ConfigurationError

DEFAULT_TARGET_START_VELOCITY = 0.0
DEFAULT_TARGET_END_VELOCITY = 0.0
DEFAULT_MAX_SEGMENT_SIZE = 0.02
DEFAULT_MIN_SEGMENT_COUNT = 10
DEFAULT_MAX_VELOCITY_SEARCH_TOLERANCE = 0.02


@dataclass(frozen=True)
class ProfileGenerationConfig:
    """Sampling and boundary settings for profile generation.

    Args:
        target_start_velocity: Requested velocity at the start of the path.
            The generated velocity may be lower if constraints require it.
        target_end_velocity: Requested velocity at the end of the path.
        max_segment_size: Largest allowed distance between samples.
        min_segment_count: Smallest number of sample segments, applied to
            short paths.
        max_velocity_search_tolerance: Tolerance of the search that lowers a
            sample's velocity until an acceleration constraint is satisfiable.
    """

    target_start_velocity: float = DEFAULT_TARGET_START_VELOCITY
    target_end_velocity: float = DEFAULT_TARGET_END_VELOCITY
    max_segment_size: float = DEFAULT_MAX_SEGMENT_SIZE
    min_segment_count: int = DEFAULT_MIN_SEGMENT_COUNT
    max_velocity_search_tolerance: float = DEFAULT_MAX_VELOCITY_SEARCH_TOLERANCE

    def validate(self) -> None:
        """Validate generation settings.

        Raises:
            pathmotion.utils.exceptions.ConfigurationError: If a velocity is
                negative or non-finite, or a sampling setting is not positive.
        """
        if not (math.isfinite(self.target_start_velocity) and self.target_start_velocity >= 0.0):
            msg = "target_start_velocity must be finite and >= 0"
            raise ConfigurationError(msg)
        if not (math.isfinite(self.target_end_velocity) and self.target_end_velocity >= 0.0):
            msg = "target_end_velocity must be finite and >= 0"
            raise ConfigurationError(msg)
        if not self.max_segment_size > 0.0:
            msg = "max_segment_size must be positive"
            raise ConfigurationError(msg)
        if self.min_segment_count < 1:
            msg = "min_segment_count must be at least 1"
            raise ConfigurationError(msg)
        if not self.max_velocity_search_tolerance > 0.0:
            msg = "max_velocity_search_tolerance must be positive"
            raise ConfigurationError(msg)


def build_profile_generation_config(
    target_start_velocity: float = DEFAULT_TARGET_START_VELOCITY,
    target_end_velocity: float = DEFAULT_TARGET_END_VELOCITY,
    max_segment_size: float = DEFAULT_MAX_SEGMENT_SIZE,
    min_segment_count: int = DEFAULT_MIN_SEGMENT_COUNT,
    max_velocity_search_tolerance: float = DEFAULT_MAX_VELOCITY_SEARCH_TOLERANCE,
) -> ProfileGenerationConfig:
    """Build a validated profile generation config.

    Args:
        target_start_velocity: Requested velocity at the start of the path.
        target_end_velocity: Requested velocity at the end of the path.
        max_segment_size: Largest allowed distance between samples.
        min_segment_count: Smallest number of sample segments.
        max_velocity_search_tolerance: Tolerance of the velocity-lowering search.

    Returns:
        Validated configuration.

    Raises:
        pathmotion.utils.exceptions.ConfigurationError: If any value violates
            its bound.
    """
    config = ProfileGenerationConfig(
        target_start_velocity=target_start_velocity,
        target_end_velocity=target_end_velocity,
        max_segment_size=max_segment_size,
        min_segment_count=min_segment_count,
        max_velocity_search_tolerance=max_velocity_search_tolerance,
    )
    config.validate()
    return config
