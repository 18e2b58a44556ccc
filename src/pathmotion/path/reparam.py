"""Arc-length reparameterization of parametric functions."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from pathmotion.math.functions import VectorFunction
from pathmotion.math.vector import Vector2d
from pathmotion.utils.constants import EPSILON
from pathmotion.utils.exceptions import ConfigurationError, PathDataError
from pathmotion.utils.stepper import step_to_all

LOGGER = logging.getLogger(__name__)

DEFAULT_NUM_SAMPLES = 250
DEFAULT_STEPS_PER_SAMPLE = 4
DEFAULT_MAX_DELTA_K = 0.5
DEFAULT_MAX_SEGMENT_LENGTH = 0.05
DEFAULT_CURVATURE_TOLERANCE = 0.2
MAX_SUBDIVISION_DEPTH = 32
MIN_SAMPLE_COUNT = 2


@dataclass(frozen=True)
class ReparamMapping:
    """Sample table mapping arc length ``s`` to a function parameter ``t``.

    Both arrays are copied and made read-only on construction.

    Args:
        s_samples: Strictly increasing arc-length samples starting at ``0``.
        t_samples: Strictly increasing parameter samples from ``0`` to ``1``.

    Raises:
        pathmotion.utils.exceptions.PathDataError: If the samples violate
            the endpoint, length, or monotonicity requirements.
    """

    s_samples: np.ndarray
    t_samples: np.ndarray

    def __post_init__(self) -> None:
        """Freeze sample arrays and validate them."""
        for name in ("s_samples", "t_samples"):
            values = np.array(getattr(self, name), dtype=float)
            values.setflags(write=False)
            object.__setattr__(self, name, values)
        self.validate()

    def validate(self) -> None:
        """Validate the sample table.

        Raises:
            pathmotion.utils.exceptions.PathDataError: If the arrays are not
                one-dimensional, differ in length, have fewer than two samples,
                have wrong endpoints, or are not strictly increasing.
        """
        s, t = self.s_samples, self.t_samples
        if s.ndim != 1 or t.ndim != 1:
            msg = "s_samples and t_samples must be one-dimensional"
            raise PathDataError(msg)
        if s.size != t.size:
            msg = f"s_samples ({s.size}) and t_samples ({t.size}) must have equal length"
            raise PathDataError(msg)
        if s.size < MIN_SAMPLE_COUNT:
            msg = f"at least {MIN_SAMPLE_COUNT} samples are required, got {s.size}"
            raise PathDataError(msg)
        if not (np.all(np.isfinite(s)) and np.all(np.isfinite(t))):
            msg = "samples must be finite"
            raise PathDataError(msg)
        if s[0] != 0.0 or t[0] != 0.0:
            msg = f"first samples must be (0, 0), got ({s[0]}, {t[0]})"
            raise PathDataError(msg)
        if abs(t[-1] - 1.0) > EPSILON:
            msg = f"last t sample must be 1, got {t[-1]}"
            raise PathDataError(msg)
        if not (np.all(np.diff(s) > 0.0) and np.all(np.diff(t) > 0.0)):
            msg = "s_samples and t_samples must be strictly increasing"
            raise PathDataError(msg)

    @classmethod
    def from_samples(cls, s_samples: Iterable[float], t_samples: Iterable[float]) -> ReparamMapping:
        """Build a mapping from arbitrary sample sequences.

        Args:
            s_samples: Arc-length samples.
            t_samples: Parameter samples.

        Returns:
            Validated mapping.
        """
        return cls(np.fromiter(s_samples, dtype=float), np.fromiter(t_samples, dtype=float))

    @property
    def length(self) -> float:
        """Total arc length.

        Returns:
            Last arc-length sample.
        """
        return float(self.s_samples[-1])

    def _interpolate(self, index: int, s: float) -> float:
        """Linearly interpolate ``t`` inside sample bracket ``index``.

        Args:
            index: Bracket index with ``s_samples[index] <= s < s_samples[index + 1]``.
            s: Arc length inside the bracket.

        Returns:
            Interpolated parameter.
        """
        s0 = self.s_samples[index]
        t0 = self.t_samples[index]
        progress = (s - s0) / (self.s_samples[index + 1] - s0)
        return float(t0 + progress * (self.t_samples[index + 1] - t0))

    def t_of_s(self, s: float) -> float:
        """Map an arc length to the function parameter.

        Args:
            s: Arc length; values outside ``[0, length]`` are clamped.

        Returns:
            Parameter ``t`` in ``[0, 1]``, or NaN for a NaN arc length.
        """
        if math.isnan(s):
            return math.nan
        if s <= 0.0:
            return 0.0
        if s >= self.length:
            return 1.0
        index = int(np.searchsorted(self.s_samples, s, side="right")) - 1
        return self._interpolate(index, s)

    def all_t_of_s(self, all_s: Iterable[float]) -> list[float]:
        """Map many sorted arc lengths to parameters with one cursor.

        Args:
            all_s: Non-decreasing arc lengths.

        Returns:
            Parameters equal to :meth:`t_of_s` of each element.
        """
        return step_to_all(self, all_s)

    def stepper(self) -> ReparamStepper:
        """Create a cursor for sequential ``s -> t`` queries.

        Returns:
            New stepper positioned at the first bracket.
        """
        return ReparamStepper(self)


class ReparamStepper:
    """Cursor over a :class:`ReparamMapping` for roughly monotone queries."""

    def __init__(self, mapping: ReparamMapping) -> None:
        """Start a cursor at the first sample bracket.

        Args:
            mapping: Mapping to step through.
        """
        self._mapping = mapping
        self._index = 0

    def step_to(self, step: float) -> float:
        """Return ``t`` at arc length ``step``, moving the cursor as needed.

        Args:
            step: Arc length.

        Returns:
            Same value as :meth:`ReparamMapping.t_of_s`.
        """
        mapping = self._mapping
        if math.isnan(step):
            return math.nan
        if step <= 0.0:
            return 0.0
        if step >= mapping.length:
            return 1.0
        s_samples = mapping.s_samples
        index = self._index
        while s_samples[index + 1] <= step:
            index += 1
        while s_samples[index] > step:
            index -= 1
        self._index = index
        return mapping._interpolate(index, step)


def reparameterize_by_integration(
    func: VectorFunction,
    num_samples: int = DEFAULT_NUM_SAMPLES,
    steps_per_sample: int = DEFAULT_STEPS_PER_SAMPLE,
) -> ReparamMapping:
    """Tabulate arc length by midpoint-rule integration of ``|r'(t)|``.

    Args:
        func: Function to reparameterize.
        num_samples: Number of evenly spaced ``t`` intervals in the table.
        steps_per_sample: Midpoint-rule steps inside each interval.

    Returns:
        Mapping with ``num_samples + 1`` samples.

    Raises:
        pathmotion.utils.exceptions.ConfigurationError: If either count is
            less than one.
    """
    if num_samples < 1:
        msg = f"num_samples must be >= 1, got {num_samples}"
        raise ConfigurationError(msg)
    if steps_per_sample < 1:
        msg = f"steps_per_sample must be >= 1, got {steps_per_sample}"
        raise ConfigurationError(msg)

    total_steps = num_samples * steps_per_sample
    dt = 1.0 / total_steps
    midpoints = (np.arange(total_steps) + 0.5) * dt
    speeds = np.fromiter((func.deriv(t).length for t in midpoints), dtype=float, count=total_steps)
    segment_lengths = speeds.reshape(num_samples, steps_per_sample).sum(axis=1) * dt

    s_samples = np.concatenate(([0.0], np.cumsum(segment_lengths)))
    t_samples = np.linspace(0.0, 1.0, num_samples + 1)
    LOGGER.debug("Integrated arc length %.6f over %d samples", s_samples[-1], num_samples)
    return ReparamMapping(s_samples, t_samples)


def _arc_length_estimate(
    start: Vector2d,
    middle: Vector2d,
    end: Vector2d,
    expected_curvature: float,
    curvature_tolerance: float,
) -> float:
    """Estimate arc length through three points with a circle fit.

    Args:
        start: First point.
        middle: Point at the parameter midpoint.
        end: Last point.
        expected_curvature: Average curvature reported by the function.
        curvature_tolerance: Allowed mismatch between ``expected_curvature``
            and the fitted circle's curvature.

    Returns:
        Arc length estimate, the chord for nearly collinear points, or NaN
        when the fitted curvature disagrees with ``expected_curvature``.
    """
    v1 = start - end
    v2 = middle - end
    det = v1.cross(v2)
    chord = v1.length
    if abs(det) <= EPSILON:
        return chord
    e1 = v1.length_squared
    e2 = v2.length_squared
    diameter = Vector2d(e1 * v2.y - e2 * v1.y, e2 * v1.x - e1 * v2.x).length / abs(det)
    if abs(abs(expected_curvature) - 2.0 / diameter) >= curvature_tolerance:
        return math.nan
    return diameter * math.asin(min(chord / diameter, 1.0))


def reparameterize_by_arc_subdivisions(
    func: VectorFunction,
    max_delta_k: float = DEFAULT_MAX_DELTA_K,
    max_segment_length: float = DEFAULT_MAX_SEGMENT_LENGTH,
    curvature_tolerance: float = DEFAULT_CURVATURE_TOLERANCE,
) -> ReparamMapping:
    """Tabulate arc length by recursively splitting the function into arcs.

    A parameter interval is accepted once the curvature spread across its
    endpoints and midpoint is at most ``max_delta_k``, its estimated length is
    at most ``max_segment_length``, and a circle through the three points has
    curvature within ``curvature_tolerance`` of the function's. Splitting
    stops at a fixed depth, where the best available estimate is accepted.

    Args:
        func: Function to reparameterize.
        max_delta_k: Maximum curvature spread within one segment.
        max_segment_length: Maximum segment length.
        curvature_tolerance: Maximum circle-fit curvature mismatch.

    Returns:
        Mapping with adaptively spaced samples.

    Raises:
        pathmotion.utils.exceptions.ConfigurationError: If any setting is not
            positive.
    """
    for name, value in (
        ("max_delta_k", max_delta_k),
        ("max_segment_length", max_segment_length),
        ("curvature_tolerance", curvature_tolerance),
    ):
        if not value > 0.0:
            msg = f"{name} must be > 0, got {value}"
            raise ConfigurationError(msg)

    s_samples = [0.0]
    t_samples = [0.0]

    def subdivide(
        t1: float, t2: float, k1: float, k2: float, p1: Vector2d, p2: Vector2d, depth: int
    ) -> None:
        """Accept or split the parameter interval ``[t1, t2]``.

        Args:
            t1: Interval start.
            t2: Interval end.
            k1: Curvature at ``t1``.
            k2: Curvature at ``t2``.
            p1: Position at ``t1``.
            p2: Position at ``t2``.
            depth: Current recursion depth.
        """
        tm = 0.5 * (t1 + t2)
        km = func.curvature(tm)
        pm = func.value(tm)
        estimate = math.nan
        if max(k1, km, k2) - min(k1, km, k2) <= max_delta_k:
            estimate = _arc_length_estimate(p1, pm, p2, (k1 + km + k2) / 3.0, curvature_tolerance)
        if depth >= MAX_SUBDIVISION_DEPTH or (
            not math.isnan(estimate) and estimate <= max_segment_length
        ):
            if math.isnan(estimate):
                estimate = p1.dist_to(pm) + pm.dist_to(p2)
            s_samples.append(s_samples[-1] + estimate)
            t_samples.append(t2)
            return
        subdivide(t1, tm, k1, km, p1, pm, depth + 1)
        subdivide(tm, t2, km, k2, pm, p2, depth + 1)

    subdivide(0.0, 1.0, func.curvature(0.0), func.curvature(1.0), func.value(0.0), func.value(1.0), 0)
    LOGGER.debug("Subdivided arc length %.6f into %d segments", s_samples[-1], len(s_samples) - 1)
    return ReparamMapping.from_samples(s_samples, t_samples)
