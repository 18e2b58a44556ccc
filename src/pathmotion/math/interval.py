"""Closed intervals on the real line."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Interval:
    """Closed interval ``[lower, upper]``.

    An interval is empty when ``lower > upper``. Endpoints are never NaN; the
    factory methods map NaN inputs to :meth:`empty`.

    Args:
        lower: Lower bound, may be ``-inf``.
        upper: Upper bound, may be ``inf``.
    """

    lower: float
    upper: float

    @classmethod
    def of(cls, lower: float, upper: float) -> Interval:
        """Create an interval from two endpoints.

        Args:
            lower: Lower bound.
            upper: Upper bound.

        Returns:
            The interval, or an empty interval if an endpoint is NaN or
            ``upper < lower``.
        """
        if math.isnan(lower) or math.isnan(upper) or upper < lower:
            return cls.empty()
        return cls(lower, upper)

    @classmethod
    def symmetric(cls, radius: float, center: float = 0.0) -> Interval:
        """Create ``[center - radius, center + radius]``.

        Args:
            radius: Half-width; negative or NaN gives an empty interval.
            center: Interval midpoint.

        Returns:
            Symmetric interval around ``center``.
        """
        if math.isnan(radius) or math.isnan(center) or radius < 0.0:
            return cls.empty()
        if math.isinf(radius):
            return cls.real()
        return cls(center - radius, center + radius)

    @classmethod
    def symmetric_regular(cls, radius: float, center: float = 0.0) -> Interval:
        """Create a symmetric interval, interpreting ``radius`` by absolute value.

        Args:
            radius: Half-width, sign ignored.
            center: Interval midpoint.

        Returns:
            Symmetric interval around ``center``.
        """
        return cls.symmetric(abs(radius), center)

    @classmethod
    def real(cls) -> Interval:
        """Interval spanning the whole real line.

        Returns:
            ``[-inf, inf]``.
        """
        return cls(-math.inf, math.inf)

    @classmethod
    def empty(cls) -> Interval:
        """Interval containing no values.

        Returns:
            ``[inf, -inf]``.
        """
        return cls(math.inf, -math.inf)

    def is_empty(self) -> bool:
        """Check whether this interval contains no values.

        Returns:
            ``True`` if ``lower > upper``.
        """
        return self.lower > self.upper

    def __contains__(self, value: float) -> bool:
        """Check membership.

        Args:
            value: Value to test.

        Returns:
            ``True`` if ``lower <= value <= upper``.
        """
        return self.lower <= value <= self.upper

    def intersect(self, other: Interval) -> Interval:
        """Intersect with another interval.

        Args:
            other: Interval to intersect with.

        Returns:
            The overlap, possibly empty.
        """
        lower = max(self.lower, other.lower)
        upper = min(self.upper, other.upper)
        if lower > upper:
            return Interval.empty()
        return Interval(lower, upper)
