"""Partition-point searches over monotone predicates on the real line.

All searches assume ``partition`` is ``False`` below some point ``x`` and
``True`` above it. With ``searching_for=False`` the returned value is at most
``tolerance`` below ``x`` (so ``partition`` is ``False`` there); with
``searching_for=True`` it is at most ``tolerance`` above ``x``. If ``x`` lies
outside the range, the nearest endpoint is returned.
"""

from __future__ import annotations

from collections.abc import Callable

from pathmotion.utils.exceptions import ConfigurationError


def _validate_search_range(range_min: float, range_max: float, tolerance: float) -> None:
    """Validate common search arguments.

    Args:
        range_min: Lower end of the search range.
        range_max: Upper end of the search range.
        tolerance: Target bracket width.

    Raises:
        pathmotion.utils.exceptions.ConfigurationError: If the range is
            inverted or ``tolerance`` is not positive.
    """
    if range_min > range_max:
        msg = f"range_min ({range_min}) must be <= range_max ({range_max})"
        raise ConfigurationError(msg)
    if not tolerance > 0.0:
        msg = f"tolerance ({tolerance}) must be > 0"
        raise ConfigurationError(msg)


def _bisect(
    lower: float,
    upper: float,
    tolerance: float,
    searching_for: bool,
    partition: Callable[[float], bool],
) -> float:
    """Shrink a bracketing interval until it is narrower than ``tolerance``.

    Args:
        lower: Bracket lower end, where ``partition`` is ``False``.
        upper: Bracket upper end, where ``partition`` is ``True``.
        tolerance: Target bracket width.
        searching_for: Which side of the partition point to return.
        partition: Monotone predicate.

    Returns:
        The bracket end on the requested side.
    """
    while upper - lower > tolerance:
        mid = 0.5 * (lower + upper)
        if partition(mid):
            upper = mid
        else:
            lower = mid
    return upper if searching_for else lower


def double_binary_search(
    range_min: float,
    range_max: float,
    tolerance: float,
    partition: Callable[[float], bool],
    searching_for: bool = False,
) -> float:
    """Find the partition point of ``partition`` with plain bisection.

    Args:
        range_min: Lower end of the search range.
        range_max: Upper end of the search range.
        tolerance: Accuracy of the result.
        partition: Monotone predicate, ``True`` above the partition point.
        searching_for: Which side of the partition point to return.

    Returns:
        Value within ``tolerance`` of the partition point, or an endpoint.
    """
    _validate_search_range(range_min, range_max, tolerance)
    if partition(range_min):
        return range_min
    if not partition(range_max):
        return range_max
    return _bisect(range_min, range_max, tolerance, searching_for, partition)


def extending_double_search(
    range_min: float,
    range_max: float,
    initial_step: float,
    partition: Callable[[float], bool],
    tolerance: float | None = None,
    searching_for: bool = False,
) -> float:
    """Find a partition point expected to be close to ``range_min``.

    Steps upward from ``range_min``, doubling the step until the predicate
    flips, then bisects the last bracket. Cost is logarithmic in the distance
    from ``range_min`` rather than in the whole range.

    Args:
        range_min: Lower end of the search range.
        range_max: Upper end of the search range.
        initial_step: First step size; ideally a bit less than the expected
            distance to the partition point.
        partition: Monotone predicate, ``True`` above the partition point.
        tolerance: Accuracy of the result; defaults to ``initial_step``.
        searching_for: Which side of the partition point to return.

    Returns:
        Value within ``tolerance`` of the partition point, or an endpoint.

    Raises:
        pathmotion.utils.exceptions.ConfigurationError: If the range,
            ``initial_step``, or ``tolerance`` are invalid.
    """
    tolerance = initial_step if tolerance is None else tolerance
    _validate_search_range(range_min, range_max, tolerance)
    if not initial_step > 0.0:
        msg = f"initial_step ({initial_step}) must be > 0"
        raise ConfigurationError(msg)
    if range_min == range_max or partition(range_min):
        return range_min
    if not partition(range_max):
        return range_max

    lower = range_min
    step = initial_step
    while True:
        upper = lower + step
        if upper >= range_max:
            upper = range_max
            break
        if partition(upper):
            break
        lower = upper
        step *= 2.0
    return _bisect(lower, upper, tolerance, searching_for, partition)


def extending_down_double_search(
    range_min: float,
    range_max: float,
    initial_step: float,
    partition: Callable[[float], bool],
    tolerance: float | None = None,
    searching_for: bool = False,
) -> float:
    """Find a partition point expected to be close to ``range_max``.

    Mirror image of :func:`extending_double_search`, stepping downward from
    ``range_max``.

    Args:
        range_min: Lower end of the search range.
        range_max: Upper end of the search range.
        initial_step: First step size.
        partition: Monotone predicate, ``True`` above the partition point.
        tolerance: Accuracy of the result; defaults to ``initial_step``.
        searching_for: Which side of the partition point to return.

    Returns:
        Value within ``tolerance`` of the partition point, or an endpoint.

    Raises:
        pathmotion.utils.exceptions.ConfigurationError: If the range,
            ``initial_step``, or ``tolerance`` are invalid.
    """
    tolerance = initial_step if tolerance is None else tolerance
    _validate_search_range(range_min, range_max, tolerance)
    if not initial_step > 0.0:
        msg = f"initial_step ({initial_step}) must be > 0"
        raise ConfigurationError(msg)
    if range_min == range_max or not partition(range_max):
        return range_max
    if partition(range_min):
        return range_min

    upper = range_max
    step = initial_step
    while True:
        lower = upper - step
        if lower <= range_min:
            lower = range_min
            break
        if not partition(lower):
            break
        upper = lower
        step *= 2.0
    return _bisect(lower, upper, tolerance, searching_for, partition)
