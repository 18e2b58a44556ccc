"""Cursor-style sequential query protocol.

A stepper is like an iterator that is told where to step to on every call.
Implementations keep a cursor from the previous step so that queries made in
roughly monotone order avoid a fresh binary search each time.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar

R_co = TypeVar("R_co", covariant=True)


class Stepper(Protocol[R_co]):
    """Stateful cursor returning a value for each requested step."""

    def step_to(self, step: float) -> R_co:
        """Step to ``step`` and return the value there.

        Args:
            step: Place to step to, typically a time or an arc length.

        Returns:
            Value at ``step``.
        """
        ...


class Steppable(Protocol[R_co]):
    """Object that can hand out independent steppers."""

    def stepper(self) -> Stepper[R_co]:
        """Create a new stepper with a fresh cursor.

        Returns:
            Stepper owned by the caller.
        """
        ...


def step_to_all(steppable: Steppable[R_co], steps: Iterable[float]) -> list[R_co]:
    """Step a fresh stepper through all ``steps`` in order.

    Args:
        steppable: Object providing the stepper.
        steps: Places to step to, ideally sorted.

    Returns:
        Values at each step, in input order.
    """
    stepper = steppable.stepper()
    return [stepper.step_to(step) for step in steps]
