"""Utility helpers."""

from pathmotion.utils.constants import EPSILON
from pathmotion.utils.logging import configure_logging
from pathmotion.utils.stepper import Steppable, Stepper, step_to_all

__all__ = ["EPSILON", "Steppable", "Stepper", "configure_logging", "step_to_all"]
