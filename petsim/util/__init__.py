"""Utilities shared by the engine subsystems."""

from petsim.util.rng import MissingRNGError, require_rng_param
from petsim.util.units import (
    calculate_elapsed_ticks,
    format_ticks_as_duration,
    ms_to_ticks,
    ticks_to_ms,
    to_display,
    to_micro,
)

__all__ = [
    "MissingRNGError",
    "calculate_elapsed_ticks",
    "format_ticks_as_duration",
    "ms_to_ticks",
    "require_rng_param",
    "ticks_to_ms",
    "to_display",
    "to_micro",
]
