"""Conversions between micro-units, display units, ticks and wall-clock time."""

from petsim.config.time import MICRO_RATIO, TICK_DURATION_MS


def to_display(micro_value: int) -> int:
    """Convert a stored micro value to its whole display value (floored)."""
    return micro_value // MICRO_RATIO


def to_micro(display_value: int) -> int:
    """Convert a display value to micro-units."""
    return display_value * MICRO_RATIO


def ms_to_ticks(ms: int) -> int:
    """Whole ticks contained in a millisecond span."""
    return ms // TICK_DURATION_MS


def ticks_to_ms(ticks: int) -> int:
    return ticks * TICK_DURATION_MS


def calculate_elapsed_ticks(last_time_ms: int, current_time_ms: int) -> int:
    """Ticks elapsed between two timestamps; a clock that went backwards yields 0."""
    elapsed_ms = current_time_ms - last_time_ms
    if elapsed_ms < 0:
        return 0
    return ms_to_ticks(elapsed_ms)


def format_ticks_as_duration(ticks: int) -> str:
    """Render a tick count as a short human duration such as ``"1h 30m"``.

    Used for "time remaining" displays, which are always
    ``ticks_remaining * tick duration``.
    """
    total_minutes = ticks_to_ms(max(0, ticks)) // (1000 * 60)
    hours, minutes = divmod(total_minutes, 60)
    if hours and minutes:
        return f"{hours}h {minutes}m"
    if hours:
        return f"{hours}h"
    return f"{minutes}m"
