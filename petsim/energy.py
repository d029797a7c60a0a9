"""Energy regeneration and spending.

Energy is stored in micro-units like the care stats. Activity costs are
quoted in display units and converted at the point of deduction.
"""

from petsim.config.care import ENERGY_REGEN_AWAKE, ENERGY_REGEN_SLEEPING
from petsim.util.units import to_display, to_micro


def get_energy_regen_rate(is_sleeping: bool) -> int:
    return ENERGY_REGEN_SLEEPING if is_sleeping else ENERGY_REGEN_AWAKE


def apply_energy_regen(current_energy: int, max_energy: int, is_sleeping: bool) -> int:
    """One tick of regeneration, capped at ``max_energy``.

    Energy already above the cap (after a stage-down bonus change) is
    clamped back to it.
    """
    return min(max_energy, current_energy + get_energy_regen_rate(is_sleeping))


def has_enough_energy(current_energy: int, required_display: int) -> bool:
    return to_display(current_energy) >= required_display


def deduct_energy(current_energy: int, cost_display: int) -> int:
    return max(0, current_energy - to_micro(cost_display))


def restore_energy(current_energy: int, amount_micro: int, max_energy: int) -> int:
    return min(max_energy, current_energy + amount_micro)
