"""Forage tables: what a foraging trip can turn up at each location."""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class ForageEntry:
    """One possible drop.

    Attributes:
        item_id: Item granted on a successful roll
        base_drop_rate: Probability at skill level 1 (0.0 to 1.0)
        min_skill_level: Entries above the player's skill never roll
        quantity: Inclusive (min, max) amount granted
    """

    item_id: str
    base_drop_rate: float
    min_skill_level: int = 0
    quantity: Tuple[int, int] = (1, 1)


@dataclass(frozen=True)
class ForageTable:
    id: str
    entries: Tuple[ForageEntry, ...]
    base_duration_ticks: int
    base_energy_cost: int  # display units


FORAGE_TABLES: Dict[str, ForageTable] = {
    "meadow_forage": ForageTable(
        id="meadow_forage",
        base_duration_ticks=2,
        base_energy_cost=5,
        entries=(
            ForageEntry("food_apple", 0.4, quantity=(1, 2)),
            ForageEntry("drink_water", 0.3, quantity=(1, 2)),
            ForageEntry("food_kibble", 0.25, quantity=(1, 3)),
            ForageEntry("toy_ball", 0.1, quantity=(1, 1)),
            ForageEntry("food_meat", 0.08, min_skill_level=1, quantity=(1, 1)),
        ),
    ),
    "woods_forage": ForageTable(
        id="woods_forage",
        base_duration_ticks=3,
        base_energy_cost=8,
        entries=(
            ForageEntry("food_apple", 0.3, quantity=(1, 3)),
            ForageEntry("drink_juice", 0.2, quantity=(1, 2)),
            ForageEntry("food_fish", 0.15, quantity=(1, 2)),
            ForageEntry("food_meat", 0.12, min_skill_level=1, quantity=(1, 2)),
            ForageEntry("toy_plush", 0.08, min_skill_level=2, quantity=(1, 1)),
            ForageEntry("food_cake", 0.05, min_skill_level=3, quantity=(1, 1)),
        ),
    ),
}
