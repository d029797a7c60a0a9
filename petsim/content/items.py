"""Care item definitions consumed by the care actions.

Restore amounts are micro-units, except ``heal_amount`` which is display
health. Inventory counts live outside the engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from petsim.util.units import to_micro

# Poop timer reduction tiers (micro-units, halve for awake ticks)
POOP_ACCELERATION_LIGHT = 60
POOP_ACCELERATION_STANDARD = 120
POOP_ACCELERATION_HEAVY = 180
POOP_ACCELERATION_INDULGENT = 240


class ItemCategory(Enum):
    FOOD = "food"
    DRINK = "drink"
    TOY = "toy"
    CLEANING = "cleaning"
    MEDICINE = "medicine"


@dataclass(frozen=True)
class CareItem:
    id: str
    name: str
    category: ItemCategory
    satiety_restore: int = 0
    hydration_restore: int = 0
    happiness_restore: int = 0
    energy_restore: int = 0
    poop_acceleration: int = 0
    poop_removed: int = 0
    heal_amount: int = 0


def _items(*items: CareItem) -> Dict[str, CareItem]:
    return {item.id: item for item in items}


ITEMS: Dict[str, CareItem] = _items(
    CareItem(
        "food_kibble",
        "Kibble",
        ItemCategory.FOOD,
        satiety_restore=to_micro(15),
        poop_acceleration=POOP_ACCELERATION_LIGHT,
    ),
    CareItem(
        "food_apple",
        "Apple",
        ItemCategory.FOOD,
        satiety_restore=to_micro(20),
        poop_acceleration=POOP_ACCELERATION_STANDARD,
    ),
    CareItem(
        "food_meat",
        "Cooked Meat",
        ItemCategory.FOOD,
        satiety_restore=to_micro(35),
        poop_acceleration=POOP_ACCELERATION_HEAVY,
    ),
    CareItem(
        "food_fish",
        "Grilled Fish",
        ItemCategory.FOOD,
        satiety_restore=to_micro(30),
        poop_acceleration=POOP_ACCELERATION_STANDARD,
    ),
    CareItem(
        "food_cake",
        "Cake Slice",
        ItemCategory.FOOD,
        satiety_restore=to_micro(50),
        poop_acceleration=POOP_ACCELERATION_INDULGENT,
    ),
    CareItem("drink_water", "Water", ItemCategory.DRINK, hydration_restore=to_micro(20)),
    CareItem("drink_juice", "Fruit Juice", ItemCategory.DRINK, hydration_restore=to_micro(25)),
    CareItem("drink_milk", "Milk", ItemCategory.DRINK, hydration_restore=to_micro(30)),
    CareItem(
        "drink_energy",
        "Energy Drink",
        ItemCategory.DRINK,
        hydration_restore=to_micro(25),
        energy_restore=to_micro(20),
    ),
    CareItem("toy_ball", "Rubber Ball", ItemCategory.TOY, happiness_restore=to_micro(15)),
    CareItem("toy_rope", "Tug Rope", ItemCategory.TOY, happiness_restore=to_micro(18)),
    CareItem("toy_plush", "Plush Toy", ItemCategory.TOY, happiness_restore=to_micro(22)),
    CareItem("cleaning_tissue", "Tissue Pack", ItemCategory.CLEANING, poop_removed=1),
    CareItem("cleaning_wipes", "Wet Wipes", ItemCategory.CLEANING, poop_removed=2),
    CareItem("medicine_bandage", "Bandage", ItemCategory.MEDICINE, heal_amount=20),
    CareItem("medicine_potion", "Health Potion", ItemCategory.MEDICINE, heal_amount=50),
)
