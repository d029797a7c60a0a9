"""Player care actions: feed, give water, play, clean, heal.

Each action applies one item from the content tables. Whether the player
actually owns the item is the inventory layer's concern; these functions only
change the pet. All of them are blocked unless the pet is Idle.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from petsim.activity import check_activity_idle
from petsim.care.poop import accelerate_poop, remove_poop
from petsim.content.items import CareItem, ItemCategory
from petsim.content.registry import DEFAULT_CONTENT, ContentRegistry
from petsim.energy import restore_energy
from petsim.pet.models import Pet
from petsim.pet.stats import PetMaxStats, calculate_max_health, calculate_pet_max_stats


@dataclass(frozen=True)
class CareActionResult:
    success: bool
    pet: Pet
    message: str


def _prepare(
    pet: Pet,
    item_id: str,
    category: ItemCategory,
    action: str,
    content: ContentRegistry,
) -> Tuple[Optional[CareItem], Optional[PetMaxStats], Optional[CareActionResult]]:
    gate = check_activity_idle(pet, action)
    if not gate.allowed:
        return None, None, CareActionResult(False, pet, gate.message)

    item = content.get_item(item_id)
    if item is None or item.category != category:
        return None, None, CareActionResult(False, pet, f"Invalid {category.value} item!")

    max_stats = calculate_pet_max_stats(pet, content)
    if max_stats is None:
        return None, None, CareActionResult(False, pet, "Pet data not found.")
    return item, max_stats, None


def feed(pet: Pet, item_id: str, content: ContentRegistry = DEFAULT_CONTENT) -> CareActionResult:
    item, max_stats, failure = _prepare(pet, item_id, ItemCategory.FOOD, "feed", content)
    if failure is not None:
        return failure

    satiety = min(pet.care_stats.satiety + item.satiety_restore, max_stats.satiety)
    updated = replace(
        pet,
        care_stats=replace(pet.care_stats, satiety=satiety),
        poop=accelerate_poop(pet.poop, item.poop_acceleration),
    )
    return CareActionResult(True, updated, f"Fed {item.name}!")


def give_water(pet: Pet, item_id: str, content: ContentRegistry = DEFAULT_CONTENT) -> CareActionResult:
    item, max_stats, failure = _prepare(pet, item_id, ItemCategory.DRINK, "give water", content)
    if failure is not None:
        return failure

    hydration = min(pet.care_stats.hydration + item.hydration_restore, max_stats.hydration)
    energy = pet.energy_stats.energy
    if item.energy_restore:
        energy = restore_energy(energy, item.energy_restore, max_stats.energy)

    updated = replace(
        pet,
        care_stats=replace(pet.care_stats, hydration=hydration),
        energy_stats=replace(pet.energy_stats, energy=energy),
    )
    return CareActionResult(True, updated, f"Gave {item.name}!")


def play(pet: Pet, item_id: str, content: ContentRegistry = DEFAULT_CONTENT) -> CareActionResult:
    item, max_stats, failure = _prepare(pet, item_id, ItemCategory.TOY, "play", content)
    if failure is not None:
        return failure

    happiness = min(pet.care_stats.happiness + item.happiness_restore, max_stats.happiness)
    updated = replace(pet, care_stats=replace(pet.care_stats, happiness=happiness))
    return CareActionResult(True, updated, f"Played with {item.name}!")


def clean(pet: Pet, item_id: str, content: ContentRegistry = DEFAULT_CONTENT) -> CareActionResult:
    item, _, failure = _prepare(pet, item_id, ItemCategory.CLEANING, "clean", content)
    if failure is not None:
        return failure

    if pet.poop.count <= 0:
        return CareActionResult(False, pet, "Nothing to clean!")

    remaining = remove_poop(pet.poop.count, item.poop_removed)
    removed = pet.poop.count - remaining
    updated = replace(pet, poop=replace(pet.poop, count=remaining))
    return CareActionResult(True, updated, f"Cleaned {removed} poop with {item.name}!")


def heal(pet: Pet, item_id: str, content: ContentRegistry = DEFAULT_CONTENT) -> CareActionResult:
    """Restore battle health, up to the max derived from endurance."""
    item, _, failure = _prepare(pet, item_id, ItemCategory.MEDICINE, "heal", content)
    if failure is not None:
        return failure

    max_health = calculate_max_health(pet.battle_stats)
    if pet.health_stats.health >= max_health:
        return CareActionResult(False, pet, "Your pet is already at full health!")

    health = min(max_health, pet.health_stats.health + item.heal_amount)
    restored = health - pet.health_stats.health
    updated = replace(pet, health_stats=replace(pet.health_stats, health=health))
    return CareActionResult(True, updated, f"Used {item.name}! Restored {restored} health.")
