"""Tests for player care actions."""

from dataclasses import replace

import pytest

from petsim.care.actions import clean, feed, give_water, heal, play
from petsim.pet.models import SLEEPING
from petsim.util.units import to_micro


class TestFeed:
    def test_feed_restores_satiety_and_speeds_up_poop(self, make_pet) -> None:
        pet = make_pet(satiety=10)
        fed = feed(pet, "food_apple")

        assert fed.success
        assert fed.message == "Fed Apple!"
        assert fed.pet.care_stats.satiety == to_micro(30)
        assert fed.pet.poop.ticks_until_next == pet.poop.ticks_until_next - 120

    def test_satiety_is_capped(self, make_pet) -> None:
        fed = feed(make_pet(satiety=45), "food_cake")
        assert fed.pet.care_stats.satiety == to_micro(50)

    def test_wrong_category(self, baby_pet) -> None:
        fed = feed(baby_pet, "toy_ball")
        assert not fed.success
        assert fed.message == "Invalid food item!"
        assert fed.pet is baby_pet

    def test_unknown_item(self, baby_pet) -> None:
        assert feed(baby_pet, "food_dragonfruit").message == "Invalid food item!"


class TestDrinksAndToys:
    def test_water(self, make_pet) -> None:
        watered = give_water(make_pet(hydration=5), "drink_water")
        assert watered.message == "Gave Water!"
        assert watered.pet.care_stats.hydration == to_micro(25)

    def test_energy_drink_restores_energy(self, make_pet) -> None:
        watered = give_water(make_pet(hydration=5, energy=10), "drink_energy")
        assert watered.pet.energy_stats.energy == to_micro(30)
        assert watered.pet.care_stats.hydration == to_micro(30)

    def test_play(self, make_pet) -> None:
        played = play(make_pet(happiness=20), "toy_plush")
        assert played.message == "Played with Plush Toy!"
        assert played.pet.care_stats.happiness == to_micro(42)


class TestClean:
    def test_clean_removes_poop(self, make_pet) -> None:
        cleaned = clean(make_pet(poop=3), "cleaning_wipes")
        assert cleaned.success
        assert cleaned.pet.poop.count == 1
        assert cleaned.message == "Cleaned 2 poop with Wet Wipes!"

    def test_never_below_zero(self, make_pet) -> None:
        cleaned = clean(make_pet(poop=1), "cleaning_wipes")
        assert cleaned.pet.poop.count == 0
        assert cleaned.message == "Cleaned 1 poop with Wet Wipes!"

    def test_nothing_to_clean(self, baby_pet) -> None:
        cleaned = clean(baby_pet, "cleaning_tissue")
        assert not cleaned.success
        assert cleaned.message == "Nothing to clean!"


class TestHeal:
    def test_heal_up_to_max(self, make_pet) -> None:
        healed = heal(make_pet(health=40), "medicine_bandage")
        assert healed.success
        assert healed.pet.health_stats.health == 50
        assert healed.message == "Used Bandage! Restored 10 health."

    def test_already_full(self, baby_pet) -> None:
        healed = heal(baby_pet, "medicine_potion")
        assert not healed.success
        assert healed.message == "Your pet is already at full health!"


@pytest.mark.parametrize(
    "action, item_id, verb",
    [
        (feed, "food_kibble", "feed"),
        (give_water, "drink_water", "give water"),
        (play, "toy_ball", "play"),
        (clean, "cleaning_tissue", "clean"),
        (heal, "medicine_bandage", "heal"),
    ],
)
def test_actions_are_blocked_while_busy(make_pet, action, item_id, verb) -> None:
    pet = replace(make_pet(satiety=1, hydration=1, happiness=1, poop=2, health=1), activity=SLEEPING)
    result = action(pet, item_id)
    assert not result.success
    assert result.pet is pet
    assert result.message == f"Cannot {verb} while sleeping."
