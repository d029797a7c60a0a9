"""Pytest configuration and fixtures for pet simulation tests."""

import random
from dataclasses import replace

import pytest

from petsim.pet.factory import create_pet
from petsim.util.units import to_micro


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def baby_pet():
    """A freshly hatched florabit at full stats."""
    return create_pet("Mochi", "florabit")


@pytest.fixture
def make_pet():
    """Factory for pets with selected display-unit overrides.

    Example:
        pet = make_pet(energy=50, poop=3)
    """

    def _make(
        name="Mochi",
        species_id="florabit",
        energy=None,
        satiety=None,
        hydration=None,
        happiness=None,
        poop=None,
        health=None,
    ):
        pet = create_pet(name, species_id)
        care = pet.care_stats
        pet = replace(
            pet,
            care_stats=replace(
                care,
                satiety=care.satiety if satiety is None else to_micro(satiety),
                hydration=care.hydration if hydration is None else to_micro(hydration),
                happiness=care.happiness if happiness is None else to_micro(happiness),
            ),
        )
        if energy is not None:
            pet = replace(pet, energy_stats=replace(pet.energy_stats, energy=to_micro(energy)))
        if poop is not None:
            pet = replace(pet, poop=replace(pet.poop, count=poop))
        if health is not None:
            pet = replace(pet, health_stats=replace(pet.health_stats, health=health))
        return pet

    return _make
