"""Notification events produced while advancing a pet.

Events are facts: frozen, complete, and consumed by the UI layer only. The
engine never reads them back.
"""

from __future__ import annotations

from dataclasses import dataclass

from petsim.state_machine import BattleStatus, GrowthStage


@dataclass(frozen=True)
class StageTransitionEvent:
    """The pet reached a new growth stage.

    Attributes:
        pet_id: Pet that grew
        pet_name: Display name for the notification
        previous_stage: Stage before the transition
        new_stage: Stage after the transition
        tick: Pet age (ticks) when it happened
    """

    pet_id: str
    pet_name: str
    previous_stage: GrowthStage
    new_stage: GrowthStage
    tick: int


@dataclass(frozen=True)
class SubstageTransitionEvent:
    pet_id: str
    stage: GrowthStage
    previous_substage: int
    new_substage: int
    tick: int


@dataclass(frozen=True)
class TrainingCompleteEvent:
    pet_id: str
    facility_id: str
    message: str
    stats_gained: tuple[tuple[str, int], ...]
    tick: int


@dataclass(frozen=True)
class ExplorationCompleteEvent:
    """A foraging trip finished.

    ``items_found`` holds (item_id, quantity) pairs; empty is a valid,
    successful outcome.
    """

    pet_id: str
    location_id: str
    message: str
    items_found: tuple[tuple[str, int], ...]
    tick: int


@dataclass(frozen=True)
class BattleEndedEvent:
    battle_id: str
    pet_id: str
    status: BattleStatus
    turns: int
