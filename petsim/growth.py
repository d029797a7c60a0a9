"""Aging and growth stage transitions.

A pet ages one tick per tick. Its stage follows from its age; within a stage
the age also selects one of three substages. Stage changes only ever move
forward, so they are validated against the growth ``StateMachine``.

Why midpoint gains?
-------------------
Each species grows each stat at a low, medium or high rate, given as a
small range. Applying the floored midpoint keeps stage transitions
deterministic without needing an RNG inside the pure tick.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from petsim.config.growth import GROWTH_RATE_GAINS
from petsim.config.time import TICKS_PER_MONTH
from petsim.content.growth_stages import GrowthStageDefinition
from petsim.content.registry import DEFAULT_CONTENT, ContentRegistry
from petsim.pet.models import BATTLE_STAT_NAMES, ZERO_BATTLE_STATS, BattleStats, Pet, PetGrowth
from petsim.state_machine import GROWTH_STAGE_ORDER, GrowthStage, create_growth_state_machine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GrowthTickResult:
    growth: PetGrowth
    battle_stats: BattleStats
    stage_transitioned: bool = False
    substage_transitioned: bool = False
    previous_stage: Optional[GrowthStage] = None
    previous_substage: Optional[int] = None


def get_stat_gain_for_rate(rate: str) -> int:
    low, high = GROWTH_RATE_GAINS[rate]
    return (low + high) // 2


def calculate_stage_transition_stat_gains(
    species_id: str, content: ContentRegistry = DEFAULT_CONTENT
) -> Optional[BattleStats]:
    """Battle stat gains for one stage transition, or None for an unknown species."""
    species = content.get_species(species_id)
    if species is None:
        return None
    return BattleStats(
        **{
            stat: get_stat_gain_for_rate(species.stat_growth.get(stat, "low"))
            for stat in BATTLE_STAT_NAMES
        }
    )


def get_next_stage(stage: GrowthStage) -> Optional[GrowthStage]:
    index = GROWTH_STAGE_ORDER.index(stage)
    if index >= len(GROWTH_STAGE_ORDER) - 1:
        return None
    return GROWTH_STAGE_ORDER[index + 1]


def _substage_length(
    stage_def: GrowthStageDefinition, content: ContentRegistry
) -> Optional[float]:
    next_stage = get_next_stage(stage_def.stage)
    if next_stage is None:
        return TICKS_PER_MONTH
    next_def = content.get_growth_stage(next_stage)
    if next_def is None:
        return None
    return (next_def.min_age_ticks - stage_def.min_age_ticks) / stage_def.substage_count


def get_stage_from_age(age_ticks: int, content: ContentRegistry = DEFAULT_CONTENT) -> GrowthStage:
    stage = GrowthStage.BABY
    for candidate in GROWTH_STAGE_ORDER:
        stage_def = content.get_growth_stage(candidate)
        if stage_def is not None and age_ticks >= stage_def.min_age_ticks:
            stage = candidate
    return stage


def get_substage(stage: GrowthStage, age_ticks: int, content: ContentRegistry = DEFAULT_CONTENT) -> int:
    """1-based substage of ``stage`` at ``age_ticks``."""
    stage_def = content.get_growth_stage(stage)
    if stage_def is None:
        return 1
    length = _substage_length(stage_def, content)
    if not length:
        return 1
    time_in_stage = max(0, age_ticks - stage_def.min_age_ticks)
    return min(stage_def.substage_count, int(time_in_stage // length) + 1)


def get_ticks_until_next_substage(
    stage: GrowthStage, substage: int, age_ticks: int, content: ContentRegistry = DEFAULT_CONTENT
) -> Optional[int]:
    """Ticks until the next substage, or None in the last substage of a stage."""
    stage_def = content.get_growth_stage(stage)
    if stage_def is None or substage >= stage_def.substage_count:
        return None
    length = _substage_length(stage_def, content)
    if length is None:
        return None
    time_in_stage = age_ticks - stage_def.min_age_ticks
    return max(0, int(substage * length - time_in_stage))


def get_ticks_until_next_stage(
    stage: GrowthStage, age_ticks: int, content: ContentRegistry = DEFAULT_CONTENT
) -> Optional[int]:
    next_stage = get_next_stage(stage)
    if next_stage is None:
        return None
    next_def = content.get_growth_stage(next_stage)
    if next_def is None:
        return None
    return max(0, next_def.min_age_ticks - age_ticks)


def get_stage_progress_percent(
    stage: GrowthStage, age_ticks: int, content: ContentRegistry = DEFAULT_CONTENT
) -> int:
    """Whole percent through ``stage``; Adult counts its three months."""
    stage_def = content.get_growth_stage(stage)
    if stage_def is None:
        return 0
    time_in_stage = age_ticks - stage_def.min_age_ticks
    next_stage = get_next_stage(stage)

    if next_stage is None:
        duration = stage_def.substage_count * TICKS_PER_MONTH
    else:
        next_def = content.get_growth_stage(next_stage)
        if next_def is None:
            return 0
        duration = next_def.min_age_ticks - stage_def.min_age_ticks

    if duration <= 0:
        return 100
    return min(100, int(time_in_stage / duration * 100))


def process_growth_tick(pet: Pet, content: ContentRegistry = DEFAULT_CONTENT) -> GrowthTickResult:
    """Age the pet one tick and apply any stage or substage change."""
    age_ticks = pet.growth.age_ticks + 1
    target_stage = get_stage_from_age(age_ticks, content)
    battle_stats = pet.battle_stats
    stage = pet.growth.stage

    stage_transitioned = False
    if target_stage != stage:
        machine = create_growth_state_machine(stage)
        gains = calculate_stage_transition_stat_gains(pet.identity.species_id, content)
        if gains is None:
            gains = ZERO_BATTLE_STATS
        # Walk forward one stage at a time so a large age jump still pays out every transition
        while stage != target_stage:
            next_stage = get_next_stage(stage)
            if next_stage is None or machine.try_transition(next_stage, tick=age_ticks).is_err():
                break
            stage = next_stage
            battle_stats = battle_stats + gains
            stage_transitioned = True
        if stage_transitioned:
            logger.info(
                "%s grew from %s to %s at age %d",
                pet.identity.name,
                pet.growth.stage.display_name,
                stage.display_name,
                age_ticks,
            )

    substage = get_substage(stage, age_ticks, content)
    substage_transitioned = not stage_transitioned and substage != pet.growth.substage

    return GrowthTickResult(
        growth=replace(pet.growth, age_ticks=age_ticks, stage=stage, substage=substage),
        battle_stats=battle_stats,
        stage_transitioned=stage_transitioned,
        substage_transitioned=substage_transitioned,
        previous_stage=pet.growth.stage if stage_transitioned else None,
        previous_substage=pet.growth.substage
        if stage_transitioned or substage_transitioned
        else None,
    )
