"""Training resolver.

Lifecycle: ``can_start_training`` -> ``start_training`` -> one
``process_training_tick`` per engine tick -> ``apply_training_completion``
when the tick returns None. ``cancel_training`` may end a session early and
refunds the exact energy taken at start.

Gains land in both ``trained_battle_stats`` (kept as the permanent record of
what training earned) and ``battle_stats`` (so they apply immediately).
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, Optional

from petsim.activity import (
    ActivityStartResult,
    CanStartResult,
    CancelResult,
    calculate_progress,
    check_activity_requirements,
    refund_energy,
    transition_activity,
)
from petsim.content.facilities import TrainingSession, TrainingSessionType
from petsim.content.registry import DEFAULT_CONTENT, ContentRegistry
from petsim.pet.models import IDLE, ActiveTraining, Pet, Training
from petsim.pet.stats import calculate_pet_max_stats
from petsim.state_machine import GROWTH_STAGE_ORDER, ActivityState, GrowthStage
from petsim.util.units import to_micro

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrainingResult:
    success: bool
    message: str
    stats_gained: Dict[str, int] = field(default_factory=dict)


def is_session_available(session: TrainingSession, stage: GrowthStage) -> bool:
    if session.min_stage is None:
        return True
    return GROWTH_STAGE_ORDER.index(stage) >= GROWTH_STAGE_ORDER.index(session.min_stage)


def can_start_training(
    pet: Pet,
    facility_id: str,
    session_type: TrainingSessionType,
    content: ContentRegistry = DEFAULT_CONTENT,
) -> CanStartResult:
    facility = content.get_facility(facility_id)
    if facility is None:
        logger.warning("Unknown training facility %s", facility_id)
        return CanStartResult(False, "Training facility not found.")

    session = facility.get_session(session_type)
    if session is None:
        return CanStartResult(False, "Training session not available.")

    gate = check_activity_requirements(pet, "train", session.energy_cost, ActivityState.TRAINING)
    if not gate.allowed:
        return CanStartResult(False, gate.message)

    if not is_session_available(session, pet.growth.stage):
        return CanStartResult(False, f"Requires {session.min_stage.value} stage or higher.")

    return CanStartResult(True, "Ready to train!")


def start_training(
    pet: Pet,
    facility_id: str,
    session_type: TrainingSessionType,
    current_tick: int,
    content: ContentRegistry = DEFAULT_CONTENT,
) -> ActivityStartResult:
    """Deduct the session's energy and put the pet into Training.

    Returns:
        ActivityStartResult; on failure ``pet`` is the unchanged input
    """
    check = can_start_training(pet, facility_id, session_type, content)
    if not check.allowed:
        return ActivityStartResult(False, pet, check.message)

    facility = content.get_facility(facility_id)
    session = facility.get_session(session_type)
    energy_cost = to_micro(session.energy_cost)

    active = ActiveTraining(
        facility_id=facility_id,
        session_type=session_type.value,
        start_tick=current_tick,
        duration_ticks=session.duration_ticks,
        ticks_remaining=session.duration_ticks,
        energy_cost=energy_cost,
    )
    moved = transition_activity(pet, Training(active), current_tick)
    if moved.is_err():
        return ActivityStartResult(False, pet, moved.error)

    trained = moved.unwrap()
    trained = replace(
        trained,
        energy_stats=replace(trained.energy_stats, energy=max(0, pet.energy_stats.energy - energy_cost)),
    )
    return ActivityStartResult(True, trained, f"Started {session.name} at {facility.name}!")


def process_training_tick(training: ActiveTraining) -> Optional[ActiveTraining]:
    """Count down one tick; None means the session just finished."""
    ticks_remaining = training.ticks_remaining - 1
    if ticks_remaining <= 0:
        return None
    return replace(training, ticks_remaining=ticks_remaining)


def complete_training(pet: Pet, content: ContentRegistry = DEFAULT_CONTENT) -> TrainingResult:
    active = pet.active_training
    if active is None:
        return TrainingResult(False, "No active training to complete.")

    facility = content.get_facility(active.facility_id)
    session = None
    if facility is not None:
        try:
            session = facility.get_session(TrainingSessionType(active.session_type))
        except ValueError:
            session = None
    if facility is None or session is None:
        return TrainingResult(False, "Training data not found.")

    gains = {facility.primary_stat: session.primary_stat_gain}
    message = f"Training complete! Gained +{session.primary_stat_gain} {facility.primary_stat}"
    if session.secondary_stat_gain > 0:
        gains[facility.secondary_stat] = gains.get(facility.secondary_stat, 0) + session.secondary_stat_gain
        message += f" and +{session.secondary_stat_gain} {facility.secondary_stat}"
    return TrainingResult(True, message + ".", gains)


def apply_training_completion(pet: Pet, content: ContentRegistry = DEFAULT_CONTENT) -> Pet:
    """Grant the session's gains and return the pet to Idle.

    When the facility or session has disappeared from the content tables the
    pet is still released to Idle, with no gains.
    """
    result = complete_training(pet, content)
    idle = replace(pet, activity=IDLE)
    if not result.success:
        return idle

    logger.debug("%s: %s", pet.identity.id, result.message)
    return replace(
        idle,
        trained_battle_stats=pet.trained_battle_stats.with_gains(result.stats_gained),
        battle_stats=pet.battle_stats.with_gains(result.stats_gained),
    )


def cancel_training(pet: Pet, content: ContentRegistry = DEFAULT_CONTENT) -> CancelResult:
    active = pet.active_training
    if active is None:
        return CancelResult(False, pet, "No training session to cancel.")

    max_stats = calculate_pet_max_stats(pet, content)
    energy = refund_energy(pet, active.energy_cost, max_stats.energy if max_stats else None)
    cancelled = replace(
        pet,
        activity=IDLE,
        energy_stats=replace(pet.energy_stats, energy=energy),
    )
    return CancelResult(
        True,
        cancelled,
        "Training cancelled. Energy has been refunded.",
        refund=energy - pet.energy_stats.energy,
    )


def get_training_progress(training: ActiveTraining) -> int:
    return calculate_progress(training.duration_ticks, training.ticks_remaining)
