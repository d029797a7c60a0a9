"""Training facilities and the session types each one offers."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from petsim.config import activities as cfg
from petsim.state_machine import GrowthStage


class TrainingSessionType(Enum):
    BASIC = "basic"
    INTENSIVE = "intensive"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class TrainingSession:
    """Session parameters (energy in display units, gains in stat points)."""

    session_type: TrainingSessionType
    name: str
    duration_ticks: int
    energy_cost: int
    primary_stat_gain: int
    secondary_stat_gain: int
    min_stage: Optional[GrowthStage] = None


@dataclass(frozen=True)
class TrainingFacility:
    id: str
    name: str
    description: str
    primary_stat: str
    secondary_stat: str
    sessions: Tuple[TrainingSession, ...]

    def get_session(self, session_type: TrainingSessionType) -> Optional[TrainingSession]:
        for session in self.sessions:
            if session.session_type == session_type:
                return session
        return None


BASIC_SESSION = TrainingSession(
    session_type=TrainingSessionType.BASIC,
    name="Basic Training",
    duration_ticks=cfg.BASIC_SESSION_DURATION_TICKS,
    energy_cost=cfg.BASIC_SESSION_ENERGY_COST,
    primary_stat_gain=cfg.BASIC_SESSION_PRIMARY_GAIN,
    secondary_stat_gain=cfg.BASIC_SESSION_SECONDARY_GAIN,
)

INTENSIVE_SESSION = TrainingSession(
    session_type=TrainingSessionType.INTENSIVE,
    name="Intensive Training",
    duration_ticks=cfg.INTENSIVE_SESSION_DURATION_TICKS,
    energy_cost=cfg.INTENSIVE_SESSION_ENERGY_COST,
    primary_stat_gain=cfg.INTENSIVE_SESSION_PRIMARY_GAIN,
    secondary_stat_gain=cfg.INTENSIVE_SESSION_SECONDARY_GAIN,
    min_stage=GrowthStage.CHILD,
)

ADVANCED_SESSION = TrainingSession(
    session_type=TrainingSessionType.ADVANCED,
    name="Advanced Training",
    duration_ticks=cfg.ADVANCED_SESSION_DURATION_TICKS,
    energy_cost=cfg.ADVANCED_SESSION_ENERGY_COST,
    primary_stat_gain=cfg.ADVANCED_SESSION_PRIMARY_GAIN,
    secondary_stat_gain=cfg.ADVANCED_SESSION_SECONDARY_GAIN,
    min_stage=GrowthStage.TEEN,
)

ALL_SESSIONS = (BASIC_SESSION, INTENSIVE_SESSION, ADVANCED_SESSION)


def _facility(
    facility_id: str, name: str, description: str, primary: str, secondary: str
) -> TrainingFacility:
    return TrainingFacility(
        id=facility_id,
        name=name,
        description=description,
        primary_stat=primary,
        secondary_stat=secondary,
        sessions=ALL_SESSIONS,
    )


TRAINING_FACILITIES: Dict[str, TrainingFacility] = {
    f.id: f
    for f in (
        _facility(
            "facility_strength",
            "Strength Gym",
            "Build raw power with weight training and resistance exercises.",
            "strength",
            "endurance",
        ),
        _facility(
            "facility_endurance",
            "Stamina Track",
            "Improve staying power with long-distance running and endurance drills.",
            "endurance",
            "fortitude",
        ),
        _facility(
            "facility_agility",
            "Agility Course",
            "Develop speed and reflexes through obstacle courses and sprints.",
            "agility",
            "precision",
        ),
        _facility(
            "facility_precision",
            "Target Range",
            "Hone accuracy and focus with precision drills and target practice.",
            "precision",
            "cunning",
        ),
        _facility(
            "facility_fortitude",
            "Resilience Dojo",
            "Build mental and physical toughness through endurance challenges.",
            "fortitude",
            "cunning",
        ),
        _facility(
            "facility_cunning",
            "Tactics Arena",
            "Sharpen wit and strategy through puzzle challenges and tactical drills.",
            "cunning",
            "precision",
        ),
    )
}
