"""Read-only lookup facade over the content tables.

The engine never indexes the table dicts directly. Every lookup goes through
a ``ContentRegistry`` and returns ``None`` for unknown ids, so a missing
species or location degrades to a rejected operation instead of a crash.
Tests build registries with trimmed or extended tables to exercise those
paths.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from petsim.config.growth import GROWTH_RATE_GAINS
from petsim.content.facilities import TRAINING_FACILITIES, TrainingFacility
from petsim.content.forage import FORAGE_TABLES, ForageTable
from petsim.content.growth_stages import GROWTH_STAGE_DEFINITIONS, GrowthStageDefinition
from petsim.content.items import ITEMS, CareItem
from petsim.content.locations import LOCATIONS, Location
from petsim.content.moves import MOVES, Move
from petsim.content.species import SPECIES, Species
from petsim.exceptions import ContentError
from petsim.pet.models import BATTLE_STAT_NAMES, STARTER_MOVE_IDS
from petsim.result import Err, Ok, Result, collect_results
from petsim.state_machine import GROWTH_STAGE_ORDER, GrowthStage


@dataclass(frozen=True)
class ContentRegistry:
    species: Mapping[str, Species] = field(default_factory=lambda: dict(SPECIES))
    growth_stages: Mapping[GrowthStage, GrowthStageDefinition] = field(
        default_factory=lambda: dict(GROWTH_STAGE_DEFINITIONS)
    )
    locations: Mapping[str, Location] = field(default_factory=lambda: dict(LOCATIONS))
    forage_tables: Mapping[str, ForageTable] = field(default_factory=lambda: dict(FORAGE_TABLES))
    facilities: Mapping[str, TrainingFacility] = field(
        default_factory=lambda: dict(TRAINING_FACILITIES)
    )
    moves: Mapping[str, Move] = field(default_factory=lambda: dict(MOVES))
    items: Mapping[str, CareItem] = field(default_factory=lambda: dict(ITEMS))

    def get_species(self, species_id: str) -> Optional[Species]:
        return self.species.get(species_id)

    def get_growth_stage(self, stage: GrowthStage) -> Optional[GrowthStageDefinition]:
        return self.growth_stages.get(stage)

    def get_location(self, location_id: str) -> Optional[Location]:
        return self.locations.get(location_id)

    def get_forage_table(self, table_id: str) -> Optional[ForageTable]:
        return self.forage_tables.get(table_id)

    def get_facility(self, facility_id: str) -> Optional[TrainingFacility]:
        return self.facilities.get(facility_id)

    def get_move(self, move_id: str) -> Optional[Move]:
        return self.moves.get(move_id)

    def get_item(self, item_id: str) -> Optional[CareItem]:
        return self.items.get(item_id)

    def validate(self) -> None:
        """Check cross-table references.

        Locations may name forage tables that are not authored yet; that is
        reported to players at forage time and is not an error here.

        Raises:
            ContentError: On the first broken reference found
        """
        checks: List[Result[None, str]] = []
        checks.extend(self._check_stage(stage) for stage in GROWTH_STAGE_ORDER)
        checks.extend(self._check_species(s) for s in self.species.values())
        checks.extend(self._check_facility(f) for f in self.facilities.values())
        checks.extend(self._check_forage_table(t) for t in self.forage_tables.values())
        checks.extend(self._check_move(move_id) for move_id in STARTER_MOVE_IDS)

        result = collect_results(checks)
        if result.is_err():
            raise ContentError(result.error)

    def _check_stage(self, stage: GrowthStage) -> Result[None, str]:
        if stage not in self.growth_stages:
            return Err(f"Missing growth stage definition: {stage.value}")
        return Ok(None)

    def _check_species(self, species: Species) -> Result[None, str]:
        for stat, rate in species.stat_growth.items():
            if stat not in BATTLE_STAT_NAMES:
                return Err(f"Species {species.id} grows unknown stat {stat!r}")
            if rate not in GROWTH_RATE_GAINS:
                return Err(f"Species {species.id} has unknown growth rate {rate!r}")
        return Ok(None)

    def _check_facility(self, facility: TrainingFacility) -> Result[None, str]:
        for stat in (facility.primary_stat, facility.secondary_stat):
            if stat not in BATTLE_STAT_NAMES:
                return Err(f"Facility {facility.id} trains unknown stat {stat!r}")
        return Ok(None)

    def _check_forage_table(self, table: ForageTable) -> Result[None, str]:
        for entry in table.entries:
            low, high = entry.quantity
            if low > high or low < 0:
                return Err(f"Forage table {table.id} has bad quantity for {entry.item_id}")
            if not 0.0 <= entry.base_drop_rate <= 1.0:
                return Err(f"Forage table {table.id} has bad drop rate for {entry.item_id}")
        return Ok(None)

    def _check_move(self, move_id: str) -> Result[None, str]:
        if move_id not in self.moves:
            return Err(f"Starter move {move_id} is not defined")
        return Ok(None)


DEFAULT_CONTENT = ContentRegistry()


def build_registry(**overrides: Dict) -> ContentRegistry:
    """Create a registry with some tables replaced, e.g. ``species={}``."""
    return ContentRegistry(**overrides)
