"""World locations relevant to foraging."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class LocationType(Enum):
    HOME = "home"
    TOWN = "town"
    WILD = "wild"
    DUNGEON = "dungeon"


class FacilityType(Enum):
    REST_AREA = "rest_area"
    FOOD_STATION = "food_station"
    WATER_STATION = "water_station"
    PLAY_AREA = "play_area"
    STORAGE = "storage"
    SHOP = "shop"
    TRAINER = "trainer"
    INN = "inn"
    QUEST_BOARD = "quest_board"
    REST_POINT = "rest_point"
    FORAGE_ZONE = "forage_zone"
    BATTLE_AREA = "battle_area"


@dataclass(frozen=True)
class Location:
    id: str
    name: str
    location_type: LocationType
    facilities: Tuple[FacilityType, ...] = ()
    forage_table_id: Optional[str] = None

    def has_facility(self, facility: FacilityType) -> bool:
        return facility in self.facilities


_WILD_FACILITIES = (
    FacilityType.REST_POINT,
    FacilityType.FORAGE_ZONE,
    FacilityType.BATTLE_AREA,
)

LOCATIONS: Dict[str, Location] = {
    "home": Location(
        id="home",
        name="Home",
        location_type=LocationType.HOME,
        facilities=(
            FacilityType.REST_AREA,
            FacilityType.FOOD_STATION,
            FacilityType.WATER_STATION,
            FacilityType.PLAY_AREA,
            FacilityType.STORAGE,
        ),
    ),
    "willowbrook": Location(
        id="willowbrook",
        name="Willowbrook",
        location_type=LocationType.TOWN,
        facilities=(
            FacilityType.SHOP,
            FacilityType.TRAINER,
            FacilityType.INN,
            FacilityType.QUEST_BOARD,
        ),
    ),
    "meadow": Location(
        id="meadow",
        name="Sunny Meadow",
        location_type=LocationType.WILD,
        facilities=_WILD_FACILITIES,
        forage_table_id="meadow_forage",
    ),
    "misty_woods": Location(
        id="misty_woods",
        name="Misty Woods",
        location_type=LocationType.WILD,
        facilities=_WILD_FACILITIES,
        forage_table_id="woods_forage",
    ),
    # Coast forage data has not been authored yet
    "whispering_coast": Location(
        id="whispering_coast",
        name="Whispering Coast",
        location_type=LocationType.WILD,
        facilities=_WILD_FACILITIES,
        forage_table_id="coast_forage",
    ),
    "crystal_caves": Location(
        id="crystal_caves",
        name="Crystal Caves",
        location_type=LocationType.DUNGEON,
        facilities=(FacilityType.FORAGE_ZONE, FacilityType.BATTLE_AREA),
        forage_table_id="caves_forage",
    ),
}
