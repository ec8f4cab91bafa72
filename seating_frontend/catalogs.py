"""Building catalog and alliance-city levels.

Pure data module with no engine state, so it can be imported by headless
scripts as well as the renderer.

Provides:
  - BUILDING_TYPES: subtype -> display name, size, ring size and quantity
    limit (None = unlimited). Limits mirror ``validation.QUANTITY_LIMITS``.
  - ALLIANCE_CITY_LEVELS: level ("lv3" / "lv4") -> fixed footprint and ring
    centred on the 30x30 grid ("none" means no alliance city).
  - PLAYER_SIZES: the keep sizes a player can have.
"""

from __future__ import annotations

from seating_engine.types import (
    ALLIANCE_CITY_LV3,
    ALLIANCE_CITY_LV4,
    DEAD_SPOT,
    RSS_TILE,
    WAREHOUSE,
    Footprint,
)
from seating_engine.validation import QUANTITY_LIMITS

PLAYER_SIZES = ("2x2", "3x3")
DEFAULT_PLAYER_SIZE = "2x2"

BUILDING_TYPES = {
    ALLIANCE_CITY_LV3: {
        "name": "Alliance City Lv3",
        "size": "2x2",
        "ring_size": 16,
        "quantity": 1,
    },
    ALLIANCE_CITY_LV4: {
        "name": "Alliance City Lv4",
        "size": "4x4",
        "ring_size": 20,
        "quantity": 1,
    },
    RSS_TILE: {
        "name": "RSS Tile",
        "size": "2x2",
        "ring_size": None,
        "quantity": QUANTITY_LIMITS[RSS_TILE],
    },
    WAREHOUSE: {
        "name": "Warehouse",
        "size": "2x2",
        "ring_size": None,
        "quantity": QUANTITY_LIMITS[WAREHOUSE],
    },
    DEAD_SPOT: {
        "name": "Dead Spot",
        "size": "1x1",
        "ring_size": None,
        "quantity": None,
    },
}

# Placeable from the building picker; the alliance city comes from its level.
PLACEABLE_BUILDINGS = (RSS_TILE, WAREHOUSE, DEAD_SPOT)

# The grid centre is at row/col 14.5 (game x:560, y:639).
ALLIANCE_CITY_LEVELS = {
    "lv3": {"subtype": ALLIANCE_CITY_LV3, "row": 14, "col": 14},
    "lv4": {"subtype": ALLIANCE_CITY_LV4, "row": 13, "col": 13},
}
ALLIANCE_CITY_NONE = "none"


def building_name(subtype: str) -> str:
    entry = BUILDING_TYPES.get(subtype)
    return entry["name"] if entry else "Building"


def building_footprint(subtype: str, row: int, col: int) -> Footprint:
    """Footprint of a catalog building with its origin at (row, col)."""
    if subtype not in BUILDING_TYPES:
        raise ValueError(f"Unknown building type: {subtype!r}")
    return Footprint.from_size(row, col, BUILDING_TYPES[subtype]["size"])


def alliance_city_spec(level: str) -> dict | None:
    """Resolve a level to subtype, name, footprint and ring size.

    Returns None for "none"; raises ValueError for unknown levels.
    """
    if level == ALLIANCE_CITY_NONE:
        return None
    if level not in ALLIANCE_CITY_LEVELS:
        raise ValueError(f"Unknown alliance city level: {level!r}")
    entry = ALLIANCE_CITY_LEVELS[level]
    subtype = entry["subtype"]
    building = BUILDING_TYPES[subtype]
    return {
        "subtype": subtype,
        "name": building["name"],
        "footprint": building_footprint(subtype, entry["row"], entry["col"]),
        "ring_size": building["ring_size"],
    }
