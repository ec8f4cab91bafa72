"""Building placement and alliance-city configuration on a board.

Translates catalog entries into engine requests. The alliance city is the
board's fixed item: it is set by level rather than placed by hand, and
changing the level replaces it.
"""

from __future__ import annotations

import logging

from seating_engine import Board, Result
from seating_engine.types import KIND_BUILDING

from .catalogs import (
    ALLIANCE_CITY_LEVELS,
    ALLIANCE_CITY_NONE,
    BUILDING_TYPES,
    PLACEABLE_BUILDINGS,
    alliance_city_spec,
    building_footprint,
    building_name,
)

log = logging.getLogger(__name__)


def place_building(board: Board, subtype: str, row: int, col: int) -> Result:
    """Place a picker building (rss tile, warehouse, dead spot) at (row, col)."""
    if subtype not in PLACEABLE_BUILDINGS:
        raise ValueError(f"{subtype!r} cannot be placed from the picker")
    return board.try_place(
        building_footprint(subtype, row, col),
        KIND_BUILDING,
        subtype,
        name=building_name(subtype),
        ring_size=BUILDING_TYPES[subtype]["ring_size"],
    )


def configure_alliance_city(board: Board, level: str) -> Result | None:
    """Set the alliance city to ``none``, ``lv3`` or ``lv4``.

    Returns None when the level is ``none`` (any existing city is removed),
    otherwise the result of placing the new city. A rejected city leaves the
    previous one in place.
    """
    spec = alliance_city_spec(level)
    if spec is None:
        board.remove_fixed()
        return None
    result = board.configure_fixed(
        spec["footprint"],
        spec["subtype"],
        name=spec["name"],
        ring_size=spec["ring_size"],
    )
    if not result.ok:
        log.warning(
            "Alliance city %s not placed: %s", level, result.error.message
        )
    return result


def current_alliance_level(board: Board) -> str:
    fixed = board.fixed_item()
    if fixed is not None:
        for level, entry in ALLIANCE_CITY_LEVELS.items():
            if entry["subtype"] == fixed.subtype:
                return level
    return ALLIANCE_CITY_NONE
