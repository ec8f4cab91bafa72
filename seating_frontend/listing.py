"""Text views of the board: the placed-items list, item details, and which
picker buildings are still available."""

from __future__ import annotations

from seating_engine import Board, Item

from .catalogs import PLACEABLE_BUILDINGS


def placed_entry(item: Item) -> str:
    """One line of the placed list, e.g. ``Alice (2x2) R5,C5``."""
    return f"{item.name} ({item.size}) R{item.footprint.row},C{item.footprint.col}"


def placed_list(board: Board) -> list[str]:
    return [placed_entry(item) for item in board.all_items()]


def item_info(board: Board, item: Item) -> dict:
    info = {
        "name": item.name,
        "type": "Player" if item.is_player else "Building",
        "size": item.size,
        "position": f"Row {item.footprint.row}, Col {item.footprint.col}",
        "coordinates": board.mapper.label(item.footprint),
    }
    if item.ring_size is not None:
        info["border"] = f"{item.ring_size}x{item.ring_size}"
    return info


def building_availability(board: Board) -> dict[str, bool]:
    return {subtype: board.is_available(subtype) for subtype in PLACEABLE_BUILDINGS}
