"""Atomic move of a placed item to a new origin.

The move is done in place on the index: the item is taken out, the new
footprint is validated against everything else, and either the moved item is
committed or the original is put back from its ``MoveUndo`` token. Either way
the index ends in a consistent state; on rejection it is identical to the
state before the attempt, including listing order and ids.

The moved item keeps its id and listing position. Quantity limits are not
re-checked since the item already owns its subtype slot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from .occupancy import OccupancyIndex
from .types import (
    NOT_FOUND,
    PROTECTED,
    RELOCATION_REJECTED,
    Cell,
    EngineError,
    Item,
    Result,
)
from .validation import PlacementValidator

log = logging.getLogger(__name__)


@dataclass
class MoveUndo:
    item: Item
    position: int


def _undo_move(index: OccupancyIndex, undo: MoveUndo) -> None:
    if undo.item.id in index:
        index.delete(undo.item.id)
    index.insert(undo.item, position=undo.position)


def check_movable(index: OccupancyIndex, item_id: int) -> EngineError | None:
    item = index.get(item_id)
    if item is None:
        return EngineError(kind=NOT_FOUND, message=f"No item with id {item_id}")
    if item.is_fixed:
        return EngineError(
            kind=PROTECTED, message=f"{item.name} cannot be moved"
        )
    return None


def relocate(
    index: OccupancyIndex,
    validator: PlacementValidator,
    item_id: int,
    new_origin: Cell,
) -> Result:
    error = check_movable(index, item_id)
    if error is not None:
        return Result.failure(error)
    item = index.get(item_id)
    assert item is not None
    if item.footprint.origin == tuple(new_origin):
        return Result.success(item)

    moved = replace(item, footprint=item.footprint.moved_to(new_origin))
    removed = index.delete(item_id)
    assert removed is not None
    undo = MoveUndo(item=removed[0], position=removed[1])
    try:
        error = validator.check(
            moved.footprint, moved.subtype, enforce_quantity=False
        )
        if error is None:
            index.insert(moved, position=undo.position)
    except Exception:
        _undo_move(index, undo)
        raise

    if error is not None:
        _undo_move(index, undo)
        log.debug(
            "Relocation of %r to %s rejected: %s",
            item.name,
            new_origin,
            error.message,
        )
        return Result.failure(
            EngineError(
                kind=RELOCATION_REJECTED,
                message=f"Cannot move {item.name} here: {error.message}",
                subtype=item.subtype,
                cause=error,
            )
        )

    log.info(
        "Moved %r from R%d,C%d to R%d,C%d",
        item.name,
        item.footprint.row,
        item.footprint.col,
        moved.footprint.row,
        moved.footprint.col,
    )
    return Result.success(moved)


def preview(
    index: OccupancyIndex,
    validator: PlacementValidator,
    item_id: int,
    new_origin: Cell,
) -> bool:
    """Would ``relocate`` succeed? Leaves the index untouched."""
    if check_movable(index, item_id) is not None:
        return False
    item = index.get(item_id)
    assert item is not None
    removed = index.delete(item_id)
    assert removed is not None
    try:
        footprint = item.footprint.moved_to(new_origin)
        return validator.check_geometry(footprint) is None
    finally:
        _undo_move(index, MoveUndo(item=removed[0], position=removed[1]))
