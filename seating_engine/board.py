"""The board: the single entry point collaborators use to change the grid.

``Board`` composes the grid, occupancy index, validator, relocation and
border derivation. Every mutating operation returns a ``Result`` and, when it
commits, rebuilds the border map so that ring clamping and first-claim-wins
reflect the new occupancy.

Mutating operations:

  * ``try_place``: validate and commit a new item (bounds, overlap,
    quantity limits).
  * ``remove``: delete a non-fixed item and hand it back.
  * ``relocate``: atomic move with restore-on-failure.
  * ``configure_fixed`` / ``remove_fixed``: replace or drop the single
    fixed item (the alliance city), bypassing the fixed-count check.
  * ``clear``: remove every item, optionally keeping the fixed one.
"""

from __future__ import annotations

import logging

from . import relocation
from .borders import BorderMap, ItemBorders, compute_border_map
from .config import DEFAULT_CONFIG, BoardConfig
from .coords import CoordinateMapper
from .grid import GridSpace
from .occupancy import OccupancyIndex
from .types import (
    KIND_BUILDING,
    KIND_PLAYER,
    NOT_FOUND,
    PROTECTED,
    Cell,
    EngineError,
    Footprint,
    GameCoords,
    InvalidArgument,
    Item,
    Result,
)
from .validation import PlacementValidator, validate_request

log = logging.getLogger(__name__)


class Board:
    def __init__(self, config: BoardConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.grid = GridSpace(self.config.grid_size)
        self.mapper = CoordinateMapper.from_config(self.config)
        self._index = OccupancyIndex(self.grid)
        self._validator = PlacementValidator(self._index)
        self._borders = BorderMap()

    def __len__(self) -> int:
        return len(self._index)

    # -- Queries --

    def get(self, item_id: int) -> Item | None:
        return self._index.get(item_id)

    def find_at(self, row: int, col: int) -> Item | None:
        return self._index.find_at(row, col)

    def all_items(self) -> list[Item]:
        return self._index.items()

    def fixed_item(self) -> Item | None:
        return self._index.fixed_item()

    def count(self, kind: str | None = None, subtype: str | None = None) -> int:
        return sum(
            1
            for it in self._index.items()
            if (kind is None or it.kind == kind)
            and (subtype is None or it.subtype == subtype)
        )

    def is_available(self, subtype: str) -> bool:
        """True if another building of this subtype may be placed."""
        return self._validator.check_quantity(subtype) is None

    def check_placement(
        self, footprint: Footprint, subtype: str | None = None
    ) -> EngineError | None:
        """Validate a candidate footprint without committing it."""
        return self._validator.check(footprint, subtype)

    def compute_borders(self, item: Item) -> ItemBorders:
        return self._borders.for_item(item)

    def border_map(self) -> BorderMap:
        return self._borders

    def to_game_coordinates(self, item: Item) -> GameCoords:
        return self.mapper.to_game(item.footprint)

    # -- Mutation --

    def try_place(
        self,
        footprint: Footprint,
        kind: str,
        subtype: str | None = None,
        *,
        name: str | None = None,
        ring_size: int | None = None,
        is_fixed: bool = False,
    ) -> Result:
        validate_request(kind, subtype, footprint, ring_size)
        if kind == KIND_PLAYER and not name:
            raise InvalidArgument("Players need a name")
        error = self._validator.check(footprint, subtype, is_fixed=is_fixed)
        if error is not None:
            return Result.failure(error)
        item = self._commit(footprint, kind, subtype, name, ring_size, is_fixed)
        log.info(
            "Placed %r (%s) at R%d,C%d",
            item.name,
            item.size,
            footprint.row,
            footprint.col,
        )
        return Result.success(item)

    def remove(self, item_id: int) -> Result:
        item = self._index.get(item_id)
        if item is None:
            return Result.failure(
                EngineError(kind=NOT_FOUND, message=f"No item with id {item_id}")
            )
        if item.is_fixed:
            return Result.failure(
                EngineError(
                    kind=PROTECTED,
                    message=f"{item.name} can only be changed via its level",
                    subtype=item.subtype,
                )
            )
        self._index.delete(item_id)
        self._refresh_borders()
        log.info("Removed %r from R%d,C%d", item.name, *item.footprint.origin)
        return Result.success(item)

    def relocate(self, item_id: int, new_origin: Cell) -> Result:
        result = relocation.relocate(
            self._index, self._validator, item_id, new_origin
        )
        # Rebuilt on rejection too, for the restored item.
        self._refresh_borders()
        return result

    def preview_relocation(self, item_id: int, new_origin: Cell) -> bool:
        return relocation.preview(
            self._index, self._validator, item_id, new_origin
        )

    def configure_fixed(
        self,
        footprint: Footprint,
        subtype: str,
        *,
        name: str | None = None,
        ring_size: int | None = None,
    ) -> Result:
        """Replace the fixed item with a new one.

        The previous fixed item is removed first; if the new one cannot be
        placed the previous one is put back and the error returned.
        """
        validate_request(KIND_BUILDING, subtype, footprint, ring_size)
        previous = self._index.fixed_item()
        removed = self._index.delete(previous.id) if previous else None
        try:
            error = self._validator.check(footprint, subtype)
        except Exception:
            self._restore(removed)
            raise
        if error is not None:
            self._restore(removed)
            return Result.failure(error)
        item = self._commit(
            footprint, KIND_BUILDING, subtype, name, ring_size, True
        )
        log.info(
            "Configured fixed item %r at R%d,C%d (replacing %s)",
            item.name,
            footprint.row,
            footprint.col,
            repr(previous.name) if previous else "nothing",
        )
        return Result.success(item)

    def remove_fixed(self) -> Item | None:
        previous = self._index.fixed_item()
        if previous is None:
            return None
        self._index.delete(previous.id)
        self._refresh_borders()
        log.info("Removed fixed item %r", previous.name)
        return previous

    def clear(self, keep_fixed: bool = True) -> list[Item]:
        """Remove all items (except the fixed one if ``keep_fixed``).

        Returns the removed items in listing order.
        """
        removed = []
        for item in self._index.items():
            if keep_fixed and item.is_fixed:
                continue
            self._index.delete(item.id)
            removed.append(item)
        self._refresh_borders()
        log.info("Cleared %d item(s)", len(removed))
        return removed

    # -- Internals --

    def _commit(
        self,
        footprint: Footprint,
        kind: str,
        subtype: str | None,
        name: str | None,
        ring_size: int | None,
        is_fixed: bool,
    ) -> Item:
        item = Item(
            id=self._index.allocate_id(),
            kind=kind,
            name=name or subtype or "",
            footprint=footprint,
            subtype=subtype,
            ring_size=ring_size,
            is_fixed=is_fixed,
        )
        self._index.insert(item)
        self._refresh_borders()
        return item

    def _restore(self, removed: tuple[Item, int] | None) -> None:
        if removed is not None:
            self._index.insert(removed[0], position=removed[1])

    def _refresh_borders(self) -> None:
        self._borders = compute_border_map(self._index)
