"""Authoritative set of placed items plus a cell ownership array.

Each grid cell stores the id of the item whose footprint covers it (0 means
empty), so overlap and point queries are array lookups rather than scans over
placed items. Ids are allocated here, start at 1, and are never reused within
one index.

Only ``board.py`` and ``relocation.py`` mutate an index.
"""

from __future__ import annotations

import numpy as np

from .grid import GridSpace
from .types import Cell, Footprint, Item

EMPTY = 0


class OccupancyIndex:
    def __init__(self, grid: GridSpace) -> None:
        self.grid = grid
        self._cells = np.zeros((grid.size, grid.size), dtype=np.int64)
        self._by_id: dict[int, Item] = {}
        self._order: list[int] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, item_id: int) -> bool:
        return item_id in self._by_id

    # -- Queries --

    def get(self, item_id: int) -> Item | None:
        return self._by_id.get(item_id)

    def items(self) -> list[Item]:
        """All items in insertion (listing) order."""
        return [self._by_id[i] for i in self._order]

    def position_of(self, item_id: int) -> int:
        return self._order.index(item_id)

    def owner_at(self, row: int, col: int) -> int:
        if not self.grid.in_bounds(row, col):
            return EMPTY
        return int(self._cells[row, col])

    def find_at(self, row: int, col: int) -> Item | None:
        owner = self.owner_at(row, col)
        if owner == EMPTY:
            return None
        return self._by_id[owner]

    def owners_of(self, cells: set[Cell]) -> set[int]:
        """Ids of the items covering any of the given (in-bounds) cells."""
        owners = {int(self._cells[r, c]) for r, c in cells}
        owners.discard(EMPTY)
        return owners

    def is_occupied(self, cell: Cell) -> bool:
        return self.owner_at(*cell) != EMPTY

    def count_subtype(self, subtype: str) -> int:
        return sum(1 for it in self._by_id.values() if it.subtype == subtype)

    def fixed_item(self) -> Item | None:
        for item_id in self._order:
            item = self._by_id[item_id]
            if item.is_fixed:
                return item
        return None

    def occupancy_mask(self) -> np.ndarray:
        """Boolean N x N array, True where a footprint covers the cell."""
        return self._cells != EMPTY

    # -- Mutation --

    def allocate_id(self) -> int:
        item_id = self._next_id
        self._next_id += 1
        return item_id

    def insert(self, item: Item, position: int | None = None) -> None:
        """Commit an item whose footprint has already been validated."""
        assert item.id not in self._by_id, f"duplicate item id {item.id}"
        region = self._region(item.footprint)
        assert not region.any(), f"item {item.id} overlaps an existing item"
        region[:, :] = item.id
        self._by_id[item.id] = item
        if position is None:
            self._order.append(item.id)
        else:
            self._order.insert(position, item.id)

    def delete(self, item_id: int) -> tuple[Item, int] | None:
        """Remove an item; returns it with its former listing position."""
        item = self._by_id.pop(item_id, None)
        if item is None:
            return None
        self._region(item.footprint)[:, :] = EMPTY
        position = self._order.index(item_id)
        del self._order[position]
        return item, position

    def _region(self, footprint: Footprint) -> np.ndarray:
        return self._cells[
            footprint.row : footprint.row + footprint.height,
            footprint.col : footprint.col + footprint.width,
        ]
