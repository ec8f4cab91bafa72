"""Fixed N x N cell space: the coordinate and bounds authority.

Rows grow downward and columns grow rightward, both in ``[0, N)``. The grid
owns no items.
"""

from __future__ import annotations

from dataclasses import dataclass

from .types import Cell, Footprint, InvalidArgument, OutOfBounds


@dataclass(frozen=True)
class GridSpace:
    size: int = 30

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def cells_of(
        self, row: int, col: int, width: int, height: int
    ) -> set[Cell]:
        """Return every cell covered by the rectangle.

        Raises ``OutOfBounds`` for the first cell (row-major) that falls
        outside the grid, and ``InvalidArgument`` for non-positive sizes.
        """
        if width <= 0 or height <= 0:
            raise InvalidArgument(
                f"Footprint size must be positive, got {width}x{height}"
            )
        cells: set[Cell] = set()
        for r in range(row, row + height):
            for c in range(col, col + width):
                if not self.in_bounds(r, c):
                    raise OutOfBounds((r, c), self.size)
                cells.add((r, c))
        return cells

    def footprint_cells(self, footprint: Footprint) -> set[Cell]:
        return self.cells_of(
            footprint.row, footprint.col, footprint.width, footprint.height
        )

    def contains(self, footprint: Footprint) -> bool:
        """True if the whole footprint lies inside the grid."""
        return (
            footprint.row >= 0
            and footprint.col >= 0
            and footprint.row + footprint.height <= self.size
            and footprint.col + footprint.width <= self.size
        )
