"""Grid cell <-> external game coordinate transform.

Grid rows grow downward while game Y grows upward, so Y is flipped; game X
tracks the grid column directly. An item is labelled by its bottom-left
cell: (row 29, col 0) is (x_min, y_min) and (row 0, col 29) is
(x_min + 29, y_min + 29) on the default 30x30 grid.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import BoardConfig
from .types import Footprint, GameCoords


@dataclass(frozen=True)
class CoordinateMapper:
    x_min: int = 545
    y_min: int = 624
    grid_size: int = 30

    @staticmethod
    def from_config(config: BoardConfig) -> CoordinateMapper:
        return CoordinateMapper(
            x_min=config.game_x_min,
            y_min=config.game_y_min,
            grid_size=config.grid_size,
        )

    def cell_to_game(self, row: int, col: int) -> GameCoords:
        return GameCoords(
            x=self.x_min + col,
            y=self.y_min + (self.grid_size - 1 - row),
        )

    def to_game(self, footprint: Footprint) -> GameCoords:
        """Game coordinates of the footprint's bottom-left cell."""
        return self.cell_to_game(
            footprint.row + footprint.height - 1, footprint.col
        )

    def to_grid(self, x: int, y: int, width: int, height: int) -> tuple[int, int]:
        """Inverse of ``to_game``: the (row, col) origin for a footprint."""
        bottom_row = self.grid_size - 1 - (y - self.y_min)
        return bottom_row - height + 1, x - self.x_min

    def label(self, footprint: Footprint) -> str:
        coords = self.to_game(footprint)
        return f"x:{coords.x} y:{coords.y}"
