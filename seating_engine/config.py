"""Board configuration: grid size and the external game-coordinate origin.

The grid covers the map region x:545-574, y:624-653 (30x30 cells, one game
unit per cell). Both the occupancy index and the coordinate mapper derive
their dimensions from a single ``BoardConfig``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .types import InvalidArgument


@dataclass(frozen=True)
class BoardConfig:
    grid_size: int = 30
    """Side length of the square grid, in cells."""

    game_x_min: int = 545
    """Game X of grid column 0."""

    game_y_min: int = 624
    """Game Y of the bottom grid row."""

    def __post_init__(self) -> None:
        if self.grid_size <= 0:
            raise InvalidArgument(
                f"grid_size must be positive, got {self.grid_size}"
            )

    @staticmethod
    def from_dict(d: dict | None) -> BoardConfig:
        if not d:
            return BoardConfig()
        return BoardConfig(
            grid_size=d.get("grid_size", 30),
            game_x_min=d.get("game_x_min", 545),
            game_y_min=d.get("game_y_min", 624),
        )

    def to_dict(self) -> dict:
        return {
            "grid_size": self.grid_size,
            "game_x_min": self.game_x_min,
            "game_y_min": self.game_y_min,
        }


# Module-level singleton used when no config is passed.
DEFAULT_CONFIG = BoardConfig()
