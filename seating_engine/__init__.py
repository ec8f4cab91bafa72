"""Grid placement and border geometry engine for the seating chart tool.

The public API is ``Board`` (see ``board.py``); the rest of the package is
the machinery behind it and is importable for tests and renderers.
"""

from .board import Board
from .borders import BorderMap, ItemBorders
from .config import DEFAULT_CONFIG, BoardConfig
from .coords import CoordinateMapper
from .grid import GridSpace
from .types import (
    EngineError,
    Footprint,
    GameCoords,
    InvalidArgument,
    Item,
    OutOfBounds,
    Result,
)

__all__ = [
    "Board",
    "BoardConfig",
    "BorderMap",
    "CoordinateMapper",
    "DEFAULT_CONFIG",
    "EngineError",
    "Footprint",
    "GameCoords",
    "GridSpace",
    "InvalidArgument",
    "Item",
    "ItemBorders",
    "OutOfBounds",
    "Result",
]
