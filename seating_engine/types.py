"""Data types for the seating chart grid engine.

Items, footprints, and the result/error values returned by every board
operation. Domain failures (overlap, out of bounds, quantity limits, ...) are
returned as ``EngineError`` values inside a ``Result``; only structurally
invalid input raises (``InvalidArgument``).
"""

from __future__ import annotations

from dataclasses import dataclass, replace

Cell = tuple[int, int]

# -- Item kinds and building subtypes --

KIND_PLAYER = "player"
KIND_BUILDING = "building"
KINDS = (KIND_PLAYER, KIND_BUILDING)

ALLIANCE_CITY_LV3 = "alliance-city-lv3"
ALLIANCE_CITY_LV4 = "alliance-city-lv4"
RSS_TILE = "rss-tile"
WAREHOUSE = "warehouse"
DEAD_SPOT = "dead-spot"
BUILDING_SUBTYPES = (
    ALLIANCE_CITY_LV3,
    ALLIANCE_CITY_LV4,
    RSS_TILE,
    WAREHOUSE,
    DEAD_SPOT,
)

# -- Error kinds --

OUT_OF_BOUNDS = "out_of_bounds"
OVERLAP = "overlap"
QUANTITY_EXCEEDED = "quantity_exceeded"
NOT_FOUND = "not_found"
PROTECTED = "protected"
RELOCATION_REJECTED = "relocation_rejected"


class InvalidArgument(ValueError):
    """A structurally invalid request (e.g. negative width).

    This is a programming error on the caller's side, not a user-facing
    placement failure.
    """


class OutOfBounds(Exception):
    """Raised by ``GridSpace.cells_of`` when a cell falls outside the grid."""

    def __init__(self, cell: Cell, grid_size: int) -> None:
        self.cell = cell
        self.grid_size = grid_size
        super().__init__(
            f"Cell (row={cell[0]}, col={cell[1]}) is outside the "
            f"{grid_size}x{grid_size} grid"
        )


@dataclass(frozen=True)
class Footprint:
    """Axis-aligned rectangle of cells; (row, col) is the top-left cell."""

    row: int
    col: int
    width: int
    height: int

    @property
    def size(self) -> str:
        return f"{self.width}x{self.height}"

    @property
    def origin(self) -> Cell:
        return (self.row, self.col)

    def moved_to(self, origin: Cell) -> Footprint:
        return replace(self, row=origin[0], col=origin[1])

    def contains(self, row: int, col: int) -> bool:
        return (
            self.row <= row < self.row + self.height
            and self.col <= col < self.col + self.width
        )

    @staticmethod
    def from_size(row: int, col: int, size: str) -> Footprint:
        """Build a footprint from a ``"<w>x<h>"`` size string."""
        try:
            w, h = (int(part) for part in size.lower().split("x"))
        except ValueError:
            raise InvalidArgument(f"Malformed size: {size!r}") from None
        return Footprint(row, col, w, h)

    @staticmethod
    def from_dict(d: dict) -> Footprint:
        return Footprint(
            row=d["row"],
            col=d["col"],
            width=d["width"],
            height=d["height"],
        )

    def to_dict(self) -> dict:
        return {
            "row": self.row,
            "col": self.col,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class Item:
    id: int
    kind: str
    name: str
    footprint: Footprint
    subtype: str | None = None
    ring_size: int | None = None
    is_fixed: bool = False

    @property
    def size(self) -> str:
        return self.footprint.size

    @property
    def is_player(self) -> bool:
        return self.kind == KIND_PLAYER

    def to_dict(self) -> dict:
        d: dict = {
            "id": self.id,
            "kind": self.kind,
            "name": self.name,
            "footprint": self.footprint.to_dict(),
        }
        if self.subtype:
            d["subtype"] = self.subtype
        if self.ring_size is not None:
            d["ring_size"] = self.ring_size
        if self.is_fixed:
            d["is_fixed"] = True
        return d


@dataclass(frozen=True)
class GameCoords:
    x: int
    y: int


@dataclass(frozen=True)
class EngineError:
    kind: str
    message: str
    subtype: str | None = None
    cause: EngineError | None = None


@dataclass(frozen=True)
class Result:
    """Outcome of a board operation: exactly one of item/error is set."""

    item: Item | None = None
    error: EngineError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def success(item: Item) -> Result:
        return Result(item=item)

    @staticmethod
    def failure(error: EngineError) -> Result:
        return Result(error=error)
