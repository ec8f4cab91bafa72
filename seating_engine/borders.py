"""Outline geometry derived from item footprints.

Two derivations, both tagging cells with the edges they lie on (``top``,
``bottom``, ``left``, ``right``; corner cells carry two tags):

  * **Perimeter outline**: the boundary cells of an item's own footprint.
    Depends only on the footprint.
  * **Ring outline**: for ring-bearing items (the alliance city), the
    boundary cells of a square ring centred on the footprint. The ring box is
    clamped to the grid independently on each edge, so a ring near a grid
    edge becomes asymmetric. A ring cell is dropped if any footprint covers
    it, or if an earlier item's ring already claimed it.

Clamping and claim order depend on current occupancy, so ``board.py`` calls
``compute_border_map`` after every mutation and never patches the previous
map incrementally.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .occupancy import OccupancyIndex
from .types import Cell, Footprint, Item

TOP = "top"
BOTTOM = "bottom"
LEFT = "left"
RIGHT = "right"

EdgeMap = dict[Cell, frozenset[str]]


@dataclass(frozen=True)
class RingBox:
    row_start: int
    col_start: int
    row_end: int
    col_end: int


@dataclass(frozen=True)
class RingClaim:
    owner: int
    edges: frozenset[str]
    variant: int


@dataclass
class ItemBorders:
    perimeter_cells: EdgeMap
    ring_cells: EdgeMap = field(default_factory=dict)
    ring_variant: int | None = None


def _edges_of(
    r: int, c: int, top: int, left: int, bottom: int, right: int
) -> frozenset[str]:
    edges = []
    if r == top:
        edges.append(TOP)
    if r == bottom:
        edges.append(BOTTOM)
    if c == left:
        edges.append(LEFT)
    if c == right:
        edges.append(RIGHT)
    return frozenset(edges)


def _box_outline(top: int, left: int, bottom: int, right: int) -> EdgeMap:
    """Boundary cells of an inclusive box, mapped to their edge tags."""
    outline: EdgeMap = {}
    for r in range(top, bottom + 1):
        if r in (top, bottom):
            cols = range(left, right + 1)
        else:
            # Interior rows only touch the box at the left/right columns.
            cols = sorted({left, right})
        for c in cols:
            outline[(r, c)] = _edges_of(r, c, top, left, bottom, right)
    return outline


def perimeter_cells(footprint: Footprint) -> EdgeMap:
    return _box_outline(
        footprint.row,
        footprint.col,
        footprint.row + footprint.height - 1,
        footprint.col + footprint.width - 1,
    )


def ring_offset(footprint: Footprint, ring_size: int) -> int:
    return (ring_size - footprint.width) // 2


def ring_box(footprint: Footprint, ring_size: int, grid_size: int) -> RingBox:
    """Ring bounding box, each edge clamped to ``[0, grid_size - 1]``."""
    offset = ring_offset(footprint, ring_size)
    return RingBox(
        row_start=max(0, footprint.row - offset),
        col_start=max(0, footprint.col - offset),
        row_end=min(
            grid_size - 1, footprint.row + footprint.height + offset - 1
        ),
        col_end=min(
            grid_size - 1, footprint.col + footprint.width + offset - 1
        ),
    )


def ring_outline(box: RingBox) -> EdgeMap:
    """Every boundary cell of a ring box, before suppression."""
    return _box_outline(box.row_start, box.col_start, box.row_end, box.col_end)


@dataclass
class BorderMap:
    """Outline decoration for every placed item at one point in time."""

    perimeters: dict[int, EdgeMap] = field(default_factory=dict)
    ring_claims: dict[Cell, RingClaim] = field(default_factory=dict)

    def for_item(self, item: Item) -> ItemBorders:
        ring_cells = {
            cell: claim.edges
            for cell, claim in self.ring_claims.items()
            if claim.owner == item.id
        }
        return ItemBorders(
            perimeter_cells=dict(self.perimeters.get(item.id, {})),
            ring_cells=ring_cells,
            ring_variant=item.ring_size,
        )


def compute_border_map(index: OccupancyIndex) -> BorderMap:
    """Recompute all perimeter and ring outlines from the current index.

    Rings are claimed in insertion order, so the earliest ring-bearing item
    wins any cell two rings share.
    """
    occupied = index.occupancy_mask()
    grid_size = index.grid.size
    border_map = BorderMap()
    for item in index.items():
        border_map.perimeters[item.id] = perimeter_cells(item.footprint)
        if item.ring_size is None:
            continue
        box = ring_box(item.footprint, item.ring_size, grid_size)
        for cell, edges in ring_outline(box).items():
            if occupied[cell] or cell in border_map.ring_claims:
                continue
            border_map.ring_claims[cell] = RingClaim(
                owner=item.id, edges=edges, variant=item.ring_size
            )
    return border_map
