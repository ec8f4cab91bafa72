"""Placement legality: bounds, overlap, and per-subtype quantity limits.

``PlacementValidator.check`` answers "may this footprint be committed?"
against the current contents of an ``OccupancyIndex``. Checks run in order
bounds, overlap, quantity, and the first failure is returned as an
``EngineError``; ``None`` means the placement is legal.

Relocation skips the quantity check (``enforce_quantity=False``) because the
moving item already holds its subtype slot.
"""

from __future__ import annotations

import logging

from .occupancy import OccupancyIndex
from .types import (
    BUILDING_SUBTYPES,
    KIND_BUILDING,
    KIND_PLAYER,
    KINDS,
    OUT_OF_BOUNDS,
    OVERLAP,
    QUANTITY_EXCEEDED,
    RSS_TILE,
    WAREHOUSE,
    EngineError,
    Footprint,
    InvalidArgument,
    OutOfBounds,
)

log = logging.getLogger(__name__)

# Subtypes missing from this table are unlimited.
QUANTITY_LIMITS: dict[str, int] = {
    RSS_TILE: 1,
    WAREHOUSE: 1,
}
MAX_FIXED_ITEMS = 1


def validate_request(
    kind: str,
    subtype: str | None,
    footprint: Footprint,
    ring_size: int | None = None,
) -> None:
    """Reject structurally invalid requests with ``InvalidArgument``."""
    if kind not in KINDS:
        raise InvalidArgument(f"Unknown item kind: {kind!r}")
    if kind == KIND_PLAYER and subtype is not None:
        raise InvalidArgument("Players do not take a building subtype")
    if kind == KIND_BUILDING and subtype not in BUILDING_SUBTYPES:
        raise InvalidArgument(f"Unknown building subtype: {subtype!r}")
    if footprint.width <= 0 or footprint.height <= 0:
        raise InvalidArgument(
            f"Footprint size must be positive, got {footprint.size}"
        )
    if ring_size is not None:
        if footprint.width != footprint.height:
            raise InvalidArgument("Ring-bearing footprints must be square")
        if ring_size < footprint.width:
            raise InvalidArgument(
                f"Ring size {ring_size} is smaller than footprint "
                f"{footprint.size}"
            )


class PlacementValidator:
    def __init__(self, index: OccupancyIndex) -> None:
        self.index = index

    def check_geometry(self, footprint: Footprint) -> EngineError | None:
        try:
            cells = self.index.grid.footprint_cells(footprint)
        except OutOfBounds as e:
            return EngineError(kind=OUT_OF_BOUNDS, message=str(e))
        owners = self.index.owners_of(cells)
        if owners:
            names = ", ".join(
                repr(self.index.get(i).name) for i in sorted(owners)
            )
            return EngineError(
                kind=OVERLAP,
                message=(
                    f"{footprint.size} at R{footprint.row},C{footprint.col} "
                    f"overlaps {names}"
                ),
            )
        return None

    def check_quantity(
        self, subtype: str | None, is_fixed: bool = False
    ) -> EngineError | None:
        if is_fixed:
            fixed = self.index.fixed_item()
            if fixed is not None:
                return EngineError(
                    kind=QUANTITY_EXCEEDED,
                    message=(
                        f"{fixed.name} already placed. Maximum "
                        f"{MAX_FIXED_ITEMS} fixed item allowed."
                    ),
                    subtype=subtype,
                )
        limit = QUANTITY_LIMITS.get(subtype) if subtype else None
        if limit is not None and self.index.count_subtype(subtype) >= limit:
            return EngineError(
                kind=QUANTITY_EXCEEDED,
                message=f"{subtype} already placed. Maximum {limit} allowed.",
                subtype=subtype,
            )
        return None

    def check(
        self,
        footprint: Footprint,
        subtype: str | None = None,
        *,
        is_fixed: bool = False,
        enforce_quantity: bool = True,
    ) -> EngineError | None:
        error = self.check_geometry(footprint)
        if error is None and enforce_quantity:
            error = self.check_quantity(subtype, is_fixed)
        if error is not None:
            log.debug("Rejected %s: %s", footprint, error.message)
        return error
