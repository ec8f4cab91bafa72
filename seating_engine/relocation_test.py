"""Tests for atomic relocation (drag-move) of placed items."""

import numpy as np

from seating_engine.board import Board
from seating_engine.types import (
    ALLIANCE_CITY_LV3,
    KIND_BUILDING,
    KIND_PLAYER,
    NOT_FOUND,
    OUT_OF_BOUNDS,
    OVERLAP,
    PROTECTED,
    RELOCATION_REJECTED,
    RSS_TILE,
    Footprint,
)


def _snapshot(board):
    return (
        board.all_items(),
        board._index.occupancy_mask().copy(),
        dict(board.border_map().ring_claims),
    )


def _two_players():
    board = Board()
    first = board.try_place(Footprint(5, 5, 2, 2), KIND_PLAYER, name="A").item
    second = board.try_place(Footprint(5, 8, 2, 2), KIND_PLAYER, name="B").item
    return board, first, second


class TestRelocateSuccess:
    def test_moves_item(self):
        board, first, _ = _two_players()
        result = board.relocate(first.id, (10, 10))
        assert result.ok
        assert result.item.footprint == Footprint(10, 10, 2, 2)
        assert board.find_at(10, 10) == result.item
        assert board.find_at(5, 5) is None

    def test_keeps_identity_and_listing_position(self):
        board, first, second = _two_players()
        moved = board.relocate(first.id, (20, 20)).item
        assert moved.id == first.id
        assert moved.name == first.name
        assert moved.kind == first.kind
        assert [it.id for it in board.all_items()] == [first.id, second.id]

    def test_overlapping_own_old_footprint(self):
        """Shifting by one cell overlaps only the item itself: allowed."""
        board, first, _ = _two_players()
        result = board.relocate(first.id, (6, 5))
        assert result.ok
        assert board.find_at(7, 5) == result.item
        assert board.find_at(5, 5) is None

    def test_same_origin_is_noop(self):
        board, first, _ = _two_players()
        result = board.relocate(first.id, (5, 5))
        assert result.ok
        assert result.item == first

    def test_capped_subtype_can_move(self):
        """Moving the only rss tile does not trip its quantity limit."""
        board = Board()
        rss = board.try_place(
            Footprint(0, 0, 2, 2), KIND_BUILDING, RSS_TILE
        ).item
        assert board.relocate(rss.id, (10, 10)).ok
        assert board.count(subtype=RSS_TILE) == 1


class TestRelocateRejected:
    def test_overlap_restores_previous_position(self):
        board, first, second = _two_players()
        before = _snapshot(board)
        result = board.relocate(first.id, (5, 8))
        assert not result.ok
        assert result.error.kind == RELOCATION_REJECTED
        assert result.error.cause.kind == OVERLAP
        assert board.find_at(5, 5) == first
        assert board.find_at(5, 8) == second
        after = _snapshot(board)
        assert after[0] == before[0]
        assert np.array_equal(after[1], before[1])
        assert after[2] == before[2]

    def test_out_of_bounds_restores_previous_position(self):
        board, first, _ = _two_players()
        result = board.relocate(first.id, (29, 29))
        assert result.error.kind == RELOCATION_REJECTED
        assert result.error.cause.kind == OUT_OF_BOUNDS
        assert board.find_at(5, 5) == first
        assert board.find_at(6, 6) == first

    def test_restored_item_keeps_listing_position(self):
        board, first, second = _two_players()
        board.relocate(first.id, (5, 8))
        assert [it.id for it in board.all_items()] == [first.id, second.id]

    def test_restored_ring_is_rederived(self):
        board = Board()
        city = board.try_place(
            Footprint(14, 14, 2, 2),
            KIND_BUILDING,
            ALLIANCE_CITY_LV3,
            ring_size=16,
        ).item
        blocker = board.try_place(
            Footprint(0, 0, 2, 2), KIND_PLAYER, name="Z"
        ).item
        before = board.compute_borders(city).ring_cells
        assert board.relocate(city.id, (0, 1)).error.cause.kind == OVERLAP
        assert board.compute_borders(city).ring_cells == before
        assert board.find_at(0, 0) == blocker

    def test_fixed_item_protected(self):
        board = Board()
        city = board.configure_fixed(
            Footprint(14, 14, 2, 2), ALLIANCE_CITY_LV3, ring_size=16
        ).item
        result = board.relocate(city.id, (0, 0))
        assert result.error.kind == PROTECTED
        assert board.find_at(14, 14) == city

    def test_unknown_id(self):
        result = Board().relocate(42, (0, 0))
        assert result.error.kind == NOT_FOUND


class TestPreviewRelocation:
    def test_preview_matches_relocate_without_mutating(self):
        board, first, second = _two_players()
        before = _snapshot(board)
        assert board.preview_relocation(first.id, (10, 10))
        assert not board.preview_relocation(first.id, (5, 8))
        assert not board.preview_relocation(first.id, (29, 0))
        assert board.preview_relocation(first.id, (5, 6))
        after = _snapshot(board)
        assert after[0] == before[0]
        assert np.array_equal(after[1], before[1])

    def test_preview_fixed_or_missing(self):
        board = Board()
        city = board.configure_fixed(
            Footprint(14, 14, 2, 2), ALLIANCE_CITY_LV3, ring_size=16
        ).item
        assert not board.preview_relocation(city.id, (0, 0))
        assert not board.preview_relocation(999, (0, 0))
