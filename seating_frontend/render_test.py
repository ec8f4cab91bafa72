"""Tests for the Pillow board renderer."""

import pytest
from PIL import ImageColor

from seating_engine import Board, BoardConfig
from seating_engine.borders import BOTTOM, LEFT, RIGHT, TOP
from seating_engine.types import KIND_PLAYER, RSS_TILE, Footprint

from seating_frontend.buildings import configure_alliance_city, place_building
from seating_frontend.render import (
    BUILDING_FILLS,
    GRID_BG,
    PLAYER_FILLS,
    PREVIEW_INVALID,
    PREVIEW_VALID,
    RING_STYLES,
    BoardRenderer,
)


def _rgb(color):
    return ImageColor.getrgb(color)


def _centre(renderer, row, col):
    x0, y0, x1, y1 = renderer.cell_rect(row, col)
    return ((x0 + x1) // 2, (y0 + y1) // 2)


class TestGeometry:
    def test_image_size_follows_grid(self):
        assert BoardRenderer().image_size == 750
        assert BoardRenderer(grid_size=10, cell_px=8).image_size == 80

    def test_cell_rect(self):
        assert BoardRenderer().cell_rect(1, 2) == (50, 25, 74, 49)

    def test_edge_segments(self):
        r = BoardRenderer()
        assert r.edge_segment((0, 0), TOP) == [(0, 0), (24, 0)]
        assert r.edge_segment((0, 0), BOTTOM) == [(0, 24), (24, 24)]
        assert r.edge_segment((0, 0), LEFT) == [(0, 0), (0, 24)]
        assert r.edge_segment((0, 0), RIGHT) == [(24, 0), (24, 24)]
        with pytest.raises(ValueError):
            r.edge_segment((0, 0), "diagonal")


class TestRender:
    def test_empty_board(self):
        renderer = BoardRenderer()
        img = renderer.render(Board())
        assert img.size == (750, 750)
        assert img.getpixel(_centre(renderer, 3, 3)) == _rgb(GRID_BG)

    def test_item_fills(self):
        board = Board()
        board.try_place(Footprint(5, 5, 3, 3), KIND_PLAYER, name="A")
        place_building(board, RSS_TILE, 20, 20)
        renderer = BoardRenderer()
        img = renderer.render(board)
        # Interior cells, away from the name label in the top-left cell.
        assert img.getpixel(_centre(renderer, 6, 6)) == _rgb(PLAYER_FILLS["3x3"])
        assert img.getpixel(_centre(renderer, 21, 21)) == _rgb(BUILDING_FILLS[RSS_TILE])

    def test_ring_outline_drawn(self):
        board = Board()
        configure_alliance_city(board, "lv3")
        renderer = BoardRenderer()
        img = renderer.render(board)
        # Middle of the top edge of ring cell (7, 10).
        x0, y0, x1, _ = renderer.cell_rect(7, 10)
        color, _ = RING_STYLES[16]
        assert img.getpixel(((x0 + x1) // 2, y0)) == _rgb(color)

    def test_small_grid(self):
        board = Board(BoardConfig(grid_size=6))
        board.try_place(Footprint(4, 4, 2, 2), KIND_PLAYER, name="A")
        img = BoardRenderer(grid_size=6).render(board, show_coordinates=True)
        assert img.size == (150, 150)


class TestPreview:
    def _board(self):
        board = Board()
        first = board.try_place(Footprint(5, 5, 2, 2), KIND_PLAYER, name="A").item
        board.try_place(Footprint(5, 9, 2, 2), KIND_PLAYER, name="B")
        return board, first

    def test_valid_preview_is_green(self):
        board, first = self._board()
        renderer = BoardRenderer()
        img = renderer.render(board, preview=(first.id, (15, 15)))
        x0, y0, _, _ = renderer.cell_rect(15, 15)
        assert img.getpixel((x0, y0)) == _rgb(PREVIEW_VALID)

    def test_invalid_preview_is_red(self):
        board, first = self._board()
        renderer = BoardRenderer()
        img = renderer.render(board, preview=(first.id, (5, 8)))
        x0, y0, _, _ = renderer.cell_rect(5, 8)
        assert img.getpixel((x0, y0)) == _rgb(PREVIEW_INVALID)

    def test_preview_does_not_move_item(self):
        board, first = self._board()
        BoardRenderer().render(board, preview=(first.id, (15, 15)))
        assert board.find_at(5, 5) == first
        assert board.find_at(15, 15) is None
