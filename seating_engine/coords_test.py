"""Tests for the grid -> game coordinate transform."""

from seating_engine.board import Board
from seating_engine.config import BoardConfig
from seating_engine.coords import CoordinateMapper
from seating_engine.types import KIND_PLAYER, Footprint, GameCoords


class TestToGame:
    def test_bottom_left_cell(self):
        m = CoordinateMapper(545, 624, 30)
        assert m.to_game(Footprint(29, 0, 1, 1)) == GameCoords(545, 624)

    def test_top_right_cell(self):
        m = CoordinateMapper(545, 624, 30)
        assert m.to_game(Footprint(0, 29, 1, 1)) == GameCoords(574, 653)

    def test_uses_bottom_left_cell_of_footprint(self):
        """A 3x3 at (0, 0) is labelled by cell (2, 0)."""
        m = CoordinateMapper(545, 624, 30)
        assert m.to_game(Footprint(0, 0, 3, 3)) == GameCoords(545, 651)

    def test_grid_centre(self):
        m = CoordinateMapper(545, 624, 30)
        assert m.to_game(Footprint(13, 13, 4, 4)) == GameCoords(558, 637)

    def test_label(self):
        m = CoordinateMapper(545, 624, 30)
        assert m.label(Footprint(28, 0, 2, 2)) == "x:545 y:624"


class TestToGrid:
    def test_inverts_to_game(self):
        m = CoordinateMapper(545, 624, 30)
        for size in (1, 2, 3, 4):
            for row in range(0, 31 - size):
                for col in range(0, 31 - size):
                    g = m.to_game(Footprint(row, col, size, size))
                    assert m.to_grid(g.x, g.y, size, size) == (row, col)


class TestFromConfig:
    def test_custom_origin(self):
        config = BoardConfig(grid_size=10, game_x_min=0, game_y_min=100)
        m = CoordinateMapper.from_config(config)
        assert m.to_game(Footprint(9, 0, 1, 1)) == GameCoords(0, 100)
        assert m.to_game(Footprint(0, 9, 1, 1)) == GameCoords(9, 109)

    def test_board_to_game_coordinates(self):
        board = Board()
        item = board.try_place(
            Footprint(29, 0, 1, 1), KIND_PLAYER, name="Corner"
        ).item
        assert board.to_game_coordinates(item) == GameCoords(545, 624)
