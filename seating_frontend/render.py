"""Draw a board to a Pillow image.

Rendering is a one-way projection of engine state: it reads the board's
items and border map and never feeds anything back. Layers, bottom to top:

  1. Grass background and cell grid lines.
  2. Item fills, coloured by player size or building subtype.
  3. Ring outlines (the alliance city's influence border), styled by ring
     size so a 20-wide ring reads differently from a 16-wide one.
  4. Item perimeter outlines, drawn as one continuous border per item.
  5. Name labels, and game-coordinate labels when requested.
  6. Optional drag preview: the footprint an item would occupy at a new
     origin, outlined green if the move is legal and red if not.
"""

from __future__ import annotations

from PIL import Image, ImageDraw, ImageFont

from seating_engine import Board, Item
from seating_engine.borders import BOTTOM, LEFT, RIGHT, TOP
from seating_engine.types import (
    ALLIANCE_CITY_LV3,
    ALLIANCE_CITY_LV4,
    DEAD_SPOT,
    RSS_TILE,
    WAREHOUSE,
    Cell,
)

# -- Visual constants --

CELL_PX = 25
GRID_BG = "#8BC34A"
GRID_LINE = "#689F38"
ITEM_OUTLINE = "#1B1B1B"
LABEL_COLOR = "#FFFFFF"
COORD_LABEL_COLOR = "#FFEB3B"
PREVIEW_VALID = "#00FF00"
PREVIEW_INVALID = "#FF4444"

PLAYER_FILLS = {
    "2x2": "#42A5F5",
    "3x3": "#1E88E5",
}
DEFAULT_PLAYER_FILL = "#64B5F6"
BUILDING_FILLS = {
    ALLIANCE_CITY_LV3: "#FFB74D",
    ALLIANCE_CITY_LV4: "#FF8A65",
    RSS_TILE: "#FDD835",
    WAREHOUSE: "#8D6E63",
    DEAD_SPOT: "#616161",
}
DEFAULT_BUILDING_FILL = "#9E9E9E"

# ring size -> (colour, line width in px)
RING_STYLES = {
    16: ("#FF6D00", 2),
    20: ("#E64A19", 3),
}
DEFAULT_RING_STYLE = ("#FF6D00", 2)


def item_fill(item: Item) -> str:
    if item.is_player:
        return PLAYER_FILLS.get(item.size, DEFAULT_PLAYER_FILL)
    return BUILDING_FILLS.get(item.subtype, DEFAULT_BUILDING_FILL)


class BoardRenderer:
    def __init__(self, grid_size: int = 30, cell_px: int = CELL_PX) -> None:
        self.grid_size = grid_size
        self.cell_px = cell_px
        self.font = ImageFont.load_default()

    @property
    def image_size(self) -> int:
        return self.grid_size * self.cell_px

    def cell_rect(self, row: int, col: int) -> tuple[int, int, int, int]:
        """Pixel box (x0, y0, x1, y1) of a cell, inclusive."""
        x0 = col * self.cell_px
        y0 = row * self.cell_px
        return (x0, y0, x0 + self.cell_px - 1, y0 + self.cell_px - 1)

    def edge_segment(
        self, cell: Cell, edge: str
    ) -> list[tuple[int, int]]:
        x0, y0, x1, y1 = self.cell_rect(*cell)
        if edge == TOP:
            return [(x0, y0), (x1, y0)]
        if edge == BOTTOM:
            return [(x0, y1), (x1, y1)]
        if edge == LEFT:
            return [(x0, y0), (x0, y1)]
        if edge == RIGHT:
            return [(x1, y0), (x1, y1)]
        raise ValueError(f"Unknown edge: {edge!r}")

    def render(
        self,
        board: Board,
        show_coordinates: bool = False,
        preview: tuple[int, Cell] | None = None,
    ) -> Image.Image:
        size = self.image_size
        img = Image.new("RGB", (size, size), GRID_BG)
        draw = ImageDraw.Draw(img)

        # 1. Grid lines
        for i in range(self.grid_size + 1):
            p = min(i * self.cell_px, size - 1)
            draw.line([(p, 0), (p, size - 1)], fill=GRID_LINE, width=1)
            draw.line([(0, p), (size - 1, p)], fill=GRID_LINE, width=1)

        items = board.all_items()
        border_map = board.border_map()

        # 2. Item fills
        for item in items:
            fp = item.footprint
            x0, y0, _, _ = self.cell_rect(fp.row, fp.col)
            _, _, x1, y1 = self.cell_rect(
                fp.row + fp.height - 1, fp.col + fp.width - 1
            )
            draw.rectangle([x0, y0, x1, y1], fill=item_fill(item))

        # 3. Ring outlines
        for cell, claim in border_map.ring_claims.items():
            color, width = RING_STYLES.get(claim.variant, DEFAULT_RING_STYLE)
            for edge in sorted(claim.edges):
                draw.line(self.edge_segment(cell, edge), fill=color, width=width)

        # 4. Perimeter outlines
        for item in items:
            borders = board.compute_borders(item)
            for cell, edges in borders.perimeter_cells.items():
                for edge in sorted(edges):
                    draw.line(
                        self.edge_segment(cell, edge),
                        fill=ITEM_OUTLINE,
                        width=2,
                    )

        # 5. Labels
        for item in items:
            x0, y0, _, _ = self.cell_rect(item.footprint.row, item.footprint.col)
            draw.text((x0 + 3, y0 + 3), item.name, fill=LABEL_COLOR, font=self.font)
            if show_coordinates:
                draw.text(
                    (x0 + 3, y0 + 14),
                    board.mapper.label(item.footprint),
                    fill=COORD_LABEL_COLOR,
                    font=self.font,
                )

        # 6. Drag preview
        if preview is not None:
            self._draw_preview(draw, board, *preview)

        return img

    def _draw_preview(
        self, draw: ImageDraw.ImageDraw, board: Board, item_id: int, origin: Cell
    ) -> None:
        item = board.get(item_id)
        if item is None:
            return
        color = (
            PREVIEW_VALID
            if board.preview_relocation(item_id, origin)
            else PREVIEW_INVALID
        )
        fp = item.footprint.moved_to(origin)
        # Clip to the grid; an out-of-bounds preview shows its visible part.
        for r in range(fp.row, fp.row + fp.height):
            for c in range(fp.col, fp.col + fp.width):
                if board.grid.in_bounds(r, c):
                    draw.rectangle(list(self.cell_rect(r, c)), outline=color, width=2)
