# stepwise_planner/gui/renderer.py
"""Renderer drawing the chase world to a :class:`Window`."""

from __future__ import annotations

from typing import Any

from ..core.world import Tile
from .window import Window

TILE_COLOR_MAP = {
    Tile.EMPTY: (245, 245, 245),
    Tile.PURSUER: (0, 121, 241),
    Tile.TARGET: (230, 41, 55),
    Tile.OBSTACLE: (0, 0, 0),
    Tile.WATER: (0, 0, 0),
    Tile.WALL: (0, 0, 0),
}
GRID_LINE_COLOR = (80, 80, 80)
BACKGROUND_COLOR = (0, 0, 0)


class Renderer:
    """Draws every cell as a filled square with a thin outline."""

    def __init__(self, window: Window | None = None) -> None:
        self.window = window

    def cell_size(self, world: Any) -> int:
        width, height = world.size
        return max(1, min(self.window.size[0] // width, self.window.size[1] // height))

    def screen_to_cell(self, world: Any, screen_pos: tuple[int, int]) -> tuple[int, int]:
        """Convert a pixel position to the grid cell under it."""
        size = self.cell_size(world)
        return screen_pos[0] // size, screen_pos[1] // size

    def update(self, world: Any) -> None:
        if self.window is None:
            return
        self.window.clear(BACKGROUND_COLOR)
        size = self.cell_size(world)
        width, height = world.size
        for y in range(height):
            for x in range(width):
                rect = (x * size, y * size, size, size)
                self.window.draw_rect(TILE_COLOR_MAP[world.glyph_at((x, y))], rect)
                self.window.draw_rect(GRID_LINE_COLOR, rect, 2)
        self.window.refresh()


__all__ = ["Renderer", "TILE_COLOR_MAP"]
