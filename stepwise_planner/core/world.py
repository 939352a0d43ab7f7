"""Chase world: a terrain grid holding one pursuer and one target."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, List, Tuple
import logging

from .grid import Coord, Grid

logger = logging.getLogger(__name__)


class Tile(IntEnum):
    """Tile kinds; every kind below ``OBSTACLE`` can be stood on.

    ``PURSUER`` and ``TARGET`` never live in the terrain grid; views use
    them to draw the actors on top of it.
    """

    EMPTY = 0
    PURSUER = 1
    TARGET = 2
    OBSTACLE = 3
    WATER = 4
    WALL = 5


def is_traversable(value: Any) -> bool:
    return int(value) < Tile.OBSTACLE


class ChaseWorld:
    """Lightweight holder for the terrain grid, actors and managers."""

    def __init__(self, size: Tuple[int, int]):
        width, height = size
        self.size: Tuple[int, int] = (width, height)
        self.grid = Grid(width, height, [Tile.EMPTY] * (width * height))
        self.pursuer: Coord | None = None
        self.target: Coord | None = None
        self.caught: bool = False

        # Populated during bootstrap.
        self.time_manager: Any | None = None
        self.systems_manager: Any | None = None
        self.config: Any | None = None

        self.event_log: List[Dict[str, Any]] = []
        self.gui_enabled: bool = False
        self.fps_enabled: bool = False

    # ------------------------------------------------------------------
    # Terrain
    # ------------------------------------------------------------------
    def tile_at(self, coord: Coord) -> Tile:
        return Tile(self.grid.value_at(coord))

    def set_tile(self, coord: Coord, tile: Tile) -> None:
        self.grid.set_value(coord, tile)

    def toggle_wall(self, x: int, y: int) -> bool:
        """Flip ``(x, y)`` between empty and wall.

        Cells outside the map, cells under an actor and tiles other than
        empty or wall are left alone. Returns ``True`` if the tile changed.
        """

        coord = (x, y)
        if not self.grid.in_bounds(coord) or coord in (self.pursuer, self.target):
            return False
        tile = self.tile_at(coord)
        if tile is Tile.EMPTY:
            self.set_tile(coord, Tile.WALL)
        elif tile is Tile.WALL:
            self.set_tile(coord, Tile.EMPTY)
        else:
            return False
        logger.debug("Tile %s toggled to %s", coord, self.tile_at(coord).name)
        return True

    def glyph_at(self, coord: Coord) -> Tile:
        """Tile to draw at ``coord``, actors included."""

        if coord == self.pursuer:
            return Tile.PURSUER
        if coord == self.target:
            return Tile.TARGET
        return self.tile_at(coord)

    # ------------------------------------------------------------------
    # Actors
    # ------------------------------------------------------------------
    def _checked(self, coord: Coord, who: str) -> Coord:
        coord = (int(coord[0]), int(coord[1]))
        if not self.grid.in_bounds(coord):
            raise ValueError(f"{who} position {coord} is outside the map")
        if not is_traversable(self.tile_at(coord)):
            raise ValueError(f"{who} cannot stand on {self.tile_at(coord).name} at {coord}")
        return coord

    def place_pursuer(self, coord: Coord) -> None:
        self.pursuer = self._checked(coord, "pursuer")
        self.caught = False

    def place_target(self, coord: Coord) -> None:
        self.target = self._checked(coord, "target")
        self.caught = False


__all__ = ["Tile", "is_traversable", "ChaseWorld"]
