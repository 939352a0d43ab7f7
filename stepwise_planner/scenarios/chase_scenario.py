from __future__ import annotations

from typing import Any, Iterable, Tuple
import logging

from .base_scenario import BaseScenario
from ..core.world import Tile

logger = logging.getLogger(__name__)


class ChaseScenario(BaseScenario):
    """Pursuer in one corner, target in the other, open ground between."""

    def __init__(
        self,
        pursuer: Tuple[int, int] = (1, 1),
        target: Tuple[int, int] = (9, 9),
        walls: Iterable[Tuple[int, int]] = (),
    ) -> None:
        self.pursuer = pursuer
        self.target = target
        self.walls = list(walls)

    def get_name(self) -> str:
        return "Chase"

    def setup(self, world: Any) -> None:
        """Reset terrain, place the walls and both actors."""

        width, height = world.size
        world.grid.cells[:] = [Tile.EMPTY] * (width * height)
        world.pursuer = None
        world.target = None
        for x, y in self.walls:
            world.toggle_wall(x, y)

        world.place_pursuer(self.pursuer)
        world.place_target(self.target)
        world.event_log.clear()
        logger.info(
            "[Scenario] %s: pursuer at %s, target at %s, %s wall(s)",
            self.get_name(), world.pursuer, world.target, len(self.walls),
        )
