"""Optional random walk for the target so the pursuer has to re-plan."""

from __future__ import annotations

from typing import Any
import logging
import random

from ..core.world import is_traversable
from ..planning.stepwise import DIRECTIONS

logger = logging.getLogger(__name__)


class TargetSystem:
    """Move ``world.target`` to a random open neighbour each tick when enabled."""

    def __init__(self, world: Any, *, wanders: bool = False, seed: int | None = None) -> None:
        self.world = world
        self.wanders = wanders
        self._rng = random.Random(seed)

    def update(self, world_obj: Any, tick: int) -> None:
        if not self.wanders or world_obj.target is None or world_obj.caught:
            return

        tx, ty = world_obj.target
        grid = world_obj.grid
        options = [
            (tx + dx, ty + dy)
            for dx, dy in DIRECTIONS
            if grid.in_bounds((tx + dx, ty + dy))
            and is_traversable(grid.value_at((tx + dx, ty + dy)))
            and (tx + dx, ty + dy) != world_obj.pursuer
        ]
        if not options:
            return
        world_obj.target = self._rng.choice(options)
        logger.debug("[Tick %s] TargetSystem: target wandered to %s", tick, world_obj.target)


__all__ = ["TargetSystem"]
