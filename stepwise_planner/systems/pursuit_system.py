# stepwise_planner/systems/pursuit_system.py
"""Pursuit system: re-plan toward the target and take one step per tick."""

from __future__ import annotations

from typing import Any, Dict, List
import logging

from ..core.world import is_traversable
from ..planning.errors import PlannerContractError
from ..planning.stepwise import PlanStatus, StepPlan, plan_next_step

logger = logging.getLogger(__name__)


class PursuitSystem:
    """Move ``world.pursuer`` one cell toward ``world.target`` each tick."""

    def __init__(
        self,
        world: Any,
        event_log: List[Dict[str, Any]] | None = None,
        *,
        frontier: str = "heap",
    ) -> None:
        self.world = world
        self.event_log = event_log if event_log is not None else getattr(world, "event_log", [])
        self.frontier = frontier
        self.last_plan: StepPlan | None = None

    def update(self, world_obj: Any, tick: int) -> None:
        pursuer = getattr(world_obj, "pursuer", None)
        target = getattr(world_obj, "target", None)
        if pursuer is None or target is None:
            return

        if pursuer == target:
            if not world_obj.caught:
                world_obj.caught = True
                logger.info("[Tick %s] PursuitSystem: target caught at %s", tick, pursuer)
                self.event_log.append({"type": "caught", "pos": pursuer, "tick": tick})
            return

        try:
            plan = plan_next_step(
                world_obj.grid, pursuer, target, is_traversable, frontier=self.frontier
            )
        except PlannerContractError as exc:
            # A wall was placed under an actor between ticks; skip this tick.
            logger.error("[Tick %s] PursuitSystem: cannot plan: %s", tick, exc)
            self.event_log.append(
                {"type": "plan_rejected", "violation": exc.violation.value, "pos": exc.coord, "tick": tick}
            )
            return
        self.last_plan = plan

        if plan.status is PlanStatus.NO_PATH:
            logger.warning(
                "[Tick %s] PursuitSystem: no path from %s to %s (%s expansions)",
                tick, pursuer, target, plan.expansions,
            )
            self.event_log.append({"type": "no_path", "pos": pursuer, "target": target, "tick": tick})
            return

        world_obj.pursuer = plan.position
        logger.debug(
            "[Tick %s] PursuitSystem: pursuer moved from %s to %s (target %s, %s expansions)",
            tick, pursuer, plan.position, target, plan.expansions,
        )
        self.event_log.append(
            {"type": "pursuer_moved", "from": pursuer, "to": plan.position, "tick": tick}
        )
        if plan.position == target:
            world_obj.caught = True
            logger.info("[Tick %s] PursuitSystem: target caught at %s", tick, target)
            self.event_log.append({"type": "caught", "pos": target, "tick": tick})


__all__ = ["PursuitSystem"]
