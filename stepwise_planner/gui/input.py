"""Handle window events for the chase demo."""

from __future__ import annotations

from typing import Any, Dict
import logging

import pygame

logger = logging.getLogger(__name__)


def handle_events(world: Any, renderer: Any, state: Dict[str, Any]) -> None:
    """Process ``pygame`` events and update ``state`` flags.

    Space toggles pause. While paused, a left click toggles a wall on the
    clicked cell. Escape or closing the window stops the loop.
    """

    for ev in pygame.event.get():
        if ev.type == pygame.QUIT:
            state["running"] = False
            return

        if ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_SPACE:
                state["paused"] = not state.get("paused", False)
                logger.info("Simulation %s.", "paused" if state["paused"] else "resumed")
            elif ev.key == pygame.K_ESCAPE:
                state["running"] = False
                return

        elif ev.type == pygame.MOUSEBUTTONUP and ev.button == 1:
            if not state.get("paused", False):
                continue
            x, y = renderer.screen_to_cell(world, ev.pos)
            world.toggle_wall(x, y)


__all__ = ["handle_events"]
