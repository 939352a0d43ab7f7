# stepwise_planner/gui/window.py
"""Simple ``pygame`` window for drawing grid cells."""

from __future__ import annotations

import pygame


class Window:
    """``pygame`` backed drawing surface."""

    def __init__(self, size: tuple[int, int] = (600, 600), caption: str = "A* Pathfinding Algorithm") -> None:
        self.size = size
        if not pygame.get_init():
            pygame.init()
        if not pygame.display.get_init():
            pygame.display.init()
        self._surface = pygame.display.set_mode(self.size)
        pygame.display.set_caption(caption)

    def draw_rect(self, colour: tuple[int, int, int], rect: tuple[int, int, int, int], width: int = 0) -> None:
        pygame.draw.rect(self._surface, colour, rect, width)

    def refresh(self) -> None:
        pygame.display.flip()

    def clear(self, colour: tuple[int, int, int] = (0, 0, 0)) -> None:
        self._surface.fill(colour)


__all__ = ["Window"]
