"""ASCII terminal renderer for the chase world."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from ...core.world import Tile


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "blue": "\x1b[34m",
    "red": "\x1b[31m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

_GLYPHS = {
    Tile.EMPTY: (".", "white"),
    Tile.PURSUER: ("P", "blue"),
    Tile.TARGET: ("T", "red"),
    Tile.OBSTACLE: ("#", "white"),
    Tile.WATER: ("~", "cyan"),
    Tile.WALL: ("#", "white"),
}


class TerminalView:
    """Whole-map viewer using ANSI colours."""

    def __init__(self, colour: bool = True, stream: TextIO | None = None) -> None:
        self.enabled: bool = False
        self.colour = colour
        self.stream = stream

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled

    def frame(self, world: Any) -> str:
        """Return the map as text, one line per row."""

        width, height = world.size
        lines: list[str] = []
        for y in range(height):
            row: list[str] = []
            for x in range(width):
                glyph, colour = _GLYPHS[world.glyph_at((x, y))]
                row.append(f"{_COLOURS[colour]}{glyph}" if self.colour else glyph)
            if self.colour:
                row.append(_COLOURS["reset"])
            lines.append("".join(row))
        return "\n".join(lines)

    def render(self, world: Any) -> None:
        """Clear the terminal and draw ``world`` if the view is enabled."""

        if not self.enabled:
            return
        out = self.stream if self.stream is not None else sys.stdout
        out.write("\x1b[H\x1b[2J")  # clear screen
        out.write(self.frame(world) + "\n")
        out.flush()


_view = TerminalView()


def get_view() -> TerminalView:
    """Return the singleton :class:`TerminalView` instance."""

    return _view


__all__ = ["TerminalView", "get_view"]
