"""Distance estimates for 8-directional grid movement."""

from __future__ import annotations

from typing import Tuple


Coord = Tuple[int, int]

DIAGONAL_COST = 14
STRAIGHT_COST = 10


def octile_distance(a: Coord, b: Coord) -> int:
    """Return the cheapest possible cost of moving from ``a`` to ``b``.

    Diagonal steps cost 14 (roughly ``sqrt(2) * 10``) and straight steps 10.
    A diagonal step is always the better deal while both axes still differ,
    so as many of them as possible are used. The result is exact for
    adjacent cells and never overestimates for any other pair.
    """

    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    diagonal_steps = min(dx, dy)
    straight_steps = max(dx, dy) - diagonal_steps
    return diagonal_steps * DIAGONAL_COST + straight_steps * STRAIGHT_COST


__all__ = ["Coord", "DIAGONAL_COST", "STRAIGHT_COST", "octile_distance"]
