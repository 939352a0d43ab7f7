"""A* search that returns only the next move toward a target.

The planner is meant to be called once per tick. Every call searches from
scratch, so a target that moved since the last tick is always accounted
for. Nothing survives between calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Set
import logging

from ..core.grid import Grid
from .errors import ContractViolation, PlannerContractError
from .frontier import make_frontier
from .heuristics import Coord, octile_distance
from .nodes import NodeArena

logger = logging.getLogger(__name__)

# Neighbour order is part of the planner's deterministic output.
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (0, 1),
    (1, 1),
    (-1, 0),
    (0, -1),
    (-1, -1),
    (-1, 1),
    (1, -1),
)


class PlanStatus(str, Enum):
    ARRIVED = "arrived"
    STEP = "step"
    NO_PATH = "no_path"


@dataclass(frozen=True)
class StepPlan:
    """Outcome of one planning call."""

    status: PlanStatus
    position: Coord
    expansions: int = 0
    nodes_created: int = 0

    @property
    def moved(self) -> bool:
        return self.status is PlanStatus.STEP


def _check_endpoint(
    grid: Grid,
    coord: Coord,
    is_traversable: Callable[[Any], bool],
    out_of_bounds: ContractViolation,
    blocked: ContractViolation,
) -> None:
    if not grid.in_bounds(coord):
        raise PlannerContractError(out_of_bounds, coord)
    if not is_traversable(grid.value_at(coord)):
        raise PlannerContractError(blocked, coord)


def plan_next_step(
    grid: Grid,
    source: Coord,
    destination: Coord,
    is_traversable: Callable[[Any], bool],
    *,
    frontier: str = "heap",
) -> StepPlan:
    """Search from ``source`` to ``destination`` and report the first move.

    Raises :class:`PlannerContractError` when either endpoint lies outside
    ``grid`` or on a cell ``is_traversable`` rejects. When the destination
    cannot be reached the plan has status ``NO_PATH`` and its position is
    ``source``.
    """

    source = (int(source[0]), int(source[1]))
    destination = (int(destination[0]), int(destination[1]))

    _check_endpoint(
        grid, source, is_traversable,
        ContractViolation.SOURCE_OUT_OF_BOUNDS, ContractViolation.SOURCE_NOT_TRAVERSABLE,
    )
    _check_endpoint(
        grid, destination, is_traversable,
        ContractViolation.DESTINATION_OUT_OF_BOUNDS, ContractViolation.DESTINATION_NOT_TRAVERSABLE,
    )

    if source == destination:
        return StepPlan(PlanStatus.ARRIVED, source)

    width, height, cells = grid.width, grid.height, grid.cells
    arena = NodeArena()
    open_nodes = make_frontier(frontier)
    closed: Set[Coord] = set()

    open_nodes.push(arena.create(source, 0, octile_distance(source, destination)))
    expansions = 0

    while len(open_nodes):
        current = open_nodes.pop()
        closed.add(current.coord)
        expansions += 1

        if current.coord == destination:
            step = arena.first_step(current)
            logger.debug(
                "Planned step %s -> %s via %s (cost %s, %s expansions, %s nodes)",
                source, destination, step, current.g, expansions, len(arena),
            )
            return StepPlan(PlanStatus.STEP, step, expansions, len(arena))

        cx, cy = current.coord
        for dx, dy in DIRECTIONS:
            nx, ny = cx + dx, cy + dy
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            neighbour_coord = (nx, ny)
            if neighbour_coord in closed or not is_traversable(cells[ny * width + nx]):
                continue

            tentative_g = current.g + octile_distance(current.coord, neighbour_coord)
            neighbour = arena.lookup(neighbour_coord)
            if neighbour is None:
                neighbour = arena.create(
                    neighbour_coord,
                    tentative_g,
                    octile_distance(neighbour_coord, destination),
                    parent=current.handle,
                )
                open_nodes.push(neighbour)
            elif tentative_g < neighbour.g:
                neighbour.relax(tentative_g, current.handle)
                open_nodes.update(neighbour)

    logger.debug(
        "No path from %s to %s after %s expansions; staying put", source, destination, expansions
    )
    return StepPlan(PlanStatus.NO_PATH, source, expansions, len(arena))


def compute_next_position(
    grid: Grid,
    source: Coord,
    destination: Coord,
    is_traversable: Callable[[Any], bool],
    *,
    frontier: str = "heap",
) -> Coord:
    """Return the cell the agent at ``source`` should move to next.

    Returns ``source`` itself when already at ``destination`` or when no
    path exists. Use :func:`plan_next_step` to tell those cases apart.
    """

    return plan_next_step(grid, source, destination, is_traversable, frontier=frontier).position


__all__ = ["DIRECTIONS", "PlanStatus", "StepPlan", "plan_next_step", "compute_next_position"]
