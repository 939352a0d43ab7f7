"""Search nodes and the per-call arena that owns them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from .heuristics import Coord


@dataclass
class SearchNode:
    """One discovered cell.

    ``parent`` is the arena handle of the node this one was reached from,
    ``None`` only for the source node.
    """

    coord: Coord
    g: int
    h: int
    f: int
    parent: Optional[int] = None
    handle: int = -1

    def relax(self, g: int, parent: int) -> None:
        """Record a cheaper path to this node."""
        self.g = g
        self.f = g + self.h
        self.parent = parent


class NodeArena:
    """Owns every node created during one planning call.

    Nodes are addressed by integer handles in creation order and are never
    freed individually; the whole arena is dropped when the call returns.
    """

    def __init__(self) -> None:
        self._nodes: List[SearchNode] = []
        self._by_coord: Dict[Coord, int] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(self._nodes)

    def __getitem__(self, handle: int) -> SearchNode:
        return self._nodes[handle]

    def create(self, coord: Coord, g: int, h: int, parent: Optional[int] = None) -> SearchNode:
        """Create the node for ``coord``; each coordinate gets at most one."""

        if coord in self._by_coord:
            raise ValueError(f"Node for {coord} already exists")
        node = SearchNode(coord=coord, g=g, h=h, f=g + h, parent=parent, handle=len(self._nodes))
        self._nodes.append(node)
        self._by_coord[coord] = node.handle
        return node

    def lookup(self, coord: Coord) -> Optional[SearchNode]:
        handle = self._by_coord.get(coord)
        if handle is None:
            return None
        return self._nodes[handle]

    def first_step(self, goal: SearchNode) -> Coord:
        """Walk parents from ``goal`` and return the node right after the root."""

        last = goal
        current = goal
        while current.parent is not None:
            last = current
            current = self._nodes[current.parent]
        return last.coord


__all__ = ["SearchNode", "NodeArena"]
