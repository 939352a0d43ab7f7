"""Open-set implementations used by the stepwise planner.

Both frontiers order nodes by ``(f, h, newest first)``: lowest total
estimate wins, ties go to the node believed closest to the goal, and any
remaining tie goes to the most recently created node. The two
implementations must hand out nodes in exactly the same sequence.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Tuple

from .nodes import SearchNode


def priority(node: SearchNode) -> Tuple[int, int, int]:
    """Return the ordering key for ``node``; smaller is expanded first."""

    return (node.f, node.h, -node.handle)


class LinearFrontier:
    """Unsorted open list scanned in full on every selection."""

    def __init__(self) -> None:
        self._open: List[SearchNode] = []

    def __len__(self) -> int:
        return len(self._open)

    def push(self, node: SearchNode) -> None:
        self._open.append(node)

    def update(self, node: SearchNode) -> None:
        """Nothing to do: the next scan reads the node's new costs."""

    def pop(self) -> SearchNode:
        if not self._open:
            raise IndexError("pop from empty frontier")
        best = min(self._open, key=priority)
        self._open.remove(best)
        return best


class HeapFrontier:
    """Binary heap keyed like :func:`priority` with lazy invalidation.

    Relaxing a node pushes a fresh entry; the superseded one is skipped when
    it surfaces because its cost no longer matches the node.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, int, SearchNode]] = []
        self._open: Dict[int, SearchNode] = {}

    def __len__(self) -> int:
        return len(self._open)

    def push(self, node: SearchNode) -> None:
        self._open[node.handle] = node
        f, h, tie = priority(node)
        # ``tie`` is unique per node so the node itself is never compared.
        heappush(self._heap, (f, h, tie, node))

    def update(self, node: SearchNode) -> None:
        if node.handle not in self._open:
            raise KeyError(f"Node {node.coord} is not in the frontier")
        f, h, tie = priority(node)
        heappush(self._heap, (f, h, tie, node))

    def pop(self) -> SearchNode:
        while self._heap:
            f, _h, _tie, node = heappop(self._heap)
            if node.handle not in self._open or f != node.f:
                continue
            del self._open[node.handle]
            return node
        raise IndexError("pop from empty frontier")


FRONTIERS = {
    "linear": LinearFrontier,
    "heap": HeapFrontier,
}


def make_frontier(kind: str) -> LinearFrontier | HeapFrontier:
    """Return an empty frontier of the named ``kind``."""

    try:
        return FRONTIERS[kind]()
    except KeyError:
        raise ValueError(
            f"Unknown frontier '{kind}'. Expected one of: {', '.join(sorted(FRONTIERS))}"
        ) from None


__all__ = ["priority", "LinearFrontier", "HeapFrontier", "FRONTIERS", "make_frontier"]
