import itertools
from heapq import heappop, heappush

from stepwise_planner.planning.heuristics import DIAGONAL_COST, STRAIGHT_COST, octile_distance
from stepwise_planner.planning.stepwise import DIRECTIONS


def _true_costs(walls: set[tuple[int, int]], size: int, start: tuple[int, int]) -> dict[tuple[int, int], int]:
    """Reference Dijkstra under the 10/14 movement model."""
    dist = {start: 0}
    heap = [(0, start)]
    while heap:
        d, (x, y) = heappop(heap)
        if d > dist[(x, y)]:
            continue
        for dx, dy in DIRECTIONS:
            n = (x + dx, y + dy)
            if not (0 <= n[0] < size and 0 <= n[1] < size) or n in walls:
                continue
            nd = d + (DIAGONAL_COST if dx and dy else STRAIGHT_COST)
            if nd < dist.get(n, float("inf")):
                dist[n] = nd
                heappush(heap, (nd, n))
    return dist


def test_adjacent_costs_are_exact():
    assert octile_distance((3, 3), (4, 3)) == 10
    assert octile_distance((3, 3), (3, 2)) == 10
    assert octile_distance((3, 3), (4, 4)) == 14
    assert octile_distance((3, 3), (2, 4)) == 14


def test_mixed_offset():
    # 3 diagonal steps plus 2 straight ones
    assert octile_distance((0, 0), (5, 3)) == 3 * 14 + 2 * 10
    assert octile_distance((5, 3), (0, 0)) == octile_distance((0, 0), (5, 3))


def test_same_cell_is_free():
    assert octile_distance((7, 2), (7, 2)) == 0


def test_exact_on_open_grid():
    size = 6
    cells = list(itertools.product(range(size), repeat=2))
    for a in cells:
        truth = _true_costs(set(), size, a)
        for b in cells:
            assert octile_distance(a, b) == truth[b]


def test_never_overestimates_around_walls():
    size = 7
    walls = {(3, y) for y in range(1, 7)} | {(1, 1), (5, 2), (5, 3)}
    cells = [c for c in itertools.product(range(size), repeat=2) if c not in walls]
    for a in cells:
        truth = _true_costs(walls, size, a)
        for b, cost in truth.items():
            assert octile_distance(a, b) <= cost


def test_consistent_across_single_steps():
    goal = (9, 4)
    for x, y in itertools.product(range(10), repeat=2):
        for dx, dy in DIRECTIONS:
            n = (x + dx, y + dy)
            assert octile_distance((x, y), goal) <= octile_distance((x, y), n) + octile_distance(n, goal)
