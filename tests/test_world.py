import pytest

from stepwise_planner.core.world import ChaseWorld, Tile, is_traversable
from stepwise_planner.scenarios.chase_scenario import ChaseScenario


def test_traversability_by_tile_kind():
    assert is_traversable(Tile.EMPTY)
    assert is_traversable(Tile.PURSUER)
    assert is_traversable(Tile.TARGET)
    assert not is_traversable(Tile.OBSTACLE)
    assert not is_traversable(Tile.WATER)
    assert not is_traversable(Tile.WALL)


def test_toggle_wall():
    world = ChaseWorld((4, 4))
    assert world.toggle_wall(2, 1)
    assert world.tile_at((2, 1)) is Tile.WALL
    assert world.toggle_wall(2, 1)
    assert world.tile_at((2, 1)) is Tile.EMPTY
    assert not world.toggle_wall(9, 9)

    world.set_tile((0, 3), Tile.WATER)
    assert not world.toggle_wall(0, 3)
    assert world.tile_at((0, 3)) is Tile.WATER


def test_toggle_wall_ignores_actor_cells():
    world = ChaseWorld((4, 4))
    world.place_pursuer((1, 1))
    world.place_target((3, 3))
    assert not world.toggle_wall(1, 1)
    assert not world.toggle_wall(3, 3)
    assert world.glyph_at((1, 1)) is Tile.PURSUER
    assert world.glyph_at((3, 3)) is Tile.TARGET
    assert world.glyph_at((2, 2)) is Tile.EMPTY


def test_place_rejects_bad_cells():
    world = ChaseWorld((3, 3))
    world.toggle_wall(1, 1)
    with pytest.raises(ValueError):
        world.place_pursuer((1, 1))
    with pytest.raises(ValueError):
        world.place_target((3, 0))


def test_placing_on_each_other_leaves_catch_to_pursuit():
    world = ChaseWorld((3, 3))
    world.place_pursuer((0, 0))
    world.place_target((2, 2))
    assert not world.caught
    world.caught = True
    world.place_target((0, 0))
    assert world.pursuer == world.target
    assert not world.caught


def test_chase_scenario_resets_world():
    world = ChaseWorld((10, 10))
    world.toggle_wall(5, 5)
    world.event_log.append({"type": "stale"})

    ChaseScenario(walls=[(4, 4)]).setup(world)

    assert world.pursuer == (1, 1)
    assert world.target == (9, 9)
    assert world.tile_at((5, 5)) is Tile.EMPTY
    assert world.tile_at((4, 4)) is Tile.WALL
    assert world.event_log == []
    assert ChaseScenario().get_name() == "Chase"
