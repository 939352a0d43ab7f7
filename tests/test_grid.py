import pytest

from stepwise_planner.core.grid import Grid


def test_row_major_layout():
    grid = Grid.from_rows([[1, 2, 3], [4, 5, 6]])
    assert grid.size == (3, 2)
    assert grid.cells == [1, 2, 3, 4, 5, 6]
    assert grid.value_at((2, 0)) == 3
    assert grid.value_at((0, 1)) == 4
    assert grid.to_rows() == [[1, 2, 3], [4, 5, 6]]


def test_bounds():
    grid = Grid(4, 2)
    assert grid.in_bounds((3, 1))
    assert not grid.in_bounds((4, 0))
    assert not grid.in_bounds((0, -1))
    with pytest.raises(IndexError):
        grid.value_at((0, 2))
    with pytest.raises(IndexError):
        grid.set_value((-1, 0), 9)


def test_rejects_bad_shapes():
    with pytest.raises(ValueError):
        Grid(0, 3)
    with pytest.raises(ValueError):
        Grid(2, 2, [0, 0, 0])
    with pytest.raises(ValueError):
        Grid.from_rows([[0, 0], [0]])
    with pytest.raises(ValueError):
        Grid.from_rows([])


def test_copy_is_independent():
    grid = Grid(2, 2)
    clone = grid.copy()
    clone.set_value((1, 1), 7)
    assert grid.value_at((1, 1)) == 0
