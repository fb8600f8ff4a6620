import pytest

from monster_sweeper.dungeon.grid import Coordinate, Grid


def test_coordinates_compare_and_hash_by_value():
    a = Coordinate(3, 4)
    b = Coordinate(3, 4)
    assert a == b
    assert len({a, b, Coordinate(4, 3)}) == 2
    assert a.as_tuple() == (3, 4)


def test_contains_checks_both_axes():
    grid = Grid(16, 8)
    assert grid.contains(Coordinate(0, 0))
    assert grid.contains(Coordinate(15, 7))
    assert not grid.contains(Coordinate(16, 0))
    assert not grid.contains(Coordinate(0, 8))
    assert not grid.contains(Coordinate(-1, 3))


def test_require_raises_for_out_of_bounds():
    grid = Grid(4, 4)
    assert grid.require(Coordinate(3, 3)) == Coordinate(3, 3)
    with pytest.raises(IndexError):
        grid.require(Coordinate(4, 0))


def test_cells_cover_grid_row_major():
    grid = Grid(3, 2)
    cells = list(grid.cells())
    assert len(cells) == grid.area == 6
    assert cells[0] == Coordinate(0, 0)
    assert cells[1] == Coordinate(1, 0)
    assert cells[-1] == Coordinate(2, 1)


def test_clamp_keeps_cells_inside():
    grid = Grid(5, 5)
    assert grid.clamp(-3, 9) == Coordinate(0, 4)
    assert grid.clamp(2, 2) == Coordinate(2, 2)


def test_invalid_size():
    with pytest.raises(ValueError):
        Grid(0, 3)
    with pytest.raises(ValueError):
        Grid(3, 0)
