import random

import pytest

from biosimkit.geometry import Coord
from biosimkit.grid import BARRIER, EMPTY, Grid, visit_neighborhood


def test_new_grid_is_empty_and_sized():
    grid = Grid(10, 7)
    assert grid.size_x == 10
    assert grid.size_y == 7
    assert all(grid.is_empty_at(Coord(x, y)) for x in range(10) for y in range(7))
    assert grid.barrier_locations == []
    assert grid.barrier_centers == []


@pytest.mark.parametrize("sx, sy", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_size_rejected(sx, sy):
    with pytest.raises(ValueError):
        Grid(sx, sy)


def test_bounds():
    grid = Grid(4, 3)
    assert grid.is_in_bounds(Coord(0, 0))
    assert grid.is_in_bounds(Coord(3, 2))
    assert not grid.is_in_bounds(Coord(4, 0))
    assert not grid.is_in_bounds(Coord(0, 3))
    assert not grid.is_in_bounds(Coord(-1, 1))


def test_set_and_at_round_trip():
    grid = Grid(5, 5)
    grid.set(Coord(2, 3), 42)
    assert grid.at(Coord(2, 3)) == 42
    assert grid.at(Coord(3, 2)) == EMPTY


def test_cell_kinds():
    grid = Grid(5, 5)
    grid.set(Coord(1, 1), BARRIER)
    grid.set(Coord(2, 2), 7)
    assert grid.is_barrier_at(Coord(1, 1))
    assert not grid.is_occupied_at(Coord(1, 1))
    assert grid.is_occupied_at(Coord(2, 2))
    assert not grid.is_empty_at(Coord(2, 2))
    assert grid.is_empty_at(Coord(0, 0))
    assert not grid.is_occupied_at(Coord(0, 0))


def test_out_of_bounds_access_raises():
    grid = Grid(3, 3)
    with pytest.raises(IndexError):
        grid.at(Coord(3, 0))
    with pytest.raises(IndexError):
        grid.set(Coord(0, -1), 1)


def test_invalid_value_raises():
    grid = Grid(3, 3)
    with pytest.raises(ValueError):
        grid.set(Coord(0, 0), 0x10000)


def test_border():
    grid = Grid(5, 6)
    assert grid.is_border(Coord(0, 3))
    assert grid.is_border(Coord(4, 3))
    assert grid.is_border(Coord(2, 0))
    assert grid.is_border(Coord(2, 5))
    assert not grid.is_border(Coord(2, 3))


def test_zero_fill_clears_cells():
    grid = Grid(4, 4)
    grid.set(Coord(1, 2), BARRIER)
    grid.set(Coord(3, 3), 5)
    grid.zero_fill()
    assert all(grid.is_empty_at(Coord(x, y)) for x in range(4) for y in range(4))


def test_find_empty_location_returns_empty_cell():
    grid = Grid(3, 3)
    for x in range(3):
        for y in range(3):
            if (x, y) != (2, 1):
                grid.set(Coord(x, y), BARRIER)
    loc = grid.find_empty_location(random.Random(5))
    assert loc == Coord(2, 1)


def test_find_empty_location_on_full_grid_raises():
    grid = Grid(2, 2)
    for x in range(2):
        for y in range(2):
            grid.set(Coord(x, y), 1)
    with pytest.raises(ValueError):
        grid.find_empty_location(random.Random(1))


def test_neighborhood_radius_zero_is_only_self():
    assert list(visit_neighborhood(Coord(3, 3), 0.0, 10, 10)) == [Coord(3, 3)]


@pytest.mark.parametrize("loc", [Coord(5, 5), Coord(0, 0), Coord(9, 2), Coord(1, 9)])
@pytest.mark.parametrize("radius", [1.0, 2.5, 4.0])
def test_neighborhood_matches_disc_within_bounds(loc, radius):
    size = 10
    visited = list(visit_neighborhood(loc, radius, size, size))
    assert len(visited) == len(set(visited))
    assert loc in visited
    for c in visited:
        assert 0 <= c.x < size and 0 <= c.y < size
        assert (c.x - loc.x) ** 2 + (c.y - loc.y) ** 2 <= radius * radius
    inside = {
        Coord(x, y)
        for x in range(size)
        for y in range(size)
        if (x - loc.x) ** 2 + (y - loc.y) ** 2 <= radius * radius
    }
    assert set(visited) == inside


def test_neighborhood_radius_one_is_plus_shape():
    visited = set(visit_neighborhood(Coord(5, 5), 1.0, 10, 10))
    assert visited == {Coord(5, 5), Coord(4, 5), Coord(6, 5), Coord(5, 4), Coord(5, 6)}


def test_grid_method_uses_own_size():
    grid = Grid(3, 3)
    visited = list(grid.visit_neighborhood(Coord(2, 2), 5.0))
    assert set(visited) == {Coord(x, y) for x in range(3) for y in range(3)}