"""Barrier layouts placed on an empty grid."""

from __future__ import annotations

import random

from .geometry import Coord
from .grid import BARRIER, Grid

__all__ = ["create_barrier"]


def _place(grid: Grid, loc: Coord) -> None:
    grid.set(loc, BARRIER)
    grid.barrier_locations.append(loc)


def _draw_box(grid: Grid, min_x: int, min_y: int, max_x: int, max_y: int) -> None:
    for x in range(min_x, max_x + 1):
        for y in range(min_y, max_y + 1):
            _place(grid, Coord(x, y))


def create_barrier(grid: Grid, barrier_type: int, rng: random.Random) -> None:
    """Draw barrier layout ``barrier_type`` (0..6) onto an empty grid.

    The grid's barrier location and center lists are replaced.

    0: none; 1: vertical bar, fixed; 2: vertical bar, random;
    3: five staggered blocks; 4: horizontal bar, fixed;
    5: one floating island, random; 6: five spots in a column.
    """
    grid.barrier_locations.clear()
    grid.barrier_centers.clear()
    size_x, size_y = grid.size_x, grid.size_y

    if barrier_type == 0:
        return

    if barrier_type == 1:
        min_x = size_x // 2
        min_y = size_y // 4
        _draw_box(grid, min_x, min_y, min_x + 1, min_y + size_y // 2)

    elif barrier_type == 2:
        min_x = rng.randint(20, size_x - 20)
        min_y = rng.randint(20, size_y // 2 - 20)
        _draw_box(grid, min_x, min_y, min_x + 1, min_y + size_y // 2)

    elif barrier_type == 3:
        block_x = 2
        block_y = size_x // 3
        x0 = size_x // 4 - block_x // 2
        y0 = size_y // 4 - block_y // 2
        _draw_box(grid, x0, y0, x0 + block_x, y0 + block_y)
        x0 += size_x // 2
        _draw_box(grid, x0, y0, x0 + block_x, y0 + block_y)
        y0 += size_y // 2
        _draw_box(grid, x0, y0, x0 + block_x, y0 + block_y)
        x0 -= size_x // 2
        _draw_box(grid, x0, y0, x0 + block_x, y0 + block_y)
        x0 = size_x // 2 - block_x // 2
        y0 = size_y // 2 - block_y // 2
        _draw_box(grid, x0, y0, x0 + block_x, y0 + block_y)

    elif barrier_type == 4:
        min_x = size_x // 4
        min_y = size_y // 2 + size_y // 4
        _draw_box(grid, min_x, min_y, min_x + size_x // 2, min_y + 2)

    elif barrier_type == 5:
        radius = 3.0
        margin = 2 * int(radius)

        def random_loc() -> Coord:
            return Coord(
                rng.randint(margin, size_x - margin),
                rng.randint(margin, size_y - margin),
            )

        center0 = random_loc()
        center1 = random_loc()
        while (center0 - center1).length() < margin:
            center1 = random_loc()
        center2 = random_loc()
        while (center0 - center2).length() < margin or (center1 - center2).length() < margin:
            center2 = random_loc()

        # Only the first island is placed.
        grid.barrier_centers.append(center0)
        for loc in list(grid.visit_neighborhood(center0, radius)):
            _place(grid, loc)

    elif barrier_type == 6:
        number_of_locations = 5
        radius = 5.0
        slice_size = size_y // (number_of_locations + 1)
        for n in range(1, number_of_locations + 1):
            center = Coord(size_x // 2, n * slice_size)
            for loc in list(grid.visit_neighborhood(center, radius)):
                _place(grid, loc)
            grid.barrier_centers.append(center)

    else:
        raise ValueError(f"unknown barrier type {barrier_type}")