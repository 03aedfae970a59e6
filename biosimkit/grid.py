"""The two-dimensional arena in which agents live."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator

from .geometry import Coord

__all__ = ["EMPTY", "BARRIER", "Grid", "visit_neighborhood"]

EMPTY = 0
"""Cell value of an empty location; index 0 is reserved."""

BARRIER = 0xFFFF
"""Cell value of a barrier location."""

_MAX_RANDOM_PROBES = 10_000


def visit_neighborhood(
    loc: Coord, radius: float, size_x: int, size_y: int
) -> Iterator[Coord]:
    """Yield every in-bounds location within ``radius`` of ``loc``, ``loc`` included.

    Columns are visited from west to east, and within a column from south
    to north.
    """
    reach = int(radius)
    for dx in range(-min(reach, loc.x), min(reach, size_x - loc.x - 1) + 1):
        x = loc.x + dx
        extent_y = int(math.sqrt(radius * radius - dx * dx))
        for dy in range(-min(extent_y, loc.y), min(extent_y, size_y - loc.y - 1) + 1):
            yield Coord(x, loc.y + dy)


class Grid:
    """A grid of unsigned 16-bit cells addressed as ``[x][y]``.

    A cell is ``EMPTY``, ``BARRIER`` or the index of an agent.
    """

    def __init__(self, size_x: int, size_y: int) -> None:
        if not (0 < size_x <= 0x7FFF and 0 < size_y <= 0x7FFF):
            raise ValueError(f"invalid grid size {size_x}x{size_y}")
        self._cells: list[list[int]] = [[EMPTY] * size_y for _ in range(size_x)]
        self.barrier_locations: list[Coord] = []
        self.barrier_centers: list[Coord] = []

    @property
    def size_x(self) -> int:
        return len(self._cells)

    @property
    def size_y(self) -> int:
        return len(self._cells[0])

    def zero_fill(self) -> None:
        """Set every cell to EMPTY."""
        for column in self._cells:
            column[:] = [EMPTY] * len(column)

    def is_in_bounds(self, loc: Coord) -> bool:
        return 0 <= loc.x < self.size_x and 0 <= loc.y < self.size_y

    def is_empty_at(self, loc: Coord) -> bool:
        return self.at(loc) == EMPTY

    def is_barrier_at(self, loc: Coord) -> bool:
        return self.at(loc) == BARRIER

    def is_occupied_at(self, loc: Coord) -> bool:
        """True if an agent lives at ``loc``."""
        value = self.at(loc)
        return value != EMPTY and value != BARRIER

    def is_border(self, loc: Coord) -> bool:
        return (
            loc.x == 0
            or loc.x == self.size_x - 1
            or loc.y == 0
            or loc.y == self.size_y - 1
        )

    def _check(self, loc: Coord) -> None:
        if not self.is_in_bounds(loc):
            raise IndexError(f"location ({loc.x}, {loc.y}) is outside the grid")

    def at(self, loc: Coord) -> int:
        self._check(loc)
        return self._cells[loc.x][loc.y]

    def set(self, loc: Coord, value: int) -> None:
        self._check(loc)
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"cell value {value} is outside 0..0xFFFF")
        self._cells[loc.x][loc.y] = value

    def find_empty_location(self, rng: random.Random) -> Coord:
        """Return a random empty location."""
        probes = 0
        while True:
            loc = Coord(rng.randint(0, self.size_x - 1), rng.randint(0, self.size_y - 1))
            if self.is_empty_at(loc):
                return loc
            probes += 1
            if probes % _MAX_RANDOM_PROBES == 0 and not any(
                EMPTY in column for column in self._cells
            ):
                raise ValueError("the grid has no empty location")

    def visit_neighborhood(self, loc: Coord, radius: float) -> Iterator[Coord]:
        """Yield every in-bounds location of this grid within ``radius`` of ``loc``."""
        return visit_neighborhood(loc, radius, self.size_x, self.size_y)