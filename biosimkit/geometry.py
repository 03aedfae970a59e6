"""Directions, grid coordinates and polar vectors on the simulation grid."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import IntEnum

__all__ = ["Compass", "Dir", "Coord", "Polar"]


class Compass(IntEnum):
    """Eight compass directions plus CENTER.

    Arithmetic layout::

        6  7  8
        3  4  5
        0  1  2
    """

    SW = 0
    S = 1
    SE = 2
    W = 3
    CENTER = 4
    E = 5
    NW = 6
    N = 7
    NE = 8


def _wrap16(value: int) -> int:
    """Wrap an integer into the signed 16-bit range."""
    return ((int(value) + 0x8000) & 0xFFFF) - 0x8000


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


_C = Compass
_ROTATIONS: tuple[Compass, ...] = (
    _C.SW, _C.W, _C.NW, _C.N, _C.NE, _C.E, _C.SE, _C.S,
    _C.S, _C.SW, _C.W, _C.NW, _C.N, _C.NE, _C.E, _C.SE,
    _C.SE, _C.S, _C.SW, _C.W, _C.NW, _C.N, _C.NE, _C.E,
    _C.W, _C.NW, _C.N, _C.NE, _C.E, _C.SE, _C.S, _C.SW,
    _C.CENTER, _C.CENTER, _C.CENTER, _C.CENTER,
    _C.CENTER, _C.CENTER, _C.CENTER, _C.CENTER,
    _C.E, _C.SE, _C.S, _C.SW, _C.W, _C.NW, _C.N, _C.NE,
    _C.NW, _C.N, _C.NE, _C.E, _C.SE, _C.S, _C.SW, _C.W,
    _C.N, _C.NE, _C.E, _C.SE, _C.S, _C.SW, _C.W, _C.NW,
    _C.NE, _C.E, _C.SE, _C.S, _C.SW, _C.W, _C.NW, _C.N,
)

_NORMALIZED: tuple[tuple[int, int], ...] = (
    (-1, -1),  # SW
    (0, -1),   # S
    (1, -1),   # SE
    (-1, 0),   # W
    (0, 0),    # CENTER
    (1, 0),    # E
    (-1, 1),   # NW
    (0, 1),    # N
    (1, 1),    # NE
)

# Index built from the four half-plane tests in Coord.as_dir.
_CONVERSION: tuple[Compass, ...] = (
    _C.S, _C.CENTER, _C.SW, _C.N, _C.SE, _C.E, _C.N, _C.N,
    _C.N, _C.N, _C.W, _C.NW, _C.N, _C.NE, _C.N, _C.N,
)

# tan(22.5 deg) as a rational approximation tanN / tanD.
_TAN_N = 13860
_TAN_D = 33461

# Magnitudes in 32.32 fixed point; 3037000500 is 1/sqrt(2).
_ONE = 1 << 32
_DIAG = 3037000500
_COORD_MAGS = (_DIAG, _ONE, _DIAG, _ONE, 0, _ONE, _DIAG, _ONE, _DIAG)


@dataclass(frozen=True, eq=False)
class Dir:
    """One of the eight directions or CENTER."""

    compass: Compass = Compass.CENTER

    def __post_init__(self) -> None:
        object.__setattr__(self, "compass", Compass(self.compass))

    @staticmethod
    def random8(rng: random.Random) -> "Dir":
        """Return one of the eight non-center directions at random."""
        return Dir(Compass.N).rotate(rng.randint(0, 7))

    def as_int(self) -> int:
        return int(self.compass)

    def as_normalized_coord(self) -> "Coord":
        return Coord(*_NORMALIZED[self.as_int()])

    def as_normalized_polar(self) -> "Polar":
        return Polar(1, self)

    def rotate(self, n: int = 0) -> "Dir":
        """Rotate by n eighth-turns; positive is clockwise."""
        return Dir(_ROTATIONS[self.as_int() * 8 + (n & 7)])

    def rotate_90_cw(self) -> "Dir":
        return self.rotate(2)

    def rotate_90_ccw(self) -> "Dir":
        return self.rotate(-2)

    def rotate_180(self) -> "Dir":
        return self.rotate(4)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Dir):
            return self.compass == other.compass
        if isinstance(other, Compass):
            return self.compass == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(int(self.compass))

    def __repr__(self) -> str:
        return f"Dir({self.compass.name})"


@dataclass(frozen=True)
class Coord:
    """A signed 16-bit pair; arithmetic wraps like int16."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _wrap16(self.x))
        object.__setattr__(self, "y", _wrap16(self.y))

    def is_normalized(self) -> bool:
        return -1 <= self.x <= 1 and -1 <= self.y <= 1

    def normalize(self) -> "Coord":
        """Return the unit offset toward the nearest of the eight neighbours."""
        return self.as_dir().as_normalized_coord()

    def length(self) -> int:
        """Euclidean length rounded down."""
        return math.isqrt(self.x * self.x + self.y * self.y)

    def as_dir(self) -> Dir:
        xp = self.x * _TAN_D + self.y * _TAN_N
        yp = self.y * _TAN_D - self.x * _TAN_N
        index = (yp > 0) * 8 + (xp > 0) * 4 + (yp > xp) * 2 + (yp >= -xp)
        return Dir(_CONVERSION[index])

    def as_polar(self) -> "Polar":
        return Polar(self.length(), self.as_dir())

    def ray_sameness(self, other: "Coord | Dir") -> float:
        """Return -1.0 (opposite) .. 1.0 (same); 1.0 if either vector is zero."""
        if isinstance(other, Dir):
            other = other.as_normalized_coord()
        mag = (self.x * self.x + self.y * self.y) * (other.x * other.x + other.y * other.y)
        if mag == 0:
            return 1.0
        return (self.x * other.x + self.y * other.y) / math.sqrt(mag)

    def __add__(self, other: "Coord | Dir") -> "Coord":
        if isinstance(other, Dir):
            other = other.as_normalized_coord()
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Coord | Dir") -> "Coord":
        if isinstance(other, Dir):
            other = other.as_normalized_coord()
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> "Coord":
        if not isinstance(factor, int):
            return NotImplemented
        return Coord(self.x * factor, self.y * factor)


@dataclass(frozen=True)
class Polar:
    """A signed magnitude and a direction."""

    mag: int = 0
    dir: Dir = field(default_factory=Dir)

    def __post_init__(self) -> None:
        if not isinstance(self.dir, Dir):
            object.__setattr__(self, "dir", Dir(self.dir))

    def as_coord(self) -> Coord:
        d = self.dir.as_int()
        scaled = _COORD_MAGS[d] * self.mag
        # Add or subtract one half in fixed point, then truncate toward zero.
        half = (self.mag >> 32) ^ ((1 << 31) - 1)
        length = _trunc_div(scaled + half, _ONE)
        return Coord(*_NORMALIZED[d]) * length