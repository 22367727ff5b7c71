"""Domain types and hex coordinate math for the hexline board.

Coordinates are axial ``(q, r)`` with the implicit cube coordinate
``s = -q - r``. Pixel conversion assumes pointy-top hexagons.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

SQRT3 = math.sqrt(3)


@dataclass(frozen=True, order=True)
class AxialCoord:
    """Immutable axial hex coordinate, usable as a dict key."""

    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    @property
    def cube(self) -> tuple[int, int, int]:
        return self.q, self.r, self.s

    def __add__(self, other: AxialCoord) -> AxialCoord:
        return AxialCoord(self.q + other.q, self.r + other.r)

    def __sub__(self, other: AxialCoord) -> AxialCoord:
        return AxialCoord(self.q - other.q, self.r - other.r)

    def __repr__(self) -> str:
        return f"AxialCoord({self.q}, {self.r})"


@dataclass(frozen=True)
class HexCell:
    coord: AxialCoord
    occupied: bool = False
    owner: str | None = None


class Axis(str, Enum):
    """Cube coordinate held constant along a line."""

    Q = "q"  # runs along (0, 1)
    R = "r"  # runs along (1, 0)
    S = "s"  # runs along (1, -1)


# The 6 unit offsets, counter-clockwise starting east
HEX_DIRECTIONS: list[AxialCoord] = [
    AxialCoord(1, 0), AxialCoord(1, -1), AxialCoord(0, -1),
    AxialCoord(-1, 0), AxialCoord(-1, 1), AxialCoord(0, 1),
]

# Traversal direction for each axis (the opposite direction yields the same runs)
AXIS_DIRECTIONS: dict[Axis, AxialCoord] = {
    Axis.Q: AxialCoord(0, 1),
    Axis.R: AxialCoord(1, 0),
    Axis.S: AxialCoord(1, -1),
}


def hex_neighbors(coord: AxialCoord) -> list[AxialCoord]:
    """Return the 6 axial neighbors of *coord* (no bounds check)."""
    return [coord + d for d in HEX_DIRECTIONS]


def axial_to_cube(coord: AxialCoord) -> tuple[int, int, int]:
    return coord.cube


def cube_to_axial(q: int, r: int, s: int) -> AxialCoord:
    if q + r + s != 0:
        raise ValueError(f"Invalid cube coordinate ({q}, {r}, {s}): q + r + s must be 0")
    return AxialCoord(q, r)


def cube_distance(a: AxialCoord, b: AxialCoord) -> int:
    dq = a.q - b.q
    dr = a.r - b.r
    return (abs(dq) + abs(dq + dr) + abs(dr)) // 2


def axial_to_pixel(coord: AxialCoord, size: float) -> tuple[float, float]:
    """Center of a pointy-top hex of circumradius *size*."""
    x = size * SQRT3 * (coord.q + coord.r / 2)
    y = size * 1.5 * coord.r
    return x, y


def pixel_to_axial(x: float, y: float, size: float) -> AxialCoord:
    """Inverse of axial_to_pixel, rounded to the containing hex."""
    frac_q = (SQRT3 / 3 * x - y / 3) / size
    frac_r = (2 / 3 * y) / size
    return _cube_round(frac_q, frac_r, -frac_q - frac_r)


def _cube_round(frac_q: float, frac_r: float, frac_s: float) -> AxialCoord:
    """Round fractional cube coordinates while keeping q + r + s == 0."""
    q = round(frac_q)
    r = round(frac_r)
    s = round(frac_s)

    dq = abs(q - frac_q)
    dr = abs(r - frac_r)
    ds = abs(s - frac_s)

    if dq > dr and dq > ds:
        q = -r - s
    elif dr > ds:
        r = -q - s

    return AxialCoord(int(q), int(r))
