"""Hexagonal board geometry and occupancy snapshots.

A ``HexGrid`` pairs an immutable geometry (cell set, adjacency, axis-line
partition) with an occupancy map. Geometry is built once per radius and
shared by every snapshot; occupancy changes produce a new ``HexGrid``.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from hexline.engine.errors import InvalidGridError
from hexline.game.lines import Line
from hexline.game.types import (
    AXIS_DIRECTIONS,
    AxialCoord,
    Axis,
    HexCell,
    hex_neighbors,
)

DEFAULT_RADIUS = 4


def cell_count_for_radius(radius: int) -> int:
    return 3 * radius * radius + 3 * radius + 1


@dataclass(frozen=True)
class GridGeometry:
    """Static structure of a centered hexagon of a given radius."""

    radius: int
    cells: tuple[AxialCoord, ...]
    index: Mapping[AxialCoord, int]
    adjacency: Mapping[AxialCoord, tuple[AxialCoord, ...]]
    lines: tuple[Line, ...]
    lines_by_cell: Mapping[AxialCoord, tuple[Line, ...]]

    @property
    def min_line_length(self) -> int:
        return self.radius + 1

    @property
    def max_line_length(self) -> int:
        return 2 * self.radius + 1


def _in_bounds(q: int, r: int, radius: int) -> bool:
    return max(abs(q), abs(r), abs(q + r)) <= radius


@lru_cache(maxsize=None)
def build_geometry(radius: int) -> GridGeometry:
    """Enumerate cells and partition them into axis-lines. Cached per radius."""
    if radius <= 0:
        raise InvalidGridError(radius)

    cells = tuple(
        AxialCoord(q, r)
        for q in range(-radius, radius + 1)
        for r in range(-radius, radius + 1)
        if _in_bounds(q, r, radius)
    )
    cell_set = frozenset(cells)

    adjacency = {
        c: tuple(n for n in hex_neighbors(c) if n in cell_set)
        for c in cells
    }

    lines: list[Line] = []
    for axis, step in AXIS_DIRECTIONS.items():
        for value in range(-radius, radius + 1):
            run = tuple(_walk_run(axis, value, step, radius))
            lines.append(Line(axis=axis, index=value, cells=run))

    lines_by_cell: dict[AxialCoord, list[Line]] = {c: [] for c in cells}
    for line in lines:
        for c in line.cells:
            lines_by_cell[c].append(line)

    return GridGeometry(
        radius=radius,
        cells=cells,
        index=MappingProxyType({c: i for i, c in enumerate(cells)}),
        adjacency=MappingProxyType(adjacency),
        lines=tuple(lines),
        lines_by_cell=MappingProxyType({c: tuple(ls) for c, ls in lines_by_cell.items()}),
    )


def _walk_run(axis: Axis, value: int, step: AxialCoord, radius: int) -> Iterator[AxialCoord]:
    """Yield the cells of the run where cube coordinate *axis* equals *value*."""
    # Start from the lowest cell on the run, then step until leaving the grid
    if axis is Axis.Q:
        start = AxialCoord(value, max(-radius, -radius - value))
    elif axis is Axis.R:
        start = AxialCoord(max(-radius, -radius - value), value)
    else:
        # s = value  =>  r = -value - q; smallest q still in bounds
        q0 = max(-radius, -radius - value)
        start = AxialCoord(q0, -value - q0)

    coord = start
    while _in_bounds(coord.q, coord.r, radius):
        yield coord
        coord = coord + step


class HexGrid:
    """Snapshot of the board: shared geometry plus an occupancy map.

    ``occupancy`` maps occupied coordinates to their owner label. Instances
    are treated as immutable; use ``with_occupied`` / ``with_cleared`` to
    derive new snapshots.
    """

    __slots__ = ("_geometry", "_occupancy")

    def __init__(
        self,
        radius: int = DEFAULT_RADIUS,
        occupancy: Mapping[AxialCoord, str] | None = None,
        *,
        geometry: GridGeometry | None = None,
    ) -> None:
        self._geometry = geometry or build_geometry(radius)
        occ = dict(occupancy or {})
        for coord in occ:
            if coord not in self._geometry.index:
                raise ValueError(f"Occupied coordinate {coord} is outside the grid")
            if occ[coord] is None:
                raise ValueError(f"Occupied coordinate {coord} needs an owner")
        self._occupancy: Mapping[AxialCoord, str] = MappingProxyType(occ)

    # ── Geometry ──

    @property
    def geometry(self) -> GridGeometry:
        return self._geometry

    @property
    def radius(self) -> int:
        return self._geometry.radius

    def cells(self) -> tuple[AxialCoord, ...]:
        """All coordinates in enumeration order (q ascending, then r)."""
        return self._geometry.cells

    def __len__(self) -> int:
        return len(self._geometry.cells)

    def contains(self, coord: AxialCoord) -> bool:
        return coord in self._geometry.index

    def get_cell(self, coord: AxialCoord) -> HexCell | None:
        if coord not in self._geometry.index:
            return None
        owner = self._occupancy.get(coord)
        return HexCell(coord=coord, occupied=owner is not None, owner=owner)

    def neighbors(self, coord: AxialCoord) -> list[HexCell]:
        """Existing neighbor cells of *coord*; off-grid entries are omitted."""
        adjacent = self._geometry.adjacency.get(coord, ())
        return [self.get_cell(n) for n in adjacent]

    def axis_lines(self) -> tuple[Line, ...]:
        return self._geometry.lines

    def lines_through(self, coord: AxialCoord) -> tuple[Line, ...]:
        return self._geometry.lines_by_cell.get(coord, ())

    # ── Occupancy ──

    @property
    def occupancy(self) -> Mapping[AxialCoord, str]:
        return self._occupancy

    def is_occupied(self, coord: AxialCoord) -> bool:
        return coord in self._occupancy

    @property
    def occupied_count(self) -> int:
        return len(self._occupancy)

    def empty_cells(self) -> list[AxialCoord]:
        return [c for c in self._geometry.cells if c not in self._occupancy]

    def with_occupied(self, coords: Iterable[AxialCoord], owner: str) -> HexGrid:
        """Return a new snapshot with *coords* marked occupied by *owner*."""
        occ = dict(self._occupancy)
        for coord in coords:
            occ[coord] = owner
        return HexGrid(occupancy=occ, geometry=self._geometry)

    def with_cleared(self, coords: Iterable[AxialCoord]) -> HexGrid:
        """Return a new snapshot with *coords* emptied."""
        occ = dict(self._occupancy)
        for coord in coords:
            occ.pop(coord, None)
        return HexGrid(occupancy=occ, geometry=self._geometry)

    # ── Serialisation ──

    def to_rows(self) -> list[dict]:
        """Flat cell list for rendering: [{"q", "r", "owner"}, ...]."""
        return [
            {"q": c.q, "r": c.r, "owner": self._occupancy.get(c)}
            for c in self._geometry.cells
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexGrid):
            return NotImplemented
        return (
            self._geometry.radius == other._geometry.radius
            and dict(self._occupancy) == dict(other._occupancy)
        )

    def __hash__(self) -> int:
        return hash((self._geometry.radius, frozenset(self._occupancy.items())))

    def __repr__(self) -> str:
        return f"HexGrid(radius={self.radius}, occupied={self.occupied_count}/{len(self)})"
