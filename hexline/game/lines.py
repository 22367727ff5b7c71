"""Line detection over the grid's static axis-line partition.

A line is complete when every cell on it is occupied. Lines come from the
grid geometry and never change during a game, so detection is a scan of
the precomputed partition.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from hexline.game.types import AxialCoord, Axis

if TYPE_CHECKING:
    from hexline.game.grid import HexGrid


@dataclass(frozen=True)
class Line:
    axis: Axis
    index: int  # value of the constant cube coordinate
    cells: tuple[AxialCoord, ...]

    @property
    def length(self) -> int:
        return len(self.cells)

    @property
    def key(self) -> str:
        return f"{self.axis.value}{self.index:+d}"

    def to_dict(self) -> dict:
        return {
            "axis": self.axis.value,
            "index": self.index,
            "length": self.length,
            "cells": [[c.q, c.r] for c in self.cells],
        }


def is_complete(grid: HexGrid, line: Line) -> bool:
    return all(grid.is_occupied(c) for c in line.cells)


def detect_lines(grid: HexGrid) -> list[Line]:
    """Return every complete line, each once, in partition order."""
    return [line for line in grid.axis_lines() if is_complete(grid, line)]


def detect_lines_touching(grid: HexGrid, coords: Iterable[AxialCoord]) -> list[Line]:
    """Complete lines passing through any of *coords*.

    Same result as ``detect_lines`` filtered to those lines, but only
    inspects the (at most 3 per cell) lines through the changed cells.
    """
    candidates: set[Line] = set()
    for coord in coords:
        candidates.update(grid.lines_through(coord))
    return [
        line for line in grid.axis_lines()
        if line in candidates and is_complete(grid, line)
    ]


def cells_to_clear(lines: Iterable[Line]) -> set[AxialCoord]:
    """Union of the cells of *lines*; intersections appear once."""
    cells: set[AxialCoord] = set()
    for line in lines:
        cells.update(line.cells)
    return cells
