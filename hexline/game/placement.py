"""Placement legality for figures on a grid snapshot.

Figures are checked in the rotation they carry; nothing here rotates them.
"""

from __future__ import annotations

from typing import Iterable

from hexline.game.figures import Figure
from hexline.game.grid import HexGrid
from hexline.game.types import AxialCoord


def target_cells(figure: Figure, anchor: AxialCoord) -> list[AxialCoord]:
    """Absolute cells covered by *figure* anchored at *anchor*."""
    return [anchor + offset for offset in figure.cells]


def validate_placement(grid: HexGrid, figure: Figure, anchor: AxialCoord) -> str | None:
    """Validate a placement. Return error message or None if valid."""
    for coord in target_cells(figure, anchor):
        if not grid.contains(coord):
            return f"Cell ({coord.q},{coord.r}) is outside the grid"
        if grid.is_occupied(coord):
            return f"Cell ({coord.q},{coord.r}) is already occupied"
    return None


def is_valid_placement(grid: HexGrid, figure: Figure, anchor: AxialCoord) -> bool:
    return validate_placement(grid, figure, anchor) is None


def get_valid_placements(grid: HexGrid, figure: Figure) -> list[AxialCoord]:
    """All anchors where *figure* fits, in grid enumeration order."""
    return [
        anchor for anchor in grid.cells()
        if is_valid_placement(grid, figure, anchor)
    ]


def has_any_placement(grid: HexGrid, figures: Iterable[Figure]) -> bool:
    """True if at least one of *figures* fits somewhere. Stops at the first fit."""
    for figure in figures:
        for anchor in grid.cells():
            if is_valid_placement(grid, figure, anchor):
                return True
    return False
