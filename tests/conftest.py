from __future__ import annotations

import pytest

from hexline.game.grid import HexGrid
from hexline.game.types import AxialCoord


def color_class(coord: AxialCoord) -> int:
    """Proper 3-coloring of the hex lattice: neighbors never share a class."""
    return (coord.q - coord.r) % 3


def lattice_grid(radius: int = 4) -> HexGrid:
    """Every cell of class 0 empty, the rest occupied.

    No two empty cells are adjacent and every line keeps at least one empty
    cell, so only single-cell figures fit and no line is complete.
    """
    grid = HexGrid(radius)
    return grid.with_occupied(
        [c for c in grid.cells() if color_class(c) != 0],
        "gray",
    )


@pytest.fixture
def empty_grid() -> HexGrid:
    return HexGrid(4)


@pytest.fixture
def blocked_grid() -> HexGrid:
    return lattice_grid(4)
