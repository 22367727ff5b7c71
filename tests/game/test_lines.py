"""Tests for line detection over the axis-line partition."""

from __future__ import annotations

from hexline.game.grid import HexGrid
from hexline.game.lines import (
    Line,
    cells_to_clear,
    detect_lines,
    detect_lines_touching,
)
from hexline.game.types import AxialCoord, Axis


def _line(grid: HexGrid, axis: Axis, index: int) -> Line:
    for line in grid.axis_lines():
        if line.axis == axis and line.index == index:
            return line
    raise AssertionError(f"No line {axis} {index}")


class TestDetectLines:
    def test_empty_grid(self, empty_grid: HexGrid) -> None:
        assert detect_lines(empty_grid) == []

    def test_single_short_line(self, empty_grid: HexGrid) -> None:
        top = _line(empty_grid, Axis.R, -4)
        grid = empty_grid.with_occupied(top.cells, "red")
        lines = detect_lines(grid)
        assert lines == [top]
        assert lines[0].length == 5
        assert lines[0].axis == Axis.R

    def test_central_line(self, empty_grid: HexGrid) -> None:
        middle = _line(empty_grid, Axis.S, 0)
        grid = empty_grid.with_occupied(middle.cells, "red")
        assert [line.length for line in detect_lines(grid)] == [9]

    def test_incomplete_line_not_reported(self, empty_grid: HexGrid) -> None:
        top = _line(empty_grid, Axis.R, -4)
        grid = empty_grid.with_occupied(top.cells[:-1], "red")
        assert detect_lines(grid) == []

    def test_all_axes_detected(self, empty_grid: HexGrid) -> None:
        a = _line(empty_grid, Axis.Q, 2)
        b = _line(empty_grid, Axis.R, -1)
        c = _line(empty_grid, Axis.S, 3)
        grid = empty_grid.with_occupied(a.cells + b.cells + c.cells, "red")
        found = detect_lines(grid)
        assert set(found) == {a, b, c}
        assert len(found) == 3

    def test_full_grid_reports_every_line_once(self, empty_grid: HexGrid) -> None:
        full = empty_grid.with_occupied(empty_grid.cells(), "red")
        found = detect_lines(full)
        assert len(found) == 27
        assert len(set(found)) == 27

    def test_idempotent(self, empty_grid: HexGrid) -> None:
        grid = empty_grid.with_occupied(_line(empty_grid, Axis.Q, -3).cells, "red")
        assert detect_lines(grid) == detect_lines(grid)

    def test_lattice_has_no_lines(self, blocked_grid: HexGrid) -> None:
        assert detect_lines(blocked_grid) == []


class TestDetectLinesTouching:
    def test_matches_full_detection_filtered(self, empty_grid: HexGrid) -> None:
        a = _line(empty_grid, Axis.R, 4)
        b = _line(empty_grid, Axis.Q, -4)
        grid = empty_grid.with_occupied(a.cells + b.cells, "red")
        touched = detect_lines_touching(grid, [a.cells[0]])
        expected = [ln for ln in detect_lines(grid) if a.cells[0] in ln.cells]
        assert touched == expected

    def test_untouched_lines_ignored(self, empty_grid: HexGrid) -> None:
        a = _line(empty_grid, Axis.R, 4)
        grid = empty_grid.with_occupied(a.cells, "red")
        assert detect_lines_touching(grid, [AxialCoord(0, -4)]) == []


class TestCellsToClear:
    def test_intersection_counted_once(self, empty_grid: HexGrid) -> None:
        top = _line(empty_grid, Axis.R, -4)     # (0,-4) .. (4,-4)
        side = _line(empty_grid, Axis.Q, 4)     # (4,-4) .. (4,0)
        cells = cells_to_clear([top, side])
        assert AxialCoord(4, -4) in cells
        assert len(cells) == 9

    def test_no_lines(self) -> None:
        assert cells_to_clear([]) == set()


class TestLine:
    def test_to_dict(self, empty_grid: HexGrid) -> None:
        data = _line(empty_grid, Axis.R, -4).to_dict()
        assert data["axis"] == "r"
        assert data["length"] == 5
        assert data["cells"][0] == [0, -4]

    def test_key(self, empty_grid: HexGrid) -> None:
        assert _line(empty_grid, Axis.S, -2).key == "s-2"
