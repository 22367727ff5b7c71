"""Scoring for placements and line clears.

Scoring rules:
- Placement: 10 points per figure cell, always awarded on an accepted move.
- Line: 100 base points plus a length bonus, linear from +0% at the shortest
  line length to +100% at the longest (5 and 9 on a radius-4 board).
- Combo: the line total is multiplied by a factor chosen by how many lines
  cleared in the same placement. A placement that clears nothing resets it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Sequence

from hexline.game.figures import Figure
from hexline.game.lines import Line

POINTS_PER_CELL = 10
LINE_BASE_SCORE = 100
MIN_LINE_LENGTH = 5
MAX_LINE_LENGTH = 9

# lines cleared in one placement -> multiplier
COMBO_TABLE: dict[int, float] = {0: 1.0, 1: 1.0, 2: 1.5, 3: 2.0, 4: 3.0, 5: 5.0}
MAX_COMBO_LINES = max(COMBO_TABLE)
BASE_MULTIPLIER = 1.0


@dataclass(frozen=True)
class ScoreState:
    total: int = 0
    combo_multiplier: float = BASE_MULTIPLIER
    last_lines_cleared: int = 0

    def __post_init__(self) -> None:
        if self.total < 0:
            raise ValueError(f"Score total cannot be negative: {self.total}")

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "combo_multiplier": self.combo_multiplier,
            "last_lines_cleared": self.last_lines_cleared,
        }


def placement_score(figure: Figure) -> int:
    return POINTS_PER_CELL * len(figure.cells)


def length_bonus(
    length: int,
    min_length: int = MIN_LINE_LENGTH,
    max_length: int = MAX_LINE_LENGTH,
) -> int:
    """Bonus points for a line of *length* cells (clamped to the range)."""
    if max_length <= min_length:
        return 0
    clamped = min(max(length, min_length), max_length)
    return LINE_BASE_SCORE * (clamped - min_length) // (max_length - min_length)


def combo_multiplier(lines_this_turn: int) -> float:
    if lines_this_turn <= 0:
        return BASE_MULTIPLIER
    return COMBO_TABLE[min(lines_this_turn, MAX_COMBO_LINES)]


def calculate_line_score(
    lines: Sequence[Line],
    combo: float,
    min_length: int = MIN_LINE_LENGTH,
    max_length: int = MAX_LINE_LENGTH,
) -> int:
    """Sum of (base + length bonus) over *lines*, times *combo*, rounded down."""
    raw = sum(
        LINE_BASE_SCORE + length_bonus(line.length, min_length, max_length)
        for line in lines
    )
    return math.floor(raw * combo)


class ScoreEngine:
    """Applies placement and clear scoring to a ScoreState.

    Line-length bounds come from the grid the engine scores for; the engine
    itself never inspects the grid.
    """

    def __init__(
        self,
        min_line_length: int = MIN_LINE_LENGTH,
        max_line_length: int = MAX_LINE_LENGTH,
    ) -> None:
        self.min_line_length = min_line_length
        self.max_line_length = max_line_length

    def apply_placement(self, state: ScoreState, figure: Figure) -> tuple[ScoreState, int]:
        delta = placement_score(figure)
        return replace(state, total=state.total + delta), delta

    def apply_clear(self, state: ScoreState, lines: Sequence[Line]) -> tuple[ScoreState, int]:
        """Score the lines cleared by one placement and update the combo.

        With no lines the combo resets to its baseline and no points are added.
        """
        count = len(lines)
        if count == 0:
            return ScoreState(
                total=state.total,
                combo_multiplier=BASE_MULTIPLIER,
                last_lines_cleared=0,
            ), 0

        combo = combo_multiplier(count)
        delta = calculate_line_score(lines, combo, self.min_line_length, self.max_line_length)
        return ScoreState(
            total=state.total + delta,
            combo_multiplier=combo,
            last_lines_cleared=count,
        ), delta
