from __future__ import annotations

from hexline.game.figures import Figure
from hexline.game.grid import HexGrid
from hexline.game.lines import Line, detect_lines
from hexline.game.placement import get_valid_placements, is_valid_placement
from hexline.game.rules import GameState, RuleEngine, TransitionResult
from hexline.game.scoring import ScoreEngine, ScoreState
from hexline.game.types import AxialCoord, Axis, HexCell

__all__ = [
    "AxialCoord",
    "Axis",
    "HexCell",
    "HexGrid",
    "Line",
    "detect_lines",
    "Figure",
    "is_valid_placement",
    "get_valid_placements",
    "ScoreEngine",
    "ScoreState",
    "GameState",
    "RuleEngine",
    "TransitionResult",
]
