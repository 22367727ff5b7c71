from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# --- Config ---
class GameConfig(BaseModel):
    # The hand size is fixed by the rules, see hexline.game.rules.HAND_SIZE
    model_config = ConfigDict(extra="forbid")

    radius: int = 4
    random_seed: int | None = None
    figure_weights: dict[str, float] | None = None

# --- Action ---
class ActionType(str, Enum):
    GENERATE_INITIAL_FIGURES = "generate_initial_figures"
    SELECT_FIGURE = "select_figure"
    PLACE_FIGURE = "place_figure"

class Action(BaseModel):
    action_type: ActionType
    payload: dict = Field(default_factory=dict)

    @classmethod
    def place(cls, figure_id: str, q: int, r: int) -> Action:
        return cls(
            action_type=ActionType.PLACE_FIGURE,
            payload={"figure_id": figure_id, "q": q, "r": r},
        )

    @classmethod
    def select(cls, figure_id: str) -> Action:
        return cls(action_type=ActionType.SELECT_FIGURE, payload={"figure_id": figure_id})

    @classmethod
    def deal(cls) -> Action:
        return cls(action_type=ActionType.GENERATE_INITIAL_FIGURES)

# --- Event ---
class EventType(str, Enum):
    GAME_STARTED = "game_started"
    FIGURES_DEALT = "figures_dealt"
    FIGURE_PLACED = "figure_placed"
    LINE_CLEARED = "line_cleared"
    GAME_OVER = "game_over"

class Event(BaseModel):
    event_type: EventType
    payload: dict = Field(default_factory=dict)

# --- Session results ---
class SessionResult(BaseModel):
    final_score: int
    turns: int
    lines_cleared: int
    best_combo: float = 1.0
    game_over: bool = True
    seed: int | None = None
    details: dict = Field(default_factory=dict)
