"""RuleEngine: applies player actions to immutable game states.

Each accepted placement runs the full pipeline:

    validate -> occupy cells -> placement score -> detect lines ->
    clear union of line cells -> line score / combo -> replenish hand ->
    game-over check

``apply_action`` never mutates its input. Rejected actions return the same
state object with no events; contract violations raise.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Union

from hexline.engine.errors import (
    ContractViolationError,
    UnknownActionError,
    UnknownFigureError,
)
from hexline.engine.models import Action, ActionType, Event, EventType, GameConfig
from hexline.engine.protocol import FigureGenerator
from hexline.game.figures import Figure
from hexline.game.generator import WeightedFigureGenerator
from hexline.game.grid import HexGrid, build_geometry
from hexline.game.lines import cells_to_clear, detect_lines
from hexline.game.placement import (
    get_valid_placements,
    has_any_placement,
    target_cells,
    validate_placement,
)
from hexline.game.scoring import ScoreEngine, ScoreState
from hexline.game.types import AxialCoord

logger = logging.getLogger(__name__)

GeneratorLike = Union[FigureGenerator, Callable[[], Figure]]

HAND_SIZE = 3


@dataclass(frozen=True)
class GameState:
    grid: HexGrid
    figures: tuple[Figure, ...] = ()
    score: ScoreState = field(default_factory=ScoreState)
    game_over: bool = False
    turn_number: int = 0

    @property
    def figure_ids(self) -> list[str]:
        return [f.figure_id for f in self.figures]

    def get_figure(self, figure_id: str) -> Figure | None:
        for figure in self.figures:
            if figure.figure_id == figure_id:
                return figure
        return None


@dataclass(frozen=True)
class TransitionResult:
    state: GameState
    events: list[Event] = field(default_factory=list)
    accepted: bool = True
    reason: str | None = None


def _rejected(state: GameState, reason: str) -> TransitionResult:
    return TransitionResult(state=state, events=[], accepted=False, reason=reason)


class RuleEngine:
    """Deterministic rules for the endless hexline session.

    The figure source is injected; without one the engine seeds a
    WeightedFigureGenerator from ``config.random_seed`` and
    ``config.figure_weights``. The hand holds exactly ``HAND_SIZE`` figures
    after every accepted action.
    """

    def __init__(
        self,
        generator: GeneratorLike | None = None,
        config: GameConfig | None = None,
    ) -> None:
        self.config = config or GameConfig()
        geometry = build_geometry(self.config.radius)
        self.score_engine = ScoreEngine(
            min_line_length=geometry.min_line_length,
            max_line_length=geometry.max_line_length,
        )
        if generator is None:
            generator = WeightedFigureGenerator(
                seed=self.config.random_seed, weights=self.config.figure_weights
            )
        if isinstance(generator, FigureGenerator):
            self._generate: Callable[[], Figure] = generator.generate_figure
        else:
            self._generate = generator

    # ── Lifecycle ──

    def create_initial_state(self) -> tuple[GameState, list[Event]]:
        """Empty board, empty hand. Follow with a generate_initial_figures action."""
        state = GameState(grid=HexGrid(self.config.radius))
        events = [
            Event(event_type=EventType.GAME_STARTED, payload={
                "radius": self.config.radius,
                "cell_count": len(state.grid),
                "hand_size": HAND_SIZE,
            }),
        ]
        return state, events

    def start_game(self) -> tuple[GameState, list[Event]]:
        state, events = self.create_initial_state()
        result = self.apply_action(state, Action.deal())
        return result.state, events + result.events

    # ── Queries ──

    def get_valid_actions(self, state: GameState) -> list[dict]:
        """Every legal placement as a place_figure payload."""
        if state.game_over:
            return []
        actions: list[dict] = []
        for figure in state.figures:
            for anchor in get_valid_placements(state.grid, figure):
                actions.append({"figure_id": figure.figure_id, "q": anchor.q, "r": anchor.r})
        return actions

    def validate_action(self, state: GameState, action: Action) -> str | None:
        """Return a rejection reason, or None if *action* would be accepted."""
        if state.game_over:
            return "Game is over"

        if action.action_type == ActionType.GENERATE_INITIAL_FIGURES:
            if state.figures:
                return "Figures already dealt"
            return None

        if action.action_type == ActionType.SELECT_FIGURE:
            self._resolve_figure(state, action.payload)
            return None

        if action.action_type == ActionType.PLACE_FIGURE:
            figure = self._resolve_figure(state, action.payload)
            anchor = _anchor_from_payload(action.payload)
            return validate_placement(state.grid, figure, anchor)

        raise UnknownActionError(str(action.action_type))

    def get_player_view(self, state: GameState) -> dict:
        """Full snapshot for rendering."""
        return {
            "grid": {
                "radius": state.grid.radius,
                "cells": state.grid.to_rows(),
            },
            "figures": [f.to_dict() for f in state.figures],
            "score": state.score.to_dict(),
            "game_over": state.game_over,
            "turn_number": state.turn_number,
        }

    # ── Transitions ──

    def apply_action(self, state: GameState, action: Action) -> TransitionResult:
        reason = self.validate_action(state, action)
        if reason is not None:
            logger.debug(f"Rejected {action.action_type.value}: {reason}")
            return _rejected(state, reason)

        if action.action_type == ActionType.GENERATE_INITIAL_FIGURES:
            return self._apply_deal(state)
        if action.action_type == ActionType.SELECT_FIGURE:
            # Selection is presentation-only
            return TransitionResult(state=state)
        return self._apply_place(state, action)

    def _apply_deal(self, state: GameState) -> TransitionResult:
        figures, dealt = self._replenish(state.figures)
        new_state = replace(state, figures=figures)
        events = [
            Event(event_type=EventType.FIGURES_DEALT, payload={
                "figures": [f.to_dict() for f in dealt],
            }),
        ]
        return self._check_terminal(new_state, events)

    def _apply_place(self, state: GameState, action: Action) -> TransitionResult:
        figure = self._resolve_figure(state, action.payload)
        anchor = _anchor_from_payload(action.payload)
        placed_cells = target_cells(figure, anchor)

        # Placement
        grid = state.grid.with_occupied(placed_cells, figure.color)
        figures = tuple(f for f in state.figures if f.figure_id != figure.figure_id)
        score, placed_delta = self.score_engine.apply_placement(state.score, figure)

        events = [
            Event(event_type=EventType.FIGURE_PLACED, payload={
                "figure": figure.to_dict(),
                "anchor": {"q": anchor.q, "r": anchor.r},
                "cells": [[c.q, c.r] for c in placed_cells],
                "score_delta": placed_delta,
            }),
        ]

        # Line detection and clearing
        lines = detect_lines(grid)
        cleared: set[AxialCoord] = set()
        if lines:
            cleared = cells_to_clear(lines)
            grid = grid.with_cleared(cleared)
            logger.debug(
                f"Turn {state.turn_number + 1}: cleared {len(lines)} line(s), {len(cleared)} cells"
            )
        score, line_delta = self.score_engine.apply_clear(score, lines)

        events.append(Event(event_type=EventType.LINE_CLEARED, payload={
            "lines": [line.to_dict() for line in lines],
            "cleared_cells": [[c.q, c.r] for c in sorted(cleared)],
            "combo_multiplier": score.combo_multiplier,
            "score_delta": line_delta,
        }))

        # Replenish
        figures, dealt = self._replenish(figures)
        events.append(Event(event_type=EventType.FIGURES_DEALT, payload={
            "figures": [f.to_dict() for f in dealt],
        }))

        new_state = GameState(
            grid=grid,
            figures=figures,
            score=score,
            game_over=False,
            turn_number=state.turn_number + 1,
        )
        return self._check_terminal(new_state, events)

    def _check_terminal(self, state: GameState, events: list[Event]) -> TransitionResult:
        if has_any_placement(state.grid, state.figures):
            return TransitionResult(state=state, events=events)

        final_score = state.score.total
        logger.info(f"Game over after {state.turn_number} turns, final score {final_score}")
        events.append(Event(event_type=EventType.GAME_OVER, payload={
            "final_score": final_score,
            "turns": state.turn_number,
        }))
        return TransitionResult(state=replace(state, game_over=True), events=events)

    # ── Helpers ──

    def _replenish(self, figures: tuple[Figure, ...]) -> tuple[tuple[Figure, ...], list[Figure]]:
        """Top the hand back up to HAND_SIZE. Returns (hand, newly dealt)."""
        dealt: list[Figure] = []
        while len(figures) + len(dealt) < HAND_SIZE:
            dealt.append(self._generate())

        hand = tuple(figures) + tuple(dealt)
        ids = [f.figure_id for f in hand]
        if len(hand) != HAND_SIZE or len(set(ids)) != len(ids):
            raise ContractViolationError(
                f"Hand must hold {HAND_SIZE} figures with unique ids, got {ids}"
            )
        return hand, dealt

    def _resolve_figure(self, state: GameState, payload: dict) -> Figure:
        figure_id = payload.get("figure_id")
        if figure_id is None:
            raise ContractViolationError("Missing figure_id in payload")
        figure = state.get_figure(figure_id)
        if figure is None:
            raise UnknownFigureError(figure_id, state.figure_ids)
        return figure


def _anchor_from_payload(payload: dict) -> AxialCoord:
    q = payload.get("q")
    r = payload.get("r")
    # bool is an int subclass
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in (q, r)):
        raise ContractViolationError(f"Anchor q and r must be integers, got q={q!r} r={r!r}")
    return AxialCoord(q, r)
