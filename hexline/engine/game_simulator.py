"""Synchronous session driver — plays one strategy until game over.

Used by the arena and tests to run complete games without a UI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from hexline.engine.bot_strategy import choose_place_action
from hexline.engine.models import Action, Event, EventType, SessionResult
from hexline.engine.protocol import BotStrategy
from hexline.game.rules import GameState, RuleEngine

logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    """Running totals for a simulated session."""

    state: GameState
    events: list[Event] = field(default_factory=list)
    lines_cleared: int = 0
    best_combo: float = 1.0
    rejected: int = 0


def play_session(
    engine: RuleEngine,
    strategy: BotStrategy,
    max_turns: int = 10000,
    seed: int | None = None,
) -> SessionResult:
    """Start a game and let *strategy* place figures until game over or *max_turns*."""
    state, events = engine.start_game()
    sim = SimulationState(state=state, events=list(events))

    while not sim.state.game_over and sim.state.turn_number < max_turns:
        action = choose_place_action(strategy, sim.state, engine)
        step(engine, sim, action)

    if not sim.state.game_over:
        logger.warning(f"Session stopped at turn limit {max_turns} (score {sim.state.score.total})")

    return SessionResult(
        final_score=sim.state.score.total,
        turns=sim.state.turn_number,
        lines_cleared=sim.lines_cleared,
        best_combo=sim.best_combo,
        game_over=sim.state.game_over,
        seed=seed,
        details={"rejected": sim.rejected},
    )


def step(engine: RuleEngine, sim: SimulationState, action: Action) -> bool:
    """Apply one action to *sim*. Returns whether it was accepted."""
    result = engine.apply_action(sim.state, action)
    if not result.accepted:
        sim.rejected += 1
        return False

    sim.state = result.state
    sim.events.extend(result.events)
    for event in result.events:
        if event.event_type == EventType.LINE_CLEARED and event.payload["lines"]:
            sim.lines_cleared += len(event.payload["lines"])
            sim.best_combo = max(sim.best_combo, event.payload["combo_multiplier"])
    return True
