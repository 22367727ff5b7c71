"""Bot strategy abstraction — maps bot_id strings to action-selection callables."""

from __future__ import annotations

import random as _random
from typing import TYPE_CHECKING, Callable

from hexline.engine.models import Action
from hexline.engine.protocol import BotStrategy
from hexline.game.lines import cells_to_clear, detect_lines
from hexline.game.placement import target_cells
from hexline.game.types import AxialCoord

if TYPE_CHECKING:
    from hexline.game.rules import GameState, RuleEngine


class RandomStrategy:
    """Picks a uniformly random valid placement."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = _random.Random(seed)

    def choose_action(self, state: GameState, engine: RuleEngine) -> dict:
        valid = engine.get_valid_actions(state)
        return self._rng.choice(valid)


class GreedyStrategy:
    """Picks the placement with the highest immediate score gain.

    Ties are broken by keeping more empty cells, then by enumeration order.
    Lookahead is one placement; the replenished hand is not considered.
    """

    def choose_action(self, state: GameState, engine: RuleEngine) -> dict:
        valid = engine.get_valid_actions(state)
        best: dict | None = None
        best_key: tuple[int, int] | None = None

        for payload in valid:
            gain, empty = _preview(state, engine, payload)
            key = (gain, empty)
            if best_key is None or key > best_key:
                best, best_key = payload, key

        if best is None:
            raise ValueError("GreedyStrategy called with no valid placements")
        return best


def _preview(state: GameState, engine: RuleEngine, payload: dict) -> tuple[int, int]:
    """Score gain and resulting empty-cell count of a placement, without dealing."""
    figure = state.get_figure(payload["figure_id"])
    anchor = AxialCoord(payload["q"], payload["r"])
    grid = state.grid.with_occupied(target_cells(figure, anchor), figure.color)
    lines = detect_lines(grid)
    if lines:
        grid = grid.with_cleared(cells_to_clear(lines))

    score, _ = engine.score_engine.apply_placement(state.score, figure)
    score, _ = engine.score_engine.apply_clear(score, lines)
    return score.total - state.score.total, len(grid) - grid.occupied_count


def choose_place_action(strategy: BotStrategy, state: GameState, engine: RuleEngine) -> Action:
    payload = strategy.choose_action(state, engine)
    return Action.place(payload["figure_id"], payload["q"], payload["r"])


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_STRATEGY_FACTORIES: dict[str, Callable[..., BotStrategy]] = {
    "random": lambda seed=None, **_kwargs: RandomStrategy(seed=seed),
    "greedy": lambda **_kwargs: GreedyStrategy(),
}


def get_strategy(bot_id: str, **kwargs: object) -> BotStrategy:
    """Create a BotStrategy instance for the given *bot_id*."""
    factory = _STRATEGY_FACTORIES.get(bot_id)
    if factory is None:
        raise ValueError(f"Unknown bot_id: {bot_id!r}")
    return factory(**kwargs)


def list_strategies() -> list[str]:
    return sorted(_STRATEGY_FACTORIES)


def register_strategy(
    bot_id: str, factory: Callable[..., BotStrategy]
) -> None:
    """Register a new strategy factory."""
    _STRATEGY_FACTORIES[bot_id] = factory
