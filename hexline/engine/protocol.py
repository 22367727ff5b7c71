from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from hexline.game.figures import Figure
    from hexline.game.rules import GameState, RuleEngine


@runtime_checkable
class FigureGenerator(Protocol):
    """Source of new figures for replenishing the hand.

    Implementations must hand out figures with unique ids.
    """

    def generate_figure(self) -> Figure:
        ...


class BotStrategy(Protocol):
    """A bot strategy selects an action payload given the current game state."""

    def choose_action(self, state: GameState, engine: RuleEngine) -> dict:
        """Return the chosen placement payload (same shape as get_valid_actions items)."""
        ...
