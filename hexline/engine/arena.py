"""Bot arena — run N seeded sessions per strategy and report results."""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from typing import Callable

from hexline.engine.game_simulator import play_session
from hexline.engine.models import GameConfig, SessionResult
from hexline.engine.protocol import BotStrategy
from hexline.game.rules import RuleEngine

logger = logging.getLogger(__name__)


@dataclass
class ArenaResult:
    """Aggregated results for one strategy."""

    name: str
    sessions: list[SessionResult] = field(default_factory=list)
    durations_ms: list[float] = field(default_factory=list)

    @property
    def num_games(self) -> int:
        return len(self.sessions)

    def avg_score(self) -> float:
        scores = [s.final_score for s in self.sessions]
        return sum(scores) / max(len(scores), 1)

    def score_stddev(self) -> float:
        scores = [s.final_score for s in self.sessions]
        if len(scores) < 2:
            return 0.0
        avg = self.avg_score()
        variance = sum((s - avg) ** 2 for s in scores) / (len(scores) - 1)
        return math.sqrt(variance)

    def avg_turns(self) -> float:
        return sum(s.turns for s in self.sessions) / max(self.num_games, 1)

    def best_score(self) -> int:
        return max((s.final_score for s in self.sessions), default=0)

    def summary(self) -> str:
        lines = [f"{self.name} ({self.num_games} games)"]
        lines.append("=" * 60)
        lines.append(
            f"  score: avg={self.avg_score():7.1f} +/- {self.score_stddev():6.1f}  "
            f"best={self.best_score()}"
        )
        lines.append(
            f"  turns: avg={self.avg_turns():6.1f}  "
            f"lines: {sum(s.lines_cleared for s in self.sessions)}"
        )
        if self.durations_ms:
            avg_ms = sum(self.durations_ms) / len(self.durations_ms)
            total_s = sum(self.durations_ms) / 1000
            lines.append(f"  Avg game: {avg_ms:.0f}ms  |  Total: {total_s:.1f}s")
        return "\n".join(lines)


def run_arena(
    name: str,
    strategy_factory: Callable[[int], BotStrategy],
    num_games: int = 20,
    base_seed: int = 0,
    config: GameConfig | None = None,
    max_turns: int = 10000,
    progress_callback: Callable[[int, int], None] | None = None,
) -> ArenaResult:
    """Play *num_games* sessions with fresh strategies and generators.

    Game *i* seeds both the figure generator and the strategy with
    ``base_seed + i``, so two strategies run with the same base seed see the
    same figure sequence as long as their placements do not affect it.
    """
    config = config or GameConfig()
    result = ArenaResult(name=name)

    for game_idx in range(num_games):
        seed = base_seed + game_idx
        engine = RuleEngine(config=config.model_copy(update={"random_seed": seed}))
        strategy = strategy_factory(seed)

        t0 = time.monotonic()
        session = play_session(engine, strategy, max_turns=max_turns, seed=seed)
        result.durations_ms.append((time.monotonic() - t0) * 1000)
        result.sessions.append(session)

        logger.debug(f"{name} game {game_idx + 1}/{num_games}: score={session.final_score}")
        if progress_callback:
            progress_callback(game_idx + 1, num_games)

    return result
