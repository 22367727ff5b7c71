"""CLI for running bot sessions in the arena.

Usage::

    hexline-arena --strategy greedy --games 50

    # Compare strategies on the same seeds
    python -m hexline.engine.arena_cli --strategy random --strategy greedy --games 20
"""

from __future__ import annotations

import argparse
import logging
import sys

from hexline.config import settings
from hexline.engine.arena import run_arena
from hexline.engine.bot_strategy import get_strategy, list_strategies
from hexline.engine.models import GameConfig


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="hexline bot arena")
    parser.add_argument(
        "--strategy",
        action="append",
        choices=list_strategies(),
        help="Strategy to evaluate (repeatable, default: random)",
    )
    parser.add_argument("--games", type=int, default=settings.arena_games)
    parser.add_argument("--seed", type=int, default=settings.arena_seed)
    parser.add_argument("--radius", type=int, default=settings.grid_radius)
    parser.add_argument("--max-turns", type=int, default=settings.max_session_turns)
    parser.add_argument("--log-level", default=settings.log_level)
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())

    if args.radius <= 0:
        print(f"Radius must be positive, got {args.radius}", file=sys.stderr)
        return 1

    config = GameConfig(radius=args.radius)
    strategies = args.strategy or ["random"]

    print(f"Arena: {', '.join(strategies)}, {args.games} games, radius {args.radius}")
    print()

    for name in strategies:
        result = run_arena(
            name=name,
            strategy_factory=lambda seed, _name=name: get_strategy(_name, seed=seed),
            num_games=args.games,
            base_seed=args.seed,
            config=config,
            max_turns=args.max_turns,
            progress_callback=lambda done, total: print(
                f"\r  Game {done}/{total}", end="", flush=True
            ),
        )
        print()
        print(result.summary())
        print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
