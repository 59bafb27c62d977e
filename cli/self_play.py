"""CLI command to run AI-vs-AI Noughts and Crosses matches."""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from ai.base_ai import BaseAI
from ai.minimax_ai import MinimaxAI
from ai.random_ai import RandomAI
from arena.self_play import SelfPlayConfig, SelfPlayRunner

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play AI-vs-AI Noughts and Crosses matches.")
    parser.add_argument("--config", type=str, default=None, help="Optional self-play config JSON")
    parser.add_argument("--games", type=int, default=None, help="Number of games to play")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random players")
    parser.add_argument("--nought", type=str, default="minimax", choices=["minimax", "random"], help="Nought player")
    parser.add_argument("--cross", type=str, default="minimax", choices=["minimax", "random"], help="Cross player")
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args(argv)


def build_agent(ai_kind: str, seed: Optional[int]) -> BaseAI:
    if ai_kind == "minimax":
        return MinimaxAI()
    if ai_kind == "random":
        return RandomAI(seed=seed)
    raise ValueError(f"Unsupported AI type: {ai_kind}")


def main(argv: Optional[list] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    config = SelfPlayConfig.from_json(args.config) if args.config else SelfPlayConfig()
    if args.games is not None:
        config.games = args.games
    if args.seed is not None:
        config.base_seed = args.seed

    nought_ai = build_agent(args.nought, config.base_seed)
    cross_ai = build_agent(args.cross, None if config.base_seed is None else config.base_seed + 1)

    runner = SelfPlayRunner(config)
    records = runner.run_games(nought_ai, cross_ai)
    summary = runner.summarize(records)
    LOGGER.info("Finished %d games on a %dx%d board", len(records), config.board_size, config.board_size)
    print(
        f"Nought ({args.nought}) wins: {summary['nought_wins']} | "
        f"Cross ({args.cross}) wins: {summary['cross_wins']} | "
        f"Draws: {summary['draws']}"
    )


if __name__ == "__main__":
    main()
