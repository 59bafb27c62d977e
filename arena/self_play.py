"""Self-play runner for AI-vs-AI Noughts and Crosses matches."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import numpy as np

from ai.base_ai import BaseAI
from engine.board import Board
from engine.cells import Cell
from engine.rules import BOARD_SIZE

LOGGER = logging.getLogger(__name__)


@dataclass
class SelfPlayConfig:
    """Self-play match config."""

    board_size: int = BOARD_SIZE
    games: int = 10
    base_seed: Optional[int] = None
    log_every: int = 1

    @classmethod
    def from_json(cls, path: str | Path) -> "SelfPlayConfig":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in payload.items() if key in known})


@dataclass
class GameRecord:
    """Moves and encoded positions from one full game."""

    moves: List[int] = field(default_factory=list)
    states: List[np.ndarray] = field(default_factory=list)
    winner: Optional[Cell] = None
    is_draw: bool = False

    @property
    def plies(self) -> int:
        return len(self.moves)


class SelfPlayRunner:
    """Runs AI-vs-AI matches and returns game records."""

    def __init__(self, config: SelfPlayConfig | None = None) -> None:
        self.config = config or SelfPlayConfig()

    def play_game(self, nought_ai: BaseAI, cross_ai: BaseAI) -> GameRecord:
        """Play one game from an empty board. Nought moves first."""
        board = Board(self.config.board_size)
        record = GameRecord()
        current = Cell.NOUGHT

        done, winner, is_draw = board.game_over()
        while not done:
            actor = nought_ai if current is Cell.NOUGHT else cross_ai
            cell = actor.choose_move(board, current)
            board.set_cell(cell, current)
            record.moves.append(cell)
            record.states.append(board.encode_state())
            done, winner, is_draw = board.game_over()
            current = current.opponent()

        record.winner = winner
        record.is_draw = is_draw
        return record

    def run_games(self, nought_ai: BaseAI, cross_ai: BaseAI, n_games: int | None = None) -> List[GameRecord]:
        n_games = self.config.games if n_games is None else n_games
        records: List[GameRecord] = []
        for game_index in range(n_games):
            record = self.play_game(nought_ai, cross_ai)
            records.append(record)
            if (game_index + 1) % max(1, self.config.log_every) == 0:
                LOGGER.info(
                    "Self-play game %d/%d | winner=%s draw=%s plies=%d",
                    game_index + 1,
                    n_games,
                    record.winner.name if record.winner else None,
                    record.is_draw,
                    record.plies,
                )
        return records

    @staticmethod
    def summarize(records: Sequence[GameRecord]) -> Dict[str, int]:
        summary = {"nought_wins": 0, "cross_wins": 0, "draws": 0}
        for record in records:
            if record.is_draw:
                summary["draws"] += 1
            elif record.winner is Cell.NOUGHT:
                summary["nought_wins"] += 1
            elif record.winner is Cell.CROSS:
                summary["cross_wins"] += 1
        return summary
