"""Uniformly random baseline player."""

from __future__ import annotations

import random
from typing import Optional

from ai.base_ai import BaseAI
from engine.board import Board
from engine.cells import Cell


class RandomAI(BaseAI):
    """Plays any valid cell with equal probability."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def choose_move(self, board: Board, symbol: Cell) -> int:
        if not symbol.is_player:
            raise ValueError("RandomAI needs a player symbol, not EMPTY.")
        legal_cells = [cell for cell in range(board.cell_count) if board.is_valid_move(cell, symbol)]
        if not legal_cells:
            raise RuntimeError("No legal moves available.")
        return self._rng.choice(legal_cells)
