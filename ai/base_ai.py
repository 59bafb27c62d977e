"""Base AI interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from engine.board import Board
from engine.cells import Cell


class BaseAI(ABC):
    """Abstract player strategy contract."""

    @abstractmethod
    def choose_move(self, board: Board, symbol: Cell) -> int:
        """Choose a valid cell for ``symbol`` without leaving the board changed."""
        raise NotImplementedError
