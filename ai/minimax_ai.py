"""Exact minimax AI with alpha-beta pruning for Noughts and Crosses."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from ai.base_ai import BaseAI
from engine.board import Board
from engine.cells import Cell

LOGGER = logging.getLogger(__name__)

# Base scores of each end state. Depth is subtracted from a win and added to
# a loss, so WIN - depth > SCORE_DRAW > LOSE + depth must hold for every
# depth up to the number of cells.
SCORE_WIN = 127
SCORE_LOSE = -128
SCORE_DRAW = 0


def score_bounds(cell_count: int) -> Tuple[int, int]:
    """Return (win, lose) base scores wide enough for a board with ``cell_count`` cells."""
    if cell_count < SCORE_WIN:
        return SCORE_WIN, SCORE_LOSE
    return cell_count + 1, -(cell_count + 1)


class _Search:
    """
    One exhaustive search over a borrowed board.

    Every move is made with ``set_cell`` and unmade with ``set_cell(.., EMPTY)``
    before control returns to the caller, so the board ends the search exactly
    as it started. Alpha-beta bounds are passed by value through the recursion.
    """

    def __init__(self, board: Board, symbol_self: Cell) -> None:
        if not isinstance(symbol_self, Cell) or not symbol_self.is_player:
            raise ValueError(f"Search needs a player symbol, got {symbol_self!r}")
        self.board = board
        self.symbol_self = symbol_self
        self.symbol_other = symbol_self.opponent()
        self.score_win, self.score_lose = score_bounds(board.cell_count)
        self.nodes = 0

    def candidate_cells(self, symbol: Cell) -> List[int]:
        return [cell for cell in range(self.board.cell_count) if self.board.is_valid_move(cell, symbol)]

    def score_move(self, cell: int, alpha: int, beta: int) -> int:
        """Score placing self at ``cell`` as the first ply of the search."""
        self.board.set_cell(cell, self.symbol_self)
        score = self.minimise(1, alpha, beta)
        self.board.set_cell(cell, Cell.EMPTY)
        return score

    def terminal_score(self, depth: int) -> Optional[int]:
        """Score of a won or drawn position, or None if play continues."""
        board = self.board
        if board.is_win(self.symbol_self):
            return self.score_win - depth
        if board.is_win(self.symbol_other):
            return self.score_lose + depth
        if Cell.EMPTY not in board.cells:
            return SCORE_DRAW
        return None

    def maximise(self, depth: int, alpha: int, beta: int) -> int:
        """Self to move: raise alpha, cut off (returning beta) once alpha >= beta."""
        self.nodes += 1
        terminal = self.terminal_score(depth)
        if terminal is not None:
            return terminal

        board = self.board
        for cell in range(board.cell_count):
            if not board.is_valid_move(cell, self.symbol_self):
                continue
            board.set_cell(cell, self.symbol_self)
            score = self.minimise(depth + 1, alpha, beta)
            board.set_cell(cell, Cell.EMPTY)

            alpha = max(alpha, score)
            if alpha >= beta:
                return beta
        return alpha

    def minimise(self, depth: int, alpha: int, beta: int) -> int:
        """Opponent to move: lower beta, cut off (returning alpha) once beta <= alpha."""
        self.nodes += 1
        terminal = self.terminal_score(depth)
        if terminal is not None:
            return terminal

        board = self.board
        for cell in range(board.cell_count):
            if not board.is_valid_move(cell, self.symbol_other):
                continue
            board.set_cell(cell, self.symbol_other)
            score = self.maximise(depth + 1, alpha, beta)
            board.set_cell(cell, Cell.EMPTY)

            beta = min(beta, score)
            if beta <= alpha:
                return alpha
        return beta


def get_best_move(board: Board, symbol_self: Cell) -> int:
    """
    Find the optimal cell for ``symbol_self`` by exhaustive minimax search.

    On a 3x3 board a player using this for every move never loses. Wins that
    take fewer moves and losses that take more are preferred. Ties between
    equally scored cells keep the lowest index. The board is left unchanged.

    Raises RuntimeError when there is no valid move for ``symbol_self``.
    """
    search = _Search(board, symbol_self)
    best_move, _ = _search_root(search)
    return best_move


def score_moves(board: Board, symbol_self: Cell) -> Dict[int, int]:
    """
    Exact minimax value of every valid move for ``symbol_self``.

    Each candidate is searched with the full window, so unlike the root of
    ``get_best_move`` no value is clipped by an earlier sibling.
    """
    search = _Search(board, symbol_self)
    return {
        cell: search.score_move(cell, search.score_lose, search.score_win)
        for cell in search.candidate_cells(symbol_self)
    }


def _search_root(search: _Search) -> Tuple[int, int]:
    candidates = search.candidate_cells(search.symbol_self)
    if not candidates:
        raise RuntimeError("No legal moves available.")

    alpha = search.score_lose
    beta = search.score_win
    best_move: Optional[int] = None
    for cell in candidates:
        score = search.score_move(cell, alpha, beta)
        LOGGER.debug("Candidate cell=%d score=%d alpha=%d", cell, score, alpha)
        # Strict improvement only, so the lowest index wins ties.
        if score > alpha:
            alpha = score
            best_move = cell

    # Every score is strictly above the lose base, so the first candidate
    # always improves on it.
    assert best_move is not None
    return best_move, alpha


class MinimaxAI(BaseAI):
    """Optimal player backed by exhaustive alpha-beta search."""

    def __init__(self) -> None:
        self.nodes_searched = 0
        self.last_score: Optional[int] = None

    def choose_move(self, board: Board, symbol: Cell) -> int:
        search = _Search(board, symbol)
        best_move, best_score = _search_root(search)
        self.nodes_searched = search.nodes
        self.last_score = best_score
        LOGGER.debug(
            "Minimax selected cell %d for %s with score %d after %d nodes",
            best_move,
            symbol.name,
            best_score,
            search.nodes,
        )
        return best_move
