"""Noughts and Crosses board state, win/draw detection, and state encoding."""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

import numpy as np

from engine.cells import CELL_TO_CHAR, PLAYER_CELLS, Cell, parse_cell
from engine.rules import (
    BOARD_SIZE,
    Line,
    Position,
    backward_diagonal,
    cell_count,
    column_indices,
    forward_diagonal,
    in_bounds,
    iter_positions,
    row_indices,
)

_PLANE_INDEX = {Cell.NOUGHT: 0, Cell.CROSS: 1, Cell.EMPTY: 2}


class Board:
    """
    Square board of cells stored row-wise in a flat list.

    Moves are made with ``set_cell(cell, player)`` and unmade with
    ``set_cell(cell, Cell.EMPTY)``, so a single board can be shared by
    a game driver and a search that explores moves speculatively.
    """

    def __init__(self, size: int = BOARD_SIZE) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError(f"Board size must be a positive integer, got {size!r}")
        self._size = size
        self.cells: List[Cell] = [Cell.EMPTY] * cell_count(size)

    @classmethod
    def from_string(cls, text: str, size: Optional[int] = None) -> "Board":
        """
        Build a board from a row-major string such as ``"OX..O...."``.

        ``O``/``X`` are players, ``.``, ``-`` or a space are empty cells.
        Newlines are ignored. When ``size`` is omitted it is inferred from
        the string length, which must then be a perfect square.
        """
        chars = [char for char in text if char not in "\r\n"]
        if size is None:
            size = math.isqrt(len(chars))
        if size < 1 or len(chars) != size * size:
            raise ValueError(f"Expected {size * size} cells for size {size}, got {len(chars)}")
        board = cls(size)
        board.cells = [parse_cell(char) for char in chars]
        return board

    def to_string(self) -> str:
        return "".join(CELL_TO_CHAR[cell] for cell in self.cells)

    def clone(self) -> "Board":
        cloned = Board(self._size)
        cloned.cells = list(self.cells)
        return cloned

    @property
    def size(self) -> int:
        return self._size

    @property
    def cell_count(self) -> int:
        return len(self.cells)

    def get_size(self) -> int:
        """Return the width (and height) of the board."""
        return self._size

    def reset(self) -> None:
        """Clear every cell back to empty."""
        for cell in range(self.cell_count):
            self.cells[cell] = Cell.EMPTY

    def is_valid_move(self, cell: int, symbol: Cell) -> bool:
        """
        Return whether ``symbol`` may be written to ``cell``.

        Players can only be placed on empty cells. ``Cell.EMPTY`` can always
        be written to an in-range cell, which is how moves are unmade.
        """
        return in_bounds(cell, self._size) and (symbol is Cell.EMPTY or self.cells[cell] is Cell.EMPTY)

    def set_cell(self, cell: int, symbol: Cell) -> None:
        """Make (player symbol) or unmake (``Cell.EMPTY``) a move in place."""
        if not isinstance(symbol, Cell):
            raise TypeError(f"Expected a Cell, got {symbol!r}")
        if not self.is_valid_move(cell, symbol):
            raise ValueError(f"Illegal move: {symbol.name} at cell {cell}")
        self.cells[cell] = symbol

    def get_cell(self, cell: int) -> Cell:
        if not in_bounds(cell, self._size):
            raise IndexError(f"Cell {cell} out of range for a {self._size}x{self._size} board")
        return self.cells[cell]

    def empty_cells(self) -> List[int]:
        """Indices of empty cells in ascending order."""
        return [idx for idx, cell in enumerate(self.cells) if cell is Cell.EMPTY]

    def is_win(self, symbol: Cell) -> bool:
        """
        Return whether ``symbol`` fills a row, a column or a diagonal.

        Only the given symbol is tested; the board does not check whether
        the other player has also won.
        """
        if self._line_filled(forward_diagonal(self._size), symbol):
            return True
        if self._line_filled(backward_diagonal(self._size), symbol):
            return True
        for i in range(self._size):
            if self._line_filled(row_indices(i, self._size), symbol):
                return True
            if self._line_filled(column_indices(i, self._size), symbol):
                return True
        return False

    def is_draw(self) -> bool:
        """Full board with no winner. A full board with a win is not a draw."""
        if self.is_win(Cell.NOUGHT) or self.is_win(Cell.CROSS):
            return False
        return Cell.EMPTY not in self.cells

    def winner(self) -> Optional[Cell]:
        for symbol in PLAYER_CELLS:
            if self.is_win(symbol):
                return symbol
        return None

    def game_over(self) -> Tuple[bool, Optional[Cell], bool]:
        """Return (is_terminal, winner, is_draw)."""
        winner = self.winner()
        if winner is not None:
            return True, winner, False
        if Cell.EMPTY not in self.cells:
            return True, None, True
        return False, None, False

    def _line_filled(self, line: Line, symbol: Cell) -> bool:
        for cell in line:
            if self.cells[cell] is not symbol:
                return False
        return True

    def encode_state(self) -> np.ndarray:
        """Encode the board as (nought, cross, empty) occupancy planes."""
        encoded = np.zeros((3, self._size, self._size), dtype=np.float32)
        for row, col in iter_positions(self._size):
            cell = self.cells[self.pos_to_index((row, col))]
            encoded[_PLANE_INDEX[cell], row, col] = 1.0
        return encoded

    def pos_to_index(self, pos: Position) -> int:
        """Convert a (row, col) position to a flat cell index."""
        return pos[0] * self._size + pos[1]

    def index_to_pos(self, index: int) -> Position:
        """Convert a flat cell index to a (row, col) position."""
        return (index // self._size, index % self._size)

    def render_ascii(self) -> str:
        """Return the board next to a map of its cell indices."""
        width = len(str(self.cell_count - 1))
        separator = "+".join(["-" * (width + 2)] * self._size)
        lines: List[str] = []
        for row in range(self._size):
            if row:
                lines.append(f"{separator}    {separator}")
            cells = row_indices(row, self._size)
            marks = " | ".join(self.cells[cell].value.rjust(width) for cell in cells)
            labels = " | ".join(str(cell).rjust(width) for cell in cells)
            lines.append(f" {marks}      {labels} ")
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Board(size={self._size}, cells={self.to_string()!r})"
