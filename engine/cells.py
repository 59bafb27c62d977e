"""Cell states for a Noughts and Crosses board."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Cell(str, Enum):
    """Contents of a single board cell."""

    EMPTY = " "
    NOUGHT = "O"
    CROSS = "X"

    @property
    def is_player(self) -> bool:
        return self is not Cell.EMPTY

    def opponent(self) -> "Cell":
        if self is Cell.EMPTY:
            raise ValueError("EMPTY has no opponent.")
        return Cell.CROSS if self is Cell.NOUGHT else Cell.NOUGHT


# Nought always moves first.
PLAYER_CELLS: Tuple[Cell, Cell] = (Cell.NOUGHT, Cell.CROSS)

# Characters accepted when parsing a board from text.
CHAR_TO_CELL: Dict[str, Cell] = {
    "O": Cell.NOUGHT,
    "o": Cell.NOUGHT,
    "X": Cell.CROSS,
    "x": Cell.CROSS,
    ".": Cell.EMPTY,
    "-": Cell.EMPTY,
    " ": Cell.EMPTY,
}

CELL_TO_CHAR: Dict[Cell, str] = {
    Cell.EMPTY: ".",
    Cell.NOUGHT: "O",
    Cell.CROSS: "X",
}


def parse_cell(char: str) -> Cell:
    """Map a single board character to its cell state."""
    try:
        return CHAR_TO_CELL[char]
    except KeyError:
        raise ValueError(f"Unknown cell character: {char!r}") from None
