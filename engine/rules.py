"""Rules helpers for square N-in-a-row boards."""

from __future__ import annotations

from typing import Iterable, Tuple

# Standard 3x3 Noughts and Crosses.
BOARD_SIZE = 3

Position = Tuple[int, int]
Line = Tuple[int, ...]


def cell_count(size: int) -> int:
    return size * size


def in_bounds(cell: int, size: int) -> bool:
    """Return whether a flat cell index is inside a board of the given size."""
    return 0 <= cell < size * size


def row_indices(row: int, size: int) -> Line:
    """Cells of one row, left to right."""
    start = row * size
    return tuple(range(start, start + size))


def column_indices(column: int, size: int) -> Line:
    """Cells of one column, top to bottom."""
    return tuple(column + size * i for i in range(size))


def forward_diagonal(size: int) -> Line:
    """Cells of the top-left to bottom-right (\\) diagonal."""
    return tuple(size * i + i for i in range(size))


def backward_diagonal(size: int) -> Line:
    """Cells of the bottom-left to top-right (/) diagonal."""
    return tuple(size * (size - 1 - i) + i for i in range(size))


def iter_positions(size: int) -> Iterable[Position]:
    """Yield all (row, col) positions in row-major order."""
    for row in range(size):
        for col in range(size):
            yield (row, col)
