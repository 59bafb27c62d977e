import itertools

import numpy as np
import pytest

from engine.board import Board
from engine.cells import Cell


def test_new_board_is_empty():
    board = Board()
    assert board.get_size() == 3
    assert board.cell_count == 9
    assert all(board.get_cell(cell) is Cell.EMPTY for cell in range(9))
    assert board.empty_cells() == list(range(9))


@pytest.mark.parametrize("size", [0, -1, 2.5, "3", True])
def test_invalid_size_rejected(size):
    with pytest.raises(ValueError):
        Board(size)


def test_single_cell_board():
    board = Board(1)
    board.set_cell(0, Cell.CROSS)
    assert board.is_win(Cell.CROSS)
    assert not board.is_draw()


def test_reset_clears_every_cell():
    board = Board.from_string("OXOXOXXOX")
    board.reset()
    assert board == Board()


def test_is_valid_move():
    board = Board.from_string("O........")
    assert not board.is_valid_move(0, Cell.CROSS)
    assert not board.is_valid_move(0, Cell.NOUGHT)
    assert board.is_valid_move(0, Cell.EMPTY)
    assert board.is_valid_move(8, Cell.CROSS)
    assert not board.is_valid_move(9, Cell.EMPTY)
    assert not board.is_valid_move(-1, Cell.NOUGHT)


def test_set_cell_rejects_overwrite_without_changing_board():
    board = Board.from_string("O........")
    with pytest.raises(ValueError):
        board.set_cell(0, Cell.CROSS)
    assert board.get_cell(0) is Cell.NOUGHT


def test_set_cell_rejects_out_of_range():
    board = Board()
    with pytest.raises(ValueError):
        board.set_cell(9, Cell.NOUGHT)
    with pytest.raises(IndexError):
        board.get_cell(9)


def test_set_cell_rejects_non_cell_symbol():
    board = Board()
    with pytest.raises(TypeError):
        board.set_cell(0, "X")
    assert board.get_cell(0) is Cell.EMPTY


def test_clearing_twice_is_idempotent():
    board = Board.from_string("OX.......")
    board.set_cell(1, Cell.EMPTY)
    once = board.clone()
    board.set_cell(1, Cell.EMPTY)
    assert board == once


def test_move_unmove_restores_every_cell():
    board = Board.from_string("OX..O..X.")
    before = list(board.cells)
    for cell in board.empty_cells():
        for symbol in (Cell.NOUGHT, Cell.CROSS):
            board.set_cell(cell, symbol)
            board.set_cell(cell, Cell.EMPTY)
            assert board.cells == before


@pytest.mark.parametrize(
    "layout",
    [
        "XXX......",
        "...XXX...",
        "......XXX",
        "X..X..X..",
        ".X..X..X.",
        "..X..X..X",
        "X...X...X",
        "..X.X.X..",
    ],
)
def test_every_line_shape_wins(layout):
    board = Board.from_string(layout)
    assert board.is_win(Cell.CROSS)
    assert not board.is_win(Cell.NOUGHT)
    assert board.winner() is Cell.CROSS


def test_non_line_shapes_do_not_win():
    # Broken diagonal and an L shape.
    assert not Board.from_string("X....X.X.").is_win(Cell.CROSS)
    assert not Board.from_string("XX.X.....").is_win(Cell.CROSS)


def test_size_four_column_win():
    board = Board(4)
    for cell in (1, 5, 9, 13):
        board.set_cell(cell, Cell.NOUGHT)
    assert board.is_win(Cell.NOUGHT)
    assert not board.is_win(Cell.CROSS)


def test_size_four_diagonals():
    forward = Board(4)
    backward = Board(4)
    for i in range(4):
        forward.set_cell(i * 4 + i, Cell.CROSS)
        backward.set_cell((3 - i) * 4 + i, Cell.CROSS)
    assert forward.is_win(Cell.CROSS)
    assert backward.is_win(Cell.CROSS)


def test_full_board_with_win_is_not_draw():
    board = Board.from_string("XXXOOXOXO")
    assert board.is_win(Cell.CROSS)
    assert not board.is_draw()
    assert board.game_over() == (True, Cell.CROSS, False)


def test_full_board_without_win_is_draw():
    board = Board.from_string("XOXXOOOXX")
    assert board.is_draw()
    assert board.game_over() == (True, None, True)


def test_draw_matches_definition_for_all_small_boards():
    # Every filling of a 2x2 board, including unreachable ones.
    for cells in itertools.product(list(Cell), repeat=4):
        board = Board(2)
        board.cells = list(cells)
        expected = (
            not board.is_win(Cell.NOUGHT)
            and not board.is_win(Cell.CROSS)
            and Cell.EMPTY not in board.cells
        )
        assert board.is_draw() == expected


def test_from_string_round_trip_and_errors():
    board = Board.from_string("OX.\n.O.\n..X")
    assert board.to_string() == "OX..O...X"
    assert board.get_cell(4) is Cell.NOUGHT
    with pytest.raises(ValueError):
        Board.from_string("OX.")
    with pytest.raises(ValueError):
        Board.from_string("OX?......")
    with pytest.raises(ValueError):
        Board.from_string("OX.......", size=4)


def test_positions_and_indices():
    board = Board(4)
    assert board.pos_to_index((2, 3)) == 11
    assert board.index_to_pos(11) == (2, 3)


def test_encode_state_planes():
    board = Board.from_string("OX.......")
    encoded = board.encode_state()
    assert encoded.shape == (3, 3, 3)
    assert encoded.dtype == np.float32
    assert encoded[0, 0, 0] == 1.0
    assert encoded[1, 0, 1] == 1.0
    np.testing.assert_array_equal(encoded.sum(axis=0), np.ones((3, 3)))
    assert encoded[2].sum() == 7


def test_render_ascii_shows_marks_and_indices():
    text = Board.from_string("O...X....").render_ascii()
    lines = text.splitlines()
    assert len(lines) == 5
    assert "O" in lines[0] and "0 | 1 | 2" in lines[0]
    assert "X" in lines[2] and "3 | 4 | 5" in lines[2]


def test_cell_opponent():
    assert Cell.NOUGHT.opponent() is Cell.CROSS
    assert Cell.CROSS.opponent() is Cell.NOUGHT
    with pytest.raises(ValueError):
        Cell.EMPTY.opponent()
