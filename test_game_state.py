"""
Tests for the TicTacToe board model.
"""

import numpy as np
import pytest

from logic.game_state import Board
from logic.player import Outcome, Player


def test_new_board_is_empty():
    board = Board()
    assert board.is_empty()
    assert board.empty_cells() == list(range(9))
    assert board.winner() == Outcome.IN_PROGRESS


def test_reset_then_empty_cells_lists_every_cell():
    board = Board.from_marks(["X", "O", "X", "", "O", "", "", "", "X"])
    board.reset()
    assert board.empty_cells() == [0, 1, 2, 3, 4, 5, 6, 7, 8]

    # Resetting twice changes nothing
    board.reset()
    assert board.empty_cells() == [0, 1, 2, 3, 4, 5, 6, 7, 8]


def test_reset_keeps_the_same_cell_list():
    board = Board()
    cells = board.cells
    board.apply_move(Player.HUMAN, 4)
    board.reset()
    assert board.cells is cells
    assert board.is_empty()


def test_apply_move_places_mark():
    board = Board()
    board.apply_move(Player.HUMAN, 0)
    board.apply_move(Player.COMPUTER, 8)

    assert board.cells[0] == Player.HUMAN
    assert board.cells[8] == Player.COMPUTER
    assert board.empty_cells() == [1, 2, 3, 4, 5, 6, 7]
    assert board.marks()[0] == "X"
    assert board.marks()[8] == "O"


@pytest.mark.parametrize("index", [-1, 9, 42])
def test_apply_move_rejects_out_of_range_index(index):
    board = Board()
    with pytest.raises(IndexError):
        board.apply_move(Player.HUMAN, index)
    assert board.is_empty()


def test_apply_move_rejects_non_player():
    with pytest.raises(TypeError):
        Board().apply_move("X", 0)


def test_empty_cells_is_recomputed_each_call():
    board = Board()
    first = board.empty_cells()
    board.apply_move(Player.HUMAN, 3)
    assert first == list(range(9))
    assert board.empty_cells() == [0, 1, 2, 4, 5, 6, 7, 8]


@pytest.mark.parametrize("line", [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
])
def test_is_line_win_on_every_line(line):
    board = Board()
    for index in line:
        board.apply_move(Player.COMPUTER, index)

    assert board.is_line_win(Player.COMPUTER)
    assert not board.is_line_win(Player.HUMAN)
    assert board.winner() == Outcome.COMPUTER_WINS


def test_winner_human_diagonal():
    board = Board.from_marks(["X", "O", "X", "O", "X", "O", "X", "", ""])
    assert board.winner() == Outcome.HUMAN_WINS


def test_winner_full_board_without_line_is_tie():
    board = Board.from_marks(["X", "O", "X", "O", "X", "O", "O", "X", "O"])
    assert board.is_full()
    assert board.winner() == Outcome.TIE


def test_winner_on_full_board_with_line_is_a_win():
    board = Board.from_marks(["X", "X", "X", "O", "O", "X", "X", "O", "O"])
    assert board.winner() == Outcome.HUMAN_WINS


def test_two_in_a_row_is_not_a_win():
    board = Board.from_marks(["X", "X", "", "O", "O", "", "", "", ""])
    assert not board.is_line_win(Player.HUMAN)
    assert not board.is_line_win(Player.COMPUTER)
    assert board.winner() == Outcome.IN_PROGRESS


def test_copy_is_independent():
    board = Board.from_marks(["X", "", "", "", "O", "", "", "", ""])
    clone = board.copy()
    clone.apply_move(Player.HUMAN, 8)

    assert clone.cells[8] == Player.HUMAN
    assert board.cells[8] is None
    assert clone.cells[:8] == board.cells[:8]


def test_from_marks_accepts_blank_or_space():
    board = Board.from_marks(["", " ", "X", "O", "", "", "", "", ""])
    assert board.empty_cells() == [0, 1, 4, 5, 6, 7, 8]


@pytest.mark.parametrize("marks", [
    ["X"] * 8,
    ["X", "O", "Z", "", "", "", "", "", ""],
])
def test_from_marks_rejects_bad_input(marks):
    with pytest.raises(ValueError):
        Board.from_marks(marks)


def test_to_grid_is_row_major():
    board = Board.from_marks(["X", "", "", "", "O", "", "", "", "X"])
    grid = board.to_grid()

    assert grid.shape == (3, 3)
    assert grid[0, 0] == "X"
    assert grid[1, 1] == "O"
    assert grid[2, 2] == "X"
    assert grid[0, 1] == " "
    assert np.array_equal(grid.flatten(), np.array(board.marks(), dtype=object))


def test_str_shows_marks():
    board = Board.from_marks(["X", "O", "", "", "", "", "", "", ""])
    text = str(board)
    assert text.splitlines()[0] == "X | O |  "
    assert len(text.splitlines()) == 5


def test_player_opposite_and_marks():
    assert Player.HUMAN.opposite() == Player.COMPUTER
    assert Player.COMPUTER.opposite() == Player.HUMAN
    assert Player.HUMAN.mark == "X"
    assert Player.COMPUTER.mark == "O"
    assert Player.from_mark("O") == Player.COMPUTER
    assert len(Player) == 2
