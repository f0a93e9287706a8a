"""Tests for the incremental four-in-a-row check."""

import pytest

from connect4_minimax.utils import Color
from connect4_minimax.game.geometry import Coordinate, Direction
from connect4_minimax.game.line import Line
from tests.conftest import X, O, drop_all


def test_no_winner_before_any_drop(board):
    assert not board.is_winner()
    assert board.get_winning_line() == []


def test_horizontal_win_on_bottom_row(board):
    drop_all(board, [(0, X), (1, X), (2, X)])
    assert not board.is_winner()

    board.drop_token(3, X)
    assert board.is_winner()
    assert board.is_finished()
    assert set(board.get_winning_line()) == {Coordinate(0, c) for c in range(4)}


def test_horizontal_win_completed_in_the_middle(board):
    drop_all(board, [(2, O), (3, O), (5, O)])
    assert not board.is_winner()
    board.drop_token(4, O)
    assert board.is_winner()


def test_vertical_win(board):
    drop_all(board, [(4, X), (4, O), (4, O), (4, O)])
    assert not board.is_winner()
    board.drop_token(4, O)
    assert board.is_winner()
    assert set(board.get_winning_line()) == {Coordinate(r, 4) for r in range(1, 5)}


def test_rising_diagonal_win(board):
    drop_all(board, [(0, X),
                     (1, O), (1, X),
                     (2, O), (2, O), (2, X),
                     (3, O), (3, O), (3, O)])
    assert not board.is_winner()

    board.drop_token(3, X)
    assert board.is_winner()
    assert set(board.get_winning_line()) == {Coordinate(i, i) for i in range(4)}


def test_falling_diagonal_win(board):
    drop_all(board, [(0, O), (0, O), (0, O),
                     (1, O), (1, O),
                     (2, O),
                     (3, X), (2, X), (1, X)])
    assert not board.is_winner()

    board.drop_token(0, X)
    assert board.last_drop == Coordinate(3, 0)
    assert board.is_winner()
    assert set(board.get_winning_line()) == {Coordinate(3, 0), Coordinate(2, 1),
                                             Coordinate(1, 2), Coordinate(0, 3)}


def test_three_in_a_row_is_not_a_win(board):
    drop_all(board, [(1, X), (2, X), (3, X), (5, X)])
    assert not board.is_winner()
    drop_all(board, [(6, O), (6, O), (6, O)])
    assert not board.is_winner()


def test_mixed_colors_are_not_a_win(board):
    drop_all(board, [(0, X), (1, X), (2, O), (3, X)])
    assert not board.is_winner()


def test_winner_color(board):
    drop_all(board, [(0, X), (1, X), (2, X), (3, X)])
    assert board.is_winner(X)
    assert not board.is_winner(O)


def test_only_last_drop_is_examined(board):
    drop_all(board, [(0, X), (1, X), (2, X), (3, X)])
    assert board.is_winner()

    board.drop_token(6, O)
    assert not board.is_winner()
    assert not board.is_finished()

    board.remove_top(6)
    assert board.is_winner()


def test_undoing_the_winning_drop_clears_the_win(board):
    drop_all(board, [(0, X), (1, X), (2, X), (3, X)])
    board.remove_top(3)
    assert board.last_drop == Coordinate(0, 2)
    assert not board.is_winner()


def test_empty_window_is_never_connected(board):
    line = Line(Coordinate(3, 3))
    line.set(Direction.EAST)
    assert not board.is_connect4(line)


def test_window_off_the_board_is_not_connected(board):
    drop_all(board, [(4, X), (5, X), (6, X)])
    line = Line(Coordinate(0, 4))
    line.set(Direction.EAST)
    assert not board.is_connect4(line)


@pytest.mark.parametrize("last_column", [0, 1, 2, 3])
def test_horizontal_win_at_any_window_position(board, last_column):
    for column in range(4):
        if column != last_column:
            board.drop_token(column, Color.SECOND)
    assert not board.is_winner()
    board.drop_token(last_column, Color.SECOND)
    assert board.is_winner(Color.SECOND)
