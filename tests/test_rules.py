"""Tests for ConnectFourGame turn sequencing and the random player."""

import pytest

from connect4_minimax.utils import COLS, Color
from connect4_minimax.ai.minimax import MinimaxPlayer
from connect4_minimax.ai.random_player import RandomPlayer
from connect4_minimax.game.board import Board
from connect4_minimax.game.rules import ConnectFourGame
from tests.conftest import X, O, DRAW_ROWS, ScriptedPlayer


class TestConnectFourGame:
    def test_first_color_opens(self):
        game = ConnectFourGame(ScriptedPlayer([3]), ScriptedPlayer([]))
        assert game.active_color == X
        assert game.play_turn() == 3
        assert game.board.get_color(game.board.last_drop) == X
        assert game.active_color == O

    def test_win_keeps_turn_on_winner(self):
        first = ScriptedPlayer([0, 1, 2, 3])
        second = ScriptedPlayer([0, 1, 2])
        game = ConnectFourGame(first, second)

        assert game.play() == X
        assert game.moves == [0, 0, 1, 1, 2, 2, 3]
        assert game.active_color == X
        assert game.get_winner() == X
        assert not game.is_draw()
        assert first.seen == [X] * 4
        assert second.seen == [O] * 3

    def test_play_turn_after_finish_raises(self):
        game = ConnectFourGame(ScriptedPlayer([0, 1, 2, 3]), ScriptedPlayer([0, 1, 2]))
        game.play()
        with pytest.raises(RuntimeError):
            game.play_turn()

    def test_on_turn_callback(self):
        turns = []
        game = ConnectFourGame(ScriptedPlayer([0, 1, 2, 3]), ScriptedPlayer([0, 1, 2]))
        game.play(on_turn=lambda g, column: turns.append(column))
        assert turns == game.moves

    def test_reset_allows_replay(self):
        game = ConnectFourGame(ScriptedPlayer([0, 1, 2, 3, 6]), ScriptedPlayer([0, 1, 2]))
        game.play()
        game.reset()

        assert game.board.is_empty()
        assert game.moves == []
        assert game.active_color == X
        assert game.get_winner() is None
        game.play_turn()
        assert game.board.last_drop.column == 6

    def test_draw_on_full_board(self):
        game = ConnectFourGame(ScriptedPlayer([]), ScriptedPlayer([]), board=Board.from_rows(DRAW_ROWS))
        assert game.is_finished()
        assert game.is_draw()
        assert game.get_winner() is None

    def test_random_against_minimax_finishes(self):
        game = ConnectFourGame(RandomPlayer(seed=7), MinimaxPlayer(depth=1))
        winner = game.play()

        assert game.is_finished()
        assert winner in (X, O, None)
        assert len(game.moves) == game.board.count(X) + game.board.count(O)
        if winner is not None:
            assert game.board.is_winner(winner)
            assert game.active_color == winner


class TestRandomPlayer:
    def test_same_seed_same_choices(self, board):
        a = RandomPlayer(seed=11)
        b = RandomPlayer(seed=11)
        assert [a.choose_column(board, X) for _ in range(20)] == \
            [b.choose_column(board, X) for _ in range(20)]

    def test_never_picks_complete_column(self):
        rows = ["X......", "O......", "X......", "O......", "X......", "O......"]
        board = Board.from_rows(rows)
        player = RandomPlayer(seed=3)
        picks = {player.choose_column(board, O) for _ in range(100)}
        assert 0 not in picks
        assert picks <= set(range(1, COLS))

    def test_leaves_board_untouched(self, board):
        RandomPlayer(seed=1).choose_column(board, X)
        assert board.is_empty()

    def test_full_board_raises(self, draw_board):
        with pytest.raises(ValueError):
            RandomPlayer().choose_column(draw_board, Color.SECOND)
