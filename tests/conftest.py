"""Shared fixtures for the Connect Four test suite."""

from typing import Iterable, List, Tuple

import pytest

from connect4_minimax.debug import debug, DebugLevel
from connect4_minimax.utils import ROWS, COLS, Color
from connect4_minimax.game.board import Board
from connect4_minimax.game.geometry import Coordinate

X = Color.FIRST
O = Color.SECOND

# A full board with no four in a row anywhere, bottom row first
DRAW_ROWS = [
    "XOXOXOX",
    "XOXOXOX",
    "XOXOXOX",
    "OXOXOXO",
    "OXOXOXO",
    "OXOXOXO",
]


class ScriptedPlayer:
    """Plays a fixed list of columns and records the colors it was asked for."""

    def __init__(self, columns):
        self.columns = list(columns)
        self.seen = []

    def choose_column(self, board, color):
        self.seen.append(color)
        return self.columns.pop(0)


def drop_all(board: Board, drops: Iterable[Tuple[int, Color]]) -> Board:
    for column, color in drops:
        board.drop_token(column, color)
    return board


def column_colors(board: Board, column: int) -> List[Color]:
    return [board.get_color(Coordinate(row, column)) for row in range(ROWS)]


def assert_gravity(board: Board) -> None:
    for column in range(COLS):
        colors = column_colors(board, column)
        height = sum(1 for color in colors if color != Color.EMPTY)
        assert all(color != Color.EMPTY for color in colors[:height]), board.render()
        assert all(color == Color.EMPTY for color in colors[height:]), board.render()


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def draw_board():
    return Board.from_rows(DRAW_ROWS)


@pytest.fixture(autouse=True)
def restore_debug():
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, log_file="", components=[])
