"""
connect4_minimax.game - Core game mechanics for Connect Four

This package contains the grid geometry, the board with its incremental win
check and the turn sequencing of a two player game.
"""

from connect4_minimax.game.geometry import Coordinate, Direction
from connect4_minimax.game.line import Line
from connect4_minimax.game.board import (Board, BoardError, InvalidColumnError, ColumnFullError,
                                         ColumnEmptyError, InvalidPositionError)
from connect4_minimax.game.rules import ConnectFourGame

__all__ = ['Coordinate', 'Direction', 'Line', 'Board', 'BoardError', 'InvalidColumnError',
           'ColumnFullError', 'ColumnEmptyError', 'InvalidPositionError', 'ConnectFourGame']
