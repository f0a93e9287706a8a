"""
rules.py - Turn sequencing for a two player Connect Four game

This module provides ConnectFourGame, which owns the board, asks the strategy
of the active color for a column, applies it and decides whether play passes
to the other color.
"""

from typing import Callable, Dict, List, Optional, Protocol

from connect4_minimax.debug import debug
from connect4_minimax.utils import Color
from connect4_minimax.game.board import Board


class Strategy(Protocol):
    """Anything that can pick the next column for a color."""

    def choose_column(self, board: Board, color: Color) -> int:
        ...


class ConnectFourGame:
    """
    High-level Connect Four game manager.

    FIRST always opens. After a drop that finishes the game the active color
    stays on the player who made it, so it names the winner.
    """

    def __init__(self, first: Strategy, second: Strategy, board: Optional[Board] = None):
        """
        Initialize a new game.

        Args:
            first: Strategy playing Color.FIRST
            second: Strategy playing Color.SECOND
            board: Board to play on (a new one by default)
        """
        self.board = board if board is not None else Board()
        self._strategies: Dict[Color, Strategy] = {Color.FIRST: first, Color.SECOND: second}
        self.active_color = Color.FIRST
        self.moves: List[int] = []

    def reset(self) -> None:
        """Clear the board and give the turn back to FIRST."""
        debug.debug("Resetting game", "game")
        self.board.reset()
        self.active_color = Color.FIRST
        self.moves = []

    def get_strategy(self, color: Color) -> Strategy:
        return self._strategies[color]

    def play_turn(self) -> int:
        """
        Let the active strategy play one token.

        Returns:
            The column that was played

        Raises:
            RuntimeError: the game is already finished
        """
        if self.is_finished():
            raise RuntimeError("Game is already finished")

        color = self.active_color
        column = self._strategies[color].choose_column(self.board, color)
        self.board.drop_token(column, color)
        self.moves.append(column)
        debug.debug(f"{color.name} played column {column}", "game")

        if self.is_finished():
            winner = self.get_winner()
            debug.info(f"Game over after {len(self.moves)} moves: "
                       f"{winner.name + ' wins' if winner else 'draw'}", "game")
        else:
            self.active_color = color.opposite()
        return column

    def play(self, on_turn: Optional[Callable[['ConnectFourGame', int], None]] = None) -> Optional[Color]:
        """
        Play turns until the game is finished.

        Args:
            on_turn: Called with the game and the played column after every turn

        Returns:
            The winning color, or None for a draw
        """
        while not self.is_finished():
            column = self.play_turn()
            if on_turn is not None:
                on_turn(self, column)
        return self.get_winner()

    def is_finished(self) -> bool:
        return self.board.is_finished()

    def get_winner(self) -> Optional[Color]:
        """The color of the last mover if it connected four, otherwise None."""
        if not self.board.is_winner():
            return None
        return self.board.get_color(self.board.last_drop)

    def is_draw(self) -> bool:
        return self.board.is_complete() and not self.board.is_winner()

    def render(self) -> str:
        return self.board.render()
