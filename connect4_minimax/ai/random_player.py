"""
random_player.py - Uniformly random column chooser
"""

import random
from typing import Optional

from connect4_minimax.debug import debug
from connect4_minimax.utils import Color
from connect4_minimax.game.board import Board


class RandomPlayer:
    """Picks any uncompleted column with equal probability."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def choose_column(self, board: Board, color: Color) -> int:
        columns = board.get_uncompleted_columns()
        if not columns:
            raise ValueError("No uncompleted columns to choose from")

        column = self._rng.choice(columns)
        debug.debug(f"{color.name} picks random column {column}", "random")
        return column
