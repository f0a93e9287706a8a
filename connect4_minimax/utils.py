"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

This module provides the fixed board dimensions, the Color enumeration shared
by the board and the players, and the ASCII renderer used by the board.
"""

from enum import IntEnum
from typing import Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of tokens in a row to win

# Search defaults
MINIMAX_DEPTH = 4


class Color(IntEnum):
    """Cell occupancy: one of the two player marks, or EMPTY."""
    EMPTY = 0
    FIRST = 1
    SECOND = 2

    def opposite(self) -> 'Color':
        """Get the other player's color. EMPTY has no opposite and maps to itself."""
        if self == Color.FIRST:
            return Color.SECOND
        elif self == Color.SECOND:
            return Color.FIRST
        return Color.EMPTY

    @staticmethod
    def players() -> Tuple['Color', 'Color']:
        """The two player colors in turn order."""
        return Color.FIRST, Color.SECOND

    @property
    def code(self) -> str:
        """One character snapshot code."""
        return _SNAPSHOT_CODES[self]

    @classmethod
    def from_code(cls, code: str) -> 'Color':
        for color, value in _SNAPSHOT_CODES.items():
            if value == code:
                return color
        raise ValueError(f"Unknown cell code: {code!r}")

    def __str__(self):
        if self == Color.EMPTY:
            return " "
        return self.code


_SNAPSHOT_CODES = {
    Color.EMPTY: ".",
    Color.FIRST: "X",
    Color.SECOND: "O",
}


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art.

    Row 0 is the bottom of the board, so it is printed last.

    Args:
        grid: ROWS x COLS array of Color values

    Returns:
        ASCII representation of the board
    """
    border = "+" + "---+" * COLS
    result = [border]

    for row in range(ROWS - 1, -1, -1):
        cells = "".join(" " + str(Color(int(grid[row, col]))) + " |" for col in range(COLS))
        result.append("|" + cells)

    result.append(border)
    result.append(" " + "".join(f" {col + 1}  " for col in range(COLS)).rstrip())

    return "\n".join(result)
