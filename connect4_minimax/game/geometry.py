"""
geometry.py - Grid coordinates and compass directions

Coordinates are immutable (row, column) pairs with row 0 at the bottom of the
board. Directions are the eight compass unit steps between neighbouring cells.
"""

from enum import Enum
from typing import List, NamedTuple

from connect4_minimax.utils import ROWS, COLS


class Coordinate(NamedTuple):
    """A (row, column) position. Not necessarily on the board, see is_valid()."""
    row: int
    column: int

    def shifted(self, other: 'Coordinate') -> 'Coordinate':
        """Component-wise sum. No bounds check."""
        return Coordinate(self.row + other.row, self.column + other.column)

    def is_valid(self) -> bool:
        return Coordinate.is_row_valid(self.row) and Coordinate.is_column_valid(self.column)

    @staticmethod
    def is_row_valid(row: int) -> bool:
        return 0 <= row <= ROWS - 1

    @staticmethod
    def is_column_valid(column: int) -> bool:
        return 0 <= column <= COLS - 1

    def __str__(self):
        return f"Coordinate [row={self.row} column={self.column}]"


ORIGIN = Coordinate(0, 0)


class Direction(Enum):
    """Compass unit steps; NORTH points up the board (towards higher rows)."""
    NORTH = Coordinate(1, 0)
    NORTH_EAST = Coordinate(1, 1)
    EAST = Coordinate(0, 1)
    SOUTH_EAST = Coordinate(-1, 1)
    SOUTH = Coordinate(-1, 0)
    SOUTH_WEST = Coordinate(-1, -1)
    WEST = Coordinate(0, -1)
    NORTH_WEST = Coordinate(1, -1)

    @property
    def delta(self) -> Coordinate:
        return self.value

    def opposite(self) -> 'Direction':
        """The direction whose delta cancels this one."""
        for direction in Direction:
            if direction.delta.shifted(self.delta) == ORIGIN:
                return direction
        raise AssertionError(f"{self} has no opposite")

    def next(self, coordinate: Coordinate) -> Coordinate:
        """The neighbour of ``coordinate`` one step in this direction."""
        return coordinate.shifted(self.delta)

    @classmethod
    def axes(cls) -> List['Direction']:
        """
        Half-circle of directions, one per line axis.

        Vertical, the rising diagonal, horizontal and the falling diagonal;
        the remaining four directions are their opposites.
        """
        return [cls.NORTH, cls.NORTH_EAST, cls.EAST, cls.SOUTH_EAST]
