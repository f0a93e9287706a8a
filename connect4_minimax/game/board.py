"""
board.py - Board representation and win detection for Connect Four

This module implements the Board class: a fixed ROWS x COLS grid of Colors
with gravity-respecting drop/undo, completion queries and an incremental win
check that only inspects the windows passing through the last dropped token.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Union

import numpy as np

from connect4_minimax.debug import debug, DebugLevel
from connect4_minimax.utils import ROWS, COLS, Color, render_board_ascii
from connect4_minimax.game.geometry import Coordinate, Direction
from connect4_minimax.game.line import Line


class BoardError(ValueError):
    """Base class for board precondition violations."""


class InvalidColumnError(BoardError):
    """Column index outside the board."""


class ColumnFullError(BoardError):
    """Drop attempted on a complete column."""


class ColumnEmptyError(BoardError):
    """Top token requested from a column that has none."""


class InvalidPositionError(BoardError):
    """Coordinate off the board, or a snapshot that cannot be a real position."""


class Board:
    """
    Represents a Connect Four game board.

    Row 0 is the bottom row. Tokens always stack from row 0 upwards with no
    gaps. The board remembers the order of drops so that remove_top() can
    restore the previous last_drop, which keeps drop/remove_top pairs exact
    inverses of each other.
    """

    def __init__(self):
        """Initialize an empty board."""
        self.grid = np.zeros((ROWS, COLS), dtype=np.int8)
        self._drops: List[Coordinate] = []
        self.reset()

    def reset(self) -> None:
        """Empty every cell and forget the drop history."""
        debug.trace("Resetting board", "board")
        self.grid.fill(int(Color.EMPTY))
        self._drops = []

    def copy(self) -> 'Board':
        """
        Create an independent copy of the board.

        Returns:
            A new Board with the same cells and drop history
        """
        new_board = Board()
        new_board.grid = self.grid.copy()
        new_board._drops = list(self._drops)
        return new_board

    @property
    def last_drop(self) -> Optional[Coordinate]:
        """Coordinate of the most recent drop still on the board, or None."""
        return self._drops[-1] if self._drops else None

    @staticmethod
    def _check_column(column: int) -> None:
        if not Coordinate.is_column_valid(column):
            raise InvalidColumnError(f"Column {column} out of range [0, {COLS - 1}]")

    def drop_token(self, column: int, color: Color) -> Coordinate:
        """
        Drop a token into a column.

        Args:
            column: Column index (0-indexed)
            color: FIRST or SECOND

        Returns:
            The coordinate where the token landed

        Raises:
            InvalidColumnError: column is off the board
            ColumnFullError: column is complete
        """
        self._check_column(column)
        if color == Color.EMPTY:
            raise BoardError("Cannot drop an EMPTY token")
        if self.is_complete(column):
            raise ColumnFullError(f"Column {column} is complete")

        coordinate = Coordinate(self._height(column), column)
        self._set_color(coordinate, color)
        self._drops.append(coordinate)
        if debug.is_enabled_for(DebugLevel.TRACE, "board"):
            debug.trace(f"Dropped {color.name} at {coordinate}", "board")
        return coordinate

    def remove_top(self, column: int) -> Coordinate:
        """
        Remove the topmost token of a column, undoing the drop that put it there.

        Returns:
            The coordinate that was emptied

        Raises:
            ColumnEmptyError: column has no tokens
        """
        top = self.get_top(column)
        self._set_color(top, Color.EMPTY)

        for index in range(len(self._drops) - 1, -1, -1):
            if self._drops[index] == top:
                del self._drops[index]
                break

        if debug.is_enabled_for(DebugLevel.TRACE, "board"):
            debug.trace(f"Removed top of column {column} at {top}", "board")
        return top

    @contextmanager
    def dropped(self, column: int, color: Color) -> Iterator[Coordinate]:
        """
        Drop a token for the duration of a with-block.

        The token is removed again on every exit path, exceptions included.
        """
        coordinate = self.drop_token(column, color)
        try:
            yield coordinate
        finally:
            self.remove_top(column)

    def _height(self, column: int) -> int:
        """Number of tokens in a column; with no gaps this is also the first empty row."""
        return int(np.count_nonzero(self.grid[:, column]))

    def _set_color(self, coordinate: Coordinate, color: Color) -> None:
        self.grid[coordinate.row, coordinate.column] = int(color)

    def get_color(self, coordinate: Coordinate) -> Color:
        if not coordinate.is_valid():
            raise InvalidPositionError(f"{coordinate} is off the board")
        return Color(self.grid.item(coordinate.row, coordinate.column))

    def is_occupied(self, coordinate: Coordinate, color: Color) -> bool:
        """True if the cell holds exactly ``color`` (EMPTY included)."""
        return self.get_color(coordinate) == color

    def is_complete(self, column: Optional[int] = None) -> bool:
        """
        With a column, whether its top cell is taken. Without, whether every
        column is complete (board full).
        """
        if column is not None:
            self._check_column(column)
            return self.grid.item(ROWS - 1, column) != Color.EMPTY

        return not np.any(self.grid[ROWS - 1] == int(Color.EMPTY))

    def is_empty(self, target: Union[int, Coordinate, None] = None) -> bool:
        """
        Emptiness query.

        Args:
            target: a Coordinate (is that cell empty), a column index (is its
                bottom cell empty) or None (is every column empty)
        """
        if target is None:
            return not np.any(self.grid[0])

        if isinstance(target, Coordinate):
            return self.is_occupied(target, Color.EMPTY)

        self._check_column(target)
        return self.grid.item(0, target) == Color.EMPTY

    def get_uncompleted_columns(self) -> List[int]:
        """Columns that can still accept a token, in ascending order."""
        return np.flatnonzero(self.grid[ROWS - 1] == int(Color.EMPTY)).tolist()

    def get_top(self, column: int) -> Coordinate:
        """
        Coordinate of the topmost token in a column.

        Raises:
            ColumnEmptyError: column has no tokens
        """
        if self.is_empty(column):
            raise ColumnEmptyError(f"Column {column} is empty")

        return Coordinate(self._height(column) - 1, column)

    def is_top(self, column: int, color: Color) -> bool:
        if self.is_empty(column):
            return False
        return self.get_color(self.get_top(column)) == color

    def count(self, color: Color) -> int:
        return int(np.count_nonzero(self.grid == int(color)))

    def is_winner(self, color: Optional[Color] = None) -> bool:
        """
        Whether the last drop completed a line of four.

        Only windows through last_drop are examined, so a line that does not
        include the most recent token is not reported.

        Args:
            color: if given, the winning line must also be of this color
        """
        line = self.get_winning_line()
        if not line:
            return False
        if color is None:
            return True
        return self.get_color(line[0]) == color

    def get_winning_line(self) -> List[Coordinate]:
        """
        Coordinates of the first connected window through last_drop.

        Returns:
            The four coordinates, or an empty list when there is no win
        """
        if self.last_drop is None:
            return []

        line = Line(self.last_drop)
        for direction in Direction.axes():
            line.set(direction)
            for _ in range(Line.LENGTH):
                if self.is_connect4(line):
                    return line.coordinates()
                line.shift()

        return []

    def is_connect4(self, line: Line) -> bool:
        """True if every cell of the window is on the board and holds the same player color."""
        coordinates = line.coordinates()
        if not all(coordinate.is_valid() for coordinate in coordinates):
            return False

        colors = [self.grid.item(row, column) for row, column in coordinates]
        return colors[0] != Color.EMPTY and colors.count(colors[0]) == len(colors)

    def is_finished(self) -> bool:
        return self.is_complete() or self.is_winner()

    def to_rows(self) -> List[str]:
        """
        Snapshot of the board as ROWS strings of COLS cell codes.

        Index 0 is the bottom row. Codes are those of Color.code.
        """
        return ["".join(Color(int(cell)).code for cell in self.grid[row]) for row in range(ROWS)]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from a to_rows() snapshot.

        The resulting board has no drop history, so last_drop is None until
        the next drop.

        Raises:
            InvalidPositionError: wrong shape, unknown code or a floating token
        """
        if len(rows) != ROWS or any(len(row) != COLS for row in rows):
            raise InvalidPositionError(f"Snapshot must be {ROWS} rows of {COLS} cells")

        board = cls()
        for row, codes in enumerate(rows):
            for col, code in enumerate(codes):
                try:
                    board.grid[row, col] = int(Color.from_code(code))
                except ValueError as e:
                    raise InvalidPositionError(str(e)) from e

        for col in range(COLS):
            column = board.grid[:, col]
            height = int(np.count_nonzero(column))
            if np.any(column[:height] == int(Color.EMPTY)):
                raise InvalidPositionError(f"Column {col} has a floating token")

        debug.trace(f"Loaded board from snapshot {list(rows)}", "board")
        return board

    def get_state(self) -> np.ndarray:
        """Copy of the underlying grid (row 0 at index 0)."""
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()


if __name__ == "__main__":
    board = Board()
    for col, color in [(3, Color.FIRST), (2, Color.SECOND), (4, Color.FIRST),
                       (2, Color.SECOND), (5, Color.FIRST), (2, Color.SECOND), (6, Color.FIRST)]:
        board.drop_token(col, color)
        print(board)
        print(f"Winner: {board.is_winner()}\n")

    print(f"Winning line: {[tuple(c) for c in board.get_winning_line()]}")
    board.remove_top(6)
    print(board)
    print(f"Winner after undo: {board.is_winner()}")
