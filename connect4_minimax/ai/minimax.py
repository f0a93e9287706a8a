"""
minimax.py - Depth-limited exhaustive minimax search for Connect Four

This module provides a MinimaxPlayer that picks a column by trying every
sequence of plays and counter-plays up to a fixed number of plies.

The search:
1. Mutates the caller's board in place and undoes every drop on the way back
   up, so the board is unchanged once choose_column() returns
2. Does no pruning; every node within the ply budget is visited
3. Scores only terminal outcomes: +1 win, -1 loss, 0 for anything else
4. Breaks ties in favour of the lowest column index
"""

from typing import Dict, List

from connect4_minimax.debug import debug
from connect4_minimax.utils import Color, MINIMAX_DEPTH
from connect4_minimax.game.board import Board
from connect4_minimax.game.geometry import Coordinate


class MinimaxPlayer:
    """
    A Connect Four strategy based on brute-force minimax.

    The searching color is the maximizer and its opponent the minimizer.
    After the candidate drop at the root, ``depth`` more plies are explored
    before the position is scored.
    """

    MAX_COST = 1
    OTHER_COST = 0
    MIN_COST = -1

    def __init__(self, depth: int = MINIMAX_DEPTH, attribute_wins: bool = True):
        """
        Initialize the minimax player.

        Args:
            depth: Plies explored below each root candidate
            attribute_wins: Score a terminal win by the color that made it.
                When False, any win at the last drop scores MAX_COST, which is
                the legacy behaviour of the incremental win check.
        """
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")
        self.depth = depth
        self.attribute_wins = attribute_wins
        self.nodes_evaluated = 0
        self.last_scores: Dict[int, int] = {}

    def choose_column(self, board: Board, color: Color) -> int:
        """
        Get the best column for ``color``.

        Args:
            board: The current game board, restored before returning
            color: The searching player's color

        Returns:
            Column index of the best move

        Raises:
            ValueError: no column can accept a token
        """
        uncompleted_columns = board.get_uncompleted_columns()
        if not uncompleted_columns:
            raise ValueError("No uncompleted columns to choose from")

        self.nodes_evaluated = 0
        self.last_scores = {}
        best_column = uncompleted_columns[0]
        max_cost = self.MIN_COST

        debug.start_timer("minimax")
        for column in uncompleted_columns:
            with board.dropped(column, color):
                cost = self._get_min_cost(board, color, 0)
            self.last_scores[column] = cost

            if cost > max_cost:
                max_cost = cost
                best_column = column
        debug.end_timer("minimax", "minimax")

        debug.debug(f"{color.name} scores {self.last_scores} -> column {best_column} "
                    f"({self.nodes_evaluated} nodes)", "minimax")
        return best_column

    def _get_min_cost(self, board: Board, color: Color, steps: int) -> int:
        """Opponent to move: the worst outcome for ``color`` over its replies."""
        self.nodes_evaluated += 1
        line = board.get_winning_line()
        if self._is_end(board, line, steps):
            return self._get_cost(board, line, color)

        min_cost = self.MAX_COST
        for column in board.get_uncompleted_columns():
            with board.dropped(column, color.opposite()):
                cost = self._get_max_cost(board, color, steps + 1)
            if cost < min_cost:
                min_cost = cost
        return min_cost

    def _get_max_cost(self, board: Board, color: Color, steps: int) -> int:
        """``color`` to move: the best outcome over its own plays."""
        self.nodes_evaluated += 1
        line = board.get_winning_line()
        if self._is_end(board, line, steps):
            return self._get_cost(board, line, color)

        max_cost = self.MIN_COST
        for column in board.get_uncompleted_columns():
            with board.dropped(column, color):
                cost = self._get_min_cost(board, color, steps + 1)
            if cost > max_cost:
                max_cost = cost
        return max_cost

    def _is_end(self, board: Board, line: List[Coordinate], steps: int) -> bool:
        # A winning line means the position is finished, same as board.is_finished()
        return steps == self.depth or bool(line) or board.is_complete()

    def _get_cost(self, board: Board, line: List[Coordinate], color: Color) -> int:
        """Score a leaf from the winning line found at its last drop, if any."""
        if not line:
            return self.OTHER_COST
        if not self.attribute_wins:
            # The incremental check cannot tell who won, only that the last drop won
            return self.MAX_COST

        if board.get_color(line[0]) == color:
            return self.MAX_COST
        return self.MIN_COST


if __name__ == "__main__":
    import time

    from connect4_minimax.debug import DebugLevel

    debug.configure(level=DebugLevel.DEBUG)

    print("Testing MinimaxPlayer")
    print("=" * 40)

    board = Board()
    player = MinimaxPlayer()

    start = time.time()
    move = player.choose_column(board, Color.FIRST)
    print(f"Empty board: column {move}, {player.nodes_evaluated} nodes, "
          f"{time.time() - start:.3f} seconds")

    # FIRST threatens to complete the bottom row, SECOND must block at 3
    for col, color in [(0, Color.FIRST), (0, Color.SECOND), (1, Color.FIRST),
                       (1, Color.SECOND), (2, Color.FIRST)]:
        board.drop_token(col, color)
    print(board)
    move = player.choose_column(board, Color.SECOND)
    print(f"Best move for SECOND: column {move} (should be 3 to block)")
