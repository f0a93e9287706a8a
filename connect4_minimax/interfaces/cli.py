"""
cli.py - Command-line interface for Connect Four

This module provides the terminal front end: a human column chooser, the
yes/no replay dialog, the game session loop and a small benchmark of the
minimax search.
"""

import argparse
import sys
import time
from typing import List, Optional

from connect4_minimax.debug import debug, DebugLevel
from connect4_minimax.utils import COLS, Color, MINIMAX_DEPTH
from connect4_minimax.game.board import Board
from connect4_minimax.game.geometry import Coordinate
from connect4_minimax.game.rules import ConnectFourGame, Strategy
from connect4_minimax.ai.minimax import MinimaxPlayer
from connect4_minimax.ai.random_player import RandomPlayer

TITLE = "--- CONNECT 4 ---"
TURN = "Turn: {color}"
ENTER_COLUMN_TO_DROP = "Enter a column to drop a token: "
INVALID_COLUMN = f"Invalid column!!! Values [1-{COLS}]"
COMPLETED_COLUMN = "Invalid column!!! It's completed"
PLAYER_WIN = "{color} WIN!!! : -)"
PLAYERS_TIED = "TIED!!!"
RESUME = "Do you want to continue"

PLAYER_KINDS = ['human', 'random', 'minimax']


class HumanPlayer:
    """Asks on stdin for a column, numbered from 1 for people."""

    def choose_column(self, board: Board, color: Color) -> int:
        while True:
            answer = input(ENTER_COLUMN_TO_DROP).strip()
            try:
                column = int(answer) - 1
            except ValueError:
                column = -1

            if not Coordinate.is_column_valid(column):
                print(INVALID_COLUMN)
            elif board.is_complete(column):
                print(COMPLETED_COLUMN)
            else:
                return column


class YesNoDialog:
    """Repeats a question until the answer starts with y or n."""

    AFFIRMATIVE = 'y'
    NEGATIVE = 'n'
    SUFFIX = f"? ({AFFIRMATIVE}/{NEGATIVE}): "
    ERROR = f"The value must be {AFFIRMATIVE} or {NEGATIVE}"

    def __init__(self):
        self._answer = ''

    def read(self, message: str) -> bool:
        """
        Ask ``message`` until a valid answer is given.

        Returns:
            True for an affirmative answer
        """
        while True:
            self._answer = input(message + self.SUFFIX).strip().lower()
            if self.is_affirmative() or self.is_negative():
                return self.is_affirmative()
            print(self.ERROR)

    def is_affirmative(self) -> bool:
        return self._answer[:1] == self.AFFIRMATIVE

    def is_negative(self) -> bool:
        return self._answer[:1] == self.NEGATIVE


def non_negative_int(value: str) -> int:
    """argparse type for counts that may be zero but not negative."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {number}")
    return number


def create_player(kind: str, depth: int = MINIMAX_DEPTH, seed: Optional[int] = None,
                  legacy_scoring: bool = False) -> Strategy:
    """Build a strategy from its command line name."""
    if kind == 'human':
        return HumanPlayer()
    if kind == 'random':
        return RandomPlayer(seed=seed)
    if kind == 'minimax':
        return MinimaxPlayer(depth=depth, attribute_wins=not legacy_scoring)
    raise ValueError(f"Unknown player kind: {kind}")


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self):
        self.args: Optional[argparse.Namespace] = None
        self.game: Optional[ConnectFourGame] = None

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four with a minimax player')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug mode (equivalent to --debug_level debug)')
        parser.add_argument('--debug_level',
                            choices=[level.name.lower() for level in DebugLevel],
                            default='warning',
                            help='Logging verbosity')
        parser.add_argument('--log_file', type=str, default=None,
                            help='Also write log messages to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play games in the terminal')
        play_parser.add_argument('--first', choices=PLAYER_KINDS, default='random',
                                 help='Who plays the first color')
        play_parser.add_argument('--second', choices=PLAYER_KINDS, default='minimax',
                                 help='Who plays the second color')
        play_parser.add_argument('--depth', type=non_negative_int, default=MINIMAX_DEPTH,
                                 help='Plies searched below each minimax candidate')
        play_parser.add_argument('--seed', type=int, default=None,
                                 help='Seed for random players')
        play_parser.add_argument('--legacy-scoring', action='store_true',
                                 help='Score any win at the last drop as a minimax win')

        benchmark_parser = subparsers.add_parser('benchmark', help='Time the minimax search')
        benchmark_parser.add_argument('--iterations', type=int, default=3,
                                      help='Number of searches on the empty board')
        benchmark_parser.add_argument('--depth', type=non_negative_int, default=MINIMAX_DEPTH,
                                      help='Plies searched below each minimax candidate')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the command selected on the command line."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_games()
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def play_games(self) -> None:
        """Play games until the user declines a replay."""
        args = self.args
        self.game = ConnectFourGame(
            create_player(args.first, args.depth, args.seed, args.legacy_scoring),
            create_player(args.second, args.depth, args.seed, args.legacy_scoring))

        self.play_game()
        while YesNoDialog().read(RESUME):
            self.game.reset()
            self.play_game()

    def play_game(self) -> Optional[Color]:
        """Play a single game from the current position, printing the board as it goes."""
        print(TITLE)
        print(self.game.render())

        while not self.game.is_finished():
            color = self.game.active_color
            print(TURN.format(color=color.code))
            column = self.game.play_turn()
            if not isinstance(self.game.get_strategy(color), HumanPlayer):
                print(f"{color.code} drops in column {column + 1}")
            print(self.game.render())

        winner = self.game.get_winner()
        if winner is not None:
            print(PLAYER_WIN.format(color=winner.code))
        else:
            print(PLAYERS_TIED)
        return winner

    def benchmark(self) -> None:
        """Time choose_column on the empty board."""
        player = MinimaxPlayer(depth=self.args.depth)
        board = Board()
        iterations = max(1, self.args.iterations)

        print(f"Benchmarking minimax depth {player.depth} over {iterations} searches...")
        start = time.perf_counter()
        for _ in range(iterations):
            column = player.choose_column(board, Color.FIRST)
        elapsed = time.perf_counter() - start

        print(f"Chosen column: {column}")
        print(f"Nodes per search: {player.nodes_evaluated}")
        print(f"Average time: {elapsed / iterations:.3f} seconds")


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
