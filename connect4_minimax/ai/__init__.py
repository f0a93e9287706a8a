"""
connect4_minimax.ai - Automated column choosers

Every strategy exposes ``choose_column(board, color) -> int`` and leaves the
board exactly as it found it.
"""

from connect4_minimax.ai.minimax import MinimaxPlayer
from connect4_minimax.ai.random_player import RandomPlayer

__all__ = ['MinimaxPlayer', 'RandomPlayer']
