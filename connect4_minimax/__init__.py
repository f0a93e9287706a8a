"""
connect4_minimax - Connect Four with a depth-limited minimax player

This package provides the board model with incremental win detection, an
exhaustive minimax column chooser and a small terminal front end.
"""

# Version number
__version__ = '0.1.0'
