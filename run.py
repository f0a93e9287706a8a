#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four minimax game

Examples:

    # Random player against the minimax player (default)
    python run.py play

    # Play yourself against a depth 4 minimax player
    python run.py play --first human --second minimax

    # Watch two minimax players with detailed logging
    python run.py --debug play --first minimax --second minimax --depth 3

    # Time the search on the empty board
    python run.py benchmark --iterations 5
"""

import sys

from connect4_minimax.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
