"""
line.py - Four-cell sliding window used by win detection
"""

from typing import List, Optional

from connect4_minimax.utils import CONNECT_N
from connect4_minimax.game.geometry import Coordinate, Direction


class Line:
    """
    CONNECT_N consecutive coordinates along a direction, anchored at an origin.

    After set(direction) the window starts at the origin and extends along
    the direction. Each shift() slides it one step back, so CONNECT_N calls
    visit every window that contains the origin.
    """

    LENGTH = CONNECT_N

    def __init__(self, origin: Coordinate):
        self.origin = origin
        self._coordinates: List[Coordinate] = []
        self._opposite: Optional[Direction] = None

    def set(self, direction: Direction) -> None:
        self._coordinates = [self.origin]
        for _ in range(1, Line.LENGTH):
            self._coordinates.append(direction.next(self._coordinates[-1]))
        self._opposite = direction.opposite()

    def shift(self) -> None:
        if self._opposite is None:
            raise RuntimeError("Line.shift() called before Line.set()")
        self._coordinates = [self._opposite.next(coordinate) for coordinate in self._coordinates]

    def coordinates(self) -> List[Coordinate]:
        return list(self._coordinates)
