# crucible/types.py
from __future__ import annotations
from enum import Enum
from typing import Tuple

Coord = Tuple[int, int]  # (row, col)

def add(a: Coord, b: Coord) -> Coord:
    return (a[0] + b[0], a[1] + b[1])

class Heading(Enum):
    NORTH = (-1, 0)
    SOUTH = (1, 0)
    EAST = (0, 1)
    WEST = (0, -1)

    @property
    def offset(self) -> Coord:
        return self.value

    @property
    def reverse(self) -> "Heading":
        return _REVERSE[self]

    def step(self, at: Coord) -> Coord:
        return add(at, self.value)

_REVERSE = {
    Heading.NORTH: Heading.SOUTH,
    Heading.SOUTH: Heading.NORTH,
    Heading.EAST: Heading.WEST,
    Heading.WEST: Heading.EAST,
}
