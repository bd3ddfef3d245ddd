"""
Shared type definitions for the sparse grid toolkit.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Point:
    """An integer coordinate. Origin is top-left, y grows downward."""

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"


class Direction(Enum):
    """Compass direction for traversal, listed clockwise from north."""

    NORTH = "N"  # Up (decreasing y)
    NORTH_EAST = "NE"
    EAST = "E"  # Right (increasing x)
    SOUTH_EAST = "SE"
    SOUTH = "S"  # Down (increasing y)
    SOUTH_WEST = "SW"
    WEST = "W"  # Left (decreasing x)
    NORTH_WEST = "NW"

    @property
    def delta(self) -> Point:
        return _DELTAS[self]


_DELTAS: dict[Direction, Point] = {
    Direction.NORTH: Point(0, -1),
    Direction.NORTH_EAST: Point(1, -1),
    Direction.EAST: Point(1, 0),
    Direction.SOUTH_EAST: Point(1, 1),
    Direction.SOUTH: Point(0, 1),
    Direction.SOUTH_WEST: Point(-1, 1),
    Direction.WEST: Point(-1, 0),
    Direction.NORTH_WEST: Point(-1, -1),
}


def next_point(point: Point, direction: Direction) -> Point:
    """Return the point one step away from `point` in `direction`."""
    return point + direction.delta


# =============================================================================
# Grid Definition Types
# =============================================================================

# Absent keys mean "no tile", which is distinct from any stored value.
SparseGrid = dict[Point, T]
