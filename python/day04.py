"""
Day 4: Ceres Search. Count XMAS placements in a letter grid.
"""

from __future__ import annotations

import logging
from enum import Enum

from grid_parser import parse_char_rows
from sparse_grid import Direction, Point, SparseGrid, filter_values, locate, next_point, word_search

logger = logging.getLogger(__name__)


class Tile(Enum):
    """A letter in the puzzle grid."""

    X = "X"
    M = "M"
    A = "A"
    S = "S"

    def __str__(self) -> str:
        return self.value


XMAS = (Tile.X, Tile.M, Tile.A, Tile.S)
# Each diagonal through the centre must read MAS in one direction or the other.
MAS_ENDS = {(Tile.M, Tile.S), (Tile.S, Tile.M)}
EMPTY_GLYPH = "."


def parse(text: str) -> SparseGrid[Tile]:
    """Build the letter grid, rejecting anything other than X, M, A and S."""
    rows = parse_char_rows(text, "".join(tile.value for tile in Tile))
    grid = locate([[Tile(char) for char in row] for row in rows])
    logger.debug("day04: parsed %d tiles", len(grid))
    return grid


def find_xmas(grid: SparseGrid[Tile]) -> list[tuple[Point, Direction]]:
    """All straight-line XMAS placements."""
    return word_search(grid, XMAS)


def find_crosses(grid: SparseGrid[Tile]) -> list[Point]:
    """Centres of every X-shaped pair of MAS diagonals."""
    centres: list[Point] = []
    for start in filter_values(grid, lambda tile: tile is Tile.A):
        falling = (
            grid.get(next_point(start, Direction.NORTH_WEST)),
            grid.get(next_point(start, Direction.SOUTH_EAST)),
        )
        rising = (
            grid.get(next_point(start, Direction.SOUTH_WEST)),
            grid.get(next_point(start, Direction.NORTH_EAST)),
        )
        if falling in MAS_ENDS and rising in MAS_ENDS:
            centres.append(start)
    return centres


def part1(text: str) -> int:
    """Number of XMAS placements in any of the eight directions."""
    return len(find_xmas(parse(text)))


def part2(text: str) -> int:
    """Number of X-MAS crosses."""
    return len(find_crosses(parse(text)))
