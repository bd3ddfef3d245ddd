"""
Sparse coordinate grids with directional navigation and word search.
A grid is a plain dict from Point to value; every operation returns a new dict.
"""

from __future__ import annotations

import copy
import logging
from typing import Callable, Sequence

from grid_types import Direction, Point, SparseGrid, T, next_point

__all__ = [
    "Direction",
    "Point",
    "SparseGrid",
    "boundaries",
    "columns",
    "filter_keys",
    "filter_values",
    "insert_column",
    "insert_row",
    "locate",
    "map_keys",
    "map_values",
    "neighbors",
    "next_point",
    "rows",
    "transform",
    "travel",
    "word_search",
]

logger = logging.getLogger(__name__)


# =============================================================================
# Navigation
# =============================================================================


def travel(grid: SparseGrid[T], point: Point, direction: Direction) -> tuple[Point, T | None]:
    """Step once from `point` and report the destination and its value (None if no tile)."""
    destination = next_point(point, direction)
    return (destination, grid.get(destination))


def neighbors(grid: SparseGrid[T], point: Point) -> dict[Direction, tuple[Point, T]]:
    """
    Collect the occupied cells around `point`.

    Directions whose neighbour has no tile are left out of the result rather
    than mapped to a placeholder. Keys appear in Direction order.
    """
    found: dict[Direction, tuple[Point, T]] = {}
    for direction in Direction:
        destination = next_point(point, direction)
        if destination in grid:
            found[direction] = (destination, grid[destination])
    return found


def boundaries(grid: SparseGrid[T]) -> tuple[Point, Point]:
    """
    Return the (top-left, bottom-right) corners of the bounding box.

    The corners are attained per axis, not necessarily by a single key.
    An empty grid yields the origin for both corners.
    """
    if not grid:
        return (Point(0, 0), Point(0, 0))
    xs = [p.x for p in grid]
    ys = [p.y for p in grid]
    return (Point(min(xs), min(ys)), Point(max(xs), max(ys)))


# =============================================================================
# Bulk Transforms
# =============================================================================


def rows(grid: SparseGrid[T]) -> list[list[T]] | None:
    """
    Project the grid onto its rows, top to bottom.

    Missing cells are skipped, not padded, so a row may be shorter than the
    bounding box and its indices do not line up with x coordinates.

    Returns:
        One list per y in the bounding box, or None if the grid is empty
    """
    if not grid:
        return None
    top_left, bottom_right = boundaries(grid)
    return [
        [grid[Point(x, y)] for x in range(top_left.x, bottom_right.x + 1) if Point(x, y) in grid]
        for y in range(top_left.y, bottom_right.y + 1)
    ]


def columns(grid: SparseGrid[T]) -> list[list[T]] | None:
    """Project the grid onto its columns, left to right. Same gap rules as rows()."""
    if not grid:
        return None
    top_left, bottom_right = boundaries(grid)
    return [
        [grid[Point(x, y)] for y in range(top_left.y, bottom_right.y + 1) if Point(x, y) in grid]
        for x in range(top_left.x, bottom_right.x + 1)
    ]


def filter_keys(grid: SparseGrid[T], predicate: Callable[[Point], bool]) -> SparseGrid[T]:
    """Copy the entries whose position satisfies `predicate`."""
    return {point: copy.deepcopy(value) for point, value in grid.items() if predicate(point)}


def filter_values(grid: SparseGrid[T], predicate: Callable[[T], bool]) -> SparseGrid[T]:
    """Copy the entries whose value satisfies `predicate`."""
    return {point: copy.deepcopy(value) for point, value in grid.items() if predicate(value)}


def map_keys(grid: SparseGrid[T], fn: Callable[[Point], Point]) -> SparseGrid[T]:
    """
    Move every entry to `fn(point)`.

    Entries are visited in insertion order. When two source points map to the
    same destination, the entry inserted later overwrites the earlier one, so
    the result shrinks by one entry per collision.

    Args:
        grid: Source grid (left untouched)
        fn: Position mapping

    Returns:
        New grid with relocated, copied values
    """
    moved: SparseGrid[T] = {}
    for point, value in grid.items():
        moved[fn(point)] = copy.deepcopy(value)

    collisions = len(grid) - len(moved)
    if collisions:
        logger.debug("map_keys: %d of %d entries overwritten by key collisions", collisions, len(grid))
    return moved


def map_values(grid: SparseGrid[T], fn: Callable[[T], T]) -> SparseGrid[T]:
    """Replace every value with `fn(value)`, keeping positions."""
    return {point: fn(value) for point, value in grid.items()}


def transform(grid: SparseGrid[T]) -> SparseGrid[T]:
    """Transpose the grid by swapping the x and y of every key."""
    return map_keys(grid, lambda p: Point(p.y, p.x))


def insert_row(grid: SparseGrid[T], index: int) -> SparseGrid[T]:
    """Open an empty row at `index` by pushing every row at or below it down by one."""
    return map_keys(grid, lambda p: p + Direction.SOUTH.delta if p.y >= index else p)


def insert_column(grid: SparseGrid[T], index: int) -> SparseGrid[T]:
    """Open an empty column at `index` by pushing every column at or right of it over by one."""
    return map_keys(grid, lambda p: p + Direction.EAST.delta if p.x >= index else p)


def locate(cells: Sequence[Sequence[T]]) -> SparseGrid[T]:
    """
    Build a grid from row-major nested sequences.

    Row 0 is the top row and `cells[y][x]` lands at Point(x, y). Rows may have
    different lengths; cells past the end of a short row are simply absent.

    Example:
        locate([[1, 2], [3]])
        -> {Point(0, 0): 1, Point(1, 0): 2, Point(0, 1): 3}
    """
    return {
        Point(x, y): tile
        for y, row in enumerate(cells)
        for x, tile in enumerate(row)
    }


# =============================================================================
# Pattern Search
# =============================================================================


def word_search(grid: SparseGrid[T], target: Sequence[T]) -> list[tuple[Point, Direction]]:
    """
    Find every straight-line placement of `target` in the grid.

    A placement starts on a cell equal to target[0] and reads forward in one of
    the eight directions without wrapping; running off the grid disqualifies
    it. A single-value target matches each equal cell once, tagged EAST, since
    it has no direction of its own.

    Results are ordered by start point (grid insertion order) and then by
    Direction order. Callers should only rely on membership and count.

    Args:
        grid: Grid to search
        target: Sequence of values to look for

    Returns:
        List of (start point, direction) pairs
    """
    if not target:
        return []

    starts = filter_values(grid, lambda tile: tile == target[0])

    if len(target) == 1:
        return [(start, Direction.EAST) for start in starts]

    candidates = [
        (start, direction)
        for start in starts
        for direction, (_, tile) in neighbors(grid, start).items()
        if tile == target[1]
    ]

    matches: list[tuple[Point, Direction]] = []
    for start, direction in candidates:
        position = start
        for expected in target[1:]:
            position, tile = travel(grid, position, direction)
            if position not in grid or tile != expected:
                break
        else:
            matches.append((start, direction))

    logger.debug(
        "word_search: %d starts, %d candidates, %d matches for target of length %d",
        len(starts),
        len(candidates),
        len(matches),
        len(target),
    )
    return matches
