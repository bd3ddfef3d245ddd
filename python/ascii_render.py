"""
ASCII rendering for sparse grids.

Renders the bounding box row by row, filling cells that have no tile with an
explicit fallback glyph. Highlighted points are drawn inverted for debugging
search results.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable, TextIO

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid_types import Direction, Point, SparseGrid, T, next_point
from sparse_grid import boundaries

logger = logging.getLogger(__name__)


def render_grid(
    grid: SparseGrid[T],
    fallback: str,
    highlight: Iterable[Point] | None = None,
    color: Callable[[str], str] | None = None,
) -> list[str]:
    """
    Render a grid as one string per row.

    Args:
        grid: The grid to render
        fallback: Glyph drawn where the grid has no tile
        highlight: Optional points to draw with a white background
        color: Optional colorizer for non-highlighted cells (e.g. chalk.green)

    Returns:
        List of rendered lines, top row first
    """
    highlighted = set(highlight) if highlight is not None else set()
    top_left, bottom_right = boundaries(grid)

    lines: list[str] = []
    for y in range(top_left.y, bottom_right.y + 1):
        line_parts: list[str] = []
        for x in range(top_left.x, bottom_right.x + 1):
            point = Point(x, y)
            content = str(grid[point]) if point in grid else fallback

            if point in highlighted:
                content = chalk.bgWhite.black(content)
            elif color is not None:
                content = color(content)

            line_parts.append(content)
        lines.append("".join(line_parts))

    logger.debug(
        "render_grid: %d rows from %r to %r, %d highlighted",
        len(lines),
        top_left,
        bottom_right,
        len(highlighted),
    )
    return lines


def print_grid(grid: SparseGrid[T], fallback: str, file: TextIO | None = None) -> None:
    """Write the plain rendering to `file` (stdout by default), one line per row."""
    out = file if file is not None else sys.stdout
    for line in render_grid(grid, fallback):
        out.write(line + "\n")


def match_cells(start: Point, direction: Direction, length: int) -> list[Point]:
    """Expand a word-search hit into the points it covers."""
    cells = [start]
    for _ in range(length - 1):
        cells.append(next_point(cells[-1], direction))
    return cells
