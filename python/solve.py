#!/usr/bin/env python3
"""
Run a single day/part against a puzzle input and print the answer.

Usage:
    python solve.py 4 1 --input day04.txt
    python solve.py 4 2 --input day04.txt --show-grid
    cat day02.txt | python solve.py 2 2 --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

import day01
import day02
import day03
import day04
from ascii_render import match_cells, render_grid

logger = logging.getLogger(__name__)

Solution = Callable[[str], int]

SOLUTIONS: dict[tuple[int, int], Solution] = {
    (1, 1): day01.part1,
    (1, 2): day01.part2,
    (2, 1): day02.part1,
    (2, 2): day02.part2,
    (3, 1): day03.part1,
    (3, 2): day03.part2,
    (4, 1): day04.part1,
    (4, 2): day04.part2,
}


@dataclass(frozen=True)
class RunConfig:
    """Options for a single run."""

    day: int
    part: int
    input_path: Path | None = None  # None = read stdin
    verbose: bool = False
    show_grid: bool = False


def parse_args(argv: list[str] | None = None) -> RunConfig:
    parser = argparse.ArgumentParser(description="Solve one day/part of the 2024 puzzles.")
    parser.add_argument("day", type=int, help="Puzzle day (1-4).")
    parser.add_argument("part", type=int, choices=(1, 2), help="Puzzle part.")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Path to the puzzle input. Reads stdin when omitted.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument(
        "--show-grid",
        action="store_true",
        help="Day 4 only: render the grid with XMAS placements highlighted.",
    )
    args = parser.parse_args(argv)
    if args.show_grid and args.day != 4:
        parser.error(f"--show-grid is only available for day 4, not day {args.day}")
    return RunConfig(args.day, args.part, args.input, args.verbose, args.show_grid)


def solve(config: RunConfig, text: str) -> int:
    """Dispatch to the registered solution and log how long it took."""
    key = (config.day, config.part)
    if key not in SOLUTIONS:
        available = ", ".join(f"{d}/{p}" for d, p in sorted(SOLUTIONS))
        raise ValueError(
            f"No solution for day {config.day} part {config.part}\n"
            f"  Available: {available}"
        )

    return _timed(config, lambda: SOLUTIONS[key](text))


def solve_with_preview(config: RunConfig, text: str) -> tuple[int, Text]:
    """
    Solve day 4 from a single parse and render the grid with XMAS hits highlighted.

    Returns:
        (answer, rendered grid)
    """
    grid = day04.parse(text)
    placements = day04.find_xmas(grid)
    if config.part == 1:
        answer = _timed(config, lambda: len(placements))
    else:
        answer = _timed(config, lambda: len(day04.find_crosses(grid)))

    covered = [
        point
        for start, direction in placements
        for point in match_cells(start, direction, len(day04.XMAS))
    ]
    preview = Text.from_ansi("\n".join(render_grid(grid, day04.EMPTY_GLYPH, highlight=covered)))
    return answer, preview


def _timed(config: RunConfig, run: Callable[[], int]) -> int:
    start = time.perf_counter()
    answer = run()
    logger.info(
        "day %d part %d: answer=%d in %.4f s",
        config.day,
        config.part,
        answer,
        time.perf_counter() - start,
    )
    return answer


def main(argv: list[str] | None = None) -> int:
    config = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    console = Console()

    try:
        if config.input_path is not None:
            text = config.input_path.read_text(encoding="utf-8")
        else:
            text = sys.stdin.read()
        if config.show_grid:
            answer, preview = solve_with_preview(config, text)
            console.print(preview)
        else:
            answer = solve(config, text)
    except (OSError, ValueError) as exc:
        console.print(Text(f"Error: {exc}", style="bold red"))
        return 1

    console.print(
        Panel(
            Text(str(answer), style="bold"),
            title=f"Day {config.day} - Part {config.part}",
            border_style="green",
            expand=False,
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
