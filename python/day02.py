"""
Day 2: Red-Nosed Reports. Classify reactor level reports as safe or unsafe.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

from grid_parser import parse_number_rows

logger = logging.getLogger(__name__)

MAX_STEP = 3


class Safety(Enum):
    """Outcome of checking a single report."""

    SAFE = "safe"
    UNSAFE = "unsafe"


def _is_monotonic(levels: Sequence[int], increasing: bool) -> bool:
    """Every adjacent step moves the same way by 1..MAX_STEP."""
    for current, following in zip(levels, levels[1:]):
        step = following - current if increasing else current - following
        if not 1 <= step <= MAX_STEP:
            return False
    return True


def check_report(levels: Sequence[int]) -> Safety:
    """
    Classify a report by its first two levels, then check the rest agree.

    Equal first levels (or fewer than two levels) are unsafe.
    """
    if len(levels) < 2 or levels[0] == levels[1]:
        return Safety.UNSAFE
    increasing = levels[1] > levels[0]
    return Safety.SAFE if _is_monotonic(levels, increasing) else Safety.UNSAFE


def check_report_dampened(levels: Sequence[int]) -> Safety:
    """Like check_report, but tolerate removing any one level."""
    if len(levels) < 2:
        return Safety.UNSAFE
    for increasing in (True, False):
        if _is_monotonic(levels, increasing):
            return Safety.SAFE
        for skip in range(len(levels)):
            if _is_monotonic([*levels[:skip], *levels[skip + 1:]], increasing):
                return Safety.SAFE

    logger.debug("day02: unsafe even with dampener: %s", levels)
    return Safety.UNSAFE


def part1(text: str) -> int:
    """Number of safe reports."""
    return sum(1 for report in parse_number_rows(text) if check_report(report) is Safety.SAFE)


def part2(text: str) -> int:
    """Number of reports that are safe once the problem dampener is applied."""
    return sum(
        1 for report in parse_number_rows(text) if check_report_dampened(report) is Safety.SAFE
    )
