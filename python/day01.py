"""
Day 1: Historian Hysteria. Compare two columns of location IDs.
"""

from __future__ import annotations

import logging
from collections import Counter

from grid_parser import parse_number_pairs

logger = logging.getLogger(__name__)


def _columns(text: str) -> tuple[list[int], list[int]]:
    pairs = parse_number_pairs(text)
    left = sorted(lhs for lhs, _ in pairs)
    right = sorted(rhs for _, rhs in pairs)
    logger.debug("day01: parsed %d pairs", len(pairs))
    return left, right


def part1(text: str) -> int:
    """Total distance between the sorted left and right lists."""
    left, right = _columns(text)
    return sum(abs(lhs - rhs) for lhs, rhs in zip(left, right))


def part2(text: str) -> int:
    """Similarity score: each left value times how often it appears on the right."""
    left, right = _columns(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)
