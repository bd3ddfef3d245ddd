"""
Day 3: Mull It Over. Recover multiply instructions from corrupted memory.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

MUL_PATTERN = re.compile(r"mul\((\d+),(\d+)\)")
# An enabled span runs from the start of input or a do() to the next don't() or the end.
ENABLED_PATTERN = re.compile(r"(?:^|do\(\))(.*?)(?:don't\(\)|$)")


def extract_products(memory: str) -> list[tuple[int, int]]:
    """Operand pairs of every well-formed mul(a,b) in `memory`."""
    pairs = [(int(lhs), int(rhs)) for lhs, rhs in MUL_PATTERN.findall(memory)]
    logger.debug("day03: found %d mul instructions", len(pairs))
    return pairs


def enabled_spans(memory: str) -> list[str]:
    """Sections of `memory` where mul instructions are switched on."""
    flattened = memory.replace("\n", "")
    return [match.group(1) for match in ENABLED_PATTERN.finditer(flattened)]


def part1(text: str) -> int:
    """Sum of all products."""
    return sum(lhs * rhs for lhs, rhs in extract_products(text))


def part2(text: str) -> int:
    """Sum of products inside enabled spans only."""
    return sum(
        lhs * rhs
        for span in enabled_spans(text)
        for lhs, rhs in extract_products(span)
    )
