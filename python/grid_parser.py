"""
Input parsing utilities for the puzzle solutions.

Provides three line-oriented formats:
1. Rows of whitespace-separated integers
2. Pairs of integers (exactly two per row)
3. Character grids with a restricted alphabet
"""

from __future__ import annotations

__all__ = ["parse_char_rows", "parse_number_pairs", "parse_number_rows"]


def _content_lines(text: str) -> list[tuple[int, str]]:
    """Return (line number, stripped line) for every non-blank line."""
    return [
        (line_idx, line.strip())
        for line_idx, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]


def parse_number_rows(text: str) -> list[list[int]]:
    """
    Parse rows of whitespace-separated unsigned integers.

    Format:
    - One row per line; blank lines are ignored
    - Values separated by one or more spaces or tabs
    - Each value must be a run of digits

    Example:
        "7 6 4 2 1\\n1 2 7 8 9"
        -> [[7, 6, 4, 2, 1], [1, 2, 7, 8, 9]]

    Args:
        text: Raw puzzle input

    Returns:
        List of integer rows

    Raises:
        ValueError: If a token is not a non-negative integer
    """
    parsed: list[list[int]] = []

    for line_idx, line in _content_lines(text):
        values: list[int] = []
        for col_idx, token in enumerate(line.split()):
            if not token.isdecimal():
                raise ValueError(
                    f"Invalid number: '{token}'\n"
                    f"  Line {line_idx}: \"{line}\"\n"
                    f"  Position: value {col_idx}\n"
                    f"  Valid values: non-negative integers separated by whitespace"
                )
            values.append(int(token))
        parsed.append(values)

    return parsed


def parse_number_pairs(text: str) -> list[tuple[int, int]]:
    """
    Parse lines holding exactly two integers, e.g. "3   4".

    Raises:
        ValueError: If a line does not hold exactly two integers
    """
    pairs: list[tuple[int, int]] = []

    for (line_idx, line), values in zip(_content_lines(text), parse_number_rows(text)):
        if len(values) != 2:
            raise ValueError(
                f"Expected two numbers per line, found {len(values)}\n"
                f"  Line {line_idx}: \"{line}\""
            )
        pairs.append((values[0], values[1]))

    return pairs


def parse_char_rows(text: str, alphabet: str) -> list[list[str]]:
    """
    Parse a character grid, one cell per character.

    Format:
    - One row per line; empty lines are ignored
    - Each character is a cell and must appear in `alphabet`, including
      any leading or trailing spaces
    - Rows may differ in length (no padding is added)

    Example:
        parse_char_rows("XM\\nAS", "XMAS") -> [["X", "M"], ["A", "S"]]

    Args:
        text: Raw puzzle input
        alphabet: Every character a cell may hold

    Returns:
        List of rows of single-character strings

    Raises:
        ValueError: On any character outside `alphabet`
    """
    parsed: list[list[str]] = []

    for line_idx, line in enumerate(text.splitlines(), start=1):
        if not line:
            continue
        for col_idx, char in enumerate(line):
            if char not in alphabet:
                raise ValueError(
                    f"Invalid character '{char}'\n"
                    f"  Line {line_idx}: \"{line}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Valid characters: {', '.join(alphabet)}"
                )
        parsed.append(list(line))

    return parsed
