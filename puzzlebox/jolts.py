"""Battery bank puzzle: pick two digits per bank for the largest joltage."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from puzzlebox.inputs import read_lines


def parse_bank(line: str) -> list[int]:
    """Split a line of digits into a list of single-digit integers."""
    try:
        return [int(char) for char in line]
    except ValueError:
        raise ValueError(f"Failed to parse bank {line!r}") from None


def largest_jolt_pair(bank: Sequence[int]) -> tuple[int, int]:
    """Pick the largest left digit (not the last) and the largest digit after it."""
    if not bank:
        raise ValueError("A bank needs at least one battery")
    left, left_index = 0, 0
    for index, value in enumerate(bank[:-1]):
        if value > left:
            left, left_index = value, index
    right = max([0, *bank[left_index + 1:]])
    return left, right


def bank_joltage(bank: Sequence[int]) -> int:
    """Join the chosen pair's digits into one number, e.g. (9, 8) -> 98."""
    left, right = largest_jolt_pair(bank)
    return int(f"{left}{right}")


def total_joltage(lines: Iterable[str]) -> int:
    """Sum the joltage of every bank given as a line of digits."""
    return sum(bank_joltage(parse_bank(line)) for line in lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Read banks from a file and report the total joltage on stderr."""
    parser = argparse.ArgumentParser(description="Sum the largest joltage per bank.")
    parser.add_argument("path", nargs="?", default="src/input.txt")
    args = parser.parse_args(argv)

    print(f"jolts: {total_joltage(read_lines(args.path))}", file=sys.stderr)
    return 0