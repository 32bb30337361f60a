"""Gift-shop ID puzzle: find IDs made of a repeated digit sequence."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

from puzzlebox.inputs import read_comma_separated


def parse_range(text: str) -> range:
    """Parse ``X-Y`` into the inclusive range of integers from X to Y."""
    first, sep, last = text.partition("-")
    if not sep:
        raise ValueError(f"Invalid range format {text!r}, expected 'X-Y'")
    try:
        first_num = int(first.strip())
    except ValueError:
        raise ValueError(f"Failed to parse first number: {first}") from None
    try:
        last_num = int(last.strip())
    except ValueError:
        raise ValueError(f"Failed to parse last number: {last}") from None
    return range(first_num, last_num + 1)


def is_doubled_id(num: int) -> bool:
    """True if the number's digits are one sequence written exactly twice."""
    digits = str(num)
    if len(digits) < 2 or len(digits) % 2:
        return False
    mid = len(digits) // 2
    first_half, second_half = digits[:mid], digits[mid:]
    return first_half == second_half and not first_half.startswith("0")


def is_repeated_id(num: int) -> bool:
    """True if the number's digits are one sequence written two or more times."""
    digits = str(num)
    if len(digits) < 2:
        return False
    for width in range(1, len(digits) // 2 + 1):
        pattern = digits[:width]
        if pattern.startswith("0"):
            continue
        copies = len(digits) // width
        if copies >= 2 and pattern * copies == digits:
            return True
    return False


def sum_invalid_ids(
    ranges: Iterable[Iterable[int]], predicate: Callable[[int], bool]
) -> int:
    """Sum every number across the ranges for which the predicate holds."""
    return sum(num for numbers in ranges for num in numbers if predicate(num))


def main(argv: Sequence[str] | None = None) -> int:
    """Read comma-separated ranges from a file and report the sum on stderr."""
    parser = argparse.ArgumentParser(description="Sum the invalid IDs in ranges.")
    parser.add_argument("path", nargs="?", default="src/input.txt")
    parser.add_argument(
        "--part",
        type=int,
        choices=(1, 2),
        default=1,
        help="1 looks for sequences repeated twice, 2 for any repetition",
    )
    args = parser.parse_args(argv)

    ranges = [parse_range(field) for field in read_comma_separated(args.path)]
    predicate = is_doubled_id if args.part == 1 else is_repeated_id
    print(f"Sum of invalid IDs: {sum_invalid_ids(ranges, predicate)}", file=sys.stderr)
    return 0