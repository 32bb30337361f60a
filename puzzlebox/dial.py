"""Safe dial puzzle: count how often a 0-99 dial lands on or passes zero."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from puzzlebox.inputs import read_lines

DIAL_SIZE = 100
START_POSITION = 50


def parse_rotation(rotation: str) -> int:
    """Turn ``L<n>`` or ``R<n>`` into a signed step count (left is negative)."""
    direction, amount_text = rotation[:1], rotation[1:]
    try:
        amount = int(amount_text)
    except ValueError:
        raise ValueError(f"Failed to parse number in rotation {rotation!r}") from None
    if direction == "L":
        return -amount
    if direction == "R":
        return amount
    raise ValueError(f"Invalid rotation direction in {rotation!r}")


def count_zero_stops(rotations: Iterable[int], start: int = START_POSITION) -> int:
    """Count the rotations after which the dial rests on zero."""
    position = start
    hits = 0
    for rotation in rotations:
        position = (position + rotation) % DIAL_SIZE
        if position == 0:
            hits += 1
    return hits


def count_zero_passes(rotations: Iterable[int], start: int = START_POSITION) -> int:
    """Count every time the dial points at zero, during or after a rotation."""
    position = start
    hits = 0
    for rotation in rotations:
        # Leaving zero to the left wraps once without really passing zero.
        if position == 0 and position + rotation < 0:
            hits -= 1
        position += rotation
        while position < 0 or position > DIAL_SIZE:
            if position > DIAL_SIZE:
                position -= DIAL_SIZE
            else:
                position += DIAL_SIZE
            hits += 1
        if position == DIAL_SIZE:
            position = 0
        if position == 0:
            hits += 1
    return hits


def main(argv: Sequence[str] | None = None) -> int:
    """Read rotations from a file and report the zero count on stderr."""
    parser = argparse.ArgumentParser(description="Count how often the dial hits zero.")
    parser.add_argument("path", nargs="?", default="src/input.txt")
    parser.add_argument(
        "--part",
        type=int,
        choices=(1, 2),
        default=1,
        help="1 counts resting on zero, 2 also counts passing zero",
    )
    args = parser.parse_args(argv)

    rotations = [parse_rotation(line) for line in read_lines(args.path)]
    counter = count_zero_stops if args.part == 1 else count_zero_passes
    print(f"zero_hits: {counter(rotations)}", file=sys.stderr)
    return 0