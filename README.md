# puzzlebox

Solvers for three daily puzzles. Each command reads its puzzle input from a
text file and prints the answer on standard error. If no file is given, each
command reads `src/input.txt` relative to the current directory.

## Installation

```
pip install .
```

To run the tests, install the test extra as well:

```
pip install ".[test]"
pytest
```

## Commands

### Safe dial

The input has one rotation per line, such as `L68` or `R48`. Blank lines are
skipped. `L` turns the dial towards lower numbers, `R` towards higher ones.
The dial has 100 positions, from 0 to 99, and starts at 50.

```
puzzlebox-dial input.txt
puzzlebox-dial --part 2 input.txt
```

With `--part 1` (the default) the command prints `zero_hits: N`, where N is
the number of rotations after which the dial rests on 0. With `--part 2`, N
also counts every time the dial passes 0 during a rotation.

A line that does not start with `L` or `R`, or whose number cannot be read,
raises `ValueError`.

### Invalid product IDs

The input is a comma-separated list of inclusive ranges, such as
`11-22,95-115`.

```
puzzlebox-invalid-ids input.txt
puzzlebox-invalid-ids --part 2 input.txt
```

With `--part 1` (the default) an ID is invalid if its digits are one
sequence written exactly twice, such as `6464`. With `--part 2` an ID is
invalid if its digits are one sequence written two or more times, such as
`111` or `123123123`. The command prints `Sum of invalid IDs: N`, the sum of
all invalid IDs in all ranges.

### Battery joltage

The input has one bank of single-digit batteries per line, such as
`987654321111111`. Blank lines are skipped.

```
puzzlebox-jolts input.txt
```

From each bank the command takes the largest digit that is not the last
one (the first such if it occurs more than once), then the largest digit
after it, and joins the two into a two-digit number. It prints `jolts: N`,
the sum of these numbers over all banks.

## Library use

```python
from puzzlebox.dial import parse_rotation, count_zero_stops, count_zero_passes
from puzzlebox.invalid_ids import parse_range, is_doubled_id, is_repeated_id, sum_invalid_ids
from puzzlebox.jolts import parse_bank, largest_jolt_pair, bank_joltage, total_joltage
from puzzlebox.inputs import read_lines, read_comma_separated

parse_rotation("L68")                        # -68
count_zero_stops([-50, 10, -10])             # 2  (starts at 50 by default)
list(parse_range("3-5"))                     # [3, 4, 5]
is_repeated_id(111)                          # True
sum_invalid_ids([parse_range("11-22")], is_doubled_id)  # 33
largest_jolt_pair([9, 8, 9, 8, 9])           # (9, 9)
bank_joltage(parse_bank("811111111111119"))  # 89
```

- `read_lines(path)` returns the non-blank lines of a file, stripped.
- `read_comma_separated(path)` returns the comma-separated fields of a file,
  stripped.
- `count_zero_stops` and `count_zero_passes` take signed step counts and an
  optional `start` position.
- `sum_invalid_ids(ranges, predicate)` sums every number in the ranges for
  which `predicate` is true.
- `total_joltage(lines)` sums `bank_joltage` over lines of digits.

Malformed input raises `ValueError`.