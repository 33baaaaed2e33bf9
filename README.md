# aoc2024

Solutions to Advent of Code 2024, days 1 to 5. Each day solves both parts
of its puzzle and prints the two answers, one per line.

## Installing

```
pip install .
```

## Puzzle input

A day reads its input from `inputs/dayNN.txt`, for example
`inputs/day01.txt` for day 1. By default `inputs/` is looked for in the
directory you run from; every command takes `--root DIR` to look for
`DIR/inputs/` instead. If the file cannot be opened, the day prints `0` for
each part.

## Running

Run one day directly:

```
aoc2024-day01
aoc2024-day02
aoc2024-day03
aoc2024-day04
aoc2024-day05
```

Each of these accepts `--root DIR`.

Or use the general entry point, which takes the day number as an optional
argument:

```
aoc2024 3
aoc2024 3 --root path/to/dir
aoc2024
```

It first prints a line such as `Building and running solution for day 03`,
then the two answers. Without a day number it uses today's day of the
month. A day other than 1 to 5 is rejected with a usage error.

## Using the solutions from Python

Every day module (`aoc2024.day01` to `aoc2024.day05`) has `part1(lines)`
and `part2(lines)`. Each takes the puzzle input as a sequence of lines and
returns the answer as an integer.

```python
from aoc2024 import day01

lines = ["3   4", "4   3", "2   5", "1   3", "3   9", "3   3"]
print(day01.part1(lines))  # 11, total distance between the sorted lists
print(day01.part2(lines))  # 31, similarity score
```

The modules also expose their helpers:

- `day01.parse_pairs(lines)`: the left and right lists of numbers.
- `day02.parse_reports(lines)`, `day02.is_safe(levels)` and
  `day02.is_safe_with_dampener(levels)`. `is_safe` raises `ValueError`
  for a report of fewer than two levels.
- `day04.count_matches(text)` and `day04.is_x_mas(block)`. `part1` and
  `part2` raise `ValueError` for an empty grid.
- `day05.parse_manual(lines)`: the `X|Y` rules and the updates that follow
  the first blank line.

`aoc2024.inputs.read_lines(name, root=None)` returns the lines of
`inputs/<name>.txt` with line endings removed, raising `OSError` if the
file cannot be opened. `aoc2024.inputs.run_day(name, part1, part2,
root=None)` solves both parts, prints each answer and returns them as a
pair.

## The days

- **Day 1**: distance and similarity between two lists of numbers.
- **Day 2**: safe reports, with and without removing one level.
- **Day 3**: sums of `mul(a,b)` instructions, with `do()` and `don't()` switches.
- **Day 4**: `XMAS` word search, and `X-MAS` crosses.
- **Day 5**: ordering rules for page updates.

## What it does not do

Only days 1 to 5 are solved. There are no solutions for days 6 to 25, and
`aoc2024` run on those dates without a day number stops with an error. The
package does not download puzzle input; the files must already be in
`inputs/`.

## Tests

```
pip install .[test]
pytest
```