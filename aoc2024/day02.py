"""Day 2: checking reactor reports for safe level changes."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from itertools import pairwise

from aoc2024.inputs import run_day


def parse_reports(lines: Iterable[str]) -> list[list[int]]:
    """Parse each line as a report of whitespace-separated levels."""
    return [[int(field) for field in line.split()] for line in lines]


def is_safe(levels: Sequence[int]) -> bool:
    """True if the levels move strictly one way in steps of 1 to 3.

    Raises ``ValueError`` for reports of fewer than two levels.
    """
    if len(levels) < 2:
        raise ValueError("a report needs at least two levels")
    steps = [b - a for a, b in pairwise(levels)]
    return all(1 <= s <= 3 for s in steps) or all(-3 <= s <= -1 for s in steps)


def is_safe_with_dampener(levels: Sequence[int]) -> bool:
    """True if removing some single level leaves a safe report."""
    return any(
        is_safe([*levels[:i], *levels[i + 1 :]]) for i in range(len(levels))
    )


def part1(lines: Sequence[str]) -> int:
    """Number of safe reports."""
    return sum(is_safe(report) for report in parse_reports(lines))


def part2(lines: Sequence[str]) -> int:
    """Number of reports that are safe once one level is removed."""
    return sum(is_safe_with_dampener(report) for report in parse_reports(lines))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day02", description=__doc__)
    parser.add_argument("--root", default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    run_day("day02", part1, part2, args.root)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())