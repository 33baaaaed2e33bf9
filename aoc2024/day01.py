"""Day 1: comparing two lists of location IDs."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Iterable, Sequence

from aoc2024.inputs import run_day


def parse_pairs(lines: Iterable[str]) -> tuple[list[int], list[int]]:
    """Split each line into its first two integers, giving the left and right lists."""
    left: list[int] = []
    right: list[int] = []
    for line in lines:
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"expected two numbers in line {line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def part1(lines: Sequence[str]) -> int:
    """Total distance between the sorted lists, pair by pair."""
    left, right = parse_pairs(lines)
    return sum(abs(x - y) for x, y in zip(sorted(left), sorted(right)))


def part2(lines: Sequence[str]) -> int:
    """Similarity score: each left number times its count in the right list."""
    left, right = parse_pairs(lines)
    counts = Counter(right)
    return sum(x * counts[x] for x in left)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day01", description=__doc__)
    parser.add_argument("--root", default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    run_day("day01", part1, part2, args.root)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())