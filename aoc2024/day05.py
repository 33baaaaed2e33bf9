"""Day 5: checking and repairing page order in safety manual updates."""

from __future__ import annotations

import argparse
from collections import defaultdict
from collections.abc import Iterable, Sequence
from functools import cmp_to_key

from aoc2024.inputs import run_day


def parse_manual(
    lines: Iterable[str],
) -> tuple[list[tuple[int, int]], list[list[int]]]:
    """Split the input into ``X|Y`` ordering rules and comma-separated updates.

    Rules run up to the first blank line; every later line is an update.
    """
    rules: list[tuple[int, int]] = []
    updates: list[list[int]] = []
    it = iter(lines)
    for line in it:
        if not line:
            break
        before, after = line.split("|")
        rules.append((int(before), int(after)))
    for line in it:
        updates.append([int(page) for page in line.split(",")])
    return rules, updates


def _in_order(update: Sequence[int], rules: Iterable[tuple[int, int]]) -> bool:
    position = {page: i for i, page in enumerate(update)}
    return all(
        position[x] <= position[y]
        for x, y in rules
        if x in position and y in position
    )


def part1(lines: Sequence[str]) -> int:
    """Sum of middle pages of the updates already in a valid order."""
    rules, updates = parse_manual(lines)
    return sum(
        update[len(update) // 2] for update in updates if _in_order(update, rules)
    )


def part2(lines: Sequence[str]) -> int:
    """Sum of middle pages of the out-of-order updates after reordering them."""
    rules, updates = parse_manual(lines)
    successors: defaultdict[int, set[int]] = defaultdict(set)
    for x, y in rules:
        successors[x].add(y)

    def compare(a: int, b: int) -> int:
        if b in successors[a]:
            return -1
        if a in successors[b]:
            return 1
        return 0

    total = 0
    for update in updates:
        reordered = sorted(update, key=cmp_to_key(compare))
        if reordered != update:
            total += reordered[len(reordered) // 2]
    return total


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day05", description=__doc__)
    parser.add_argument("--root", default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    run_day("day05", part1, part2, args.root)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())