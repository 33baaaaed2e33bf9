"""Run both parts of a day's puzzle, defaulting to today's date."""

from __future__ import annotations

import argparse
import datetime
from collections.abc import Sequence

from aoc2024 import day01, day02, day03, day04, day05
from aoc2024.inputs import run_day

SOLVERS = {
    1: (day01.part1, day01.part2),
    2: (day02.part1, day02.part2),
    3: (day03.part1, day03.part2),
    4: (day04.part1, day04.part2),
    5: (day05.part1, day05.part2),
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="aoc2024", description=__doc__)
    parser.add_argument(
        "day", nargs="?", type=int, default=None, help="day number (default: today)"
    )
    parser.add_argument("--root", default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)

    day = args.day if args.day is not None else datetime.date.today().day
    if day not in SOLVERS:
        parser.error(f"no solution for day {day}")

    print(f"Building and running solution for day {day:02d}")
    part1, part2 = SOLVERS[day]
    run_day(f"day{day:02d}", part1, part2, args.root)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())