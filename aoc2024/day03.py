"""Day 3: summing multiplication instructions in corrupted memory."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence

from aoc2024.inputs import run_day

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_INSTRUCTION = re.compile(r"mul\(([0-9]+),([0-9]+)\)|do\(\)|don't\(\)")


def part1(lines: Sequence[str]) -> int:
    """Sum of every well-formed ``mul(a,b)`` product."""
    return sum(
        int(match[1]) * int(match[2]) for line in lines for match in _MUL.finditer(line)
    )


def part2(lines: Sequence[str]) -> int:
    """Sum of products, honouring ``do()``/``don't()`` across all lines."""
    total = 0
    enabled = True
    for line in lines:
        for match in _INSTRUCTION.finditer(line):
            instruction = match[0]
            if instruction == "do()":
                enabled = True
            elif instruction == "don't()":
                enabled = False
            elif enabled:
                total += int(match[1]) * int(match[2])
    return total


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day03", description=__doc__)
    parser.add_argument("--root", default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    run_day("day03", part1, part2, args.root)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())