"""Day 4: word search for XMAS and X-shaped MAS."""

from __future__ import annotations

import argparse
from collections import defaultdict
from collections.abc import Sequence

from aoc2024.inputs import run_day

_WORD = "XMAS"


def count_matches(text: str) -> int:
    """Occurrences of XMAS read forwards or backwards in ``text``."""
    return text.count(_WORD) + text.count(_WORD[::-1])


def _diagonals(grid: Sequence[str], anti: bool) -> list[str]:
    cells: defaultdict[int, list[str]] = defaultdict(list)
    for r, row in enumerate(grid):
        for c, char in enumerate(row):
            cells[r + c if anti else r - c].append(char)
    return ["".join(chars) for chars in cells.values()]


def is_x_mas(block: Sequence[Sequence[str]]) -> bool:
    """True if a 3x3 block holds two crossing MAS words, either direction."""
    return (
        {block[0][0], block[2][2]} == {"M", "S"}
        and {block[2][0], block[0][2]} == {"M", "S"}
        and block[1][1] == "A"
    )


def _require_grid(lines: Sequence[str]) -> None:
    if not lines:
        raise ValueError("the word search grid is empty")


def part1(lines: Sequence[str]) -> int:
    """XMAS occurrences in rows, columns and both diagonal directions."""
    _require_grid(lines)
    columns = ["".join(column) for column in zip(*lines)]
    strings = [*lines, *columns, *_diagonals(lines, False), *_diagonals(lines, True)]
    return sum(count_matches(text) for text in strings)


def part2(lines: Sequence[str]) -> int:
    """Number of 3x3 windows forming an X of two MAS words."""
    _require_grid(lines)
    width = len(lines[0])
    return sum(
        is_x_mas([row[j : j + 3] for row in lines[i : i + 3]])
        for i in range(len(lines) - 2)
        for j in range(width - 2)
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day04", description=__doc__)
    parser.add_argument("--root", default=None, help="directory holding inputs/")
    args = parser.parse_args(argv)
    run_day("day04", part1, part2, args.root)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())