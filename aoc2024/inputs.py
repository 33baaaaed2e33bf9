"""Loading puzzle inputs and running the two parts of a day."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

Solver = Callable[[Sequence[str]], int]


def _input_path(name: str, root: str | Path | None) -> Path:
    base = Path(root) if root is not None else Path()
    return base / "inputs" / f"{name}.txt"


def read_lines(name: str, root: str | Path | None = None) -> list[str]:
    """Return the lines of ``inputs/<name>.txt`` under ``root`` (default: cwd).

    Line endings (``\\n`` or ``\\r\\n``) are stripped; a trailing newline does
    not produce an empty final line. Raises ``OSError`` if the file cannot be
    opened.
    """
    with _input_path(name, root).open(encoding="utf-8", newline="") as handle:
        return [line.rstrip("\n").removesuffix("\r") for line in handle]


def run_day(
    name: str,
    part1: Solver,
    part2: Solver,
    root: str | Path | None = None,
) -> tuple[int, int]:
    """Solve both parts of a day, print each answer and return them.

    When the input file cannot be opened, both answers are 0.
    """
    answers = []
    for solver in (part1, part2):
        try:
            lines = read_lines(name, root)
        except OSError:
            answer = 0
        else:
            answer = solver(lines)
        print(answer)
        answers.append(answer)
    return answers[0], answers[1]