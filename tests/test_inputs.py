from pathlib import Path

import pytest

from aoc2024.inputs import read_lines, run_day


def _write_input(root: Path, name: str, content: str) -> None:
    (root / "inputs").mkdir(exist_ok=True)
    (root / "inputs" / f"{name}.txt").write_bytes(content.encode("utf-8"))


def test_read_lines_strips_newlines(tmp_path):
    _write_input(tmp_path, "day99", "alpha\nbeta\ngamma\n")
    assert read_lines("day99", tmp_path) == ["alpha", "beta", "gamma"]


def test_read_lines_handles_crlf_and_missing_final_newline(tmp_path):
    _write_input(tmp_path, "day98", "one two\r\nthree\r\nfour")
    assert read_lines("day98", tmp_path) == ["one two", "three", "four"]


def test_read_lines_keeps_inner_blank_lines(tmp_path):
    _write_input(tmp_path, "day97", "a\n\nb\n")
    assert read_lines("day97", tmp_path) == ["a", "", "b"]


def test_read_lines_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines("nothing", tmp_path)


def test_run_day_passes_lines_and_prints_answers(tmp_path, capsys):
    _write_input(tmp_path, "day96", "x\nyy\nzzz\n")
    result = run_day("day96", len, lambda lines: sum(map(len, lines)), tmp_path)
    assert result == (3, 6)
    assert capsys.readouterr().out.split() == ["3", "6"]


def test_run_day_without_input_prints_zero(tmp_path, capsys):
    def fail(lines):
        raise AssertionError("solver must not run")

    assert run_day("absent", fail, fail, tmp_path) == (0, 0)
    assert capsys.readouterr().out.split() == ["0", "0"]