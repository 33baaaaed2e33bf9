import pytest

from aoc2024 import day01

EXAMPLE = ["3   4", "4   3", "2   5", "1   3", "3   9", "3   3"]


def test_parse_pairs_splits_columns():
    assert day01.parse_pairs(EXAMPLE) == ([3, 4, 2, 1, 3, 3], [4, 3, 5, 3, 9, 3])


def test_parse_pairs_ignores_extra_fields():
    assert day01.parse_pairs(["10 20 30"]) == ([10], [20])


def test_parse_pairs_rejects_short_line():
    with pytest.raises(ValueError):
        day01.parse_pairs(["42"])


def test_parse_pairs_rejects_non_number():
    with pytest.raises(ValueError):
        day01.parse_pairs(["1 x"])


def test_example_part1():
    assert day01.part1(EXAMPLE) == 11


def test_example_part2():
    assert day01.part2(EXAMPLE) == 31


def test_part1_symmetric_in_columns():
    swapped = [" ".join(reversed(line.split())) for line in EXAMPLE]
    assert day01.part1(swapped) == day01.part1(EXAMPLE)


def test_part1_same_multiset_has_no_distance():
    lines = ["5 1", "1 9", "9 5"]
    assert day01.part1(lines) == day01.part1(["1 1"])


def test_part2_order_independent():
    assert day01.part2(list(reversed(EXAMPLE))) == day01.part2(EXAMPLE)


def test_main_prints_both_parts(tmp_path, capsys):
    (tmp_path / "inputs").mkdir()
    (tmp_path / "inputs" / "day01.txt").write_text("\n".join(EXAMPLE) + "\n")
    assert day01.main(["--root", str(tmp_path)]) == 0
    out = capsys.readouterr().out.split()
    assert out == [str(day01.part1(EXAMPLE)), str(day01.part2(EXAMPLE))]