from pathlib import Path

import pytest

from aoc2022.cli import SOLUTIONS, main, run
from aoc2022.day17 import Day as Day17
from aoc2022.day18 import Day as Day18
from aoc2022.day19 import Day as Day19

DAY18_SAMPLE = """2,2,2
1,2,2
3,2,2
2,1,2
2,3,2
2,2,1
2,2,3
2,2,4
2,2,6
1,2,5
3,2,5
2,1,5
2,3,5
"""

DAY19_SAMPLE = (
    "Blueprint 1: Each ore robot costs 4 ore. Each clay robot costs 2 ore. "
    "Each obsidian robot costs 3 ore and 14 clay. "
    "Each geode robot costs 2 ore and 7 obsidian.\n"
)

JET_PATTERN = ">>><<><>><<<>><>>><<<>>><<<><<<>><>><<>>"


def _solution(number):
    return next(solution for solution in SOLUTIONS if solution.number == number)


def test_solution_path_layout(tmp_path):
    solution = _solution(18)
    assert solution.path == Path("day18") / "day18.txt"
    target = tmp_path / solution.path
    target.parent.mkdir()
    target.write_text(DAY18_SAMPLE)
    puzzle = solution.create(target.read_text())
    assert puzzle == Day18.from_input(DAY18_SAMPLE.rstrip("\n"))


def test_only_day_nineteen_is_disabled():
    disabled = [s.number for s in SOLUTIONS if s.disabled_reason is not None]
    assert disabled == [19]
    assert _solution(19).create(DAY19_SAMPLE) == Day19.from_input(
        DAY19_SAMPLE.rstrip("\n")
    )


def test_create_ignores_trailing_newline():
    puzzle = _solution(18).create(DAY18_SAMPLE)
    assert puzzle == Day18.from_input(DAY18_SAMPLE.rstrip("\n"))
    assert puzzle.solve_part_one() == "64"
    assert puzzle.solve_part_two() == "58"


def test_create_day_seventeen():
    puzzle = _solution(17).create(JET_PATTERN + "\n")
    assert puzzle == Day17.from_input(JET_PATTERN)
    assert puzzle.solve_part_one() == "3068"


def test_run_reports_missing_file(tmp_path, capsys):
    with pytest.raises(RuntimeError, match="could not read file"):
        run(tmp_path)
    assert "Running day 15" in capsys.readouterr().out


def test_run_reports_invalid_input(tmp_path):
    (tmp_path / "day15").mkdir()
    (tmp_path / "day15" / "day15.txt").write_text("not a sensor\n")
    with pytest.raises(RuntimeError, match="could not create day 15"):
        run(tmp_path)


def test_main_returns_failure_status(tmp_path, capsys):
    assert main([str(tmp_path)]) == 1
    assert "could not read file" in capsys.readouterr().err