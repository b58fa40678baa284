"""Run every puzzle solution against its input file and print the answers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from aoc2022 import day15, day16, day17, day18, day19, day20, day21, day22, day23


class _Puzzle(Protocol):
    def solve_part_one(self) -> str: ...

    def solve_part_two(self) -> str: ...


@dataclass(frozen=True)
class Solution:
    """One day's puzzle: where its input lives and how to build its solver."""

    number: int
    factory: Callable[[str], _Puzzle]
    disabled_reason: str | None = None

    @property
    def path(self) -> Path:
        """Location of the input file relative to the input directory."""
        return Path(f"day{self.number:02d}") / f"day{self.number:02d}.txt"

    def create(self, text: str) -> _Puzzle:
        """Build the solver from the input text, ignoring one trailing newline."""
        return self.factory(text.removesuffix("\n"))


SOLUTIONS: tuple[Solution, ...] = (
    Solution(15, day15.Day.from_input),
    Solution(16, day16.Day.from_input),
    Solution(17, day17.Day.from_input),
    Solution(18, day18.Day.from_input),
    Solution(19, day19.Day.from_input, "It takes ~5min to run"),
    Solution(20, day20.Day.from_input),
    Solution(21, day21.Day.from_input),
    Solution(22, day22.Day.from_input),
    Solution(23, day23.Day.from_input),
)


def run(directory: str | Path = ".") -> None:
    """Solve every enabled day using the inputs under directory.

    Raises RuntimeError describing the first step that fails.
    """
    directory = Path(directory)
    for solution in SOLUTIONS:
        number = solution.number
        print(f"\nRunning day {number}")

        if solution.disabled_reason is not None:
            print(f"[DISABLED] {solution.disabled_reason}")
            continue

        filename = directory / solution.path
        try:
            text = filename.read_text()
        except OSError as error:
            raise RuntimeError(f"could not read file {filename}: {error}") from error

        try:
            puzzle = solution.create(text)
        except (ValueError, KeyError, IndexError) as error:
            raise RuntimeError(f"could not create day {number}: {error}") from error

        try:
            answer = puzzle.solve_part_one()
        except (ValueError, KeyError, IndexError, ZeroDivisionError) as error:
            raise RuntimeError(
                f"could not solve part one for day {number}: {error}"
            ) from error
        print(f"Part One: {answer}")

        try:
            answer = puzzle.solve_part_two()
        except (ValueError, KeyError, IndexError, ZeroDivisionError) as error:
            raise RuntimeError(
                f"could not solve part two for day {number}: {error}"
            ) from error
        print(f"Part Two: {answer}")


def main(argv: list[str] | None = None) -> int:
    """Entry point: solve all days and report the first failure on stderr."""
    parser = argparse.ArgumentParser(description="Solve the puzzles for every day.")
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="directory holding dayNN/dayNN.txt input files",
    )
    args = parser.parse_args(argv)
    try:
        run(args.directory)
    except RuntimeError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())