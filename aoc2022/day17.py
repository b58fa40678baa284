"""Pyroclastic flow: rocks falling into a narrow chamber pushed by jets of gas."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import cycle

CHAMBER_WIDTH = 7
CHAMBER_HEIGHT = 100_000
TOTAL_ROCKS_PART_ONE = 2022

_Cell = tuple[int, int]


@dataclass(frozen=True)
class Shape:
    """A rock shape given by its cells relative to its bottom-left corner."""

    cells: frozenset[_Cell]

    @classmethod
    def from_picture(cls, picture: str) -> Shape:
        """Build a shape from rows of '#' and '.', the top row first."""
        rows = picture.split("\n")[::-1]
        return cls(
            frozenset(
                (x, y)
                for y, row in enumerate(rows)
                for x, char in enumerate(row)
                if char == "#"
            )
        )

    @property
    def height(self) -> int:
        return max(y for _, y in self.cells) + 1

    def at(self, x: int, y: int) -> Iterator[_Cell]:
        """Yield the absolute cells of the shape with its bottom-left corner at (x, y)."""
        return ((x + dx, y + dy) for dx, dy in self.cells)


SHAPES: tuple[Shape, ...] = (
    Shape.from_picture("####"),
    Shape.from_picture(".#.\n###\n.#."),
    Shape.from_picture("..#\n..#\n###"),
    Shape.from_picture("#\n#\n#\n#"),
    Shape.from_picture("##\n##"),
)


def _fits(shape: Shape, x: int, y: int, rocks: set[_Cell]) -> bool:
    return all(
        0 <= cx < CHAMBER_WIDTH and 0 <= cy < CHAMBER_HEIGHT and (cx, cy) not in rocks
        for cx, cy in shape.at(x, y)
    )


def simulate(jet_pattern: str, total_rocks: int) -> int:
    """Drop total_rocks rocks and return the height of the resulting tower.

    A '>' in the jet pattern pushes right; any other character pushes left.
    """
    if not jet_pattern:
        raise ValueError("the jet pattern is empty")
    jets = cycle(jet_pattern)
    rocks: set[_Cell] = set()
    height = 0
    for rock in range(total_rocks):
        shape = SHAPES[rock % len(SHAPES)]
        x, y = 2, height + 3
        if y + shape.height > CHAMBER_HEIGHT:
            raise ValueError(f"the tower does not fit in a chamber {CHAMBER_HEIGHT} high")
        while True:
            shift = 1 if next(jets) == ">" else -1
            if _fits(shape, x + shift, y, rocks):
                x += shift
            if not _fits(shape, x, y - 1, rocks):
                break
            y -= 1
        rocks.update(shape.at(x, y))
        height = max(height, y + shape.height)
    return height


@dataclass
class Day:
    jet_pattern: str

    @classmethod
    def from_input(cls, text: str) -> Day:
        return cls(text)

    def solve_part_one(self) -> str:
        return str(simulate(self.jet_pattern, TOTAL_ROCKS_PART_ONE))

    def solve_part_two(self) -> str:
        return ""