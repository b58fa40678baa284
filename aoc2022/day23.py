"""Unstable diffusion: elves spreading out over a grove."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

_Position = tuple[int, int]

_NEIGHBOURS = [
    (di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)
]


class Direction(Enum):
    NORTH = "N"
    SOUTH = "S"
    WEST = "W"
    EAST = "E"

    def move(self, position: _Position) -> _Position:
        """Return the position one step in this direction."""
        di, dj = _DELTAS[self]
        return position[0] + di, position[1] + dj

    def adjacent_positions(self, position: _Position) -> list[_Position]:
        """Return the three positions on this side of the given position."""
        i, j = position
        di, dj = _DELTAS[self]
        if di:
            return [(i + di, j + k) for k in (-1, 0, 1)]
        return [(i + k, j + dj) for k in (-1, 0, 1)]


_DELTAS = {
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
    Direction.EAST: (0, 1),
}


def parse_elves(lines: Iterable[str]) -> list[_Position]:
    """Return the (row, column) of every '#' in the lines."""
    return [
        (i, j)
        for i, line in enumerate(lines)
        for j, char in enumerate(line)
        if char == "#"
    ]


class Grove:
    """The elves' positions and the order in which they consider directions."""

    def __init__(self, elves: Iterable[_Position]) -> None:
        self.elves: set[_Position] = set(elves)
        self.directions: deque[Direction] = deque(
            [Direction.NORTH, Direction.SOUTH, Direction.WEST, Direction.EAST]
        )

    def _propose(self, elf: _Position) -> _Position | None:
        i, j = elf
        if not any((i + di, j + dj) in self.elves for di, dj in _NEIGHBOURS):
            return None
        for direction in self.directions:
            if not any(p in self.elves for p in direction.adjacent_positions(elf)):
                return direction.move(elf)
        return None

    def execute_round(self) -> int:
        """Run one round and return how many elves moved."""
        proposals: defaultdict[_Position, list[_Position]] = defaultdict(list)
        for elf in self.elves:
            target = self._propose(elf)
            if target is not None:
                proposals[target].append(elf)

        moves = 0
        for target, candidates in proposals.items():
            if len(candidates) == 1:
                self.elves.remove(candidates[0])
                self.elves.add(target)
                moves += 1

        self.directions.rotate(-1)
        return moves

    def empty_ground_tiles(self) -> int:
        """Count the empty tiles in the smallest rectangle holding every elf."""
        if not self.elves:
            raise ValueError("the grove holds no elves")
        rows = [i for i, _ in self.elves]
        columns = [j for _, j in self.elves]
        area = (max(rows) - min(rows) + 1) * (max(columns) - min(columns) + 1)
        return area - len(self.elves)


@dataclass
class Day:
    elves: list[_Position]

    @classmethod
    def from_input(cls, text: str) -> Day:
        return cls(parse_elves(text.split("\n")))

    def solve_part_one(self) -> str:
        grove = Grove(self.elves)
        for _ in range(10):
            grove.execute_round()
        return str(grove.empty_ground_tiles())

    def solve_part_two(self) -> str:
        grove = Grove(self.elves)
        rounds = 1
        while grove.execute_round() > 0:
            rounds += 1
        return str(rounds)