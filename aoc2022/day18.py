"""Boiling boulders: surface area of a lava droplet made of unit cubes."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

_CUBE_RE = re.compile(r"(\d+),(\d+),(\d+)")


@dataclass(frozen=True)
class Cube:
    x: int
    y: int
    z: int

    def adjacent(self) -> list[Cube]:
        """Return the six cubes that share a face with this one."""
        x, y, z = self.x, self.y, self.z
        return [
            Cube(x - 1, y, z),
            Cube(x + 1, y, z),
            Cube(x, y - 1, z),
            Cube(x, y + 1, z),
            Cube(x, y, z - 1),
            Cube(x, y, z + 1),
        ]


@dataclass(frozen=True)
class _BoundingBox:
    low: Cube
    high: Cube

    @classmethod
    def around(cls, cubes: Iterable[Cube]) -> _BoundingBox:
        """Return the box enclosing the cubes with one cube of margin on every side."""
        cubes = list(cubes)
        return cls(
            Cube(
                min(c.x for c in cubes) - 1,
                min(c.y for c in cubes) - 1,
                min(c.z for c in cubes) - 1,
            ),
            Cube(
                max(c.x for c in cubes) + 1,
                max(c.y for c in cubes) + 1,
                max(c.z for c in cubes) + 1,
            ),
        )

    def __contains__(self, cube: object) -> bool:
        return (
            isinstance(cube, Cube)
            and self.low.x <= cube.x <= self.high.x
            and self.low.y <= cube.y <= self.high.y
            and self.low.z <= cube.z <= self.high.z
        )


def parse_cube(line: str) -> Cube:
    """Parse a line such as '1,22,333'."""
    match = _CUBE_RE.fullmatch(line)
    if match is None:
        raise ValueError(f"invalid cube format: {line}")
    x, y, z = (int(value) for value in match.groups())
    return Cube(x, y, z)


class LavaDroplet:
    """A set of cubes together with the running count of their exposed faces."""

    def __init__(self, cubes: Iterable[Cube] = ()) -> None:
        self.surface = 0
        self.cubes: set[Cube] = set()
        for cube in cubes:
            self.add(cube)

    def _adjacent_count(self, cube: Cube) -> int:
        return sum(neighbour in self.cubes for neighbour in cube.adjacent())

    def add(self, cube: Cube) -> None:
        """Add a cube; each face it shares with the droplet hides two faces."""
        self.surface += 6 - 2 * self._adjacent_count(cube)
        self.cubes.add(cube)

    def exterior_surface(self) -> int:
        """Count the faces that steam flowing around the droplet can reach."""
        if not self.cubes:
            raise ValueError("the droplet holds no cubes")
        box = _BoundingBox.around(self.cubes)
        visited = {box.low}
        queue = deque([box.low])
        surface = 0
        while queue:
            current = queue.popleft()
            for neighbour in current.adjacent():
                if neighbour in self.cubes:
                    surface += 1
                elif neighbour in box and neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return surface


@dataclass
class Day:
    cubes: list[Cube]

    @classmethod
    def from_input(cls, text: str) -> Day:
        return cls([parse_cube(line) for line in text.split("\n")])

    def solve_part_one(self) -> str:
        return str(LavaDroplet(self.cubes).surface)

    def solve_part_two(self) -> str:
        return str(LavaDroplet(self.cubes).exterior_surface())