"""Grove positioning system: mixing a circular list of numbers."""

from __future__ import annotations

import re
from dataclasses import dataclass

DECRYPTION_KEY = 811589153
_NUMBER_RE = re.compile(r"[+-]?\d+")


def mix(numbers: list[int], rounds: int = 1) -> list[int]:
    """Move every number by its value around the circle, in original order, rounds times."""
    size = len(numbers)
    if size <= 1:
        return list(numbers)
    original = list(enumerate(numbers))
    items = list(original)
    for _ in range(rounds):
        for entry in original:
            index = items.index(entry)
            items.pop(index)
            items.insert((index + entry[1]) % (size - 1), entry)
    return [value for _, value in items]


def groove_coordinates(numbers: list[int]) -> int:
    """Sum the numbers 1000, 2000 and 3000 places after the zero, wrapping around."""
    try:
        zero = numbers.index(0)
    except ValueError:
        raise ValueError("the file holds no zero") from None
    size = len(numbers)
    return sum(numbers[(zero + offset) % size] for offset in (1000, 2000, 3000))


def _parse_number(line: str) -> int:
    if not _NUMBER_RE.fullmatch(line):
        raise ValueError(f"could not parse number {line}")
    return int(line)


@dataclass
class Day:
    encrypted_file: list[int]

    @classmethod
    def from_input(cls, text: str) -> Day:
        return cls([_parse_number(line) for line in text.split("\n")])

    def solve_part_one(self) -> str:
        return str(groove_coordinates(mix(self.encrypted_file)))

    def solve_part_two(self) -> str:
        decrypted = [number * DECRYPTION_KEY for number in self.encrypted_file]
        return str(groove_coordinates(mix(decrypted, 10)))