"""Proboscidea volcanium: a network of valves and tunnels."""

from __future__ import annotations

import re
from dataclasses import dataclass

_VALVE_RE = re.compile(
    r"Valve (.+) has flow rate=(\d+); tunnels? leads? to valves? (.+)"
)


@dataclass(frozen=True)
class Valve:
    label: str
    flow_rate: int
    tunnels: tuple[str, ...]


def parse_valve(line: str) -> Valve:
    """Parse a line such as 'Valve AA has flow rate=0; tunnels lead to valves DD, BB'."""
    match = _VALVE_RE.fullmatch(line)
    if match is None:
        raise ValueError(f"invalid valve format: {line}")
    label, flow_rate, tunnels = match.groups()
    return Valve(label, int(flow_rate), tuple(tunnels.split(", ")))


@dataclass
class Day:
    valves: dict[str, Valve]

    @classmethod
    def from_input(cls, text: str) -> Day:
        valves = (parse_valve(line) for line in text.split("\n"))
        return cls({valve.label: valve for valve in valves})

    def solve_part_one(self) -> str:
        return ""

    def solve_part_two(self) -> str:
        return ""