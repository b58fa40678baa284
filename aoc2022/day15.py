"""Beacon exclusion zone: sensors, their closest beacons and covered rows."""

from __future__ import annotations

import re
from dataclasses import dataclass

MAX_Y = 4_000_000

_SENSOR_RE = re.compile(
    r"Sensor at x=(|-?\d+), y=(|-?\d+): closest beacon is at x=(|-?\d+), y=(|-?\d+)"
)


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def manhattan_distance(self, other: Position) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def tuning_frequency(self) -> int:
        return self.x * MAX_Y + self.y


@dataclass(frozen=True)
class Sensor:
    position: Position
    closest_beacon: Position


@dataclass(frozen=True)
class Interval:
    start: int
    end: int


def _parse_signed_int(text: str, name: str) -> int:
    if not text:
        raise ValueError(f"could not parse {name}: empty integer")
    return int(text)


def _parse_position(x_text: str, y_text: str) -> Position:
    return Position(_parse_signed_int(x_text, "x"), _parse_signed_int(y_text, "y"))


def parse_sensor(line: str) -> Sensor:
    """Parse a line such as 'Sensor at x=2, y=18: closest beacon is at x=-2, y=15'."""
    match = _SENSOR_RE.fullmatch(line)
    if match is None:
        raise ValueError(f"invalid sensor format: {line}")
    sx, sy, bx, by = match.groups()
    return Sensor(_parse_position(sx, sy), _parse_position(bx, by))


def no_beacon_interval(sensor: Sensor, y: int) -> Interval | None:
    """Return the span of row y a sensor rules out, or None if it does not reach it."""
    distance = sensor.position.manhattan_distance(sensor.closest_beacon)
    reach = distance - abs(y - sensor.position.y)
    if reach < 0:
        return None
    return Interval(sensor.position.x - reach, sensor.position.x + reach)


@dataclass
class Day:
    sensors: list[Sensor]
    max_y: int = MAX_Y

    @classmethod
    def from_input(cls, text: str) -> Day:
        return cls([parse_sensor(line) for line in text.split("\n")])

    def no_beacon_intervals(self, y: int) -> list[Interval]:
        """Return the sorted, merged spans of row y where no beacon can be."""
        intervals = sorted(
            (
                interval
                for sensor in self.sensors
                if (interval := no_beacon_interval(sensor, y)) is not None
            ),
            key=lambda interval: interval.start,
        )
        union: list[Interval] = []
        for interval in intervals:
            if union and union[-1].end + 1 >= interval.start:
                last = union[-1]
                union[-1] = Interval(last.start, max(last.end, interval.end))
            else:
                union.append(interval)
        return union

    def _no_beacon_count(self, interval: Interval, y: int) -> int:
        beacons = {
            sensor.closest_beacon
            for sensor in self.sensors
            if sensor.closest_beacon.y == y
            and interval.start <= sensor.closest_beacon.x <= interval.end
        }
        return interval.end - interval.start + 1 - len(beacons)

    def distress_beacon(self) -> Position:
        """Find the single uncovered position with 0 <= y <= max_y."""
        for y in range(self.max_y + 1):
            intervals = self.no_beacon_intervals(y)
            if len(intervals) == 2:
                first, second = intervals
                if first.end + 2 != second.start:
                    raise ValueError("more than one position for distress beacon")
                return Position(first.end + 1, y)
        raise ValueError("no possible position found for distress beacon")

    def solve_part_one(self) -> str:
        y = self.max_y // 2
        intervals = self.no_beacon_intervals(y)
        if not intervals:
            raise ValueError(f"no sensor covers row {y}")
        return str(self._no_beacon_count(intervals[0], y))

    def solve_part_two(self) -> str:
        return str(self.distress_beacon().tuning_frequency())