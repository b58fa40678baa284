"""Not enough minerals: choosing which robots to build to crack the most geodes."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

TOTAL_MINUTES_PART_ONE = 24
TOTAL_MINUTES_PART_TWO = 32

_BLUEPRINT_RE = re.compile(
    r"Blueprint (\d+): Each ore robot costs (\d+) ore\. "
    r"Each clay robot costs (\d+) ore\. "
    r"Each obsidian robot costs (\d+) ore and (\d+) clay\. "
    r"Each geode robot costs (\d+) ore and (\d+) obsidian\."
)


@dataclass(frozen=True)
class RobotCost:
    ore: int = 0
    clay: int = 0
    obsidian: int = 0


class Action(Enum):
    ORE_ROBOT = "oreRobot"
    CLAY_ROBOT = "clayRobot"
    OBSIDIAN_ROBOT = "obsidianRobot"
    GEODE_ROBOT = "geodeRobot"


# Most valuable robots first, so good answers are found early and prune more.
_SEARCH_ORDER = (
    Action.GEODE_ROBOT,
    Action.OBSIDIAN_ROBOT,
    Action.CLAY_ROBOT,
    Action.ORE_ROBOT,
)


@dataclass(frozen=True)
class Blueprint:
    id: int
    ore_robot_cost: RobotCost
    clay_robot_cost: RobotCost
    obsidian_robot_cost: RobotCost
    geode_robot_cost: RobotCost

    def quality_level(self, geodes: int) -> int:
        return self.id * geodes

    def cost(self, action: Action) -> RobotCost:
        return {
            Action.ORE_ROBOT: self.ore_robot_cost,
            Action.CLAY_ROBOT: self.clay_robot_cost,
            Action.OBSIDIAN_ROBOT: self.obsidian_robot_cost,
            Action.GEODE_ROBOT: self.geode_robot_cost,
        }[action]

    def robot_caps(self) -> dict[Action, float]:
        """More robots of a kind than any robot can spend per minute are wasted."""
        return {
            Action.ORE_ROBOT: max(
                self.ore_robot_cost.ore,
                self.clay_robot_cost.ore,
                self.obsidian_robot_cost.ore,
                self.geode_robot_cost.ore,
            ),
            Action.CLAY_ROBOT: self.obsidian_robot_cost.clay,
            Action.OBSIDIAN_ROBOT: self.geode_robot_cost.obsidian,
            Action.GEODE_ROBOT: math.inf,
        }


@dataclass(frozen=True, slots=True)
class State:
    minutes_left: int
    ore: int = 0
    clay: int = 0
    obsidian: int = 0
    geodes: int = 0
    ore_robots: int = 1
    clay_robots: int = 0
    obsidian_robots: int = 0
    geode_robots: int = 0

    def robots(self, action: Action) -> int:
        return {
            Action.ORE_ROBOT: self.ore_robots,
            Action.CLAY_ROBOT: self.clay_robots,
            Action.OBSIDIAN_ROBOT: self.obsidian_robots,
            Action.GEODE_ROBOT: self.geode_robots,
        }[action]

    def final_geodes(self) -> int:
        """Geodes at the end if no further robot is built."""
        return self.geodes + self.geode_robots * self.minutes_left

    def geode_bound(self) -> int:
        """Geodes at the end if a geode robot were built every remaining minute."""
        t = self.minutes_left
        return self.final_geodes() + t * (t - 1) // 2

    def after_building(self, action: Action, blueprint: Blueprint) -> State | None:
        """Wait until the robot is affordable, build it, and return the state after.

        Returns None if the robot cannot be ready before time runs out.
        """
        cost = blueprint.cost(action)
        wait = 0
        for need, have, rate in (
            (cost.ore, self.ore, self.ore_robots),
            (cost.clay, self.clay, self.clay_robots),
            (cost.obsidian, self.obsidian, self.obsidian_robots),
        ):
            if need > have:
                if rate == 0:
                    return None
                wait = max(wait, -(-(need - have) // rate))
        elapsed = wait + 1
        if elapsed >= self.minutes_left:
            return None
        return State(
            minutes_left=self.minutes_left - elapsed,
            ore=self.ore + self.ore_robots * elapsed - cost.ore,
            clay=self.clay + self.clay_robots * elapsed - cost.clay,
            obsidian=self.obsidian + self.obsidian_robots * elapsed - cost.obsidian,
            geodes=self.geodes + self.geode_robots * elapsed,
            ore_robots=self.ore_robots + (action is Action.ORE_ROBOT),
            clay_robots=self.clay_robots + (action is Action.CLAY_ROBOT),
            obsidian_robots=self.obsidian_robots + (action is Action.OBSIDIAN_ROBOT),
            geode_robots=self.geode_robots + (action is Action.GEODE_ROBOT),
        )


def parse_blueprint(line: str) -> Blueprint:
    """Parse a line such as 'Blueprint 1: Each ore robot costs 4 ore. ...'."""
    match = _BLUEPRINT_RE.fullmatch(line)
    if match is None:
        raise ValueError(f"invalid blueprint format: {line}")
    ident, ore_ore, clay_ore, obsidian_ore, obsidian_clay, geode_ore, geode_obsidian = (
        int(value) for value in match.groups()
    )
    return Blueprint(
        id=ident,
        ore_robot_cost=RobotCost(ore=ore_ore),
        clay_robot_cost=RobotCost(ore=clay_ore),
        obsidian_robot_cost=RobotCost(ore=obsidian_ore, clay=obsidian_clay),
        geode_robot_cost=RobotCost(ore=geode_ore, obsidian=geode_obsidian),
    )


def max_geodes(blueprint: Blueprint, total_minutes: int) -> int:
    """Return the most geodes one ore robot can lead to in total_minutes."""
    caps = blueprint.robot_caps()
    best = 0

    def explore(state: State) -> None:
        nonlocal best
        best = max(best, state.final_geodes())
        if state.geode_bound() <= best:
            return
        for action in _SEARCH_ORDER:
            if state.robots(action) >= caps[action]:
                continue
            following = state.after_building(action, blueprint)
            if following is not None:
                explore(following)

    explore(State(minutes_left=max(total_minutes, 0)))
    return best


@dataclass
class Day:
    blueprints: list[Blueprint]

    @classmethod
    def from_input(cls, text: str) -> Day:
        return cls([parse_blueprint(line) for line in text.split("\n")])

    def solve_part_one(self) -> str:
        return str(
            sum(
                blueprint.quality_level(max_geodes(blueprint, TOTAL_MINUTES_PART_ONE))
                for blueprint in self.blueprints
            )
        )

    def solve_part_two(self) -> str:
        if len(self.blueprints) < 3:
            raise ValueError("part two needs at least three blueprints")
        return str(
            math.prod(
                max_geodes(blueprint, TOTAL_MINUTES_PART_TWO)
                for blueprint in self.blueprints[:3]
            )
        )