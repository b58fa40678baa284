"""Interactive replay of one geode-cracking blueprint, minute by minute."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

from aoc2022.day19 import Action, Blueprint, RobotCost

TOTAL_MINUTES = 24

DEFAULT_BLUEPRINT = Blueprint(
    id=2,
    ore_robot_cost=RobotCost(ore=2),
    clay_robot_cost=RobotCost(ore=3),
    obsidian_robot_cost=RobotCost(ore=3, clay=8),
    geode_robot_cost=RobotCost(ore=3, obsidian=12),
)


class Robot(Enum):
    """A choice typed by the player: the robot to build, or none."""

    ORE = "o"
    CLAY = "c"
    OBSIDIAN = "b"
    GEODE = "g"
    NONE = "n"


_ACTIONS = {
    Robot.ORE: Action.ORE_ROBOT,
    Robot.CLAY: Action.CLAY_ROBOT,
    Robot.OBSIDIAN: Action.OBSIDIAN_ROBOT,
    Robot.GEODE: Action.GEODE_ROBOT,
}


@dataclass
class Inventory:
    """Resources and robots held while playing through a blueprint."""

    blueprint: Blueprint = field(default=DEFAULT_BLUEPRINT)
    ore: int = 0
    clay: int = 0
    obsidian: int = 0
    geodes: int = 0
    ore_robots: int = 1
    clay_robots: int = 0
    obsidian_robots: int = 0
    geode_robots: int = 0

    def can_afford(self, cost: RobotCost) -> bool:
        return (
            self.ore >= cost.ore
            and self.clay >= cost.clay
            and self.obsidian >= cost.obsidian
        )

    def pay(self, cost: RobotCost) -> None:
        self.ore -= cost.ore
        self.clay -= cost.clay
        self.obsidian -= cost.obsidian


def build_robot(inventory: Inventory, stream: TextIO) -> Robot:
    """Ask for a robot until an affordable one (or none) is chosen, paying for it.

    Each answer is one character followed by one separator character.
    Raises EOFError when the stream runs out.
    """
    while True:
        print("Which robot do you want to build?")
        char = stream.read(1)
        if not char:
            raise EOFError("no more input")
        stream.read(1)

        try:
            robot = Robot(char)
        except ValueError:
            print(f"This robot is unknown: {char}")
        else:
            if robot is Robot.NONE:
                return robot
            cost = inventory.blueprint.cost(_ACTIONS[robot])
            if inventory.can_afford(cost):
                inventory.pay(cost)
                return robot
        print("Not enough resources to build the robot, choose another action")


def collect_resources(inventory: Inventory) -> None:
    """Let every robot collect one unit of its resource and report the totals."""
    inventory.ore += inventory.ore_robots
    print(
        f"{inventory.ore_robots} ore-collecting robots collect {inventory.ore_robots} ore; "
        f"you now have {inventory.ore} ore."
    )

    inventory.clay += inventory.clay_robots
    print(
        f"{inventory.clay_robots} clay-collecting robots collect {inventory.clay_robots} clay; "
        f"you now have {inventory.clay} clay."
    )

    inventory.obsidian += inventory.obsidian_robots
    print(
        f"{inventory.obsidian_robots} obsidian-collecting robots collect "
        f"{inventory.obsidian_robots} obsidian; you now have {inventory.obsidian} obsidian."
    )

    inventory.geodes += inventory.geode_robots
    print(
        f"{inventory.geode_robots} geode-cracking robots collect {inventory.geode_robots} geodes; "
        f"you now have {inventory.geodes} geodes."
    )


def add_robot(inventory: Inventory, robot: Robot) -> None:
    """Put a freshly built robot to work."""
    match robot:
        case Robot.ORE:
            inventory.ore_robots += 1
            print(f"The new ore-robot is ready; you now have {inventory.ore_robots} of them.")
        case Robot.CLAY:
            inventory.clay_robots += 1
            print(f"The new clay-robot is ready; you now have {inventory.clay_robots} of them.")
        case Robot.OBSIDIAN:
            inventory.obsidian_robots += 1
            print(
                "The new obsidian-robot is ready; "
                f"you now have {inventory.obsidian_robots} of them."
            )
        case Robot.GEODE:
            inventory.geode_robots += 1
            print(f"The new geode-robot is ready; you now have {inventory.geode_robots} of them.")


def main(argv: list[str] | None = None) -> int:
    """Play the default blueprint for 24 minutes reading choices from standard input."""
    parser = argparse.ArgumentParser(
        description="Choose which robot to build each minute and count the geodes cracked."
    )
    parser.parse_args(argv)

    inventory = Inventory()
    for minute in range(1, TOTAL_MINUTES + 1):
        print(f"\n== Minute {minute} ==")
        robot = build_robot(inventory, sys.stdin)
        collect_resources(inventory)
        add_robot(inventory, robot)
    print(f"You ended up with {inventory.geodes} geodes")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())