import pytest

from aoc2022.day19 import (
    Action,
    Blueprint,
    Day,
    RobotCost,
    State,
    max_geodes,
    parse_blueprint,
)

BLUEPRINT_1 = Blueprint(
    id=1,
    ore_robot_cost=RobotCost(ore=4),
    clay_robot_cost=RobotCost(ore=2),
    obsidian_robot_cost=RobotCost(ore=3, clay=14),
    geode_robot_cost=RobotCost(ore=2, obsidian=7),
)
BLUEPRINT_2 = Blueprint(
    id=2,
    ore_robot_cost=RobotCost(ore=2),
    clay_robot_cost=RobotCost(ore=3),
    obsidian_robot_cost=RobotCost(ore=3, clay=8),
    geode_robot_cost=RobotCost(ore=3, obsidian=12),
)
BLUEPRINT_3 = Blueprint(
    id=3,
    ore_robot_cost=RobotCost(ore=4),
    clay_robot_cost=RobotCost(ore=2),
    obsidian_robot_cost=RobotCost(ore=3, clay=14),
    geode_robot_cost=RobotCost(ore=2, obsidian=7),
)

INPUT = (
    "Blueprint 1: Each ore robot costs 4 ore. Each clay robot costs 2 ore. "
    "Each obsidian robot costs 3 ore and 14 clay. Each geode robot costs 2 ore and 7 obsidian.\n"
    "Blueprint 2: Each ore robot costs 2 ore. Each clay robot costs 3 ore. "
    "Each obsidian robot costs 3 ore and 8 clay. Each geode robot costs 3 ore and 12 obsidian."
)


def test_new_day():
    assert Day.from_input(INPUT) == Day(blueprints=[BLUEPRINT_1, BLUEPRINT_2])


def test_solve_part_one():
    assert Day(blueprints=[BLUEPRINT_1, BLUEPRINT_2]).solve_part_one() == "33"


def test_solve_part_two():
    day = Day(blueprints=[BLUEPRINT_1, BLUEPRINT_2, BLUEPRINT_3])
    assert day.solve_part_two() == "194432"


def test_part_two_needs_three_blueprints():
    with pytest.raises(ValueError):
        Day(blueprints=[BLUEPRINT_1, BLUEPRINT_2]).solve_part_two()


@pytest.mark.parametrize(
    ("blueprint", "expected"), [(BLUEPRINT_1, 9), (BLUEPRINT_2, 12)]
)
def test_max_geodes_in_24_minutes(blueprint, expected):
    assert max_geodes(blueprint, 24) == expected


def test_no_time_means_no_geodes():
    assert max_geodes(BLUEPRINT_1, 0) == 0


def test_quality_level():
    assert BLUEPRINT_2.quality_level(12) == 24


def test_parse_blueprint():
    line = INPUT.split("\n")[1]
    assert parse_blueprint(line) == BLUEPRINT_2


@pytest.mark.parametrize("line", ["", "Blueprint 1: nothing here", "Blueprint x: Each"])
def test_parse_blueprint_rejects_invalid(line):
    with pytest.raises(ValueError):
        parse_blueprint(line)


def test_building_waits_for_resources():
    state = State(minutes_left=24)
    after = state.after_building(Action.CLAY_ROBOT, BLUEPRINT_1)
    assert after == State(minutes_left=21, ore=1, clay_robots=1)


def test_building_impossible_without_producers():
    state = State(minutes_left=24)
    assert state.after_building(Action.GEODE_ROBOT, BLUEPRINT_1) is None


def test_geode_bound_covers_final_geodes():
    state = State(minutes_left=5, geodes=2, geode_robots=1)
    assert state.final_geodes() == 7
    assert state.geode_bound() == 17