# aoc2022

This package solves the 2022 Advent of Code puzzles for days 15 to 23. It also
includes a small interactive simulator for the day 19 robot factory. It uses
only the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Solving your puzzles

Put each day's puzzle input in a directory laid out as `dayNN/dayNN.txt`,
for example `day15/day15.txt` and `day16/day16.txt`. Then run:

```
aoc2022 [DIRECTORY]
```

`DIRECTORY` defaults to the current directory. The days are solved in turn,
and both answers are printed for each day:

```
Running day 15
Part One: ...
Part Two: ...
```

Day 19 is listed but skipped, because its search takes several minutes. It
prints `[DISABLED] It takes ~5min to run` instead of answers.

One trailing newline is removed from each input file before parsing. The run
stops at the first failure and exits with status 1. This happens for a
missing file, malformed input, or a part that cannot be solved. The message
is printed on standard error.

## Using the solvers from Python

Each day module has a `Day` class. Build it from the raw puzzle text with
`Day.from_input`, then call `solve_part_one()` and `solve_part_two()`. Both
return the answer as a string.

```python
from aoc2022.day18 import Day

day = Day.from_input("1,1,1\n2,1,1")
print(day.solve_part_one())  # "10"
print(day.solve_part_two())  # "10"
```

Lines that do not match the puzzle format raise `ValueError`.

| Module  | Puzzle                    | Useful pieces besides `Day` |
|---------|---------------------------|-----------------------------|
| `day15` | Beacon exclusion zone     | `parse_sensor`, `no_beacon_interval`, `Day.no_beacon_intervals`, `Day.distress_beacon`; `Day.max_y` sets the search limit (default 4,000,000) |
| `day16` | Valves and tunnels        | `parse_valve`, `Valve` |
| `day17` | Falling rocks             | `simulate(jet_pattern, total_rocks)` returns the tower height |
| `day18` | Lava droplet surface      | `parse_cube`, `Cube`, `LavaDroplet` (`surface`, `exterior_surface()`) |
| `day19` | Robot blueprints          | `parse_blueprint`, `max_geodes(blueprint, total_minutes)` |
| `day20` | Grove positioning mixing  | `mix(numbers, rounds)`, `groove_coordinates(numbers)` |
| `day21` | Monkey math               | `parse_monkey`, `yell`, `yell_with_target` |
| `day22` | Monkey map                | `parse_board`, `parse_path`, `starting_position`, `Step.execute` |
| `day23` | Unstable diffusion        | `parse_elves`, `Grove` (`execute_round()`, `empty_ground_tiles()`) |

Day 19 part two uses the first three blueprints. It raises `ValueError` when
fewer than three blueprints are given.

`aoc2022.helpers` holds a few small utilities:

- `reverse` reverses a list in place.
- `maximum` and `minimum` compare two values.
- `Set` is a set whose `add` and `remove` take any number of values. `remove` ignores absent values. `Set` also has `contains`, `members` and `Set.of(iterable)`.

## The day 19 simulator

```
aoc2022-simulator
```

This plays through 24 minutes of one fixed blueprint, one minute at a time.
In that blueprint, ore robots cost 2 ore and clay robots cost 3 ore. Obsidian
robots cost 3 ore and 8 clay. Geode robots cost 3 ore and 12 obsidian.

Each minute the simulator asks which robot to build. Answer with a single
letter on its own line:

- `o`: ore robot
- `c`: clay robot
- `b`: obsidian robot
- `g`: geode robot
- `n`: no robot

If you cannot afford the robot, or type an unknown letter, it asks again.
The robots then collect their resources, and the new robot is put to work.
When the 24 minutes are over, it prints how many geodes you cracked.

If standard input runs out before the game ends, it stops with `EOFError`.

## What is not included

- There are no solvers for days 1 to 14, 24 or 25.
- Day 16 only parses the valve network. Both parts return an empty answer.
- Day 17 part two and day 22 part two are not solved and return an empty answer. Day 22 part one walks the board as a flat map that wraps around at its edges.
- The `aoc2022` command does not run day 19. Use `aoc2022.day19` from Python instead.