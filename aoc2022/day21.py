"""Monkey math: monkeys yelling numbers or the results of operations."""

from __future__ import annotations

import re
from dataclasses import dataclass

ROOT_MONKEY_NAME = "root"
HUMAN_NAME = "humn"

_OPERATION_RE = re.compile(r"(\w+) (.) (\w+)", re.ASCII)
_NUMBER_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Operation:
    left: str
    operator: str
    right: str


@dataclass(frozen=True)
class Monkey:
    name: str
    number: int = 0
    operation: Operation | None = None


def _truncating_div(a: int, b: int) -> int:
    """Integer division that rounds towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _apply(operator: str, left: int, right: int) -> int:
    match operator:
        case "+":
            return left + right
        case "-":
            return left - right
        case "*":
            return left * right
        case "/":
            return _truncating_div(left, right)
    raise ValueError(f"invalid operator: {operator}")


def parse_monkey(line: str) -> Monkey:
    """Parse a line such as 'root: pppw + sjmn' or 'dbpl: 5'."""
    parts = line.split(":")
    if len(parts) != 2:
        raise ValueError(f"invalid line format: {line}")
    name, job = parts[0], parts[1][1:]
    if not job:
        raise ValueError(f"invalid line format: {line}")

    if job[0].isascii() and job[0].isdigit():
        if not _NUMBER_RE.fullmatch(job):
            raise ValueError(f"invalid number format: {job}")
        return Monkey(name=name, number=int(job))

    match = _OPERATION_RE.search(job)
    if match is None:
        raise ValueError(f"invalid operation format: {job}")
    left, operator, right = match.groups()
    return Monkey(name=name, operation=Operation(left, operator, right))


def _find(name: str, monkeys: dict[str, Monkey]) -> Monkey:
    try:
        return monkeys[name]
    except KeyError:
        raise KeyError(f"could not find monkey with name {name}") from None


def yell(name: str, monkeys: dict[str, Monkey]) -> int:
    """Return the number the named monkey yells.

    Raises KeyError if some monkey it depends on is missing.
    """
    monkey = _find(name, monkeys)
    operation = monkey.operation
    if operation is None:
        return monkey.number
    left = yell(operation.left, monkeys)
    right = yell(operation.right, monkeys)
    return _apply(operation.operator, left, right)


def yell_with_target(name: str, monkeys: dict[str, Monkey], target: int) -> int:
    """Return the number the human must yell for the named monkey to yell target."""
    if name == HUMAN_NAME:
        return target

    monkey = _find(name, monkeys)
    operation = monkey.operation
    if operation is None:
        raise ValueError(f"monkey {name} yells a number, not an operation")

    try:
        number = yell(operation.left, monkeys)
    except KeyError:
        # The human is on the left branch, so the right one can be evaluated.
        number = yell(operation.right, monkeys)
        match operation.operator:
            case "+":
                new_target = target - number
            case "-":
                new_target = target + number
            case "*":
                new_target = _truncating_div(target, number)
            case "/":
                new_target = target * number
            case _:
                raise ValueError(f"invalid operator: {operation.operator}") from None
        return yell_with_target(operation.left, monkeys, new_target)

    match operation.operator:
        case "+":
            new_target = target - number
        case "-":
            new_target = number - target
        case "*":
            new_target = _truncating_div(target, number)
        case "/":
            new_target = _truncating_div(number, target)
        case _:
            raise ValueError(f"invalid operator: {operation.operator}")
    return yell_with_target(operation.right, monkeys, new_target)


@dataclass
class Day:
    monkeys: dict[str, Monkey]

    @classmethod
    def from_input(cls, text: str) -> Day:
        monkeys = (parse_monkey(line) for line in text.split("\n"))
        return cls({monkey.name: monkey for monkey in monkeys})

    def solve_part_one(self) -> str:
        return str(yell(ROOT_MONKEY_NAME, self.monkeys))

    def solve_part_two(self) -> str:
        monkeys = {
            name: monkey for name, monkey in self.monkeys.items() if name != HUMAN_NAME
        }
        root = _find(ROOT_MONKEY_NAME, monkeys)
        operation = root.operation
        if operation is None:
            raise ValueError("the root monkey yells a number, not an operation")
        try:
            target = yell(operation.left, monkeys)
            name = operation.right
        except KeyError:
            name = operation.left
            target = yell(operation.right, monkeys)
        return str(yell_with_target(name, monkeys, target))