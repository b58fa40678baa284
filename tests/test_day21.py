import pytest

from aoc2022.day21 import (
    Day,
    Monkey,
    Operation,
    parse_monkey,
    yell,
    yell_with_target,
)

EXAMPLE = "\n".join(
    [
        "root: pppw + sjmn",
        "dbpl: 5",
        "cczh: sllz + lgvd",
        "zczc: 2",
        "ptdq: humn - dvpt",
        "dvpt: 3",
        "lfqf: 4",
        "humn: 5",
        "ljgn: 2",
        "sjmn: drzm * dbpl",
        "sllz: 4",
        "pppw: cczh / lfqf",
        "lgvd: ljgn * ptdq",
        "drzm: hmdt - zczc",
        "hmdt: 32",
    ]
)


def test_from_input():
    expected = {
        "root": Monkey("root", operation=Operation("pppw", "+", "sjmn")),
        "dbpl": Monkey("dbpl", number=5),
        "cczh": Monkey("cczh", operation=Operation("sllz", "+", "lgvd")),
        "zczc": Monkey("zczc", number=2),
        "ptdq": Monkey("ptdq", operation=Operation("humn", "-", "dvpt")),
        "dvpt": Monkey("dvpt", number=3),
        "lfqf": Monkey("lfqf", number=4),
        "humn": Monkey("humn", number=5),
        "ljgn": Monkey("ljgn", number=2),
        "sjmn": Monkey("sjmn", operation=Operation("drzm", "*", "dbpl")),
        "sllz": Monkey("sllz", number=4),
        "pppw": Monkey("pppw", operation=Operation("cczh", "/", "lfqf")),
        "lgvd": Monkey("lgvd", operation=Operation("ljgn", "*", "ptdq")),
        "drzm": Monkey("drzm", operation=Operation("hmdt", "-", "zczc")),
        "hmdt": Monkey("hmdt", number=32),
    }
    assert Day.from_input(EXAMPLE) == Day(expected)


def test_solve_part_one():
    assert Day.from_input(EXAMPLE).solve_part_one() == "152"


def test_solve_part_two():
    assert Day.from_input(EXAMPLE).solve_part_two() == "301"


def test_solve_part_two_leaves_monkeys_untouched():
    day = Day.from_input(EXAMPLE)
    day.solve_part_two()
    assert day.monkeys["humn"] == Monkey("humn", number=5)
    assert day.solve_part_one() == "152"


def test_yell_division_rounds_towards_zero():
    monkeys = {
        "a": Monkey("a", operation=Operation("b", "/", "c")),
        "b": Monkey("b", number=-7),
        "c": Monkey("c", number=2),
    }
    assert yell("a", monkeys) == -3


def test_yell_missing_monkey():
    with pytest.raises(KeyError):
        yell("zzzz", {})


def test_yell_invalid_operator():
    monkeys = {
        "a": Monkey("a", operation=Operation("b", "%", "c")),
        "b": Monkey("b", number=7),
        "c": Monkey("c", number=2),
    }
    with pytest.raises(ValueError, match="invalid operator"):
        yell("a", monkeys)


def test_yell_with_target():
    monkeys = Day.from_input(EXAMPLE).monkeys
    del monkeys["humn"]
    assert yell_with_target("pppw", monkeys, 150) == 301


def test_parse_monkey_number():
    assert parse_monkey("abcd: 42") == Monkey("abcd", number=42)


def test_parse_monkey_operation():
    assert parse_monkey("abcd: efgh * ijkl") == Monkey(
        "abcd", operation=Operation("efgh", "*", "ijkl")
    )


@pytest.mark.parametrize("line", ["root pppw + sjmn", "a: b: c", "abcd: 1x", "abcd: ??"])
def test_parse_monkey_invalid(line):
    with pytest.raises(ValueError):
        parse_monkey(line)