import pytest

from aoc2022.day20 import Day, groove_coordinates, mix

EXAMPLE = [1, 2, -3, 3, -2, 0, 4]


def _from_zero(numbers):
    zero = numbers.index(0)
    return numbers[zero:] + numbers[:zero]


def test_from_input():
    assert Day.from_input("1\n2\n-3\n3\n-2\n0\n4") == Day(encrypted_file=EXAMPLE)


def test_from_input_invalid_number():
    with pytest.raises(ValueError, match="could not parse number"):
        Day.from_input("1\nx\n3")


def test_solve_part_one():
    assert Day(encrypted_file=list(EXAMPLE)).solve_part_one() == "3"


def test_solve_part_two():
    assert Day(encrypted_file=list(EXAMPLE)).solve_part_two() == "1623178306"


def test_mix_one_round():
    mixed = mix(EXAMPLE)
    assert _from_zero(mixed) == _from_zero([1, 2, -3, 4, 0, 3, -2])


def test_mix_keeps_elements():
    mixed = mix(EXAMPLE, 3)
    assert sorted(mixed) == sorted(EXAMPLE)


def test_mix_does_not_change_input():
    numbers = list(EXAMPLE)
    mix(numbers)
    assert numbers == EXAMPLE


def test_groove_coordinates_of_mixed_example():
    assert groove_coordinates([1, 2, -3, 4, 0, 3, -2]) == 3


def test_groove_coordinates_without_zero():
    with pytest.raises(ValueError, match="no zero"):
        groove_coordinates([1, 2, 3])