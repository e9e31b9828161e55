import io

import pytest

from aoc2025 import day03
from aoc2025.parsing import InputError

EXAMPLE = (
    "987654321111111\n"
    "811111111111119\n"
    "234234234234278\n"
    "818181911112111\n"
)


def test_part1_example():
    assert day03.part1(io.StringIO(EXAMPLE)) == 357


def test_part2_example():
    assert day03.part2(io.StringIO(EXAMPLE)) == 3121910778619


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("987654321111111", 98),
        ("811111111111119", 89),
        ("234234234234278", 78),
        ("818181911112111", 92),
        ("19", 19),
        ("91", 91),
    ],
)
def test_max_jolts_part1(line, expected):
    assert day03.max_jolts_part1(line) == expected


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("987654321111111", 987654321111),
        ("811111111111119", 811111111119),
        ("234234234234278", 434234234278),
        ("818181911112111", 888911112111),
        ("123456789123", 123456789123),
    ],
)
def test_max_jolts_part2(line, expected):
    assert day03.max_jolts_part2(line) == expected


def test_part1_rejects_single_battery():
    with pytest.raises(InputError):
        day03.max_jolts_part1("7")


def test_part2_rejects_short_bank():
    with pytest.raises(InputError):
        day03.max_jolts_part2("12345")


def test_rejects_non_digits():
    with pytest.raises(InputError):
        day03.max_jolts_part1("12a4")