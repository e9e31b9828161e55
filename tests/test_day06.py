import io

import pytest

from aoc2025.day06 import MathProblem, parse_problems, part1, part2
from aoc2025.parsing import InputError

EXAMPLE = (
    "123 328  51 64 \n"
    " 45 64  387 23 \n"
    "  6 98  215 314\n"
    "*   +   *   +  \n"
)


def test_part1_example():
    assert part1(io.StringIO(EXAMPLE)) == 4277556


def test_part2_example():
    assert part2(io.StringIO(EXAMPLE)) == 3263827


def test_parse_problems_reads_operands_positions_and_operators():
    problems = parse_problems(io.StringIO(EXAMPLE))
    assert len(problems) == 4
    first = problems[0]
    assert first.operands == [123, 45, 6]
    assert first.positions == [0, 1, 2]
    assert first.operator == "*"
    assert problems[1].operands == [328, 64, 98]
    assert problems[1].positions == [4, 4, 4]
    assert problems[1].operator == "+"


def test_solve_multiplies():
    assert MathProblem([2, 3, 4], [], "*").solve() == 24


def test_solve_adds():
    assert MathProblem([2, 3, 4], [], "+").solve() == 9


def test_solve_without_operands_raises():
    with pytest.raises(InputError):
        MathProblem([], [], "+").solve()


def test_missing_operator_line_raises():
    with pytest.raises(InputError):
        part1(io.StringIO("1 2\n3 4\n"))


def test_invalid_operator_raises():
    with pytest.raises(InputError):
        part1(io.StringIO("1 2\n3 4\n+ /\n"))


def test_empty_worksheet_raises():
    with pytest.raises(InputError):
        part1(io.StringIO(""))


def test_too_many_operands_raises():
    with pytest.raises(InputError):
        part1(io.StringIO("1 2\n3 4 5\n+ +\n"))


def test_single_problem_left_aligned():
    text = "12\n34\n+ \n"
    # Left aligned: columns read from the left give 13 and 24.
    assert part2(io.StringIO(text)) == 37
    assert part1(io.StringIO(text)) == 46