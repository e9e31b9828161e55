"""Day 6: solving the columns of a cephalopod maths worksheet."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TextIO

from aoc2025.inputs import read_lines
from aoc2025.parsing import InputError, parse_int32, split

OPERATORS = frozenset("+*")
_NUMBER_LINE_START = frozenset("0123456789 \t\n\v\f\r")


@dataclass
class MathProblem:
    """Operands of one worksheet column, where each was found, and the operator."""

    operands: list[int] = field(default_factory=list)
    positions: list[int] = field(default_factory=list)
    operator: str = "+"

    def solve(self) -> int:
        """Combine all operands with the problem's operator."""
        if not self.operands:
            raise InputError("problem has no operands")
        if self.operator == "+":
            return sum(self.operands)
        return math.prod(self.operands)

    def __str__(self) -> str:
        return f" {self.operator} ".join(map(str, self.operands)) + " ="


def parse_problems(stream: TextIO) -> list[MathProblem]:
    """Read the worksheet: number rows followed by a row of operators."""
    lines = read_lines(stream)
    first_line = next(lines, None)
    if first_line is None:
        raise InputError("worksheet is empty")

    problems = [
        MathProblem([parse_int32(segment.text)], [segment.position])
        for segment in split(first_line, " ", remove_empty=True)
    ]

    operator_line = None
    for line in lines:
        if line[:1] not in _NUMBER_LINE_START:
            operator_line = line
            break
        for index, segment in enumerate(split(line, " ", remove_empty=True)):
            if index >= len(problems):
                raise InputError(f"too many operands in row {line!r}")
            problems[index].operands.append(parse_int32(segment.text))
            problems[index].positions.append(segment.position)

    if operator_line is None or operator_line[:1] not in OPERATORS:
        raise InputError("failed to find operator line")

    for index, segment in enumerate(split(operator_line, " ", remove_empty=True)):
        if index >= len(problems):
            raise InputError("more operators than problems")
        operator = segment.text[:1]
        if operator not in OPERATORS:
            raise InputError(f"invalid operator {segment.text!r}")
        problems[index].operator = operator

    return problems


def part1(stream: TextIO) -> int:
    """Sum the answers of every problem read row by row."""
    return sum(problem.solve() for problem in parse_problems(stream))


def _digit_count(number: int) -> int:
    return len(str(number))


def _digit_from_left(number: int, index: int) -> int:
    shift = _digit_count(number) - index - 1
    if shift < 0:
        return 0
    return number // 10**shift % 10


def _digit_from_right(number: int, index: int) -> int:
    return number // 10**index % 10


def _transpose(problem: MathProblem) -> MathProblem:
    """Read the problem's numbers column by column instead of row by row.

    Numbers that start at different positions are right aligned and their
    columns are read from the right; otherwise from the left. Zero digits
    are treated as padding.
    """
    right_aligned = problem.positions[0] != problem.positions[-1]
    extract = _digit_from_right if right_aligned else _digit_from_left

    transposed = MathProblem(operator=problem.operator)
    digit_index = 0
    while True:
        value = 0
        for operand in problem.operands:
            digit = extract(operand, digit_index)
            if digit != 0:
                value = value * 10 + digit
        if value == 0:
            break
        transposed.operands.append(value)
        digit_index += 1
    return transposed


def part2(stream: TextIO) -> int:
    """Sum the answers of every problem read column by column."""
    return sum(_transpose(problem).solve() for problem in parse_problems(stream))