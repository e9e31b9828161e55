"""Day 1: counting how often a combination dial lands on zero."""

from __future__ import annotations

import re
from typing import TextIO

from aoc2025.inputs import read_lines
from aoc2025.parsing import InputError

DIAL_SIZE = 100
START_POSITION = 50

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _magnitude(text: str) -> int:
    """Leading integer of ``text`` in the lenient way of ``strtol``; 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def part1(stream: TextIO) -> int:
    """Count the rotations that leave the dial pointing at zero."""
    position = START_POSITION
    zero_count = 0
    for line in read_lines(stream):
        direction = line[:1]
        magnitude = _magnitude(line[1:])
        if direction == "L":
            step = DIAL_SIZE - magnitude % DIAL_SIZE
        elif direction == "R":
            step = magnitude
        else:
            step = 0
        position = (position + step) % DIAL_SIZE
        if position == 0:
            zero_count += 1
    return zero_count


def part2(stream: TextIO) -> int:
    """Count every click at which the dial passes through or stops at zero."""
    position = START_POSITION
    zero_count = 0
    for line in read_lines(stream):
        direction = line[:1]
        magnitude = max(_magnitude(line[1:]), 0)
        if direction == "R":
            zero_count += (position + magnitude) // DIAL_SIZE
            position = (position + magnitude) % DIAL_SIZE
        elif direction == "L":
            mirrored = (DIAL_SIZE - position) % DIAL_SIZE
            zero_count += (mirrored + magnitude) // DIAL_SIZE
            position = (position - magnitude) % DIAL_SIZE
        else:
            raise InputError(f"invalid direction in instruction {line!r}")
    return zero_count