"""Day 3: picking battery digits to form the largest joltage per bank."""

from __future__ import annotations

from collections.abc import Callable
from typing import TextIO

from aoc2025.parsing import InputError, split

JOLT_LENGTH = 12

_DIGITS = frozenset("0123456789")


def _digits(line: str) -> list[int]:
    if not set(line) <= _DIGITS:
        raise InputError(f"bank contains a non-digit: {line!r}")
    return [int(ch) for ch in line]


def max_jolts_part1(line: str) -> int:
    """Largest two-digit number formed by two batteries kept in order."""
    digits = _digits(line)
    if len(digits) < 2:
        raise InputError(f"bank needs at least two batteries: {line!r}")

    max_digit = 0
    max_position = 0
    for position, digit in enumerate(digits):
        if digit > max_digit:
            max_digit, max_position = digit, position

    # Search after the largest digit, or before it when it is the last one.
    if max_position + 1 < len(digits):
        candidates = range(max_position + 1, len(digits))
    else:
        candidates = range(max_position)

    second_digit = 0
    second_position = 0
    for position in candidates:
        if digits[position] > second_digit:
            second_digit, second_position = digits[position], position

    if second_position == max_position:
        raise InputError(f"no second battery found in {line!r}")

    if max_position < second_position:
        return max_digit * 10 + second_digit
    return second_digit * 10 + max_digit


def max_jolts_part2(line: str) -> int:
    """Largest twelve-digit number formed by batteries kept in order."""
    digits = _digits(line)
    if len(digits) < JOLT_LENGTH:
        raise InputError(f"bank needs at least {JOLT_LENGTH} batteries: {line!r}")

    remaining_skips = len(digits) - JOLT_LENGTH
    position = 0
    chosen: list[int] = []
    for _ in range(JOLT_LENGTH):
        window = digits[position : position + remaining_skips + 1]
        best = max(window)
        skip = window.index(best)
        chosen.append(best)
        remaining_skips -= skip
        position += skip + 1
    return int("".join(map(str, chosen)))


def _total(stream: TextIO, max_jolts: Callable[[str], int]) -> int:
    text = stream.read()
    if text.endswith("\n"):
        text = text[:-1]
    return sum(max_jolts(segment.text) for segment in split(text, "\n"))


def part1(stream: TextIO) -> int:
    return _total(stream, max_jolts_part1)


def part2(stream: TextIO) -> int:
    return _total(stream, max_jolts_part2)