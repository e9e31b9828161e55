"""Day 2: summing product IDs made of a repeated digit sequence."""

from __future__ import annotations

from collections.abc import Callable
from typing import TextIO

from aoc2025.parsing import InputError, parse_int64, split


def _digit_count(id_: int) -> int:
    """``ceil(log10(id_))``: the digit count, one short for exact powers of ten."""
    if id_ <= 0:
        raise ValueError(f"IDs must be positive, got {id_}")
    return len(str(id_ - 1)) if id_ > 1 else 0


def is_invalid_id_part1(id_: int) -> bool:
    """True if the ID is some digit sequence written exactly twice."""
    digit_count = _digit_count(id_)
    if digit_count % 2 != 0 or digit_count < 2:
        return False
    quotient, remainder = divmod(id_, 10 ** (digit_count // 2))
    return quotient == remainder


def is_invalid_id_part2(id_: int) -> bool:
    """True if the ID is some digit sequence repeated at least twice."""
    digit_count = _digit_count(id_)
    if digit_count <= 1:
        return False

    max_divisor = 10 ** (digit_count // 2)
    divisor = 10
    sequence_len = 1
    while divisor <= max_divisor:
        rest, expected = divmod(id_, divisor)
        all_match = True
        while rest > 0:
            rest, remainder = divmod(rest, divisor)
            all_match &= remainder == expected
        # A match only counts when the proposed sequence length divides the
        # digit count; otherwise e.g. 30303 would pass with divisor 100.
        if all_match and digit_count % sequence_len == 0:
            return True
        divisor *= 10
        sequence_len += 1
    return False


def _parse_range(text: str) -> tuple[int, int]:
    parts = split(text, "-")
    start = parse_int64(next(parts).text)
    end_segment = next(parts, None)
    if end_segment is None:
        raise InputError(f"range has no end: {text!r}")
    return start, parse_int64(end_segment.text)


def _sum_invalid(stream: TextIO, is_invalid: Callable[[int], bool]) -> int:
    text = stream.read()
    if text.endswith("\n"):
        text = text[:-1]
    total = 0
    for segment in split(text, ","):
        start, end = _parse_range(segment.text)
        total += sum(id_ for id_ in range(start, end + 1) if is_invalid(id_))
    return total


def part1(stream: TextIO) -> int:
    return _sum_invalid(stream, is_invalid_id_part1)


def part2(stream: TextIO) -> int:
    return _sum_invalid(stream, is_invalid_id_part2)