"""Day 5: checking ingredient IDs against ranges of fresh IDs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TextIO

from aoc2025.inputs import read_lines
from aoc2025.parsing import InputError, parse_int64, split
from aoc2025.ranges import Range


def _parse_range(line: str) -> Range:
    parts = split(line, "-")
    start = parse_int64(next(parts).text)
    end_segment = next(parts, None)
    if end_segment is None:
        raise InputError(f"range has no end: {line!r}")
    return Range(start, parse_int64(end_segment.text))


def _parse_ranges(lines: Iterator[str]) -> list[Range]:
    """Read ranges up to the blank line that separates them from the IDs."""
    ranges = []
    for line in lines:
        if not line:
            break
        ranges.append(_parse_range(line))
    return ranges


def _merge_pass(ranges: Iterable[Range]) -> tuple[list[Range], bool]:
    """Merge each range with the first later range it touches, once."""
    pending = list(ranges)
    result: list[Range] = []
    any_merged = False
    while pending:
        current = pending.pop(0)
        for index, other in enumerate(pending):
            combined = current.merge(other)
            if combined is not None:
                result.append(combined)
                del pending[index]
                any_merged = True
                break
        else:
            result.append(current)
    return result, any_merged


def _merge_all(ranges: list[Range]) -> list[Range]:
    merged = True
    while merged:
        ranges, merged = _merge_pass(ranges)
    return ranges


def part1(stream: TextIO) -> int:
    """Count the listed IDs that fall inside at least one fresh range."""
    lines = read_lines(stream)
    ranges = _parse_ranges(lines)
    return sum(
        any(value in fresh for fresh in ranges)
        for value in (parse_int64(line) for line in lines)
    )


def part2(stream: TextIO) -> int:
    """Count how many distinct IDs the fresh ranges cover."""
    ranges = _merge_all(_parse_ranges(read_lines(stream)))
    return sum(fresh.size() for fresh in ranges)