"""Day 7: following tachyon beams through a manifold of beam splitters."""

from __future__ import annotations

from typing import TextIO

from aoc2025.grid import Grid
from aoc2025.hashing import HashMap, HashSet
from aoc2025.parsing import InputError

START = "S"
SPLITTER = "^"
FIRST_SPLITTER_ROW = 2


def initial_beam_position(grid: Grid) -> int:
    """Column of the beam entry point ``S`` on the top row."""
    for x in range(grid.width):
        if grid.get(x, 0) == START:
            return x
    raise InputError("failed to find initial beam position")


def _split_targets(grid: Grid, x: int) -> tuple[int, int]:
    left, right = x - 1, x + 1
    if not (0 <= left < grid.width and 0 <= right < grid.width):
        raise InputError(f"splitter at column {x} sends a beam off the grid")
    return left, right


def part1(stream: TextIO) -> int:
    """Count how many times a beam is split on its way down the manifold."""
    grid = Grid.parse(stream.read())

    beams: HashSet[int] = HashSet()
    beams.try_add(initial_beam_position(grid))

    split_count = 0
    for y in range(FIRST_SPLITTER_ROW, grid.height):
        # Splits are applied after scanning the row so they do not affect it.
        splits = [x for x in beams if grid.get(x, y) == SPLITTER]
        split_count += len(splits)
        for x in splits:
            beams.try_remove(x)
            left, right = _split_targets(grid, x)
            beams.try_add(left)
            beams.try_add(right)

    return split_count


def part2(stream: TextIO) -> int:
    """Count the timelines a single particle ends up in after every split."""
    grid = Grid.parse(stream.read())

    timelines: HashMap[int, int] = HashMap()
    timelines.try_add(initial_beam_position(grid), 1)

    for y in range(FIRST_SPLITTER_ROW, grid.height):
        splits = [x for x in timelines if grid.get(x, y) == SPLITTER]
        for x in splits:
            left, right = _split_targets(grid, x)
            count = timelines[x]
            timelines[left] = timelines.get_or_add_default(left, 0) + count
            timelines[right] = timelines.get_or_add_default(right, 0) + count
            # No beam remains directly below the splitter.
            timelines[x] = 0

    return sum(timelines.values())