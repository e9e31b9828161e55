"""Day 4: removing paper rolls that forklifts can reach."""

from __future__ import annotations

from typing import TextIO

from aoc2025.grid import Grid

PAPER = "@"
EMPTY = "."
MAX_CROWDING = 4


def _adjacent_paper(grid: Grid, x: int, y: int) -> int:
    return sum(square == PAPER for square in grid.adjacent_squares(x, y))


def _accessible(grid: Grid, x: int, y: int) -> bool:
    return grid.get(x, y) == PAPER and _adjacent_paper(grid, x, y) < MAX_CROWDING


def _all_coords(grid: Grid) -> list[tuple[int, int]]:
    return [(x, y) for x in range(grid.width) for y in range(grid.height)]


def part1(stream: TextIO) -> int:
    """Count rolls with fewer than four neighbouring rolls."""
    grid = Grid.parse(stream.read())
    return sum(_accessible(grid, x, y) for x, y in _all_coords(grid))


def part2(stream: TextIO) -> int:
    """Count rolls removed by repeatedly taking every accessible roll."""
    grid = Grid.parse(stream.read())
    pending = [(x, y) for x, y in _all_coords(grid) if _accessible(grid, x, y)]

    removed = 0
    while pending:
        x, y = pending.pop()
        # Coordinates may be queued more than once.
        if grid.get(x, y) != PAPER:
            continue
        grid.set(x, y, EMPTY)
        removed += 1
        pending.extend(
            (nx, ny) for nx, ny in grid.adjacent_coords(x, y) if _accessible(grid, nx, ny)
        )
    return removed