"""A mutable rectangular grid of characters parsed from newline-terminated rows."""

from __future__ import annotations

from aoc2025.parsing import InputError


class Grid:
    """Grid of single characters addressed by (x, y), origin at the top left."""

    def __init__(self, rows: list[list[str]], width: int) -> None:
        self._rows = rows
        self.width = width
        self.height = len(rows)

    @classmethod
    def parse(cls, text: str) -> Grid:
        """Build a grid from text whose rows each end with a newline.

        Text after the last newline is not part of the grid.
        """
        if "\n" not in text:
            raise InputError("cannot create grid: no newlines found")
        lines = text.split("\n")[:-1]
        width = len(lines[0])
        if any(len(line) != width for line in lines):
            raise InputError("cannot create grid: uneven rows")
        return cls([list(line) for line in lines], width)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> str | None:
        """Return the square at (x, y), or None if it lies outside the grid."""
        if not self._in_bounds(x, y):
            return None
        return self._rows[y][x]

    def set(self, x: int, y: int, value: str) -> None:
        """Replace the square at (x, y)."""
        if not self._in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside the grid")
        if len(value) != 1:
            raise ValueError("a square holds exactly one character")
        self._rows[y][x] = value

    def adjacent_coords(self, x: int, y: int) -> list[tuple[int, int]]:
        """Coordinates of the up to eight in-bounds neighbours of (x, y)."""
        return [
            (nx, ny)
            for nx in range(x - 1, x + 2)
            for ny in range(y - 1, y + 2)
            if (nx, ny) != (x, y) and self._in_bounds(nx, ny)
        ]

    def adjacent_squares(self, x: int, y: int) -> list[str]:
        """Contents of the neighbours of (x, y), in the order of adjacent_coords."""
        return [self._rows[ny][nx] for nx, ny in self.adjacent_coords(x, y)]

    def copy(self) -> Grid:
        return Grid([list(row) for row in self._rows], self.width)

    def __str__(self) -> str:
        return "".join("".join(row) + "\n" for row in self._rows)