"""Inclusive integer ranges."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Range:
    """A numeric range whose start and end are both inclusive."""

    start: int
    end: int

    def __contains__(self, value: int) -> bool:
        return self.start <= value <= self.end

    def merge(self, other: Range) -> Range | None:
        """Return the union of two overlapping or adjacent ranges, else None."""
        adjacent = self.end + 1 == other.start or other.end + 1 == self.start
        overlap = (
            other.start in self
            or self.start in other
            or other.end in self
            or self.end in other
        )
        if overlap or adjacent:
            return Range(min(self.start, other.start), max(self.end, other.end))
        return None

    def size(self) -> int:
        """Number of integers covered by the range."""
        return abs(self.end - self.start) + 1

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"