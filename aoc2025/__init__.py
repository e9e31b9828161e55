"""Solutions to days 1 to 8 of a 2025 puzzle season and the utilities they share."""

__version__ = "0.1.0"
__all__ = [
    "day01",
    "day02",
    "day03",
    "day04",
    "day05",
    "day06",
    "day07",
    "day08",
    "grid",
    "hashing",
    "inputs",
    "parsing",
    "ranges",
]