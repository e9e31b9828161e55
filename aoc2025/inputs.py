"""Locating puzzle input files and reading them line by line."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from pathlib import Path
from typing import TextIO, Union

StrPath = Union[str, "PathLike[str]"]


def _day_file(day: int, root: StrPath, name: str) -> Path:
    return Path(root) / f"day{day:02d}" / name


def example_input(day: int, root: StrPath = ".") -> TextIO:
    """Open the example input for ``day`` found under ``root``."""
    return _day_file(day, root, "example.txt").open(encoding="utf-8")


def real_input(day: int, root: StrPath = ".") -> TextIO:
    """Open the personal puzzle input for ``day`` found under ``root``."""
    path = _day_file(day, root, "input.txt")
    try:
        return path.open(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"check the input file at {path} exists") from exc


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield each newline-terminated line without its newline.

    A final line that has no terminating newline is not yielded.
    """
    for line in stream:
        if line.endswith("\n"):
            yield line[:-1]