"""Splitting text into segments and strict parsing of unsigned decimal numbers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

INT64_MAX = 2**63 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
UINT32_MAX = 2**32 - 1

_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Raised when puzzle input does not have the expected shape."""


@dataclass(frozen=True, slots=True)
class Segment:
    """A piece of split text and the offset in the source where it starts."""

    text: str
    position: int

    def __str__(self) -> str:
        return self.text


def _raw_segments(text: str, separator: str) -> Iterator[Segment]:
    position = 0
    while True:
        found = text.find(separator, position)
        end = len(text) if found == -1 else found
        yield Segment(text[position:end], position)
        if found == -1:
            return
        position = found + len(separator)


def split(text: str, separator: str, remove_empty: bool = False) -> Iterator[Segment]:
    """Yield the segments of ``text`` between occurrences of ``separator``.

    At least one segment is always produced. With ``remove_empty`` set, empty
    segments are skipped, except that if every segment is empty the last one
    is still produced.
    """
    if not separator:
        raise ValueError("separator must not be empty")

    produced = False
    last: Segment | None = None
    for segment in _raw_segments(text, separator):
        last = segment
        if segment.text or not remove_empty:
            produced = True
            yield segment
    if not produced and last is not None:
        yield last


def parse_int64(text: str) -> int:
    """Parse a string of ASCII digits into a value that fits a signed 64-bit integer.

    No sign or whitespace is accepted. An empty string parses as 0.
    """
    if not set(text) <= _DIGITS:
        raise InputError(f"not a number: {text!r}")
    value = int(text) if text else 0
    if value > INT64_MAX:
        raise InputError(f"number too large: {text!r}")
    return value


def parse_int32(text: str) -> int:
    """Parse digits into a value that fits a signed 32-bit integer."""
    value = parse_int64(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise InputError(f"number out of 32-bit range: {text!r}")
    return value


def parse_uint32(text: str) -> int:
    """Parse digits into a value that fits an unsigned 32-bit integer."""
    value = parse_int64(text)
    if not 0 <= value <= UINT32_MAX:
        raise InputError(f"number out of unsigned 32-bit range: {text!r}")
    return value