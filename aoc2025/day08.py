"""Day 8: wiring junction boxes into circuits by shortest distance."""

from __future__ import annotations

import heapq
import math
from collections import Counter
from itertools import combinations
from typing import TextIO

from aoc2025.inputs import read_lines
from aoc2025.parsing import InputError, parse_uint32, split

EXAMPLE_PAIR_COUNT = 10
REAL_PAIR_COUNT = 1000
_UINT32_WORD = 2**32

Point = tuple[int, int, int]


def _parse_box(line: str) -> Point:
    coords = [parse_uint32(segment.text) for segment in split(line, ",")]
    if len(coords) != 3:
        raise InputError(f"wrong number of coordinates: {line!r}")
    x, y, z = coords
    return x, y, z


def _distance_sq(a: Point, b: Point) -> int:
    return sum((p - q) ** 2 for p, q in zip(a, b))


def part1(stream: TextIO, example: bool = False) -> int:
    """Connect the closest pairs and multiply the sizes of the three largest circuits.

    Ten pairs are considered for the example input, a thousand otherwise.
    """
    boxes = [_parse_box(line) for line in read_lines(stream)]
    pair_count = EXAMPLE_PAIR_COUNT if example else REAL_PAIR_COUNT

    closest = heapq.nsmallest(
        pair_count,
        combinations(range(len(boxes)), 2),
        key=lambda pair: _distance_sq(boxes[pair[0]], boxes[pair[1]]),
    )

    # 0 means the box is not part of any circuit yet.
    circuit = [0] * len(boxes)
    next_circuit = 1
    for first, second in closest:
        a, b = circuit[first], circuit[second]
        if a == 0 and b == 0:
            circuit[first] = circuit[second] = next_circuit
            next_circuit += 1
        elif a == 0:
            circuit[first] = b
        elif b == 0:
            circuit[second] = a
        elif a != b:
            circuit = [next_circuit if c in (a, b) else c for c in circuit]
            next_circuit += 1

    sizes = Counter(c for c in circuit if c != 0)
    largest = sorted(sizes.values(), reverse=True)[:3]
    largest += [0] * (3 - len(largest))
    return math.prod(largest) % _UINT32_WORD