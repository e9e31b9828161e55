# aoc2025

Solutions to the first eight days of a 2025 season of daily programming
puzzles, plus the small toolkit they are built on. There are no third-party
dependencies.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Solving a puzzle

Each day is its own module, `aoc2025.day01` to `aoc2025.day08`. Days 1 to 7
expose `part1(stream)` and `part2(stream)`. Day 8 exposes only
`part1(stream, example=False)`. A stream is any open text file.

```python
from aoc2025 import day01
from aoc2025.inputs import example_input

with example_input(1, "puzzles") as stream:
    print(day01.part1(stream))
```

`example_input(day, root=".")` opens `<root>/dayNN/example.txt` and
`real_input(day, root=".")` opens `<root>/dayNN/input.txt`; a missing
`input.txt` raises `FileNotFoundError`.

Day 8's `example` flag chooses how many closest pairs are connected: 10 when
it is true, 1000 otherwise.

```python
from aoc2025 import day08

with open("puzzles/day08/input.txt", encoding="utf-8") as stream:
    print(day08.part1(stream, example=False))
```

Some days also expose helpers:

- `day02.is_invalid_id_part1(id_)` and `day02.is_invalid_id_part2(id_)`
  test a single product ID.
- `day03.max_jolts_part1(line)` and `day03.max_jolts_part2(line)` score a
  single bank of batteries.
- `day06.parse_problems(stream)` returns the worksheet's `MathProblem`s. Each
  has `operands`, `positions` and `operator`, and `solve()` adds or
  multiplies the operands.
- `day07.initial_beam_position(grid)` returns the column of `S` on the top
  row of a `Grid`.

Input that does not have the expected shape raises
`aoc2025.parsing.InputError`, which is a subclass of `ValueError`.

## The toolkit

- `aoc2025.parsing`: `split(text, separator, remove_empty=False)` yields
  `Segment`s. Each segment has `text` and `position`, which is its offset in
  the source. At least one segment is always yielded. `parse_int64`,
  `parse_int32` and `parse_uint32` accept only ASCII digits, with no sign and
  no whitespace. They check the value's range and raise `InputError` on bad
  input. An empty string parses as 0.
- `aoc2025.ranges`: `Range(start, end)`, an inclusive integer range that
  supports `in`. `merge(other)` returns the union of two overlapping or
  adjacent ranges, or `None` if they neither overlap nor touch. `size()`
  counts the integers in the range.
- `aoc2025.grid`: `Grid.parse(text)` builds a character grid from rows that
  each end with a newline.
  - `get(x, y)` returns `None` outside the grid.
  - `set(x, y, value)` raises `IndexError` outside the grid.
  - `adjacent_coords` and `adjacent_squares` give the up to eight
    neighbours of a square.
  - `copy()` returns an independent grid, and `str()` renders the grid as
    text.
- `aoc2025.inputs`: `example_input`, `real_input` and `read_lines(stream)`.
  `read_lines` yields each newline-terminated line without its newline and
  drops a final line that has no newline.
- `aoc2025.hashing`: chained hash tables with an explicit hash function. The
  default hash function is `hash_int`.
  - `HashMap` is a mutable mapping. It adds `try_add`, `get_or_add_default`,
    `ensure_capacity` and `bucket_count`. It starts with 10 buckets and
    doubles when the load exceeds 0.75.
  - `HashSet` is a mutable set. It adds `try_add`, `try_remove`,
    `ensure_capacity` and `bucket_count`.

## What it does not do

- There is no command-line program; the puzzles are solved by calling the
  modules from Python.
- No puzzle inputs are included.
- Day 8 has no second part.