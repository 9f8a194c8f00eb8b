# advent2021

Solutions to days 1 to 5 of the Advent of Code 2021 puzzles.

Each day has its own module, `advent2021.day_1` to `advent2021.day_5`. Each
one offers two pure functions, `solve_part_one(text)` and
`solve_part_two(text)`. They take the puzzle input as text and return the
answer as an integer:

```python
from advent2021 import day_1

text = "199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n"
print(day_1.solve_part_one(text))  # 7
print(day_1.solve_part_two(text))  # 5
```

## The days

- **Day 1** (`day_1`) counts depth increases. Part one compares each
  measurement with the one before it. Part two compares the sums of
  three-measurement sliding windows. The helpers are `parse_measurements`,
  `sliding_window_sums` and `count_increases`.
- **Day 2** (`day_2`) steers the submarine, first without aim and then with
  aim.
  - `parse_instructions` turns lines such as `forward 5` into `Instruction`
    values. Each `Instruction` has an `Action` and a value, and an unknown
    word gives an `IDLE` action.
  - `apply_instruction` moves the position and `apply_aim` updates the aim.
    Neither depth nor aim goes below zero.
- **Day 3** (`day_3`) works on a binary diagnostic report of numbers up to
  twelve bits wide.
  - Part one gives the power consumption, built with `count_ones` and
    `counter_to_binary`.
  - Part two gives the life-support rating, found with `find_rating`.
- **Day 4** (`day_4`) plays bingo against a giant squid.
  - `parse_bingo` returns the drawn numbers and a list of `BingoCard`
    objects. Each card has `mark`, `has_won` and `unmarked_sum`.
  - Part one scores the first card to win and part two scores the last.
- **Day 5** (`day_5`) counts overlapping hydrothermal vent lines.
  - `parse_lines` reads lines of the form `x1,y1 -> x2,y2` into `VentLine`
    objects made of two `Point`s.
  - `VentLine.points()` yields every point the line covers, and
    `count_overlaps` counts the points that two or more lines cover.
  - Part one uses only horizontal and vertical lines
    (`VentLine.is_axis_aligned()`). Part two also uses 45-degree diagonals.

Input that does not fit a day's format raises `ValueError`.

## Fetching your puzzle input

Puzzle inputs differ from one account to another. To fetch one you need the
value of your `session` cookie from the puzzle site.

- `advent2021.problem.get_problem(day, session)` downloads the input for a
  day as text. It raises `ProblemFetchError` when the download fails.
- `advent2021.problem.input_url(day)` gives the address it downloads from.
- Each day module also has `run_part_one(session)` and
  `run_part_two(session)`. They fetch that day's input and return the answer:

```python
from advent2021 import day_5

answer = day_5.run_part_one("placeholder")
```

## Command line

Installing the package provides the `advent2021` command. It prints the answers
to both parts of one day, each on its own line:

```
advent2021 3 --input input.txt
advent2021 5 --session placeholder
```

- The day is a number from 1 to 5. It defaults to 5.
- `--input FILE` reads the puzzle input from a file.
- Without `--input`, the input is downloaded using `--session`. When
  `--session` is not given, the `AOC_SESSION` environment variable is used.
- If neither a file nor a session is given, the command stops with a usage
  error.
- If the download fails, it prints `Something went wrong` and exits with
  status 1.

See all options with:

```
advent2021 --help
```

## What it does not do

Only days 1 to 5 are solved.

Downloaded inputs are not cached or saved anywhere. Every run without
`--input` fetches the input again.

## Tests

```
pip install -e ".[test]"
pytest
```