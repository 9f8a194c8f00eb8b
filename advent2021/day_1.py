"""Day 1: counting depth increases."""

from __future__ import annotations

from itertools import pairwise

from .problem import get_problem

DAY = 1


def parse_measurements(text: str) -> list[int]:
    """Parse one integer measurement per line."""
    return [int(line) for line in text.splitlines()]


def sliding_window_sums(measurements: list[int]) -> list[int]:
    """Return the sums of every three-measurement sliding window."""
    if len(measurements) < 2:
        raise ValueError("at least two measurements are required")
    return [a + b + c for a, b, c in zip(measurements, measurements[1:], measurements[2:])]


def count_increases(measurements: list[int]) -> int:
    """Count how many measurements are larger than the one before."""
    return sum(current > previous for previous, current in pairwise(measurements))


def solve_part_one(text: str) -> int:
    return count_increases(parse_measurements(text))


def solve_part_two(text: str) -> int:
    return count_increases(sliding_window_sums(parse_measurements(text)))


def run_part_one(session: str) -> int:
    return solve_part_one(get_problem(DAY, session))


def run_part_two(session: str) -> int:
    return solve_part_two(get_problem(DAY, session))