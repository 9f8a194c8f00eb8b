"""Day 5: hydrothermal vent lines."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .problem import get_problem

DAY = 5
_COORDINATE_LIMIT = 32767
_LINE = re.compile(r"([0-9]+),([0-9]+) -> ([0-9]+),([0-9]+)")


def _sign(delta: int) -> int:
    return (delta > 0) - (delta < 0)


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class VentLine:
    start: Point
    end: Point

    @property
    def direction(self) -> tuple[int, int]:
        return _sign(self.end.x - self.start.x), _sign(self.end.y - self.start.y)

    def is_axis_aligned(self) -> bool:
        """True for horizontal and vertical lines."""
        return self.start.x == self.end.x or self.start.y == self.end.y

    def points(self) -> Iterator[Point]:
        """Yield every point from start to end, both included."""
        dx, dy = abs(self.end.x - self.start.x), abs(self.end.y - self.start.y)
        if dx and dy and dx != dy:
            raise ValueError("only horizontal, vertical and 45 degree lines can be drawn")
        step_x, step_y = self.direction
        for step in range(max(dx, dy) + 1):
            yield Point(self.start.x + step * step_x, self.start.y + step * step_y)


def parse_lines(text: str) -> list[VentLine]:
    """Parse lines of the form ``x1,y1 -> x2,y2``."""
    vents = []
    for line in text.splitlines():
        match = _LINE.search(line)
        if match is None:
            raise ValueError(f"malformed vent line: {line!r}")
        x1, y1, x2, y2 = (int(value) for value in match.groups())
        if max(x1, y1, x2, y2) > _COORDINATE_LIMIT:
            raise ValueError(f"coordinate out of range: {line!r}")
        vents.append(VentLine(Point(x1, y1), Point(x2, y2)))
    return vents


def count_overlaps(lines: Iterable[VentLine]) -> int:
    """Count the points covered by at least two lines."""
    board = Counter(point for line in lines for point in line.points())
    return sum(1 for hits in board.values() if hits > 1)


def solve_part_one(text: str) -> int:
    return count_overlaps(line for line in parse_lines(text) if line.is_axis_aligned())


def solve_part_two(text: str) -> int:
    return count_overlaps(parse_lines(text))


def run_part_one(session: str) -> int:
    return solve_part_one(get_problem(DAY, session))


def run_part_two(session: str) -> int:
    return solve_part_two(get_problem(DAY, session))