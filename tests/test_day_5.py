import pytest

from advent2021.day_5 import (
    Point,
    VentLine,
    count_overlaps,
    parse_lines,
    solve_part_one,
    solve_part_two,
)

EXAMPLE = """0,9 -> 5,9
8,0 -> 0,8
9,4 -> 3,4
2,2 -> 2,1
7,0 -> 7,4
6,4 -> 2,0
0,9 -> 2,9
3,4 -> 1,4
0,0 -> 8,8
5,5 -> 8,2
"""


def test_parse_lines():
    lines = parse_lines("1,2 -> 3,4\n")
    assert lines == [VentLine(Point(1, 2), Point(3, 4))]


def test_parse_rejects_malformed():
    with pytest.raises(ValueError):
        parse_lines("1,2 => 3,4")


def test_parse_rejects_out_of_range():
    with pytest.raises(ValueError):
        parse_lines("40000,0 -> 0,0")


def test_axis_alignment():
    assert VentLine(Point(1, 1), Point(1, 5)).is_axis_aligned()
    assert not VentLine(Point(1, 1), Point(3, 3)).is_axis_aligned()


def test_horizontal_points_backwards():
    points = list(VentLine(Point(3, 4), Point(1, 4)).points())
    assert points == [Point(3, 4), Point(2, 4), Point(1, 4)]


def test_single_point_line():
    assert list(VentLine(Point(2, 2), Point(2, 2)).points()) == [Point(2, 2)]


def test_diagonal_points_include_ends():
    line = VentLine(Point(5, 5), Point(8, 2))
    points = list(line.points())
    assert points[0] == line.start
    assert points[-1] == line.end
    assert len(points) == len(set(points))


def test_odd_slope_raises():
    with pytest.raises(ValueError):
        list(VentLine(Point(0, 0), Point(1, 2)).points())


def test_count_overlaps_crossing():
    lines = [VentLine(Point(0, 1), Point(2, 1)), VentLine(Point(1, 0), Point(1, 2))]
    assert count_overlaps(lines) == 1


def test_count_overlaps_disjoint():
    lines = [VentLine(Point(0, 0), Point(2, 0)), VentLine(Point(0, 5), Point(2, 5))]
    assert count_overlaps(lines) == 0


def test_example_part_one():
    assert solve_part_one(EXAMPLE) == 5


def test_example_part_two():
    assert solve_part_two(EXAMPLE) == 12