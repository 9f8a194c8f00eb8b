import pytest

from advent2021.day_2 import (
    Action,
    Instruction,
    apply_aim,
    apply_instruction,
    parse_instructions,
    solve_part_one,
    solve_part_two,
)

EXAMPLE = "forward 5\ndown 5\nforward 8\nup 3\ndown 8\nforward 2\n"


def test_parse_instructions():
    assert parse_instructions("forward 5\nup 3\ndown 8\n") == [
        Instruction(Action.FORWARD, 5),
        Instruction(Action.UP, 3),
        Instruction(Action.DOWN, 8),
    ]


def test_unknown_word_is_idle():
    assert parse_instructions("backward 4") == [Instruction(Action.IDLE, 4)]


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        parse_instructions("forward")


def test_up_clamps_depth_without_aim():
    assert apply_instruction((3, 2), Instruction(Action.UP, 5), None) == (3, 0)


def test_down_ignored_with_aim():
    assert apply_instruction((3, 2), Instruction(Action.DOWN, 5), 7) == (3, 2)


def test_idle_changes_nothing():
    position = (4, 9)
    assert apply_instruction(position, Instruction(Action.IDLE, 5), None) == position
    assert apply_aim(6, Instruction(Action.IDLE, 5)) == 6


def test_aim_clamps_at_zero():
    assert apply_aim(2, Instruction(Action.UP, 10)) == 0
    assert apply_aim(2, Instruction(Action.DOWN, 3)) == 2 + 3


def test_forward_with_aim_moves_depth():
    assert apply_instruction((0, 0), Instruction(Action.FORWARD, 4), 3) == (4, 4 * 3)


def test_example_part_one():
    assert solve_part_one(EXAMPLE) == 150


def test_example_part_two():
    assert solve_part_two(EXAMPLE) == 900