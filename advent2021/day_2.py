"""Day 2: steering the submarine."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .problem import get_problem

DAY = 2
_INSTRUCTION = re.compile(r"([a-z]+) ([0-9]+)")


class Action(Enum):
    FORWARD = "forward"
    UP = "up"
    DOWN = "down"
    IDLE = "idle"


@dataclass(frozen=True)
class Instruction:
    action: Action
    value: int


_ACTIONS = {"forward": Action.FORWARD, "up": Action.UP, "down": Action.DOWN}


def parse_instructions(text: str) -> list[Instruction]:
    """Parse lines such as ``forward 5``; unknown words become idle instructions."""
    instructions = []
    for line in text.splitlines():
        match = _INSTRUCTION.search(line)
        if match is None:
            raise ValueError(f"malformed instruction: {line!r}")
        word, value = match.groups()
        instructions.append(Instruction(_ACTIONS.get(word, Action.IDLE), int(value)))
    return instructions


def apply_aim(aim: int, instruction: Instruction) -> int:
    """Return the aim after ``instruction``; aim never drops below zero."""
    if instruction.action is Action.UP:
        return max(0, aim - instruction.value)
    if instruction.action is Action.DOWN:
        return aim + instruction.value
    return aim


def apply_instruction(
    position: tuple[int, int], instruction: Instruction, aim: int | None = None
) -> tuple[int, int]:
    """Move ``(horizontal, depth)``; with an aim, only forward moves change depth."""
    horizontal, depth = position
    action, value = instruction.action, instruction.value
    if action is Action.FORWARD:
        horizontal += value
        if aim is not None:
            depth += value * aim
    elif aim is None and action is Action.UP:
        depth = max(0, depth - value)
    elif aim is None and action is Action.DOWN:
        depth += value
    return horizontal, depth


def solve_part_one(text: str) -> int:
    position = (0, 0)
    for instruction in parse_instructions(text):
        position = apply_instruction(position, instruction, None)
    return position[0] * position[1]


def solve_part_two(text: str) -> int:
    position = (0, 0)
    aim = 0
    for instruction in parse_instructions(text):
        aim = apply_aim(aim, instruction)
        position = apply_instruction(position, instruction, aim)
    return position[0] * position[1]


def run_part_one(session: str) -> int:
    return solve_part_one(get_problem(DAY, session))


def run_part_two(session: str) -> int:
    return solve_part_two(get_problem(DAY, session))