"""Day 3: binary diagnostic."""

from __future__ import annotations

from .problem import get_problem

DAY = 3
BIT_WIDTH = 12


def count_ones(binaries: list[str]) -> list[int]:
    """Count the ones at each of the twelve bit positions."""
    counter = [0] * BIT_WIDTH
    for binary in binaries:
        for index, bit in enumerate(binary):
            if bit == "1":
                counter[index] += 1
    return counter


def counter_to_binary(counter: list[int], input_size: int, up_bit: str, down_bit: str) -> str:
    """Pick ``up_bit`` where at least half the inputs had a one, else ``down_bit``."""
    return "".join(
        up_bit if input_size > 0 and count / input_size >= 0.5 else down_bit
        for count in counter
    )


def find_rating(binaries: list[str], bit_position: int, up_bit: str, down_bit: str) -> int:
    """Filter by the bit criteria until one number is left and return its value."""
    candidates = list(binaries)
    position = bit_position
    while len(candidates) != 1:
        if not candidates:
            raise ValueError("no binary number matches the bit criteria")
        ones = count_ones(candidates)[position]
        half = -(-len(candidates) // 2)
        relevant = up_bit if ones >= half else down_bit
        filtered = [binary for binary in candidates if binary[position] == relevant]
        if position == BIT_WIDTH - 1 and len(filtered) == len(candidates):
            raise ValueError("the bit criteria cannot narrow down to a single number")
        candidates = filtered
        position = min(position + 1, BIT_WIDTH - 1)
    return int(candidates[0], 2)


def solve_part_one(text: str) -> int:
    lines = text.splitlines()
    counter = count_ones(lines)
    gamma = counter_to_binary(counter, len(lines), "1", "0")
    epsilon = counter_to_binary(counter, len(lines), "0", "1")
    return int(gamma, 2) * int(epsilon, 2)


def solve_part_two(text: str) -> int:
    lines = text.splitlines()
    oxygen = find_rating(lines, 0, "1", "0")
    co2 = find_rating(lines, 0, "0", "1")
    return oxygen * co2


def run_part_one(session: str) -> int:
    return solve_part_one(get_problem(DAY, session))


def run_part_two(session: str) -> int:
    return solve_part_two(get_problem(DAY, session))