"""Day 4: bingo with a giant squid."""

from __future__ import annotations

from dataclasses import dataclass, field

from .problem import get_problem

DAY = 4


@dataclass
class BingoCard:
    """A bingo card whose slots are marked as numbers are drawn."""

    rows: list[list[int]]
    marked: list[list[bool]] = field(init=False)

    def __post_init__(self) -> None:
        self.marked = [[False] * len(row) for row in self.rows]

    def mark(self, value: int) -> None:
        """Mark every slot holding ``value``."""
        for row, marks in zip(self.rows, self.marked):
            for index, slot in enumerate(row):
                if slot == value:
                    marks[index] = True

    def has_won(self) -> bool:
        """True when a whole row or a whole column is marked."""
        columns_done = any(all(column) for column in zip(*self.marked))
        return columns_done or any(all(row) for row in self.marked)

    def unmarked_sum(self) -> int:
        """Sum of all values not yet marked."""
        return sum(
            slot
            for row, marks in zip(self.rows, self.marked)
            for slot, marked in zip(row, marks)
            if not marked
        )


def parse_bingo(text: str) -> tuple[list[int], list[BingoCard]]:
    """Parse the drawn sequence and the cards that follow it."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty bingo input")
    sequence = [int(value) for value in lines[0].split(",")]
    cards: list[BingoCard] = []
    rows: list[list[int]] = []
    for line in lines[2:]:
        if line == "":
            cards.append(BingoCard(rows))
            rows = []
        else:
            rows.append([int(value) for value in line.split()])
    cards.append(BingoCard(rows))
    return sequence, cards


def solve_part_one(text: str) -> int:
    """Score of the first card to win."""
    sequence, cards = parse_bingo(text)
    for value in sequence:
        for card in cards:
            card.mark(value)
        winner = next((card for card in cards if card.has_won()), None)
        if winner is not None:
            return winner.unmarked_sum() * value
    raise ValueError("no card ever wins")


def solve_part_two(text: str) -> int:
    """Score of the last card to win."""
    sequence, cards = parse_bingo(text)
    for value in sequence:
        for card in cards:
            card.mark(value)
        winners = [card for card in cards if card.has_won()]
        cards = [card for card in cards if not card.has_won()]
        if not cards and winners:
            return winners[-1].unmarked_sum() * value
    raise ValueError("not every card wins")


def run_part_one(session: str) -> int:
    return solve_part_one(get_problem(DAY, session))


def run_part_two(session: str) -> int:
    return solve_part_two(get_problem(DAY, session))