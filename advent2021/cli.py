"""Command line entry point that prints the answers for one day."""

from __future__ import annotations

import argparse
import os
from collections.abc import Callable, Sequence
from pathlib import Path

from . import day_1, day_2, day_3, day_4, day_5
from .problem import ProblemFetchError, get_problem

SESSION_VARIABLE = "AOC_SESSION"
DEFAULT_DAY = 5

_SOLVERS: dict[int, tuple[Callable[[str], int], Callable[[str], int]]] = {
    1: (day_1.solve_part_one, day_1.solve_part_two),
    2: (day_2.solve_part_one, day_2.solve_part_two),
    3: (day_3.solve_part_one, day_3.solve_part_two),
    4: (day_4.solve_part_one, day_4.solve_part_two),
    5: (day_5.solve_part_one, day_5.solve_part_two),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve a day of the 2021 puzzles.")
    parser.add_argument(
        "day", nargs="?", type=int, default=DEFAULT_DAY, choices=sorted(_SOLVERS)
    )
    parser.add_argument("--input", type=Path, help="read the puzzle input from a file")
    parser.add_argument(
        "--session",
        default=os.environ.get(SESSION_VARIABLE),
        help=f"session cookie value (defaults to ${SESSION_VARIABLE})",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.input is not None:
        text = args.input.read_text()
    else:
        if not args.session:
            parser.error(f"a session is required: pass --session or set {SESSION_VARIABLE}")
        try:
            text = get_problem(args.day, args.session)
        except ProblemFetchError:
            print("Something went wrong")
            return 1

    for solve in _SOLVERS[args.day]:
        print(solve(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())