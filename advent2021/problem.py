"""Download puzzle inputs for the 2021 event."""

from __future__ import annotations

import urllib.error
import urllib.request

BASE_URL = "https://adventofcode.com"
YEAR = 2021
TIMEOUT_SECONDS = 30


class ProblemFetchError(Exception):
    """Raised when a puzzle input cannot be downloaded."""


def input_url(day: int) -> str:
    """Return the address of the puzzle input for ``day``."""
    return f"{BASE_URL}/{YEAR}/day/{day}/input"


def get_problem(day: int, session: str) -> str:
    """Fetch the puzzle input for ``day`` using the given session cookie value."""
    request = urllib.request.Request(
        input_url(day), headers={"Cookie": f"session={session}"}
    )
    try:
        with urllib.request.urlopen(request, timeout=TIMEOUT_SECONDS) as response:
            body = response.read()
    except OSError as exc:
        raise ProblemFetchError(f"could not fetch input for day {day}: {exc}") from exc
    return body.decode("utf-8", errors="replace")