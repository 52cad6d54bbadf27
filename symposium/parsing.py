"""Command-line argument validation for the dining simulation."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

INT_MAX = 2_147_483_647
MIN_TIME_US = 60_000
MAX_DIGITS = 10

_SPACES = "\t\n\v\f\r "
_LEADING_DIGITS = re.compile(r"[0-9]*")

USAGE = (
    "Wrong input:\n"
    "Correct usage: <philosophers> <time_to_die> <time_to_eat> "
    "<time_to_sleep> [meals]"
)


class ParseError(ValueError):
    """Raised when the simulation arguments are malformed."""


@dataclass(frozen=True)
class Config:
    """Simulation parameters; all durations are in microseconds."""

    philosopher_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meal_limit: int = -1


def parse_number(text: str) -> int:
    """Parse a non-negative integer that fits in a signed 32-bit int.

    Leading whitespace and a single '+' are accepted; anything after the
    leading run of digits is ignored.
    """
    rest = text.lstrip(_SPACES)
    if rest.startswith("+"):
        rest = rest[1:]
    elif rest.startswith("-"):
        raise ParseError(
            "Invalid negative number input. Use only positive integers!"
        )
    digits = _LEADING_DIGITS.match(rest).group()
    if not digits:
        raise ParseError("Input is not a digit.")
    if len(digits) > MAX_DIGITS or int(digits) > INT_MAX:
        raise ParseError("Input is too big. Use only positive integers!")
    return int(digits)


def parse_arguments(args: Sequence[str]) -> Config:
    """Build a Config from the four or five user-supplied arguments."""
    args = list(args)
    if len(args) not in (4, 5):
        raise ParseError(USAGE)
    count = parse_number(args[0])
    die, eat, sleep = (parse_number(arg) * 1000 for arg in args[1:4])
    if min(die, eat, sleep) < MIN_TIME_US:
        raise ParseError("Use timestamps greater than 60ms")
    meal_limit = parse_number(args[4]) if len(args) == 5 else -1
    return Config(
        philosopher_count=count,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        meal_limit=meal_limit,
    )