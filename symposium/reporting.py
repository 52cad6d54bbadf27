"""Formatting and serialised printing of philosopher state changes."""

from __future__ import annotations

import sys
import threading
from enum import Enum, auto
from typing import TextIO

from symposium.table import Philosopher, Table
from symposium.timing import now_ms


class Status(Enum):
    EATING = auto()
    SLEEPING = auto()
    THINKING = auto()
    TAKE_FIRST_FORK = auto()
    TAKE_SECOND_FORK = auto()
    DIED = auto()


def format_status(
    status: Status, philosopher: Philosopher, elapsed: int, debug: bool = False
) -> str:
    """Render one log line (without newline) for a state change."""
    prefix = f"{elapsed:<6} {philosopher.id}"
    if status is Status.TAKE_FIRST_FORK:
        if debug:
            return (
                f"{prefix} has taken the 1st fork\t\t\tn: "
                f"{philosopher.first_fork.fork_id}"
            )
        return f"{prefix} has taken a fork"
    if status is Status.TAKE_SECOND_FORK:
        if debug:
            return (
                f"{prefix} has taken the 2nd fork\t\t\tn: "
                f"{philosopher.second_fork.fork_id}"
            )
        return f"{prefix} has taken a fork"
    if status is Status.EATING:
        if debug:
            return f"{prefix} is eating\t\t\t {philosopher.meals_count}"
        return f"{prefix} is eating"
    if status is Status.SLEEPING:
        return f"{prefix} is sleeping"
    if status is Status.THINKING:
        return f"{prefix} is thinking"
    return f"{prefix} died"


class Reporter:
    """Writes status lines for a table, one at a time."""

    def __init__(
        self, table: Table, stream: TextIO | None = None, debug: bool = False
    ) -> None:
        self.table = table
        self.debug = debug
        self._stream = stream
        self._lock = threading.Lock()

    def write(self, status: Status, philosopher: Philosopher) -> str | None:
        """Print the line for ``status`` and return it, or None if suppressed.

        Full philosophers stay silent; after the simulation ends only deaths
        are reported.
        """
        elapsed = now_ms() - self.table.start_simulation
        if philosopher.is_full():
            return None
        with self._lock:
            if status is not Status.DIED and self.table.is_finished():
                return None
            line = format_status(status, philosopher, elapsed, self.debug)
            print(line, file=self._stream or sys.stdout, flush=True)
            return line