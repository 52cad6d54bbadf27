"""Wall-clock helpers and a sleep that stays accurate near its deadline."""

from __future__ import annotations

import time
from collections.abc import Callable


def now_seconds() -> int:
    """Current time in whole seconds."""
    return time.time_ns() // 1_000_000_000


def now_ms() -> int:
    """Current time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def now_us() -> int:
    """Current time in whole microseconds."""
    return time.time_ns() // 1_000


def precise_sleep(usec: int, is_finished: Callable[[], bool] | None = None) -> None:
    """Sleep for ``usec`` microseconds, spinning for the final millisecond.

    Returns early as soon as ``is_finished`` reports True.
    """
    start = now_us()
    while now_us() - start < usec:
        if is_finished is not None and is_finished():
            return
        remaining = usec - (now_us() - start)
        if remaining > 1_000:
            time.sleep(remaining / 2 / 1_000_000)
        else:
            while now_us() - start < usec:
                pass