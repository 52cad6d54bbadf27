"""Shared state of the dinner: forks, philosophers and the table itself."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from symposium.parsing import Config


@dataclass(eq=False)
class Fork:
    """A fork guarded by its own lock; usable as a context manager."""

    fork_id: int
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __enter__(self) -> Fork:
        self.lock.acquire()
        return self

    def __exit__(self, *exc_info) -> None:
        self.lock.release()


@dataclass(eq=False)
class Philosopher:
    """A diner with two forks and lock-protected meal state."""

    id: int
    table: Table = field(repr=False)
    first_fork: Fork
    second_fork: Fork
    meals_count: int = 0
    _full: bool = field(default=False, init=False, repr=False)
    _last_meal_time: int = field(default=0, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def record_meal_time(self, timestamp: int) -> None:
        with self._lock:
            self._last_meal_time = timestamp

    def last_meal_time(self) -> int:
        with self._lock:
            return self._last_meal_time

    def mark_full(self) -> None:
        with self._lock:
            self._full = True

    def is_full(self) -> bool:
        with self._lock:
            return self._full


class Table:
    """Holds the configuration, forks, philosophers and simulation flags."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.philosopher_count = config.philosopher_count
        self.time_to_die = config.time_to_die
        self.time_to_eat = config.time_to_eat
        self.time_to_sleep = config.time_to_sleep
        self.meal_limit = config.meal_limit
        self.start_simulation = 0
        self._lock = threading.Lock()
        self._finished = False
        self._ready = threading.Event()
        self._running = 0
        self.forks = [Fork(index) for index in range(self.philosopher_count)]
        self.philosophers = [
            Philosopher(position + 1, self, *self._forks_for(position))
            for position in range(self.philosopher_count)
        ]

    def _forks_for(self, position: int) -> tuple[Fork, Fork]:
        left = self.forks[position]
        right = self.forks[(position + 1) % self.philosopher_count]
        # Even-numbered philosophers reach left first, odd ones right first.
        if (position + 1) % 2 == 0:
            return left, right
        return right, left

    def is_finished(self) -> bool:
        with self._lock:
            return self._finished

    def finish(self) -> None:
        with self._lock:
            self._finished = True

    def mark_ready(self) -> None:
        self._ready.set()

    def is_ready(self) -> bool:
        return self._ready.is_set()

    def wait_ready(self) -> None:
        """Block until every thread has been released to start."""
        self._ready.wait()

    def register_running(self) -> None:
        with self._lock:
            self._running += 1

    def all_running(self) -> bool:
        with self._lock:
            return self._running == self.philosopher_count