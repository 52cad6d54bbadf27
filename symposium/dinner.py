"""The dining philosophers simulation: philosopher routines and the monitor."""

from __future__ import annotations

import threading
import time

from symposium.reporting import Reporter, Status
from symposium.table import Philosopher, Table
from symposium.timing import now_ms, precise_sleep

_DESYNC_US = 30_000
_THINK_FACTOR = 0.42
_LONE_POLL_S = 0.0002
_MONITOR_POLL_S = 0.0001


class Dinner:
    """Runs one simulation over a table, reporting through a Reporter."""

    def __init__(self, table: Table, reporter: Reporter | None = None) -> None:
        self.table = table
        self.reporter = reporter if reporter is not None else Reporter(table)

    def _sleep(self, usec: int) -> None:
        precise_sleep(usec, self.table.is_finished)

    def thinking(self, philosopher: Philosopher, pre_simulation: bool = False) -> None:
        """Report thinking and, with an odd head count, pause to stay fair."""
        if not pre_simulation:
            self.reporter.write(Status.THINKING, philosopher)
        if self.table.philosopher_count % 2 == 0:
            return
        think = max(0, self.table.time_to_eat * 2 - self.table.time_to_sleep)
        self._sleep(int(think * _THINK_FACTOR))

    def desync(self, philosopher: Philosopher) -> None:
        """Stagger philosophers so neighbours do not grab forks at once."""
        if self.table.philosopher_count % 2 == 0:
            if philosopher.id % 2 == 0:
                self._sleep(_DESYNC_US)
        elif philosopher.id % 2 == 1:
            self.thinking(philosopher, pre_simulation=True)

    def eat(self, philosopher: Philosopher) -> None:
        """Take both forks, eat, and mark the philosopher full at the limit."""
        with philosopher.first_fork:
            self.reporter.write(Status.TAKE_FIRST_FORK, philosopher)
            with philosopher.second_fork:
                self.reporter.write(Status.TAKE_SECOND_FORK, philosopher)
                philosopher.record_meal_time(now_ms())
                philosopher.meals_count += 1
                self.reporter.write(Status.EATING, philosopher)
                self._sleep(self.table.time_to_eat)
                limit = self.table.meal_limit
                if limit > 0 and philosopher.meals_count == limit:
                    philosopher.mark_full()

    def _start(self, philosopher: Philosopher) -> None:
        self.table.wait_ready()
        philosopher.record_meal_time(now_ms())
        self.table.register_running()

    def simulate(self, philosopher: Philosopher) -> None:
        """Eat, sleep and think until full or the simulation ends."""
        self._start(philosopher)
        self.desync(philosopher)
        while not self.table.is_finished():
            if philosopher.is_full():
                break
            self.eat(philosopher)
            self.reporter.write(Status.SLEEPING, philosopher)
            self._sleep(self.table.time_to_sleep)
            self.thinking(philosopher)

    def lone(self, philosopher: Philosopher) -> None:
        """A single philosopher holds one fork and waits to starve."""
        self._start(philosopher)
        self.reporter.write(Status.TAKE_FIRST_FORK, philosopher)
        while not self.table.is_finished():
            time.sleep(_LONE_POLL_S)

    def philosopher_died(self, philosopher: Philosopher) -> bool:
        """True if the philosopher has gone longer than time_to_die unfed."""
        if philosopher.is_full():
            return False
        elapsed = now_ms() - philosopher.last_meal_time()
        return elapsed > self.table.time_to_die // 1000

    def monitor(self) -> None:
        """Watch every philosopher and end the simulation on the first death."""
        table = self.table
        while not table.all_running():
            if table.is_finished():
                return
            time.sleep(_MONITOR_POLL_S)
        while not table.is_finished():
            for philosopher in table.philosophers:
                if table.is_finished():
                    break
                if self.philosopher_died(philosopher):
                    table.finish()
                    self.reporter.write(Status.DIED, philosopher)
            time.sleep(_MONITOR_POLL_S)

    def run(self) -> None:
        """Run the whole simulation and return when every thread has ended."""
        table = self.table
        if table.meal_limit == 0:
            return
        target = self.lone if table.philosopher_count == 1 else self.simulate
        threads = [
            threading.Thread(target=target, args=(philosopher,), daemon=True)
            for philosopher in table.philosophers
        ]
        for thread in threads:
            thread.start()
        watcher = threading.Thread(target=self.monitor, daemon=True)
        watcher.start()
        table.start_simulation = now_ms()
        table.mark_ready()
        for thread in threads:
            thread.join()
        table.finish()
        watcher.join()