import io
import time

from symposium.dinner import Dinner
from symposium.parsing import Config
from symposium.reporting import Reporter
from symposium.table import Table
from symposium.timing import now_ms, now_us


def make(count, die, eat, sleep, limit=-1):
    table = Table(Config(count, die, eat, sleep, limit))
    stream = io.StringIO()
    dinner = Dinner(table, Reporter(table, stream=stream))
    table.start_simulation = now_ms()
    return table, dinner, stream


def lines(stream):
    return stream.getvalue().splitlines()


def test_zero_meal_limit_runs_nothing():
    table, dinner, stream = make(3, 800_000, 200_000, 200_000, 0)
    dinner.run()
    assert stream.getvalue() == ""
    assert all(p.meals_count == 0 for p in table.philosophers)


def test_lone_philosopher_takes_a_fork_and_dies():
    table, dinner, stream = make(1, 60_000, 60_000, 60_000)
    dinner.run()
    out = lines(stream)
    assert out[0].endswith("1 has taken a fork")
    assert out[-1].endswith("1 died")
    assert len(out) == 2
    assert table.is_finished()


def test_meal_limit_ends_without_death():
    table, dinner, stream = make(4, 800_000, 60_000, 60_000, 2)
    dinner.run()
    out = lines(stream)
    assert not any(line.endswith("died") for line in out)
    assert [p.meals_count for p in table.philosophers] == [2, 2, 2, 2]
    assert all(p.is_full() for p in table.philosophers)
    assert sum(line.endswith("is eating") for line in out) == 8


def test_starvation_reports_exactly_one_death_last():
    table, dinner, stream = make(5, 100_000, 200_000, 60_000)
    dinner.run()
    out = lines(stream)
    deaths = [line for line in out if line.endswith("died")]
    assert len(deaths) == 1
    assert out[-1] == deaths[0]
    assert table.is_finished()


def test_timestamps_do_not_decrease():
    table, dinner, stream = make(3, 800_000, 60_000, 60_000, 1)
    dinner.run()
    stamps = [int(line.split()[0]) for line in lines(stream)]
    assert stamps == sorted(stamps)


def test_eat_records_meal_and_releases_forks():
    table, dinner, stream = make(2, 800_000, 1_000, 1_000, 1)
    philosopher = table.philosophers[0]
    before = now_ms()
    dinner.eat(philosopher)
    out = lines(stream)
    assert [line.split(None, 1)[1] for line in out] == [
        "1 has taken a fork",
        "1 has taken a fork",
        "1 is eating",
    ]
    assert philosopher.meals_count == 1
    assert philosopher.is_full()
    assert philosopher.last_meal_time() >= before
    assert not philosopher.first_fork.lock.locked()
    assert not philosopher.second_fork.lock.locked()


def test_eat_below_limit_keeps_hungry():
    table, dinner, _ = make(2, 800_000, 1_000, 1_000, 3)
    philosopher = table.philosophers[1]
    dinner.eat(philosopher)
    assert philosopher.meals_count == 1
    assert not philosopher.is_full()


def test_philosopher_died_checks_elapsed_time():
    table, dinner, _ = make(2, 500_000, 60_000, 60_000)
    philosopher = table.philosophers[0]
    philosopher.record_meal_time(now_ms() - 1_000)
    assert dinner.philosopher_died(philosopher) is True
    philosopher.record_meal_time(now_ms())
    assert dinner.philosopher_died(philosopher) is False


def test_full_philosopher_never_dies():
    table, dinner, _ = make(2, 500_000, 60_000, 60_000)
    philosopher = table.philosophers[0]
    philosopher.record_meal_time(now_ms() - 1_000)
    philosopher.mark_full()
    assert dinner.philosopher_died(philosopher) is False


def test_thinking_even_count_reports_and_returns():
    table, dinner, stream = make(2, 800_000, 200_000, 60_000)
    start = time.monotonic()
    dinner.thinking(table.philosophers[0], False)
    assert time.monotonic() - start < 0.05
    assert lines(stream)[0].endswith("1 is thinking")


def test_thinking_pre_simulation_is_silent_and_waits():
    table, dinner, stream = make(3, 800_000, 100_000, 60_000)
    start = time.monotonic()
    dinner.thinking(table.philosophers[0], True)
    assert time.monotonic() - start >= 0.05
    assert stream.getvalue() == ""


def test_thinking_returns_early_when_finished():
    table, dinner, stream = make(3, 800_000, 1_000_000, 60_000)
    table.finish()
    start = now_us()
    dinner.thinking(table.philosophers[0], True)
    elapsed = now_us() - start
    assert 0 <= elapsed < 100_000
    assert table.is_finished() is True
    assert stream.getvalue() == ""


def test_desync_even_count_delays_even_ids_only():
    table, dinner, stream = make(2, 800_000, 60_000, 60_000)
    start = time.monotonic()
    dinner.desync(table.philosophers[0])
    assert time.monotonic() - start < 0.02
    start = time.monotonic()
    dinner.desync(table.philosophers[1])
    assert time.monotonic() - start >= 0.029
    assert stream.getvalue() == ""


def test_desync_odd_count_leaves_even_ids():
    table, dinner, stream = make(3, 800_000, 200_000, 60_000)
    start = time.monotonic()
    dinner.desync(table.philosophers[1])
    assert time.monotonic() - start < 0.05
    assert stream.getvalue() == ""