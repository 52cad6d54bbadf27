# symposium

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread, sits between two forks, and loops through eating, sleeping
and thinking. A monitor thread watches for a philosopher who has gone too
long without starting a meal and announces the death, which ends the dinner.

## Installation

```
pip install .
```

## Usage

```
symposium NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

The same entry point can also be started with `python -m symposium.cli`.

- `NUMBER_OF_PHILOSOPHERS`: how many philosophers, and forks, are at the table.
- `TIME_TO_DIE`: milliseconds a philosopher may go without starting a meal.
- `TIME_TO_EAT`: milliseconds a meal takes; the philosopher holds both forks.
- `TIME_TO_SLEEP`: milliseconds spent sleeping after a meal.
- `MEALS` (optional): a philosopher who has eaten this many times stops and
  falls silent; once all have, the dinner ends. Without it the dinner runs
  until someone dies. A value of `0` ends the dinner before it starts.

Each argument must be a non-negative whole number no greater than
2147483647, written with at most ten digits. Leading whitespace and a single
leading `+` are accepted, and anything after the leading digits is ignored;
a `-` sign or a missing number is rejected. Each of the three times must be
at least 60 ms. With the wrong number of arguments, or invalid input, the
command prints a message and exits with status 1.

Example:

```
symposium 4 410 200 200 3
```

Output is one line per event: the milliseconds since the start of the
dinner, left-aligned in a six-character column, then the philosopher's
number and what happened. An excerpt:

```
0      1 has taken a fork
0      1 has taken a fork
0      1 is eating
200    1 is sleeping
400    1 is thinking
```

The possible events are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. After the dinner has ended only deaths are
printed.

A lone philosopher picks up one fork, can never pick up a second, and dies
once `TIME_TO_DIE` has passed.

## Using it from Python

```python
from symposium.parsing import parse_arguments
from symposium.table import Table
from symposium.dinner import Dinner

config = parse_arguments(["4", "410", "200", "200", "3"])
Dinner(Table(config)).run()
```

- `symposium.parsing.parse_arguments` takes the four or five arguments and
  returns a `Config` whose durations are in microseconds; it raises
  `symposium.parsing.ParseError` (a `ValueError`) on invalid input.
  `parse_number` validates a single argument.
- `symposium.table.Table` builds the forks and `Philosopher` objects from a
  `Config` and holds the shared flags of the dinner.
- `symposium.reporting.Reporter(table, stream=None, debug=False)` prints
  event lines to the given stream (standard output by default). With
  `debug=True` the lines also show which fork was taken and the meal count.
  `Reporter.write` returns the printed line, or `None` when it was
  suppressed. `format_status` renders a line without printing it.
- `symposium.dinner.Dinner(table, reporter=None)` runs the simulation;
  `run()` returns once every thread has finished.

```python
import io

from symposium.dinner import Dinner
from symposium.parsing import parse_arguments
from symposium.reporting import Reporter
from symposium.table import Table

table = Table(parse_arguments(["2", "400", "100", "100", "2"]))
log = io.StringIO()
Dinner(table, Reporter(table, stream=log, debug=True)).run()
print(log.getvalue())
```

## Running the tests

```
pip install .[test]
pytest
```