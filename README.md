# philo

A simulation of the dining philosophers problem. Each philosopher runs in its own
thread. It picks up the two forks beside it, eats, sleeps and thinks. A monitor
thread watches for a philosopher who starves. It also watches for the moment when
every philosopher has eaten enough.

## Installation

```
pip install .
```

## Usage

```
philo <philo_nbr> <time_to_die> <time_to_eat> <time_to_sleep> [number_of_times_each_philosopher_must_eat]
```

All times are in milliseconds. Each time must be at least 60, and there can be
1 to 200 philosophers. Arguments must be non-negative integers. Blanks before and
after a number are allowed, and so is a leading `+`. A meal count of 0 means
there is no limit.

Each change of state is printed on its own line. The line holds the time in
milliseconds since the start (padded to three digits), the philosopher's position
(counted from 0) and the state. States are coloured with ANSI escape codes, and a
death is printed in red.

```
000 0 has taken a fork
000 0 has taken a fork
000 0 is eating
200 0 is sleeping
...
411 3 died
```

The run ends when a philosopher dies. If a meal count was given, it also ends,
without a message, once every philosopher has eaten that many times. With invalid
arguments the command prints a message in red and exits with status 1. The same
happens if a thread cannot be started.

### Earlier variant

```
philo-legacy 5 800 200 200 7
```

`philo-legacy` takes the same arguments, with these differences:

- philosophers are numbered from 1;
- timestamps are not padded;
- the meal count, if given, must be positive;
- numbers larger than a signed 64-bit integer are rejected.

Each philosopher waits for its forks, blocking on them. Every turn starts a
short-lived thread that waits one dying period and then checks whether that
philosopher has starved.

## Library use

```python
import sys
from philo.params import parse_params
from philo.table import Table

params = parse_params(["4", "410", "200", "200", "3"])
Table(params, sys.stdout).run()
```

- `philo.params.parse_params` returns a frozen `Params`.
- `philo.params.parse_number` parses a single argument.
- Both raise `philo.params.ArgumentError`, a `ValueError`, for invalid input.
- `Table` writes its output to any text stream. `Table.is_dead()` tells whether
  the run has stopped.

The earlier variant lives in `philo.legacy.parsing` and `philo.legacy.dinner`.
`philo.legacy.parsing` has `parse_settings`, `parse_long`, `Settings` and
`SettingsError`. `philo.legacy.dinner` has `Dinner`, which you use as
`Dinner(settings, out).run()`.

## Tests

```
pip install .[test]
pytest
```