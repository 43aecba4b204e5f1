# dinesim

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread and shares one fork with each neighbour. A monitor loop watches for
anyone who has gone too long without eating.

## Installation

```
pip install .
```

## Usage

```
dinesim number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

All times are in milliseconds. The same entry point can also be run as
`python -m dinesim.cli`.

Giving the wrong number of arguments prints a usage line and exits with
status 1. Each argument is read like C's `atoi`. Leading whitespace and one
sign are allowed, and reading stops at the first non-digit, so `12abc` reads
as 12. Every argument must come out as a positive integer. If one does not,
the program prints `Error: invalid argument (<arg>)` and exits with status 1.

Example:

```
dinesim 5 800 200 200 7
```

Each event is printed on its own line as:

```
<elapsed ms> <philosopher id> <action>
```

The action is one of the following:

- `has taken a fork`
- `is eating`
- `is sleeping`
- `is thinking`
- `died`

Philosophers are numbered from 1. Each one loops through eating, sleeping and
thinking. Odd-numbered philosophers pick up their left fork first and
even-numbered ones their right fork first. Even-numbered philosophers also
wait half of `time_to_eat` before their first meal.

The simulation stops in either of two cases:

- A philosopher dies, because more than `time_to_die` milliseconds have passed
  since that philosopher last started a meal, or since the start.
- The fifth argument is given and every philosopher has eaten at least that
  many times.

After the simulation stops, no further status lines are printed.

A single philosopher can only ever pick up one fork. With one philosopher the
program prints `0 1 has taken a fork`, waits `time_to_die` milliseconds, then
prints `<time_to_die> 1 died`.

## Using it from Python

```python
import io

from dinesim.config import parse_args
from dinesim.table import Table

settings = parse_args(["4", "410", "200", "200", "3"])
out = io.StringIO()
victim = Table(settings, out).run()
print(out.getvalue())
print("died:", victim.id if victim else None)
```

The modules and what each provides:

- `dinesim.config.parse_args(args)` takes four or five strings and returns a
  frozen `Settings`. Its fields are `philosophers`, `time_to_die`,
  `time_to_eat`, `time_to_sleep` and `must_eat`; `must_eat` is `None` when not
  given. It raises `ConfigError`, a `ValueError`, for a wrong argument count
  or an argument that is not positive.
- `dinesim.table.Table(settings, out=None)` writes to `out`, which defaults to
  standard output. `Table.run()` returns the `Philosopher` who died, or
  `None` when the run ended because everyone had eaten enough.
- `dinesim.table.run_single(settings, out)` writes the one-philosopher output
  described above.
- `dinesim.timing` provides `current_time_ms()`, `precise_sleep(ms)` and
  `parse_int(text)`.
- `dinesim.cli.main(argv=None)` takes an argument list, which defaults to the
  command line, and returns the exit status.

## Running the tests

```
pip install ".[test]"
pytest
```