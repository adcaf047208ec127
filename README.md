# dining

A threaded simulation of the dining philosophers problem. Every philosopher
runs in its own thread. Each fork is a lock that two neighbours share. A
monitor thread watches how long it has been since each philosopher last
started a meal. The simulation ends when a philosopher starves. If a meal
target is given, it also ends once every philosopher has eaten that many
meals.

## Usage

```
dining NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

All times are in milliseconds.

- `NUMBER_OF_PHILOSOPHERS` must be an integer from 1 to 200.
- Every other argument must be a positive integer.
- An argument may carry a leading sign, but may contain nothing other than digits.

Each event is printed on its own line as `<ms since start> <philosopher id> <action>`.
The actions are `has taken a fork`, `is eating`, `is sleeping`, `is thinking` and `died`:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
...
410 3 died
```

After the simulation has stopped, no more actions are printed.

Odd-numbered seats pick up their left fork first and even-numbered seats their
right fork first.

For example, this run lets five philosophers each eat seven meals:

```
dining 5 800 200 200 7
```

With a single philosopher, the line `A fork has been taken` is printed and the
philosopher dies after `TIME_TO_DIE`:

```
dining 1 800 200 200
```

If the arguments are invalid, the command prints a message such as
`Invalid time to eat` or `Wrong number of arguments` and exits with status 1.

## As a library

```python
import sys

from dining.parser import parse_settings
from dining.table import Table
from dining.simulation import run

settings = parse_settings(["4", "410", "200", "200", "3"])
table = Table(settings, sys.stdout)
run(table)
```

- `dining.parser.parse_settings(args)` takes the arguments that follow the
  program name and returns a frozen `Settings`. Its fields are
  `num_of_philos`, `time_to_die`, `time_to_eat`, `time_to_sleep` and
  `meal_target`. `meal_target` is `None` when no target is given. Invalid
  arguments raise `ArgumentError`, which is a `ValueError`.
- `dining.table.Table(settings, output=None)` holds the forks, the
  `philosophers` and the stop flag. Output goes to `sys.stdout` unless another
  text stream is given. `stop()` returns `True` only to the call that actually
  stopped the simulation.
- `dining.actions` provides `take_forks`, `eat`, `sleep`, `think` and
  `smart_pause`.
- `dining.simulation.run(table)` starts the philosopher threads and the
  monitor, then blocks until they finish. `main(argv=None)` is the command's
  entry point and returns its exit status.