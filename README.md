# dining

A simulation of the dining philosophers problem. Every philosopher runs in a
thread of its own. It eats, then sleeps, then thinks, and repeats. It needs
the fork on its left and the fork on its right before it can eat. A second
thread watches each philosopher and ends the simulation when one of them
starves.

## Installation

    pip install .

## Usage

    dining NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]

You can also run it as `python -m dining.cli` with the same arguments.

All times are in milliseconds. Every argument must be a non-negative decimal
integer that fits in a signed 32-bit int. Leading whitespace is allowed. An
argument is invalid if it has a sign, trailing characters, or a value that
overflows. A wrong number of arguments is also an error. On any of these
errors the command writes `Error` to standard error and exits with status 1.
Otherwise it runs the simulation and exits with status 0.

Examples:

    dining 4 410 200 200
    dining 5 800 200 200 7

Each state change goes on its own line. The line holds the milliseconds since
the start, the philosopher's number (counting from 1) and the new state. For
example:

    0 1 has taken a fork
    0 1 has taken a fork
    0 1 is eating
    200 1 is sleeping
    400 1 is thinking

Philosophers with even numbers wait `TIME_TO_EAT / 2` before they start. They
take their right fork first, and odd-numbered philosophers take their left
fork first.

A philosopher dies when `TIME_TO_DIE` passes from the start, or from the moment
it last began eating, and it has not begun eating again. The program then
prints one last line, and no more lines follow:

    410 3 is dead

`MEALS` is optional. If you give it, the simulation also stops once every
philosopher has eaten at least that many times.

A single philosopher has only one fork. It takes that fork, waits
`TIME_TO_DIE`, and is then reported dead.

## Using it from Python

    import sys
    from dining.parsing import parse_args
    from dining.table import Table

    settings = parse_args(["4", "410", "200", "200"])
    someone_died = Table(settings, sys.stdout).run()

- `parse_args` takes four or five strings and returns a `Settings`. If the
  arguments are invalid it raises `ParseError`, a subclass of `ValueError`.
  `parse_int` checks a single argument.
- `Table(settings, output)` writes its status lines to `output`. This is
  standard output when you pass no stream.
- `Table.run()` blocks until the simulation ends. It returns `True` if a
  philosopher died.
- `dining.timing` provides `now_ms()`, a millisecond wall clock, and
  `precise_sleep(ms)`, which sleeps for at least `ms` milliseconds.

## Running the tests

    pip install ".[test]"
    pytest