"""What a philosopher does: take forks, eat, sleep and think."""

from __future__ import annotations

import time

from dining.table import Philosopher, Table, now_ms

_POLL_SECONDS = 0.0001
_THINK_MS = 1


def smart_pause(table: Table, duration: int) -> bool:
    """Wait for ``duration`` milliseconds, watching the stop flag.

    Return True if the simulation stopped before the time was up.
    """
    start = now_ms()
    while True:
        if table.is_over():
            return True
        if now_ms() - start >= duration:
            return False
        time.sleep(_POLL_SECONDS)


def take_forks(philosopher: Philosopher) -> bool:
    """Pick up both forks, even seats starting with the right one.

    Return False, holding no fork, if the simulation is already over.
    """
    table = philosopher.table
    if table.is_over():
        return False
    if philosopher.id % 2 == 0:
        first, second = philosopher.right_fork, philosopher.left_fork
    else:
        first, second = philosopher.left_fork, philosopher.right_fork
    first.acquire()
    table.print_action(philosopher, "has taken a fork")
    second.acquire()
    table.print_action(philosopher, "has taken a fork")
    return True


def eat(philosopher: Philosopher) -> None:
    """Take the forks, eat for time_to_eat and put the forks back."""
    table = philosopher.table
    if table.is_over() or not take_forks(philosopher):
        return
    try:
        philosopher.start_meal()
        table.print_action(philosopher, "is eating")
        if smart_pause(table, table.settings.time_to_eat):
            return
        philosopher.finish_meal()
    finally:
        philosopher.left_fork.release()
        philosopher.right_fork.release()


def sleep(philosopher: Philosopher) -> None:
    """Sleep for time_to_sleep unless the simulation is over."""
    table = philosopher.table
    if table.is_over():
        return
    table.print_action(philosopher, "is sleeping")
    smart_pause(table, table.settings.time_to_sleep)


def think(philosopher: Philosopher) -> None:
    """Think briefly unless the simulation is over."""
    table = philosopher.table
    if table.is_over():
        return
    table.print_action(philosopher, "is thinking")
    smart_pause(table, _THINK_MS)