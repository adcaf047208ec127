"""Running the simulation: philosopher threads, the monitor and the entry point."""

from __future__ import annotations

import sys
import threading
import time

from dining import actions
from dining.parser import ArgumentError, parse_settings
from dining.table import Philosopher, Table

_POLL_SECONDS = 0.0001


def check_all_ate(table: Table) -> bool:
    """Stop the simulation if every philosopher reached the meal target."""
    target = table.settings.meal_target
    if target is None:
        return False
    if all(philosopher.meals() >= target for philosopher in table.philosophers):
        table.stop()
        return True
    return False


def routine_loop(philosopher: Philosopher) -> None:
    """Eat, sleep and think until the simulation stops."""
    table = philosopher.table
    if philosopher.id % 2 == 0:
        time.sleep(table.settings.time_to_eat / 2 / 1_000_000)
    while not table.is_over():
        actions.eat(philosopher)
        actions.sleep(philosopher)
        actions.think(philosopher)


def one_philo_case(philosopher: Philosopher) -> None:
    """A lone philosopher holds one fork and starves after time_to_die."""
    table = philosopher.table
    with philosopher.left_fork:
        table.print_action(philosopher, "A fork has been taken")
        philosopher.start_meal()
        time.sleep(table.settings.time_to_die / 1000)
        if table.stop():
            table.print_death(philosopher.id)


def _check_deaths(table: Table) -> bool:
    for philosopher in table.philosophers:
        if philosopher.time_since_meal() > table.settings.time_to_die:
            if table.stop():
                table.print_death(philosopher.id)
                return True
    return False


def monitor_routine(table: Table) -> None:
    """Watch for starvation and for the meal target until the simulation stops."""
    while True:
        if not _check_deaths(table):
            if table.settings.meal_target is not None:
                check_all_ate(table)
            time.sleep(_POLL_SECONDS)
        if table.is_over():
            return


def philo_routine(philosopher: Philosopher) -> None:
    """Thread body for one philosopher."""
    if philosopher.table.settings.num_of_philos == 1:
        one_philo_case(philosopher)
    else:
        routine_loop(philosopher)


def run(table: Table) -> None:
    """Run all philosophers and the monitor until the simulation ends."""
    threads = [
        threading.Thread(target=philo_routine, args=(philosopher,), daemon=True)
        for philosopher in table.philosophers
    ]
    for thread in threads:
        thread.start()
    monitor = threading.Thread(target=monitor_routine, args=(table,), daemon=True)
    monitor.start()
    for thread in threads:
        thread.join()
    monitor.join()


def main(argv: list[str] | None = None) -> int:
    """Parse the arguments, run the simulation and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        settings = parse_settings(args)
    except ArgumentError as error:
        print(error)
        return 1
    run(Table(settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())