"""Shared state of a simulation: philosophers, forks and the output log."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from dining.parser import Settings


def now_ms() -> int:
    """Wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


class Philosopher:
    """One seat at the table with its two forks and meal bookkeeping."""

    def __init__(
        self,
        id: int,
        table: Table,
        left_fork: threading.Lock,
        right_fork: threading.Lock,
    ) -> None:
        self.id = id
        self.table = table
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.meals_eaten = 0
        self.eating = False
        self.last_meal = table.start_time
        self._meal_lock = threading.Lock()

    def start_meal(self) -> None:
        """Record that a meal starts now."""
        with self._meal_lock:
            self.last_meal = now_ms()
            self.eating = True

    def finish_meal(self) -> None:
        """Record that the current meal is over."""
        with self._meal_lock:
            self.eating = False
            self.meals_eaten += 1

    def time_since_meal(self) -> int:
        """Milliseconds since the last meal started (or the simulation began)."""
        with self._meal_lock:
            return now_ms() - self.last_meal

    def meals(self) -> int:
        """Number of meals finished so far."""
        with self._meal_lock:
            return self.meals_eaten

    def __repr__(self) -> str:
        return f"Philosopher(id={self.id}, meals_eaten={self.meals_eaten})"


class Table:
    """Holds the settings, forks, philosophers and the shared stop flag."""

    def __init__(self, settings: Settings, output: TextIO | None = None) -> None:
        self.settings = settings
        self.output = output if output is not None else sys.stdout
        self.start_time = now_ms()
        self._over = False
        self._dead_lock = threading.Lock()
        self._write_lock = threading.Lock()
        count = settings.num_of_philos
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(i + 1, self, self.forks[i], self.forks[(i + 1) % count])
            for i in range(count)
        ]

    def elapsed(self) -> int:
        """Milliseconds since the simulation started."""
        return now_ms() - self.start_time

    def is_over(self) -> bool:
        """Whether the simulation has been stopped."""
        with self._dead_lock:
            return self._over

    def stop(self) -> bool:
        """Stop the simulation; return True only for the call that stopped it."""
        with self._dead_lock:
            if self._over:
                return False
            self._over = True
            return True

    def _write(self, line: str) -> None:
        self.output.write(line + "\n")
        self.output.flush()

    def print_action(self, philosopher: Philosopher, action: str) -> None:
        """Log an action with its timestamp unless the simulation is over."""
        with self._write_lock:
            if self.is_over():
                return
            self._write(f"{self.elapsed()} {philosopher.id} {action}")

    def print_death(self, philosopher_id: int) -> None:
        """Log the death of a philosopher."""
        with self._write_lock:
            self._write(f"{self.elapsed()} {philosopher_id} died")