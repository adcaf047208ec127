"""Dining philosophers simulation: argument parsing, a shared table with forks as locks, philosopher actions and a starvation monitor."""

__version__ = "0.1.0"