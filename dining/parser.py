"""Command-line argument validation for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass

LONG_MAX = 9223372036854775807
MAX_PHILOSOPHERS = 200

_WHITESPACE = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """Raised when the command-line arguments are not acceptable."""


@dataclass(frozen=True)
class Settings:
    """Validated parameters of one simulation run, times in milliseconds."""

    num_of_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meal_target: int | None = None


def parse_number(text: str) -> int:
    """Read a signed decimal number, skipping leading whitespace.

    Digits after the first non-digit are ignored. A missing number or a
    magnitude above LONG_MAX raises ArgumentError.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = ""
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits += char
    if not digits:
        raise ArgumentError(f"not a number: {text!r}")
    value = int(digits)
    if value > LONG_MAX:
        raise ArgumentError(f"number out of range: {text!r}")
    return sign * value


def _is_plain_integer(arg: str) -> bool:
    body = arg[1:] if arg[:1] in ("+", "-") else arg
    return bool(body) and all("0" <= char <= "9" for char in body)


def validate_arg(arg: str, minimum: int, maximum: int | None) -> int:
    """Return arg as an int if it is a plain integer within [minimum, maximum].

    A maximum of None means there is no upper bound.
    """
    if not _is_plain_integer(arg):
        raise ArgumentError(f"not an integer: {arg!r}")
    value = parse_number(arg)
    if value < minimum or (maximum is not None and value > maximum):
        raise ArgumentError(f"out of range: {arg!r}")
    return value


def _checked(arg: str, minimum: int, maximum: int | None, message: str) -> int:
    try:
        return validate_arg(arg, minimum, maximum)
    except ArgumentError:
        raise ArgumentError(message) from None


def parse_settings(args: list[str]) -> Settings:
    """Build Settings from the arguments that follow the program name."""
    if len(args) not in (4, 5):
        raise ArgumentError("Wrong number of arguments")
    num = _checked(args[0], 1, MAX_PHILOSOPHERS, "Invalid philosophers number")
    die = _checked(args[1], 1, None, "Invalid time to die")
    eat = _checked(args[2], 1, None, "Invalid time to eat")
    sleep = _checked(args[3], 1, None, "Invalid time to sleep")
    meals = None
    if len(args) == 5:
        meals = _checked(args[4], 1, None, "Meals to eat must be > 0")
    return Settings(num, die, eat, sleep, meals)