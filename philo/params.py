"""Command-line parameters of the simulation and their validation."""

from dataclasses import dataclass

USAGE = (
    "Usage: ./philo <philo_nbr> <time_to_die> <time_to_eat> "
    "<time_to_sleep> [number_of_times_each_philosopher_must_eat]"
)
LIMITS_MESSAGE = "Minimum 60 seconds for each time and 200 philosophers max"

MAX_PHILOSOPHERS = 200
MIN_TIME_MS = 60

_WHITESPACE = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """Raised when the command-line arguments are not acceptable."""


@dataclass(frozen=True)
class Params:
    """Settings of one simulation; times are in milliseconds."""

    num: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meal_max: int = -1


def parse_number(text: str) -> int:
    """Parse a non-negative decimal number, allowing surrounding whitespace."""
    if not text:
        raise ArgumentError("Empty argument is not allowed")
    rest = text.lstrip(_WHITESPACE)
    if rest.startswith("+"):
        rest = rest[1:]
    elif rest.startswith("-"):
        raise ArgumentError("Only positive values allowed")
    digits_end = 0
    while digits_end < len(rest) and rest[digits_end] in "0123456789":
        digits_end += 1
    digits, tail = rest[:digits_end], rest[digits_end:]
    if tail.lstrip(_WHITESPACE):
        raise ArgumentError("Invalid characters in input")
    return int(digits) if digits else 0


def parse_params(args) -> Params:
    """Build :class:`Params` from the arguments that follow the program name."""
    args = list(args)
    if len(args) not in (4, 5):
        raise ArgumentError(USAGE)
    num, time_to_die, time_to_eat, time_to_sleep = (
        parse_number(arg) for arg in args[:4]
    )
    meal_max = parse_number(args[4]) if len(args) == 5 else -1
    if (
        num <= 0
        or num > MAX_PHILOSOPHERS
        or time_to_die < MIN_TIME_MS
        or time_to_eat < MIN_TIME_MS
        or time_to_sleep < MIN_TIME_MS
    ):
        raise ArgumentError(LIMITS_MESSAGE)
    return Params(num, time_to_die, time_to_eat, time_to_sleep, meal_max)