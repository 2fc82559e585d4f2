"""Parsing and validation of the dinner settings."""

from dataclasses import dataclass

USAGE = (
    "Usage: ./philo <philo_nbr> <time_to_die> <time_to_eat> "
    "<time_to_sleep> [number_of_times_each_philosopher_must_eat]"
)

LONG_MAX = 2**63 - 1
MAX_PHILOSOPHERS = 200
MIN_TIME_MS = 60

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class SettingsError(ValueError):
    """Raised when the dinner settings are not acceptable."""


@dataclass(frozen=True)
class Settings:
    """Settings of one dinner; times are in milliseconds."""

    philo_nbr: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    limit_meals: int = -1


def parse_long(text: str) -> int:
    """Parse a non-negative decimal number that fits a signed 64-bit long."""
    if not text:
        raise SettingsError("Empty argument is not allowed")
    rest = text.lstrip(_WHITESPACE)
    if rest.startswith("+"):
        rest = rest[1:]
    elif rest.startswith("-"):
        raise SettingsError("Only positive values allowed")
    result = 0
    consumed = 0
    for char in rest:
        if char not in _DIGITS:
            break
        digit = int(char)
        if result > (LONG_MAX - digit) // 10:
            raise SettingsError("Number too large")
        result = result * 10 + digit
        consumed += 1
    if rest[consumed:].lstrip(_WHITESPACE):
        raise SettingsError("Invalid characters in input")
    return result


def parse_settings(args) -> Settings:
    """Build :class:`Settings` from the arguments that follow the program name."""
    args = list(args)
    if len(args) not in (4, 5):
        raise SettingsError(USAGE)
    philo_nbr, time_to_die, time_to_eat, time_to_sleep = (
        parse_long(arg) for arg in args[:4]
    )
    has_limit = len(args) == 5
    limit_meals = parse_long(args[4]) if has_limit else -1
    if has_limit and limit_meals <= 0:
        raise SettingsError("Limit_meals must be a positive number")
    if philo_nbr > MAX_PHILOSOPHERS:
        raise SettingsError("Too many philosophers (max 200)")
    if philo_nbr == 0:
        raise SettingsError("There should at least be 1 philosopher")
    if min(time_to_die, time_to_eat, time_to_sleep) < MIN_TIME_MS:
        raise SettingsError("Timestamps must be at least 60 seconds")
    return Settings(philo_nbr, time_to_die, time_to_eat, time_to_sleep, limit_meals)