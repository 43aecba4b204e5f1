"""Command-line settings for the dining simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from dinesim.timing import parse_int


class ConfigError(ValueError):
    """Raised when the simulation arguments are unusable."""

    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: int | None = None


def parse_args(args: Sequence[str]) -> Settings:
    """Build settings from four or five positional arguments.

    Every argument must parse to a positive integer.
    """
    if len(args) not in (4, 5):
        raise ConfigError(f"expected 4 or 5 arguments, got {len(args)}")
    values = []
    for arg in args:
        value = parse_int(arg)
        if value <= 0:
            raise ConfigError(f"invalid argument ({arg})", argument=arg)
        values.append(value)
    philosophers, time_to_die, time_to_eat, time_to_sleep, *rest = values
    return Settings(
        philosophers=philosophers,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        must_eat=rest[0] if rest else None,
    )