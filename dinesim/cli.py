"""Command-line entry point for the dining simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from dinesim.config import ConfigError, parse_args
from dinesim.table import Table, run_single

_PROG = "dinesim"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments; return an exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (4, 5):
        print(
            f"Usage: {_PROG} number_of_philosophers time_to_die "
            "time_to_eat time_to_sleep "
            "[number_of_times_each_philosopher_must_eat]"
        )
        return 1
    try:
        settings = parse_args(args)
    except ConfigError as error:
        print(f"Error: {error}")
        return 1
    if settings.philosophers == 1:
        run_single(settings, sys.stdout)
        return 0
    Table(settings, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())