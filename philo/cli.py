"""Command-line entry point of the simulation."""

import sys

from .params import ArgumentError, parse_params
from .table import RED, RESET, Table


def main(argv=None) -> int:
    """Parse arguments, run the simulation and return an exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        params = parse_params(args)
    except ArgumentError as error:
        sys.stdout.write(f"{RED}{error}\n{RESET}")
        return 1
    try:
        Table(params, sys.stdout).run()
    except RuntimeError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())