"""Command-line entry point of the dinner."""

import sys

from ..table import RED, RESET
from .dinner import Dinner
from .parsing import SettingsError, parse_settings


def main(argv=None) -> int:
    """Parse arguments, run the dinner and return an exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        settings = parse_settings(args)
    except SettingsError as error:
        sys.stdout.write(f"{RED}{error}\n{RESET}")
        return 1
    Dinner(settings, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())