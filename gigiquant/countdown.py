"""Count rounds of repeatedly stepping a number down by two."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

START = 30


def descend(x: int) -> int:
    """Subtract two while x is positive and return where it stops."""
    while x > 0:
        x -= 2
    return x


def count_rounds(start: int) -> int:
    """Return how many calls of descend bring start down to zero or below."""
    rounds = 0
    value = start
    while value > 0:
        value = descend(value)
        rounds += 1
    return rounds


def main(argv: Sequence[str] | None = None) -> int:
    """Print the number of rounds for the starting value (30 by default)."""
    parser = argparse.ArgumentParser(
        prog="countdown", description="Count rounds of stepping a number down by two."
    )
    parser.add_argument(
        "start", nargs="?", type=int, default=START, help="starting value"
    )
    args = parser.parse_args(argv)
    print(count_rounds(args.start), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())