"""Sum of all integers in an inclusive range."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def range_sum(lower: int, upper: int) -> int:
    """Return the sum of every integer between the two bounds, inclusive, in either order."""
    low, high = min(lower, upper), max(lower, upper)
    count = high - low + 1
    return count * (low + high) // 2


def main(argv: Sequence[str] | None = None) -> int:
    """Read two bounds and print the sum of the integers between them."""
    parser = argparse.ArgumentParser(
        prog="range-sum",
        description="Sum all integers within a range (inclusive).",
    )
    parser.add_argument("lower", nargs="?", type=int, help="lower bound")
    parser.add_argument("upper", nargs="?", type=int, help="upper bound")
    args = parser.parse_args(argv)

    print(
        "This program calculates the sum of all integers "
        "within a specified range (inclusive)."
    )
    try:
        lower = args.lower
        if lower is None:
            lower = int(input("Enter the lower bound: "))
        upper = args.upper
        if upper is None:
            upper = int(input("Enter the upper bound: "))
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"The sum of all integers in the range is: {range_sum(lower, upper)}")
    return 0