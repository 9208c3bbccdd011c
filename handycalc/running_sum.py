"""Running totals of numbers entered one by one until a zero."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence

_FIRST_PROMPT = "Enter a number: "
_NEXT_PROMPT = "Enter another number (or 0 to exit): "


def running_sums(numbers: Iterable[int]) -> Iterator[tuple[int, int]]:
    """Yield each number with the running total so far, stopping at the first zero."""
    total = 0
    for number in numbers:
        if number == 0:
            return
        total += number
        yield number, total


def _prompted_numbers() -> Iterator[int]:
    prompt = _FIRST_PROMPT
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return
        yield int(line)
        prompt = _NEXT_PROMPT


def main(argv: Sequence[str] | None = None) -> int:
    """Sum numbers given as arguments or typed in, until a zero is entered."""
    parser = argparse.ArgumentParser(
        prog="number-sum",
        description="Sum numbers until 0 is entered.",
    )
    parser.add_argument("numbers", nargs="*", type=int, help="numbers to sum")
    args = parser.parse_args(argv)

    print("Number Sum Calculator. Enter 0 to exit.")
    source: Iterable[int] = args.numbers if args.numbers else _prompted_numbers()

    total = 0
    try:
        for number, total in running_sums(source):
            print(f"Entered number: {number}")
            print(f"Sum of numbers entered so far: {total}")
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"The sum of all entered numbers is: {total}")
    return 0