"""Count, sum and average of the numbers stored in a text file."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

DEFAULT_OUTPUT = "output.txt"

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class Statistics:
    """How many numbers there were, their sum and their average."""

    count: int
    total: float
    average: float

    def report(self, filename: str) -> str:
        """Return the statistics as the lines of a report about ``filename``."""
        return (
            f"File: {filename}\n"
            f"Total count of numbers: {self.count}\n"
            f"Their sum is: {self.total:g}\n"
            f"Their average is: {self.average:g}\n"
        )


def read_numbers(stream: TextIO) -> list[float]:
    """Read whitespace-separated numbers, stopping at the first text that is not one."""
    numbers: list[float] = []
    for token in stream.read().split():
        match = _NUMBER.match(token)
        if match is None:
            break
        numbers.append(float(match.group()))
        if match.end() != len(token):
            break
    return numbers


def calculate_statistics(numbers: Iterable[float]) -> Statistics:
    """Return the count, sum and average of ``numbers``; the average of none is 0."""
    values = list(numbers)
    count = len(values)
    total = sum(values, 0.0)
    average = total / count if count else 0.0
    return Statistics(count, total, average)


def write_statistics(path: str | Path, filename: str, stats: Statistics) -> None:
    """Write the report for ``filename`` to ``path``."""
    Path(path).write_text(stats.report(filename), encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    """Read numbers from a file, print their statistics and save them to a file."""
    parser = argparse.ArgumentParser(
        prog="file-stats",
        description="Count, sum and average the numbers in a file.",
    )
    parser.add_argument("filename", nargs="?", help="file to read numbers from")
    parser.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT, help="where to write the statistics"
    )
    args = parser.parse_args(argv)

    filename = args.filename
    if filename is None:
        filename = input("Enter the name of the file you want to read from: ")

    try:
        with open(filename, encoding="utf-8") as infile:
            numbers = read_numbers(infile)
    except OSError:
        print(f"Error: Failed to open file: {filename}", file=sys.stderr)
        return 1

    stats = calculate_statistics(numbers)
    print(stats.report(filename), end="")
    try:
        write_statistics(args.output, filename, stats)
    except OSError:
        print(
            f"Warning: Could not open output file '{args.output}'.", file=sys.stderr
        )
    return 0