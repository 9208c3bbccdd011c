"""A time of day made of an hour and a minute."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

_INVALID_TIME_MESSAGE = (
    "Invalid time! Please enter hour in range 0-23 and minute in range 0-59."
)


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """A validated time of day; the hour runs 0-23 and the minute 0-59."""

    hour: int = 0
    minute: int = 0

    def __post_init__(self) -> None:
        if not (0 <= self.hour <= 23 and 0 <= self.minute <= 59):
            raise ValueError(_INVALID_TIME_MESSAGE)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


def parse_time(text: str) -> TimeOfDay:
    """Parse an hour and a minute separated by whitespace, such as ``"11 45"``."""
    parts = text.split()
    if len(parts) < 2:
        raise ValueError(f"Expected an hour and a minute, got {text!r}")
    try:
        hour, minute = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Expected two integers, got {text!r}") from None
    return TimeOfDay(hour, minute)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a time of day and display it as HH:MM."""
    parser = argparse.ArgumentParser(
        prog="time-of-day",
        description="Read an hour and a minute and display the time.",
    )
    parser.add_argument("time", nargs="*", help="hour and minute")
    args = parser.parse_args(argv)

    if args.time:
        text = " ".join(args.time)
    else:
        text = input("Enter hour and minute separated by a space (e.g., 11 45): ")

    try:
        time_of_day = parse_time(text)
    except ValueError:
        print(_INVALID_TIME_MESSAGE)
        print("Error: Invalid time entered.")
        return 1

    print(f"Time: {time_of_day}")
    return 0