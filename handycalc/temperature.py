"""Conversion of temperatures from degrees Celsius to degrees Fahrenheit."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

MIN_CELSIUS = -273.15
MAX_CELSIUS = 572.65

_RANGE_MESSAGE = (
    "Invalid Celsius temperature input. "
    "Value must be between -273.15 and 572.65 degrees Celsius."
)


def celsius_to_fahrenheit(celsius: float) -> float:
    """Return ``celsius`` expressed in degrees Fahrenheit.

    Raises ValueError when the value lies outside the supported range.
    """
    if celsius < MIN_CELSIUS or celsius > MAX_CELSIUS:
        raise ValueError(_RANGE_MESSAGE)
    return 1.8 * celsius + 32.0


def main(argv: Sequence[str] | None = None) -> int:
    """Convert a Celsius temperature given as an argument or typed in."""
    parser = argparse.ArgumentParser(
        prog="celsius-to-fahrenheit",
        description="Convert a temperature from Celsius to Fahrenheit.",
    )
    parser.add_argument("celsius", nargs="?", type=float, help="temperature in Celsius")
    args = parser.parse_args(argv)

    try:
        celsius = args.celsius
        if celsius is None:
            celsius = float(input("Enter temperature in Celsius: "))
        fahrenheit = celsius_to_fahrenheit(celsius)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"In Fahrenheit it is: {fahrenheit:g}")
    return 0