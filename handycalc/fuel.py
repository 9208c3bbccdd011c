"""Fuel efficiency of a trip in litres per 100 kilometres."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def fuel_efficiency(distance: float, fuel_consumed: float) -> float:
    """Return litres used per 100 km for ``fuel_consumed`` litres over ``distance`` km."""
    if distance == 0:
        raise ValueError("Distance must not be zero")
    return fuel_consumed / distance * 100


def main(argv: Sequence[str] | None = None) -> int:
    """Read distance and fuel used, then print the fuel efficiency."""
    parser = argparse.ArgumentParser(
        prog="trip-fuel",
        description="Calculate fuel efficiency in liters per 100 kilometers.",
    )
    parser.add_argument("distance", nargs="?", type=float, help="distance in kilometers")
    parser.add_argument("fuel", nargs="?", type=float, help="fuel consumed in liters")
    args = parser.parse_args(argv)

    try:
        distance = args.distance
        if distance is None:
            distance = float(input("Enter the distance traveled in kilometers: "))
        fuel = args.fuel
        if fuel is None:
            fuel = float(input("Enter the fuel consumed in liters: "))
        efficiency = fuel_efficiency(distance, fuel)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"\nYour fuel efficiency is: {efficiency:g} liters per 100 kilometers.")
    return 0