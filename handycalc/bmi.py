"""Body mass index from height and weight."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def calculate_bmi(height_cm: float, weight_kg: float) -> float:
    """Return the body mass index for a height in centimetres and a weight in kilograms."""
    if height_cm == 0:
        raise ValueError("Height must not be zero")
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def main(argv: Sequence[str] | None = None) -> int:
    """Read height and weight and print the BMI to three decimal places."""
    parser = argparse.ArgumentParser(
        prog="bmi",
        description="Calculate the body mass index.",
    )
    parser.add_argument("height", nargs="?", type=int, help="height in centimetres")
    parser.add_argument("weight", nargs="?", type=int, help="weight in kilograms")
    args = parser.parse_args(argv)

    try:
        height = args.height
        if height is None:
            height = int(input("Enter your height in centimeters: "))
        weight = args.weight
        if weight is None:
            weight = int(input("Enter your weight in kilograms: "))
        bmi = calculate_bmi(height, weight)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Your BMI is: {bmi:.3f}")
    return 0