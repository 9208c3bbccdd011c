"""Basic arithmetic on a pair of integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class IntegerCalculator:
    """Arithmetic on two integers; division truncates toward zero."""

    number_a: int
    number_b: int

    def add(self) -> int:
        return self.number_a + self.number_b

    def subtract(self) -> int:
        return self.number_a - self.number_b

    def multiply(self) -> int:
        return self.number_a * self.number_b

    def divide(self) -> int:
        """Quotient truncated toward zero."""
        if self.number_b == 0:
            raise ValueError("Division by zero")
        quotient = abs(self.number_a) // abs(self.number_b)
        negative = (self.number_a < 0) != (self.number_b < 0)
        return -quotient if negative else quotient

    def remainder(self) -> int:
        """Remainder carrying the sign of the first number."""
        return self.number_a - self.number_b * self.divide()


def _read_int(value: int | None, prompt: str) -> int:
    return int(input(prompt)) if value is None else value


def main(argv: Sequence[str] | None = None) -> int:
    """Read two integers and print the results of each operation."""
    parser = argparse.ArgumentParser(
        prog="integer-arithmetic",
        description="Show sum, difference, product, quotient and remainder.",
    )
    parser.add_argument("first", nargs="?", type=int, help="the first integer")
    parser.add_argument("second", nargs="?", type=int, help="the second integer")
    args = parser.parse_args(argv)

    try:
        a = _read_int(args.first, "Enter the first integer: ")
        b = _read_int(args.second, "Enter the second integer: ")
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    calc = IntegerCalculator(a, b)
    print("\nArithmetic operations results:")
    print(f"{a} + {b} = {calc.add()}")
    print(f"{a} - {b} = {calc.subtract()}")
    print(f"{a} * {b} = {calc.multiply()}")
    try:
        print(f"{a} / {b} = {calc.divide()}")
        print(f"Remainder after division: {a} % {b} = {calc.remainder()}")
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0