"""Tab-separated display of a matrix."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

DEFAULT_MATRIX: tuple[tuple[int, ...], ...] = (
    (1, 2, 3),
    (4, 5, 6),
    (7, 8, 9),
    (1, 2, 3),
)


def format_matrix(matrix: Iterable[Iterable[object]]) -> str:
    """Return the matrix with every element followed by a tab and every row by a newline."""
    return "".join(
        "".join(f"{element}\t" for element in row) + "\n" for row in matrix
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print the built-in matrix."""
    parser = argparse.ArgumentParser(
        prog="print-matrix",
        description="Print a 4x3 matrix with tab-separated columns.",
    )
    parser.parse_args(argv)
    print(format_matrix(DEFAULT_MATRIX), end="")
    return 0