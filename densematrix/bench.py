"""Time the element-wise sum of two large zero matrices."""

from __future__ import annotations

import argparse
import time

from densematrix.matrix import Matrix

DEFAULT_SIZE = 20000


def timed_sum(size: int) -> float:
    """Add two size x size zero matrices and return the seconds it took."""
    first = Matrix(size, size)
    second = Matrix(size, size)
    start = time.perf_counter()
    first.add(second)
    return time.perf_counter() - start


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Measure the time of summing two square matrices."
    )
    parser.add_argument(
        "size",
        nargs="?",
        type=int,
        default=DEFAULT_SIZE,
        help=f"number of rows and columns (default {DEFAULT_SIZE})",
    )
    args = parser.parse_args(argv)
    elapsed = timed_sum(args.size)
    print(f"Elapsed time: {elapsed:.6f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())