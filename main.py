"""Polynomial multiplication benchmark: entry point.

Multiplies a small demo pair, then times schoolbook and Karatsuba
multiplication (plain and per base-case threshold) for sizes 1 .. 2^max and
prints a CSV table in microseconds.

Usage: python main.py [seed] [max_log2_size]
"""

import asyncio
import sys

from core.polynomial import Polynomial, multiply_schoolbook, multiply_karatsuba
from bench.harness import run_benchmark, power_of_two_sizes
from bench.report import print_report


DEFAULT_SEED = 42
DEFAULT_MAX_LOG2_SIZE = 10
DEFAULT_THRESHOLDS = (1, 2, 32)


def demo():
    a = Polynomial([2, 1])
    b = Polynomial([4, 3, 2])
    c = multiply_karatsuba(a, b)
    assert c == multiply_schoolbook(a, b)
    print(f"({a}) * ({b}) = {c}")
    print()


async def main():
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_SEED
    max_log2 = int(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_MAX_LOG2_SIZE

    demo()
    rows = await run_benchmark(power_of_two_sizes(max_log2), DEFAULT_THRESHOLDS,
                               seed=seed)
    print_report(rows, DEFAULT_THRESHOLDS)


if __name__ == "__main__":
    asyncio.run(main())
