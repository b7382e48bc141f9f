"""Benchmark sweep: schoolbook vs Karatsuba across sizes and thresholds.

Each problem size is an independent unit of work. Units fan out over an
executor (a process pool unless the caller supplies one) and are gathered
back in size order. Every Karatsuba variant is checked against the
schoolbook oracle; a mismatch fails an assertion and aborts the sweep.
"""

import asyncio
from concurrent.futures import Executor, ProcessPoolExecutor
from dataclasses import dataclass, field

from core import rng
from core.arith import coefficients_equal
from core.multiply import mul_schoolbook, mul_karatsuba, karatsuba
from core.ring import is_power_of_two
from bench.timing import time_call


@dataclass
class BenchmarkRow:
    """Timings for one problem size, all in microseconds."""
    size: int
    schoolbook_us: float
    karatsuba_us: float
    threshold_us: dict[int, float] = field(default_factory=dict)


def make_operands(size: int, seed: int) -> tuple[list[int], list[int]]:
    """Two reproducible random integer operands of the given length."""
    gen = rng.DeterministicRNG(seed * 1_000_003 + size)
    x = [gen.randint(-9, 9) for _ in range(size)]
    y = [gen.randint(-9, 9) for _ in range(size)]
    return x, y


def measure_size(size: int, thresholds: tuple[int, ...], seed: int,
                 repeat: int = 3) -> BenchmarkRow:
    """Time every algorithm variant on one pair of operands of `size`."""
    assert is_power_of_two(size), f"size {size} is not a power of two"
    x, y = make_operands(size, seed)

    expected, school_us = time_call(mul_schoolbook, x, y, repeat=repeat)
    result, kara_us = time_call(karatsuba, x, y, repeat=repeat)
    assert coefficients_equal(result, expected), \
        f"karatsuba disagrees with schoolbook at size {size}"

    row = BenchmarkRow(size, school_us, kara_us)
    for t in thresholds:
        result, t_us = time_call(mul_karatsuba, x, y, t, repeat=repeat)
        assert coefficients_equal(result, expected), \
            f"karatsuba(threshold={t}) disagrees with schoolbook at size {size}"
        row.threshold_us[t] = t_us
    return row


async def run_benchmark(sizes: list[int], thresholds: tuple[int, ...],
                        seed: int = 0, repeat: int = 3,
                        executor: Executor | None = None) -> list[BenchmarkRow]:
    """Measure all sizes concurrently; rows come back sorted by size."""
    loop = asyncio.get_running_loop()
    own_executor = executor is None
    if own_executor:
        executor = ProcessPoolExecutor()
    try:
        rows = await asyncio.gather(*[
            loop.run_in_executor(executor, measure_size, size, thresholds, seed, repeat)
            for size in sizes
        ])
    finally:
        if own_executor:
            executor.shutdown()
    return sorted(rows, key=lambda r: r.size)


def power_of_two_sizes(max_log2: int) -> list[int]:
    """[1, 2, 4, ..., 2^max_log2]."""
    return [1 << k for k in range(max_log2 + 1)]
