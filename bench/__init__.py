"""Benchmark harness: timing, parallel size sweep, report."""

from bench.timing import Stopwatch, time_call
from bench.harness import (
    BenchmarkRow, make_operands, measure_size, run_benchmark, power_of_two_sizes,
)
from bench.report import header, format_row, print_report
