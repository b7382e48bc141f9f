"""CSV-like timing table."""

import sys

from bench.harness import BenchmarkRow


def header(thresholds) -> str:
    cols = ["size", "schoolbook_us", "karatsuba_us"]
    cols += [f"karatsuba_t{t}_us" for t in thresholds]
    return ",".join(cols)


def format_row(row: BenchmarkRow, thresholds) -> str:
    cells = [str(row.size), f"{row.schoolbook_us:.1f}", f"{row.karatsuba_us:.1f}"]
    cells += [f"{row.threshold_us[t]:.1f}" for t in thresholds]
    return ",".join(cells)


def print_report(rows: list[BenchmarkRow], thresholds, file=None):
    out = file or sys.stdout
    print(header(thresholds), file=out)
    for row in rows:
        print(format_row(row, thresholds), file=out)
