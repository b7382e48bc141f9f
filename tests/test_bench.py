"""Tests for the benchmark harness, timing and report."""

import asyncio
import io
from concurrent.futures import ThreadPoolExecutor

import pytest

from bench import harness
from bench.harness import (
    BenchmarkRow, make_operands, measure_size, run_benchmark, power_of_two_sizes,
)
from bench.report import header, format_row, print_report
from bench.timing import Stopwatch, time_call


def test_stopwatch():
    w = Stopwatch()
    assert w.elapsed == 0.0
    w.start()
    w.stop()
    assert w.elapsed >= 0.0
    assert w.elapsed_us == pytest.approx(w.elapsed * 1e6)


def test_time_call_returns_result():
    result, us = time_call(sum, [1, 2, 3], repeat=2)
    assert result == 6
    assert us >= 0.0


def test_make_operands_reproducible():
    assert make_operands(8, seed=1) == make_operands(8, seed=1)
    x, y = make_operands(8, seed=1)
    assert len(x) == len(y) == 8


def test_power_of_two_sizes():
    assert power_of_two_sizes(4) == [1, 2, 4, 8, 16]


def test_measure_size():
    row = measure_size(16, (1, 2, 32), seed=3, repeat=1)
    assert row.size == 16
    assert set(row.threshold_us) == {1, 2, 32}


def test_measure_size_rejects_non_power_of_two():
    with pytest.raises(AssertionError):
        measure_size(6, (1,), seed=0, repeat=1)


def test_mismatch_is_fatal(monkeypatch):
    def broken(x, y, threshold):
        return [0] * (2 * len(x) - 1)
    monkeypatch.setattr(harness, 'mul_karatsuba', broken)
    with pytest.raises(AssertionError):
        measure_size(4, (1,), seed=0, repeat=1)


def test_run_benchmark_ordered():
    sizes = [8, 1, 4, 2]
    with ThreadPoolExecutor(max_workers=4) as pool:
        rows = asyncio.run(run_benchmark(sizes, (1, 2), seed=0, repeat=1,
                                         executor=pool))
    assert [r.size for r in rows] == [1, 2, 4, 8]


def test_report_format():
    row = BenchmarkRow(4, 1.5, 2.5, {1: 3.0, 32: 4.0})
    assert header((1, 32)) == \
        "size,schoolbook_us,karatsuba_us,karatsuba_t1_us,karatsuba_t32_us"
    assert format_row(row, (1, 32)) == "4,1.5,2.5,3.0,4.0"


def test_print_report():
    out = io.StringIO()
    print_report([BenchmarkRow(1, 0.0, 0.0, {1: 0.0})], (1,), file=out)
    lines = out.getvalue().splitlines()
    assert lines[0].startswith("size,")
    assert lines[1] == "1,0.0,0.0,0.0"
