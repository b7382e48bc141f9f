"""Wall-clock timing for multiplication runs."""

import time


class Stopwatch:
    """Measures elapsed wall-clock time between start() and stop()."""

    def __init__(self):
        self.start_time = None
        self.end_time = None

    def start(self):
        self.start_time = time.perf_counter()
        self.end_time = None

    def stop(self):
        self.end_time = time.perf_counter()

    @property
    def elapsed(self) -> float:
        """Seconds elapsed; keeps running until stop() is called."""
        if self.start_time is None:
            return 0.0
        end = self.end_time if self.end_time is not None else time.perf_counter()
        return end - self.start_time

    @property
    def elapsed_us(self) -> float:
        return self.elapsed * 1e6


def time_call(fn, *args, repeat: int = 3):
    """Call fn(*args) `repeat` times; return (last result, best time in µs)."""
    assert repeat >= 1
    watch = Stopwatch()
    best = None
    result = None
    for _ in range(repeat):
        watch.start()
        result = fn(*args)
        watch.stop()
        if best is None or watch.elapsed_us < best:
            best = watch.elapsed_us
    return result, best
