"""Seedable randomness for reproducible operands.

set_seed(n) makes every later draw repeatable; set_seed(None) switches back
to os.urandom.
"""

import os
import random as _random


class DeterministicRNG:
    """Integer draws from a seeded Random, or from os.urandom when unseeded."""

    def __init__(self, seed=None):
        self._rng = _random.Random(seed) if seed is not None else None

    def randbelow(self, n: int) -> int:
        if self._rng is None:
            return int.from_bytes(os.urandom(16), 'big') % n
        return self._rng.randrange(n)

    def randint(self, a: int, b: int) -> int:
        """Uniform integer in [a, b]."""
        return a + self.randbelow(b - a + 1)


_global_rng = DeterministicRNG()


def set_seed(seed: int | None):
    global _global_rng
    _global_rng = DeterministicRNG(seed)


def randbelow(n: int) -> int:
    return _global_rng.randbelow(n)


def randint(a: int, b: int) -> int:
    return _global_rng.randint(a, b)


def coefficients(length: int, low: int = -9, high: int = 9) -> list[int]:
    """Random integer coefficient list of the given length."""
    return [randint(low, high) for _ in range(length)]
