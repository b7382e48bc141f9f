"""Test utilities: operand generators for several coefficient rings."""

from fractions import Fraction

from core import rng
from core.field import ModInt


def int_coeffs(length, seed, low=-9, high=9):
    rng.set_seed(seed)
    return rng.coefficients(length, low, high)


def ring_operands(length_x, length_y, seed):
    """Yield (name, x, y) with the same integer data in each supported ring."""
    x = int_coeffs(length_x, seed)
    y = int_coeffs(length_y, seed + 1)
    yield 'int', x, y
    # Small integers are exact in binary floating point.
    yield 'float', [float(c) for c in x], [float(c) for c in y]
    yield 'fraction', [Fraction(c, 3) for c in x], [Fraction(c, 7) for c in y]
    yield 'mod17', [ModInt(c, 17) for c in x], [ModInt(c, 17) for c in y]
    yield 'field', [ModInt(c) for c in x], [ModInt(c) for c in y]
