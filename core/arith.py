"""Elementwise arithmetic on dense coefficient sequences (lowest degree first).

Operands of different lengths are accepted: missing high-degree entries read
as the ring's zero. Every function returns a new list.
"""

from typing import Sequence

from core.ring import R, zero_like, is_zero


def degree(poly: Sequence) -> int:
    return len(poly) - 1


def _zero_of(x: Sequence, y: Sequence):
    return zero_like(x[0] if len(x) else y[0])


def add(x: Sequence[R], y: Sequence[R]) -> list[R]:
    """x + y, length max(len(x), len(y))."""
    zero = _zero_of(x, y)
    n = max(len(x), len(y))
    result = [zero] * n
    for i, xi in enumerate(x):
        result[i] = xi
    for i, yi in enumerate(y):
        result[i] = result[i] + yi
    return result


def sub(x: Sequence[R], y: Sequence[R]) -> list[R]:
    """x - y, length max(len(x), len(y))."""
    zero = _zero_of(x, y)
    n = max(len(x), len(y))
    result = [zero] * n
    for i, xi in enumerate(x):
        result[i] = xi
    for i, yi in enumerate(y):
        result[i] = result[i] - yi
    return result


def multiply_by_monomial(poly: Sequence[R], shift: int, scalar=None) -> list[R]:
    """scalar * x^shift * poly.

    Prepends `shift` zeros at the low-degree end. With no scalar the
    coefficients are copied as they are.
    """
    if not len(poly):
        raise ValueError("poly must have at least one coefficient")
    if shift < 0:
        raise ValueError(f"shift must be non-negative, got {shift}")
    zero = zero_like(poly[0])
    if scalar is None:
        return [zero] * shift + list(poly)
    return [zero] * shift + [c * scalar for c in poly]


def coefficients_equal(x: Sequence, y: Sequence) -> bool:
    """Equality up to trailing zero coefficients.

    Compares over the longer length with the shorter side zero-padded, so a
    result padded to a power-of-two length equals its unpadded counterpart.
    """
    n = max(len(x), len(y))
    for i in range(n):
        if i >= len(x):
            if not is_zero(y[i]):
                return False
        elif i >= len(y):
            if not is_zero(x[i]):
                return False
        elif not (x[i] == y[i] or (is_zero(x[i]) and is_zero(y[i]))):
            return False
    return True


def trim(poly: Sequence[R]) -> list[R]:
    """Copy without trailing zeros; always keeps at least one coefficient."""
    end = len(poly)
    while end > 1 and is_zero(poly[end - 1]):
        end -= 1
    return list(poly[:end])
