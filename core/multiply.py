"""Schoolbook and Karatsuba multiplication of coefficient sequences.

mul_schoolbook is the O(p*q) convolution and doubles as the correctness
oracle. mul_karatsuba recurses on equal power-of-two lengths, splitting by
index range into the caller's buffers instead of copying halves, and falls
back to schoolbook once the length reaches the threshold. karatsuba pads
arbitrary operands so mul_karatsuba's precondition holds.
"""

from typing import Sequence

from core.arith import add, sub, multiply_by_monomial
from core.ring import R, zero_like, is_power_of_two, next_power_of_two


def _convolve(x, xs: int, p: int, y, ys: int, q: int) -> list:
    """Convolution of x[xs:xs+p] with y[ys:ys+q]."""
    result = [zero_like(x[xs])] * (p + q - 1)
    for i in range(p):
        xi = x[xs + i]
        for j in range(q):
            result[i + j] = result[i + j] + xi * y[ys + j]
    return result


def mul_schoolbook(x: Sequence[R], y: Sequence[R]) -> list[R]:
    """Direct convolution: result[k] = sum of x[i]*y[j] over i+j == k."""
    if not len(x) or not len(y):
        raise ValueError("operands must have at least one coefficient")
    return _convolve(x, 0, len(x), y, 0, len(y))


def _karatsuba(x, xs: int, y, ys: int, n: int, threshold: int) -> list:
    """Product of x[xs:xs+n] and y[ys:ys+n]; n is a power of two."""
    assert is_power_of_two(n), f"length {n} is not a power of two"
    if n <= threshold:
        return _convolve(x, xs, n, y, ys, n)

    m = n // 2
    z0 = _karatsuba(x, xs, y, ys, m, threshold)
    z2 = _karatsuba(x, xs + m, y, ys + m, n - m, threshold)
    x_sum = [x[xs + i] + x[xs + m + i] for i in range(m)]
    y_sum = [y[ys + i] + y[ys + m + i] for i in range(m)]
    z3 = _karatsuba(x_sum, 0, y_sum, 0, m, threshold)
    z1 = sub(sub(z3, z0), z2)

    return add(add(z0, multiply_by_monomial(z1, m)),
               multiply_by_monomial(z2, n))


def _check_threshold(threshold: int):
    if not is_power_of_two(threshold):
        raise ValueError(f"threshold must be a positive power of two, got {threshold}")


def mul_karatsuba(x: Sequence[R], y: Sequence[R], threshold: int = 1) -> list[R]:
    """Karatsuba product of two equal-length, power-of-two-length sequences.

    Returns 2n - 1 coefficients. Raises ValueError if the lengths differ or
    are not a power of two, or if threshold is not a positive power of two.
    A threshold at or above n multiplies directly by schoolbook.
    """
    if len(x) != len(y):
        raise ValueError(f"operand lengths differ: {len(x)} != {len(y)}")
    if not is_power_of_two(len(x)):
        raise ValueError(f"operand length {len(x)} is not a power of two")
    _check_threshold(threshold)
    return _karatsuba(x, 0, y, 0, len(x), threshold)


def pad(poly: Sequence[R], length: int) -> list[R]:
    """Copy of poly extended with zeros to `length` coefficients."""
    return list(poly) + [zero_like(poly[0])] * (length - len(poly))


def karatsuba(x: Sequence[R], y: Sequence[R], threshold: int = 1) -> list[R]:
    """Karatsuba product of sequences of any (possibly unequal) length.

    Both operands are zero-padded to the next power of two >= the longer
    length. The padded product is cut back to len(x) + len(y) - 1
    coefficients; everything above that degree is zero.
    """
    if not len(x) or not len(y):
        raise ValueError("operands must have at least one coefficient")
    _check_threshold(threshold)
    n = next_power_of_two(max(len(x), len(y)))
    product = _karatsuba(pad(x, n), 0, pad(y, n), 0, n, threshold)
    return product[:len(x) + len(y) - 1]
