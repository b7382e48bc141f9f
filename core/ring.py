"""Ring capability contract for polynomial coefficients.

Any value supporting +, -, *, == and copy can be a coefficient: int, float,
Fraction, ModInt. Identities are derived from a sample element so the
algorithms never need to know the concrete type.
"""

from typing import Protocol, TypeVar


class Ring(Protocol):
    """Structural type for coefficient values."""

    def __add__(self, other): ...
    def __sub__(self, other): ...
    def __mul__(self, other): ...
    def __eq__(self, other) -> bool: ...


R = TypeVar('R', bound=Ring)


def zero_like(value):
    """Additive identity of value's ring."""
    return value - value


def one_like(value):
    """Multiplicative identity of value's ring."""
    one = getattr(value, 'one_like', None)
    if one is not None:
        return one()
    return type(value)(1)


def is_zero(value) -> bool:
    return value == zero_like(value)


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (n >= 1)."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()
