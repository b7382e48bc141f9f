"""Core primitives: coefficient rings, arithmetic, multiplication, polynomials."""

from core.ring import Ring, zero_like, one_like, is_power_of_two, next_power_of_two
from core.field import ModInt, PRIME
from core.arith import (
    degree, add, sub, multiply_by_monomial, coefficients_equal, trim,
)
from core.multiply import mul_schoolbook, mul_karatsuba, karatsuba
from core.polynomial import Polynomial, multiply_schoolbook, multiply_karatsuba
from core import rng
