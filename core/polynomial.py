"""Dense univariate polynomials over a caller-supplied ring."""

from typing import Iterable

from core import rng
from core.arith import add, sub, multiply_by_monomial, coefficients_equal, trim
from core.multiply import mul_schoolbook, karatsuba
from core.ring import is_zero


class Polynomial:
    """Polynomial with coeffs[0] = constant term.

    The coefficient list is never trimmed, so leading (high-degree) entries
    may be zero. Equality, hashing and rendering ignore those entries.
    """

    def __init__(self, coeffs: Iterable):
        self.coeffs = list(coeffs)
        if not self.coeffs:
            raise ValueError("a polynomial needs at least one coefficient")

    @classmethod
    def from_coefficients(cls, coeffs: Iterable) -> 'Polynomial':
        return cls(coeffs)

    @property
    def degree(self) -> int:
        return len(self.coeffs) - 1

    def __len__(self):
        return len(self.coeffs)

    def __iter__(self):
        return iter(self.coeffs)

    def __getitem__(self, i):
        return self.coeffs[i]

    def evaluate(self, x):
        """Evaluate polynomial at x using Horner's method."""
        result = self.coeffs[-1]
        for coeff in reversed(self.coeffs[:-1]):
            result = result * x + coeff
        return result

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(add(self.coeffs, other.coeffs))

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(sub(self.coeffs, other.coeffs))

    def __mul__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return multiply_karatsuba(self, other)

    def shift(self, k: int, scalar=None) -> 'Polynomial':
        """scalar * x^k * self."""
        return Polynomial(multiply_by_monomial(self.coeffs, k, scalar))

    def trimmed(self) -> 'Polynomial':
        return Polynomial(trim(self.coeffs))

    def is_zero(self) -> bool:
        return all(is_zero(c) for c in self.coeffs)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return coefficients_equal(self.coeffs, other.coeffs)

    def __hash__(self):
        # Trailing zeros are dropped first so equal polynomials hash alike.
        return hash(tuple(trim(self.coeffs)))

    def to_string(self, var: str = 'x') -> str:
        """Sum of non-zero terms, highest degree first."""
        terms = []
        for i in range(len(self.coeffs) - 1, -1, -1):
            coeff = self.coeffs[i]
            if is_zero(coeff):
                continue
            if i == 0:
                terms.append(f"{coeff}")
            elif i == 1:
                terms.append(f"{coeff}{var}")
            else:
                terms.append(f"{coeff}{var}^{i}")
        return " + ".join(terms) if terms else "0"

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Polynomial({self.coeffs!r})"

    @staticmethod
    def random(degree: int, sample=None) -> 'Polynomial':
        """Random polynomial of exactly the given degree.

        sample() draws one coefficient; the default draws integers in
        [-9, 9] from core.rng. The leading coefficient is redrawn until it is
        non-zero.
        """
        if sample is None:
            def sample():
                return rng.randint(-9, 9)
        coeffs = [sample() for _ in range(degree)]
        lead = sample()
        while is_zero(lead):
            lead = sample()
        coeffs.append(lead)
        return Polynomial(coeffs)


def multiply_schoolbook(a: Polynomial, b: Polynomial) -> Polynomial:
    return Polynomial(mul_schoolbook(a.coeffs, b.coeffs))


def multiply_karatsuba(a: Polynomial, b: Polynomial, threshold: int = 1) -> Polynomial:
    """Karatsuba product; operands may have any lengths."""
    return Polynomial(karatsuba(a.coeffs, b.coeffs, threshold))
