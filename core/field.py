"""Integers modulo n, a ready-made coefficient ring.

Default modulus is the Mersenne prime 2^127 - 1, so ModInt(v) is an element
of F_p unless another modulus is given.
"""

from core import rng

PRIME = (1 << 127) - 1  # 2^127 - 1


class ModInt:
    """Element of Z/nZ."""

    __slots__ = ('value', 'modulus')

    def __init__(self, value: int, modulus: int = PRIME):
        if modulus < 2:
            raise ValueError(f"modulus must be >= 2, got {modulus}")
        self.value = value % modulus
        self.modulus = modulus

    def _coerce(self, other):
        if isinstance(other, int):
            return other % self.modulus
        if isinstance(other, ModInt):
            if other.modulus != self.modulus:
                raise ValueError(f"modulus mismatch: {self.modulus} vs {other.modulus}")
            return other.value
        return None

    def __add__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return ModInt(self.value + v, self.modulus)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return ModInt(self.value - v, self.modulus)

    def __rsub__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return ModInt(v - self.value, self.modulus)

    def __mul__(self, other):
        v = self._coerce(other)
        if v is None:
            return NotImplemented
        return ModInt(self.value * v, self.modulus)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __neg__(self):
        return ModInt(-self.value, self.modulus)

    def __eq__(self, other):
        if isinstance(other, int):
            # Only the canonical residue equals an int, matching __hash__.
            return self.value == other
        if isinstance(other, ModInt):
            return self.modulus == other.modulus and self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        if self.modulus == PRIME:
            return f"F({self.value})"
        return f"Z{self.modulus}({self.value})"

    def __str__(self):
        return str(self.value)

    def __bool__(self):
        return self.value != 0

    def one_like(self):
        return ModInt(1, self.modulus)

    @staticmethod
    def random(modulus: int = PRIME):
        """Return a random element (may be zero)."""
        return ModInt(rng.randbelow(modulus), modulus)

    @staticmethod
    def zero(modulus: int = PRIME):
        return ModInt(0, modulus)

    @staticmethod
    def one(modulus: int = PRIME):
        return ModInt(1, modulus)
