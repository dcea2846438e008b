"""This module supports the residue rings Z/mZ of integers modulo m.

Instantiate IntMod(residue, modulus) and apply overloaded operators
+, -, *, /, ** and unary - to compute with residues. Integer operands are
accepted as well and are reduced modulo m first. Residues are immutable:
every operation returns a new residue in the range [0, m).

Inverses are computed as x**(phi(m)-1) mod m, see intarith.int_mod_recip().
"""

import random
from ffarith import intarith


class IntMod:
    """Residue class of integers modulo a fixed positive modulus.

    Invariant: 0 <= residue < modulus.
    """

    __slots__ = 'residue', 'modulus'

    def __init__(self, residue, modulus):
        if not isinstance(residue, int) or not isinstance(modulus, int):
            raise TypeError('int residue and modulus required')
        if modulus <= 0:
            raise ValueError(f'modulus must be positive, got {modulus}')
        self.residue = residue % modulus
        self.modulus = modulus

    def _coerce(self, other):
        if isinstance(other, IntMod):
            if other.modulus != self.modulus:
                raise ValueError(f'modulus mismatch: {self.modulus} vs {other.modulus}')
            return other.residue
        if isinstance(other, int):
            return other
        return NotImplemented

    def __int__(self):
        return self.residue

    def __add__(self, other):
        """Addition."""
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return IntMod(self.residue + b, self.modulus)
    __radd__ = __add__

    def __sub__(self, other):
        """Subtraction."""
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return IntMod(self.residue - b, self.modulus)

    def __rsub__(self, other):
        """Subtraction (with reflected arguments)."""
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return IntMod(b - self.residue, self.modulus)

    def __neg__(self):
        """Negation."""
        return IntMod(-self.residue, self.modulus)

    def __pos__(self):
        return self

    def __mul__(self, other):
        """Multiplication."""
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return IntMod(self.residue * b, self.modulus)
    __rmul__ = __mul__

    def recip(self):
        """Multiplicative inverse, raising ZeroDivisionError for zero and zero divisors."""
        return IntMod(intarith.int_mod_recip(self.residue, self.modulus), self.modulus)

    def __truediv__(self, other):
        """Division."""
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return self * IntMod(b, self.modulus).recip()

    def __rtruediv__(self, other):
        """Division (with reflected arguments)."""
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return self.recip() * b

    def __pow__(self, other):
        """Exponentiation, with negative exponents for units."""
        if not isinstance(other, int):
            return NotImplemented
        e = other
        if self.residue == 0:
            if e == 0:
                raise ValueError('0**0 undefined')
            if e < 0:
                raise ZeroDivisionError('division by zero')
            return IntMod(0, self.modulus)
        xp = self
        if e < 0:
            xp = xp.recip()
            e = -e
        c = IntMod(1, self.modulus)
        while e:
            if e & 1:
                c = c * xp
            e >>= 1
            xp = xp * xp
        return c

    def is_zero(self):
        return self.residue == 0

    def is_one(self):
        return self.residue == 1 % self.modulus

    def is_unit(self):
        return intarith.gcd(self.residue, self.modulus) == 1

    @staticmethod
    def elements(modulus):
        """All residues modulo m, in ascending order."""
        return [IntMod(a, modulus) for a in range(modulus)]

    @staticmethod
    def units(modulus):
        """All invertible residues modulo m, in ascending order."""
        return [IntMod(a, modulus) for a in range(modulus) if intarith.gcd(a, modulus) == 1]

    @staticmethod
    def random(modulus):
        """Uniformly random residue modulo m."""
        return IntMod(random.randrange(modulus), modulus)

    def __repr__(self):
        return f'{self.residue}'

    def __eq__(self, other):
        """Equality test."""
        if isinstance(other, IntMod):
            return self.residue == other.residue and self.modulus == other.modulus
        if isinstance(other, int):
            return self.residue == other % self.modulus
        return NotImplemented

    def __hash__(self):
        return hash((type(self).__name__, self.residue, self.modulus))

    def __bool__(self):
        """Truth value testing.

        Return False if this residue is zero, True otherwise.
        """
        return bool(self.residue)
