"""This module supports quotient rings F2[x]/(m(x)) of polynomials over GF(2).

Instantiate F2PolyMod(residue, modulus) for nonzero modulus polynomial m(x)
and apply overloaded operators +, -, *, /, ** and unary - to compute with
residues. Operands may also be given as F2Poly values or plain integers.
The ring is a field if m(x) is irreducible; otherwise only residues coprime
to m(x) are invertible.

Invariant: residue is reduced modulo the modulus.
"""

import random
from ffarith.f2poly import F2Poly


class F2PolyMod:
    """Residue class of polynomials over GF(2) modulo a fixed nonzero polynomial."""

    __slots__ = 'residue', 'modulus'

    def __init__(self, residue, modulus):
        modulus = F2Poly(modulus)
        if modulus.is_zero():
            raise ValueError('modulus polynomial must be nonzero')
        self.residue = F2Poly(residue) % modulus
        self.modulus = modulus

    def _coerce(self, other):
        if isinstance(other, F2PolyMod):
            if other.modulus != self.modulus:
                raise ValueError(f'modulus mismatch: {self.modulus} vs {other.modulus}')
            return other.residue
        if isinstance(other, (F2Poly, int)):
            return other
        return NotImplemented

    def __int__(self):
        return int(self.residue)

    def __add__(self, other):
        """Addition."""
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return F2PolyMod(self.residue + b, self.modulus)
    __radd__ = __add__
    __sub__ = __add__
    __rsub__ = __add__

    def __neg__(self):
        """Negation."""
        return self

    def __pos__(self):
        return self

    def __mul__(self, other):
        """Multiplication."""
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return F2PolyMod(self.residue * b, self.modulus)
    __rmul__ = __mul__

    def recip(self):
        """Multiplicative inverse, via extended GCD of residue and modulus."""
        g, s, _ = self.residue.ext_gcd(self.modulus)
        if not g.is_one():
            raise ZeroDivisionError(f'{self.residue} not invertible mod {self.modulus}')
        return F2PolyMod(s, self.modulus)

    def __truediv__(self, other):
        """Division."""
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return self * F2PolyMod(b, self.modulus).recip()

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
        if self.residue.is_zero():
            if e == 0:
                raise ValueError('0**0 undefined')
            if e < 0:
                raise ZeroDivisionError('division by zero')
            return F2PolyMod(0, self.modulus)
        xp = self
        if e < 0:
            xp = xp.recip()
            e = -e
        c = F2PolyMod(1, self.modulus)
        while e:
            if e & 1:
                c = c * xp
            e >>= 1
            xp = xp * xp
        return c

    def is_zero(self):
        return self.residue.is_zero()

    def is_one(self):
        return self.residue.is_one()

    def is_unit(self):
        return self.residue.gcd(self.modulus).is_one()

    @staticmethod
    def elements(modulus):
        """All residues modulo m, in ascending order (2^deg(m) of them)."""
        modulus = F2Poly(modulus)
        return [F2PolyMod(a, modulus) for a in range(1 << modulus.degree())]

    @staticmethod
    def units(modulus):
        """All invertible residues modulo m, in ascending order."""
        modulus = F2Poly(modulus)
        return [F2PolyMod(a, modulus) for a in range(1, 1 << modulus.degree())
                if modulus.gcd(a).is_one()]

    @staticmethod
    def random(modulus):
        """Uniformly random residue modulo m."""
        modulus = F2Poly(modulus)
        return F2PolyMod(random.getrandbits(modulus.degree()), modulus)

    def __format__(self, format_spec):
        return format(self.residue, format_spec)

    def __str__(self):
        return str(self.residue)

    def __repr__(self):
        return f'F2PolyMod(0x{int(self.residue):x}, 0x{int(self.modulus):x})'

    def __eq__(self, other):
        """Equality test."""
        if isinstance(other, F2PolyMod):
            return self.residue == other.residue and self.modulus == other.modulus
        if isinstance(other, (F2Poly, int)):
            return self.residue == F2Poly(other) % self.modulus
        return NotImplemented

    def __hash__(self):
        return hash((type(self).__name__, self.residue.value, self.modulus.value))

    def __bool__(self):
        """Truth value testing.

        Return False if this residue is zero, True otherwise.
        """
        return bool(self.residue)
