"""This module provides the arithmetic capability contract for expression evaluators.

An evaluator walking an arithmetic syntax tree maps its operator nodes onto
the methods of a Numeric instance, and never looks at the values otherwise.
Exponents form a separate type: for the modular rings, values are residues
while exponents are plain integers. A literal right-hand operand of ** is
parsed directly by parse_exponent(), a computed one is converted by
to_exponent().

Five rings are supported, selected by mode name as in numeric_for_mode():

    - 'int': integers (decimal, 0x hex, 0b binary, 0o or leading-zero octal literals)
    - 'mod': integers modulo n on plain ints, inverses by extended Euclid
    - 'intmod': integers modulo n on intmod.IntMod residues
    - 'f2poly': polynomials over GF(2) (bare hex digit literals)
    - 'f2polymod': polynomials over GF(2) modulo m(x)

Malformed literals and out-of-range exponents raise ValueError, division
(and modulo) by zero or by a non-invertible value raise ZeroDivisionError.
"""

import string
from ffarith import intarith
from ffarith.intmod import IntMod
from ffarith.f2poly import F2Poly
from ffarith.f2polymod import F2PolyMod

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1
MAX_POLY_EXPONENT = 0x7fffffff

MODES = ('int', 'mod', 'intmod', 'f2poly', 'f2polymod')


def _parse_int(s):
    sign, digits = (s[0], s[1:]) if s[:1] in ('+', '-') else ('', s)
    if not (digits.isascii() and digits.isalnum()):
        raise ValueError(f'invalid integer literal {s!r}')
    if len(digits) > 1 and digits[0] == '0' and digits[1].isdigit():
        digits = '0o' + digits[1:]  # legacy octal, e.g. 010 == 8
    try:
        v = int(sign + digits, 0)
    except ValueError as exc:
        raise ValueError(f'invalid integer literal {s!r}') from exc
    if not INT64_MIN <= v <= INT64_MAX:
        raise ValueError(f'integer literal {s!r} out of range')
    return v


def _parse_hex(s):
    if not s or not all(c in string.hexdigits for c in s):
        raise ValueError(f'invalid hex polynomial literal {s!r}')
    v = int(s, 16)
    if v > UINT64_MAX:
        raise ValueError(f'hex polynomial literal {s!r} out of range')
    return v


def _parse_poly_exponent(s):
    if not s.isdecimal():
        raise ValueError(f'invalid exponent {s!r}')
    e = int(s)
    if e > MAX_POLY_EXPONENT:
        raise ValueError(f'exponent {s} too large')
    return e


class Numeric:
    """Abstract base class for the arithmetic of a ring with values T and exponents E."""

    __slots__ = ()

    def from_string(self, s):
        """Convert literal s to a value."""
        raise NotImplementedError('abstract method')

    def parse_exponent(self, s):
        """Convert literal s to an exponent."""
        raise NotImplementedError('abstract method')

    def to_string(self, a):
        return str(a)

    def add(self, a, b):
        return a + b

    def subtract(self, a, b):
        return a - b

    def multiply(self, a, b):
        return a * b

    def divide(self, a, b):
        raise NotImplementedError('abstract method')

    def mod(self, a, b):
        raise NotImplementedError('abstract method')

    def exponentiate(self, a, e):
        return a**e

    def to_exponent(self, a):
        """Convert a computed value to an exponent."""
        raise NotImplementedError('abstract method')

    def negate(self, a):
        return -a


class IntNumeric(Numeric):
    """Integer arithmetic, with division and remainder truncating toward zero."""

    __slots__ = ()

    def from_string(self, s):
        return _parse_int(s)
    parse_exponent = from_string

    def divide(self, a, b):
        if b == 0:
            raise ZeroDivisionError('division by zero')
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q

    def mod(self, a, b):
        if b == 0:
            raise ZeroDivisionError('modulo by zero')
        return a - b * self.divide(a, b)

    def exponentiate(self, a, e):
        if e < 0:
            raise ValueError('negative exponent for integer power')
        return intarith.int_exp(a, e)

    def to_exponent(self, a):
        if not INT64_MIN <= a <= INT64_MAX:
            raise ValueError(f'exponent {a} out of range')
        return a


class ModNumeric(Numeric):
    """Integers modulo n on plain ints in [0, n), inverting by extended Euclid."""

    __slots__ = 'n'

    def __init__(self, n):
        if not isinstance(n, int) or n <= 0:
            raise ValueError(f'modulus must be positive, got {n}')
        self.n = n

    def from_string(self, s):
        return _parse_int(s) % self.n

    def parse_exponent(self, s):
        return _parse_int(s)

    def add(self, a, b):
        return (a + b) % self.n

    def subtract(self, a, b):
        return (a - b) % self.n

    def multiply(self, a, b):
        return (a * b) % self.n

    def _inverse(self, a):
        n = self.n
        g, s, _ = intarith.ext_gcd(a % n, n)
        if abs(g) != 1:
            raise ZeroDivisionError(f'no modular inverse for {a} mod {n}')
        return (s * g) % n

    def divide(self, a, b):
        return (a * self._inverse(b)) % self.n

    def mod(self, a, b):
        if b == 0:
            raise ZeroDivisionError('modulo by zero')
        return (a % b) % self.n

    def exponentiate(self, a, e):
        if e < 0:
            a = self._inverse(a)
            e = -e
        return intarith.int_mod_exp(a, e, self.n)

    def to_exponent(self, a):
        return a

    def negate(self, a):
        return (-a) % self.n


class IntModNumeric(Numeric):
    """Integers modulo n on IntMod residues."""

    __slots__ = 'modulus'

    def __init__(self, modulus):
        if not isinstance(modulus, int) or modulus <= 0:
            raise ValueError(f'modulus must be positive, got {modulus}')
        self.modulus = modulus

    def from_string(self, s):
        return IntMod(_parse_int(s), self.modulus)

    def parse_exponent(self, s):
        return _parse_int(s)

    def divide(self, a, b):
        if b.is_zero():
            raise ZeroDivisionError('division by zero')
        if not b.is_unit():
            raise ZeroDivisionError(f'no modular inverse for {b} mod {self.modulus}')
        return a / b

    def mod(self, a, b):
        raise ValueError('modulo not defined for Z/nZ (use int mode for %)')

    def to_exponent(self, a):
        return a.residue


class F2PolyNumeric(Numeric):
    """Polynomials over GF(2), with division giving the quotient."""

    __slots__ = ()

    def from_string(self, s):
        return F2Poly(_parse_hex(s))

    def parse_exponent(self, s):
        return _parse_poly_exponent(s)

    def divide(self, a, b):
        if b.is_zero():
            raise ZeroDivisionError('division by zero')
        return a // b

    def mod(self, a, b):
        if b.is_zero():
            raise ZeroDivisionError('modulo by zero')
        return a % b

    def to_exponent(self, a):
        if a.value > MAX_POLY_EXPONENT:
            raise ValueError('exponent too large (use small nonnegative integer)')
        return a.value


class F2PolyModNumeric(Numeric):
    """Polynomials over GF(2) modulo a fixed nonzero polynomial m(x)."""

    __slots__ = 'modulus'

    def __init__(self, modulus):
        if isinstance(modulus, str):
            modulus = F2Poly.from_hex(modulus)  # 0x prefix optional
        modulus = F2Poly(modulus)
        if modulus.is_zero():
            raise ValueError('modulus polynomial must be nonzero')
        self.modulus = modulus

    def from_string(self, s):
        return F2PolyMod(_parse_hex(s), self.modulus)

    def parse_exponent(self, s):
        return _parse_poly_exponent(s)

    def divide(self, a, b):
        if b.is_zero():
            raise ZeroDivisionError('division by zero')
        return a / b

    def mod(self, a, b):
        raise ValueError('modulo not defined for F2[x]/m(x) (use f2poly mode for %)')

    def to_exponent(self, a):
        if int(a.residue) > MAX_POLY_EXPONENT:
            raise ValueError('exponent too large (use small nonnegative integer)')
        return int(a.residue)


def numeric_for_mode(mode, modulus=None):
    """Create the Numeric instance for given mode name.

    Modes 'mod' and 'intmod' require a positive integer modulus, and
    mode 'f2polymod' requires a nonzero modulus polynomial (e.g., hex string '0x13').
    """
    if mode not in MODES:
        raise ValueError(f'mode must be one of {", ".join(MODES)}, got {mode!r}')
    if mode == 'int':
        return IntNumeric()
    if mode == 'f2poly':
        return F2PolyNumeric()
    if modulus is None:
        raise ValueError(f'mode {mode} requires a modulus')
    if mode == 'mod':
        return ModNumeric(modulus)
    if mode == 'intmod':
        return IntModNumeric(modulus)
    return F2PolyModNumeric(modulus)
