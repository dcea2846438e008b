"""This module supports arithmetic with polynomials over GF(2).

Polynomials over GF(2) are represented as nonnegative integers.
The polynomial b_n x^n + ... + b_1 x + b_0 corresponds
to the integer b_n 2^n + ... + b_1 2 + b_0, for bits b_n,...,b_0.

The operators +, -, *, //, %, ** and function divmod are overloaded.
Using the direct correspondence between polynomials and integers,
the operators <, <=, >, >=, ==, != are overloaded as well, where
the zero polynomial is the smallest polynomial. Polynomials are immutable.

NB: the degree of the zero polynomial is 0 here, not -1. The recursion in
Berlekamp's algorithm (module f2polyfactor) relies on this convention.

GCD, extended GCD, formal derivative and square roots are supported.
Polynomial literals are bare hex digits, e.g. '13' for x^4+x+1.
Use format(a, 'x') or format(a, 'b') to pick hex or binary output.
"""

import random
from ffarith import bitarith


def _degree(a):
    d = bitarith.msb_pos(a)
    return 0 if d < 0 else d


def _mul(a, b):
    # shift-and-XOR for each set bit of b up to its degree
    c = 0
    for j in range(_degree(b) + 1):
        if (b >> j) & 1:
            c ^= a
        a <<= 1
    return c


def _divmod(a, b):
    if b == 0:
        raise ZeroDivisionError('division by zero polynomial')
    if a == 0:
        return 0, 0
    m = _degree(a)
    n = _degree(b)
    if m < n:
        return 0, a
    b <<= m - n
    q = 0
    for i in range(m, n - 1, -1):
        if (a >> i) & 1:
            a ^= b
            q |= 1 << (i - n)
        b >>= 1
    return q, a


def _gcd(a, b):
    if a == 0:
        return b
    if b == 0:
        return a
    while True:
        r = _divmod(a, b)[1]
        if r == 0:
            return b
        a, b = b, r


def _ext_gcd(a, b):
    if a == 0:
        return b, 0, 1
    if b == 0:
        return a, 1, 0
    s1, t = 1, 1
    s, t1 = 0, 0
    while True:
        q, r = _divmod(a, b)
        if r == 0:
            return b, s, t
        a, b = b, r
        s1, s = s, s1 ^ _mul(q, s)
        t1, t = t, t1 ^ _mul(q, t)


def _deriv(a):
    # d/dx x^j = j x^(j-1): keep the odd-position coefficients, moved down by one
    mask = 0x5555555555555555
    while mask < a:
        mask = (mask << 64) | 0x5555555555555555
    return (a >> 1) & mask


def _square_root(a):
    r = 0
    i = 0
    while a >> i:
        if (a >> (i + 1)) & 1:
            return None  # odd-position bit set
        if (a >> i) & 1:
            r |= 1 << (i >> 1)
        i += 2
    return r


def _from_hex(s):
    s = s.strip()
    if s[:2] in ('0x', '0X'):
        s = s[2:]
    if not s or s[0] in '+-_':
        raise ValueError(f'invalid hex polynomial literal {s!r}')
    try:
        return int(s, 16)
    except ValueError as exc:
        raise ValueError(f'invalid hex polynomial literal {s!r}') from exc


def _to_terms(a, x='x'):
    if a == 0:
        return '0'
    s = ''
    for i in range(a.bit_length(), -1, -1):
        if (a >> i) & 1:
            if i == 0:
                s += '+1'     # x^0 = 1
            elif i == 1:
                s += f'+{x}'  # x^1 = x
            else:
                s += f'+{x}^{i}'
    return s[1:]


class F2Poly:
    """Polynomials over GF(2) represented as nonnegative integers."""

    __slots__ = 'value'

    def __init__(self, value=0):
        if isinstance(value, F2Poly):
            value = value.value
        elif isinstance(value, str):
            value = _from_hex(value)
        elif not isinstance(value, int):
            raise TypeError(f'int required, got {type(value).__name__}')
        if value < 0:
            raise ValueError('polynomial bits must be nonnegative')
        self.value = value

    @classmethod
    def from_hex(cls, s):
        """Convert string of hex digits to a polynomial, e.g. '13' for x^4+x+1."""
        return cls(_from_hex(s))

    @staticmethod
    def random(degree):
        """Random polynomial of exactly the given degree, degree >= 0."""
        msb = 1 << degree
        return F2Poly(msb | random.getrandbits(degree) if degree else 1)

    def _set_bit(self, j, v):
        # NB: mutates self, only for building a fresh polynomial bit by bit
        if v & 1:
            self.value |= 1 << j
        else:
            self.value &= ~(1 << j)

    def degree(self):
        """Degree of polynomial (0 for zero polynomial)."""
        return _degree(self.value)

    def __int__(self):
        return self.value

    def __getitem__(self, j):
        """Coefficient of x^j, for 0 <= j <= degree (so iteration gives all coefficients)."""
        if not 0 <= j <= self.degree():
            raise IndexError(f'coefficient index {j} out of range 0..{self.degree()}')
        return (self.value >> j) & 1

    def is_zero(self):
        return self.value == 0

    def is_one(self):
        return self.value == 1

    @staticmethod
    def _coerce(other):
        if isinstance(other, F2Poly):
            return other.value
        if isinstance(other, int):
            return other
        return NotImplemented

    def __add__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return F2Poly(self.value ^ b)
    __radd__ = __add__
    __sub__ = __add__
    __rsub__ = __add__

    def __neg__(self):
        return self

    def __pos__(self):
        return self

    def __mul__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return F2Poly(_mul(self.value, b))
    __rmul__ = __mul__

    def quo_rem(self, other):
        """Quotient and remainder of division by nonzero polynomial other."""
        q, r = _divmod(self.value, F2Poly(other).value)
        return F2Poly(q), F2Poly(r)

    def __divmod__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        q, r = _divmod(self.value, b)
        return F2Poly(q), F2Poly(r)

    def __rdivmod__(self, other):
        a = self._coerce(other)
        if a is NotImplemented:
            return NotImplemented
        q, r = _divmod(a, self.value)
        return F2Poly(q), F2Poly(r)

    def __floordiv__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return F2Poly(_divmod(self.value, b)[0])

    def __rfloordiv__(self, other):
        a = self._coerce(other)
        if a is NotImplemented:
            return NotImplemented
        return F2Poly(_divmod(a, self.value)[0])

    def __mod__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return F2Poly(_divmod(self.value, b)[1])

    def __rmod__(self, other):
        a = self._coerce(other)
        if a is NotImplemented:
            return NotImplemented
        return F2Poly(_divmod(a, self.value)[1])

    def __pow__(self, other):
        """Exponentiation by square-and-multiply, for nonnegative exponents."""
        if not isinstance(other, int):
            return NotImplemented
        e = other
        if self.value == 0:
            if e == 0:
                raise ValueError('0**0 undefined')
            if e < 0:
                raise ZeroDivisionError('division by zero')
            return F2Poly(0)
        if e < 0:
            raise ValueError('negative exponent')
        c = 1
        xp = self.value
        while e:
            if e & 1:
                c = _mul(c, xp)
            e >>= 1
            if e:
                xp = _mul(xp, xp)
        return F2Poly(c)

    def gcd(self, other):
        """Greatest common divisor of this polynomial and other."""
        return F2Poly(_gcd(self.value, F2Poly(other).value))

    def ext_gcd(self, other):
        """Extended GCD for this polynomial a and other b.

        Return g, s, t satisfying s a + t b = g = gcd(a,b).
        """
        g, s, t = _ext_gcd(self.value, F2Poly(other).value)
        return F2Poly(g), F2Poly(s), F2Poly(t)

    def lcm(self, other):
        """Least common multiple of this polynomial and other (both nonzero)."""
        other = F2Poly(other)
        return self * other // self.gcd(other)

    def deriv(self):
        """Formal derivative."""
        return F2Poly(_deriv(self.value))

    def square_root(self):
        """Return (True, r) with r*r equal to this polynomial if it is a square, else (False, None)."""
        r = _square_root(self.value)
        if r is None:
            return False, None
        return True, F2Poly(r)

    def to_terms(self, x='x'):
        """Convert polynomial to a string with sum of powers of x."""
        return _to_terms(self.value, x)

    def __format__(self, format_spec):
        if format_spec in ('', 'x'):
            return format(self.value, 'x')
        if format_spec == 'b':
            return format(self.value, 'b')
        if format_spec == 't':
            return _to_terms(self.value)
        raise ValueError(f'invalid format spec {format_spec!r} for polynomial')

    def __str__(self):
        return format(self.value, 'x')

    def __repr__(self):
        return f'F2Poly(0x{self.value:x})'

    def __lt__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return self.value < b

    def __le__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return self.value <= b

    def __gt__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return self.value > b

    def __ge__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return self.value >= b

    def __eq__(self, other):
        b = self._coerce(other)
        if b is NotImplemented:
            return NotImplemented
        return self.value == b

    def __hash__(self):
        """Make polynomials hashable (e.g., for LRU caching)."""
        return hash((type(self).__name__, self.value))

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return bool(self.value)
