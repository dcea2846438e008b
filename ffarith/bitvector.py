"""This module supports fixed-width bit vectors of at most 64 bits.

Bit position 0 is the least-significant (rightmost) bit. Bit vectors are
the rows of the matrices in module bitmatrix, which reduce them in place;
a bit vector is therefore mutable, unlike the ring elements in this package.

Rendering is selected per call via a format spec: format(v, 'b') gives the
bits zero-padded to the width of the vector (also used by str()), and
format(v, 'x') gives zero-padded hex digits.
"""

from ffarith import bitarith

MAX_BITS = 64


class BitVector:
    """Bit vector of fixed length num_bits, 0 < num_bits <= 64."""

    __slots__ = 'num_bits', 'bits'

    def __init__(self, num_bits, bits=0):
        if not isinstance(num_bits, int):
            raise TypeError(f'int required, got {type(num_bits).__name__}')
        if not 0 < num_bits <= MAX_BITS:
            raise ValueError(f'bit vector size must be in 1..{MAX_BITS}, got {num_bits}')
        self.num_bits = num_bits
        self.bits = bits

    @classmethod
    def from_int(cls, num_bits, bits):
        """Create bit vector of num_bits bits from the low-order bits of integer bits."""
        return cls(num_bits, bits & ((1 << num_bits) - 1))

    def _check_index(self, j):
        if not 0 <= j < self.num_bits:
            raise IndexError(f'index {j} out of bounds 0..{self.num_bits - 1}')

    def get(self, j):
        """Return bit j."""
        self._check_index(j)
        return (self.bits >> j) & 1

    def set(self, j, v):
        """Set bit j to v & 1."""
        self._check_index(j)
        if v & 1:
            self.bits |= 1 << j
        else:
            self.bits &= ~(1 << j)

    def toggle(self, j):
        """Flip bit j."""
        self._check_index(j)
        self.bits ^= 1 << j

    def __getitem__(self, j):
        return self.get(j)

    def __setitem__(self, j, v):
        self.set(j, v)

    def __len__(self):
        return self.num_bits

    def find_leader_pos(self):
        """Position of the lowest set bit, or -1 if all bits are zero.

        This is the pivot position used for row reduction in module bitmatrix.
        """
        return bitarith.lsb_pos(self.masked())

    def masked(self):
        """Return the bits, ignoring positions >= num_bits."""
        return self.bits & ((1 << self.num_bits) - 1)

    def is_zero(self):
        return self.masked() == 0

    def copy(self):
        return BitVector(self.num_bits, self.bits)

    def __format__(self, format_spec):
        if format_spec in ('', 'b'):
            return format(self.masked(), f'0{self.num_bits}b')
        if format_spec == 'x':
            return format(self.masked(), f'0{(self.num_bits + 3) >> 2}x')
        raise ValueError(f'invalid format spec {format_spec!r} for bit vector')

    def __str__(self):
        return format(self, 'b')

    def __repr__(self):
        return f'BitVector({self.num_bits}, 0b{self})'

    def __eq__(self, other):
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.num_bits == other.num_bits and self.masked() == other.masked()
    __hash__ = None  # mutable
