"""This module collects bit tricks on 64-bit words.

Words are nonnegative Python integers below 2**64. The most- and
least-significant set bits are located without loops over the bit
positions, using the parallel bit-fill and sideways-addition tricks
(see aggregate.org/MAGIC). Positions of set bits in the zero word are -1.
"""

MASK64 = (1 << 64) - 1


def msb(x):
    """Return the most-significant set bit of x as a word (0 if x is 0)."""
    x = _fill(x)
    return x & ~(x >> 1)


def lsb(x):
    """Return the least-significant set bit of x as a word (0 if x is 0)."""
    return x & (~x + 1) & MASK64


def ones(x):
    """Return the number of set bits in 64-bit word x."""
    x &= MASK64
    x = (x & 0x5555555555555555) + ((x >> 1) & 0x5555555555555555)
    x = (x & 0x3333333333333333) + ((x >> 2) & 0x3333333333333333)
    x = (x & 0x0F0F0F0F0F0F0F0F) + ((x >> 4) & 0x0F0F0F0F0F0F0F0F)
    x = (x & 0x00FF00FF00FF00FF) + ((x >> 8) & 0x00FF00FF00FF00FF)
    x = (x & 0x0000FFFF0000FFFF) + ((x >> 16) & 0x0000FFFF0000FFFF)
    x = (x & 0x00000000FFFFFFFF) + ((x >> 32) & 0x00000000FFFFFFFF)
    return x


def floor_log2(x):
    """Return floor(log2(x)) for word x > 0, and -1 for x = 0."""
    return ones(_fill(x)) - 1


def msb_pos(x):
    """Return the position of the most-significant set bit of x, or -1 if x is 0."""
    if x == 0:
        return -1
    if x > MASK64:
        return x.bit_length() - 1  # beyond a single word
    return floor_log2(x)


def lsb_pos(x):
    """Return the position of the least-significant set bit of x, or -1 if x is 0."""
    if x == 0:
        return -1
    if x > MASK64:
        return (x & -x).bit_length() - 1
    return floor_log2(lsb(x))


def _fill(x):
    # smear the most-significant set bit into all lower positions
    x |= x >> 1
    x |= x >> 2
    x |= x >> 4
    x |= x >> 8
    x |= x >> 16
    x |= x >> 32
    return x
