"""This module collects basic integer arithmetic used throughout ffarith.

GCD, extended GCD, LCM, Euler's totient, integer powers, modular powers,
modular inverses and factorials.

Function euler_phi() counts residues coprime to n by brute force, memoizing
its results in a bounded LRU cache. The cache size is read once, at import,
from environment variable FFARITH_PHI_CACHE_SIZE (or set through command
line option --phi-cache-size): default 1024 entries, 0 disables caching, and
'none' makes the cache unbounded. Use euler_phi.cache_clear() to release the
cached values, and euler_phi.cache_info() to inspect the cache.
"""

import os
import functools
import logging


def gcd(a, b):
    """Greatest common divisor of a and b, nonnegative unless a or b is 0."""
    if a == 0:
        return b
    if b == 0:
        return a
    while True:
        r = a % b
        if r == 0:
            break
        a, b = b, r
    return abs(b)


def ext_gcd(a, b):
    """Extended GCD for integers a and b, with b nonzero.

    Return d, m, n satisfying a m + b n = d = gcd(a,b), using Blankinship's algorithm.
    """
    m1, n = 1, 1
    m, n1 = 0, 0
    c, d = a, b
    while True:
        q, r = divmod(c, d)
        if r == 0:
            break
        c, d = d, r
        m1, m = m, m1 - q * m
        n1, n = n, n1 - q * n
    return d, m, n


def lcm(a, b):
    """Least common multiple of a and b."""
    return a * b // gcd(a, b)


def _phi_cache_size():
    s = os.getenv('FFARITH_PHI_CACHE_SIZE', '1024')
    if s.lower() == 'none':
        return None
    try:
        size = int(s)
    except ValueError:
        logging.warning(f'Ignore invalid totient cache size {s!r}, using 1024')
        size = 1024
    return max(size, 0)


@functools.lru_cache(maxsize=_phi_cache_size())
def euler_phi(n):
    """Euler's totient of n, counting 1 <= i < n with gcd(n, i) = 1 (0 for n <= 1)."""
    if n <= 1:
        return 0
    return sum(1 for i in range(1, n) if gcd(n, i) == 1)


def int_exp(x, e):
    """Return x**e for nonnegative e, by square-and-multiply."""
    if e < 0:
        raise ValueError('negative exponent disallowed')
    xp = x
    c = 1
    while e:
        if e & 1:
            c *= xp
        e >>= 1
        xp *= xp
    return c


def int_mod_exp(x, e, m):
    """Return x**e mod m; negative e requires gcd(x, m) = 1."""
    if e < 0:
        e = -e
        x = int_mod_recip(x, m)
    xp = x % m
    c = 1 % m
    while e:
        if e & 1:
            c = (c * xp) % m
        e >>= 1
        xp = (xp * xp) % m
    return c


def int_mod_recip(x, m):
    """Inverse of x modulo m, computed as x**(phi(m)-1) mod m.

    Costs a totient computation, linear in m, on top of the O(log m) multiplications.
    """
    if gcd(x, m) != 1:
        raise ZeroDivisionError(f'impossible inverse of {x} mod {m}')
    if m == 1:
        return 0
    phi = euler_phi(m)
    return int_mod_exp(x, phi - 1, m)


def factorial(n):
    """Return n! for nonnegative n."""
    if n < 0:
        raise ValueError('factorial of negative number disallowed')
    c = 1
    for k in range(2, n + 1):
        c *= k
    return c
