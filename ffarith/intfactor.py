"""This module supports factorization of integers and Euler's totient.

Integers are factored by trial division, first by 2 and then by odd
candidates. Trial division stops as soon as the remaining cofactor is known
to be prime, either because the candidates exceed its square root or
because gmpy2 reports it prime, which keeps 64-bit inputs with a large
prime factor tractable.
"""

import gmpy2
from ffarith import intarith
from ffarith.factorization import Factorization


def factor(n):
    """Factor integer n, with the sign recorded as trivial factor -1.

    For n in {-1, 0, 1}, n itself is the (only) trivial factor.
    """
    finfo = Factorization()
    if -1 <= n <= 1:
        finfo.insert_trivial_factor(n)
        return finfo
    if n < 0:
        finfo.insert_trivial_factor(-1)
        n = -n
    p = 2
    reduced = True  # cofactor changed since last primality test
    while n > 1:
        if p * p > n or reduced and gmpy2.is_prime(n):
            finfo.insert_factor(n, 1)
            break
        e = 0
        while n % p == 0:
            n //= p
            e += 1
        if e:
            finfo.insert_factor(p, e)
        reduced = e > 0
        p += 1 if p == 2 else 2
    return finfo


def totient(n):
    """Euler's totient of n > 0 from its factorization, n prod(1 - 1/p)."""
    t = n
    for p, _ in factor(n):
        t = t // p * (p - 1)
    return t


def slow_totient(n):
    """Euler's totient of n by counting coprime residues (0 for n <= 1)."""
    return sum(1 for a in range(1, n) if intarith.gcd(a, n) == 1)
