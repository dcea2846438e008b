"""This module supports factorization of polynomials over GF(2).

Polynomials are factored into irreducibles with Berlekamp's algorithm.
A square-free decomposition comes first: with d the formal derivative of f,
g = gcd(f, d) splits off repeated factors, and if d = 0 then f is a perfect
square (in characteristic 2) whose square root is factored instead.

Each square-free part f of degree n is then split using the nullspace of
the linear map h -> h^2 - h on F2[x]/(f), represented as an n x n matrix
over GF(2). The nullspace has dimension equal to the number of irreducible
factors of f, and for a basis vector h other than the constants, gcd(f, h)
and gcd(f, h+1) are proper factors of f.

Also provided are an irreducibility test, searches for irreducible
polynomials, and the totient of F2[x]/(f).
"""

import logging
from ffarith import InvariantError
from ffarith.bitmatrix import BitMatrix
from ffarith.f2poly import F2Poly
from ffarith.factorization import Factorization


class PolyFactorization(Factorization):
    """Factorization of a polynomial over GF(2) into irreducible polynomials."""

    __slots__ = ()

    one = F2Poly(1)


def factor(f):
    """Factor polynomial f into irreducibles.

    A polynomial of degree 0 (including the zero polynomial) is its own trivial factor.
    """
    f = F2Poly(f)
    finfo = PolyFactorization()
    if f.degree() == 0:
        finfo.insert_trivial_factor(f)
        return finfo
    pre_berlekamp(f, finfo, recurse=True)
    return finfo


def pre_berlekamp(f, finfo, recurse=True):
    """Split f into square-free parts, and feed these to berlekamp()."""
    d = f.deriv()
    g = f.gcd(d)

    if g.is_zero():
        if not f.is_zero():
            raise InvariantError('pre_berlekamp: gcd(f, f\') = 0 for nonzero f')
        finfo.insert_factor(f, 1)
        return
    if g.is_one():
        berlekamp(f, finfo, recurse)
        return
    if d.is_zero():
        ok, h = f.square_root()
        if not ok:
            raise InvariantError('pre_berlekamp: f\' = 0 but f is not a square')
        sfinfo = PolyFactorization()
        pre_berlekamp(h, sfinfo, recurse)
        sfinfo.exp_all(2)
        finfo.merge(sfinfo)
        return
    q = f // g
    pre_berlekamp(g, finfo, recurse)
    pre_berlekamp(q, finfo, recurse)


def berlekamp_matrix(f):
    """Matrix of h -> h^2 - h on F2[x]/(f), for f of degree n >= 1.

    Entry (i, j) is the coefficient of x^i in x^(2j) mod f, plus 1 on the diagonal,
    so that the nullspace consists of the coefficient vectors of all h with h^2 = h mod f.
    """
    n = f.degree()
    x2modf = F2Poly(4) % f
    x2j = F2Poly(1)
    m = BitMatrix(n, n)
    for j in range(n):
        for i in range(n):
            if (x2j.value >> i) & 1:
                m.rows[i].bits |= 1 << j
        x2j = x2j * x2modf % f
    for i in range(n):
        m.rows[i].toggle(i)
    return m


def berlekamp(f, finfo, recurse=True):
    """Factor square-free polynomial f, inserting the factors found into finfo.

    Unless recurse is set, f is only split once, which suffices to test irreducibility.
    """
    n = f.degree()
    if n < 2:
        finfo.insert_factor(f, 1)
        return
    m = berlekamp_matrix(f)
    m.row_echelon_form()
    rank = m.rank_rr()
    dimker = n - rank
    if dimker == 1:
        finfo.insert_factor(f, 1)
        return
    basis = m.kernel_basis()
    if basis is None or basis.num_rows != dimker:
        raise InvariantError('berlekamp: nullspace basis has wrong dimension')
    one = F2Poly(1)
    for v in basis:
        h = F2Poly(0)
        for i in range(n):
            h._set_bit(i, v.get(i))
        hc = h + one
        if h * h % f != h or hc * hc % f != hc:
            raise InvariantError('berlekamp: nullspace vector h with h^2 != h mod f')
        f1 = f.gcd(h)
        f2 = f.gcd(hc)
        if f1.is_one() or f2.is_one():
            continue
        logging.debug(f'Berlekamp split {f} into {f1} * {f2}')
        if dimker == 2 or not recurse:
            finfo.insert_factor(f1, 1)
            finfo.insert_factor(f2, 1)
        else:
            pre_berlekamp(f1, finfo, recurse)
            pre_berlekamp(f2, finfo, recurse)
        return
    raise InvariantError(f'berlekamp: no nullspace vector splits {f}')


def irr(f):
    """Test polynomial f for irreducibility."""
    f = F2Poly(f)
    d = f.degree()
    if d == 0:
        return False
    if d == 1:
        return True
    finfo = PolyFactorization()
    pre_berlekamp(f, finfo, recurse=False)
    return finfo.num_factors() == 1


def lowest_irr(degree):
    """Return the smallest irreducible polynomial of given degree with nonzero constant term."""
    if degree < 1:
        raise ValueError(f'degree must be positive, got {degree}')
    a = (1 << degree) | 1
    while a >> degree == 1:
        if irr(a):
            return F2Poly(a)
        a += 2
    raise InvariantError(f'lowest_irr: no irreducible polynomial of degree {degree}')


def random_irr(degree):
    """Return a random irreducible polynomial of given degree with nonzero constant term.

    The search is not capped; it takes about degree/2 attempts on average.
    """
    if degree < 1:
        raise ValueError(f'degree must be positive, got {degree}')
    attempts = 0
    while True:
        attempts += 1
        a = F2Poly(F2Poly.random(degree).value | 1)
        if irr(a):
            logging.debug(f'Found random irreducible {a} of degree {degree} after {attempts} attempts')
            return a


def totient(f):
    """Number of units in F2[x]/(f): prod (2^d_i)^(e_i - 1) (2^d_i - 1) over factors p_i^e_i."""
    t = 1
    for p, e in factor(f):
        d = p.degree()
        t *= (1 << (d * (e - 1))) * ((1 << d) - 1)
    return t
