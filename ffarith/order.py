"""This module supports multiplicative orders in Z/mZ and F2[x]/(m(x)).

The functions accept residues of type intmod.IntMod as well as of type
f2polymod.F2PolyMod, and moduli of type int as well as of type f2poly.F2Poly.
Polynomial moduli must be passed as F2Poly, since plain integers are taken
to be integer moduli.

The order of a unit a is found by running through the divisors of the
totient phi(m) in ascending order: by Lagrange's theorem the order divides
phi(m), hence the first divisor d with a^d = 1 is the order of a.
"""

import logging
from ffarith import InvariantError
from ffarith import intarith, intfactor, f2polyfactor
from ffarith.intmod import IntMod
from ffarith.f2poly import F2Poly
from ffarith.f2polymod import F2PolyMod


def _totient(a):
    if isinstance(a, F2PolyMod):
        return f2polyfactor.totient(a.modulus)
    return intfactor.totient(a.modulus)


def _ring(modulus):
    # residue type for given modulus
    if isinstance(modulus, F2Poly):
        return F2PolyMod
    if isinstance(modulus, int):
        return IntMod
    raise TypeError(f'int or F2Poly modulus required, got {type(modulus).__name__}')


def mod_order(a):
    """Multiplicative order of unit a."""
    if not isinstance(a, (IntMod, F2PolyMod)):
        raise TypeError(f'IntMod or F2PolyMod required, got {type(a).__name__}')
    if a.is_zero() or not a.is_unit():
        raise ValueError(f'zero or zero divisor {a} mod {a.modulus}')
    phi = _totient(a)
    for d in intfactor.factor(phi).all_divisors():
        if (a**d).is_one():
            return d
    raise InvariantError(f'mod_order: no divisor of phi={phi} annihilates {a}')


def mod_max_order(modulus):
    """Maximum multiplicative order over all units modulo m (0 if there are none)."""
    units = _ring(modulus).units(modulus)
    return max((mod_order(u) for u in units if not u.is_zero()), default=0)


def orbit(a, b=None):
    """Return the powers a, a^2, ..., a^k = 1 of unit a, each multiplied by b if b is given.

    Without b the cyclic subgroup generated by a is obtained, with b its coset containing a b.
    """
    if a.is_zero() or not a.is_unit():
        raise ValueError(f'zero or zero divisor {a} mod {a.modulus}')
    c = a
    result = []
    while True:
        result.append(c if b is None else c * b)
        if c.is_one():
            break
        c = c * a
    return result


def f2poly_period(m):
    """Multiplicative order of x in F2[x]/(m(x)), or 0 if x is not a unit."""
    m = F2Poly(m)
    x = F2Poly(2)
    if m.degree() < 1 or not x.gcd(m).is_one():
        return 0
    return mod_order(F2PolyMod(x, m))


def generator(modulus):
    """Return the least unit of maximal order phi(m), or None if the unit group is not cyclic."""
    ring = _ring(modulus)
    if ring is IntMod:
        if modulus < 2:
            raise ValueError(f'modulus must be at least 2, got {modulus}')
        phi = intfactor.totient(modulus)
        candidates = (a for a in range(1, modulus) if intarith.gcd(a, modulus) == 1)
    else:
        if modulus.degree() < 1:
            raise ValueError('modulus degree must be positive')
        phi = f2polyfactor.totient(modulus)
        candidates = (a for a in range(1, 1 << modulus.degree()) if modulus.gcd(a).is_one())
    for a in candidates:
        g = ring(a, modulus)
        if mod_order(g) == phi:
            logging.debug(f'Found generator {g} of order {phi} mod {modulus}')
            return g
    return None


def f2poly_primitive(m):
    """Test whether x generates the full multiplicative group of F2[x]/(m(x))."""
    m = F2Poly(m)
    x = F2Poly(2)
    if not m.gcd(x).is_one():
        return False
    xm = F2PolyMod(x, m)
    phi = f2polyfactor.totient(m)
    for d in intfactor.factor(phi).maximal_proper_divisors():
        if (xm**d).is_one():
            return False
    return (xm**phi).is_one()
