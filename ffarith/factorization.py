"""This module supports factorizations into (prime or irreducible) factors.

A factorization consists of an optional trivial factor (a unit, such as -1
for integers) and a list of distinct factors with multiplicities, kept in
ascending order of the factors. The factored value is recovered as

    trivial_factor * prod(p**e for p, e in factors).

Class Factorization works for any factor type supporting *, **, // and
comparisons, with class attribute one set to the multiplicative identity.
Integer factorizations use class Factorization as is, see module intfactor;
module f2polyfactor derives class PolyFactorization for binary polynomials.
"""


class Factorization:
    """Factorization with trivial factor and ordered (factor, multiplicity) pairs."""

    __slots__ = 'trivial_factor', 'factors'

    one = 1

    def __init__(self):
        self.trivial_factor = None
        self.factors = []  # list of [factor, multiplicity] pairs

    def insert_trivial_factor(self, u):
        """Multiply u into the trivial factor."""
        if u is None:
            return
        if self.trivial_factor is None:
            self.trivial_factor = u
        else:
            self.trivial_factor = self.trivial_factor * u

    def insert_factor(self, p, e=1):
        """Insert factor p with multiplicity e, merging with an equal factor if present."""
        if e <= 0:
            return
        for i, pair in enumerate(self.factors):
            if pair[0] == p:
                pair[1] += e
                return
            if p < pair[0]:
                self.factors.insert(i, [p, e])
                return
        self.factors.append([p, e])

    def merge(self, other):
        """Insert all factors of other, including its trivial factor."""
        self.insert_trivial_factor(other.trivial_factor)
        for p, e in other.factors:
            self.insert_factor(p, e)

    def exp_all(self, e):
        """Raise the factored value to the power e, for e >= 1."""
        if self.trivial_factor is not None:
            self.trivial_factor = self.trivial_factor ** e
        for pair in self.factors:
            pair[1] *= e

    def num_distinct_factors(self):
        return len(self.factors)

    def num_factors(self):
        """Number of factors, counted with multiplicity."""
        return sum(e for _, e in self.factors)

    def __len__(self):
        return len(self.factors)

    def __getitem__(self, i):
        p, e = self.factors[i]
        return p, e

    def __iter__(self):
        for p, e in self.factors:
            yield p, e

    def _check_nonempty(self, name):
        if not self.factors and self.trivial_factor is None:
            raise ValueError(f'{name}: no factors have been inserted')

    def num_divisors(self):
        """Number of (positive, resp. monic) divisors of the factored value."""
        self._check_nonempty('num_divisors')
        c = 1
        for _, e in self.factors:
            c *= e + 1
        return c

    def kth_divisor(self, k):
        """Divisor number k, for 0 <= k < num_divisors(), reading k in mixed radix (e_i + 1)."""
        self._check_nonempty('kth_divisor')
        d = self.one
        for p, e in self.factors:
            k, i = divmod(k, e + 1)
            d = d * p**i if i else d
        return d

    def all_divisors(self):
        """All divisors of the factored value, in ascending order."""
        return sorted(self.kth_divisor(k) for k in range(self.num_divisors()))

    def maximal_proper_divisors(self):
        """Divisors n/p for distinct factors p of n, in ascending order."""
        self._check_nonempty('maximal_proper_divisors')
        n = self.unfactor()
        return sorted(n // p for p, _ in self.factors)

    def unfactor(self):
        """Multiply out the factorization."""
        self._check_nonempty('unfactor')
        n = self.one if self.trivial_factor is None else self.trivial_factor
        for p, e in self.factors:
            n = n * p**e
        return n

    def __str__(self):
        terms = []
        if self.trivial_factor is not None:
            terms.append(str(self.trivial_factor))
        for p, e in self.factors:
            terms.append(f'{p}^{e}' if e != 1 else f'{p}')
        return ' '.join(terms)

    def __repr__(self):
        return f'{type(self).__name__}({self})'

    def __eq__(self, other):
        if not isinstance(other, Factorization):
            return NotImplemented
        return self.trivial_factor == other.trivial_factor and self.factors == other.factors
    __hash__ = None
