"""This module supports matrices over GF(2) with rows stored as bit vectors.

Column j of a row is bit j of the corresponding bit vector. Gaussian
elimination pivots from the lowest column (bit 0) upwards, which is the
convention the kernel computation in Berlekamp's algorithm relies on.

Method row_echelon_form() reduces a matrix in place; rank() and
kernel_basis() work on a copy and leave the matrix unchanged.
"""

from ffarith import InvariantError
from ffarith.bitvector import BitVector


class BitMatrix:
    """Matrix over GF(2) of num_rows rows of num_cols bits each."""

    __slots__ = 'num_rows', 'num_cols', 'rows'

    def __init__(self, num_rows, num_cols):
        if num_rows <= 0 or num_cols <= 0:
            raise ValueError(f'matrix dimensions must be positive, got {num_rows} x {num_cols}')
        self.num_rows = num_rows
        self.num_cols = num_cols
        self.rows = [BitVector(num_cols) for _ in range(num_rows)]

    @classmethod
    def from_rows(cls, num_cols, rows):
        """Create matrix from given integers (or bit vectors) as rows."""
        rows = list(rows)
        m = cls(len(rows), num_cols)
        for i, r in enumerate(rows):
            m.rows[i].bits = r.bits if isinstance(r, BitVector) else r
        return m

    @classmethod
    def identity(cls, n):
        """Create n x n identity matrix."""
        return cls.from_rows(n, (1 << i for i in range(n)))

    def copy(self):
        return BitMatrix.from_rows(self.num_cols, (r.bits for r in self.rows))

    def __getitem__(self, i):
        return self.rows[i]

    def __iter__(self):
        return iter(self.rows)

    def __len__(self):
        return self.num_rows

    def get(self, i, j):
        return self.rows[i].get(j)

    def set(self, i, j, v):
        self.rows[i].set(j, v)

    def __mul__(self, other):
        """Matrix-vector product M v over GF(2), with bit i of the result for row i."""
        if isinstance(other, BitVector):
            other = other.masked()
        elif not isinstance(other, int):
            return NotImplemented
        bits = 0
        for i, r in enumerate(self.rows):
            if bin(r.masked() & other).count('1') & 1:
                bits |= 1 << i
        return BitVector(self.num_rows, bits)

    def row_echelon_form(self):
        """Reduce matrix to reduced row echelon form, in place.

        Leader positions strictly increase with the row index, zero rows come last,
        and each leader is the only nonzero entry in its column among all rows.
        """
        self._row_reduce_below()
        rows = self.rows
        for i in range(self.num_rows):
            for i2 in range(i + 1, self.num_rows):
                p = rows[i2].find_leader_pos()
                if p < 0:
                    break
                if (rows[i].bits >> p) & 1:
                    rows[i].bits ^= rows[i2].bits

    def _row_reduce_below(self):
        rows = self.rows
        top_row = 0
        left_col = 0
        while top_row < self.num_rows and left_col < self.num_cols:
            for pivot_row in range(top_row, self.num_rows):
                if (rows[pivot_row].bits >> left_col) & 1:
                    break
            else:
                left_col += 1  # no pivot in this column
                continue
            if pivot_row != top_row:
                rows[top_row], rows[pivot_row] = rows[pivot_row], rows[top_row]
            pivot = rows[top_row].bits
            for i in range(top_row + 1, self.num_rows):
                if (rows[i].bits >> left_col) & 1:
                    rows[i].bits ^= pivot
            left_col += 1
            top_row += 1

    def rank(self):
        """Rank of the matrix (matrix itself is left unchanged)."""
        rr = self.copy()
        rr._row_reduce_below()
        return rr.rank_rr()

    def rank_rr(self):
        """Rank of a matrix already in row echelon form."""
        r = 0
        for row in self.rows:
            if row.is_zero():
                break
            r += 1
        return r

    def kernel_basis(self):
        """Basis for the nullspace {v : M v = 0}, as rows of a matrix.

        Return None if the nullspace is trivial (rank equals num_cols).
        """
        rr = self.copy()
        rr.row_echelon_form()
        rank = rr.rank_rr()
        dimker = self.num_cols - rank
        if dimker == 0:
            return None
        leaders = [rr.rows[i].find_leader_pos() for i in range(rank)]
        dependent = set(leaders)
        free_cols = [j for j in range(self.num_cols) if j not in dependent]
        if len(free_cols) != dimker:
            raise InvariantError('kernel basis: free column count does not match nullity')
        basis = BitMatrix(dimker, self.num_cols)
        for k, f in enumerate(free_cols):
            v = basis.rows[k]
            v.set(f, 1)
            for i in range(rank):
                if (rr.rows[i].bits >> f) & 1:
                    v.set(leaders[i], 1)
        return basis

    def __format__(self, format_spec):
        return '\n'.join(format(r, format_spec) for r in self.rows)

    def __str__(self):
        return format(self, 'b')

    def __repr__(self):
        return f'BitMatrix.from_rows({self.num_cols}, {[r.masked() for r in self.rows]})'

    def __eq__(self, other):
        if not isinstance(other, BitMatrix):
            return NotImplemented
        return self.num_cols == other.num_cols and self.rows == other.rows
    __hash__ = None
