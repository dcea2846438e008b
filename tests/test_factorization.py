import unittest
from ffarith.factorization import Factorization


class Arithmetic(unittest.TestCase):

    def test_insert(self):
        finfo = Factorization()
        finfo.insert_factor(5, 1)
        finfo.insert_factor(2, 2)
        finfo.insert_factor(3)
        finfo.insert_factor(2, 1)
        finfo.insert_factor(7, 0)
        self.assertEqual(finfo.factors, [[2, 3], [3, 1], [5, 1]])
        self.assertEqual(list(finfo), [(2, 3), (3, 1), (5, 1)])
        self.assertEqual(finfo[0], (2, 3))
        self.assertEqual(len(finfo), 3)
        self.assertEqual(finfo.num_distinct_factors(), 3)
        self.assertEqual(finfo.num_factors(), 5)
        self.assertEqual(finfo.unfactor(), 120)
        self.assertEqual(str(finfo), '2^3 3 5')

    def test_trivial(self):
        finfo = Factorization()
        finfo.insert_trivial_factor(-1)
        finfo.insert_trivial_factor(-1)
        self.assertEqual(finfo.trivial_factor, 1)
        finfo.insert_trivial_factor(-1)
        finfo.insert_factor(3, 2)
        self.assertEqual(finfo.unfactor(), -9)
        self.assertEqual(str(finfo), '-1 3^2')
        self.assertEqual(repr(finfo), 'Factorization(-1 3^2)')

    def test_merge_exp(self):
        a = Factorization()
        a.insert_factor(2, 1)
        a.insert_factor(7, 1)
        b = Factorization()
        b.insert_trivial_factor(-1)
        b.insert_factor(3, 1)
        b.insert_factor(7, 2)
        a.merge(b)
        self.assertEqual(a.factors, [[2, 1], [3, 1], [7, 3]])
        self.assertEqual(a.trivial_factor, -1)
        a.exp_all(2)
        self.assertEqual(a.trivial_factor, 1)
        self.assertEqual(a.factors, [[2, 2], [3, 2], [7, 6]])
        self.assertEqual(a.unfactor(), (2 * 3 * 7**3)**2)

    def test_divisors(self):
        finfo = Factorization()
        finfo.insert_factor(2, 3)
        finfo.insert_factor(3, 2)
        self.assertEqual(finfo.num_divisors(), 12)
        self.assertEqual(finfo.kth_divisor(0), 1)
        self.assertEqual(finfo.kth_divisor(1), 2)
        self.assertEqual(finfo.kth_divisor(4), 3)
        self.assertEqual(finfo.kth_divisor(11), 72)
        self.assertEqual(finfo.all_divisors(), [1, 2, 3, 4, 6, 8, 9, 12, 18, 24, 36, 72])
        self.assertEqual(finfo.maximal_proper_divisors(), [24, 36])

    def test_empty(self):
        finfo = Factorization()
        self.assertRaises(ValueError, finfo.num_divisors)
        self.assertRaises(ValueError, finfo.kth_divisor, 0)
        self.assertRaises(ValueError, finfo.all_divisors)
        self.assertRaises(ValueError, finfo.maximal_proper_divisors)
        self.assertRaises(ValueError, finfo.unfactor)
        finfo.insert_trivial_factor(1)
        self.assertEqual(finfo.all_divisors(), [1])
        self.assertEqual(finfo.maximal_proper_divisors(), [])

    def test_eq(self):
        a = Factorization()
        b = Factorization()
        a.insert_factor(2, 1)
        self.assertNotEqual(a, b)
        b.insert_factor(2, 1)
        self.assertEqual(a, b)


if __name__ == "__main__":
    unittest.main()
