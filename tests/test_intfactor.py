import unittest
from ffarith import intfactor, intarith


class Arithmetic(unittest.TestCase):

    def test_factor(self):
        finfo = intfactor.factor(72)
        self.assertEqual(list(finfo), [(2, 3), (3, 2)])
        self.assertIsNone(finfo.trivial_factor)
        self.assertEqual(str(finfo), '2^3 3^2')
        self.assertEqual(finfo.all_divisors(), [1, 2, 3, 4, 6, 8, 9, 12, 18, 24, 36, 72])
        self.assertEqual(str(intfactor.factor(2)), '2')
        self.assertEqual(str(intfactor.factor(97)), '97')
        self.assertEqual(str(intfactor.factor(1001)), '7 11 13')
        self.assertEqual(str(intfactor.factor(2**10)), '2^10')
        self.assertEqual(str(intfactor.factor(-12)), '-1 2^2 3')
        self.assertEqual(str(intfactor.factor(2**16 * 65537)), '2^16 65537')

    def test_trivial(self):
        for n in (-1, 0, 1):
            finfo = intfactor.factor(n)
            self.assertEqual(finfo.trivial_factor, n)
            self.assertEqual(len(finfo), 0)
            self.assertEqual(finfo.unfactor(), n)

    def test_unfactor(self):
        for n in list(range(-50, 300)) + [2**32 + 1, 600851475143, 2**61 - 1, 2 * (2**61 - 1)]:
            finfo = intfactor.factor(n)
            self.assertEqual(finfo.unfactor(), n)
            ps = [p for p, _ in finfo]
            self.assertEqual(ps, sorted(set(ps)))
        self.assertEqual(str(intfactor.factor(2**32 + 1)), '641 6700417')

    def test_totient(self):
        self.assertEqual(intfactor.totient(1), 1)
        self.assertEqual(intfactor.totient(72), 24)
        self.assertEqual(intfactor.totient(97), 96)
        self.assertEqual(intfactor.slow_totient(72), 24)
        for n in range(2, 200):
            self.assertEqual(intfactor.totient(n), intfactor.slow_totient(n))
            self.assertEqual(intfactor.totient(n), intarith.euler_phi(n))


if __name__ == "__main__":
    unittest.main()
