import unittest
from ffarith import intfactor
from ffarith.intmod import IntMod


class Arithmetic(unittest.TestCase):

    def test_construction(self):
        self.assertEqual(IntMod(12, 7).residue, 5)
        self.assertEqual(IntMod(-1, 7).residue, 6)
        self.assertEqual(IntMod(5, 1).residue, 0)
        self.assertRaises(ValueError, IntMod, 1, 0)
        self.assertRaises(ValueError, IntMod, 1, -7)
        self.assertRaises(TypeError, IntMod, 1.5, 7)
        self.assertRaises(TypeError, IntMod, 1, '7')

    def test_arithmetic(self):
        a = IntMod(5, 11)
        b = IntMod(8, 11)
        self.assertEqual(a + b, 2)
        self.assertEqual(a - b, 8)
        self.assertEqual(a * b, 7)
        self.assertEqual(-a, 6)
        self.assertEqual(+a, a)
        self.assertEqual(1 + a, 6)
        self.assertEqual(1 - a, 7)
        self.assertEqual(a - 1, 4)
        self.assertEqual(3 * a, 4)
        self.assertEqual(a / b * b, a)
        self.assertEqual(1 / a, a.recip())
        self.assertEqual(a.recip() * a, 1)
        self.assertEqual(int(a), 5)
        self.assertEqual(repr(a), '5')
        self.assertFalse(IntMod(0, 11))
        self.assertTrue(a)
        self.assertNotEqual(IntMod(5, 11), IntMod(5, 13))
        self.assertEqual(len({IntMod(5, 11), IntMod(16, 11)}), 1)
        self.assertRaises(ValueError, IntMod(1, 11).__add__, IntMod(1, 13))
        with self.assertRaises(TypeError):
            a + 1.5

    def test_division(self):
        self.assertRaises(ZeroDivisionError, IntMod(3, 10).__truediv__, IntMod(0, 10))
        self.assertRaises(ZeroDivisionError, IntMod(3, 10).__truediv__, 4)
        self.assertRaises(ZeroDivisionError, IntMod(4, 10).recip)
        self.assertEqual(IntMod(3, 10) / 7, 9)
        for m in (2, 9, 10, 17):
            for u in IntMod.units(m):
                self.assertTrue((u * u.recip()).is_one())

    def test_pow(self):
        a = IntMod(3, 7)
        self.assertEqual(a**0, 1)
        self.assertEqual(a**6, 1)
        self.assertEqual(a**5, 5)
        self.assertEqual(a**-1, 5)
        self.assertEqual(a**-2, a.recip() * a.recip())
        self.assertEqual(IntMod(0, 7)**3, 0)
        self.assertRaises(ValueError, IntMod(0, 7).__pow__, 0)
        self.assertRaises(ZeroDivisionError, IntMod(0, 7).__pow__, -1)
        self.assertRaises(ZeroDivisionError, IntMod(2, 8).__pow__, -1)
        self.assertEqual(IntMod(2, 8)**3, 0)

    def test_predicates(self):
        self.assertTrue(IntMod(0, 5).is_zero())
        self.assertTrue(IntMod(6, 5).is_one())
        self.assertTrue(IntMod(0, 1).is_one())
        self.assertTrue(IntMod(3, 10).is_unit())
        self.assertFalse(IntMod(5, 10).is_unit())

    def test_enumeration(self):
        self.assertEqual(IntMod.elements(4), [0, 1, 2, 3])
        self.assertEqual(IntMod.units(10), [1, 3, 7, 9])
        for m in range(2, 40):
            self.assertEqual(len(IntMod.elements(m)), m)
            self.assertEqual(len(IntMod.units(m)), intfactor.totient(m))
            r = IntMod.random(m)
            self.assertTrue(0 <= r.residue < m)


if __name__ == "__main__":
    unittest.main()
