import unittest
from ffarith import InvariantError, order, intfactor, f2polyfactor
from ffarith.intmod import IntMod
from ffarith.f2poly import F2Poly
from ffarith.f2polymod import F2PolyMod


class Arithmetic(unittest.TestCase):

    def test_int_order(self):
        self.assertEqual(order.mod_order(IntMod(2, 11)), 10)
        self.assertEqual(order.mod_order(IntMod(3, 11)), 5)
        self.assertEqual(order.mod_order(IntMod(10, 11)), 2)
        self.assertEqual(order.mod_order(IntMod(1, 11)), 1)
        self.assertEqual(order.mod_order(IntMod(3, 8)), 2)
        self.assertRaises(ValueError, order.mod_order, IntMod(0, 11))
        self.assertRaises(ValueError, order.mod_order, IntMod(4, 10))
        self.assertRaises(TypeError, order.mod_order, 3)
        for m in (7, 9, 15, 16, 21):
            phi = intfactor.totient(m)
            for u in IntMod.units(m):
                k = order.mod_order(u)
                self.assertEqual(phi % k, 0)
                self.assertTrue((u**k).is_one())

    def test_poly_order(self):
        m = F2Poly(0x13)
        self.assertEqual(order.mod_order(F2PolyMod(2, m)), 15)
        self.assertEqual(order.mod_order(F2PolyMod(1, m)), 1)
        self.assertEqual(order.mod_order(F2PolyMod(0xf, m)), 5)  # x^3+x^2+x+1 = x^12
        self.assertRaises(ValueError, order.mod_order, F2PolyMod(0, m))
        self.assertRaises(ValueError, order.mod_order, F2PolyMod(3, 5))

    def test_max_order(self):
        self.assertEqual(order.mod_max_order(11), 10)
        self.assertEqual(order.mod_max_order(8), 2)
        self.assertEqual(order.mod_max_order(15), 4)
        self.assertEqual(order.mod_max_order(1), 0)
        self.assertEqual(order.mod_max_order(F2Poly(0x13)), 15)
        self.assertEqual(order.mod_max_order(F2Poly(0x1f)), 15)  # field, though x has order 5
        self.assertEqual(order.mod_max_order(F2Poly(5)), 2)
        self.assertRaises(TypeError, order.mod_max_order, '13')

    def test_orbit(self):
        a = IntMod(2, 7)
        self.assertEqual(order.orbit(a), [2, 4, 1])
        self.assertEqual(order.orbit(a, IntMod(3, 7)), [6, 5, 3])
        x = F2PolyMod(2, F2Poly(0x13))
        self.assertEqual(len(order.orbit(x)), 15)
        self.assertRaises(ValueError, order.orbit, IntMod(0, 7))
        self.assertRaises(ValueError, order.orbit, IntMod(2, 8))
        self.assertRaises(ValueError, order.orbit, F2PolyMod(2, F2Poly(6)))

    def test_period(self):
        self.assertEqual(order.f2poly_period(0x13), 15)
        self.assertEqual(order.f2poly_period(0x1f), 5)
        self.assertEqual(order.f2poly_period(7), 3)
        self.assertEqual(order.f2poly_period(6), 0)  # x is a zero divisor
        self.assertEqual(order.f2poly_period(1), 0)
        self.assertEqual(order.f2poly_period(0), 0)

    def test_generator(self):
        self.assertEqual(order.generator(11), 2)
        self.assertEqual(order.generator(7), 3)
        self.assertEqual(order.generator(2), 1)
        self.assertEqual(order.generator(9), 2)
        self.assertIsNone(order.generator(8))
        self.assertIsNone(order.generator(15))
        self.assertRaises(ValueError, order.generator, 1)
        self.assertRaises(ValueError, order.generator, F2Poly(1))
        self.assertEqual(order.generator(F2Poly(0x13)), 2)
        self.assertEqual(order.generator(F2Poly(0x1f)), 3)
        for m in (3, 5, 13, 18, 27, 50):
            g = order.generator(m)
            self.assertEqual(order.mod_order(g), intfactor.totient(m))
        for m in (F2Poly(7), F2Poly(0xb), F2Poly(0x11b)):
            g = order.generator(m)
            self.assertEqual(order.mod_order(g), f2polyfactor.totient(m))

    def test_primitive(self):
        self.assertTrue(order.f2poly_primitive(0x13))
        self.assertTrue(order.f2poly_primitive(7))
        self.assertTrue(order.f2poly_primitive(0xb))
        self.assertFalse(order.f2poly_primitive(0x1f))
        self.assertFalse(order.f2poly_primitive(0x11b))
        self.assertTrue(order.f2poly_primitive(0x11d))
        self.assertFalse(order.f2poly_primitive(6))
        for m in range(3, 1 << 8, 2):
            self.assertEqual(order.f2poly_primitive(m),
                             order.f2poly_period(m) == f2polyfactor.totient(m), m)

    def test_invariant_error(self):
        self.assertFalse(issubclass(InvariantError, ArithmeticError))


if __name__ == "__main__":
    unittest.main()
