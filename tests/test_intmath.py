import unittest

from exactratio import gcd, lcm


class GcdTests(unittest.TestCase):
    def test_known_values(self):
        self.assertEqual(gcd(12, 18), 6)
        self.assertEqual(gcd(17, 5), 1)
        self.assertEqual(gcd(2**80, 2**64 * 3), 2**64)

    def test_result_is_non_negative(self):
        self.assertEqual(gcd(-4, 6), 2)
        self.assertEqual(gcd(4, -6), 2)
        self.assertEqual(gcd(-4, -6), 2)

    def test_zero_operands(self):
        for a in (0, 1, -1, 7, -42, 10**30):
            self.assertEqual(gcd(a, 0), abs(a))
        self.assertEqual(gcd(0, 9), 9)
        self.assertEqual(gcd(0, 0), 0)


class LcmTests(unittest.TestCase):
    def test_known_values(self):
        self.assertEqual(lcm(4, 6), 12)
        self.assertEqual(lcm(2, 3), 6)
        self.assertEqual(lcm(2**52, 2**3), 2**52)

    def test_zero_operand(self):
        self.assertEqual(lcm(5, 0), 0)
        self.assertEqual(lcm(0, 5), 0)
        with self.assertRaises(ZeroDivisionError):
            lcm(0, 0)

    def test_sign_follows_product(self):
        self.assertEqual(lcm(-4, 6), -12)
        self.assertEqual(lcm(-4, -6), 12)

    def test_product_identity(self):
        pairs = [(4, 6), (-9, 12), (35, -21), (1, 1), (2**70, 3**40), (-8, -8)]
        for a, b in pairs:
            with self.subTest(a=a, b=b):
                self.assertEqual(abs(lcm(a, b)) * gcd(a, b), abs(a * b))


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
