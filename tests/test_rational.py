"""Unit tests for rational module."""

import unittest
from fractions import Fraction

from errors import DivideByZeroError, InvalidArgumentError
from rational import Rational


class TestConstruction(unittest.TestCase):
    """Test construction and canonical form."""

    def test_reduce_is_canonical(self):
        for num, den in [(2, 4), (2, -4), (-6, -9), (0, -5), (7, 1), (-12, 8)]:
            r = Rational(num, den).reduce()
            self.assertGreater(r.denominator(), 0)
            self.assertEqual(Fraction(r.numerator(), r.denominator()), Fraction(num, den))
            if r.numerator() == 0:
                self.assertEqual(r.denominator(), 1)

    def test_reduce_values(self):
        r = Rational(2, -4).reduce()
        self.assertEqual((r.numerator(), r.denominator()), (-1, 2))

    def test_zero_denominator(self):
        with self.assertRaises(DivideByZeroError):
            Rational(1, 0)
        # still a ZeroDivisionError for generic callers
        with self.assertRaises(ZeroDivisionError):
            Rational(1, 0)

    def test_rejects_non_integers(self):
        with self.assertRaises(InvalidArgumentError):
            Rational(0.5)
        with self.assertRaises(InvalidArgumentError):
            Rational(True)
        with self.assertRaises(InvalidArgumentError):
            Rational("1", 2)

    def test_from_fraction(self):
        self.assertEqual(Rational(Fraction(3, 6)), Rational(1, 2))


class TestArithmetic(unittest.TestCase):
    """Test arithmetic operations."""

    def test_add(self):
        self.assertEqual(Rational(1, 2).add(Rational(1, 3)), Rational(5, 6))
        self.assertEqual(Rational(1, 2) + 1, Rational(3, 2))
        self.assertEqual(1 + Rational(1, 2), Rational(3, 2))

    def test_add_without_simplify_keeps_raw_pair(self):
        r = Rational(1, 4).add(Rational(1, 4), False)
        self.assertEqual(r.to_string(), "2/4")
        self.assertEqual(r.reduce().to_string(), "1/2")

    def test_subtract_multiply_divide(self):
        self.assertEqual(Rational(1, 2) - Rational(1, 3), Rational(1, 6))
        self.assertEqual(Rational(2, 3) * Rational(3, 4), Rational(1, 2))
        self.assertEqual(Rational(2, 3) / Rational(4, 3), Rational(1, 2))
        self.assertEqual(3 - Rational(1, 2), Rational(5, 2))

    def test_divide_by_zero(self):
        with self.assertRaises(DivideByZeroError):
            Rational(1, 2).divide(0)
        with self.assertRaises(DivideByZeroError):
            Rational(1, 2) / Rational(0, 3)

    def test_pow(self):
        self.assertEqual(Rational(2, 3).pow(2), Rational(4, 9))
        self.assertEqual(Rational(2, 3).pow(-2), Rational(9, 4))
        self.assertEqual(Rational(5, 7).pow(0), 1)
        with self.assertRaises(DivideByZeroError):
            Rational(0).pow(-1)
        with self.assertRaises(InvalidArgumentError):
            Rational(2).pow(Rational(1, 2))

    def test_invalid_operand(self):
        with self.assertRaises(InvalidArgumentError):
            Rational(1, 2).add(0.5)

    def test_abs_and_neg(self):
        self.assertEqual(Rational(-3, 4).abs(), Rational(3, 4))
        self.assertEqual(abs(Rational(3, -4)), Rational(3, 4))
        self.assertEqual(-Rational(3, 4), Rational(-3, 4))


class TestComparison(unittest.TestCase):
    """Test equality, hashing and ordering."""

    def test_equality_by_canonical_form(self):
        self.assertEqual(Rational(2, 4), Rational(1, 2))
        self.assertEqual(Rational(4, 2), 2)
        self.assertNotEqual(Rational(1, 2), Rational(1, 3))
        self.assertNotEqual(Rational(1, 2), 0.5)

    def test_hash(self):
        self.assertEqual(hash(Rational(1, 2)), hash(Rational(-2, -4)))
        self.assertEqual(len({Rational(1, 2), Rational(2, 4), Rational(3, 6)}), 1)

    def test_hash_matches_int(self):
        self.assertEqual(hash(Rational(4, 2)), hash(2))
        self.assertEqual({2: "a"}.get(Rational(2)), "a")
        self.assertIn(Rational(-6, 3), {-2})

    def test_ordering(self):
        self.assertLess(Rational(1, 3), Rational(1, 2))
        self.assertGreater(Rational(1, -3), -1)
        self.assertLessEqual(Rational(2, 4), Rational(1, 2))

    def test_float(self):
        self.assertEqual(float(Rational(1, 4)), 0.25)
        self.assertEqual(Rational(3, 6).to_fraction(), Fraction(1, 2))


class TestPredicates(unittest.TestCase):
    """Test predicates used by the solver."""

    def test_sign_and_zero(self):
        self.assertTrue(Rational(1, -2).is_negative())
        self.assertFalse(Rational(-1, -2).is_negative())
        self.assertFalse(Rational(0, -2).is_negative())
        self.assertTrue(Rational(0, 5).is_zero())

    def test_is_int(self):
        self.assertTrue(Rational(6, 3).is_int())
        self.assertFalse(Rational(1, 3).is_int())
        self.assertEqual(Rational(-6, 3).to_int(), -2)

    def test_square_root_rational(self):
        self.assertTrue(Rational(4, 9).is_square_root_rational())
        self.assertTrue(Rational(0, 1).is_square_root_rational())
        self.assertFalse(Rational(2, 1).is_square_root_rational())
        self.assertFalse(Rational(-4, 1).is_square_root_rational())

    def test_square_root_checks_parts_independently(self):
        # 8/2 is 4, but 8 and 2 are not perfect squares on their own
        self.assertFalse(Rational(8, 2).is_square_root_rational())
        self.assertTrue(Rational(8, 2).reduce().is_square_root_rational())

    def test_cube_root_rational(self):
        self.assertTrue(Rational(8, 27).is_cube_root_rational())
        self.assertTrue(Rational(-8, 1).is_cube_root_rational())
        self.assertTrue(Rational(1000000, 1).is_cube_root_rational())
        self.assertFalse(Rational(2, 1).is_cube_root_rational())

    def test_sqrt(self):
        self.assertEqual(Rational(9, 4).sqrt(), Rational(3, 2))
        with self.assertRaises(InvalidArgumentError):
            Rational(2).sqrt()


class TestRendering(unittest.TestCase):
    """Test text and TeX output."""

    def test_to_string(self):
        self.assertEqual(Rational(0, 7).to_string(), "0")
        self.assertEqual(Rational(-3, 1).to_string(), "-3")
        self.assertEqual(Rational(3, -1).to_string(), "-3")
        self.assertEqual(Rational(1, 2).to_string(), "1/2")
        self.assertEqual(str(Rational(-1, 2)), "-1/2")

    def test_to_tex(self):
        self.assertEqual(Rational(1, 2).to_tex(), "\\frac{1}{2}")
        self.assertEqual(Rational(5).to_tex(), "5")


if __name__ == "__main__":
    unittest.main()
