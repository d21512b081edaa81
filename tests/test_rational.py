from coherent.testing import TestCase
from coherent import rational
import fractions
import pickle


class Rational(TestCase):

    def test_lowest_terms(self):
        r = rational.Rational(6, -4)
        self.assertEqual((r.numer, r.denom), (-3, 2))

    def test_zero_denominator(self):
        with self.assertRaises(rational.DivisionByZeroRationalError):
            rational.Rational(1, 0)
        with self.assertRaises(ZeroDivisionError):
            rational.Rational(1, 0)

    def test_noninteger(self):
        with self.assertRaises(TypeError):
            rational.Rational(1.5)

    def test_add(self):
        self.assertEqual(rational.frac(1, 2) + rational.frac(1, 3), rational.Rational(5, 6))
        self.assertEqual(rational.frac(1, 2) + 1, rational.Rational(3, 2))
        self.assertEqual(1 + rational.frac(1, 2), rational.Rational(3, 2))

    def test_subtract(self):
        self.assertEqual(rational.frac(1, 2) - rational.frac(1, 3), rational.Rational(1, 6))
        self.assertEqual(1 - rational.frac(1, 2), rational.half)

    def test_multiply(self):
        self.assertEqual(rational.frac(2, 3) * rational.frac(3, 4), rational.half)
        self.assertEqual(2 * rational.frac(1, 4), rational.half)

    def test_divide(self):
        self.assertEqual(rational.frac(2, 3) / rational.frac(4, 9), rational.Rational(3, 2))
        self.assertEqual(1 / rational.frac(1, 4), 4)

    def test_divide_by_zero(self):
        with self.assertRaises(rational.DivisionByZeroRationalError):
            rational.half / 0

    def test_unary(self):
        self.assertEqual(-rational.half, rational.Rational(-1, 2))
        self.assertEqual(abs(rational.Rational(-1, 2)), rational.half)
        self.assertEqual(+rational.half, rational.half)

    def test_power(self):
        self.assertEqual(rational.frac(2, 3)**2, rational.Rational(4, 9))
        self.assertEqual(rational.frac(2, 3)**-2, rational.Rational(9, 4))
        self.assertEqual(rational.frac(2, 3)**0, rational.one)
        self.assertEqual(rational.half**rational.Rational(3), rational.Rational(1, 8))

    def test_power_of_zero(self):
        with self.assertRaises(rational.DivisionByZeroRationalError):
            rational.zero**-1

    def test_irrational_power(self):
        with self.assertRaises(TypeError):
            rational.half**rational.half

    def test_compare(self):
        self.assertLess(rational.frac(1, 3), rational.half)
        self.assertLess(rational.Rational(-1, 2), 0)
        self.assertGreaterEqual(rational.half, rational.frac(2, 4))
        self.assertEqual(sorted([rational.half, rational.zero, rational.frac(1, 3)]), [0, rational.frac(1, 3), rational.half])

    def test_equal(self):
        self.assertEqual(rational.half, fractions.Fraction(1, 2))
        self.assertEqual(rational.Rational(3), 3)
        self.assertNotEqual(rational.half, 1)
        self.assertNotEqual(rational.half, 'half')

    def test_hash(self):
        self.assertEqual(hash(rational.half), hash(fractions.Fraction(1, 2)))
        self.assertEqual(hash(rational.Rational(3)), hash(3))
        self.assertEqual({rational.frac(2, 4): 'a'}[rational.half], 'a')

    def test_conversion(self):
        self.assertEqual(float(rational.frac(1, 4)), .25)
        self.assertEqual(int(rational.Rational(6, 3)), 2)
        self.assertEqual(rational.half.as_fraction(), fractions.Fraction(1, 2))
        self.assertTrue(rational.Rational(4, 2).isint)
        self.assertFalse(rational.half.isint)
        with self.assertRaises(ValueError):
            int(rational.half)

    def test_readonly(self):
        with self.assertRaises(AttributeError):
            rational.half.numer = 3

    def test_str(self):
        self.assertEqual(str(rational.frac(3, 4)), '3/4')
        self.assertEqual(str(rational.Rational(-2)), '-2')
        self.assertEqual(repr(rational.frac(3, 4)), 'Rational(3, 4)')

    def test_pickle(self):
        r = rational.frac(-5, 7)
        self.assertEqual(pickle.loads(pickle.dumps(r)), r)


class asrational(TestCase):

    def test_int(self):
        self.assertEqual(rational.asrational(3), rational.Rational(3))

    def test_fraction(self):
        self.assertEqual(rational.asrational(fractions.Fraction(-2, 6)), rational.Rational(-1, 3))

    def test_float(self):
        self.assertEqual(rational.asrational(.5), rational.half)
        self.assertEqual(rational.asrational(-1.25), rational.Rational(-5, 4))

    def test_nonfinite(self):
        with self.assertRaises(ValueError):
            rational.asrational(float('nan'))
        with self.assertRaises(ValueError):
            rational.asrational(float('inf'))

    def test_invalid(self):
        with self.assertRaises(TypeError):
            rational.asrational('1/2')
        with self.assertRaises(TypeError):
            rational.asrational(True)


class gcd(TestCase):

    def test_gcd(self):
        self.assertEqual(rational.gcd(12, 18), 6)
        self.assertEqual(rational.gcd(-12, 18), 6)
        self.assertEqual(rational.gcd(0, 5), 5)
        self.assertEqual(rational.gcd(), 1)

# vim:sw=4:sts=4:et
