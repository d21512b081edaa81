from coherent.testing import TestCase
from coherent import unit, kind, rational
from coherent.dimension import Dimension
from coherent.quantity import Quantity
import numpy
import pickle

length = kind.QuantityKind('length', Dimension('L'))
time = kind.QuantityKind('time', Dimension('T'))
temperature = kind.QuantityKind('temperature', Dimension('Θ'))
power = kind.QuantityKind('power', Dimension('M') * Dimension('L')**2 / Dimension('T')**3)
angle = kind.QuantityKind('plane angle', parent=kind.number)

m = unit.Unit('m', length)
s = unit.Unit('s', time)
K = unit.Unit('K', temperature)
W = unit.Unit('W', power)
rad = unit.Unit('rad', angle)
km = m.prefixed('k')
minute = s.scaled('min', 60)
degC = K.scaled('°C', reference=-273.15)
dBW = W.scaled('dBW', scale=unit.Scale.LOGARITHMIC)


class Unit(TestCase):

    def test_coherent(self):
        self.assertTrue(m.iscoherent)
        self.assertIs(m.coherent(), m)
        self.assertIsNone(m.base)

    def test_scaled(self):
        self.assertAlmostEqual(minute.multiplier, 1/60)
        self.assertFalse(minute.iscoherent)
        self.assertEqual(minute.coherent(), s)
        self.assertEqual(minute.dims, s.dims)

    def test_scaled_of_scaled(self):
        hour = minute.scaled('h', 60)
        self.assertAlmostEqual(hour.multiplier * 3600, 1)
        self.assertEqual(hour.base, s)

    def test_anonymous_coherent(self):
        u = unit.Unit('x', length, 2.)
        self.assertEqual(u.coherent(), unit.Unit('[length]', length))

    def test_offset(self):
        self.assertEqual(degC.reference, -273.15)
        self.assertEqual(degC.multiplier, 1)
        self.assertEqual(degC.coherent(), K)

    def test_logarithmic(self):
        self.assertTrue(dBW.islogarithmic)
        self.assertFalse(dBW.iscoherent)
        self.assertEqual(dBW.coherent(), W)

    def test_invalid_multiplier(self):
        for multiplier in 0, -1, float('inf'), float('nan'):
            with self.subTest(multiplier=multiplier), self.assertRaises(ValueError):
                unit.Unit('x', length, multiplier)

    def test_invalid_reference(self):
        with self.assertRaises(ValueError):
            unit.Unit('x', length, reference=float('nan'))

    def test_invalid_kind(self):
        with self.assertRaises(TypeError):
            unit.Unit('x', Dimension('L'))
        with self.assertRaises(TypeError):
            unit.Unit(1, length)

    def test_equality(self):
        self.assertEqual(unit.Unit('m', length), m)
        self.assertEqual(hash(unit.Unit('m', length)), hash(m))
        self.assertNotEqual(unit.Unit('m', time), m)
        self.assertNotEqual(unit.Unit('metre', length), m)

    def test_str(self):
        self.assertEqual(str(km), 'km')
        self.assertEqual(km.symbol, 'km')

    def test_pickle(self):
        for u in km, degC, dBW, m / s**2:
            with self.subTest(unit=u):
                self.assertEqual(pickle.loads(pickle.dumps(u)), u)


class prefixed(TestCase):

    def test_kilo(self):
        self.assertEqual(km.name, 'km')
        self.assertEqual(km.multiplier, 1e-3)
        self.assertEqual(km.base, m)
        self.assertEqual(km.coherent(), m)

    def test_micro(self):
        self.assertEqual(m.prefixed('μ').multiplier, 1e6)

    def test_table(self):
        self.assertEqual(len(unit.prefixes), 24)
        for prefix, exponent in unit.prefixes.items():
            with self.subTest(prefix=prefix):
                self.assertAlmostEqual(m.prefixed(prefix).multiplier * 10.**exponent, 1)

    def test_unknown(self):
        with self.assertRaises(ValueError):
            m.prefixed('x')

    def test_offset(self):
        with self.assertRaises(unit.IncompatibleReferencePointError):
            degC.prefixed('m')

    def test_logarithmic(self):
        with self.assertRaises(unit.ScaleError):
            dBW.prefixed('m')


class pow10(TestCase):

    def test_table(self):
        self.assertEqual(unit.pow10(3), 1000.)
        self.assertEqual(unit.pow10(-3), 1e-3)
        self.assertEqual(unit.pow10(0), 1.)

    def test_beyond_table(self):
        self.assertEqual(unit.pow10(40), 1e40)
        self.assertEqual(unit.pow10(-40), 1e-40)


class compose(TestCase):

    def test_multiply(self):
        ms = m * s
        self.assertEqual(ms.name, 'm*s')
        self.assertEqual(ms.dims, (length * time).dims)
        self.assertEqual(ms.multiplier, 1)

    def test_name(self):
        self.assertEqual(str(m / s), 'm/s')
        self.assertEqual(str(m / s**2), 'm/s2')
        self.assertEqual(str(s**-1), '/s')
        self.assertEqual(str(km / s**2 * s), 'km/s')

    def test_commutative(self):
        self.assertEqual(m * s, s * m)
        self.assertEqual(m * km, km * m)

    def test_associative(self):
        self.assertEqual((m * s) * km, m * (s * km))

    def test_commutative_same_name(self):
        a = unit.Unit('x', length)
        b = unit.Unit('x', time)
        self.assertEqual(a * b, b * a)
        self.assertEqual((a / b).dims, Dimension('L') / Dimension('T'))

    def test_cancel(self):
        self.assertIs(m * s / s, m)
        self.assertIs(m / m, unit.one)
        self.assertIs(m * unit.one, m)

    def test_no_cross_cancel(self):
        u = m / km
        self.assertEqual(str(u), 'm/km')
        self.assertEqual(u.dims, kind.number.dims)
        self.assertAlmostEqual(u.multiplier, 1e3)

    def test_multiplier(self):
        self.assertEqual((km / s).multiplier, 1e-3)
        self.assertAlmostEqual((km**2).multiplier / 1e-6, 1)
        self.assertAlmostEqual((km / minute).multiplier, 60e-3)

    def test_sqrt(self):
        self.assertEqual((m**2).sqrt(), m)
        self.assertEqual(str(unit.sqrt(m)), 'm_2')
        self.assertAlmostEqual(km.sqrt().multiplier**2, 1e-3)
        self.assertEqual(unit.sqrt(m).dims, Dimension('L')**rational.half)

    def test_functions(self):
        self.assertEqual(unit.multiply(m, s), m * s)
        self.assertEqual(unit.divide(m, s), m / s)
        self.assertEqual(unit.power(m, 3), m**3)

    def test_coherent(self):
        self.assertEqual((km / minute).coherent(), m / s)
        velocity = m / s
        self.assertIs(velocity.coherent(), velocity)

    def test_offset(self):
        with self.assertRaises(unit.IncompatibleReferencePointError):
            degC * m
        with self.assertRaises(unit.IncompatibleReferencePointError):
            degC**2

    def test_logarithmic(self):
        with self.assertRaises(unit.ScaleError):
            dBW / s

    def test_tag_retained(self):
        u = rad * m
        self.assertEqual(str(u), 'm*rad')
        self.assertTrue(u.kind.derived)
        self.assertEqual(u.kind.parent, length)


class values(TestCase):

    def test_multiply(self):
        for q in 3 * m, m * 3:
            self.assertIsInstance(q, Quantity)
            self.assertEqual(q.magnitude, 3)
            self.assertEqual(q.unit, m)

    def test_divide(self):
        q = m / 2
        self.assertEqual(q.magnitude, .5)
        self.assertEqual(q.unit, m)

    def test_divide_offset(self):
        with self.assertRaises(unit.IncompatibleReferencePointError):
            degC / 2
        with self.assertRaises(unit.ScaleError):
            dBW / 2

    def test_multiply_offset(self):
        q = 10 * degC
        self.assertEqual(q.magnitude, 10)
        self.assertEqual(q.unit, degC)

    def test_reciprocal(self):
        q = 2 / s
        self.assertEqual(q.magnitude, 2)
        self.assertEqual(q.unit, s**-1)

    def test_array(self):
        q = numpy.array([1., 2.]) * m
        self.assertIsInstance(q, Quantity)
        self.assertEqual(q.unit, m)
        self.assertAllEqual(q.magnitude, [1., 2.])

    def test_invalid(self):
        with self.assertRaises(TypeError):
            m * 'a'

# vim:sw=4:sts=4:et
