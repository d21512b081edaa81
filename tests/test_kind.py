from coherent.testing import TestCase
from coherent import kind, rational
from coherent.dimension import Dimension
import pickle

length = kind.QuantityKind('length', Dimension('L'))
time = kind.QuantityKind('time', Dimension('T'))
velocity = kind.QuantityKind('velocity', Dimension('L') / Dimension('T'))
wavelength = kind.QuantityKind('wavelength', parent=length)
angle = kind.QuantityKind('plane angle', parent=kind.number)


class QuantityKind(TestCase):

    def test_dims_from_parent(self):
        self.assertEqual(wavelength.dims, length.dims)
        self.assertTrue(wavelength.derived)
        self.assertFalse(length.derived)

    def test_ancestors(self):
        cutoff = kind.QuantityKind('cutoff wavelength', parent=wavelength)
        self.assertEqual(list(cutoff.ancestors), [wavelength, length])
        self.assertTrue(cutoff.derives_from(length))
        self.assertFalse(length.derives_from(cutoff))

    def test_invalid_derivation(self):
        with self.assertRaises(kind.InvalidKindDerivationError):
            kind.QuantityKind('duration', Dimension('T'), parent=length)
        with self.assertRaises(ValueError):
            kind.QuantityKind('duration', Dimension('T'), parent=length)

    def test_missing_dims(self):
        with self.assertRaises(TypeError):
            kind.QuantityKind('length')

    def test_equality(self):
        self.assertEqual(length, kind.QuantityKind('length', Dimension('L')))
        self.assertNotEqual(length, kind.QuantityKind('distance', Dimension('L')))
        self.assertNotEqual(wavelength, kind.QuantityKind('wavelength', Dimension('L')))

    def test_pickle(self):
        self.assertEqual(pickle.loads(pickle.dumps(wavelength)), wavelength)


class convertible_to(TestCase):

    def test_same(self):
        self.assertTrue(length.convertible_to(length))

    def test_derived(self):
        self.assertTrue(wavelength.convertible_to(length))
        self.assertFalse(length.convertible_to(wavelength))

    def test_transitive(self):
        cutoff = kind.QuantityKind('cutoff wavelength', parent=wavelength)
        self.assertTrue(cutoff.convertible_to(length))

    def test_siblings(self):
        radius = kind.QuantityKind('radius', parent=length)
        self.assertFalse(radius.convertible_to(wavelength))
        self.assertFalse(wavelength.convertible_to(radius))

    def test_underived(self):
        distance = kind.QuantityKind('distance', Dimension('L'))
        self.assertTrue(distance.convertible_to(length))
        self.assertTrue(length.convertible_to(distance))

    def test_dimension_mismatch(self):
        self.assertFalse(length.convertible_to(time))

    def test_velocity(self):
        self.assertEqual((length / time).dims, velocity.dims)
        self.assertTrue((length / time).convertible_to(velocity))
        self.assertTrue(velocity.convertible_to(length / time))

    def test_angle(self):
        self.assertTrue(angle.convertible_to(kind.number))
        self.assertFalse(kind.number.convertible_to(angle))

    def test_inverse_time(self):
        frequency = kind.QuantityKind('frequency', Dimension('T')**-1)
        radioactivity = kind.QuantityKind('radioactivity', parent=time**-1)
        self.assertFalse(radioactivity.convertible_to(frequency))
        self.assertFalse(frequency.convertible_to(radioactivity))
        self.assertTrue(radioactivity.convertible_to(time**-1))
        self.assertTrue(frequency.convertible_to(time**-1))

    def test_invalid(self):
        with self.assertRaises(TypeError):
            length.convertible_to(Dimension('L'))


class product(TestCase):

    def test_identity(self):
        self.assertIs(length * kind.number, length)
        self.assertIs(kind.number * length, length)

    def test_cancel(self):
        self.assertIs(length / length, kind.number)
        self.assertIs(length * time / time, length)

    def test_commutative(self):
        self.assertEqual(length * time, time * length)

    def test_associative(self):
        self.assertEqual((length * time) * velocity, length * (time * velocity))

    def test_commutative_same_name(self):
        plain = kind.QuantityKind('ratio', kind.number.dims)
        tagged = kind.QuantityKind('ratio', parent=kind.number)
        self.assertEqual(plain * tagged, tagged * plain)
        self.assertEqual(length * plain * tagged, tagged * length * plain)

    def test_name(self):
        self.assertEqual(str(length / time**2), 'length/time2')
        self.assertEqual(str(angle * length), 'length*(plane angle)')

    def test_dims(self):
        self.assertEqual((length / time**2).dims, Dimension('L') / Dimension('T')**2)

    def test_power(self):
        self.assertEqual((length**2)**rational.half, length)
        self.assertEqual((length**2).dims, Dimension('L')**2)

    def test_tag_retained(self):
        k = angle * length
        self.assertIsInstance(k, kind.ProductKind)
        self.assertTrue(k.derived)
        self.assertEqual(k.parent, length)
        self.assertTrue(k.convertible_to(length))
        self.assertFalse(length.convertible_to(k))

    def test_derived_parent(self):
        k = wavelength / time
        self.assertEqual(k.parent, length / time)
        self.assertTrue(k.convertible_to(length / time))
        self.assertFalse((length / time).convertible_to(k))

    def test_empty(self):
        self.assertIs(kind.product(()), kind.number)

# vim:sw=4:sts=4:et
