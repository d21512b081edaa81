from coherent import SI, US, conversion
from coherent.testing import TestCase

si = SI.units
us = US.units


class Units(TestCase):

    def test_length(self):
        self.assertAlmostEqual((1 * us['in']).value_in(si.cm), 2.54)
        self.assertAlmostEqual((1 * us.ft).value_in(si.m), .3048)
        self.assertAlmostEqual((1 * us.yd).value_in(si.m), .9144)
        self.assertAlmostEqual((1 * us.mi).value_in(si.km), 1.609344)
        self.assertAlmostEqual((1 * us.nmi).value_in(si.m), 1852)

    def test_area(self):
        self.assertAlmostEqual((1 * us.acre).value_in(si.m**2), 4046.8564224, places=6)

    def test_volume(self):
        self.assertAlmostEqual((1 * us.gal).value_in(si.L), 3.785411784)
        self.assertAlmostEqual((1 * us.gal).value_in(us.floz), 128)
        self.assertAlmostEqual((1 * us.tbsp).value_in(us.tsp), 3)

    def test_mass(self):
        self.assertAlmostEqual((1 * us.lb).value_in(si.kg), .45359237)
        self.assertAlmostEqual((1 * us.oz).value_in(si.g), 28.349523125)
        self.assertAlmostEqual((1 * us.ton).value_in(si.t), .90718474)

    def test_velocity(self):
        self.assertAlmostEqual((1 * us.mph).value_in(si.km / si.h), 1.609344)
        self.assertAlmostEqual((1 * us.kn).value_in(si.m / si.s), 1852 / 3600)

    def test_force_pressure(self):
        self.assertAlmostEqual((1 * us.lbf).value_in(si.N), 4.4482216152605)
        self.assertAlmostEqual((1 * us.psi).value_in(si.Pa), 6894.757293168, places=6)

    def test_energy_power(self):
        self.assertAlmostEqual((1 * us.BTU).value_in(si.kJ), 1.05505585262)
        self.assertAlmostEqual((1 * us.ftlbf).value_in(si.J), 1.3558179483314, places=6)
        self.assertAlmostEqual((1 * us.hp).value_in(si.W), 745.69987158227, places=6)

    def test_temperature(self):
        self.assertAlmostEqual((300 * si.K).value_in(us['°F']), 80.33)
        self.assertAlmostEqual((212 * us['°F']).value_in(si.K), 373.15)
        self.assertAlmostEqual((491.67 * us['°R']).value_in(si.K), 273.15)
        self.assertAlmostEqual((0 * us['°F']).value_in(us['°R']), 459.67)

    def test_fahrenheit_addition(self):
        q = 50 * us['°F'] + 10 * us['°F']
        self.assertEqual(q.magnitude, 60)
        with self.assertRaises(ValueError):
            50 * us['°F'] + 10 * us['°R']

    def test_not_prefixed(self):
        for name in 'ft', 'lb', 'gal':
            with self.subTest(name):
                self.assertNotIn('k' + name, us)

    def test_kinds(self):
        self.assertTrue(conversion.convertible(us.psi, si.Pa))
        self.assertTrue(conversion.convertible(us.hp, si.W))
        self.assertFalse(conversion.convertible(us.lbf, si.J))

# vim:sw=4:sts=4:et
