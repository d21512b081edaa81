'''
The SI module defines the dimensions and quantity kinds of the International
System of Quantities, and the units of the International System of Units
including the full set of metric prefixes.

Usage
-----

All units are available as attributes of :data:`units`. Quantities are formed
by multiplying a value with a unit:

    >>> from coherent import SI
    >>> v = 7 * SI.units.μN * 5 * SI.units.h / (6 * SI.units.g)
    >>> f'{v.to(SI.units.m / SI.units.s):.1f}'
    '21.0 m/s'

Every unit carries a quantity kind, which decides what it converts to. Hertz
and becquerel share a dimension but are not interchangeable:

    >>> SI.units.Hz.dims == SI.units.Bq.dims
    True
    >>> (1 * SI.units.Bq).convertible_to(SI.units.Hz)
    False

Extension
---------

The table of units can be extended, but existing definitions cannot be
changed. A unit assigned as an attribute is defined along with all its metric
prefixes:

    >>> SI.units.rpm = 2 * math.pi * SI.units.rad / SI.units.min # doctest: +SKIP

New dimensions are introduced by creating a :class:`coherent.dimension.Dimension`
with an unused name, and a kind that refers to it.
'''

import math
import treelog as log
from .dimension import Dimension
from .kind import QuantityKind, number
from .unit import Unit, Scale, prefixes
from .quantity import Quantity


class Units(dict):
    '''Append-only table of units.

    Attribute assignment defines a unit with all its metric prefixes; item
    assignment defines it without. The value can be a :class:`Unit`, which is
    renamed if necessary, or a :class:`Quantity`, which defines the unit as
    the given amount. Redefining an existing unit raises :class:`ValueError`.
    '''

    def __setattr__(self, name, value):
        self._define(name, value, prefixed=True)

    def __setitem__(self, name, value):
        self._define(name, value, prefixed=False)

    def __getattr__(self, name):
        if name not in self:
            raise AttributeError(name)
        return self[name]

    def define(self, name, value, prefixed=True):
        'Define unit ``name`` at runtime.'

        unit = self._define(name, value, prefixed)
        log.debug(f'defined unit {name} of kind {unit.kind}' + (' with metric prefixes' if prefixed else ''))
        return unit

    def _define(self, name, value, prefixed):
        if isinstance(value, Quantity):
            unit = value.unit.scaled(name, value.magnitude)
        elif isinstance(value, Unit):
            unit = value if value.name == name else value.scaled(name)
        else:
            raise TypeError(f'can only assign Unit or Quantity, got {type(value).__name__}')
        if name in self:
            raise ValueError(f'cannot define {name!r}: unit is already defined')
        scaled_units = {p + name: unit.prefixed(p) for p in prefixes} if prefixed else {}
        collisions = [n for n, u in scaled_units.items() if n in self and self[n] != u]
        if collisions:
            raise ValueError(f'cannot define {name!r}: unit collides with ' + ', '.join(collisions))
        dict.__setitem__(self, name, unit)
        for n, u in scaled_units.items():
            dict.setdefault(self, n, u)
        return unit


## ISQ DIMENSIONS

T = Dimension('T')
L = Dimension('L')
M = Dimension('M')
I = Dimension('I')
Θ = Dimension('Θ')
N = Dimension('N')
J = Dimension('J')


## QUANTITY KINDS

time = QuantityKind('time', T)
length = QuantityKind('length', L)
mass = QuantityKind('mass', M)
electric_current = QuantityKind('electric current', I)
temperature = QuantityKind('thermodynamic temperature', Θ)
amount_of_substance = QuantityKind('amount of substance', N)
luminous_intensity = QuantityKind('luminous intensity', J)

plane_angle = QuantityKind('plane angle', parent=number)
solid_angle = QuantityKind('solid angle', parent=number)

area = QuantityKind('area', L**2)
volume = QuantityKind('volume', L**3)
velocity = QuantityKind('velocity', L / T)
acceleration = QuantityKind('acceleration', L / T**2)
angular_velocity = plane_angle / time
frequency = QuantityKind('frequency', T**-1)
radioactivity = QuantityKind('radioactivity', parent=time**-1)
force = QuantityKind('force', M * L / T**2)
pressure = QuantityKind('pressure', M / L / T**2)
energy = QuantityKind('energy', M * L**2 / T**2)
power = QuantityKind('power', M * L**2 / T**3)
electric_charge = QuantityKind('electric charge', I * T)
electric_potential = QuantityKind('electric potential', M * L**2 / T**3 / I)
capacitance = QuantityKind('capacitance', I**2 * T**4 / M / L**2)
resistance = QuantityKind('resistance', M * L**2 / T**3 / I**2)
conductance = QuantityKind('conductance', I**2 * T**3 / M / L**2)
magnetic_flux = QuantityKind('magnetic flux', M * L**2 / T**2 / I)
magnetic_flux_density = QuantityKind('magnetic flux density', M / T**2 / I)
inductance = QuantityKind('inductance', M * L**2 / T**2 / I**2)
luminous_flux = luminous_intensity * solid_angle
illuminance = luminous_flux / area
absorbed_dose = QuantityKind('absorbed dose', L**2 / T**2)
dose_equivalent = QuantityKind('dose equivalent', parent=absorbed_dose)
catalytic_activity = QuantityKind('catalytic activity', N / T)
concentration = QuantityKind('concentration', N / L**3)
molality = QuantityKind('molality', N / M)


## SI UNITS

units = Units()

units.s = Unit('s', time)
units.m = Unit('m', length)
units['kg'] = Unit('kg', mass)
units.g = units.kg.scaled('g', 1e-3)
units.A = Unit('A', electric_current)
units.K = Unit('K', temperature)
units.mol = Unit('mol', amount_of_substance)
units.cd = Unit('cd', luminous_intensity)

units.rad = Unit('rad', plane_angle) # radian
units.sr = Unit('sr', solid_angle) # steradian
units.N = Unit('N', force) # newton
units.Pa = Unit('Pa', pressure) # pascal
units.J = Unit('J', energy) # joule
units.W = Unit('W', power) # watt
units.Hz = Unit('Hz', frequency) # hertz
units.C = Unit('C', electric_charge) # coulomb
units.V = Unit('V', electric_potential) # volt
units.F = Unit('F', capacitance) # farad
units.Ω = Unit('Ω', resistance) # ohm
units.S = Unit('S', conductance) # siemens
units.Wb = Unit('Wb', magnetic_flux) # weber
units.T = Unit('T', magnetic_flux_density) # tesla
units.H = Unit('H', inductance) # henry
units.lm = Unit('lm', luminous_flux) # lumen
units.lx = Unit('lx', illuminance) # lux
units.Bq = Unit('Bq', radioactivity) # becquerel
units.Gy = Unit('Gy', absorbed_dose) # gray
units.Sv = Unit('Sv', dose_equivalent) # sievert
units.kat = Unit('kat', catalytic_activity) # katal

units['°C'] = units.K.scaled('°C', reference=-273.15) # degree Celsius

units['min'] = 60 * units.s # minute
units['h'] = 60 * units.min # hour
units['day'] = 24 * units.h # day
units['week'] = 7 * units.day # week
units['year'] = 365.25 * units.day # julian year

units['deg'] = math.pi / 180 * units.rad # degree
units['arcmin'] = units.deg / 60 # arcminute
units['arcsec'] = units.arcmin / 60 # arcsecond

units.L = units.dm**3 # litre
units.t = 1000 * units.kg # tonne
units['ha'] = units.hm**2 # hectare
units['au'] = 149597870700 * units.m # astronomical unit
units.Da = 1.66053906660e-27 * units.kg # dalton
units.eV = 1.602176634e-19 * units.J # electronvolt
units['Wh'] = units.W * units.h # watt hour
units['kWh'] = units.kW * units.h # kilowatt hour

units.M = units.mol / units.L # molar
units['molal'] = units.mol / units.kg # molal

units['dBW'] = units.W.scaled('dBW', scale=Scale.LOGARITHMIC) # decibel-watt
units['dBm'] = units.mW.scaled('dBm', scale=Scale.LOGARITHMIC) # decibel-milliwatt

# vim:sw=4:sts=4:et
