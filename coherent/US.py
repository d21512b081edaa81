'''
US customary units, defined in terms of the SI units by their exact
international definitions. The units do not take metric prefixes.

    >>> from coherent import SI, US
    >>> f'{(1 * US.units.mi).to(SI.units.km):.6f}'
    '1.609344 km'
    >>> f'{(300 * SI.units.K).to(US.units["°F"]):.2f}'
    '80.33 °F'
'''

from . import SI
from .SI import Units
from .unit import Unit

si = SI.units

units = Units()

# length
units['in'] = 25.4 * si.mm # inch
units['ft'] = 12 * units['in'] # foot
units['yd'] = 3 * units.ft # yard
units['mi'] = 1760 * units.yd # mile
units['nmi'] = 1852 * si.m # nautical mile

# area
units['acre'] = 4840 * units.yd**2 # acre

# volume
units['gal'] = 231 * units['in']**3 # gallon
units['qt'] = units.gal / 4 # quart
units['pt'] = units.qt / 2 # pint
units['cup'] = units.pt / 2 # cup
units['floz'] = units.cup / 8 # fluid ounce
units['tbsp'] = units.floz / 2 # tablespoon
units['tsp'] = units.tbsp / 3 # teaspoon

# mass
units['lb'] = 0.45359237 * si.kg # pound
units['oz'] = units.lb / 16 # ounce
units['gr'] = units.lb / 7000 # grain
units['ton'] = 2000 * units.lb # short ton

# velocity
units['mph'] = units.mi / si.h # mile per hour
units['kn'] = units.nmi / si.h # knot

# force and pressure
units['lbf'] = 9.80665 * units.lb * si.m / si.s**2 # pound-force
units['psi'] = units.lbf / units['in']**2 # pound per square inch

# energy and power
units['BTU'] = 1055.05585262 * si.J # British thermal unit
units['ftlbf'] = units.ft * units.lbf # foot-pound
units['hp'] = 550 * units.ftlbf / si.s # horsepower

# temperature
units['°R'] = Unit('°R', SI.temperature, 1.8, base=si.K) # degree Rankine
units['°F'] = Unit('°F', SI.temperature, 1.8, reference=-459.67, base=si.K) # degree Fahrenheit

# vim:sw=4:sts=4:et
