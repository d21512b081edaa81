'''
Units of measurement.

A :class:`Unit` is an affine rescaling of the coherent unit of a
:class:`~coherent.kind.QuantityKind`. The ``multiplier`` counts how many units
fit in one coherent unit and the ``reference`` is the value that the unit
assigns to the coherent zero, so that a value ``x`` in coherent units reads
``x * multiplier + reference`` in the unit at hand. A kilometre has multiplier
``1e-3``, a degree Celsius has multiplier one and reference ``-273.15``.

    >>> from coherent.dimension import Dimension
    >>> from coherent.kind import QuantityKind
    >>> length = QuantityKind('length', Dimension('L'))
    >>> m = Unit('m', length)
    >>> km = m.prefixed('k')
    >>> km.multiplier
    0.001

Units multiply, divide and raise to rational powers. Composition tracks the
named units involved, so that equal units cancel and names stay readable:

    >>> time = QuantityKind('time', Dimension('T'))
    >>> s = Unit('s', time)
    >>> str(km / s**2 * s)
    'km/s'

Only linear units without offset compose; multiplying a degree Celsius or a
decibel has no meaning and raises an error.
'''

import enum
import math
import numbers
import numpy
from . import rational, kind as _kind
from .dimension import format_powers
from .types import Immutable


class IncompatibleReferencePointError(ValueError):
    pass


class ScaleError(ValueError):
    pass


class Scale(enum.Enum):
    LINEAR = 'linear'
    LOGARITHMIC = 'logarithmic'


## METRIC PREFIXES

prefixes = dict(Q=30, R=27, Y=24, Z=21, E=18, P=15, T=12, G=9, M=6, k=3, h=2, da=1,
    d=-1, c=-2, m=-3, μ=-6, n=-9, p=-12, f=-15, a=-18, z=-21, y=-24, r=-27, q=-30)

_POW10_MIN = -30
_POW10 = tuple(float(f'1e{e}') for e in range(_POW10_MIN, 31))


def pow10(exponent: int) -> float:
    '''Power of ten, correctly rounded.

    Exponents between -30 and 30 are served from a table; others fall back on
    exact integer arithmetic.'''

    exponent = int(exponent)
    if 0 <= exponent - _POW10_MIN < len(_POW10):
        return _POW10[exponent - _POW10_MIN]
    return float(10**exponent) if exponent >= 0 else 1 / 10**-exponent


def _rescale(multiplier, exponent):
    # powers of ten up to 1e22 are exact, so divide by the positive power
    return multiplier / pow10(exponent) if exponent > 0 else multiplier * pow10(-exponent)


## UNIT CLASSES

class Unit(Immutable):
    '''Named unit of measurement.

    Args
    ----
    name : :class:`str`
        The symbol of the unit.
    kind : :class:`coherent.kind.QuantityKind`
        The kind of quantity that the unit measures.
    multiplier : :class:`float`
        Number of units per coherent unit, positive and finite.
    reference : :class:`float`
        Value of the coherent zero in this unit.
    scale : :class:`Scale`
        Linear, or logarithmic for decibel units.
    base : :class:`Unit`, optional
        Coherent unit that this unit was derived from, used to name the
        result of :meth:`coherent`. Dropped for units that are coherent
        themselves.
    '''

    def __new__(cls, name, kind, multiplier=1., reference=0., scale=Scale.LINEAR, base=None):
        if not isinstance(name, str):
            raise TypeError(f'unit name must be a str, got {type(name).__name__}')
        if not isinstance(kind, _kind.QuantityKind):
            raise TypeError(f'kind must be a QuantityKind, got {type(kind).__name__}')
        multiplier = float(multiplier)
        if not math.isfinite(multiplier) or multiplier <= 0:
            raise ValueError(f'multiplier of {name} must be positive and finite, got {multiplier}')
        reference = float(reference)
        if not math.isfinite(reference):
            raise ValueError(f'reference of {name} must be finite, got {reference}')
        scale = Scale(scale)
        if multiplier == 1 and reference == 0 and scale == Scale.LINEAR:
            base = None
        elif base is not None:
            if not isinstance(base, Unit):
                raise TypeError(f'base must be a Unit, got {type(base).__name__}')
            base = base.coherent()
            if base.kind != kind:
                base = None
        return super().__new__(cls, name, kind, multiplier, reference, scale, base)

    def __init__(self, name, kind, multiplier=1., reference=0., scale=Scale.LINEAR, base=None):
        self.name = name
        self.kind = kind
        self.multiplier = multiplier
        self.reference = reference
        self.scale = scale
        self.base = base

    @property
    def terms(self):
        return (self, rational.one),

    @property
    def dims(self):
        return self.kind.dims

    @property
    def symbol(self):
        return self.name

    @property
    def iscoherent(self):
        return self.multiplier == 1 and self.reference == 0 and self.scale == Scale.LINEAR

    @property
    def islogarithmic(self):
        return self.scale == Scale.LOGARITHMIC

    def coherent(self):
        'The coherent unit of the same kind.'

        if self.iscoherent:
            return self
        if self.base is not None:
            return self.base
        return Unit(f'[{self.kind.name}]', self.kind)

    def scaled(self, name, size=1., reference=0., scale=Scale.LINEAR):
        '''New unit ``name`` such that one of it equals ``size`` of this unit.

        Args
        ----
        name : :class:`str`
            Symbol of the new unit.
        size : :class:`float`
            The size of the new unit expressed in this unit.
        reference : :class:`float`
            Reference point of the new unit.
        scale : :class:`Scale`
            Scale of the new unit.

        Example
        -------
        >>> minute = s.scaled('min', 60) # doctest: +SKIP
        '''

        _check_composable(self, 'scale')
        return Unit(name, self.kind, self.multiplier / size, reference, scale, base=self)

    def prefixed(self, prefix):
        'Apply metric prefix, e.g. ``m.prefixed("k")`` for kilometre.'

        try:
            exponent = prefixes[prefix]
        except KeyError:
            raise ValueError(f'unknown metric prefix {prefix!r}') from None
        _check_composable(self, 'prefix')
        return Unit(prefix + self.name, self.kind, _rescale(self.multiplier, exponent), base=self)

    def multiply(self, other):
        return compose(((self, rational.one), (other, rational.one)))

    def divide(self, other):
        return compose(((self, rational.one), (other, -rational.one)))

    def power(self, power):
        return compose(((self, rational.asrational(power)),))

    def sqrt(self):
        return self.power(rational.half)

    def __mul__(self, other):
        if isinstance(other, Unit):
            return self.multiply(other)
        if not _isvalue(other):
            return NotImplemented
        return _quantity(other, self)

    def __rmul__(self, other):
        if not _isvalue(other):
            return NotImplemented
        return _quantity(other, self)

    def __truediv__(self, other):
        if isinstance(other, Unit):
            return self.divide(other)
        if not _isvalue(other):
            return NotImplemented
        _check_composable(self, 'scale')
        return _quantity(numpy.divide(1., other), self)

    def __rtruediv__(self, other):
        if not _isvalue(other):
            return NotImplemented
        return _quantity(other, self.power(-1))

    def __pow__(self, power):
        try:
            power = rational.asrational(power)
        except TypeError:
            return NotImplemented
        return self.power(power)

    # keep numpy from distributing multiplication over array elements
    __array_ufunc__ = None

    def __str__(self):
        return self.name


class _One(Unit):

    @property
    def terms(self):
        return ()


class ProductUnit(Unit):
    '''Unit synthesized by composition of other units.

    Args
    ----
    terms : :class:`tuple` of (:class:`Unit`, :class:`coherent.rational.Rational`) pairs
        The factors and their powers, in canonical order.
    '''

    def __new__(cls, terms):
        return Immutable.__new__(cls, terms)

    def __init__(self, terms):
        self._terms = terms
        self.name = format_powers([(unit.name, power) for unit, power in terms])
        self.kind = _kind.product((unit.kind, power) for unit, power in terms)
        multiplier = 1.
        for unit, power in terms:
            multiplier *= unit.multiplier**(int(power) if power.isint else float(power))
        self.multiplier = multiplier
        self.reference = 0.
        self.scale = Scale.LINEAR
        self.base = None

    @property
    def terms(self):
        return self._terms

    def coherent(self):
        if self.iscoherent:
            return self
        return compose((unit.coherent(), power) for unit, power in self._terms)


## COMPOSITION

def _check_composable(unit, action):
    if unit.scale != Scale.LINEAR:
        raise ScaleError(f'cannot {action} logarithmic unit {unit}')
    if unit.reference:
        raise IncompatibleReferencePointError(f'cannot {action} unit {unit} with nonzero reference point {unit.reference}')


def compose(terms):
    '''Unit of the product of ``unit**power`` over all ``(unit, power)`` terms.

    Product units are flattened to their factors, equal units are merged and
    zero powers dropped. No terms results in the dimensionless unit
    :data:`one`, a single term of power one in the unit itself.'''

    powers = {}
    for unit, power in terms:
        if not isinstance(unit, Unit):
            raise TypeError(f'expected Unit, got {type(unit).__name__}')
        _check_composable(unit, 'compose')
        for u, p in unit.terms:
            powers[u] = powers.get(u, rational.zero) + p * power
    terms = tuple(sorted(((unit, power) for unit, power in powers.items() if power), key=lambda item: (item[0].name, item[0].multiplier, repr(item[0]))))
    if not terms:
        return one
    if len(terms) == 1 and terms[0][1] == 1:
        return terms[0][0]
    return ProductUnit(terms)


def multiply(a, b):
    return a.multiply(b)


def divide(a, b):
    return a.divide(b)


def power(unit, power):
    return unit.power(power)


def sqrt(unit):
    return unit.sqrt()


def _isvalue(value):
    # plain numbers and arrays, not quantities
    return isinstance(value, (numbers.Number, numpy.ndarray, numpy.generic, list, tuple))


def _quantity(value, unit):
    from .quantity import Quantity
    return Quantity(value, unit)


one = _One('', _kind.number)

# vim:sw=4:sts=4:et
