'''
Dimensions and dimension vectors.

A :class:`Dimension` is a named base axis of measurement raised to a rational
power. Any name can serve as a base axis, so that next to the seven ISQ base
dimensions clients are free to introduce their own, such as a dimension for
information or for currency. A :class:`DimensionVector` collects the nonzero
powers of a quantity into a name sorted tuple:

    >>> from coherent.dimension import Dimension
    >>> L = Dimension('L')
    >>> T = Dimension('T')
    >>> v = L / T
    >>> v
    DimensionVector((Dimension('L', Rational(1, 1)), Dimension('T', Rational(-1, 1))))
    >>> str(v)
    '[L/T]'
    >>> v * T == L * T**0
    True
'''

from . import rational
from .types import Immutable


class DimensionMismatchError(TypeError):
    pass


def format_powers(items):
    '''Format ``(name, power)`` pairs as a product string.

    Positive powers come first, joined by ``*``; negative powers follow, each
    preceded by ``/``. A power other than one is appended to the name, with a
    rational denominator separated by an underscore: ``m2`` for square and
    ``m1_2`` for square root.'''

    s = ''
    for name, power in sorted(items, key=lambda item: item[1] < 0):
        numer = abs(power.numer)
        s += ('*' if power > 0 else '/') + name \
            + (str(numer) if numer != 1 else '') \
            + ('_'+str(power.denom) if power.denom != 1 else '')
    return s[1:] if s.startswith('*') else s


class Dimension(Immutable):
    '''Named base axis raised to a rational power.

    Args
    ----
    name : :class:`str`
        Nonempty name of the base axis.
    power : :class:`int`, :class:`fractions.Fraction` or :class:`coherent.rational.Rational`
        Exponent, one by default.
    '''

    def __new__(cls, name, power=1):
        if not isinstance(name, str):
            raise TypeError(f'dimension name must be a str, got {type(name).__name__}')
        if not name:
            raise ValueError('dimension name cannot be empty')
        return super().__new__(cls, name, rational.asrational(power))

    def __init__(self, name, power=1):
        self.name = name
        self.power = power

    def __mul__(self, other):
        return DimensionVector((self,)) * other

    def __truediv__(self, other):
        return DimensionVector((self,)) / other

    def __pow__(self, power):
        return DimensionVector((self,))**power

    def __str__(self):
        return format_powers([(self.name, self.power)]) if self.power else self.name + '0'


def _merge(a, b, op):
    # a and b are name sorted with unique names
    i = j = 0
    merged = []
    while i < len(a) or j < len(b):
        if j == len(b) or i < len(a) and a[i].name < b[j].name:
            merged.append(a[i])
            i += 1
        elif i == len(a) or b[j].name < a[i].name:
            merged.append(Dimension(b[j].name, op(rational.zero, b[j].power)))
            j += 1
        else:
            power = op(a[i].power, b[j].power)
            if power:
                merged.append(Dimension(a[i].name, power))
            i += 1
            j += 1
    return tuple(merged)


class DimensionVector(Immutable):
    '''Sparse vector of dimension powers.

    The vector is stored in canonical form: entries are sorted by name, equal
    names are merged by adding their powers and entries of zero power are
    dropped. Two vectors are equal if and only if their canonical forms are
    identical, with no numerical tolerance.

    Args
    ----
    dims : iterable of :class:`Dimension`
        The dimensions, in any order and possibly with repeated names.
    '''

    def __new__(cls, dims=()):
        if isinstance(dims, Dimension):
            dims = dims,
        powers = {}
        for dim in dims:
            if not isinstance(dim, Dimension):
                raise TypeError(f'expected Dimension, got {type(dim).__name__}')
            powers[dim.name] = powers.get(dim.name, rational.zero) + dim.power
        return super().__new__(cls, tuple(Dimension(name, power) for name, power in sorted(powers.items()) if power))

    def __init__(self, dims=()):
        self.dims = dims

    @classmethod
    def from_powers(cls, powers):
        'Create a vector from a mapping of names to powers.'

        return cls(Dimension(name, power) for name, power in powers.items())

    @property
    def powers(self):
        return {dim.name: dim.power for dim in self.dims}

    def power(self, name):
        'Power of ``name``, zero if absent.'

        for dim in self.dims:
            if dim.name == name:
                return dim.power
        return rational.zero

    def __iter__(self):
        return iter(self.dims)

    def __len__(self):
        return len(self.dims)

    def __bool__(self):
        return bool(self.dims)

    @property
    def isdimensionless(self):
        return not self.dims

    def multiply(self, other):
        if isinstance(other, Dimension):
            other = DimensionVector((other,))
        elif not isinstance(other, DimensionVector):
            return NotImplemented
        return DimensionVector._new(_merge(self.dims, other.dims, rational.add), ())

    def divide(self, other):
        if isinstance(other, Dimension):
            other = DimensionVector((other,))
        elif not isinstance(other, DimensionVector):
            return NotImplemented
        return DimensionVector._new(_merge(self.dims, other.dims, rational.subtract), ())

    def equals(self, other):
        return self == other

    __mul__ = multiply
    __truediv__ = divide

    def __pow__(self, power):
        try:
            power = rational.asrational(power)
        except TypeError:
            return NotImplemented
        if not power:
            return DimensionVector._new((), ())
        return DimensionVector._new(tuple(Dimension(dim.name, dim.power * power) for dim in self.dims), ())

    def __str__(self):
        return '[' + format_powers([(dim.name, dim.power) for dim in self.dims]) + ']'


dimensionless = DimensionVector()

# vim:sw=4:sts=4:et
