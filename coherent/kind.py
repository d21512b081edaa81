'''
Quantity kinds.

Units that share a dimension vector need not measure the same thing: a
frequency and a radioactivity are both inverse times, and a plane angle is
as dimensionless as a plain ratio. A :class:`QuantityKind` attaches a
semantic identity to a dimension vector, optionally deriving from a parent
kind of the same dimension. Derivation is asymmetric: a wavelength can be used
where a length is expected, but an arbitrary length is not a wavelength.

    >>> from coherent.dimension import Dimension, DimensionVector
    >>> length = QuantityKind('length', DimensionVector(Dimension('L')))
    >>> wavelength = QuantityKind('wavelength', parent=length)
    >>> wavelength.convertible_to(length), length.convertible_to(wavelength)
    (True, False)

Kinds multiply, divide and raise to rational powers, which yields a product
kind that remembers its factors. A product kind is derived if any of its
factors is; its parent is the product of the factors' parents.
'''

from . import rational
from .dimension import DimensionVector, Dimension, format_powers
from .types import Immutable


class InvalidKindDerivationError(ValueError):
    pass


class QuantityKind(Immutable):
    '''Semantic category of a quantity.

    Args
    ----
    name : :class:`str`
        Name of the kind.
    dims : :class:`coherent.dimension.DimensionVector`
        Dimension vector; may be omitted for derived kinds, in which case it is
        copied from the parent.
    parent : :class:`QuantityKind`, optional
        The kind that this kind derives from. The dimension vectors of parent
        and child must be equal.
    '''

    def __new__(cls, name, dims=None, parent=None):
        if not isinstance(name, str):
            raise TypeError(f'kind name must be a str, got {type(name).__name__}')
        if isinstance(dims, Dimension):
            dims = DimensionVector(dims)
        if parent is not None:
            if not isinstance(parent, QuantityKind):
                raise TypeError(f'parent must be a QuantityKind, got {type(parent).__name__}')
            if dims is None:
                dims = parent.dims
            elif dims != parent.dims:
                raise InvalidKindDerivationError(f'cannot derive {name} {dims} from {parent.name} {parent.dims}')
        elif dims is None:
            raise TypeError(f'kind {name} requires either dims or parent')
        if not isinstance(dims, DimensionVector):
            raise TypeError(f'dims must be a DimensionVector, got {type(dims).__name__}')
        return super().__new__(cls, name, dims, parent)

    def __init__(self, name, dims=None, parent=None):
        self.name = name
        self.dims = dims
        self.parent = parent

    @property
    def derived(self):
        return self.parent is not None

    @property
    def terms(self):
        return (self, rational.one),

    @property
    def ancestors(self):
        'Parent, grandparent, etc, nearest first.'

        kind = self.parent
        while kind is not None:
            yield kind
            kind = kind.parent

    def derives_from(self, other):
        return any(kind == other for kind in self.ancestors)

    def convertible_to(self, other):
        '''Test if values of this kind may be converted to ``other``.

        True if the dimension vectors are equal and either the kinds are the
        same, this kind derives from ``other``, or neither kind is derived.'''

        if not isinstance(other, QuantityKind):
            raise TypeError(f'expected QuantityKind, got {type(other).__name__}')
        return self.dims == other.dims and (self == other or self.derives_from(other) or not self.derived and not other.derived)

    def __mul__(self, other):
        if not isinstance(other, QuantityKind):
            return NotImplemented
        return product(self.terms + other.terms)

    def __truediv__(self, other):
        if not isinstance(other, QuantityKind):
            return NotImplemented
        return product(self.terms + tuple((kind, -power) for kind, power in other.terms))

    def __pow__(self, power):
        try:
            power = rational.asrational(power)
        except TypeError:
            return NotImplemented
        return product((kind, p * power) for kind, p in self.terms)

    def __str__(self):
        return self.name


class _Number(QuantityKind):

    # `number` is the identity of kind multiplication
    @property
    def terms(self):
        return ()


class ProductKind(QuantityKind):
    '''Kind synthesized by composition of other kinds.

    Args
    ----
    terms : :class:`tuple` of (:class:`QuantityKind`, :class:`coherent.rational.Rational`) pairs
        The factors and their powers, in canonical order.
    '''

    def __new__(cls, terms):
        return Immutable.__new__(cls, terms)

    def __init__(self, terms):
        self.name = format_powers([(f'({kind.name})' if ' ' in kind.name else kind.name, power) for kind, power in terms])
        self.dims = DimensionVector()
        for kind, power in terms:
            self.dims *= kind.dims**power
        self._terms = terms
        if any(kind.derived for kind, power in terms):
            self.parent = product((kind.parent if kind.derived else kind, power) for kind, power in terms)
        else:
            self.parent = None

    @property
    def terms(self):
        return self._terms


def product(terms):
    '''Kind of the product of ``kind**power`` over all ``(kind, power)`` terms.

    Product kinds are flattened to their factors, equal kinds are merged and
    zero powers dropped. No terms results in :data:`number`, a single term of
    power one in the kind itself.'''

    powers = {}
    for kind, power in terms:
        for k, p in kind.terms:
            powers[k] = powers.get(k, rational.zero) + p * power
    terms = tuple(sorted(((kind, power) for kind, power in powers.items() if power), key=lambda item: (item[0].name, str(item[0].dims), repr(item[0]))))
    if not terms:
        return number
    if len(terms) == 1 and terms[0][1] == 1:
        return terms[0][0]
    return ProductKind(terms)


number = _Number('number', DimensionVector())

# vim:sw=4:sts=4:et
