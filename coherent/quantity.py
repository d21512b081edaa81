'''
Quantities: magnitudes bound to units.

A :class:`Quantity` pairs a magnitude, which can be any number or numpy
array, with a :class:`coherent.unit.Unit`. The idiomatic way to create one is
by multiplying a value with a unit:

    >>> from coherent import SI
    >>> d = 3 * SI.units.km
    >>> t = 15 * SI.units.min
    >>> v = d / t
    >>> print(v)
    0.2 km/min
    >>> f'{v.to(SI.units.km / SI.units.h):.1f}'
    '12.0 km/h'

Addition and subtraction require the second operand to be convertible to the
unit of the first, which also determines the unit of the result. Multiplication
and division compose units and are always allowed between linear units.
Comparisons express both operands in a common coherent unit first, so that
``1 m == 100 cm``.

Bare numbers act as dimensionless quantities in additions and comparisons,
which requires the other quantity to be freely interchangeable with a number;
a plane angle, for example, is not. Multiplication by a bare number scales the
magnitude and keeps the unit, which is only allowed for linear units without
offset: twice ten degrees Celsius has no meaning.

No numpy specific methods or attributes are defined. Array manipulations must
be performed via numpy's API, which is supported via the array protocol ([NEP
18](https://numpy.org/neps/nep-0018-array-function-protocol.html)).

    >>> import numpy
    >>> F = numpy.array([1., 2., 3.]) * SI.units.N
    >>> print(numpy.sum(F))
    6.0 N
'''

import numbers
import operator
import numpy
from functools import partial, partialmethod
from . import rational, config, conversion, warnings
from .dimension import DimensionMismatchError
from .kind import number
from .unit import Unit, one, IncompatibleReferencePointError, ScaleError, _check_composable


def _isoperand(value):
    return isinstance(value, (Quantity, Unit, numbers.Number, rational.Rational, numpy.ndarray, numpy.generic, list, tuple))


def _try_or_noimp(self, func, *args):
    if not _isoperand(args[-1]):
        return NotImplemented
    try:
        return func(self, *args)
    except DimensionMismatchError:
        return NotImplemented


def _operand(self, func, *args):
    if not _isoperand(args[-1]):
        return NotImplemented
    return func(self, *args)


def _reverse(self, func, arg):
    return func(arg, self)


def _check_bare(unit):
    if not (conversion.convertible(unit, number) and conversion.convertible(number, unit)):
        raise DimensionMismatchError(f'cannot combine a bare number with a quantity of kind {unit.kind}')


def _dimensionless(unit0, unit1):
    # a plain number, bare or wrapped, only meets kinds interchangeable with it
    if unit0 is None:
        unit0 = one
    if unit1 is None:
        unit1 = one
    if unit0.kind == number:
        _check_bare(unit1)
    if unit1.kind == number:
        _check_bare(unit0)
    return unit0, unit1


def _scalable(unit):
    # scaling the magnitude is only meaningful on a linear scale without offset
    if unit is None:
        return one
    _check_composable(unit, 'scale')
    return unit


def _additive(action, unit0, unit1):
    # units for an operation that adds a value in unit1 to a value in unit0
    unit0, unit1 = _dimensionless(unit0, unit1)
    if not conversion.convertible(unit1, unit0):
        raise DimensionMismatchError(f'incompatible arguments for {action}: {unit0.kind} {unit0.dims}, {unit1.kind} {unit1.dims}')
    if unit0.islogarithmic or unit1.islogarithmic:
        raise ScaleError(f'incompatible arguments for {action}: logarithmic units {unit0}, {unit1}')
    if unit0.reference != unit1.reference:
        raise IncompatibleReferencePointError(f'incompatible arguments for {action}: {unit0} and {unit1} have different reference points')
    return unit0, unit1


def _common(action, unit0, arg0, unit1, arg1):
    # both values expressed in a shared coherent unit
    unit0, unit1 = _dimensionless(unit0, unit1)
    if conversion.convertible(unit1, unit0):
        target = unit0.coherent()
    elif conversion.convertible(unit0, unit1):
        target = unit1.coherent()
    else:
        raise DimensionMismatchError(f'incompatible arguments for {action}: {unit0.kind} {unit0.dims}, {unit1.kind} {unit1.dims}')
    return conversion.convert(arg0, unit0, target), conversion.convert(arg1, unit1, target)


def _exponent(power):
    power = rational.asrational(power)
    return power, (power.numer if power.isint else float(power))


class Quantity:
    '''Magnitude bound to a unit.

    Args
    ----
    magnitude : :class:`float` or array
        The numerical value, expressed in ``unit``. Lists and tuples are
        converted to arrays.
    unit : :class:`coherent.unit.Unit`, optional
        The unit of the magnitude; a bare number is dimensionless.
    '''

    def __init__(self, magnitude, unit=None):
        if isinstance(magnitude, (Quantity, Unit)):
            raise TypeError(f'magnitude must be a number or array, got {type(magnitude).__name__}')
        if unit is None:
            unit = one
        elif not isinstance(unit, Unit):
            raise TypeError(f'unit must be a Unit, got {type(unit).__name__}')
        if isinstance(magnitude, (list, tuple)):
            magnitude = numpy.asarray(magnitude)
        self.__magnitude = magnitude
        self.__unit = unit

    def __reduce__(self):
        return Quantity, (self.__magnitude, self.__unit)

    @property
    def magnitude(self):
        return self.__magnitude

    @property
    def unit(self):
        return self.__unit

    @property
    def kind(self):
        return self.__unit.kind

    @property
    def dims(self):
        return self.__unit.kind.dims

    def value_in(self, unit):
        '''Return the magnitude expressed in ``unit``.

        Raises :class:`coherent.dimension.DimensionMismatchError` if the
        quantity cannot be converted to ``unit``.'''

        if not isinstance(unit, Unit):
            raise TypeError(f'expected Unit, got {type(unit).__name__}')
        return conversion.convert(self.__magnitude, self.__unit, unit)

    def to(self, unit):
        'Return the quantity expressed in ``unit``.'

        return Quantity(self.value_in(unit), unit)

    def coherent(self):
        'Return the quantity expressed in the coherent unit of its kind.'

        return self.to(self.__unit.coherent())

    def convertible_to(self, unit):
        return conversion.convertible(self.__unit, unit)

    def __float__(self):
        if not conversion.convertible(self.__unit, number):
            raise DimensionMismatchError(f'cannot convert quantity of kind {self.kind} to float')
        if self.__unit.kind.derived and config.warn_untag:
            warnings.warn(f'conversion to float drops kind {self.kind}', stacklevel=2)
        return float(conversion.convert(self.__magnitude, self.__unit, one))

    def __bool__(self):
        return bool(self.__magnitude)

    def __len__(self):
        return len(self.__magnitude)

    def __iter__(self):
        return (Quantity(value, self.__unit) for value in self.__magnitude)

    def __format__(self, format_spec):
        s = format(self.__magnitude, format_spec)
        return f'{s} {self.__unit.symbol}' if self.__unit.symbol else s

    def __str__(self):
        return self.__format__('')

    def __repr__(self):
        if not self.__unit.symbol:
            return f'Quantity({self.__magnitude!r})'
        return f'Quantity({self.__magnitude!r}, {self.__unit.symbol})'

    def __hash__(self):
        return hash((self.dims, conversion.convert(self.__magnitude, self.__unit, self.__unit.coherent())))

    @staticmethod
    def __unpack(*args):
        for arg in args:
            if isinstance(arg, Quantity):
                yield arg.__unit, arg.__magnitude
            elif isinstance(arg, Unit):
                yield arg, 1
            else:
                yield None, arg

    __DISPATCH_TABLE = {}

    ## POPULATE DISPATCH TABLE

    def register(func, __table=__DISPATCH_TABLE):
        def r(dispatch_func):
            __table[func] = partial(dispatch_func, func)
            return dispatch_func
        return r

    @register(numpy.absolute)
    @register(numpy.broadcast_to)
    @register(numpy.conjugate)
    @register(numpy.imag)
    @register(numpy.max)
    @register(numpy.mean)
    @register(numpy.min)
    @register(numpy.negative)
    @register(numpy.positive)
    @register(numpy.real)
    @register(numpy.reshape)
    @register(numpy.sum)
    @register(numpy.take)
    @register(numpy.transpose)
    @register(operator.abs)
    @register(operator.getitem)
    @register(operator.neg)
    @register(operator.pos)
    def __unary(op, *args, **kwargs):
        (unit0, arg0), = Quantity.__unpack(args[0])
        return Quantity(op(arg0, *args[1:], **kwargs), unit0)

    @register(numpy.add)
    @register(numpy.hypot)
    @register(numpy.maximum)
    @register(numpy.minimum)
    @register(numpy.subtract)
    @register(operator.add)
    @register(operator.sub)
    def __add_like(op, *args, **kwargs):
        (unit0, arg0), (unit1, arg1) = Quantity.__unpack(args[0], args[1])
        unit0, unit1 = _additive(op.__name__, unit0, unit1)
        return Quantity(op(arg0, conversion.convert(arg1, unit1, unit0), *args[2:], **kwargs), unit0)

    @register(numpy.matmul)
    @register(numpy.multiply)
    @register(operator.matmul)
    @register(operator.mul)
    def __mul_like(op, *args, **kwargs):
        (unit0, arg0), (unit1, arg1) = Quantity.__unpack(args[0], args[1])
        unit = _scalable(unit0) if unit1 is None else _scalable(unit1) if unit0 is None else unit0 * unit1
        return Quantity(op(arg0, arg1, *args[2:], **kwargs), unit)

    @register(numpy.divide)
    @register(numpy.true_divide)
    @register(operator.truediv)
    def __div_like(op, *args, **kwargs):
        (unit0, arg0), (unit1, arg1) = Quantity.__unpack(args[0], args[1])
        unit = _scalable(unit0) if unit1 is None else unit1**-1 if unit0 is None else unit0 / unit1
        return Quantity(op(arg0, arg1, *args[2:], **kwargs), unit)

    @register(numpy.sqrt)
    def __sqrt(op, *args, **kwargs):
        (unit0, arg0), = Quantity.__unpack(args[0])
        return Quantity(op(arg0, *args[1:], **kwargs), unit0.sqrt())

    @register(numpy.power)
    @register(operator.pow)
    def __pow_like(op, *args, **kwargs):
        (unit0, arg0), = Quantity.__unpack(args[0])
        if isinstance(args[1], Quantity):
            raise DimensionMismatchError(f'exponent must be a bare number, got a quantity of kind {args[1].kind}')
        power, exponent = _exponent(args[1])
        return Quantity(op(arg0, exponent, *args[2:], **kwargs), unit0**power)

    @register(numpy.isfinite)
    @register(numpy.isnan)
    @register(numpy.ndim)
    @register(numpy.shape)
    @register(numpy.size)
    def __unary_op(op, *args, **kwargs):
        (_unit0, arg0), = Quantity.__unpack(args[0])
        return op(arg0, *args[1:], **kwargs)

    @register(numpy.equal)
    @register(numpy.greater)
    @register(numpy.greater_equal)
    @register(numpy.less)
    @register(numpy.less_equal)
    @register(numpy.not_equal)
    @register(operator.ge)
    @register(operator.gt)
    @register(operator.le)
    @register(operator.lt)
    def __binary_op(op, *args, **kwargs):
        (unit0, arg0), (unit1, arg1) = Quantity.__unpack(args[0], args[1])
        arg0, arg1 = _common(op.__name__, unit0, arg0, unit1, arg1)
        return op(arg0, arg1, *args[2:], **kwargs)

    @register(operator.eq)
    @register(operator.ne)
    def __equal(op, *args):
        (unit0, arg0), (unit1, arg1) = Quantity.__unpack(*args)
        arg0, arg1 = _common(op.__name__, unit0, arg0, unit1, arg1)
        if not config.rtol and not config.atol:
            return op(arg0, arg1)
        isclose = numpy.isclose(arg0, arg1, rtol=config.rtol, atol=config.atol)
        return isclose if op is operator.eq else numpy.logical_not(isclose)

    @register(numpy.stack)
    @register(numpy.concatenate)
    def __stack_like(op, *args, **kwargs):
        units, values = zip(*Quantity.__unpack(*args[0]))
        unit0 = units[0]
        aligned = []
        for unit, value in zip(units, values):
            if unit != unit0:
                target, unit = _additive(op.__name__, unit0, unit)
                value = conversion.convert(value, unit, target)
            aligned.append(value)
        return Quantity(op(aligned, *args[1:], **kwargs), unit0 or one)

    del register

    ## DEFINE OPERATORS

    __getitem__ = partialmethod(__DISPATCH_TABLE[operator.getitem])
    __neg__ = partialmethod(__DISPATCH_TABLE[operator.neg])
    __pos__ = partialmethod(__DISPATCH_TABLE[operator.pos])
    __abs__ = partialmethod(__DISPATCH_TABLE[operator.abs])
    __lt__ = partialmethod(_operand, __DISPATCH_TABLE[operator.lt])
    __le__ = partialmethod(_operand, __DISPATCH_TABLE[operator.le])
    __eq__ = partialmethod(_try_or_noimp, __DISPATCH_TABLE[operator.eq])
    __ne__ = partialmethod(_try_or_noimp, __DISPATCH_TABLE[operator.ne])
    __gt__ = partialmethod(_operand, __DISPATCH_TABLE[operator.gt])
    __ge__ = partialmethod(_operand, __DISPATCH_TABLE[operator.ge])
    __add__ = partialmethod(_operand, __DISPATCH_TABLE[operator.add])
    __radd__ = partialmethod(_operand, _reverse, __DISPATCH_TABLE[operator.add])
    __sub__ = partialmethod(_operand, __DISPATCH_TABLE[operator.sub])
    __rsub__ = partialmethod(_operand, _reverse, __DISPATCH_TABLE[operator.sub])
    __mul__ = partialmethod(_operand, __DISPATCH_TABLE[operator.mul])
    __rmul__ = partialmethod(_operand, _reverse, __DISPATCH_TABLE[operator.mul])
    __matmul__ = partialmethod(_operand, __DISPATCH_TABLE[operator.matmul])
    __rmatmul__ = partialmethod(_operand, _reverse, __DISPATCH_TABLE[operator.matmul])
    __truediv__ = partialmethod(_operand, __DISPATCH_TABLE[operator.truediv])
    __rtruediv__ = partialmethod(_operand, _reverse, __DISPATCH_TABLE[operator.truediv])
    __pow__ = partialmethod(_operand, __DISPATCH_TABLE[operator.pow])

    def __rpow__(self, other):
        if not _isoperand(other):
            return NotImplemented
        _check_bare(self.__unit)
        return other ** conversion.convert(self.__magnitude, self.__unit, one)

    ## DISPATCH THIRD PARTY CALLS

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != '__call__':
            return NotImplemented
        f = self.__DISPATCH_TABLE.get(ufunc)
        if f is None:
            return NotImplemented
        return f(*inputs, **kwargs)

    def __array_function__(self, func, types, args, kwargs):
        f = self.__DISPATCH_TABLE.get(func)
        if f is None:
            return NotImplemented
        return f(*args, **kwargs)

# vim:sw=4:sts=4:et
