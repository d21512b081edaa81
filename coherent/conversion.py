'''
Conversion between units.

Every conversion of a value ``x`` from unit ``A`` to unit ``B`` follows the
same affine formula::

    convert(x, A, B) = x * conversion_factor(A, B) + conversion_offset(A, B)

with the factor ``B.multiplier / A.multiplier`` and the offset
``B.reference - A.reference * factor``. Values on a logarithmic scale are
decoded to their linear value before, and encoded after this step.

Conversion requires the kind of ``A`` to be convertible to the kind of ``B``
(see :meth:`coherent.kind.QuantityKind.convertible_to`), or an explicit rule to
be registered between the two kinds using :func:`register_conversion`.
'''

import numpy
import treelog as log
from .dimension import DimensionMismatchError
from .kind import QuantityKind
from .unit import Unit, Scale


_rules = {} # (from_kind, to_kind) -> factor


def register_conversion(from_kind, to_kind, factor=1.):
    '''Allow conversion between two kinds of equal dimension.

    The rule is one-directional: it converts values of ``from_kind`` to
    ``to_kind``, in which one coherent unit of the former equals ``factor``
    coherent units of the latter. Register the reverse rule separately if
    needed.

    Args
    ----
    from_kind : :class:`coherent.kind.QuantityKind`
    to_kind : :class:`coherent.kind.QuantityKind`
    factor : :class:`float`
        Positive conversion factor between coherent units.
    '''

    if not isinstance(from_kind, QuantityKind) or not isinstance(to_kind, QuantityKind):
        raise TypeError('conversion rules require two QuantityKinds')
    if from_kind.dims != to_kind.dims:
        raise DimensionMismatchError(f'cannot register conversion from {from_kind} {from_kind.dims} to {to_kind} {to_kind.dims}')
    factor = float(factor)
    if not numpy.isfinite(factor) or factor <= 0:
        raise ValueError(f'conversion factor must be positive and finite, got {factor}')
    if (from_kind, to_kind) in _rules:
        raise ValueError(f'cannot register conversion from {from_kind} to {to_kind}: conversion is already defined')
    log.debug(f'registering conversion from {from_kind} to {to_kind} with factor {factor}')
    _rules[from_kind, to_kind] = factor


def _kind(arg):
    if isinstance(arg, Unit):
        return arg.kind
    if isinstance(arg, QuantityKind):
        return arg
    raise TypeError(f'expected Unit or QuantityKind, got {type(arg).__name__}')


def _kind_factor(from_kind, to_kind):
    if from_kind.convertible_to(to_kind):
        return 1.
    try:
        return _rules[from_kind, to_kind]
    except KeyError:
        pass
    if from_kind.dims != to_kind.dims:
        raise DimensionMismatchError(f'cannot convert {from_kind} {from_kind.dims} to {to_kind} {to_kind.dims}')
    raise DimensionMismatchError(f'cannot convert {from_kind} to {to_kind}')


def convertible(from_, to):
    'Test if values of unit or kind ``from_`` may be converted to ``to``.'

    from_kind = _kind(from_)
    to_kind = _kind(to)
    return from_kind.convertible_to(to_kind) or (from_kind, to_kind) in _rules


def conversion_factor(from_unit, to_unit):
    '''Multiplicative term of the conversion between two units.

    Raises :class:`coherent.dimension.DimensionMismatchError` if the units are
    not convertible.'''

    return to_unit.multiplier / from_unit.multiplier * _kind_factor(from_unit.kind, to_unit.kind)


def conversion_offset(from_unit, to_unit):
    'Additive term of the conversion between two units.'

    return _offset(from_unit, to_unit, conversion_factor(from_unit, to_unit))


def _offset(from_unit, to_unit, factor):
    return to_unit.reference - from_unit.reference * factor


def convert(value, from_unit, to_unit):
    '''Express ``value`` in ``from_unit`` as a value in ``to_unit``.

    Args
    ----
    value : :class:`float` or array
        The value to convert.
    from_unit : :class:`coherent.unit.Unit`
        Unit of ``value``.
    to_unit : :class:`coherent.unit.Unit`
        Desired unit.

    Returns
    -------
    :class:`float` or array
    '''

    if from_unit == to_unit:
        return value
    factor = conversion_factor(from_unit, to_unit)
    offset = _offset(from_unit, to_unit, factor)
    if from_unit.scale == Scale.LOGARITHMIC:
        value = numpy.power(10., numpy.divide(value, 10.))
    value = value * factor + offset
    if to_unit.scale == Scale.LOGARITHMIC:
        value = 10. * numpy.log10(value)
    return value

# vim:sw=4:sts=4:et
