'''
Interoperability of time quantities with :class:`datetime.timedelta` and
:class:`numpy.timedelta64`.

    >>> import datetime
    >>> from coherent import SI, duration
    >>> print(duration.from_timedelta(datetime.timedelta(minutes=90), SI.units.h))
    1.5 h
    >>> duration.to_timedelta(2 * SI.units.day)
    datetime.timedelta(days=2)
'''

import datetime
import numpy
from . import SI, warnings
from .conversion import convertible
from .dimension import DimensionMismatchError
from .quantity import Quantity


def from_timedelta(delta, unit=None):
    '''Convert a duration to a quantity of time.

    Args
    ----
    delta : :class:`datetime.timedelta` or :class:`numpy.timedelta64`
        The duration. Arrays of ``timedelta64`` are converted elementwise.
    unit : :class:`coherent.unit.Unit`, optional
        Unit of the returned quantity, seconds by default.

    Returns
    -------
    :class:`coherent.quantity.Quantity`
    '''

    if unit is None:
        unit = SI.units.s
    elif not convertible(SI.units.s, unit):
        raise DimensionMismatchError(f'cannot express a duration in {unit}')
    if isinstance(delta, datetime.timedelta):
        # exact integer microseconds avoid rounding in total_seconds
        seconds = (delta // datetime.timedelta(microseconds=1)) / 1e6
    elif isinstance(delta, numpy.timedelta64) or isinstance(delta, numpy.ndarray) and delta.dtype.kind == 'm':
        if numpy.isnat(delta).any():
            raise ValueError('cannot convert NaT to a quantity')
        seconds = delta / numpy.timedelta64(1, 's')
    else:
        raise TypeError(f'expected timedelta or timedelta64, got {type(delta).__name__}')
    return Quantity(seconds, SI.units.s).to(unit)


def to_timedelta(quantity):
    '''Convert a scalar quantity of time to :class:`datetime.timedelta`.

    The duration is rounded to whole microseconds, the resolution of
    :class:`datetime.timedelta`; a :class:`coherent.warnings.CoherentPrecisionWarning`
    is emitted if this changes the value.'''

    if not isinstance(quantity, Quantity):
        raise TypeError(f'expected Quantity, got {type(quantity).__name__}')
    microseconds = float(quantity.value_in(SI.units.μs))
    rounded = round(microseconds)
    if abs(microseconds - rounded) > 1e-12 * max(1., abs(microseconds)):
        warnings.warn(f'{quantity} rounded to {rounded} microseconds', warnings.CoherentPrecisionWarning, stacklevel=2)
    return datetime.timedelta(microseconds=rounded)


def to_timedelta64(quantity, resolution='ns'):
    '''Convert a quantity of time to :class:`numpy.timedelta64`.

    Args
    ----
    quantity : :class:`coherent.quantity.Quantity`
        Scalar or array quantity of time.
    resolution : :class:`str`
        Numpy time unit of the result, one of ``'s'``, ``'ms'``, ``'us'`` or
        ``'ns'``.
    '''

    try:
        unit = dict(s=SI.units.s, ms=SI.units.ms, us=SI.units.μs, ns=SI.units.ns)[resolution]
    except KeyError:
        raise ValueError(f'unsupported resolution {resolution!r}') from None
    counts = numpy.asarray(quantity.value_in(unit))
    rounded = numpy.round(counts)
    if numpy.any(numpy.abs(counts - rounded) > 1e-12 * numpy.maximum(1., numpy.abs(counts))):
        warnings.warn(f'{quantity} rounded to whole {resolution}', warnings.CoherentPrecisionWarning, stacklevel=2)
    result = rounded.astype('int64').astype(f'timedelta64[{resolution}]')
    return result[()] if result.ndim == 0 else result

# vim:sw=4:sts=4:et
