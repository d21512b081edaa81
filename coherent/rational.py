'''
The rational module.

Exact fractions for dimension powers and scale ratios. A :class:`Rational`
is always stored in lowest terms with a positive denominator, so that
equality and hashing can operate on the numerator/denominator pair directly.

    >>> from coherent import rational
    >>> rational.frac(6, -4)
    Rational(-3, 2)
    >>> rational.frac(1, 2) + rational.frac(1, 3)
    Rational(5, 6)
'''

import fractions
import numbers


class DivisionByZeroRationalError(ZeroDivisionError):
    pass


## OPERATIONS

def _binop(op, A, B):
    try:
        A = asrational(A)
        B = asrational(B)
    except (TypeError, ValueError):
        return NotImplemented
    return op(A, B)


def _add(A, B):
    common = gcd(A.denom, B.denom)
    return Rational(A.numer * (B.denom//common) + B.numer * (A.denom//common), A.denom * (B.denom//common))


def _subtract(A, B):
    common = gcd(A.denom, B.denom)
    return Rational(A.numer * (B.denom//common) - B.numer * (A.denom//common), A.denom * (B.denom//common))


def _multiply(A, B):
    return Rational(A.numer * B.numer, A.denom * B.denom)


def _divide(A, B):
    if not B.numer:
        raise DivisionByZeroRationalError(f'division of {A} by zero')
    return Rational(A.numer * B.denom, A.denom * B.numer)


def _compare(A, B):
    return A.numer * B.denom - B.numer * A.denom


add = lambda A, B: _binop(_add, A, B)
subtract = lambda A, B: _binop(_subtract, A, B)
multiply = lambda A, B: _binop(_multiply, A, B)
divide = lambda A, B: _binop(_divide, A, B)

greater = lambda A, B: _binop(lambda a, b: _compare(a, b) > 0, A, B)
greater_equal = lambda A, B: _binop(lambda a, b: _compare(a, b) >= 0, A, B)
less = lambda A, B: _binop(lambda a, b: _compare(a, b) < 0, A, B)
less_equal = lambda A, B: _binop(lambda a, b: _compare(a, b) <= 0, A, B)


def equal(A, B):
    try:
        A = asrational(A)
        B = asrational(B)
    except (TypeError, ValueError):
        return NotImplemented
    return A.numer == B.numer and A.denom == B.denom


def power(A, n):
    if not isinstance(n, numbers.Integral):
        try:
            n = n.__index__()
        except (AttributeError, TypeError):
            n = asrational(n)
            if n.denom != 1:
                raise TypeError(f'rational power {n} of {A} is not rational') from None
            n = n.numer
    A = asrational(A)
    if n < 0:
        if not A.numer:
            raise DivisionByZeroRationalError('negative power of zero')
        return Rational(A.denom**-n, A.numer**-n)
    return Rational(A.numer**n, A.denom**n, isfactored=True)


def _unary(op, A):
    A = asrational(A)
    return Rational(op(A.numer), A.denom, isfactored=True)


negative = lambda A: _unary(lambda n: -n, A)
absolute = lambda A: _unary(abs, A)


## RATIONAL CLASS

class Rational:
    '''Exact fraction ``numer/denom``.

    The fraction is reduced to lowest terms on construction; a negative
    denominator moves its sign to the numerator. A zero denominator raises
    :class:`DivisionByZeroRationalError`.

    Args
    ----
    numer : :class:`int`
        Numerator.
    denom : :class:`int`
        Denominator, nonzero.
    isfactored : :class:`bool`
        Skip the gcd normalization if the arguments are known to be reduced.
    '''

    __slots__ = 'numer', 'denom'

    def __init__(self, numer, denom=1, isfactored=False):
        if not isinstance(numer, numbers.Integral) or not isinstance(denom, numbers.Integral):
            raise TypeError(f'Rational requires integer arguments, got {type(numer).__name__} and {type(denom).__name__}')
        numer = int(numer)
        denom = int(denom)
        if not denom:
            raise DivisionByZeroRationalError(f'zero denominator in {numer}/{denom}')
        if denom < 0:
            numer = -numer
            denom = -denom
        if denom != 1 and not isfactored:
            common = gcd(numer, denom)
            if common != 1:
                numer //= common
                denom //= common
        object.__setattr__(self, 'numer', numer)
        object.__setattr__(self, 'denom', denom)

    def __setattr__(self, name, value):
        raise AttributeError(f'readonly attribute: {name}')

    def __reduce__(self):
        return Rational, (self.numer, self.denom, True)

    def __bool__(self):
        return bool(self.numer)

    def __int__(self):
        if self.denom != 1:
            raise ValueError(f'{self} is not an integer')
        return self.numer

    def __index__(self):
        if self.denom != 1:
            raise TypeError(f'{self} is not an integer')
        return self.numer

    def __float__(self):
        return self.numer / self.denom

    def as_fraction(self):
        return fractions.Fraction(self.numer, self.denom)

    @property
    def isint(self):
        return self.denom == 1

    __neg__ = negative
    __pos__ = lambda self: self
    __abs__ = absolute
    __gt__ = greater
    __ge__ = greater_equal
    __lt__ = less
    __le__ = less_equal
    __eq__ = equal
    __add__ = add
    __radd__ = add
    __sub__ = subtract
    __rsub__ = lambda self, other: subtract(other, self)
    __mul__ = multiply
    __rmul__ = multiply
    __truediv__ = divide
    __rtruediv__ = lambda self, other: divide(other, self)
    __pow__ = power

    def __ne__(self, other):
        eq = equal(self, other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self):
        # consistent with int and Fraction for equal values
        return hash(fractions.Fraction(self.numer, self.denom))

    def __str__(self):
        return str(self.numer) if self.denom == 1 else f'{self.numer}/{self.denom}'

    def __repr__(self):
        return f'Rational({self.numer}, {self.denom})'


## UTILITY FUNCTIONS

def gcd(*numbers):
    '''Greatest common divisor of the absolute values, ignoring zeros.'''

    gcd = 0
    for n in numbers:
        n = abs(n)
        while n: # Euclid's algorithm
            gcd, n = n, gcd % n
    return gcd or 1


def asrational(value):
    '''Convert an int, :class:`fractions.Fraction` or float to :class:`Rational`.

    Floats are converted exactly via their integer ratio, so ``.5`` becomes
    ``1/2`` but ``.1`` becomes the (large) ratio of its binary expansion.
    '''

    if isinstance(value, Rational):
        return value
    if isinstance(value, bool):
        raise TypeError('cannot convert bool to Rational')
    if isinstance(value, numbers.Integral):
        return Rational(int(value))
    if isinstance(value, numbers.Rational):
        return Rational(value.numerator, value.denominator)
    if isinstance(value, numbers.Real):
        value = float(value)
        if value != value or value in (float('inf'), float('-inf')):
            raise ValueError(f'cannot convert {value} to Rational')
        return Rational(*value.as_integer_ratio())
    raise TypeError(f'cannot convert {type(value).__name__} to Rational')


def frac(a, b):
    return asrational(a) / asrational(b)


zero = Rational(0)
one = Rational(1)
half = Rational(1, 2)

# vim:sw=4:sts=4:et
