"""
Module with general purpose types.
"""

import inspect
import abc


def argument_canonicalizer(signature):
    '''
    Returns a function that converts arguments matching ``signature`` to
    canonical positional and keyword arguments.  If possible, an argument is
    added to the list of positional arguments, otherwise to the keyword arguments
    dictionary.  The returned arguments include default values.

    Parameters
    ----------
    signature : :class:`inspect.Signature`
        The signature of a function to generate canonical arguments for.

    Returns
    -------
    :any:`callable`
        A function that returns a :class:`tuple` of a :class:`tuple` of
        positional arguments and a :class:`dict` of keyword arguments.

    Examples
    --------

    >>> def f(a, b=4, *, c): pass
    >>> canon = argument_canonicalizer(inspect.signature(f))
    >>> canon(1, c=3, b=2)
    ((1, 2), {'c': 3})
    >>> canon(1, c=3)
    ((1, 4), {'c': 3})
    '''

    def canonicalize(*args, **kwargs):
        bound = signature.bind(*args, **kwargs)
        bound.apply_defaults()
        return bound.args, bound.kwargs

    return canonicalize


class ImmutableMeta(abc.ABCMeta):

    def __new__(mcls, name, bases, namespace, **kwargs):
        cls = super().__new__(mcls, name, bases, namespace, **kwargs)
        # `inspect.signature(cls)` looks at `cls.__signature__` before the
        # signature of `__call__`, which is redefined below.
        cls.__signature__ = inspect.signature(cls.__init__.__get__(object(), object))
        cls._canonicalize = argument_canonicalizer(inspect.signature(cls.__init__))
        return cls

    def __call__(*args, **kwargs):
        return args[0].__new__(*args, **kwargs)

    def _new(cls, *args):
        self = object.__new__(cls)
        self._args = args
        self._hash = hash((cls.__name__, args))
        self.__init__(*args[:-1], **dict(args[-1]))
        return self


class Immutable(metaclass=ImmutableMeta):
    '''
    Base class for immutable value types.  This class adds equality tests,
    hashing and pickling, all based solely on the canonicalized initialization
    arguments.  Subclasses that need to normalize their arguments (sort, merge,
    reduce) do so in ``__new__`` before passing them on, so that equal values
    always end up with equal arguments.

    Examples
    --------

    >>> class Plain(Immutable):
    ...     def __init__(self, a, b):
    ...         pass
    >>> Plain(1, 2) == Plain(a=1, b=2)
    True
    '''

    def __new__(*args, **kwargs):
        cls = args[0]
        args, kwargs = cls._canonicalize(*args, **kwargs)
        return cls._new(*args[1:], tuple(sorted(kwargs.items())))

    def __reduce__(self):
        return self.__class__._new, self._args

    def __hash__(self):
        return self._hash

    def __eq__(self, other):
        return self is other or type(self) is type(other) and self._args == other._args

    def __ne__(self, other):
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __getstate__(self):
        raise Exception('getstate should never be called')

    def __setstate__(self, state):
        raise Exception('setstate should never be called')

    def __repr__(self):
        *args, kwargs = self._args
        return '{}({})'.format(self.__class__.__name__, ', '.join([*map(repr, args), *map('{0[0]}={0[1]!r}'.format, kwargs)]))

# vim:sw=4:sts=4:et
