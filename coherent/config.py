import types
import contextlib
import sys


class Config(types.ModuleType):
    '''
    This module holds the global configuration, stored as (immutable)
    attributes. To inspect the current configuration, use :func:`print` or
    :func:`vars` on this module. The configuration can be changed temporarily by
    calling this module with the new settings passed as keyword arguments and
    entering the returned context. The old settings are restored as soon as the
    context is exited. Example:

    >>> from coherent import config
    >>> config.rtol
    0.0
    >>> with config(rtol=1e-12):
    ...     config.rtol
    1e-12
    >>> config.rtol
    0.0

    .. Important::
       The configuration is not thread-safe: changing the configuration inside a
       thread changes the process wide configuration.

    .. attribute:: rtol

       Relative tolerance of quantity equality, applied after both operands
       are expressed in the same coherent unit.

       Defaults to ``0.``.

    .. attribute:: atol

       Absolute tolerance of quantity equality, in coherent units.

       Defaults to ``0.``.

    .. attribute:: warn_untag

       If ``True``, converting a dimensionless quantity of a derived kind, such
       as a plane angle, to a bare number emits a
       :class:`coherent.warnings.CoherentWarning`.

       Defaults to ``True``.
    '''

    def __init__(*args, **data):
        self, name = args
        super(Config, self).__init__(name, self.__doc__)
        self.__dict__.update(data)

    def __setattr__(self, k, v):
        raise AttributeError('readonly attribute: {}'.format(k))

    def __delattr__(self, k):
        raise AttributeError('readonly attribute: {}'.format(k))

    @contextlib.contextmanager
    def __call__(*args, **data):
        if len(args) != 1:
            raise TypeError('__call__ takes keyword arguments only')
        self, = args
        unknown = set(data) - {k for k in self.__dict__ if not k.startswith('_')}
        if unknown:
            raise TypeError('unknown configuration setting: {}'.format(', '.join(sorted(unknown))))
        old = self.__dict__.copy()
        try:
            self.__dict__.update(data)
            yield
        finally:
            self.__dict__.clear()
            self.__dict__.update(old)

    def __str__(self):
        return 'configuration: {}'.format(', '.join('{}={!r}'.format(k, v) for k, v in sorted(self.__dict__.items()) if not k.startswith('_')))


sys.modules[__name__] = Config(
    __name__,
    rtol=0.,
    atol=0.,
    warn_untag=True,
)

# vim:sw=4:sts=4:et
