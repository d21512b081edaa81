'Dimensional Analysis with Units of Measure'

version = '1.0'
__version__ = version

__all__ = [
    'SI',
    'US',
    'config',
    'conversion',
    'dimension',
    'duration',
    'kind',
    'quantity',
    'rational',
    'testing',
    'types',
    'unit',
    'warnings',
]

# vim:sw=4:sts=4:et
