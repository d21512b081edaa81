from setuptools import setup

long_description = """
Coherent is a Python library for dimensional analysis with units of measure.
Numerical values and numpy arrays are tagged with a unit; arithmetic on tagged
values composes dimensions and units, rejects incompatible operations and
converts between compatible units automatically.

Dimensions are open-ended and raised to exact rational powers. Units are
affine rescalings of a coherent unit, covering metric prefixes, offset scales
such as degree Celsius and logarithmic scales such as dBm. Quantity kinds
separate units that share a dimension but not a meaning, such as hertz and
becquerel, or radian and the plain number.
"""

import os, re
with open(os.path.join('coherent', '__init__.py')) as f:
  version = next(filter(None, map(re.compile("^version = '([a-zA-Z0-9.]+)'$").match, f))).group(1)

setup(
  name = 'coherent',
  version = version,
  description = 'Dimensional Analysis with Units of Measure',
  packages = ['coherent'],
  long_description = long_description,
  license = 'MIT',
  python_requires = '>=3.8',
  install_requires = ['numpy>=1.17', 'treelog>=1.0'],
  extras_require = dict(
    docs=['Sphinx>=1.6'],
  ),
)
