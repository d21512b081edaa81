import warnings


class CoherentWarning(Warning):
    'Base class for warnings from coherent.'


class CoherentPrecisionWarning(CoherentWarning):
    'Warning about loss of precision in a conversion to a foreign type.'


def warn(message, category=CoherentWarning, stacklevel=1):
    warnings.warn(message, category, stacklevel=stacklevel+1)


# vim:sw=4:sts=4:et
