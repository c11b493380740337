"""
Constants Package

Lookup tables and limits shared by the quantity services.
"""

from .fractions import (
    UNICODE_FRACTIONS,
    THIRDS,
    SIXTHS,
    EIGHTHS_TOLERANCE,
    THIRDS_TOLERANCE,
    SIXTHS_TOLERANCE,
    MAX_FRACTIONAL_FLOAT,
)

from .scaling import (
    DEFAULT_SCALE_FACTOR,
    SCALE_MIN,
    SCALE_MAX,
    SCALE_STEP,
    SCALE_SUFFIX,
)
