"""
Scaling Constants

Bounds and step size for the recipe scale selector.
"""

DEFAULT_SCALE_FACTOR = 1.0
SCALE_MIN = 0.25
SCALE_MAX = 50
SCALE_STEP = 0.25

# Suffix shown after the scale factor (e.g. "2×")
SCALE_SUFFIX = '×'
