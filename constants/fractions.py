"""
Fraction Constants

Unicode glyphs and candidate fractions used when turning decimal
quantities into kitchen-friendly fractions for display.
"""

# Unicode glyphs for common cooking fractions ((numerator, denominator) -> glyph)
UNICODE_FRACTIONS = {
    (1, 2): '½',
    (1, 3): '⅓', (2, 3): '⅔',
    (1, 4): '¼', (3, 4): '¾',
    (1, 5): '⅕', (2, 5): '⅖', (3, 5): '⅗', (4, 5): '⅘',
    (1, 6): '⅙', (5, 6): '⅚',
    (1, 8): '⅛', (3, 8): '⅜', (5, 8): '⅝', (7, 8): '⅞',
}

# Thirds and sixths can't be reached by rounding to eighths, so they are
# matched explicitly. Checked in this order after the eighths grid.
THIRDS = [(1, 3), (2, 3), (4, 3), (5, 3), (7, 3), (8, 3)]
SIXTHS = [(1, 6), (5, 6), (7, 6), (11, 6)]

# Match tolerances (absolute distance)
EIGHTHS_TOLERANCE = 0.02
THIRDS_TOLERANCE = 0.05
SIXTHS_TOLERANCE = 0.03

# Floats at or above this value have no fractional part
MAX_FRACTIONAL_FLOAT = 2 ** 53
