"""
Fraction Service

Approximates decimal quantities with kitchen fractions (eighths, thirds,
sixths) and renders fractional parts as Unicode glyphs.
"""

import math
from typing import NamedTuple

from constants import (
    UNICODE_FRACTIONS,
    THIRDS,
    SIXTHS,
    EIGHTHS_TOLERANCE,
    THIRDS_TOLERANCE,
    SIXTHS_TOLERANCE,
    MAX_FRACTIONAL_FLOAT,
)


class ApproximatedFraction(NamedTuple):
    """A non-negative mixed number: whole + numerator/denominator."""
    whole: int
    numerator: int
    denominator: int

    @property
    def has_fraction(self):
        return self.numerator > 0


def _reduce(numerator, denominator):
    """Split numerator/denominator into a mixed number in lowest terms."""
    whole, remainder = divmod(numerator, denominator)
    if remainder == 0:
        return ApproximatedFraction(whole, 0, 1)
    common = math.gcd(remainder, denominator)
    return ApproximatedFraction(whole, remainder // common, denominator // common)


def _nearest_eighths(magnitude):
    """Number of eighths closest to magnitude, rounding halves up."""
    # Adding 0.5 before flooring can round up twice near 2**52
    eighths = magnitude * 8
    base = math.floor(eighths)
    return base + (1 if eighths - base >= 0.5 else 0)


def approximate_fraction(magnitude):
    """
    Find the kitchen fraction closest to a non-negative magnitude.

    Candidates are tried in a fixed order and the first match wins:
    1. the nearest eighth, if within 0.02
    2. a third (1/3 .. 8/3), if within 0.05
    3. a sixth (1/6, 5/6, 7/6, 11/6), if within 0.03
    4. the nearest eighth, whatever the distance

    Args:
        magnitude: Absolute value of the quantity (finite, >= 0)

    Returns:
        ApproximatedFraction in lowest terms
    """
    if magnitude >= MAX_FRACTIONAL_FLOAT:
        return ApproximatedFraction(int(magnitude), 0, 1)

    eighths = _nearest_eighths(magnitude)
    if abs(magnitude - eighths / 8) < EIGHTHS_TOLERANCE:
        return _reduce(eighths, 8)

    for num, den in THIRDS:
        if abs(magnitude - num / den) < THIRDS_TOLERANCE:
            return _reduce(num, den)

    for num, den in SIXTHS:
        if abs(magnitude - num / den) < SIXTHS_TOLERANCE:
            return _reduce(num, den)

    return _reduce(eighths, 8)


def render_fraction(numerator, denominator):
    """Unicode glyph for a fraction, or plain 'n/d' text if there isn't one."""
    glyph = UNICODE_FRACTIONS.get((numerator, denominator))
    if glyph is None:
        return f"{numerator}/{denominator}"
    return glyph
