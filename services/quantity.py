"""
Quantity Service

Formats ingredient quantities as mixed fractions and scales quantities
and servings text by a recipe scale factor.

These functions are called while rendering, so invalid input never
raises: it degrades to '' (formatting) or 0 (scaling).
"""

import math

from .fractions import approximate_fraction, render_fraction

DIGITS = '0123456789'


def to_number(value):
    """Convert value to a finite float, or None if that isn't possible."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def format_quantity(quantity):
    """
    Format a number as a mixed fraction using Unicode glyphs.

    Examples:
        format_quantity(1.5)   -> '1 ½'
        format_quantity(0.25)  -> '¼'
        format_quantity(2)     -> '2'
        format_quantity(-0.5)  -> '-½'
        format_quantity(None)  -> ''
    """
    number = to_number(quantity)
    if number is None:
        return ''

    fraction = approximate_fraction(abs(number))

    if not fraction.has_fraction:
        result = str(fraction.whole)
    else:
        glyph = render_fraction(fraction.numerator, fraction.denominator)
        result = f"{fraction.whole} {glyph}" if fraction.whole else glyph

    # No "-0"
    if number < 0 and result != '0':
        result = f"-{result}"

    return result


def scale_quantity(quantity, scale_factor):
    """
    Multiply a quantity by a scale factor.

    No rounding happens here; approximation is left to format_quantity.
    Returns 0 if either operand is missing or not a number.
    """
    number = to_number(quantity)
    factor = to_number(scale_factor)
    if number is None or factor is None:
        return 0
    return number * factor


def _number_spans(text):
    """Yield (start, end) of each unsigned integer or decimal in text."""
    i = 0
    length = len(text)
    while i < length:
        if text[i] not in DIGITS:
            i += 1
            continue
        start = i
        while i < length and text[i] in DIGITS:
            i += 1
        # Only take the point if digits follow it ("Serves 4." keeps its full stop)
        if i + 1 < length and text[i] == '.' and text[i + 1] in DIGITS:
            i += 1
            while i < length and text[i] in DIGITS:
                i += 1
        yield start, i


def _scale_token(token, factor):
    scaled = float(token) * factor
    if not math.isfinite(scaled):
        return token
    # Whole numbers times a whole factor stay exact past float precision
    if '.' not in token and factor.is_integer():
        return str(int(token) * int(factor))
    if scaled.is_integer():
        return str(int(scaled))
    return format_quantity(scaled)


def scale_servings_text(text, scale_factor):
    """
    Scale every number in a servings description.

    Each number is scaled on its own; all other text is kept as-is.

    Examples:
        scale_servings_text('Serves 4', 2)          -> 'Serves 8'
        scale_servings_text('Feeds 2-4 people', 2)  -> 'Feeds 4-8 people'
        scale_servings_text('Serves 2', 1.25)       -> 'Serves 2 ½'
    """
    if text is None or text == '':
        return ''
    if not isinstance(text, str):
        text = str(text)

    factor = to_number(scale_factor)
    if factor is None:
        return text

    parts = []
    last = 0
    for start, end in _number_spans(text):
        parts.append(text[last:start])
        parts.append(_scale_token(text[start:end], factor))
        last = end
    parts.append(text[last:])
    return ''.join(parts)
