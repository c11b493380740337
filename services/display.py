"""
Display Service

Helpers that build display strings for scaled recipes: ingredient lines
and the scale selector.
"""

import logging

from constants import (
    DEFAULT_SCALE_FACTOR,
    SCALE_MIN,
    SCALE_MAX,
    SCALE_STEP,
    SCALE_SUFFIX,
)
from .quantity import to_number, format_quantity, scale_quantity

logger = logging.getLogger(__name__)


def format_ingredient_line(quantity, unit, name, scale_factor=1):
    """
    Build an ingredient line like '2 ½ cups flour'.

    The quantity is scaled before formatting. A missing quantity or unit
    is left out; the name is always shown.
    """
    parts = []

    if to_number(quantity) is not None:
        formatted = format_quantity(scale_quantity(quantity, scale_factor))
        if formatted:
            parts.append(formatted)

    if unit:
        parts.append(str(unit))

    parts.append('' if name is None else str(name))

    return ' '.join(parts)


def format_scale_factor(value):
    """Scale selector label: '2×', '1.5×', '0.33×'."""
    number = to_number(value)
    if number is None:
        return ''
    if number.is_integer():
        return f"{int(number)}{SCALE_SUFFIX}"
    return f"{number:.2f}".rstrip('0').rstrip('.') + SCALE_SUFFIX


def is_at_min(value, minimum=SCALE_MIN):
    number = to_number(value)
    return number is not None and number <= minimum


def is_at_max(value, maximum=SCALE_MAX):
    number = to_number(value)
    return number is not None and number >= maximum


def increase_scale(value, step=SCALE_STEP, maximum=SCALE_MAX):
    """One click on the '+' button. Unchanged once the maximum is reached."""
    number = to_number(value)
    if number is None:
        number = DEFAULT_SCALE_FACTOR
    if number >= maximum:
        return number
    return min(maximum, round(number + step, 2))


def decrease_scale(value, step=SCALE_STEP, minimum=SCALE_MIN):
    """One click on the '-' button. Unchanged once the minimum is reached."""
    number = to_number(value)
    if number is None:
        number = DEFAULT_SCALE_FACTOR
    if number <= minimum:
        return number
    return max(minimum, round(number - step, 2))


def parse_scale_factor(value, default=DEFAULT_SCALE_FACTOR, min_val=SCALE_MIN, max_val=SCALE_MAX):
    """
    Parse a scale factor from request or form input.

    Plain numbers only ('2', '0.5'). Anything missing, non-numeric or not
    positive falls back to default; valid values are clamped to
    [min_val, max_val].
    """
    number = to_number(value)
    if number is None or number <= 0:
        if value not in (None, ''):
            logger.debug("Ignoring invalid scale factor %r", value)
        return default

    if min_val is not None and number < min_val:
        number = min_val
    if max_val is not None and number > max_val:
        number = max_val

    return number
