"""
Services Package

Quantity formatting and scaling used when displaying recipes.
"""

from .fractions import (
    ApproximatedFraction,
    approximate_fraction,
    render_fraction,
)

from .quantity import (
    format_quantity,
    scale_quantity,
    scale_servings_text,
)

from .display import (
    format_ingredient_line,
    format_scale_factor,
    increase_scale,
    decrease_scale,
    is_at_min,
    is_at_max,
    parse_scale_factor,
)

__all__ = [
    # Fractions
    'ApproximatedFraction',
    'approximate_fraction',
    'render_fraction',
    # Quantity
    'format_quantity',
    'scale_quantity',
    'scale_servings_text',
    # Display
    'format_ingredient_line',
    'format_scale_factor',
    'increase_scale',
    'decrease_scale',
    'is_at_min',
    'is_at_max',
    'parse_scale_factor',
]
