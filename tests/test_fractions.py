"""Tests for kitchen fraction approximation and glyph rendering."""

from services.fractions import ApproximatedFraction, approximate_fraction, render_fraction


def test_zero_has_no_fraction():
    result = approximate_fraction(0)
    assert result == ApproximatedFraction(0, 0, 1)
    assert not result.has_fraction


def test_eighths_reduce_to_lowest_terms():
    assert approximate_fraction(0.5) == (0, 1, 2)
    assert approximate_fraction(0.25) == (0, 1, 4)
    assert approximate_fraction(0.375) == (0, 3, 8)
    assert approximate_fraction(2.75) == (2, 3, 4)
    assert approximate_fraction(5.5) == (5, 1, 2)


def test_close_to_whole_number_collapses():
    assert approximate_fraction(0.99) == (1, 0, 1)
    assert approximate_fraction(3.01) == (3, 0, 1)


def test_tiny_values_round_to_zero():
    assert approximate_fraction(0.0001) == (0, 0, 1)
    assert approximate_fraction(0.01) == (0, 0, 1)


def test_thirds():
    assert approximate_fraction(1 / 3) == (0, 1, 3)
    assert approximate_fraction(2 / 3) == (0, 2, 3)
    assert approximate_fraction(4 / 3) == (1, 1, 3)
    assert approximate_fraction(8 / 3) == (2, 2, 3)
    assert approximate_fraction(0.3) == (0, 1, 3)


def test_sixths():
    assert approximate_fraction(1 / 6) == (0, 1, 6)
    assert approximate_fraction(5 / 6) == (0, 5, 6)
    assert approximate_fraction(11 / 6) == (1, 5, 6)
    assert approximate_fraction(0.15) == (0, 1, 6)


def test_eighths_win_over_thirds():
    # 0.36 is within 0.05 of 1/3 but within 0.02 of 3/8
    assert approximate_fraction(0.36) == (0, 3, 8)


def test_falls_back_to_nearest_eighth():
    assert approximate_fraction(0.1) == (0, 1, 8)
    # 1/5 is not close enough to 1/6 (0.03) or 1/3 (0.05)
    assert approximate_fraction(0.2) == (0, 1, 4)


def test_huge_values_are_whole():
    assert approximate_fraction(float(2 ** 60)) == (2 ** 60, 0, 1)
    assert approximate_fraction(1e300) == (int(1e300), 0, 1)


def test_render_known_glyphs():
    assert render_fraction(1, 2) == '½'
    assert render_fraction(1, 3) == '⅓'
    assert render_fraction(5, 6) == '⅚'
    assert render_fraction(1, 5) == '⅕'
    assert render_fraction(7, 8) == '⅞'


def test_render_unmapped_falls_back_to_text():
    assert render_fraction(2, 7) == '2/7'
    assert render_fraction(3, 16) == '3/16'


def test_nearest_eighth_exact_near_float_precision():
    # magnitude * 8 is an odd integer just above 2**52
    assert approximate_fraction(2 ** 49 + 0.125) == (2 ** 49, 1, 8)
