"""
Smoke tests for the quantity app.
Run with: python tests/smoke.py
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

def test_app_imports():
    """Verify app can be imported without errors."""
    from app import app, create_app
    assert app is not None
    assert callable(create_app)
    print("OK: App imports successfully")

def test_services_import():
    """Verify the public quantity functions can be imported."""
    from services import format_quantity, scale_quantity, scale_servings_text
    assert callable(format_quantity)
    assert callable(scale_quantity)
    assert callable(scale_servings_text)
    print("OK: Services import successfully")

def test_constants_import():
    """Verify constants can be imported."""
    from constants import UNICODE_FRACTIONS, THIRDS, SIXTHS, SCALE_MIN, SCALE_MAX
    assert (1, 2) in UNICODE_FRACTIONS
    assert (1, 3) in THIRDS
    assert (5, 6) in SIXTHS
    assert SCALE_MIN < SCALE_MAX
    print("OK: Constants import successfully")

def test_tolerances_unchanged():
    """Verify the fraction matching tolerances have expected values."""
    from constants import EIGHTHS_TOLERANCE, THIRDS_TOLERANCE, SIXTHS_TOLERANCE

    # These values must not change, displayed quantities depend on them
    assert EIGHTHS_TOLERANCE == 0.02
    assert THIRDS_TOLERANCE == 0.05
    assert SIXTHS_TOLERANCE == 0.03
    print("OK: Tolerances unchanged")

def test_filters_registered():
    """Verify the fraction filter renders in a template."""
    from app import create_app
    app = create_app('testing')
    with app.app_context():
        rendered = app.jinja_env.from_string("{{ 1.5 | fraction }}").render()
    assert rendered == '1 ½'
    print("OK: Fraction filter renders")

if __name__ == '__main__':
    print("Running smoke tests...\n")

    tests = [
        test_app_imports,
        test_services_import,
        test_constants_import,
        test_tolerances_unchanged,
        test_filters_registered,
    ]

    failed = 0
    for test in tests:
        try:
            test()
        except Exception as e:
            print(f"FAIL: {test.__name__} - {e}")
            failed += 1

    print(f"\n{'='*40}")
    if failed:
        print(f"FAILED: {failed}/{len(tests)} tests")
        sys.exit(1)
    else:
        print(f"PASSED: {len(tests)}/{len(tests)} tests")
        sys.exit(0)
