# tests/property/settings.py
"""Standardized Hypothesis settings profiles for property tests.

Import these instead of using inline @settings(max_examples=...).

Usage:
    from tests.property.settings import STANDARD_SETTINGS

    @given(spec=graph_specs())
    @STANDARD_SETTINGS
    def test_something(spec):
        ...

Tiers:
- STANDARD_SETTINGS: 100 examples - Regular property tests
- QUICK_SETTINGS: 20 examples - Cheap checks where more examples add little
"""

from hypothesis import settings

# Standard property tests - good balance of coverage and speed
STANDARD_SETTINGS = settings(max_examples=100)

# Quick validation tests
QUICK_SETTINGS = settings(max_examples=20)
