"""
Tests for unit conversion

Radians/degrees conversion and the rotate rule for curve values.
"""

import math
import pytest
import sys
import os

# Add the parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from core.units import (
    radians_to_degrees,
    degrees_to_radians,
    convert_curve_value,
    is_rotate_attribute,
)


class TestAngleConversion:
    """Test radians <-> degrees."""

    def test_half_pi_is_ninety_degrees(self):
        assert radians_to_degrees(math.pi / 2) == pytest.approx(90.0)

    def test_degrees_to_radians(self):
        assert degrees_to_radians(180.0) == pytest.approx(math.pi)

    def test_returns_python_float(self):
        """numpy scalars must not leak into the document."""
        assert type(radians_to_degrees(1.0)) is float


class TestCurveValueConversion:
    """Test rotate detection for curve values."""

    def test_rotate_attributes_convert(self):
        assert convert_curve_value("rotateX", math.pi) == pytest.approx(180.0)
        assert convert_curve_value("jointOrient_rotateY", 1.0) == pytest.approx(180.0 / math.pi)

    def test_other_attributes_unchanged(self):
        assert convert_curve_value("translateX", 2.5) == 2.5
        assert convert_curve_value("Rotate", 1.0) == 1.0

    def test_is_rotate_attribute_is_substring_match(self):
        assert is_rotate_attribute("rotateAxisX")
        assert not is_rotate_attribute("scaleX")
