"""
Tests for the static snapshot encoder

Value formatting per static type and zero suppression.
"""

import math
import pytest
import sys
import os

# Add the parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from core.anim_data import AttributeKind, StaticType
from core.static_encoder import encode_static, format_real


class TestFormatting:
    """Test canonical value text."""

    def test_boolean(self):
        assert encode_static("visibility", StaticType.BOOLEAN, True).value == "True"
        assert encode_static("visibility", StaticType.BOOLEAN, 0).value == "False"

    def test_integer_and_enum(self):
        assert encode_static("count", StaticType.INTEGER, 7).value == "7"
        assert encode_static("rotateOrder", StaticType.ENUM, 2.0).value == "2"

    def test_real(self):
        assert encode_static("scaleX", StaticType.REAL, 1).value == "1.0"
        assert format_real(0.1) == "0.1"

    def test_node_kind_and_name(self):
        node = encode_static("scaleX", StaticType.REAL, 2.0)
        assert node.kind == AttributeKind.STATIC
        assert node.name == "scaleX"
        assert node.curve is None


class TestZeroSuppression:
    """Test that only linear and angle zeros are dropped."""

    def test_linear_zero_omitted(self):
        assert encode_static("offset", StaticType.LINEAR, 0.0) is None

    def test_angle_zero_omitted(self):
        assert encode_static("rotateY", StaticType.ANGLE, 0.0) is None
        assert encode_static("rotateY", StaticType.ANGLE, -0.0) is None

    def test_linear_nonzero_kept(self):
        assert encode_static("translateX", StaticType.LINEAR, -2.5).value == "-2.5"

    def test_angle_converted_to_degrees(self):
        node = encode_static("rotateY", StaticType.ANGLE, math.pi / 4)
        assert float(node.value) == pytest.approx(45.0)

    @pytest.mark.parametrize("static_type,value,expected", [
        (StaticType.BOOLEAN, False, "False"),
        (StaticType.INTEGER, 0, "0"),
        (StaticType.REAL, 0.0, "0.0"),
        (StaticType.ENUM, 0, "0"),
    ])
    def test_zero_kept_for_other_types(self, static_type, value, expected):
        assert encode_static("attr", static_type, value).value == expected
