"""
Tests for the attribute classifier

Covers skip rules (connected, non-keyable, unsupported types), static
typing and curve detection.
"""

import pytest
import sys
import os

# Add the parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from core.anim_data import StaticType
from core.attribute_classifier import (
    Skip,
    Static,
    Animated,
    classify_attribute,
    attribute_name_from_plug,
)
from readers import (
    MemoryReader,
    MemoryNode,
    MemoryAnimCurve,
    MemoryKey,
    AttributeType,
    NumericType,
    SceneReadError,
)


class TestAttributeName:
    """Test attribute name extraction from plug names."""

    def test_simple_plug(self):
        assert attribute_name_from_plug("pCube1.rotateX") == "rotateX"

    def test_takes_component_after_first_separator(self):
        assert attribute_name_from_plug("pCube1.instObjGroups.objectGroups") == "instObjGroups"

    def test_missing_attribute_raises(self):
        with pytest.raises(ValueError):
            attribute_name_from_plug("pCube1")


class TestClassifyAttribute:
    """Test classification of single plugs."""

    def setup_method(self):
        """Setup test fixtures."""
        self.node = MemoryNode("pCube1")
        self.reader = MemoryReader([self.node])

    def classify(self, plug, curves=None):
        return classify_attribute(self.reader, plug, curves or {})

    def test_connected_is_skipped(self):
        plug = self.node.add_plug("translateX", AttributeType.DOUBLE_LINEAR, value=1.0, connected=True)
        assert self.classify(plug) == Skip("connected")

    def test_not_keyable_is_skipped(self):
        plug = self.node.add_plug("rotateOrder", AttributeType.ENUM, value=0, keyable=False)
        assert self.classify(plug) == Skip("not keyable")

    @pytest.mark.parametrize("attr_type,num_type,expected", [
        (AttributeType.NUMERIC, NumericType.BOOLEAN, StaticType.BOOLEAN),
        (AttributeType.NUMERIC, NumericType.LONG, StaticType.INTEGER),
        (AttributeType.NUMERIC, NumericType.DOUBLE, StaticType.REAL),
        (AttributeType.DOUBLE_LINEAR, NumericType.OTHER, StaticType.LINEAR),
        (AttributeType.DOUBLE_ANGLE, NumericType.OTHER, StaticType.ANGLE),
        (AttributeType.ENUM, NumericType.OTHER, StaticType.ENUM),
    ])
    def test_static_types(self, attr_type, num_type, expected):
        plug = self.node.add_plug("attr", attr_type, num_type)
        assert self.classify(plug) == Static(expected)

    @pytest.mark.parametrize("attr_type,num_type", [
        (AttributeType.NUMERIC, NumericType.FLOAT),
        (AttributeType.NUMERIC, NumericType.SHORT),
        (AttributeType.OTHER, NumericType.OTHER),
    ])
    def test_unsupported_types_are_skipped(self, attr_type, num_type):
        plug = self.node.add_plug("attr", attr_type, num_type)
        assert self.classify(plug) == Skip("unsupported type")

    def test_curve_binding_is_animated(self):
        plug = self.node.add_plug("rotateX", AttributeType.DOUBLE_ANGLE)
        curve = MemoryAnimCurve([MemoryKey(0.0, 0.0)])
        result = self.classify(plug, {"pCube1.rotateX": curve})
        assert isinstance(result, Animated)
        assert result.curve is curve

    def test_curve_binding_wins_over_connection(self):
        """The curve is the plug's own incoming connection."""
        plug = self.node.add_plug("rotateX", AttributeType.DOUBLE_ANGLE, connected=True)
        curve = MemoryAnimCurve([MemoryKey(0.0, 0.0)])
        assert isinstance(self.classify(plug, {"pCube1.rotateX": curve}), Animated)

    def test_curve_on_other_plug_does_not_match(self):
        plug = self.node.add_plug("rotateY", AttributeType.DOUBLE_ANGLE)
        curve = MemoryAnimCurve([MemoryKey(0.0, 0.0)])
        assert self.classify(plug, {"pCube1.rotateX": curve}) == Static(StaticType.ANGLE)

    def test_host_error_propagates(self):
        plug = self.node.add_plug("broken", error="cannot read plug")
        with pytest.raises(SceneReadError):
            self.classify(plug)
