"""
Tests for the curve encoder

Infinity codes, tangent tags, per-key unit conversion and key ordering.
"""

import math
import pytest
import sys
import os

# Add the parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from core.curve_encoder import encode_curve, infinity_to_int, tangent_type_to_string
from readers import MemoryAnimCurve, MemoryKey, InfinityType, TangentType


class RecordingCurve(MemoryAnimCurve):
    """Curve that records tangent queries."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.tangent_queries = []

    def get_tangent(self, index, in_tangent):
        self.tangent_queries.append((index, in_tangent))
        return super().get_tangent(index, in_tangent)


class TestInfinityMapping:
    """Test infinity type encoding."""

    @pytest.mark.parametrize("infinity,expected", [
        (InfinityType.CONSTANT, 0),
        (InfinityType.LINEAR, 1),
        (InfinityType.CYCLE, 3),
        (InfinityType.CYCLE_RELATIVE, 4),
        (InfinityType.OSCILLATE, 5),
    ])
    def test_known_types(self, infinity, expected):
        assert infinity_to_int(infinity) == expected

    @pytest.mark.parametrize("raw", [2, 42, -1, None, "bounce"])
    def test_unrecognized_types_encode_as_five(self, raw):
        assert infinity_to_int(raw) == 5

    def test_two_never_produced(self):
        codes = {infinity_to_int(v) for v in list(InfinityType) + list(range(-5, 20))}
        assert 2 not in codes
        assert codes <= {0, 1, 3, 4, 5}


class TestTangentMapping:
    """Test tangent type tags."""

    @pytest.mark.parametrize("tangent,expected", [
        (TangentType.AUTO, "auto"),
        (TangentType.FIXED, "fixed"),
        (TangentType.GLOBAL, "global"),
        (TangentType.LINEAR, "linear"),
        (TangentType.FLAT, "flat"),
        (TangentType.SMOOTH, "smooth"),
        (TangentType.STEP, "step"),
        (TangentType.CLAMPED, "clamped"),
        (TangentType.PLATEAU, "plateau"),
        (TangentType.STEP_NEXT, "stepnext"),
    ])
    def test_known_types(self, tangent, expected):
        assert tangent_type_to_string(tangent) == expected

    def test_known_tags_are_unique(self):
        known = [t for t in TangentType if t not in (TangentType.SLOW, TangentType.FAST)]
        tags = [tangent_type_to_string(t) for t in known]
        assert len(set(tags)) == len(tags)

    @pytest.mark.parametrize("raw", [TangentType.SLOW, TangentType.FAST, 99, None, "bezier"])
    def test_unrecognized_types_default_to_auto(self, raw):
        assert tangent_type_to_string(raw) == "auto"


class TestEncodeCurve:
    """Test full curve encoding."""

    def setup_method(self):
        """Setup test fixtures."""
        self.curve = RecordingCurve(
            keys=[
                MemoryKey(1.0, math.pi / 2, TangentType.LINEAR, TangentType.STEP,
                          in_angle=10.0, in_weight=2.0, out_angle=-20.0, out_weight=3.0,
                          breakdown=True, tangents_locked=False, weights_locked=True),
                MemoryKey(2.0, 0.0),
                MemoryKey(0.5, math.pi),  # host order kept even if not ascending
            ],
            pre_infinity=InfinityType.LINEAR,
            post_infinity=InfinityType.CYCLE,
            weighted=False,
        )

    def test_infinity_node(self):
        payload = encode_curve("rotateX", self.curve)
        assert payload.infinity.pre_infinity == 1
        assert payload.infinity.post_infinity == 3
        assert payload.infinity.weighted_tangents is False

    def test_rotate_values_in_degrees(self):
        payload = encode_curve("rotateX", self.curve)
        assert payload.keys[0].value == pytest.approx(90.0)
        assert payload.keys[2].value == pytest.approx(180.0)

    def test_non_rotate_values_unconverted(self):
        payload = encode_curve("translateX", self.curve)
        assert payload.keys[0].value == pytest.approx(math.pi / 2)

    def test_one_record_per_key_in_host_order(self):
        payload = encode_curve("rotateX", self.curve)
        assert [k.time for k in payload.keys] == [1.0, 2.0, 0.5]

    def test_key_fields(self):
        key = encode_curve("rotateX", self.curve).keys[0]
        assert key.breakdown == 1
        assert key.tangents_locked is False
        assert key.weights_locked is True
        assert key.in_tangent_type == "linear"
        assert key.out_tangent_type == "step"
        assert (key.in_angle, key.in_weight) == (10.0, 2.0)
        assert (key.out_angle, key.out_weight) == (-20.0, 3.0)

    def test_breakdown_is_zero_or_one(self):
        payload = encode_curve("rotateX", self.curve)
        assert [k.breakdown for k in payload.keys] == [1, 0, 0]

    def test_tangents_queried_per_side(self):
        encode_curve("rotateX", self.curve)
        assert self.curve.tangent_queries == [
            (0, True), (0, False), (1, True), (1, False), (2, True), (2, False)
        ]

    def test_weights_recorded_when_unweighted(self):
        key = encode_curve("rotateX", self.curve).keys[0]
        assert key.out_weight == 3.0

    def test_empty_curve(self):
        payload = encode_curve("rotateX", MemoryAnimCurve())
        assert payload.keys == ()
