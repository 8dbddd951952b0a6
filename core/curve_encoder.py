#!/usr/bin/env python3
"""
Curve Encoder Module
Converts a host animation curve into a CurvePayload (infinity, keys, tangents)
"""

from core.anim_data import CurvePayload, InfinityInfo, KeyRecord
from core.units import convert_curve_value
from readers.base_reader import InfinityType, TangentType

# Encoded values consumed downstream; 2 is unused
INFINITY_CODES = {
    InfinityType.CONSTANT: 0,
    InfinityType.LINEAR: 1,
    InfinityType.CYCLE: 3,
    InfinityType.CYCLE_RELATIVE: 4,
}
DEFAULT_INFINITY_CODE = 5

TANGENT_TAGS = {
    TangentType.AUTO: "auto",
    TangentType.FIXED: "fixed",
    TangentType.GLOBAL: "global",
    TangentType.LINEAR: "linear",
    TangentType.FLAT: "flat",
    TangentType.SMOOTH: "smooth",
    TangentType.STEP: "step",
    TangentType.CLAMPED: "clamped",
    TangentType.PLATEAU: "plateau",
    TangentType.STEP_NEXT: "stepnext",
}
DEFAULT_TANGENT_TAG = "auto"


def infinity_to_int(infinity):
    """Encode an infinity type

    Oscillate and unrecognized values encode as 5.
    """
    try:
        return INFINITY_CODES.get(InfinityType(infinity), DEFAULT_INFINITY_CODE)
    except (ValueError, TypeError):
        return DEFAULT_INFINITY_CODE


def tangent_type_to_string(tangent_type):
    """Encode a tangent type as its tag, "auto" for unrecognized values"""
    try:
        return TANGENT_TAGS.get(TangentType(tangent_type), DEFAULT_TANGENT_TAG)
    except (ValueError, TypeError):
        return DEFAULT_TANGENT_TAG


def encode_key(attribute_name, curve, index):
    """Build the KeyRecord for one key of a curve

    In and out tangents are queried separately; angle and weight are
    recorded as the host reports them, weighted curve or not.
    """
    in_angle, in_weight = curve.get_tangent(index, True)
    out_angle, out_weight = curve.get_tangent(index, False)

    return KeyRecord(
        time=float(curve.time(index)),
        value=convert_curve_value(attribute_name, curve.value(index)),
        breakdown=1 if curve.is_breakdown(index) else 0,
        tangents_locked=bool(curve.tangents_locked(index)),
        weights_locked=bool(curve.weights_locked(index)),
        in_tangent_type=tangent_type_to_string(curve.in_tangent_type(index)),
        out_tangent_type=tangent_type_to_string(curve.out_tangent_type(index)),
        in_angle=float(in_angle),
        in_weight=float(in_weight),
        out_angle=float(out_angle),
        out_weight=float(out_weight),
    )


def encode_curve(attribute_name, curve):
    """Encode a full animation curve

    Args:
        attribute_name: Name of the driven attribute (decides unit conversion)
        curve: BaseAnimCurve bound to the attribute

    Returns:
        CurvePayload: Infinity descriptor and one KeyRecord per host key,
                      in host index order
    """
    infinity = InfinityInfo(
        pre_infinity=infinity_to_int(curve.pre_infinity),
        post_infinity=infinity_to_int(curve.post_infinity),
        weighted_tangents=bool(curve.is_weighted),
    )

    keys = tuple(encode_key(attribute_name, curve, i) for i in range(curve.num_keys))
    return CurvePayload(infinity=infinity, keys=keys)
